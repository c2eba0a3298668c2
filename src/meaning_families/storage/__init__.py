"""Storage backends for meaning family collections."""

from .backends import (
    CSVFamilyBackend,
    FamilyBackend,
    JsonlFamilyBackend,
    ParquetFamilyBackend,
    TextFamilyBackend,
    families_to_frame,
    frame_to_families,
)
from .loader import get_backend, load_families, save_families

__all__ = [
    "FamilyBackend",
    "TextFamilyBackend",
    "JsonlFamilyBackend",
    "CSVFamilyBackend",
    "ParquetFamilyBackend",
    "families_to_frame",
    "frame_to_families",
    "get_backend",
    "load_families",
    "save_families",
]
