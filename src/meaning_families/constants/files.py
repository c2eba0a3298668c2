"""File extension constants."""

EXT_TXT = ".txt"
EXT_JSONL = ".jsonl"
EXT_CSV = ".csv"
EXT_PARQUET = ".parquet"
