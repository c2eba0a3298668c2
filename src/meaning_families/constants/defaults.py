"""Default values for merging and processing."""

# File encoding
ENCODING_UTF8 = "utf-8"

# Smallmerge defaults. A ratio of .5 and a pithy filter of 10 work well for
# families produced by single-word expansion.
SMALLMERGE_RATIO_DEFAULT = 0.5
PITHY_FILTER_DEFAULT = 10

# Families with exactly this many words are dropped before comparison.
# Two-word families are mostly obscure near-synonym pairs.
NOISE_FAMILY_SIZE = 2

# Environment variables read at call time by MergeConfig.from_env()
ENV_SMALLMERGE_RATIO = "SMALLMERGE_RATIO"
ENV_PITHY_FILTER = "PITHY_FILTER"
ENV_DEBUG_SUBSETS = "SMALLMERGE_DEBUG_SUBSETS"
ENV_DEBUG_MERGES = "SMALLMERGE_DEBUG_MERGES"
