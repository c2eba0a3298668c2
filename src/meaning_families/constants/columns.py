"""DataFrame column name constants."""

# Family storage columns (long format: one row per word)
FAMILY_ID = "family_id"
WORD = "word"

FAMILY_COLUMNS = [FAMILY_ID, WORD]
