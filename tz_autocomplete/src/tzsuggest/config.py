import os

TOP_K: int = int(os.environ.get("TZSUGGEST_TOP_K", "5"))

# Platform cap on the size of an autocomplete suggestion list
MAX_CHOICES: int = int(os.environ.get("TZSUGGEST_MAX_CHOICES", "25"))

DEFAULT_TIMEZONE: str = os.environ.get("TZSUGGEST_DEFAULT_TIMEZONE", "UTC")

# Message flag: only the invoking user sees the response
EPHEMERAL_FLAG: int = 64

# Jaro-Winkler prefix weight (standard value)
PREFIX_WEIGHT: float = 0.1
