"""Core constants: cache keys, table names and shared literal values."""

# The availability snapshot is the only cached value.
CACHE_KEY_ELEMENTS = "elements"

TABLE_USERS = "users"
TABLE_ELEMENTS = "elements"

# Password rules for self-service password changes
PASSWORD_MIN_LENGTH = 12
PASSWORD_MAX_LENGTH = 64

MESSAGE_WRONG_LOGIN = "Unknown user or wrong password"
