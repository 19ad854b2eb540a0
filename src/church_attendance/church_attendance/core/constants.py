"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MEMBER_CODE_PREFIX = "MBR-"
MAX_SEARCH_LENGTH = 200
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 200
PHONE_PATTERN = r"^[\d\s\-+()]{6,20}$"

DEFAULT_LEDGER_PIN = "1234"
DEFAULT_POOL_SIZE = 10
