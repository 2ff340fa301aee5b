# --- START OF FILE constants.py ---

"""
Central location for constants used across the ZfNav modules.
"""

# --- ZFS/ZPOOL Property Lists ---
# Used for 'zpool list -o ...'
ZPOOL_LIST_PROPS = ['name', 'health']

# Used for 'zfs list -t filesystem,volume -o ...' (one pool at a time)
ZFS_DATASET_LIST_PROPS = ['name', 'used', 'avail', 'mountpoint']

# Used for 'zfs list -t snapshot -o ...' (one dataset at a time)
ZFS_SNAPSHOT_LIST_PROPS = ['name', 'used', 'creation']

# Scripted (-H) output separates columns with exactly one tab
FIELD_DELIMITER = '\t'

# Snapshot creation dates are shown as DD-MM-YYYY
CREATION_DATE_FORMAT = '%d-%m-%Y'

# --- Inventory defaults ---
LOCAL_BOX_NAME = "Local ZBox"

# --- UI ---
LEVEL_TITLES = ["ZBox", "ZPools", "Datasets", "Snapshots"]
DETAIL_TITLE = "Details"
EMPTY_COLUMN_TEXT = "No items"
MARKER_PREFIX = "➤ "
PLAIN_PREFIX = "  "
TITLE_RULE_CHAR = "─"
INSTRUCTIONS = "Navigate with h (left), j (down), k (up), l (right). Press 'q' to quit."

# --- Colour configuration ---
CONFIG_FILE_NAME = "config.toml"
CONFIG_COLORS_TABLE = "colors"
# Keys every [colors] table must define
COLOR_KEYS = [
    'title', 'normal_text', 'cursor', 'selected', 'border', 'instruction', 'active_column_bg'
]

# --- END OF FILE constants.py ---
