"""Application-wide constants.

These are fixed values that don't change between environments.
For configurable values, see config.py Settings.
"""

# ─────────────────────────────────────────────────────────────
# Altman Z-Score (original manufacturing formula)
# ─────────────────────────────────────────────────────────────
ALTMAN_Z_SAFE_THRESHOLD = 2.99
ALTMAN_Z_DISTRESS_THRESHOLD = 1.81

# ─────────────────────────────────────────────────────────────
# Rule of 40
# ─────────────────────────────────────────────────────────────
RULE_OF_40_THRESHOLD = 40.0

# ─────────────────────────────────────────────────────────────
# Ticker search
# ─────────────────────────────────────────────────────────────
DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 50
DEFAULT_EXCHANGE = "US"
DEFAULT_ASSET_TYPE = "stock"

# ─────────────────────────────────────────────────────────────
# Sector screen
# ─────────────────────────────────────────────────────────────
DEFAULT_SPARKLINE_POINTS = 50

API_VERSION = "0.1.0"
