# --- START OF FILE src/version.py ---
"""
Single source of truth for ZfNav version and app information.
All other components should import from this module.
"""

__version__ = "0.3.0"
__app_name__ = "ZfNav"
__app_description__ = "A terminal browser for ZFS pools, datasets and snapshots."
__license__ = "GNU General Public License v3.0"
__copyright__ = "© 2024-2025 ZfNav"

