# Path configuration module for ZfNav
# This module centralizes all path logic for the application:
# locating the zfs/zpool executables and the colour configuration file.

import os
import platform
import shutil
from pathlib import Path
from typing import Optional

from constants import CONFIG_FILE_NAME

# User configuration paths (per-user, in home directory)
USER_CONFIG_DIR = Path.home() / ".config" / "ZfNav"
USER_CONFIG_FILE_PATH = str(USER_CONFIG_DIR / CONFIG_FILE_NAME)


def get_config_search_paths(explicit_path: Optional[str] = None) -> list[str]:
    """Return the configuration file candidates in lookup order.

    An explicit path (from --config) is the only candidate when given, so a
    typo never silently falls through to another file.
    """
    if explicit_path:
        return [explicit_path]
    return [os.path.join(os.getcwd(), CONFIG_FILE_NAME), USER_CONFIG_FILE_PATH]


def find_config_file(explicit_path: Optional[str] = None) -> Optional[str]:
    """Return the first existing configuration file, or None."""
    for candidate in get_config_search_paths(explicit_path):
        if os.path.isfile(candidate):
            return candidate
    return None


def find_executable(name: str) -> str | None:
    """Find an executable by name.

    First tries shutil.which which searches PATH, then falls back to searching
    common platform-specific directories.

    Args:
        name: Executable base name to find

    Returns:
        Absolute path if found, otherwise None
    """
    # 1) Check PATH via shutil.which
    path = shutil.which(name)
    if path:
        return path

    # 2) Platform-specific common locations (zfs/zpool often live in sbin, outside a user's PATH)
    system = platform.system()
    if system == 'Linux':
        base_paths = ['/usr/sbin', '/sbin', '/usr/bin', '/bin', '/usr/local/sbin', '/usr/local/bin']
    elif system == 'Darwin':
        base_paths = ['/usr/local/bin', '/usr/local/sbin', '/opt/homebrew/bin', '/opt/homebrew/sbin', '/usr/bin', '/bin', '/sbin']
    elif 'BSD' in system:
        base_paths = ['/sbin', '/usr/sbin', '/usr/local/sbin', '/usr/local/bin', '/usr/bin', '/bin']
    else:
        base_paths = ['/usr/local/bin', '/usr/local/sbin', '/usr/bin', '/bin', '/sbin', '/usr/sbin']

    for p in base_paths:
        candidate = os.path.join(p, name)
        if os.path.exists(candidate) and os.access(candidate, os.X_OK):
            return candidate # The first match is returned so earlier entries override later ones
    return None


__all__ = [
    'USER_CONFIG_DIR', 'USER_CONFIG_FILE_PATH',
    'get_config_search_paths', 'find_config_file', 'find_executable'
]
