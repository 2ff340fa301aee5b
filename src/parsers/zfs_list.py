# --- START OF FILE parsers/zfs_list.py ---
"""
Parsers for scripted `zpool list -H` / `zfs list -H` output.

Scripted mode prints one object per line with columns separated by a single
tab, in the order requested with `-o`.
"""

import re
from datetime import datetime, timezone
from typing import Dict, List

from constants import CREATION_DATE_FORMAT, FIELD_DELIMITER

_EPOCH_RE = re.compile(r'[+-]?[0-9]+')


class ZfsListParser:
    """Parses tab-delimited output from `zpool list` and `zfs list`."""

    @staticmethod
    def split_records(raw_output: str, props: List[str]) -> List[Dict[str, str]]:
        """
        Splits scripted listing output into one dict per line, keyed by property name.

        Lines that yield fewer fields than `props` (blank trailing lines,
        truncated output) are dropped without comment. Extra trailing fields
        are ignored.
        """
        records: List[Dict[str, str]] = []
        for line in raw_output.strip().split('\n'):
            values = line.split(FIELD_DELIMITER)
            if len(values) < len(props):
                continue
            records.append(dict(zip(props, values)))
        return records

    @staticmethod
    def format_creation_date(raw_creation: str) -> str:
        """
        Formats a base-10 epoch seconds value as DD-MM-YYYY (UTC).

        Anything that doesn't parse is returned unchanged so the raw value is
        still shown to the user.
        """
        if not _EPOCH_RE.fullmatch(raw_creation or ''):
            return raw_creation
        try:
            created = datetime.fromtimestamp(int(raw_creation), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return raw_creation
        return created.strftime(CREATION_DATE_FORMAT)

# --- END OF FILE parsers/zfs_list.py ---
