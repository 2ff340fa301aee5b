"""Parsers for zpool/zfs command output."""
