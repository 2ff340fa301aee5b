"""Shared fixtures: an in-memory inventory and a fake zpool/zfs command runner."""

import os

import pytest

import zfs_inventory
from config_manager import ColorConfig
from models import Box, Dataset, Pool, Snapshot
from theme import Theme


class FakeZfs:
    """
    Stands in for zfs_inventory._run_command.

    Outputs are keyed by the command target (pool or dataset name). A missing
    key, or None, makes that command fail the way zfs does.
    """

    def __init__(self, pools=None, datasets=None, snapshots=None):
        self.pools = pools
        self.datasets = datasets or {}
        self.snapshots = snapshots or {}
        self.calls = []

    def __call__(self, command_parts):
        self.calls.append(list(command_parts))
        target = command_parts[-1]
        if os.path.basename(command_parts[0]) == 'zpool':
            output = self.pools
        elif 'snapshot' in command_parts:
            output = self.snapshots.get(target)
        else:
            output = self.datasets.get(target)
        if output is None:
            return 1, "", f"cannot open '{target}': dataset does not exist\n"
        return 0, output, ""


@pytest.fixture
def fake_zfs(monkeypatch):
    def install(**outputs) -> FakeZfs:
        fake = FakeZfs(**outputs)
        monkeypatch.setattr(zfs_inventory, "_run_command", fake)
        return fake
    return install


def _pool(name, health, datasets):
    return Pool(
        name=name,
        health=health,
        num_datasets=len(datasets),
        num_snapshots=sum(len(ds.snapshots) for ds in datasets),
        datasets=datasets,
    )


@pytest.fixture
def sample_box() -> Box:
    """
    Local ZBox
      tank     (ONLINE)   tank [2 snaps], tank/data [3 snaps], tank/empty [0 snaps]
      scratch  (ONLINE)   no datasets
      backup   (DEGRADED) backup [1 snap]
    """
    tank = _pool("tank", "ONLINE", [
        Dataset("tank", used="4096", available="1000000", mountpoint="/tank", snapshots=[
            Snapshot("tank@first", size="0", date="01-01-2024"),
            Snapshot("tank@second", size="512", date="02-01-2024"),
        ]),
        Dataset("tank/data", used="2048", available="1000000", mountpoint="/tank/data", snapshots=[
            Snapshot("tank/data@a", size="1", date="01-02-2024"),
            Snapshot("tank/data@b", size="2", date="02-02-2024"),
            Snapshot("tank/data@c", size="3", date="03-02-2024"),
        ]),
        Dataset("tank/empty", used="96", available="1000000", mountpoint="/tank/empty"),
    ])
    scratch = _pool("scratch", "ONLINE", [])
    backup = _pool("backup", "DEGRADED", [
        Dataset("backup", used="10", available="20", mountpoint="none", snapshots=[
            Snapshot("backup@nightly", size="7", date="15-03-2024"),
        ]),
    ])
    return Box("Local ZBox", hostname="nas01", user="root", pools=[tank, scratch, backup])


@pytest.fixture
def color_config() -> ColorConfig:
    return ColorConfig(
        title="#fafafa",
        normal_text="#dddddd",
        cursor="#7d56f4",
        selected="#04b575",
        border="#874bfd",
        instruction="#626262",
        active_column_bg="#1e1e2e",
    )


@pytest.fixture
def style_theme(color_config) -> Theme:
    return Theme.from_config(color_config)
