# --- START OF FILE models.py ---

from dataclasses import dataclass, field
from typing import List, Tuple

# A detail summary is an ordered list of (label, value) pairs
Summary = List[Tuple[str, str]]


@dataclass
class ZfsObject:
    name: str

    @property
    def children(self) -> list:
        """Child entities one level down, in listing order. Leaves have none."""
        return []

    def summary(self) -> Summary:
        return [("Name", self.name)]


@dataclass
class Snapshot(ZfsObject):
    size: str = ""  # display string, as reported by zfs
    date: str = ""  # DD-MM-YYYY, or the raw creation value if it wasn't an epoch

    def summary(self) -> Summary:
        return [("Name", self.name), ("Size", self.size), ("Date", self.date)]


@dataclass
class Dataset(ZfsObject):
    used: str = ""
    available: str = ""
    mountpoint: str = ""

    # Exclude children from comparison
    snapshots: List[Snapshot] = field(default_factory=list, compare=False, repr=False)

    @property
    def children(self) -> List[Snapshot]:
        return self.snapshots

    def summary(self) -> Summary:
        return [
            ("Name", self.name),
            ("Used", self.used),
            ("Available", self.available),
            ("Mountpoint", self.mountpoint),
        ]


@dataclass
class Pool(ZfsObject):
    health: str = "UNKNOWN"
    # Aggregates computed once by the loader
    num_datasets: int = 0
    num_snapshots: int = 0

    datasets: List[Dataset] = field(default_factory=list, compare=False, repr=False)

    @property
    def children(self) -> List[Dataset]:
        return self.datasets

    def summary(self) -> Summary:
        return [
            ("Name", self.name),
            ("Health", self.health),
            ("Datasets", str(self.num_datasets)),
            ("Snapshots", str(self.num_snapshots)),
        ]


@dataclass
class Box(ZfsObject):
    """Inventory root: one inspected host."""
    hostname: str = ""
    user: str = ""

    pools: List[Pool] = field(default_factory=list, compare=False, repr=False)

    @property
    def children(self) -> List[Pool]:
        return self.pools

    def summary(self) -> Summary:
        return [("Name", self.name), ("Hostname", self.hostname), ("User", self.user)]

# --- END OF FILE models.py ---
