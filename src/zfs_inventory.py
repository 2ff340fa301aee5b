# --- START OF FILE zfs_inventory.py ---

import os
import shlex
import socket
import subprocess
from typing import Any, Dict, List, Tuple

import constants
from debug_logging import log
from models import Box, Dataset, Pool, Snapshot
from parsers.zfs_list import ZfsListParser
from paths import find_executable

# --- Find ZFS/ZPOOL Executables ---
# Fall back to the bare name so a missing binary shows up as a failed command
# (returncode -1) rather than an import error.
ZFS_CMD_PATH = find_executable("zfs") or "zfs"
ZPOOL_CMD_PATH = find_executable("zpool") or "zpool"

LOG_PREFIX = "INVENTORY"


# --- Error Classes ---
class ZfsError(Exception):
    """Base class for ZFS related errors."""
    pass

class ZfsCommandError(ZfsError):
    """Raised when a listing command the inventory cannot do without fails."""
    def __init__(self, message, command_parts=None, stderr=None, returncode=None):
        super().__init__(message)
        self.command_parts = command_parts
        self.stderr = stderr
        self.returncode = returncode

    def __str__(self):
        details = []
        if self.command_parts:
             details.append(f"Command: {shlex.join(self.command_parts)}")
        if self.returncode is not None: details.append(f"Return Code: {self.returncode}")
        if self.stderr:
             stderr_short = self.stderr.strip()
             if len(stderr_short) > 300: stderr_short = stderr_short[:300] + "..."
             details.append(f"Stderr: {stderr_short}")
        details_str = " (" + ", ".join(details) + ")" if details else ""
        return f"{super().__str__()}{details_str}"


# --- Internal Command Runner ---
def _run_command(command_parts: list[str]) -> tuple[int, str, str]:
    """
    Runs a command using subprocess and returns (returncode, stdout, stderr).

    Never raises: launch failures are reported as returncode -1 with the
    reason in stderr. No timeout is applied; the inventory is loaded once
    before the UI starts.
    """
    if not command_parts or not command_parts[0]:
        return -1, "", "Error: Invalid command parts provided to _run_command."

    cmd_str_safe = shlex.join(command_parts)
    log(LOG_PREFIX, f"Executing: {cmd_str_safe}", "DEBUG")

    try:
        process = subprocess.run(
            command_parts,
            stdout=subprocess.PIPE, stderr=subprocess.PIPE,
            text=False, # Read bytes
            check=False, # Don't raise exception on non-zero exit
        )
    except FileNotFoundError:
        return -1, "", f"Error: Command not found: '{command_parts[0]}'."
    except PermissionError:
        return -1, "", f"Error: Permission denied executing '{command_parts[0]}'."
    except OSError as e:
        return -1, "", f"Error running command {cmd_str_safe}: {e}"

    stdout = process.stdout.decode('utf-8', errors='replace') if process.stdout else ""
    stderr = process.stderr.decode('utf-8', errors='replace') if process.stderr else ""
    if process.returncode != 0:
        log(LOG_PREFIX, f"Command failed (ret={process.returncode}) for: {cmd_str_safe}", "DEBUG")
    return process.returncode, stdout, stderr


# --- Command Builder Base Class ---
class CommandBuilder:
    def __init__(self, base_command: str):
        if not base_command:
            raise ValueError("Base command cannot be empty")
        self._parts: List[str] = [base_command]

    def _add_option(self, flag: str, value: str):
        self._parts.extend([flag, value])
        return self

    def _add_flag(self, flag: str):
        self._parts.append(flag)
        return self

    def _add_args(self, *args: str):
        self._parts.extend(args)
        return self

    def build(self) -> List[str]:
        return self._parts

    def run(self) -> Tuple[int, str, str]:
        """Builds and runs the command using _run_command."""
        return _run_command(self.build())

# --- ZFS Command Builder ---
class ZfsCommandBuilder(CommandBuilder):
    def __init__(self, action: str):
        super().__init__(ZFS_CMD_PATH)
        self._add_args(action)

    def recursive(self): return self._add_flag('-r')
    def depth(self, levels: int): return self._add_option('-d', str(levels))
    def parsable(self): return self._add_flag('-p')
    def script(self): return self._add_flag('-H') # No header, tab separated
    def type(self, types: str): return self._add_option('-t', types) # e.g., "filesystem,volume"
    def output_props(self, props: List[str]): return self._add_option('-o', ','.join(props))
    def target(self, name: str): return self._add_args(name)

# --- ZPOOL Command Builder ---
class ZpoolCommandBuilder(CommandBuilder):
    def __init__(self, action: str):
        super().__init__(ZPOOL_CMD_PATH)
        self._add_args(action)

    def parsable(self): return self._add_flag('-p')
    def script(self): return self._add_flag('-H') # No header, tab separated
    def output_props(self, props: List[str]): return self._add_option('-o', ','.join(props))


# --- Listing Functions ---
def list_pools() -> List[Dict[str, Any]]:
    builder = ZpoolCommandBuilder('list').script().parsable().output_props(constants.ZPOOL_LIST_PROPS)
    retcode, stdout, stderr = builder.run()
    if retcode != 0: raise ZfsCommandError("Failed to list pools.", builder.build(), stderr, retcode)
    return ZfsListParser.split_records(stdout, constants.ZPOOL_LIST_PROPS)

def list_datasets(pool_name: str) -> List[Dict[str, Any]]:
    builder = (ZfsCommandBuilder('list').script().parsable().recursive()
               .type('filesystem,volume').output_props(constants.ZFS_DATASET_LIST_PROPS).target(pool_name))
    retcode, stdout, stderr = builder.run()
    if retcode != 0: raise ZfsCommandError(f"Failed to list datasets for pool '{pool_name}'.", builder.build(), stderr, retcode)
    return ZfsListParser.split_records(stdout, constants.ZFS_DATASET_LIST_PROPS)

def list_snapshots(dataset_name: str) -> List[Dict[str, Any]]:
    """Lists the snapshots taken of one dataset. A failure means no snapshots, not an error."""
    builder = (ZfsCommandBuilder('list').script().parsable().depth(1)
               .type('snapshot').output_props(constants.ZFS_SNAPSHOT_LIST_PROPS).target(dataset_name))
    retcode, stdout, stderr = builder.run()
    if retcode != 0:
        log(LOG_PREFIX, f"No snapshots listed for '{dataset_name}': {stderr.strip()}", "DEBUG")
        return []
    return ZfsListParser.split_records(stdout, constants.ZFS_SNAPSHOT_LIST_PROPS)


# --- Tree Assembly ---
def build_snapshot(record: Dict[str, Any]) -> Snapshot:
    return Snapshot(
        name=record['name'],
        size=record['used'],
        date=ZfsListParser.format_creation_date(record['creation']),
    )

def build_dataset(record: Dict[str, Any]) -> Dataset:
    name = record['name']
    return Dataset(
        name=name,
        used=record['used'],
        available=record['avail'],
        mountpoint=record['mountpoint'],
        snapshots=[build_snapshot(snap) for snap in list_snapshots(name)],
    )

def build_pool(record: Dict[str, Any]) -> Pool:
    """Loads a pool with all of its datasets and snapshots and fills in the counts."""
    name = record['name']
    datasets = [build_dataset(ds) for ds in list_datasets(name)]
    return Pool(
        name=name,
        health=record['health'],
        num_datasets=len(datasets),
        num_snapshots=sum(len(ds.snapshots) for ds in datasets),
        datasets=datasets,
    )

def load_local_box() -> Box:
    """
    Builds the inventory tree of the local host.

    Raises:
        ZfsCommandError: if pools, or the datasets of any pool, cannot be listed.
    """
    pools = [build_pool(record) for record in list_pools()]
    box = Box(
        name=constants.LOCAL_BOX_NAME,
        hostname=socket.gethostname(),
        user=os.environ.get("USER", ""),
        pools=pools,
    )
    log(LOG_PREFIX, f"Loaded {len(pools)} pool(s) from {box.hostname}", "DEBUG")
    return box

# --- END OF FILE zfs_inventory.py ---
