# --- START OF FILE navigation.py ---
"""
Selection state machine for the four-level inventory browser.

Each level keeps two indices:

* ``cursor`` - the row currently highlighted at that level, moved by up/down.
* ``committed`` - the row that was highlighted when the user last drilled
  into the next level. Everything below a level is resolved through these.

Entering a level always resets its cursor to the first row; leaving a level
puts the parent's cursor back on its committed row.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence

from models import Box, ZfsObject


class Level(IntEnum):
    BOX = 0
    POOL = 1
    DATASET = 2
    SNAPSHOT = 3

LEVEL_COUNT = len(Level)


class NavEvent(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    DRILL_IN = "drill_in"
    DRILL_OUT = "drill_out"
    QUIT = "quit"


@dataclass
class LevelState:
    cursor: int = 0
    committed: int = 0


def siblings_at(roots: Sequence[Box], path: Sequence[int], level: Level) -> List[ZfsObject]:
    """
    Returns the entities shown at `level`, reached by following `path`.

    `path[i]` is the row chosen at level i; only the first `level` entries are
    used. An index that does not exist in its list makes the result empty.
    """
    items: Sequence[ZfsObject] = roots
    for depth in range(level):
        index = path[depth]
        if not 0 <= index < len(items):
            return []
        items = items[index].children
    return list(items)


class NavigationEngine:
    """Owns cursor/committed indices per level and the active level."""

    def __init__(self, roots: Sequence[Box]):
        self.roots = list(roots)
        self.levels: List[LevelState] = [LevelState() for _ in range(LEVEL_COUNT)]
        self.active_level: Level = Level.BOX
        self.finished = False

    # --- Read access ---

    def cursor(self, level: Level) -> int:
        return self.levels[level].cursor

    def committed(self, level: Level) -> int:
        return self.levels[level].committed

    def committed_path(self) -> List[int]:
        return [state.committed for state in self.levels]

    def cursor_path(self) -> List[int]:
        """Committed rows above the active level, then the cursor row at it."""
        path = self.committed_path()
        path[self.active_level] = self.cursor(self.active_level)
        return path

    def siblings(self, level: Level) -> List[ZfsObject]:
        return siblings_at(self.roots, self.committed_path(), level)

    def sibling_count(self, level: Level) -> int:
        return len(self.siblings(level))

    def entity_under_cursor(self) -> Optional[ZfsObject]:
        items = self.siblings(self.active_level)
        index = self.cursor(self.active_level)
        if 0 <= index < len(items):
            return items[index]
        return None

    # --- Transitions ---
    # Each returns True if the state changed, False for a no-op.

    def move_up(self) -> bool:
        state = self.levels[self.active_level]
        if state.cursor <= 0:
            return False
        state.cursor -= 1
        return True

    def move_down(self) -> bool:
        state = self.levels[self.active_level]
        if state.cursor >= self.sibling_count(self.active_level) - 1:
            return False
        state.cursor += 1
        return True

    def drill_in(self) -> bool:
        if self.active_level >= Level.SNAPSHOT or self.sibling_count(self.active_level) == 0:
            return False
        leaving = self.levels[self.active_level]
        leaving.committed = leaving.cursor
        self.active_level = Level(self.active_level + 1)
        self.levels[self.active_level].cursor = 0
        return True

    def drill_out(self) -> bool:
        if self.active_level <= Level.BOX:
            return False
        self.active_level = Level(self.active_level - 1)
        state = self.levels[self.active_level]
        state.cursor = state.committed
        return True

    def quit(self) -> bool:
        self.finished = True
        return True

    def dispatch(self, event: NavEvent) -> bool:
        handlers = {
            NavEvent.MOVE_UP: self.move_up,
            NavEvent.MOVE_DOWN: self.move_down,
            NavEvent.DRILL_IN: self.drill_in,
            NavEvent.DRILL_OUT: self.drill_out,
            NavEvent.QUIT: self.quit,
        }
        return handlers[event]()

# --- END OF FILE navigation.py ---
