# --- START OF FILE view_projector.py ---
"""
Derives what the browser shows from the inventory and the navigation state.

Nothing in here mutates the engine or the tree; `project()` is called once
per frame by the renderer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import constants
from models import Summary
from navigation import Level, LEVEL_COUNT, NavigationEngine, siblings_at


@dataclass
class ColumnView:
    title: str
    items: List[str] = field(default_factory=list)
    marked_index: Optional[int] = None  # committed row (parent) or cursor row (current)
    active: bool = False


@dataclass
class DetailView:
    title: str = constants.DETAIL_TITLE
    fields: Summary = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(f"{label}: {value}\n" for label, value in self.fields)


@dataclass
class Frame:
    parent: ColumnView
    current: ColumnView
    next: ColumnView
    detail: DetailView
    active_level: Level


def _title(level: int) -> str:
    if 0 <= level < LEVEL_COUNT:
        return constants.LEVEL_TITLES[level]
    return ""


def parent_view(engine: NavigationEngine) -> ColumnView:
    level = engine.active_level - 1
    if level < Level.BOX:
        return ColumnView(title="")
    items = engine.siblings(Level(level))
    return ColumnView(
        title=_title(level),
        items=[item.name for item in items],
        marked_index=engine.committed(Level(level)),
    )


def current_view(engine: NavigationEngine) -> ColumnView:
    level = engine.active_level
    return ColumnView(
        title=_title(level),
        items=[item.name for item in engine.siblings(level)],
        marked_index=engine.cursor(level),
        active=True,
    )


def next_view(engine: NavigationEngine) -> ColumnView:
    """Children of the row under the cursor, so the user can look before drilling in."""
    level = engine.active_level + 1
    if level >= LEVEL_COUNT:
        return ColumnView(title="")
    items = siblings_at(engine.roots, engine.cursor_path(), Level(level))
    return ColumnView(title=_title(level), items=[item.name for item in items])


def detail_view(engine: NavigationEngine) -> DetailView:
    entity = engine.entity_under_cursor()
    if entity is None:
        return DetailView()
    return DetailView(fields=entity.summary())


def project(engine: NavigationEngine) -> Frame:
    return Frame(
        parent=parent_view(engine),
        current=current_view(engine),
        next=next_view(engine),
        detail=detail_view(engine),
        active_level=engine.active_level,
    )

# --- END OF FILE view_projector.py ---
