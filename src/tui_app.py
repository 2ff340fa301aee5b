# --- START OF FILE tui_app.py ---
"""
Textual front end: turns key presses into navigation events and draws the
projected frame as three list columns plus a detail pane.
"""

from typing import Optional

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Static

import constants
from navigation import NavEvent, NavigationEngine
from theme import Theme
from version import __app_name__
from view_projector import ColumnView, DetailView, Frame, project


class ZfNavApp(App):
    """Miller-column browser over a loaded ZFS inventory."""

    TITLE = __app_name__

    # Columns take half the width between them, the detail pane the other half
    CSS = """
    #columns {
        height: 1fr;
    }
    .column {
        width: 1fr;
        min-width: 20;
        height: 100%;
        padding: 0 1;
    }
    #detail {
        width: 3fr;
        height: 100%;
        padding: 0 1;
    }
    #instructions {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("k,up", "move_up", "Up", show=False),
        Binding("j,down", "move_down", "Down", show=False),
        Binding("l,right,enter", "drill_in", "Open", show=False),
        Binding("h,left", "drill_out", "Back", show=False),
        Binding("q", "quit_browser", "Quit", show=False),
        Binding("ctrl+c", "quit_browser", "Quit", show=False, priority=True),
    ]

    def __init__(self, engine: NavigationEngine, style_theme: Theme):
        super().__init__()
        self.engine = engine
        self.style_theme = style_theme
        self.last_frame: Optional[Frame] = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="columns"):
            yield Static(id="parent-column", classes="column")
            yield Static(id="current-column", classes="column")
            yield Static(id="next-column", classes="column")
            yield Static(id="detail")
        yield Static(Text(constants.INSTRUCTIONS, style=self.style_theme.instruction), id="instructions")

    def on_mount(self) -> None:
        for widget in self.query("#columns > Static"):
            widget.styles.border = ("solid", self.style_theme.border_color)
        self.query_one("#current-column", Static).styles.background = self.style_theme.active_column_bg
        self.refresh_view()

    # --- Actions ---

    def _navigate(self, event: NavEvent) -> None:
        if self.engine.dispatch(event):
            self.refresh_view()

    def action_move_up(self) -> None:
        self._navigate(NavEvent.MOVE_UP)

    def action_move_down(self) -> None:
        self._navigate(NavEvent.MOVE_DOWN)

    def action_drill_in(self) -> None:
        self._navigate(NavEvent.DRILL_IN)

    def action_drill_out(self) -> None:
        self._navigate(NavEvent.DRILL_OUT)

    def action_quit_browser(self) -> None:
        self.engine.dispatch(NavEvent.QUIT)
        self.exit()

    # --- Rendering ---

    def refresh_view(self) -> None:
        frame = project(self.engine)
        self.last_frame = frame
        theme = self.style_theme
        self.query_one("#parent-column", Static).update(self._render_column(frame.parent, theme.selected))
        self.query_one("#current-column", Static).update(self._render_column(frame.current, theme.cursor))
        self.query_one("#next-column", Static).update(self._render_column(frame.next, None))
        self.query_one("#detail", Static).update(self._render_detail(frame.detail))

    def _render_title(self, title: str) -> Text:
        """Padded bold title over a rule in the border colour."""
        padded = f" {title} "
        text = Text()
        text.append(padded, style=self.style_theme.title)
        text.append("\n")
        text.append(constants.TITLE_RULE_CHAR * len(padded), style=self.style_theme.title_rule)
        text.append("\n")
        return text

    def _render_column(self, column: ColumnView, marked_style: Optional[Style]) -> Text:
        theme = self.style_theme
        text = self._render_title(column.title)
        if not column.items:
            text.append(constants.EMPTY_COLUMN_TEXT, style=theme.normal_text)
            return text
        for index, name in enumerate(column.items):
            marked = marked_style is not None and index == column.marked_index
            text.append(constants.MARKER_PREFIX if marked else constants.PLAIN_PREFIX)
            text.append(name, style=marked_style if marked else theme.normal_text)
            text.append("\n")
        return text

    def _render_detail(self, detail: DetailView) -> Text:
        text = self._render_title(detail.title)
        text.append(detail.text, style=self.style_theme.normal_text)
        return text

# --- END OF FILE tui_app.py ---
