# --- START OF FILE theme.py ---
"""Rich styles derived from the colour configuration, handed to the app explicitly."""

from dataclasses import dataclass

from rich.style import Style

from config_manager import ColorConfig


@dataclass(frozen=True)
class Theme:
    title: Style
    title_rule: Style
    normal_text: Style
    cursor: Style
    selected: Style
    instruction: Style
    border_color: str
    active_column_bg: str

    @classmethod
    def from_config(cls, colors: ColorConfig) -> "Theme":
        return cls(
            title=Style(bold=True, color=colors.title),
            title_rule=Style(color=colors.border),
            normal_text=Style(color=colors.normal_text),
            # Highlighted rows use the active column background as text colour
            cursor=Style(bold=True, color=colors.active_column_bg, bgcolor=colors.cursor),
            selected=Style(bold=True, color=colors.active_column_bg, bgcolor=colors.selected),
            instruction=Style(color=colors.instruction),
            border_color=colors.border,
            active_column_bg=colors.active_column_bg,
        )

# --- END OF FILE theme.py ---
