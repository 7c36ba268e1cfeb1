"""Color palette and Rich theme for classperf output."""

from __future__ import annotations

from dataclasses import dataclass

from rich.theme import Theme


@dataclass(frozen=True)
class ColorPalette:
    """Immutable color palette for the classperf CLI.

    Chosen for dark terminal backgrounds.
    """

    primary: str = "#7AA2F7"
    success: str = "#A6E3A1"
    warning: str = "#F9E2AF"
    error: str = "#F38BA8"
    text: str = "#CDD6F4"
    text_muted: str = "#9399B2"
    border: str = "#585B70"


PALETTE = ColorPalette()

CP_THEME = Theme(
    {
        "cp.header": f"bold {PALETTE.primary}",
        "cp.label": f"bold {PALETTE.text}",
        "cp.muted": f"{PALETTE.text_muted}",
        "cp.fail": f"bold {PALETTE.error}",
        "cp.warn": f"bold {PALETTE.warning}",
        "cp.ok": f"{PALETTE.success}",
        "cp.border": f"{PALETTE.border}",
    }
)

PANEL_PADDING: tuple[int, int] = (1, 2)
