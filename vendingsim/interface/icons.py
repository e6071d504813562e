"""Mini README: Icon lookup for vending selections.

Each selection is drawn with ``static/icons/<selection>.svg``. Selections
without a dedicated asset fall back to ``default.svg`` so new products can be
stocked before artwork exists.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..inventory.models import Selection

ICON_DIRECTORY = Path(__file__).parent / "static" / "icons"
DEFAULT_ICON = "default.svg"


def icon_path(selection: Selection, directory: Optional[Path] = None) -> Path:
    """Return the icon file for ``selection`` or the default icon."""

    directory = directory or ICON_DIRECTORY
    candidate = directory / f"{selection.value}.svg"
    if candidate.is_file():
        return candidate
    return directory / DEFAULT_ICON
