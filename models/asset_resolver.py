"""Maps a completed selection to its diagram image."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from models.selection_model import MAX_SELECTIONS
from models.text_content import get_text

logger = logging.getLogger(__name__)

DIAGRAMS_DIR = "diagrams"


class ResolutionStatus(Enum):
    PLACEHOLDER = "placeholder"
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    status: ResolutionStatus
    key: Optional[str] = None
    path: Optional[Path] = None
    message: Optional[str] = None
    alt_text: Optional[str] = None


def asset_key(ids):
    """Sort the ids ascending and concatenate their digits.

    ``asset_key([4, 0, 2])`` returns ``"024"``.
    """
    ids = list(ids)
    if len(ids) != MAX_SELECTIONS:
        raise ValueError(
            f"Asset key needs exactly {MAX_SELECTIONS} ids, got {len(ids)}"
        )
    return "".join(str(i) for i in sorted(ids))


class AssetResolver:
    """Resolves selections against the diagrams folder of an asset root."""

    def __init__(self, asset_root):
        self.asset_root = Path(asset_root)

    def diagram_path(self, key):
        return self.asset_root / DIAGRAMS_DIR / f"{key}.png"

    def placeholder(self):
        return Resolution(
            ResolutionStatus.PLACEHOLDER,
            message=get_text("sections.diagram.placeholder.message"),
        )

    def not_found(self, key=None, path=None):
        return Resolution(
            ResolutionStatus.NOT_FOUND,
            key=key,
            path=path,
            message=get_text("sections.diagram.errorMessage"),
        )

    def resolve(self, selection):
        """Return the Resolution for a Selection.

        Anything other than a complete selection resolves to the placeholder.
        """
        if not selection.is_complete:
            return self.placeholder()

        key = asset_key(selection.ids)
        path = self.diagram_path(key)
        if not path.is_file():
            logger.info("No diagram for key %s at %s", key, path)
            return self.not_found(key, path)

        sorted_ids = ", ".join(str(i) for i in selection.sorted_ids())
        return Resolution(
            ResolutionStatus.FOUND,
            key=key,
            path=path,
            alt_text=f"{get_text('diagrams.altTextPrefix')} {sorted_ids}",
        )
