"""The fixed set of selectable species."""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from models.text_content import get_text

ITEM_IDS = (0, 1, 2, 3, 4, 5, 6)
ITEMS_DIR = "items"


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    image_path: Path
    alt_text: str


def item_name(item_id: int) -> str:
    """Display name for an id, falling back to the name prefix and the id."""
    names = get_text("items.names") or []
    if 0 <= item_id < len(names):
        return names[item_id]
    return f"{get_text('items.namePrefix')} {item_id}"


def build_catalog(asset_root) -> Tuple[Item, ...]:
    """Create the seven items with image paths under ``asset_root/items``."""
    root = Path(asset_root)
    prefix = get_text("items.altTextPrefix")
    return tuple(
        Item(
            id=item_id,
            name=item_name(item_id),
            image_path=root / ITEMS_DIR / f"{item_id}.png",
            alt_text=f"{prefix} {item_id}",
        )
        for item_id in ITEM_IDS
    )


def validate_item_id(item_id):
    if (
        isinstance(item_id, bool)
        or not isinstance(item_id, int)
        or item_id not in ITEM_IDS
    ):
        raise ValueError(f"Unknown item id: {item_id!r}")
    return item_id
