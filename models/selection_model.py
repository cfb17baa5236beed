"""Model for the current species selection."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from base.observable import Observable
from models.item_catalog import validate_item_id

MAX_SELECTIONS = 3


class ToggleResult(Enum):
    ADDED = "added"
    REMOVED = "removed"
    REJECTED = "rejected"


class SelectionState(Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Selection:
    """Immutable, insertion-ordered set of at most three item ids."""

    ids: Tuple[int, ...] = ()

    def __len__(self):
        return len(self.ids)

    def __contains__(self, item_id):
        return item_id in self.ids

    @property
    def state(self):
        if not self.ids:
            return SelectionState.EMPTY
        if len(self.ids) < MAX_SELECTIONS:
            return SelectionState.PARTIAL
        return SelectionState.COMPLETE

    @property
    def is_complete(self):
        return len(self.ids) == MAX_SELECTIONS

    def sorted_ids(self):
        return tuple(sorted(self.ids))

    def toggle(self, item_id):
        """Return ``(new_selection, result)`` for toggling ``item_id``.

        A present id is removed; an absent id is added while there is room.
        When the selection is already full the same selection is returned
        with ``ToggleResult.REJECTED``.
        """
        validate_item_id(item_id)
        if item_id in self.ids:
            remaining = tuple(i for i in self.ids if i != item_id)
            return Selection(remaining), ToggleResult.REMOVED
        if len(self.ids) >= MAX_SELECTIONS:
            return self, ToggleResult.REJECTED
        return Selection(self.ids + (item_id,)), ToggleResult.ADDED

    def cleared(self):
        return Selection()


class SelectionModel(Observable):
    """Owns the current Selection and notifies observers when it changes.

    Events:
        selection_changed: data is the new Selection
        selection_limit_reached: data is the rejected item id
    """

    def __init__(self, selection=None):
        super().__init__()
        self._selection = selection if selection is not None else Selection()

    @property
    def selection(self):
        return self._selection

    @property
    def selected_ids(self):
        return self._selection.ids

    @property
    def state(self):
        return self._selection.state

    def toggle(self, item_id):
        """Toggle an item and return the ToggleResult."""
        new_selection, result = self._selection.toggle(item_id)
        if result is ToggleResult.REJECTED:
            self.notify_observers("selection_limit_reached", item_id)
            return result
        self._selection = new_selection
        self.notify_observers("selection_changed", new_selection)
        return result

    def clear(self):
        self._selection = self._selection.cleared()
        self.notify_observers("selection_changed", self._selection)
        return self._selection
