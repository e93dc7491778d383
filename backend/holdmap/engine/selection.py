"""Hold selection state with lock and bounded undo/redo history."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from holdmap.models.holds import HoldConfiguration

logger = logging.getLogger(__name__)

MAX_HISTORY_SIZE = 50


class HoldSelectionManager:
    """Tracks the set of selected hold ids.

    When a configuration is given, ids it does not contain are dropped from
    every new selection. A locked manager ignores selection changes; undo
    and redo still move through history.
    """

    def __init__(
        self,
        initial_selection: Iterable[int] = (),
        configuration: HoldConfiguration | None = None,
        on_selection_change: Callable[[frozenset[int]], None] | None = None,
    ) -> None:
        self.configuration = configuration
        self.on_selection_change = on_selection_change
        self._selected: frozenset[int] = frozenset(initial_selection)
        self._locked = False
        self._history: list[frozenset[int]] = []
        self._history_index = -1

        if self._selected:
            self._save_to_history(self._selected)

    @property
    def selected_ids(self) -> frozenset[int]:
        return self._selected

    @property
    def is_locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def toggle_lock(self) -> None:
        self._locked = not self._locked

    def is_selected(self, hold_id: int) -> bool:
        return hold_id in self._selected

    def selected_count(self) -> int:
        return len(self._selected)

    def toggle_hold(self, hold_id: int) -> None:
        if self._locked:
            return
        if hold_id in self._selected:
            self.set_selection(self._selected - {hold_id})
        else:
            self.set_selection(self._selected | {hold_id})

    def select_hold(self, hold_id: int) -> None:
        if self._locked or hold_id in self._selected:
            return
        self.set_selection(self._selected | {hold_id})

    def deselect_hold(self, hold_id: int) -> None:
        if self._locked or hold_id not in self._selected:
            return
        self.set_selection(self._selected - {hold_id})

    def select_holds(self, hold_ids: Iterable[int]) -> None:
        if self._locked:
            return
        self.set_selection(self._selected | set(hold_ids))

    def deselect_holds(self, hold_ids: Iterable[int]) -> None:
        if self._locked:
            return
        self.set_selection(self._selected - set(hold_ids))

    def clear_selection(self) -> None:
        if self._locked:
            return
        self.set_selection(frozenset())

    def invert_selection(self) -> None:
        """Select every unselected hold and deselect the rest. Needs a configuration."""
        if self._locked or self.configuration is None:
            return
        self.set_selection(self.configuration.hold_ids - self._selected)

    def set_selection(self, hold_ids: Iterable[int]) -> None:
        if self._locked:
            return
        selection = frozenset(hold_ids)
        if self.configuration is not None:
            known = self.configuration.hold_ids
            dropped = selection - known
            if dropped:
                logger.debug("Ignoring unknown hold ids: %s", sorted(dropped))
            selection = selection & known

        self._selected = selection
        self._save_to_history(selection)
        self._notify()

    # -- history --

    def can_undo(self) -> bool:
        return self._history_index > 0

    def can_redo(self) -> bool:
        return self._history_index < len(self._history) - 1

    def undo(self) -> None:
        if not self.can_undo():
            return
        self._history_index -= 1
        self._selected = self._history[self._history_index]
        self._notify()

    def redo(self) -> None:
        if not self.can_redo():
            return
        self._history_index += 1
        self._selected = self._history[self._history_index]
        self._notify()

    def _save_to_history(self, selection: frozenset[int]) -> None:
        # Drop the redo branch
        del self._history[self._history_index + 1 :]
        self._history.append(selection)
        self._history_index = len(self._history) - 1

        if len(self._history) > MAX_HISTORY_SIZE:
            self._history.pop(0)
            self._history_index -= 1

    def _notify(self) -> None:
        if self.on_selection_change is not None:
            self.on_selection_change(self._selected)
