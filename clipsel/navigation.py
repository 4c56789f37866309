"""Selection and scrolling in the clipboard history list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from clipsel.items import rowid_of_line


@dataclass
class ListCursor:
    """The selected entry and the first visible row of a list of ``count`` entries."""

    count: int = 0
    selected: Optional[int] = None
    scroll_offset: int = 0

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must not be negative: {self.count}")
        if self.scroll_offset < 0:
            raise ValueError(f"scroll_offset must not be negative: {self.scroll_offset}")
        if self.selected is None and self.count > 0:
            self.selected = 0

    def _keep_visible(self, max_visible: int, prefer_down: bool) -> None:
        if self.selected is None:
            return
        rows = max(max_visible, 1)
        below = self.selected >= self.scroll_offset + rows
        above = self.selected < self.scroll_offset
        if prefer_down:
            if below:
                self.scroll_offset = max(self.selected - (rows - 1), 0)
            elif above:
                self.scroll_offset = self.selected
        else:
            if above:
                self.scroll_offset = self.selected
            elif below:
                self.scroll_offset = max(self.selected - (rows - 1), 0)

    def move_down(self, hard_stop: bool, max_visible: int) -> None:
        """Select the next entry, wrapping to the first unless ``hard_stop``."""
        if self.selected is None or self.count == 0:
            return
        if self.selected < self.count - 1:
            self.selected += 1
        elif not hard_stop:
            self.selected = 0
        self._keep_visible(max_visible, prefer_down=True)

    def move_up(self, hard_stop: bool, max_visible: int) -> None:
        """Select the previous entry, wrapping to the last unless ``hard_stop``."""
        if self.selected is None or self.count == 0:
            return
        if self.selected > 0:
            self.selected -= 1
        elif not hard_stop:
            self.selected = self.count - 1
        self._keep_visible(max_visible, prefer_down=False)

    def jump_first(self) -> None:
        """Select the first entry and scroll to the top."""
        if self.count:
            self.selected = 0
            self.scroll_offset = 0

    def jump_last(self, max_visible: int) -> None:
        """Select the last entry and scroll so that it is shown."""
        if not self.count:
            return
        self.selected = self.count - 1
        if max_visible > 0 and self.count > max_visible:
            self.scroll_offset = self.count - max_visible
        else:
            self.scroll_offset = 0

    def scroll_up(self) -> bool:
        """Scroll the list up one row; return whether it moved."""
        if self.count and self.scroll_offset > 0:
            self.scroll_offset -= 1
            return True
        return False

    def scroll_down(self, max_visible: int) -> bool:
        """Scroll the list down one row while entries remain below; return whether it moved."""
        if self.count and self.scroll_offset + max_visible < self.count:
            self.scroll_offset += 1
            return True
        return False

    def reselect(self, lines: Sequence[str], rowid: Optional[str]) -> None:
        """Adopt a reloaded list and select the entry with ``rowid`` again if present."""
        self.count = len(lines)
        if rowid is not None:
            position = next(
                (index for index, line in enumerate(lines) if rowid_of_line(line) == rowid),
                None,
            )
            if position is not None:
                self.selected = position
                self.scroll_offset = min(self.scroll_offset, position)
            elif lines:
                self.selected = 0
                self.scroll_offset = 0
        if self.count == 0:
            self.selected = None
            self.scroll_offset = 0
        elif self.selected is None or self.selected >= self.count:
            self.selected = 0
            self.scroll_offset = 0