"""Vertical split of the screen into the preview, history and filter panels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

_MIN_CONTENT_HEIGHT = 3
_MIN_ITEMS_HEIGHT = 1
_BORDER_ROWS = 2


class PanelPosition(Enum):
    """Where the preview panel sits relative to the history list."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Rect:
    """A rectangular screen area in cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class PanelLayout:
    """The three panel areas of the clipboard browser."""

    content: Rect
    items: Rect
    input: Rect
    position: PanelPosition

    def items_visible_rows(self) -> int:
        """Number of history rows that fit inside the list's borders."""
        return max(self.items.height - _BORDER_ROWS, 0)

    def item_index_at_row(self, row: int, scroll_offset: int, count: int) -> Optional[int]:
        """Return the index of the entry drawn on screen row ``row``, if any."""
        if count <= 0:
            return None
        start = self.items.y + 1
        end = start + self.items_visible_rows()
        if not start <= row < end:
            return None
        index = scroll_offset + (row - start)
        return index if index < count else None

    def image_area(self) -> Rect:
        """The area inside the preview panel's borders, where images are drawn."""
        return Rect(
            x=self.content.x + 1,
            y=self.content.y + 1,
            width=max(self.content.width - _BORDER_ROWS, 0),
            height=max(self.content.height - _BORDER_ROWS, 0),
        )


def _content_height(total_height: int, content_percent: int) -> int:
    # Round half away from zero on non-negative values, without floats.
    rounded = (total_height * content_percent + 50) // 100
    return max(rounded, _MIN_CONTENT_HEIGHT)


def _allocate(total: int, content: int, input_height: int) -> tuple[int, int, int]:
    """Return (content, items, input) heights that add up to ``total``."""
    if content + input_height + _MIN_ITEMS_HEIGHT <= total:
        return content, total - content - input_height, input_height
    # Not enough room: keep the list visible, then give what is left to
    # the preview first and the filter line second.
    items = min(_MIN_ITEMS_HEIGHT, total)
    remaining = total - items
    content = min(content, remaining)
    remaining -= content
    input_height = min(input_height, remaining)
    remaining -= input_height
    return content, items + remaining, input_height


def compute_layout(
    total_height: int,
    width: int,
    content_percent: int,
    input_height: int,
    position: PanelPosition = PanelPosition.TOP,
) -> PanelLayout:
    """Split a screen of ``total_height`` rows into the three panels."""
    for name, value in (
        ("total_height", total_height),
        ("width", width),
        ("content_percent", content_percent),
        ("input_height", input_height),
    ):
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")
    position = PanelPosition(position)

    content_h, items_h, input_h = _allocate(
        total_height, _content_height(total_height, content_percent), input_height
    )

    if position is PanelPosition.TOP:
        order = (("content", content_h), ("items", items_h), ("input", input_h))
    elif position is PanelPosition.MIDDLE:
        order = (("items", items_h), ("content", content_h), ("input", input_h))
    else:
        order = (("items", items_h), ("input", input_h), ("content", content_h))

    rects: dict[str, Rect] = {}
    y = 0
    for name, height in order:
        rects[name] = Rect(x=0, y=y, width=width, height=height)
        y += height

    return PanelLayout(
        content=rects["content"],
        items=rects["items"],
        input=rects["input"],
        position=position,
    )