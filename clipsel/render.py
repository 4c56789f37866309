"""What the clipboard browser draws: the filter line, the visible rows and labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TypeVar

from clipsel.items import CclipItem, TagMetadataFormatter
from clipsel.tagflow import (
    Normal,
    PromptingTagColor,
    PromptingTagEmoji,
    PromptingTagName,
    RemovingTag,
    TagMode,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Segment:
    """A run of text in the input line with its emphasis.

    ``highlight`` segments use the highlight colour; the rest use the input
    text colour, dimmed when ``dim`` is set.
    """

    text: str
    highlight: bool = False
    dim: bool = False


_PROMPT_LABELS = {
    PromptingTagName: ("Tag: ", None, " Tag Name "),
    PromptingTagEmoji: ("Emoji: ", " (or blank)", " Tag Emoji "),
    PromptingTagColor: ("Color: ", " (hex/name or blank)", " Tag Color "),
    RemovingTag: ("Remove: ", " (blank = all)", " Remove Tag "),
}

_FILTER_TITLE = " Filter "


def input_line(
    mode: TagMode,
    query: str,
    selected: Optional[int],
    count: int,
    cursor: str,
) -> list[Segment]:
    """Return the segments of the input panel for the current mode."""
    labels = _PROMPT_LABELS.get(type(mode))
    if labels is not None:
        label, hint, _ = labels
        segments = [
            Segment(label, highlight=True),
            Segment(mode.input),
            Segment(cursor, highlight=True),
        ]
        if hint is not None:
            segments.append(Segment(hint, dim=True))
        return segments

    position = 0 if selected is None else selected + 1
    return [
        Segment("("),
        Segment(str(position), highlight=True),
        Segment("/"),
        Segment(str(count)),
        Segment(") "),
        Segment(">", highlight=True),
        Segment("> "),
        Segment(query),
        Segment(cursor, highlight=True),
    ]


def input_title(mode: TagMode) -> str:
    """Return the title of the input panel for the current mode."""
    labels = _PROMPT_LABELS.get(type(mode))
    return labels[2] if labels is not None else _FILTER_TITLE


def visible_items(lines: Sequence[T], scroll_offset: int, max_visible: int) -> list[T]:
    """Return the entries that fit in the list, starting at ``scroll_offset``."""
    if scroll_offset < 0 or max_visible < 0:
        raise ValueError("scroll_offset and max_visible must not be negative")
    return list(lines[scroll_offset : scroll_offset + max_visible])


def visible_selection(
    selected: Optional[int], scroll_offset: int, max_visible: int
) -> Optional[int]:
    """Return the selected entry's row within the visible window, if it is shown."""
    if selected is None:
        return None
    if scroll_offset <= selected < scroll_offset + max_visible:
        return selected - scroll_offset
    return None


def highlight_tag_color(
    tags: Optional[Sequence[str]],
    formatter: Optional[TagMetadataFormatter],
    default: str,
) -> str:
    """Return the colour of the entry's first tag, or ``default`` when it has none."""
    if not tags or formatter is None:
        return default
    color = formatter.get_color_string(tags[0])
    return color if color is not None else default


def build_display_lines(
    items: Iterable[CclipItem],
    formatter: Optional[TagMetadataFormatter] = None,
    show_line_numbers: bool = False,
    include_color_names: bool = False,
) -> list[str]:
    """Return the list label of each entry, numbered by rowid when asked."""
    if show_line_numbers:
        return [item.numbered_display_name(formatter, include_color_names) for item in items]
    return [item.display_name(formatter, include_color_names) for item in items]