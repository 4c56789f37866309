"""The prompts for adding and removing tags on a clipboard entry.

Each prompt is an immutable mode value. Keys typed while a prompt is shown
produce a new mode, and submitting a prompt yields a ``Step``: the next mode,
an optional action for the caller to carry out, and an optional message.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional, Sequence, Union

from clipsel.items import CclipItem, TagMetadata, rowid_of_line


@dataclass(frozen=True)
class Normal:
    """No prompt is shown; keys edit the filter query."""


@dataclass(frozen=True)
class PromptingTagName:
    """Asking for the name of the tag to apply."""

    input: str = ""
    selected_item: Optional[str] = None
    available_tags: tuple[str, ...] = ()
    selected_tag: Optional[int] = None


@dataclass(frozen=True)
class PromptingTagEmoji:
    """Asking for the emoji shown before the tag."""

    tag_name: str = ""
    input: str = ""
    selected_item: Optional[str] = None


@dataclass(frozen=True)
class PromptingTagColor:
    """Asking for the colour of the tag."""

    tag_name: str = ""
    emoji: Optional[str] = None
    input: str = ""
    selected_item: Optional[str] = None


@dataclass(frozen=True)
class RemovingTag:
    """Asking which tag to remove; a blank answer removes all of them."""

    input: str = ""
    tags: tuple[str, ...] = ()
    selected: Optional[int] = None
    selected_item: Optional[str] = None


TagMode = Union[Normal, PromptingTagName, PromptingTagEmoji, PromptingTagColor, RemovingTag]

_PROMPTS = (PromptingTagName, PromptingTagEmoji, PromptingTagColor, RemovingTag)


@dataclass(frozen=True)
class ApplyTag:
    """Tag the entry ``rowid`` and store ``metadata`` for the tag.

    When ``already_applied`` is true the entry carries the tag already and
    only the metadata needs saving.
    """

    rowid: str
    tag_name: str
    metadata: TagMetadata
    already_applied: bool = False


@dataclass(frozen=True)
class RemoveTag:
    """Remove ``tag`` from the entry ``rowid``, or every tag when it is None."""

    rowid: str
    tag: Optional[str] = None


@dataclass(frozen=True)
class Step:
    """The outcome of submitting a prompt."""

    mode: TagMode
    action: Optional[Union[ApplyTag, RemoveTag]] = None
    message: Optional[str] = None


def _item_has_tag(selected_item: Optional[str], tag: str) -> bool:
    if selected_item is None:
        return False
    try:
        return tag in CclipItem.from_line(selected_item).tags
    except ValueError:
        return False


def begin_tagging(selected_line: str, available_tags: Sequence[str]) -> PromptingTagName:
    """Start the tag prompt for the entry whose list line is ``selected_line``."""
    return PromptingTagName(
        input="",
        selected_item=selected_line,
        available_tags=tuple(available_tags),
        selected_tag=None,
    )


def begin_untagging(selected_line: str) -> RemovingTag:
    """Start the removal prompt, proposing the entry's first tag.

    Raises ValueError if ``selected_line`` is not a valid cclip list line.
    """
    item = CclipItem.from_line(selected_line)
    if item.tags:
        return RemovingTag(
            input=item.tags[0],
            tags=tuple(item.tags),
            selected=0,
            selected_item=selected_line,
        )
    return RemovingTag(input="", tags=(), selected=None, selected_item=selected_line)


def _submit_name(mode: PromptingTagName, metadata: Mapping[str, TagMetadata]) -> Step:
    tag_name = mode.input.strip()
    if not tag_name:
        # A tag may consist of an emoji alone.
        return Step(PromptingTagEmoji(tag_name="", input="", selected_item=mode.selected_item))

    message = None
    emoji_input = ""
    existing = metadata.get(tag_name)
    if existing is not None:
        if _item_has_tag(mode.selected_item, tag_name):
            message = f"Tag '{tag_name}' already applied (editing)"
        emoji_input = existing.emoji or ""
    return Step(
        PromptingTagEmoji(tag_name=tag_name, input=emoji_input, selected_item=mode.selected_item),
        message=message,
    )


def _submit_emoji(mode: PromptingTagEmoji, metadata: Mapping[str, TagMetadata]) -> Step:
    emoji = mode.input.strip() or None
    if not mode.tag_name and emoji is None:
        return Step(Normal(), message="Tag requires either a name or an emoji")

    final_name = mode.tag_name or emoji or ""
    existing = metadata.get(final_name)
    color_input = (existing.color if existing else None) or ""
    return Step(
        PromptingTagColor(
            tag_name=final_name,
            emoji=emoji,
            input=color_input,
            selected_item=mode.selected_item,
        )
    )


def _submit_color(mode: PromptingTagColor) -> Step:
    if mode.selected_item is None:
        return Step(Normal())
    color = mode.input.strip() or None
    action = ApplyTag(
        rowid=rowid_of_line(mode.selected_item),
        tag_name=mode.tag_name,
        metadata=TagMetadata(name=mode.tag_name, color=color, emoji=mode.emoji),
        already_applied=_item_has_tag(mode.selected_item, mode.tag_name),
    )
    return Step(Normal(), action=action)


def _submit_removal(mode: RemovingTag) -> Step:
    if mode.selected_item is None:
        return Step(Normal())
    tag = mode.input.strip() or None
    return Step(Normal(), action=RemoveTag(rowid=rowid_of_line(mode.selected_item), tag=tag))


def submit(mode: TagMode, metadata: Optional[Mapping[str, TagMetadata]] = None) -> Step:
    """Submit the current prompt; ``metadata`` is the stored tag metadata by name."""
    known = metadata or {}
    if isinstance(mode, PromptingTagName):
        return _submit_name(mode, known)
    if isinstance(mode, PromptingTagEmoji):
        return _submit_emoji(mode, known)
    if isinstance(mode, PromptingTagColor):
        return _submit_color(mode)
    if isinstance(mode, RemovingTag):
        return _submit_removal(mode)
    return Step(mode)


def type_char(mode: TagMode, ch: str) -> TagMode:
    """Append ``ch`` to the prompt's input; other modes are returned unchanged."""
    if isinstance(mode, _PROMPTS):
        return replace(mode, input=mode.input + ch)
    return mode


def backspace(mode: TagMode) -> TagMode:
    """Drop the last character of the prompt's input; other modes are returned unchanged."""
    if isinstance(mode, _PROMPTS):
        return replace(mode, input=mode.input[:-1])
    return mode


def _cycle(current: Optional[int], size: int, step: int) -> int:
    if current is None:
        return 0 if step >= 0 else size - 1
    return (current + step) % size


def cycle_selection(mode: TagMode, step: int) -> TagMode:
    """Move through the offered tags by ``step``, wrapping, and fill the input with the choice."""
    if isinstance(mode, PromptingTagName) and mode.available_tags:
        index = _cycle(mode.selected_tag, len(mode.available_tags), step)
        return replace(mode, selected_tag=index, input=mode.available_tags[index])
    if isinstance(mode, RemovingTag) and mode.tags:
        index = _cycle(mode.selected, len(mode.tags), step)
        return replace(mode, selected=index, input=mode.tags[index])
    return mode