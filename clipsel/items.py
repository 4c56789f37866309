"""Clipboard entries as listed by cclip, and the metadata used to display their tags."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Sequence

_SHORT_PREVIEW_CHARS = 50
_TEXT_PREVIEW_CHARS = 80


@dataclass(frozen=True)
class TagMetadata:
    """Display settings for one tag: an optional colour and emoji."""

    name: str
    color: Optional[str] = None
    emoji: Optional[str] = None

    def with_color(self, color: str) -> "TagMetadata":
        """Return a copy carrying the given colour."""
        return replace(self, color=color)

    def with_emoji(self, emoji: str) -> "TagMetadata":
        """Return a copy carrying the given emoji."""
        return replace(self, emoji=emoji)


class TagMetadataFormatter:
    """Formats tag names using their stored colour and emoji."""

    def __init__(self, metadata: Optional[Mapping[str, TagMetadata]] = None) -> None:
        self.metadata: dict[str, TagMetadata] = dict(metadata or {})

    def get_color_string(self, tag: str) -> Optional[str]:
        meta = self.metadata.get(tag)
        return meta.color if meta else None

    def get_emoji(self, tag: str) -> Optional[str]:
        meta = self.metadata.get(tag)
        return meta.emoji if meta else None

    def format_tags(self, tags: Sequence[str], include_color_names: bool = True) -> list[str]:
        """Return the display form of each tag, in order."""
        return [self._format_tag(tag, include_color_names) for tag in tags]

    def _format_tag(self, tag: str, include_color_names: bool) -> str:
        meta = self.metadata.get(tag)
        if meta is None:
            return tag
        display = f"{meta.emoji} {tag}" if meta.emoji is not None else tag
        if include_color_names and meta.color is not None:
            display += f"({meta.color})"
        return display


def format_tags_for_display(
    tags: Sequence[str],
    base: str,
    formatter: Optional[TagMetadataFormatter] = None,
    include_color_names: bool = True,
) -> str:
    """Prefix ``base`` with a bracketed tag list, or return it unchanged when untagged."""
    if not tags:
        return base
    shown = formatter.format_tags(tags, include_color_names) if formatter else list(tags)
    return f"[{', '.join(shown)}] {base}"


def rowid_of_line(line: str) -> str:
    """Return the rowid, the first tab-separated field of a cclip list line."""
    return line.split("\t", 1)[0]


@dataclass
class CclipItem:
    """One clipboard history entry."""

    rowid: str
    mime_type: str
    preview: str
    original_line: str
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_line(cls, line: str) -> "CclipItem":
        """Parse ``rowid<TAB>mime_type<TAB>preview[<TAB>tags]``; tags are comma separated."""
        parts = line.split("\t", 3)
        if len(parts) < 3:
            raise ValueError(
                "Invalid cclip list format: expected at least 3 tab-separated fields"
            )
        tags: list[str] = []
        if len(parts) == 4:
            tags = [tag.strip() for tag in parts[3].split(",") if tag.strip()]
        return cls(
            rowid=parts[0],
            mime_type=parts[1],
            preview=parts[2],
            original_line=line,
            tags=tags,
        )

    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def is_text(self) -> bool:
        return self.mime_type.startswith("text/")

    def display_name(
        self,
        formatter: Optional[TagMetadataFormatter] = None,
        include_color_names: bool = True,
    ) -> str:
        """Return a readable one-line label for the entry, with tags in front."""
        if self.is_text():
            base = self.preview[:_TEXT_PREVIEW_CHARS]
        else:
            base = f"{self.preview[:_SHORT_PREVIEW_CHARS]} ({self.mime_type})"
        return format_tags_for_display(self.tags, base, formatter, include_color_names)

    def numbered_display_name(
        self,
        formatter: Optional[TagMetadataFormatter] = None,
        include_color_names: bool = True,
    ) -> str:
        """Return the display name prefixed by the left-aligned rowid."""
        return f"{self.rowid:<3} {self.display_name(formatter, include_color_names)}"