"""Persistent storage of tag metadata (colours and emojis)."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Mapping, Optional, Union

from clipsel.items import TagMetadata

_APP_DIR = "clipsel"
_FILE_NAME = "tag_metadata.json"


def default_store_path() -> Path:
    """Return the metadata file under the user's data directory."""
    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / _APP_DIR / _FILE_NAME


class TagMetadataStore:
    """Tag metadata kept in a JSON file."""

    def __init__(self, path: Optional[Union[str, os.PathLike]] = None) -> None:
        self.path = Path(path) if path is not None else default_store_path()

    def load(self) -> dict[str, TagMetadata]:
        """Return stored metadata keyed by tag name; empty if missing or unreadable."""
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            entries = [
                TagMetadata(
                    name=_require_str(entry["name"]),
                    color=_optional_str(entry.get("color")),
                    emoji=_optional_str(entry.get("emoji")),
                )
                for entry in raw
            ]
        except (OSError, ValueError, TypeError, KeyError, AttributeError):
            return {}
        return {entry.name: entry for entry in entries}

    def save(self, tags: Mapping[str, TagMetadata]) -> None:
        """Replace the stored metadata with ``tags``."""
        payload = [
            {"name": meta.name, "color": meta.color, "emoji": meta.emoji}
            for meta in tags.values()
        ]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".tags-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        """Remove all stored metadata."""
        self.path.unlink(missing_ok=True)


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError("tag name must be a string")
    return value


def _optional_str(value: object) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise TypeError("tag field must be a string or null")
    return value