"""
Shared types used across the playlist lookup pipeline.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Literal


class PlaylistField(Enum):
    """Known playlist columns, each with the header texts it appears under."""
    START_TIME = ("Start Time",)
    PROGRAM = ("Program",)
    COMPOSER = ("Composer",)
    TITLE = ("Title",)
    PERFORMERS = ("Performers", "Perfomers")  # Older pages misspell the header
    RECORD_LABEL = ("Record Label", "Label")

    @property
    def label(self) -> str:
        return self.value[0]

    @classmethod
    def from_header(cls, text: str) -> PlaylistField | None:
        """Match rendered header text (already whitespace-normalized) to a field."""
        key = text.casefold()
        for member in cls:
            if any(key == alias.casefold() for alias in member.value):
                return member
        return None


@dataclass(frozen=True, slots=True)
class PlaylistRow:
    """One broadcast entry as found on the page, text not yet unescaped."""
    start_time_raw: str
    fields: Mapping[PlaylistField, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get(self, playlist_field: PlaylistField) -> str | None:
        return self.fields.get(playlist_field)


@dataclass(frozen=True, slots=True)
class PlaylistLayout:
    """One era of the station's playlist pages."""
    name: str
    url_template: str
    key_format: Literal["weekday", "date"]
    expected_labels: tuple[PlaylistField, ...]
    has_program: bool


LAYOUTS: dict[str, PlaylistLayout] = {
    "daily": PlaylistLayout(
        name="daily",
        # Trailing slash and query string avoid a permanent redirect
        url_template="https://theclassicalstation.org/listen/playlist/?date={key}",
        key_format="date",
        expected_labels=(PlaylistField.START_TIME, PlaylistField.COMPOSER, PlaylistField.TITLE),
        has_program=False,
    ),
    "weekly": PlaylistLayout(
        name="weekly",
        url_template="http://theclassicalstation.org/playing_{key}.shtml",
        key_format="weekday",
        expected_labels=(PlaylistField.PROGRAM, PlaylistField.START_TIME),
        has_program=True,
    ),
}


__all__ = ["PlaylistField", "PlaylistRow", "PlaylistLayout", "LAYOUTS"]
