"""Data models for channels and their episodes."""

import re
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

_TAG_RE = re.compile(r"<[^>]*>")


class MediaType(str, Enum):
    """Declared medium of a channel."""

    AUDIO = "audio"
    VIDEO = "video"


def strip_html(text: str | None) -> str:
    """Remove markup tags from rich-text descriptions.

    Examples:
        "<p>Hello <b>world</b></p>" -> "Hello world"
    """
    if not text:
        return ""
    return _TAG_RE.sub("", text)


def parse_duration(value: str | None) -> int | None:
    """Parse an ``HH:MM:SS`` or ``MM:SS`` duration into seconds.

    Returns None for missing or malformed values rather than raising, so a
    bad duration never stops an episode from being scored.

    Examples:
        "01:23:45" -> 5025
        "23:45" -> 1425
        "abc" -> None
    """
    if not value:
        return None

    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return None

    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        return None

    if any(n < 0 for n in numbers):
        return None
    # Minutes and seconds fields must be sexagesimal; the leading field may run over
    if any(n >= 60 for n in numbers[1:]):
        return None

    seconds = 0
    for n in numbers:
        seconds = seconds * 60 + n
    return seconds


class Channel(BaseModel):
    """A content source (audio or video series) owning episodes."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: MediaType = MediaType.AUDIO
    description: str | None = None


class Episode(BaseModel):
    """Snapshot of a single episode as read from the catalog.

    Scoring and relevance are pure functions of this snapshot. Optional
    fields may be absent; engines treat absence as a deficiency, never as
    an error.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    channel_id: str
    title: str = ""
    description: str | None = None
    transcript: str | None = None
    duration: str | None = None  # "HH:MM:SS" or "MM:SS"
    episode_number: int | None = None
    season_number: int | None = None
    artwork_url: str | None = None
    has_custom_artwork: bool = False
    file_size: int | None = Field(default=None, ge=0)
    published_at: datetime | None = None
    excluded: bool = False
    exclusion_notes: str | None = None

    @property
    def description_text(self) -> str:
        """Description with markup removed."""
        return strip_html(self.description)

    @property
    def opening_sentence(self) -> str:
        """Text of the stripped description before the first period."""
        return self.description_text.split(".", 1)[0]

    @property
    def has_transcript(self) -> bool:
        return bool(self.transcript)

    @property
    def has_artwork(self) -> bool:
        return bool(self.artwork_url) or self.has_custom_artwork

    @property
    def duration_seconds(self) -> int | None:
        """Parsed duration, or None when missing or malformed."""
        return parse_duration(self.duration)

    @property
    def duration_formatted(self) -> str:
        """Format duration as HH:MM:SS or MM:SS ("unknown" if unparseable)."""
        total = self.duration_seconds
        if total is None:
            return "unknown"
        hours, remainder = divmod(total, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{minutes:02d}:{seconds:02d}"


class CatalogSnapshot(BaseModel):
    """Read-only view of channels and episodes handed to the engines."""

    channels: list[Channel] = Field(default_factory=list)
    episodes: list[Episode] = Field(default_factory=list)

    def get_channel(self, channel_id: str) -> Channel | None:
        for channel in self.channels:
            if channel.id == channel_id:
                return channel
        return None

    def episodes_for(self, channel_id: str) -> list[Episode]:
        """Episodes of one channel, in snapshot order."""
        return [ep for ep in self.episodes if ep.channel_id == channel_id]
