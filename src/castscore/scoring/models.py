"""Data models for episode quality scoring."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from castscore.catalog.models import Channel, Episode


class Severity(str, Enum):
    """How much an issue hurts an episode."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class RankMode(str, Enum):
    """Ordering strategies for score results."""

    WORST_FIRST = "worst-first"
    IMPROVEMENT_WEIGHTED = "improvement-weighted"


class Issue(BaseModel):
    """A single detected quality deficiency.

    Attributes:
        severity: critical, warning or info
        category: Area of the episode (Title, Description, Hook, ...)
        message: What is wrong
        suggestion: How to fix it
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity
    category: str
    message: str
    suggestion: str


def clamp_score(value: int) -> int:
    return max(0, min(100, value))


def stars_for(score: int) -> int:
    """Convert a 0-100 score to a 1-5 star rating."""
    return max(1, min(5, math.ceil(score / 20)))


class ScoreResult(BaseModel):
    """Outcome of evaluating one episode against the quality rules.

    ``channel`` is populated for cross-channel rankings so consumers can
    group results without another lookup.
    """

    model_config = ConfigDict(frozen=True)

    episode: Episode
    score: int = Field(ge=0, le=100)
    stars: int = Field(ge=1, le=5)
    issues: tuple[Issue, ...] = ()
    improvement_potential: int = Field(default=0, ge=0)
    channel: Channel | None = None

    @property
    def has_transcript(self) -> bool:
        return self.episode.has_transcript

    def issues_by_severity(self, severity: Severity) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity == severity]


class ChannelReport(BaseModel):
    """Aggregate view over a list of score results."""

    episode_count: int = 0
    average_score: float = 0.0
    issue_counts: dict[Severity, int] = Field(
        default_factory=lambda: {severity: 0 for severity in Severity}
    )
    transcript_count: int = 0
    star_histogram: dict[int, int] = Field(
        default_factory=lambda: {stars: 0 for stars in range(1, 6)}
    )

    @property
    def transcript_coverage(self) -> float:
        """Share of episodes with a transcript (0.0-1.0)."""
        if not self.episode_count:
            return 0.0
        return self.transcript_count / self.episode_count


class TranscriptCostEstimate(BaseModel):
    """Estimated cost of generating a transcript for one episode."""

    minutes: int = Field(ge=0)
    cost_usd: float = Field(ge=0)
    estimated: bool = False

    @property
    def formatted(self) -> str:
        text = f"${self.cost_usd:.3f}"
        if self.estimated:
            text += " (estimated)"
        return text
