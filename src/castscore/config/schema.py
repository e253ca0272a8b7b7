"""Configuration schema models using Pydantic.

The vocabulary table is the single source for every word list the rule
evaluator and the keyword expander consume. Each list drives exactly one
effect, documented on its field.
"""

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

VOCABULARY_VERSION = "1"


class TopicCluster(BaseModel):
    """A group of related terms used for query expansion.

    Attributes:
        triggers: Query tokens that activate the cluster
        terms: Terms unioned into the keyword set when a trigger is present
    """

    triggers: list[str]
    terms: list[str]


def _default_topic_clusters() -> dict[str, TopicCluster]:
    return {
        "interview": TopicCluster(
            triggers=["interview", "guest", "talk", "conversation"],
            terms=["interview", "guest", "conversation", "chat", "discussion", "with"],
        ),
        "hospitality": TopicCluster(
            triggers=["hotel", "hospitality", "venue", "event"],
            terms=[
                "hotel",
                "hospitality",
                "venue",
                "wedding",
                "event",
                "resort",
                "reception",
            ],
        ),
        "floral": TopicCluster(
            triggers=["florist", "floral", "flower", "flowers", "design"],
            terms=["florist", "floral", "designer", "flowers", "arrangements", "bouquet"],
        ),
    }


class VocabularyTable(BaseModel):
    """Versioned word lists shared by the scoring and relevance engines."""

    version: str = VOCABULARY_VERSION

    # Title genericity rule (info, -5)
    weak_title_words: list[str] = Field(
        default_factory=lambda: [
            "episode",
            "show",
            "podcast",
            "talk",
            "discussion",
            "conversation",
        ]
    )

    # Opening-sentence filler rule (warning, -10); whole-word match
    filler_words: list[str] = Field(
        default_factory=lambda: [
            "um",
            "uh",
            "like",
            "you know",
            "basically",
            "actually",
            "literally",
            "obviously",
        ]
    )

    # Improvement potential (+25) when the opening sentence starts with one
    weak_openers: list[str] = Field(
        default_factory=lambda: ["in this episode", "today we", "welcome to", "this week"]
    )

    # Improvement potential (+25) when the opening sentence contains one
    vague_words: list[str] = Field(
        default_factory=lambda: ["thing", "stuff", "something", "anything", "everything"]
    )

    # Keyword expander: tokens dropped from the query
    stop_words: list[str] = Field(
        default_factory=lambda: [
            "the", "and", "for", "are", "but", "not", "you", "all", "can",
            "had", "her", "was", "one", "our", "out", "day", "get", "has",
            "him", "his", "how", "man", "new", "now", "old", "see", "two",
            "way", "who", "boy", "did", "its", "let", "put", "say", "she",
            "too", "use",
        ]
    )

    # Keyword expander: cluster expansion
    topic_clusters: dict[str, TopicCluster] = Field(
        default_factory=_default_topic_clusters
    )

    # Relevance scorer flat bonuses (+15 title / +10 description)
    interview_title_markers: list[str] = Field(
        default_factory=lambda: ["interview", "guest", "with "]
    )
    interview_description_markers: list[str] = Field(
        default_factory=lambda: ["interview", "guest", "conversation"]
    )


class ScoringPolicy(BaseModel):
    """Thresholds and penalties for the episode quality rules."""

    title_min_length: int = 30
    title_max_length: int = 100
    title_too_short_penalty: int = Field(default=15, ge=0)
    title_too_long_penalty: int = Field(default=10, ge=0)
    title_generic_penalty: int = Field(default=5, ge=0)

    description_min_length: int = 500
    description_target_length: int = 2000
    description_too_short_penalty: int = Field(default=25, ge=0)
    description_below_target_penalty: int = Field(default=15, ge=0)

    opening_max_length: int = 200
    opening_filler_penalty: int = Field(default=10, ge=0)
    opening_too_long_penalty: int = Field(default=5, ge=0)

    missing_episode_number_penalty: int = Field(default=10, ge=0)
    missing_duration_penalty: int = Field(default=5, ge=0)
    missing_artwork_penalty: int = Field(default=5, ge=0)
    missing_transcript_penalty: int = Field(default=15, ge=0)

    # Improvement potential components
    potential_missing_transcript: int = Field(default=40, ge=0)
    potential_short_description: int = Field(default=30, ge=0)
    potential_weak_opening: int = Field(default=25, ge=0)


class SelectionPolicy(BaseModel):
    """Caps and weights for relevance-based context selection."""

    title_match_weight: float = Field(default=20.0, ge=0)
    description_match_weight: float = Field(default=10.0, ge=0)
    transcript_occurrence_weight: float = Field(default=3.0, ge=0)
    interview_title_bonus: float = Field(default=15.0, ge=0)
    interview_description_bonus: float = Field(default=10.0, ge=0)
    long_transcript_bonus: float = Field(default=5.0, ge=0)
    long_transcript_chars: int = Field(default=5000, ge=0)

    recency_bonus_max: float = Field(default=5.0, ge=0)
    recency_bonus_step: float = Field(default=0.01, ge=0)

    cap_ratio: float = 0.10
    cap_min: int = 15
    cap_max: int = 25
    min_selected: int = 10

    description_limit: int = Field(default=300, gt=0)
    transcript_limit: int = Field(default=600, gt=0)


class GlobalConfig(BaseModel):
    """Global Castscore configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"
    workers: int = Field(default=4, ge=1)

    vocabulary: VocabularyTable = Field(default_factory=VocabularyTable)
    scoring: ScoringPolicy = Field(default_factory=ScoringPolicy)
    selection: SelectionPolicy = Field(default_factory=SelectionPolicy)
