"""Data models for query relevance and grounding context."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from castscore.catalog.models import Channel, Episode


class RelevanceScore(BaseModel):
    """Match strength of one episode against an expanded keyword set.

    Attributes:
        episode: Episode that was scored
        value: Keyword weight plus bonuses plus recency bonus
        matched_keywords: Keywords found in title, description or transcript
    """

    model_config = ConfigDict(frozen=True)

    episode: Episode
    value: float = Field(ge=0)
    matched_keywords: tuple[str, ...] = ()


class ContextEpisode(BaseModel):
    """Summarized episode record included in a context document."""

    episode_id: str
    title: str
    description: str | None = None
    transcript: str | None = None
    episode_number: int | None = None
    season_number: int | None = None
    published_at: datetime | None = None
    relevance: float = 0.0


class ContextDocument(BaseModel):
    """Bounded grounding bundle prepared for a text-generation call.

    Example:
        >>> document = selector.select(channel, episodes, keywords)
        >>> print(document.to_prompt_context())
    """

    channel: Channel
    corpus_size: int = Field(ge=0)
    keywords: tuple[str, ...] = ()
    episodes: list[ContextEpisode] = Field(default_factory=list)

    @property
    def selected_count(self) -> int:
        return len(self.episodes)

    @property
    def has_grounding(self) -> bool:
        """False when nothing could be selected (empty corpus)."""
        return bool(self.episodes)

    def to_prompt_context(self) -> str:
        """Render the document as plain text for a language model prompt.

        Returns:
            Channel header, keyword line and one block per selected episode
        """
        lines = [
            f"Channel: {self.channel.name}",
            f"Channel Description: {self.channel.description or 'No description available'}",
            f"Type: {self.channel.type.value}",
            f"Total Episodes: {self.corpus_size}",
            f"Selected Episodes: {self.selected_count} (most relevant to your question)",
            "",
            f"Question Keywords: {', '.join(self.keywords)}",
            "",
            "Relevant Episodes:",
        ]

        for index, episode in enumerate(self.episodes, 1):
            label = f"Episode {episode.episode_number or index}"
            if episode.season_number:
                label += f" (Season {episode.season_number})"
            published = (
                episode.published_at.strftime("%Y-%m-%d") if episode.published_at else "Unknown"
            )

            lines.append("")
            lines.append(f"{label} [Relevance: {episode.relevance:.1f}]:")
            lines.append(f"- Title: {episode.title}")
            lines.append(f"- Description: {episode.description or 'No description'}")
            lines.append(f"- Published: {published}")
            if episode.transcript:
                lines.append(f"- Key Content: {episode.transcript}")
            else:
                lines.append("- No transcript available")

        lines.append("")
        lines.append(
            f"Note: Episodes selected based on relevance to your question "
            f"from {self.corpus_size} total episodes."
        )
        return "\n".join(lines)
