"""Context selection: pick and compress the episodes that ground an answer."""

import logging
import math
from collections.abc import Sequence
from datetime import datetime

from castscore.catalog.models import Channel, Episode
from castscore.config.schema import SelectionPolicy, VocabularyTable
from castscore.relevance.models import ContextDocument, ContextEpisode, RelevanceScore
from castscore.relevance.scorer import RelevanceScorer
from castscore.relevance.summarizer import summarize

logger = logging.getLogger(__name__)


def newest_first(episodes: Sequence[Episode]) -> list[Episode]:
    """Order episodes by publish time, newest first.

    Episodes without a publish time go last; ties keep input order.
    """

    def _key(episode: Episode) -> tuple[bool, float]:
        published: datetime | None = episode.published_at
        if published is None:
            return (True, 0.0)
        return (False, -published.timestamp())

    return sorted(episodes, key=_key)


class ContextSelector:
    """Select a bounded, relevance-ranked subset of a channel's episodes.

    The number of relevant episodes taken is ``clamp(floor(corpus * ratio),
    cap_min, cap_max)``. When fewer than ``min_selected`` episodes have any
    relevance, the most recent ones are added until that floor is reached.
    Every selected record is summarized to fixed field limits.

    Example:
        >>> selector = ContextSelector()
        >>> document = selector.select(channel, episodes, ("guest", "interview"))
        >>> document.selected_count
        15
    """

    def __init__(
        self,
        policy: SelectionPolicy | None = None,
        vocabulary: VocabularyTable | None = None,
    ) -> None:
        self.policy = policy or SelectionPolicy()
        self.scorer = RelevanceScorer(policy=self.policy, vocabulary=vocabulary)

    def cap(self, corpus_size: int) -> int:
        """Maximum number of relevance-selected episodes for a corpus."""
        raw = math.floor(corpus_size * self.policy.cap_ratio)
        return max(self.policy.cap_min, min(self.policy.cap_max, raw))

    def rank(self, episodes: Sequence[Episode], keywords: Sequence[str]) -> list[RelevanceScore]:
        """Score every episode and sort by descending relevance (stable)."""
        ordered = newest_first(episodes)
        positions = {id(episode): index for index, episode in enumerate(ordered)}
        scores = [
            self.scorer.score(episode, keywords, positions[id(episode)]) for episode in episodes
        ]
        return sorted(scores, key=lambda s: s.value, reverse=True)

    def select(
        self,
        channel: Channel,
        episodes: Sequence[Episode],
        keywords: Sequence[str],
        corpus_size: int | None = None,
    ) -> ContextDocument:
        """Build a context document for one channel.

        Args:
            channel: Channel the question is about
            episodes: The channel's episodes
            keywords: Expanded query keywords (may be empty)
            corpus_size: Total episode count used for the cap; defaults to
                ``len(episodes)``

        Returns:
            ContextDocument; empty episode list when the corpus is empty
        """
        if corpus_size is None:
            corpus_size = len(episodes)
        keywords = tuple(keywords)

        if not episodes:
            logger.info("No episodes for channel %s, context has no grounding", channel.id)
            return ContextDocument(channel=channel, corpus_size=corpus_size, keywords=keywords)

        ranked = self.rank(episodes, keywords)
        cap = self.cap(corpus_size)
        selected = [score for score in ranked if score.value > 0][:cap]

        if len(selected) < self.policy.min_selected:
            # Pad with the most recent episodes not already chosen
            chosen = {id(score.episode) for score in selected}
            by_episode = {id(score.episode): score for score in ranked}
            for episode in newest_first(episodes):
                if len(selected) >= self.policy.min_selected:
                    break
                if id(episode) in chosen:
                    continue
                selected.append(by_episode[id(episode)])
                chosen.add(id(episode))

        logger.debug(
            "Selected %d of %d episodes for channel %s (cap %d)",
            len(selected),
            corpus_size,
            channel.id,
            cap,
        )

        return ContextDocument(
            channel=channel,
            corpus_size=corpus_size,
            keywords=keywords,
            episodes=[self._summarize(score) for score in selected],
        )

    def _summarize(self, score: RelevanceScore) -> ContextEpisode:
        episode = score.episode
        return ContextEpisode(
            episode_id=episode.id,
            title=episode.title,
            description=summarize(episode.description_text, self.policy.description_limit),
            transcript=summarize(episode.transcript, self.policy.transcript_limit),
            episode_number=episode.episode_number,
            season_number=episode.season_number,
            published_at=episode.published_at,
            relevance=score.value,
        )


_default_selector: ContextSelector | None = None


def select_context(
    channel: Channel,
    episodes: Sequence[Episode],
    keywords: Sequence[str],
    corpus_size: int | None = None,
) -> ContextDocument:
    """Select context with the default policy and vocabulary."""
    global _default_selector
    if _default_selector is None:
        _default_selector = ContextSelector()
    return _default_selector.select(channel, episodes, keywords, corpus_size)
