"""Per-episode relevance scoring against expanded keywords."""

from collections.abc import Sequence

from castscore.catalog.models import Episode
from castscore.config.schema import SelectionPolicy, VocabularyTable
from castscore.relevance.models import RelevanceScore


class RelevanceScorer:
    """Score how well an episode matches a keyword set.

    Per keyword: a title hit, a description hit, and a weight per
    transcript occurrence, all case-insensitive substring matches. Flat
    bonuses reward interview-style episodes and long transcripts. A small
    recency bonus, at most ``recency_bonus_max`` and shrinking with the
    episode's position in the reverse-chronological list, breaks ties.
    """

    def __init__(
        self,
        policy: SelectionPolicy | None = None,
        vocabulary: VocabularyTable | None = None,
    ) -> None:
        self.policy = policy or SelectionPolicy()
        self.vocabulary = vocabulary or VocabularyTable()

    def recency_bonus(self, position: int) -> float:
        """Bonus for the episode at ``position`` (0 = most recent)."""
        bonus = self.policy.recency_bonus_max - max(0, position) * self.policy.recency_bonus_step
        return max(0.0, bonus)

    def score(
        self,
        episode: Episode,
        keywords: Sequence[str],
        position: int = 0,
    ) -> RelevanceScore:
        """Score one episode.

        Args:
            episode: Episode to score
            keywords: Expanded keywords (may be empty)
            position: Index in the channel's newest-first episode list

        Returns:
            RelevanceScore; with no keywords the value is the recency bonus alone
        """
        recency = self.recency_bonus(position)
        if not keywords:
            return RelevanceScore(episode=episode, value=recency)

        policy = self.policy
        title = (episode.title or "").lower()
        description = (episode.description or "").lower()
        transcript = (episode.transcript or "").lower()

        value = 0.0
        matched: list[str] = []
        for keyword in keywords:
            keyword = keyword.lower()
            if not keyword:
                continue
            hit = False
            if keyword in title:
                value += policy.title_match_weight
                hit = True
            if keyword in description:
                value += policy.description_match_weight
                hit = True
            occurrences = transcript.count(keyword)
            if occurrences:
                value += occurrences * policy.transcript_occurrence_weight
                hit = True
            if hit:
                matched.append(keyword)

        if any(marker in title for marker in self.vocabulary.interview_title_markers):
            value += policy.interview_title_bonus
        if any(marker in description for marker in self.vocabulary.interview_description_markers):
            value += policy.interview_description_bonus
        if len(transcript) > policy.long_transcript_chars:
            value += policy.long_transcript_bonus

        return RelevanceScore(
            episode=episode,
            value=value + recency,
            matched_keywords=tuple(matched),
        )


_default_scorer: RelevanceScorer | None = None


def score_relevance(
    episode: Episode, keywords: Sequence[str], position: int = 0
) -> RelevanceScore:
    """Score an episode with the default policy and vocabulary."""
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = RelevanceScorer()
    return _default_scorer.score(episode, keywords, position)
