"""Rule evaluator for episode metadata quality.

Each rule inspects one aspect of an episode and yields findings, a finding
being an Issue plus the penalty it costs. The final score is 100 minus the
sum of penalties, clamped to [0, 100]. Rules run in a fixed order so that
issue lists are reproducible.
"""

import logging
import re
from collections.abc import Callable, Iterator

from castscore.catalog.models import Channel, Episode
from castscore.config.schema import ScoringPolicy, VocabularyTable
from castscore.scoring.models import Issue, ScoreResult, Severity, clamp_score, stars_for

logger = logging.getLogger(__name__)

Finding = tuple[Issue, int]


def _word_pattern(words: list[str]) -> re.Pattern[str] | None:
    """Whole-word alternation for the given words/phrases."""
    if not words:
        return None
    alternation = "|".join(re.escape(word.lower()) for word in words)
    return re.compile(rf"\b(?:{alternation})\b")


class RuleEvaluator:
    """Score episodes against the quality rule set.

    Example:
        >>> evaluator = RuleEvaluator()
        >>> result = evaluator.evaluate(episode)
        >>> result.score, result.stars
        (85, 5)
    """

    def __init__(
        self,
        policy: ScoringPolicy | None = None,
        vocabulary: VocabularyTable | None = None,
    ) -> None:
        self.policy = policy or ScoringPolicy()
        self.vocabulary = vocabulary or VocabularyTable()
        self._filler_pattern = _word_pattern(self.vocabulary.filler_words)
        self._rules: list[Callable[[Episode], Iterator[Finding]]] = [
            self._check_title_length,
            self._check_title_generic,
            self._check_description_length,
            self._check_opening_sentence,
            self._check_episode_number,
            self._check_duration,
            self._check_artwork,
            self._check_transcript,
        ]

    def evaluate(self, episode: Episode, channel: Channel | None = None) -> ScoreResult:
        """Evaluate a single episode.

        Args:
            episode: Episode snapshot (missing fields are allowed)
            channel: Owning channel, attached for cross-channel views

        Returns:
            ScoreResult with score, stars, issues and improvement potential
        """
        issues: list[Issue] = []
        penalty = 0
        for rule in self._rules:
            for issue, cost in rule(episode):
                issues.append(issue)
                penalty += cost

        score = clamp_score(100 - penalty)
        return ScoreResult(
            episode=episode,
            score=score,
            stars=stars_for(score),
            issues=tuple(issues),
            improvement_potential=self.improvement_potential(episode),
            channel=channel,
        )

    def improvement_potential(self, episode: Episode) -> int:
        """Estimate how far the score could rise if key gaps were fixed.

        Independent of the rule penalties, though built on the same facts.
        """
        potential = 0
        if not episode.has_transcript:
            potential += self.policy.potential_missing_transcript
        if len(episode.description_text) < self.policy.description_target_length:
            potential += self.policy.potential_short_description
        if self.has_weak_opening(episode):
            potential += self.policy.potential_weak_opening
        return potential

    def has_weak_opening(self, episode: Episode) -> bool:
        """True when the opening sentence is a stock intro or uses vague words."""
        opening = episode.opening_sentence.lower()
        if any(opening.lstrip().startswith(opener) for opener in self.vocabulary.weak_openers):
            return True
        return any(word in opening for word in self.vocabulary.vague_words)

    # Rules

    def _check_title_length(self, episode: Episode) -> Iterator[Finding]:
        length = len(episode.title or "")
        if length < self.policy.title_min_length:
            yield (
                Issue(
                    severity=Severity.WARNING,
                    category="Title",
                    message="Title may be too short",
                    suggestion=(
                        "Consider expanding the title to 30-60 characters "
                        "for better SEO and clarity"
                    ),
                ),
                self.policy.title_too_short_penalty,
            )
        if length > self.policy.title_max_length:
            yield (
                Issue(
                    severity=Severity.WARNING,
                    category="Title",
                    message="Title may be too long",
                    suggestion=(
                        "Shorten title to under 100 characters for better display "
                        "across platforms"
                    ),
                ),
                self.policy.title_too_long_penalty,
            )

    def _check_title_generic(self, episode: Episode) -> Iterator[Finding]:
        title = (episode.title or "").lower()
        if any(word.lower() in title for word in self.vocabulary.weak_title_words):
            yield (
                Issue(
                    severity=Severity.INFO,
                    category="Title",
                    message="Title contains generic words",
                    suggestion=(
                        "Replace generic words with specific, compelling keywords "
                        "that describe the content"
                    ),
                ),
                self.policy.title_generic_penalty,
            )

    def _check_description_length(self, episode: Episode) -> Iterator[Finding]:
        length = len(episode.description_text)
        if length < self.policy.description_min_length:
            yield (
                Issue(
                    severity=Severity.CRITICAL,
                    category="Description",
                    message="Description is far too short",
                    suggestion=(
                        f"Current: {length} chars. Add more detail, keywords, "
                        "timestamps, or calls-to-action"
                    ),
                ),
                self.policy.description_too_short_penalty,
            )
        elif length < self.policy.description_target_length:
            yield (
                Issue(
                    severity=Severity.WARNING,
                    category="Description",
                    message="Description could be longer for better SEO",
                    suggestion=(
                        f"Current: {length} chars. Consider adding more context, "
                        "guest info, or key takeaways"
                    ),
                ),
                self.policy.description_below_target_penalty,
            )

    def _check_opening_sentence(self, episode: Episode) -> Iterator[Finding]:
        opening = episode.opening_sentence
        if self._filler_pattern and self._filler_pattern.search(opening.lower()):
            yield (
                Issue(
                    severity=Severity.WARNING,
                    category="Hook",
                    message="First sentence contains filler words",
                    suggestion=(
                        "Remove filler words from the opening to create a stronger, "
                        "more direct introduction"
                    ),
                ),
                self.policy.opening_filler_penalty,
            )
        if len(opening) > self.policy.opening_max_length:
            yield (
                Issue(
                    severity=Severity.INFO,
                    category="Hook",
                    message="First sentence is very long",
                    suggestion=(
                        "Consider breaking the opening into shorter, punchier sentences "
                        "for better readability"
                    ),
                ),
                self.policy.opening_too_long_penalty,
            )

    def _check_episode_number(self, episode: Episode) -> Iterator[Finding]:
        if not episode.episode_number:
            yield (
                Issue(
                    severity=Severity.WARNING,
                    category="Structure",
                    message="Missing episode number",
                    suggestion=(
                        "Add consistent episode numbering for better organization and SEO"
                    ),
                ),
                self.policy.missing_episode_number_penalty,
            )

    def _check_duration(self, episode: Episode) -> Iterator[Finding]:
        if episode.duration_seconds is not None:
            return
        if episode.duration:
            logger.debug(
                "Episode %s has malformed duration %r, treating as unknown",
                episode.id,
                episode.duration,
            )
        yield (
            Issue(
                severity=Severity.INFO,
                category="Metadata",
                message="Missing duration information",
                suggestion=(
                    "Duration helps listeners plan their time and improves "
                    "platform recommendations"
                ),
            ),
            self.policy.missing_duration_penalty,
        )

    def _check_artwork(self, episode: Episode) -> Iterator[Finding]:
        if not episode.has_artwork:
            yield (
                Issue(
                    severity=Severity.INFO,
                    category="Visual",
                    message="No custom episode artwork",
                    suggestion=(
                        "Custom artwork for each episode can improve click-through "
                        "rates and engagement"
                    ),
                ),
                self.policy.missing_artwork_penalty,
            )

    def _check_transcript(self, episode: Episode) -> Iterator[Finding]:
        if not episode.has_transcript:
            yield (
                Issue(
                    severity=Severity.WARNING,
                    category="Accessibility",
                    message="No transcript available",
                    suggestion="Transcripts improve accessibility and SEO significantly",
                ),
                self.policy.missing_transcript_penalty,
            )


_default_evaluator: RuleEvaluator | None = None


def evaluate(episode: Episode, channel: Channel | None = None) -> ScoreResult:
    """Evaluate an episode with the default policy and vocabulary."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = RuleEvaluator()
    return _default_evaluator.evaluate(episode, channel)
