"""Transcript generation cost estimates.

Speech-to-text is billed per audio minute. The minute count comes from the
episode duration when it parses; otherwise from the file size, assuming
roughly one megabyte per minute of typical podcast audio; otherwise a flat
half-hour guess.
"""

import math

from castscore.catalog.models import Episode
from castscore.scoring.models import TranscriptCostEstimate

COST_PER_MINUTE_USD = 0.006
BYTES_PER_MINUTE = 1024 * 1024
FALLBACK_MINUTES = 30


def estimate_transcript_cost(
    episode: Episode, cost_per_minute: float = COST_PER_MINUTE_USD
) -> TranscriptCostEstimate:
    """Estimate what transcribing an episode would cost.

    Args:
        episode: Episode to estimate for
        cost_per_minute: Price per audio minute in USD

    Returns:
        TranscriptCostEstimate; ``estimated`` is True unless the duration was known
    """
    seconds = episode.duration_seconds
    if seconds is not None:
        total_minutes = seconds / 60
        return TranscriptCostEstimate(
            minutes=math.ceil(total_minutes),
            cost_usd=total_minutes * cost_per_minute,
            estimated=False,
        )

    if episode.file_size:
        minutes = math.ceil(episode.file_size / BYTES_PER_MINUTE)
        return TranscriptCostEstimate(
            minutes=minutes,
            cost_usd=minutes * cost_per_minute,
            estimated=True,
        )

    return TranscriptCostEstimate(
        minutes=FALLBACK_MINUTES,
        cost_usd=FALLBACK_MINUTES * cost_per_minute,
        estimated=True,
    )
