"""Episode quality scoring and prioritization."""

from castscore.scoring.costs import estimate_transcript_cost
from castscore.scoring.engine import OptimizationEngine, build_report
from castscore.scoring.models import (
    ChannelReport,
    Issue,
    RankMode,
    ScoreResult,
    Severity,
    TranscriptCostEstimate,
    stars_for,
)
from castscore.scoring.ranker import rank
from castscore.scoring.rules import RuleEvaluator, evaluate

__all__ = [
    "ChannelReport",
    "Issue",
    "OptimizationEngine",
    "RankMode",
    "RuleEvaluator",
    "ScoreResult",
    "Severity",
    "TranscriptCostEstimate",
    "build_report",
    "estimate_transcript_cost",
    "evaluate",
    "rank",
    "stars_for",
]
