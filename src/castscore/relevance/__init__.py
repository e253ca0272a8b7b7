"""Query grounding: keyword expansion, relevance scoring and context selection."""

from castscore.relevance.keywords import KeywordExpander, expand
from castscore.relevance.models import ContextDocument, ContextEpisode, RelevanceScore
from castscore.relevance.scorer import RelevanceScorer, score_relevance
from castscore.relevance.selector import ContextSelector, newest_first, select_context
from castscore.relevance.summarizer import summarize

__all__ = [
    "ContextDocument",
    "ContextEpisode",
    "ContextSelector",
    "KeywordExpander",
    "RelevanceScore",
    "RelevanceScorer",
    "expand",
    "newest_first",
    "score_relevance",
    "select_context",
    "summarize",
]
