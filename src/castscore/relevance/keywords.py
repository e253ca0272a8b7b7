"""Query keyword extraction and topic-cluster expansion."""

import logging
import re

from castscore.config.schema import VocabularyTable

logger = logging.getLogger(__name__)

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
MIN_TOKEN_LENGTH = 3


class KeywordExpander:
    """Turn a free-text question into a keyword set.

    Tokens shorter than three characters and stop words are dropped. Any
    surviving token that triggers a topic cluster pulls in the cluster's
    full term list. Output order is first-seen order so logs and tests
    are reproducible.

    Example:
        >>> KeywordExpander().expand("Favourite guest?")
        ('favourite', 'guest', 'interview', 'conversation', 'chat', 'discussion', 'with')
    """

    def __init__(self, vocabulary: VocabularyTable | None = None) -> None:
        self.vocabulary = vocabulary or VocabularyTable()
        self._stop_words = {word.lower() for word in self.vocabulary.stop_words}
        self._clusters = [
            (
                {trigger.lower() for trigger in cluster.triggers},
                [term.lower() for term in cluster.terms],
            )
            for cluster in self.vocabulary.topic_clusters.values()
        ]

    def tokenize(self, query: str) -> list[str]:
        """Lower-case, strip punctuation and drop short/stop-word tokens."""
        cleaned = _PUNCTUATION_RE.sub("", (query or "").lower())
        return [
            token
            for token in cleaned.split()
            if len(token) >= MIN_TOKEN_LENGTH and token not in self._stop_words
        ]

    def expand(self, query: str) -> tuple[str, ...]:
        """Extract and expand keywords from a query.

        Args:
            query: Free-text question

        Returns:
            Deduplicated keywords; empty when the query carries no signal
        """
        keywords: dict[str, None] = {}
        for token in self.tokenize(query):
            keywords.setdefault(token)
            for triggers, terms in self._clusters:
                if token in triggers:
                    for term in terms:
                        keywords.setdefault(term)

        result = tuple(keywords)
        logger.debug("Expanded query into %d keywords: %s", len(result), ", ".join(result))
        return result


_default_expander: KeywordExpander | None = None


def expand(query: str) -> tuple[str, ...]:
    """Expand a query with the default vocabulary."""
    global _default_expander
    if _default_expander is None:
        _default_expander = KeywordExpander()
    return _default_expander.expand(query)
