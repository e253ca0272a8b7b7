"""Configuration schema, loading and logging for Castscore."""

from castscore.config.manager import ConfigManager
from castscore.config.schema import (
    GlobalConfig,
    ScoringPolicy,
    SelectionPolicy,
    TopicCluster,
    VocabularyTable,
)

__all__ = [
    "ConfigManager",
    "GlobalConfig",
    "ScoringPolicy",
    "SelectionPolicy",
    "TopicCluster",
    "VocabularyTable",
]
