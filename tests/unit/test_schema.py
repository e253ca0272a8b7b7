"""Tests for configuration schema models."""

import pytest
from pydantic import ValidationError

from castscore.config.schema import (
    VOCABULARY_VERSION,
    GlobalConfig,
    ScoringPolicy,
    SelectionPolicy,
    TopicCluster,
    VocabularyTable,
)


class TestVocabularyTable:
    """Tests for the shared word lists."""

    def test_versioned(self) -> None:
        assert VocabularyTable().version == VOCABULARY_VERSION

    def test_default_lists(self) -> None:
        vocabulary = VocabularyTable()
        assert "podcast" in vocabulary.weak_title_words
        assert "you know" in vocabulary.filler_words
        assert "welcome to" in vocabulary.weak_openers
        assert "stuff" in vocabulary.vague_words
        assert "the" in vocabulary.stop_words
        assert set(vocabulary.topic_clusters) == {"interview", "hospitality", "floral"}

    def test_interview_cluster(self) -> None:
        cluster = VocabularyTable().topic_clusters["interview"]
        assert "talk" in cluster.triggers
        assert "with" in cluster.terms

    def test_defaults_are_independent(self) -> None:
        first = VocabularyTable()
        first.stop_words.append("zzz")
        assert "zzz" not in VocabularyTable().stop_words

    def test_cluster_requires_terms(self) -> None:
        with pytest.raises(ValidationError):
            TopicCluster(triggers=["x"])  # type: ignore[call-arg]


class TestPolicies:
    """Tests for policy defaults."""

    def test_scoring_defaults(self) -> None:
        policy = ScoringPolicy()
        assert policy.title_min_length == 30
        assert policy.title_max_length == 100
        assert policy.description_too_short_penalty == 25
        assert policy.missing_transcript_penalty == 15
        assert policy.potential_missing_transcript == 40

    def test_negative_penalty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringPolicy(title_too_short_penalty=-1)

    def test_selection_defaults(self) -> None:
        policy = SelectionPolicy()
        assert (policy.cap_min, policy.cap_max, policy.min_selected) == (15, 25, 10)
        assert (policy.description_limit, policy.transcript_limit) == (300, 600)

    def test_global_config_defaults(self) -> None:
        config = GlobalConfig()
        assert config.log_level == "INFO"
        assert config.workers == 4

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(log_level="LOUD")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "field",
        [
            "potential_missing_transcript",
            "potential_short_description",
            "potential_weak_opening",
        ],
    )
    def test_negative_potential_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ScoringPolicy(**{field: -100})

    @pytest.mark.parametrize(
        "field",
        [
            "title_match_weight",
            "description_match_weight",
            "transcript_occurrence_weight",
            "interview_title_bonus",
            "interview_description_bonus",
            "long_transcript_bonus",
            "long_transcript_chars",
        ],
    )
    def test_negative_selection_weight_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            SelectionPolicy(**{field: -50})

    def test_nested_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(selection={"title_match_weight": -50})  # type: ignore[arg-type]
