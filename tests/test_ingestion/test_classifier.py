"""Tests for category detection."""

from bytesummary.ingestion.classifier import detect_category, score_categories


class TestDetectCategory:
    def test_no_keywords_defaults_to_engineering(self) -> None:
        assert detect_category("hello world", "") == "engineering"

    def test_single_winner(self) -> None:
        assert detect_category("pytorch tensorflow", "") == "ml"

    def test_title_counts(self) -> None:
        assert detect_category("hello", "Kubernetes on bare metal") == "infrastructure"

    def test_tie_defaults_to_engineering(self) -> None:
        assert detect_category("kafka kubernetes", "") == "engineering"

    def test_case_insensitive(self) -> None:
        assert detect_category("PYTORCH", "TensorFlow") == "ml"


class TestScoreCategories:
    def test_counts_distinct_keywords(self) -> None:
        scores = score_categories("kafka kafka spark", "")

        assert scores["data"] == 2
        assert scores["ml"] == 0
