"""Tests for summary generation."""

from bytesummary.generation import BlogSummarizer, MockLLMProvider, parse_summary_response


class TestParseSummaryResponse:
    def test_json_embedded_in_prose(self) -> None:
        text = (
            'Sure! {"brief": "Short.", "detailed": "Long.", '
            '"keyPoints": ["a", "b"], "technologies": ["Rust"]} Hope this helps.'
        )

        summary = parse_summary_response(text, "Title")

        assert summary.kind == "parsed"
        assert summary.brief == "Short."
        assert summary.detailed == "Long."
        assert summary.key_points == ["a", "b"]
        assert summary.technologies == ["Rust"]

    def test_defaults_for_missing_fields(self) -> None:
        summary = parse_summary_response('{"brief": "Short.", "keyPoints": "not a list"}', "Title")

        assert summary.kind == "parsed"
        assert summary.detailed == "Short."
        assert summary.key_points == []
        assert summary.technologies == []

    def test_fenced_json(self) -> None:
        text = '```json\n{"brief": "Fenced.", "detailed": "Fenced detail."}\n```'

        summary = parse_summary_response(text, "Title")

        assert summary.kind == "parsed"
        assert summary.brief == "Fenced."

    def test_long_plain_text(self) -> None:
        text = "x" * 80

        summary = parse_summary_response(text, "Title")

        assert summary.kind == "raw_text"
        assert summary.brief == text
        assert summary.detailed == text

    def test_raw_text_brief_is_truncated(self) -> None:
        text = "y" * 500

        summary = parse_summary_response(text, "Title")

        assert summary.brief == "y" * 300
        assert summary.detailed == text

    def test_code_fences_are_stripped(self) -> None:
        body = "This is a plain prose answer that is comfortably longer than fifty characters."

        summary = parse_summary_response(f"```json\n{body}\n```", "Title")

        assert summary.kind == "raw_text"
        assert summary.detailed == body

    def test_short_invalid_response(self) -> None:
        summary = parse_summary_response("```json\n{not json}\n```", "Title")

        assert summary.kind == "placeholder"
        assert summary.brief == "Summary for: Title"
        assert summary.detailed == "Full summary generation pending."

    def test_non_string_brief(self) -> None:
        summary = parse_summary_response('{"brief": 42}', "Title")

        assert summary.kind == "placeholder"

    def test_placeholder_truncates_title(self) -> None:
        summary = parse_summary_response("", "T" * 150)

        assert summary.brief == "Summary for: " + "T" * 100


class TestBlogSummarizer:
    def test_uses_provider_response(self) -> None:
        summarizer = BlogSummarizer(MockLLMProvider())

        summary = summarizer.summarize("Title", "Some content")

        assert summary.kind == "parsed"
        assert summary.brief == "Mock summary of the article."
        assert summary.key_points == ["First point", "Second point"]

    def test_provider_failure(self) -> None:
        summarizer = BlogSummarizer(MockLLMProvider([RuntimeError("rate limited")]))

        summary = summarizer.summarize("Title", "Some content")

        assert summary.kind == "failed"
        assert summary.brief == "Summary generation failed"
        assert summary.detailed == "Unable to generate summary at this time."
        assert summary.key_points == ["Error occurred during analysis"]
        assert summary.technologies == []

    def test_content_is_truncated_in_prompt(self) -> None:
        provider = MockLLMProvider()
        summarizer = BlogSummarizer(provider)

        summarizer.summarize("Title", "z" * 5000)

        prompt = provider.calls[0]
        assert "z" * 4000 in prompt
        assert "z" * 4001 not in prompt
        assert "Title: Title" in prompt
