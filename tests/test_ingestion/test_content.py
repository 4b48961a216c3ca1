"""Tests for article text extraction."""

from bytesummary.ingestion.content import extract_article_content, extract_title

PAGE = """
<html>
<head><title> Scaling Search </title><style>.a { color: red; }</style></head>
<body>
<header>Site header</header>
<nav>Menu</nav>
<p>Hello   <b>world</b></p>
<script>var tracking = true;</script>
<footer>Copyright</footer>
</body>
</html>
"""


class TestExtractArticleContent:
    def test_removes_chrome_and_tags(self) -> None:
        content = extract_article_content(PAGE)

        assert "Hello world" in content
        for chrome in ("Menu", "tracking", "Copyright", "Site header", "color: red"):
            assert chrome not in content
        assert "<" not in content

    def test_truncates(self) -> None:
        assert len(extract_article_content("<p>" + "a" * 10000 + "</p>")) == 8000

    def test_empty(self) -> None:
        assert extract_article_content("") == ""
        assert extract_article_content(None) == ""


class TestExtractTitle:
    def test_title(self) -> None:
        assert extract_title(PAGE) == "Scaling Search"

    def test_missing(self) -> None:
        assert extract_title("<p>No title</p>") is None
