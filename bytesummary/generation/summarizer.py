"""Blog summary generation with a defensive response parser."""

import json
import re
from typing import Any, List

from rich.console import Console

from .llm_provider import LLMProvider
from .models import BlogSummary

console = Console()

MAX_PROMPT_CONTENT = 4000
MIN_RAW_TEXT_LENGTH = 50
RAW_BRIEF_LENGTH = 300

JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
CODE_FENCE_RE = re.compile(r"```json\n?|\n?```")

PROMPT_TEMPLATE = """Summarize this tech blog article in JSON format.

Title: {title}

Content: {content}

Return ONLY this JSON (no other text):
{{"brief":"2-3 sentence summary","detailed":"detailed summary","keyPoints":["point1","point2","point3"],"technologies":["tech1","tech2"]}}"""

FAILED_SUMMARY = BlogSummary(
    brief="Summary generation failed",
    detailed="Unable to generate summary at this time.",
    key_points=["Error occurred during analysis"],
    technologies=[],
    kind="failed",
)


def build_prompt(title: str, content: str) -> str:
    """Embed the title and truncated content in the summary prompt."""
    return PROMPT_TEMPLATE.format(title=title, content=content[:MAX_PROMPT_CONTENT])


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else json.dumps(item) for item in value if item is not None]


def parse_summary_response(text: str, title: str) -> BlogSummary:
    """
    Turn a free-text model response into a summary.

    Tries, in order: the first brace-delimited JSON object with a string
    "brief"; the raw text with code fences removed, if it is long enough;
    a placeholder naming the article.
    """
    text = text or ""

    match = JSON_OBJECT_RE.search(text)
    if match:
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            console.print(f"[yellow]JSON parse error: {e}. Text: {text[:100]!r}[/yellow]")
            parsed = None

        if isinstance(parsed, dict) and isinstance(parsed.get("brief"), str) and parsed["brief"]:
            brief = parsed["brief"]
            detailed = parsed.get("detailed")
            return BlogSummary(
                brief=brief,
                detailed=detailed if isinstance(detailed, str) and detailed else brief,
                key_points=_string_list(parsed.get("keyPoints")),
                technologies=_string_list(parsed.get("technologies")),
                kind="parsed",
            )

    clean_text = CODE_FENCE_RE.sub("", text).strip()
    if len(clean_text) > MIN_RAW_TEXT_LENGTH:
        return BlogSummary(
            brief=clean_text[:RAW_BRIEF_LENGTH],
            detailed=clean_text,
            kind="raw_text",
        )

    return BlogSummary(
        brief=f"Summary for: {(title or '')[:100]}",
        detailed="Full summary generation pending.",
        kind="placeholder",
    )


class BlogSummarizer:
    """Summarize articles through an LLM provider. Never raises."""

    def __init__(self, llm_provider: LLMProvider, max_tokens: int = 800) -> None:
        """
        Initialize summarizer.

        Args:
            llm_provider: Provider used for completions
            max_tokens: Token budget per summary
        """
        self.llm_provider = llm_provider
        self.max_tokens = max_tokens

    def summarize(self, title: str, content: str) -> BlogSummary:
        """Summarize an article, degrading instead of failing."""
        title = title or ""
        try:
            console.print(f"[dim]Calling AI for: {title[:50]}[/dim]")
            text = self.llm_provider.generate(build_prompt(title, content or ""), max_tokens=self.max_tokens)
        except Exception as e:
            console.print(f"[red]AI summary error for '{title[:50]}': {e}[/red]")
            return FAILED_SUMMARY.model_copy(deep=True)

        return parse_summary_response(text, title)
