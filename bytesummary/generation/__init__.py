"""Summary generation."""

from .llm_provider import LLMProvider, MockLLMProvider, OpenAIProvider, create_llm_provider
from .models import BlogSummary
from .summarizer import BlogSummarizer, build_prompt, parse_summary_response

__all__ = [
    "BlogSummarizer",
    "BlogSummary",
    "LLMProvider",
    "MockLLMProvider",
    "OpenAIProvider",
    "build_prompt",
    "create_llm_provider",
    "parse_summary_response",
]
