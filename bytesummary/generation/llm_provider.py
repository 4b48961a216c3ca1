"""LLM provider interface and implementations."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from openai import OpenAI
from rich.console import Console

console = Console()


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate(self, prompt: str, max_tokens: int = 800) -> str:
        """
        Run a single-turn completion.

        Args:
            prompt: User prompt
            max_tokens: Upper bound on generated tokens

        Returns:
            Raw response text

        Raises:
            Exception: Provider errors propagate to the caller
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI (or OpenAI-compatible) chat completion provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model name to use
            base_url: Custom base URL (e.g. a local Ollama endpoint)
        """
        self.client = OpenAI(api_key=api_key, base_url=base_url)
        self.model = model
        self.total_tokens = 0
        self.api_calls = 0

        # Token cost estimates (per 1K tokens)
        self.cost_per_1k_tokens = {
            "gpt-4o": {"input": 0.005, "output": 0.015},
            "gpt-4o-mini": {"input": 0.00015, "output": 0.0006},
            "gpt-3.5-turbo": {"input": 0.001, "output": 0.002},
        }

    def generate(self, prompt: str, max_tokens: int = 800) -> str:
        """Generate text using OpenAI."""
        self.api_calls += 1
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.3,
            max_tokens=max_tokens,
        )

        # Update usage stats
        if response.usage:
            self.total_tokens += response.usage.total_tokens

        return (response.choices[0].message.content or "").strip()

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        estimated_cost = 0.0
        if self.model in self.cost_per_1k_tokens:
            # Rough estimate (assuming 70% input, 30% output)
            input_tokens = int(self.total_tokens * 0.7)
            output_tokens = int(self.total_tokens * 0.3)
            rates = self.cost_per_1k_tokens[self.model]
            estimated_cost = (
                (input_tokens / 1000) * rates["input"] +
                (output_tokens / 1000) * rates["output"]
            )

        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "estimated_cost": estimated_cost,
            "model": self.model,
        }


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing and offline runs.

    Scripted responses are consumed in order; an Exception instance in the
    script is raised instead of returned. Once the script runs out, a
    well-formed summary JSON is returned.
    """

    def __init__(self, responses: Optional[List[Union[str, Exception]]] = None) -> None:
        """Initialize mock provider."""
        self.responses = list(responses or [])
        self.calls: List[str] = []

    def generate(self, prompt: str, max_tokens: int = 800) -> str:
        """Mock text generation."""
        self.calls.append(prompt)

        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response

        return (
            '{"brief": "Mock summary of the article.", '
            '"detailed": "A longer mock summary of the article.", '
            '"keyPoints": ["First point", "Second point"], '
            '"technologies": ["Python"]}'
        )

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": len(self.calls) * 100,
            "api_calls": len(self.calls),
            "estimated_cost": 0.0,
            "model": "mock",
        }


def create_llm_provider(llm_config: Dict) -> LLMProvider:
    """Build the provider selected by configuration, falling back to the mock."""
    provider = llm_config.get("provider")

    if provider == "mock":
        return MockLLMProvider()

    if provider == "openai":
        api_key = llm_config.get("api_key")
        if not api_key:
            console.print("[yellow]Warning: No OpenAI API key found. Using mock LLM provider.[/yellow]")
            return MockLLMProvider()

        return OpenAIProvider(
            api_key=api_key,
            model=llm_config.get("model", "gpt-4o-mini"),
            base_url=llm_config.get("base_url"),
        )

    console.print("[yellow]Warning: Unknown LLM provider. Using mock provider.[/yellow]")
    return MockLLMProvider()
