"""Keyword-based category detection."""

from typing import Dict, List

from ..config.constants import DEFAULT_CATEGORY

CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "ml": [
        "machine learning", "ml", "ai", "artificial intelligence", "neural network",
        "deep learning", "model", "training", "inference", "pytorch", "tensorflow",
        "llm", "gpt", "transformer",
    ],
    "infrastructure": [
        "infrastructure", "kubernetes", "k8s", "docker", "container", "cloud", "aws",
        "gcp", "azure", "serverless", "microservices", "scalability", "reliability",
    ],
    "data": [
        "data", "database", "sql", "nosql", "analytics", "pipeline", "etl", "warehouse",
        "lake", "streaming", "kafka", "spark", "hadoop",
    ],
    "mobile": ["mobile", "ios", "android", "swift", "kotlin", "react native", "flutter", "app"],
    "web": [
        "web", "frontend", "react", "javascript", "typescript", "css", "html", "browser",
        "performance", "ui", "ux",
    ],
}


def score_categories(content: str, title: str) -> Dict[str, int]:
    """Number of distinct keywords per category found in the text."""
    text = f"{content} {title}".lower()
    return {
        category: sum(1 for keyword in keywords if keyword in text)
        for category, keywords in CATEGORY_KEYWORDS.items()
    }


def detect_category(content: str, title: str) -> str:
    """
    Pick the category with the strictly highest keyword score.

    A tie for first place, or no keyword hits at all, yields the default
    "engineering" category.
    """
    scores = score_categories(content or "", title or "")
    max_score = max(scores.values())
    if max_score == 0:
        return DEFAULT_CATEGORY

    leaders = [category for category, score in scores.items() if score == max_score]
    if len(leaders) > 1:
        return DEFAULT_CATEGORY
    return leaders[0]
