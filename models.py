"""Data models for the application."""

from dataclasses import dataclass, field, asdict
from typing import List


CATEGORIES = ("technical", "behavioral", "business", "healthcare")


@dataclass
class Question:
    """Practice question in the question bank."""
    text: str
    category: str
    difficulty: str = "medium"
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class SeedResult:
    """Outcome of one seed loader run."""
    collections_created: List[str] = field(default_factory=list)
    questions_inserted: int = 0
    demo_user_created: bool = False

    def is_noop(self) -> bool:
        """Check if the run changed nothing."""
        return not (self.collections_created or self.questions_inserted or self.demo_user_created)
