"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class DifficultyLevel(str, Enum):
    """Difficulty of an enhanced resource."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def parse(cls, value: Any) -> "DifficultyLevel":
        """Map a loosely-typed backend value onto the enum, defaulting to Beginner."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            for level in cls:
                if level.value.lower() == normalized:
                    return level
        return cls.BEGINNER


@dataclass(frozen=True)
class KeyConcept:
    """A concept explained by a resource."""

    concept: str
    explanation: str
    example: str

    def to_dict(self) -> dict[str, str]:
        return {
            "concept": self.concept,
            "explanation": self.explanation,
            "example": self.example,
        }


@dataclass(frozen=True)
class Pitfall:
    """A common mistake and how to avoid it."""

    pitfall: str
    solution: str

    def to_dict(self) -> dict[str, str]:
        return {"pitfall": self.pitfall, "solution": self.solution}


@dataclass(frozen=True)
class OriginalData:
    """What was scraped from the source URL."""

    url: str
    title: str
    description: str
    content: str
    scraped_at: datetime
    sections: list[Any] = field(default_factory=list)
    word_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "sections": list(self.sections),
            "wordCount": self.word_count,
            "scrapedAt": self.scraped_at.isoformat(),
        }


@dataclass(frozen=True)
class EnhancedContent:
    """AI-generated pedagogical framing of a resource."""

    title: str
    overview: str
    learning_objectives: list[str]
    key_concepts: list[KeyConcept]
    practical_applications: list[str]
    common_pitfalls: list[Pitfall]
    next_steps: list[str]
    difficulty_level: DifficultyLevel
    estimated_reading_time: str
    original_url: str
    source_title: str
    word_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "overview": self.overview,
            "learningObjectives": list(self.learning_objectives),
            "keyConcepts": [c.to_dict() for c in self.key_concepts],
            "practicalApplications": list(self.practical_applications),
            "commonPitfalls": [p.to_dict() for p in self.common_pitfalls],
            "nextSteps": list(self.next_steps),
            "difficultyLevel": self.difficulty_level.value,
            "estimatedReadingTime": self.estimated_reading_time,
            "originalUrl": self.original_url,
            "sourceTitle": self.source_title,
            "wordCount": self.word_count,
        }


@dataclass(frozen=True)
class MentorContext:
    """Seed data for the mentor chat about one resource."""

    resource_summary: str
    key_topics: list[str]
    sample_questions: list[str]
    key_concepts: list[str]
    mentor_guidance: str
    resource_title: str
    resource_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "resourceSummary": self.resource_summary,
            "keyTopics": list(self.key_topics),
            "sampleQuestions": list(self.sample_questions),
            "keyConcepts": list(self.key_concepts),
            "mentorGuidance": self.mentor_guidance,
            "resourceTitle": self.resource_title,
            "resourceUrl": self.resource_url,
        }


@dataclass(frozen=True)
class EnhancedResource:
    """Canonical, fully-populated record for one source URL.

    ``success`` is False for records synthesized by the fallback path, in
    which case ``error`` names the cause.
    """

    id: str
    original_data: OriginalData
    enhanced_resource: EnhancedContent
    mentor_context: MentorContext
    processed_at: int
    success: bool = True
    error: Optional[str] = None

    @property
    def url(self) -> str:
        return self.original_data.url

    @property
    def is_fallback(self) -> bool:
        return not self.success

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "originalData": self.original_data.to_dict(),
            "enhancedResource": self.enhanced_resource.to_dict(),
            "mentorContext": self.mentor_context.to_dict(),
            "processedAt": self.processed_at,
            "success": self.success,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class BackendReply:
    """A completed HTTP exchange with the processing backend."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class ProcessingResult:
    """Outcome of one enhancement request."""

    success: bool
    enhanced_resources: list[EnhancedResource]
    error: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.enhanced_resources)

    @property
    def fallback_count(self) -> int:
        return sum(1 for r in self.enhanced_resources if r.is_fallback)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "success": self.success,
            "enhancedResources": [r.to_dict() for r in self.enhanced_resources],
            "count": self.count,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
