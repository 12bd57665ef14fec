"""Tests for core entities."""

from datetime import datetime, timezone

import pytest

from resource_enhancer.core import (
    BackendReply,
    DifficultyLevel,
    ProcessingResult,
    build_fallback_resource,
    map_backend_resource,
)


def test_difficulty_parse() -> None:
    """Test difficulty values are matched case-insensitively."""
    assert DifficultyLevel.parse("Advanced") is DifficultyLevel.ADVANCED
    assert DifficultyLevel.parse(" intermediate ") is DifficultyLevel.INTERMEDIATE
    assert DifficultyLevel.parse("expert") is DifficultyLevel.BEGINNER
    assert DifficultyLevel.parse(None) is DifficultyLevel.BEGINNER
    assert DifficultyLevel.parse(3) is DifficultyLevel.BEGINNER


def test_backend_reply_ok() -> None:
    """Test 2xx detection."""
    assert BackendReply(200, "").ok
    assert BackendReply(204, "").ok
    assert not BackendReply(301, "").ok
    assert not BackendReply(500, "").ok


def test_resource_is_frozen() -> None:
    """Test resources cannot be modified after creation."""
    resource = build_fallback_resource("https://a.com", "boom")

    with pytest.raises(AttributeError):
        resource.success = True  # type: ignore[misc]


def test_resource_to_dict_uses_wire_names() -> None:
    """Test serialized resources use the camelCase names consumers expect."""
    resource = map_backend_resource(
        {
            "url": "https://a.com",
            "title": "A",
            "summary": "S",
            "processed_at": 1700000000,
            "enhanced_content": {"key_concepts": ["Closures"]},
        },
        id_factory=lambda: "resource_1",
    )

    data = resource.to_dict()

    assert data["id"] == "resource_1"
    assert data["processedAt"] == 1700000000000
    assert data["success"] is True
    assert "error" not in data
    assert data["originalData"]["url"] == "https://a.com"
    assert data["originalData"]["wordCount"] == 0
    assert data["originalData"]["scrapedAt"] == datetime(
        2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
    ).isoformat()
    assert data["enhancedResource"]["overview"] == "S"
    assert data["enhancedResource"]["difficultyLevel"] == "Beginner"
    assert data["enhancedResource"]["keyConcepts"][0]["concept"] == "Closures"
    assert len(data["mentorContext"]["sampleQuestions"]) == 3


def test_processing_result_counts() -> None:
    """Test count and fallback_count."""
    result = ProcessingResult(
        success=True,
        enhanced_resources=[
            map_backend_resource({"url": "https://a.com"}),
            build_fallback_resource("https://b.com", "boom"),
        ],
    )

    assert result.count == 2
    assert result.fallback_count == 1

    data = result.to_dict()
    assert data["count"] == 2
    assert data["enhancedResources"][1]["error"] == "boom"
    assert "error" not in data
