"""Normalization of backend resource records into enhanced resources."""

import random
import string
import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

from resource_enhancer.core import defaults
from resource_enhancer.core.entities import (
    DifficultyLevel,
    EnhancedContent,
    EnhancedResource,
    KeyConcept,
    MentorContext,
    OriginalData,
    Pitfall,
)
from resource_enhancer.core.errors import RecordMappingError

IdFactory = Callable[[], str]

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_resource_id() -> str:
    """Timestamp plus random suffix; unique in practice, not guaranteed."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"resource_{_now_ms()}_{suffix}"


def hostname_label(url: str) -> str:
    """Return the hostname of ``url`` or ``"unknown"`` if it has none."""
    try:
        hostname = urlsplit(url).hostname
    except (ValueError, TypeError, AttributeError):
        return defaults.UNKNOWN_HOST
    return hostname or defaults.UNKNOWN_HOST


def build_fallback_resource(
    url: str,
    error: str,
    *,
    id_factory: IdFactory = generate_resource_id,
) -> EnhancedResource:
    """Build the "could not be processed" record for ``url``.

    The ``error`` text is embedded verbatim in the mentor guidance and the
    original content so the cause stays inspectable downstream.
    """
    title = defaults.FALLBACK_TITLE_PREFIX + hostname_label(url)
    processed_at = _now_ms()
    overview = defaults.FALLBACK_OVERVIEW.format(url=url)

    return EnhancedResource(
        id=id_factory(),
        original_data=OriginalData(
            url=url,
            title=title,
            description=overview,
            content=defaults.FALLBACK_CONTENT.format(error=error),
            scraped_at=_to_datetime(processed_at),
            word_count=defaults.DEFAULT_WORD_COUNT,
        ),
        enhanced_resource=EnhancedContent(
            title=title,
            overview=overview,
            learning_objectives=list(defaults.LEARNING_OBJECTIVES),
            key_concepts=[],
            practical_applications=list(defaults.PRACTICAL_APPLICATIONS),
            common_pitfalls=[_pitfall(has_error=True)],
            next_steps=list(defaults.NEXT_STEPS),
            difficulty_level=defaults.DEFAULT_DIFFICULTY,
            estimated_reading_time=defaults.UNKNOWN_READING_TIME,
            original_url=url,
            source_title=title,
            word_count=defaults.DEFAULT_WORD_COUNT,
        ),
        mentor_context=MentorContext(
            resource_summary=overview,
            key_topics=[],
            sample_questions=list(defaults.SAMPLE_QUESTIONS),
            key_concepts=[],
            mentor_guidance=defaults.FALLBACK_GUIDANCE.format(error=error, url=url),
            resource_title=title,
            resource_url=url,
        ),
        processed_at=processed_at,
        success=False,
        error=error,
    )


def map_backend_resource(
    raw: Any,
    *,
    url: Optional[str] = None,
    id_factory: IdFactory = generate_resource_id,
) -> EnhancedResource:
    """Map one loosely-typed backend record onto an ``EnhancedResource``.

    ``url`` is the requested URL and wins over the one in the record. Never
    raises: a record that cannot be mapped comes back as a fallback record.
    """
    try:
        return _map_record(raw, url or "", id_factory)
    except Exception as e:
        resource_url = url or ""
        if not resource_url and isinstance(raw, dict):
            resource_url = _text(raw.get("url"))
        print(f"  ⚠️  Could not map resource {resource_url or '<no url>'}: {e}")
        return build_fallback_resource(
            resource_url,
            defaults.MAPPING_ERROR.format(detail=e),
            id_factory=id_factory,
        )


def _map_record(raw: Any, url: str, id_factory: IdFactory) -> EnhancedResource:
    if not isinstance(raw, dict):
        raise RecordMappingError(f"expected an object, got {type(raw).__name__}")

    block = raw.get("enhanced_content")
    if block is None:
        block = {}
    elif not isinstance(block, dict):
        raise RecordMappingError("'enhanced_content' must be an object")

    resource_url = url or _text(raw.get("url"))
    source_title = _text(raw.get("title")) or defaults.UNKNOWN_TITLE
    title = _text(block.get("enhanced_title")) or source_title
    overview = _text(block.get("summary")) or _text(raw.get("summary")) or defaults.NO_SUMMARY

    objectives = _string_list(block, "learning_objectives", defaults.LEARNING_OBJECTIVES)
    concepts = _key_concepts(block.get("key_concepts"))
    applications = _string_list(block, "practical_applications", defaults.PRACTICAL_APPLICATIONS)
    next_steps = (
        _string_list(block, "next_steps", [])
        or _string_list(block, "key_takeaways", defaults.NEXT_STEPS)
    )
    key_topics = _string_list(block, "key_takeaways", objectives)

    questions = _string_list(block, "follow_up_questions", defaults.SAMPLE_QUESTIONS)[:3]
    questions += defaults.SAMPLE_QUESTIONS[len(questions):]

    has_error = bool(raw.get("error")) or raw.get("success") is False
    processed_at = _processed_at_ms(raw.get("processed_at"))
    sections = raw.get("sections")

    return EnhancedResource(
        id=id_factory(),
        original_data=OriginalData(
            url=resource_url,
            title=source_title,
            description=_text(raw.get("description")) or _text(raw.get("summary")),
            content=_text(raw.get("content")),
            sections=list(sections) if isinstance(sections, list) else [],
            scraped_at=_to_datetime(processed_at),
            word_count=defaults.DEFAULT_WORD_COUNT,
        ),
        enhanced_resource=EnhancedContent(
            title=title,
            overview=overview,
            learning_objectives=objectives,
            key_concepts=concepts,
            practical_applications=applications,
            common_pitfalls=[_pitfall(has_error)],
            next_steps=next_steps,
            difficulty_level=DifficultyLevel.parse(block.get("difficulty_assessment")),
            estimated_reading_time=_reading_time(block.get("estimated_read_time")),
            original_url=resource_url,
            source_title=source_title,
            word_count=defaults.DEFAULT_WORD_COUNT,
        ),
        mentor_context=MentorContext(
            resource_summary=overview,
            key_topics=key_topics,
            sample_questions=questions,
            key_concepts=[c.concept for c in concepts],
            mentor_guidance=_text(block.get("ai_mentor_note")) or defaults.MENTOR_GUIDANCE,
            resource_title=title,
            resource_url=resource_url,
        ),
        processed_at=processed_at,
    )


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _string_list(block: dict, key: str, default: list[str]) -> list[str]:
    """Read a list of strings, falling back to ``default`` when absent or empty."""
    value = block.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list):
        raise RecordMappingError(f"'{key}' must be a list, got {type(value).__name__}")

    # Nested objects and lists are skipped rather than stringified
    items = [
        str(item).strip()
        for item in value
        if isinstance(item, (str, int, float)) and not isinstance(item, bool)
    ]
    items = [item for item in items if item]
    return items or list(default)


def _key_concepts(value: Any) -> list[KeyConcept]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise RecordMappingError(f"'key_concepts' must be a list, got {type(value).__name__}")

    concepts: list[KeyConcept] = []
    for entry in value:
        if isinstance(entry, str):
            name, explanation, example = entry.strip(), "", ""
        elif isinstance(entry, dict):
            name = _text(entry.get("concept"))
            explanation = _text(entry.get("explanation"))
            example = _text(entry.get("example"))
        else:
            raise RecordMappingError(f"unsupported key concept entry: {type(entry).__name__}")

        if not name:
            continue
        concepts.append(KeyConcept(
            concept=name,
            explanation=explanation or defaults.CONCEPT_EXPLANATION.format(concept=name),
            example=example or defaults.CONCEPT_EXAMPLE.format(concept=name),
        ))
    return concepts


def _pitfall(has_error: bool) -> Pitfall:
    # Always exactly one entry; backend pitfalls are not passed through.
    if has_error:
        return Pitfall(defaults.PROCESSING_ERROR_PITFALL, defaults.PROCESSING_ERROR_SOLUTION)
    return Pitfall(defaults.NO_PITFALL, defaults.NO_PITFALL_SOLUTION)


def _reading_time(value: Any) -> str:
    if isinstance(value, bool):
        return defaults.UNKNOWN_READING_TIME
    if isinstance(value, (int, float)):
        return f"{value:g} min"
    return _text(value) or defaults.UNKNOWN_READING_TIME


def _processed_at_ms(value: Any) -> int:
    """Backend timestamps are epoch seconds; unusable values mean now."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return _now_ms()

    try:
        epoch_ms = int(value * 1000)
        _to_datetime(epoch_ms)
    except (OverflowError, OSError, ValueError):
        return _now_ms()
    return epoch_ms


def _now_ms() -> int:
    return int(time.time() * 1000)


def _to_datetime(epoch_ms: int) -> datetime:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
