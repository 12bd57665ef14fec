"""Core domain layer."""

from resource_enhancer.core.entities import (
    BackendReply,
    DifficultyLevel,
    EnhancedContent,
    EnhancedResource,
    KeyConcept,
    MentorContext,
    OriginalData,
    Pitfall,
    ProcessingResult,
)
from resource_enhancer.core.errors import (
    BackendStatusError,
    BackendUnavailableError,
    EnhancementError,
    PayloadParseError,
    PayloadShapeError,
    RecordMappingError,
)
from resource_enhancer.core.interfaces import ResourceBackend, ResourceRenderer
from resource_enhancer.core.milestone_tracker import MilestoneTracker
from resource_enhancer.core.normalization import (
    build_fallback_resource,
    generate_resource_id,
    hostname_label,
    map_backend_resource,
)
from resource_enhancer.core.validation import ResponseShape, ResponseValidator, ValidationResult

__all__ = [
    "BackendReply",
    "DifficultyLevel",
    "EnhancedContent",
    "EnhancedResource",
    "KeyConcept",
    "MentorContext",
    "OriginalData",
    "Pitfall",
    "ProcessingResult",
    "EnhancementError",
    "BackendUnavailableError",
    "BackendStatusError",
    "PayloadParseError",
    "PayloadShapeError",
    "RecordMappingError",
    "ResourceBackend",
    "ResourceRenderer",
    "MilestoneTracker",
    "build_fallback_resource",
    "generate_resource_id",
    "hostname_label",
    "map_backend_resource",
    "ResponseShape",
    "ResponseValidator",
    "ValidationResult",
]
