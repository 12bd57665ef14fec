"""Static defaults for every optional field of an enhanced resource.

Shared by the backend record mapper and the fallback synthesizer so a
missing value always renders the same way.
"""

from resource_enhancer.core.entities import DifficultyLevel

UNKNOWN_HOST = "unknown"
UNKNOWN_TITLE = "Unknown Resource"
FALLBACK_TITLE_PREFIX = "Resource from "
NO_SUMMARY = "No summary available"
UNKNOWN_READING_TIME = "Unknown"
DEFAULT_DIFFICULTY = DifficultyLevel.BEGINNER
DEFAULT_WORD_COUNT = 0

LEARNING_OBJECTIVES = ["Review the original resource directly to identify its learning goals"]
PRACTICAL_APPLICATIONS = ["Apply the ideas from this resource to your current project milestone"]
NEXT_STEPS = ["Open the original resource and work through it at your own pace"]

SAMPLE_QUESTIONS = [
    "What is this resource about?",
    "How can I access this resource?",
    "Is there an alternative resource covering the same topic?",
]

PROCESSING_ERROR_PITFALL = "Resource could not be processed automatically"
PROCESSING_ERROR_SOLUTION = "Visit the source directly to review its content"
NO_PITFALL = "No specific pitfalls identified"
NO_PITFALL_SOLUTION = "Follow the best practices described in the resource"

MENTOR_GUIDANCE = (
    "Help the learner connect this resource to their project goals and "
    "check their understanding with the suggested questions."
)

# Templates
FALLBACK_OVERVIEW = (
    "This resource could not be processed automatically. "
    "Visit {url} directly to review its content."
)
FALLBACK_CONTENT = "Content unavailable: {error}"
FALLBACK_GUIDANCE = (
    "This resource could not be processed ({error}). "
    "Encourage the learner to open {url} directly and ask about anything unclear."
)
CONCEPT_EXPLANATION = "{concept} is a key concept covered in this resource."
CONCEPT_EXAMPLE = "See the original resource for a worked example of {concept}."

MAPPING_ERROR = "Mapping error: {detail}"
MISSING_RECORD_ERROR = "No enhanced data returned for this resource"
