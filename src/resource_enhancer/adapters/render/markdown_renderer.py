"""Markdown rendering of enhanced resources."""

from resource_enhancer.core import EnhancedResource, ProcessingResult, ResourceRenderer


class MarkdownResourceRenderer(ResourceRenderer):
    """Render a processing result as a Markdown document."""

    def __init__(self, max_concepts: int = 5) -> None:
        self.max_concepts = max_concepts

    async def render(self, result: ProcessingResult, heading: str = "Enhanced Resources") -> str:
        """Generate markdown for every resource in the result."""
        if not result.enhanced_resources:
            return f"# {heading}\n\nNo resources were submitted."

        lines = [
            f"# 📚 {heading}",
            "",
            f"Resources: {result.count}",
        ]

        if result.fallback_count:
            lines.append(f"Could not be processed: {result.fallback_count}")
        if result.error:
            lines.append(f"Backend problem: {result.error}")
        lines.append("")

        for resource in result.enhanced_resources:
            lines.extend(self._format_resource(resource))

        return "\n".join(lines)

    def _format_resource(self, resource: EnhancedResource) -> list[str]:
        """Format single resource."""
        content = resource.enhanced_resource
        lines = [
            f"## [{content.title}]({resource.url})",
            "",
            f"**Difficulty:** {content.difficulty_level.value} | "
            f"**Reading time:** {content.estimated_reading_time}",
            "",
        ]

        if resource.is_fallback:
            lines.extend([f"> ⚠️ {resource.error}", ""])

        lines.extend([content.overview, ""])

        lines.extend(self._bullets("Learning objectives", content.learning_objectives))

        if content.key_concepts:
            lines.extend(["**Key concepts:**", ""])
            for concept in content.key_concepts[:self.max_concepts]:
                lines.append(f"- **{concept.concept}**: {concept.explanation}")
            lines.append("")

        lines.extend(self._bullets("Practical applications", content.practical_applications))

        pitfall = content.common_pitfalls[0]
        lines.extend([f"**Watch out for:** {pitfall.pitfall} ({pitfall.solution})", ""])

        lines.extend(self._bullets("Next steps", content.next_steps))
        lines.extend(self._bullets("Ask your mentor", resource.mentor_context.sample_questions))

        lines.append("---")
        lines.append("")

        return lines

    def _bullets(self, title: str, items: list[str]) -> list[str]:
        lines = [f"**{title}:**", ""]
        lines.extend(f"- {item}" for item in items)
        lines.append("")
        return lines
