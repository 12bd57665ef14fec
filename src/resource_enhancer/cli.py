"""CLI entry point for resource enhancer."""

import asyncio
import json
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml

from resource_enhancer.adapters.backend import HttpResourceBackend
from resource_enhancer.adapters.render import MarkdownResourceRenderer
from resource_enhancer.config import Settings, get_settings
from resource_enhancer.core import MilestoneTracker
from resource_enhancer.use_cases import ResourceEnhancementService

cli = typer.Typer(help="Enhance learning resources and track project milestones.")


@cli.command()
def enhance(
    urls: List[str] = typer.Argument(..., help="Resource URLs to enhance"),
    project_id: Optional[str] = typer.Option(None, "--project-id", help="Project identifier"),
    context: Optional[Path] = typer.Option(None, "--context", help="YAML or JSON project context"),
    output: Optional[Path] = None,
    as_json: bool = typer.Option(False, "--json", help="Write JSON instead of Markdown"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config file"),
) -> None:
    """Send resources to the backend and save the enhanced result."""
    settings = get_settings(config)
    project_context = load_project_context(context)
    asyncio.run(async_enhance(settings, urls, project_context, project_id, output, as_json))


@cli.command()
def milestone(
    project: str,
    index: int,
    total: Optional[int] = typer.Option(None, "--total", help="Number of milestones in the project"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config file"),
) -> None:
    """Mark a project milestone as completed."""
    settings = get_settings(config)
    tracker = MilestoneTracker(settings.progress_dir)

    completed = tracker.mark_completed(project, index)
    print(f"✓ Milestone {index + 1} of '{project}' completed")

    if total:
        print(f"  • Progress: {len(completed)}/{total} ({tracker.progress(project, total):.0%})")
    else:
        print(f"  • Completed milestones: {', '.join(str(i + 1) for i in completed)}")


def app() -> None:
    """CLI entry point."""
    cli()


def load_project_context(path: Optional[Path]) -> Any:
    """Read an opaque project context blob from a YAML or JSON file."""
    if path is None:
        return {}

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix == ".json":
            return json.load(f)
        return yaml.safe_load(f) or {}


async def async_enhance(
    settings: Settings,
    urls: list[str],
    project_context: Any,
    project_id: Optional[str],
    output: Optional[Path],
    as_json: bool,
) -> None:
    """Async implementation of the enhance command."""
    print("\n" + "=" * 70)
    print("📚 RESOURCE ENHANCER")
    print("=" * 70)
    print(f"  • Backend: {settings.backend_url}")
    print(f"  • Resources: {len(urls)}")
    if project_id:
        print(f"  • Project: {project_id}")
    print()

    service = ResourceEnhancementService(HttpResourceBackend(settings))
    result = await service.process_resources(urls, project_context, project_id)

    if as_json:
        document = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    else:
        renderer = MarkdownResourceRenderer(max_concepts=settings.output.max_concepts)
        document = await renderer.render(result, settings.output.heading)

    if output is None:
        timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
        output = settings.output_dir / f"{timestamp}_resources.{'json' if as_json else 'md'}"

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")

    print("\n" + "=" * 70)
    if result.success:
        print("✅ DONE")
    else:
        print("⚠️  DONE WITH FALLBACK DATA")
    print("=" * 70)
    print(f"  • Enhanced: {result.count - result.fallback_count}/{result.count}")
    if result.error:
        print(f"  • Cause: {result.error}")
    print(f"📄 Saved: {output}")
    print()


if __name__ == "__main__":
    app()
