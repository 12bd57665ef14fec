"""Persistent milestone completion per project."""

import hashlib
import re
from datetime import date
from pathlib import Path

import yaml


class MilestoneTracker:
    """Track completed project milestones as one YAML file per project."""

    def __init__(self, storage_dir: Path) -> None:
        self.storage_dir = storage_dir
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def is_completed(self, project: str, index: int) -> bool:
        """Check if milestone ``index`` of ``project`` is completed."""
        return index in self.completed_milestones(project)

    def mark_completed(self, project: str, index: int) -> list[int]:
        """Mark a milestone completed and return the updated indices."""
        if index < 0:
            raise ValueError("Milestone index cannot be negative")

        completed = self.completed_milestones(project)
        if index not in completed:
            completed = sorted(completed + [index])
            self._save(project, completed)
        return completed

    def completed_milestones(self, project: str) -> list[int]:
        """Completed milestone indices, sorted."""
        path = self._get_progress_path(project)
        if not path.exists():
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(f"⚠️  Warning: Could not read progress for {project}: {e}")
            return []

        completed = data.get("completed", []) if isinstance(data, dict) else []
        return sorted({i for i in completed if isinstance(i, int) and i >= 0})

    def progress(self, project: str, total: int) -> float:
        """Share of ``total`` milestones completed, 0.0 to 1.0."""
        if total <= 0:
            return 0.0
        done = sum(1 for i in self.completed_milestones(project) if i < total)
        return done / total

    def reset(self, project: str) -> None:
        """Forget all completed milestones of ``project``."""
        path = self._get_progress_path(project)
        if path.exists():
            path.unlink()

    def _save(self, project: str, completed: list[int]) -> None:
        progress = {
            "project": project,
            "completed": completed,
            "updated": date.today().isoformat(),
        }
        with open(self._get_progress_path(project), "w", encoding="utf-8") as f:
            yaml.dump(progress, f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    def _get_progress_path(self, project: str) -> Path:
        """Get path for a project's progress file."""
        safe_title = re.sub(r'[^\w\s-]', '', project)
        safe_title = re.sub(r'[-\s]+', '-', safe_title).strip("-")[:50]

        # Titles can collide after sanitizing
        title_hash = hashlib.md5(project.encode()).hexdigest()[:8]

        return self.storage_dir / f"{safe_title or 'project'}_{title_hash}.yaml"
