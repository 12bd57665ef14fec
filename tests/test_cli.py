"""Tests for the command line interface."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from resource_enhancer.cli import cli, load_project_context
from resource_enhancer.core import BackendReply

runner = CliRunner()


def write_config(tmpdir: str) -> Path:
    config_path = Path(tmpdir) / "config.yaml"
    config_path.write_text(
        f"paths:\n  progress_dir: {tmpdir}/progress\n  output_dir: {tmpdir}/out\n",
        encoding="utf-8",
    )
    return config_path


def test_milestone_command() -> None:
    """Test marking milestones from the command line."""
    with TemporaryDirectory() as tmpdir:
        config_path = write_config(tmpdir)

        result = runner.invoke(cli, ["milestone", "Habit Tracker", "1", "--config", str(config_path)])
        assert result.exit_code == 0
        assert "Milestone 2 of 'Habit Tracker' completed" in result.output

        result = runner.invoke(
            cli, ["milestone", "Habit Tracker", "0", "--total", "4", "--config", str(config_path)]
        )
        assert result.exit_code == 0
        assert "2/4 (50%)" in result.output


def test_enhance_command_writes_json() -> None:
    """Test the enhance command saves a JSON document even when the backend fails."""
    with TemporaryDirectory() as tmpdir:
        config_path = write_config(tmpdir)
        output = Path(tmpdir) / "result.json"

        with patch("resource_enhancer.cli.HttpResourceBackend") as mock_backend_class:
            mock_backend = AsyncMock()
            mock_backend.submit.return_value = BackendReply(503, "Service Unavailable")
            mock_backend_class.return_value = mock_backend

            result = runner.invoke(
                cli,
                [
                    "enhance", "https://a.com", "https://b.com",
                    "--json", "--output", str(output), "--config", str(config_path),
                ],
            )

        assert result.exit_code == 0
        assert "Backend error: 503" in result.output

        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["success"] is False
        assert document["count"] == 2
        assert [r["originalData"]["url"] for r in document["enhancedResources"]] == [
            "https://a.com",
            "https://b.com",
        ]


def test_enhance_command_writes_markdown_to_output_dir() -> None:
    """Test Markdown is the default format."""
    with TemporaryDirectory() as tmpdir:
        config_path = write_config(tmpdir)

        with patch("resource_enhancer.cli.HttpResourceBackend") as mock_backend_class:
            mock_backend = AsyncMock()
            mock_backend.submit.return_value = BackendReply(
                200, '{"enhanced_resources": [{"url": "https://a.com", "title": "A"}]}'
            )
            mock_backend_class.return_value = mock_backend

            result = runner.invoke(cli, ["enhance", "https://a.com", "--config", str(config_path)])

        assert result.exit_code == 0
        files = list((Path(tmpdir) / "out").glob("*_resources.md"))
        assert len(files) == 1
        assert "## [A](https://a.com)" in files[0].read_text(encoding="utf-8")


def test_load_project_context() -> None:
    """Test context files in YAML and JSON."""
    with TemporaryDirectory() as tmpdir:
        yaml_path = Path(tmpdir) / "context.yaml"
        yaml_path.write_text("goal: Learn Rust\nlevel: 2\n", encoding="utf-8")
        json_path = Path(tmpdir) / "context.json"
        json_path.write_text('{"goal": "Learn Go"}', encoding="utf-8")

        assert load_project_context(None) == {}
        assert load_project_context(yaml_path) == {"goal": "Learn Rust", "level": 2}
        assert load_project_context(json_path) == {"goal": "Learn Go"}
