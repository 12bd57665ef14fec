"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class BackendConfig:
    """Resource-processing backend settings."""
    base_url: str = "http://localhost:8000"
    endpoint: str = "/api/process-resources"
    timeout: float = 60.0


@dataclass
class PathsConfig:
    """Path settings."""
    output_dir: Path = Path("enhanced")
    progress_dir: Path = Path("progress")


@dataclass
class OutputConfig:
    """Rendering settings."""
    heading: str = "Enhanced Resources"
    max_concepts: int = 5


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    backend_token: Optional[str] = None

    # Config sections
    backend: BackendConfig = field(default_factory=BackendConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def backend_url(self) -> str:
        return self.backend.base_url.rstrip("/") + self.backend.endpoint

    @property
    def backend_timeout(self) -> float:
        return self.backend.timeout

    @property
    def output_dir(self) -> Path:
        return self.paths.output_dir

    @property
    def progress_dir(self) -> Path:
        return self.paths.progress_dir


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(backend_token=os.getenv("RESOURCE_BACKEND_TOKEN"))

    # Apply YAML config
    if "backend" in config:
        for key, value in config["backend"].items():
            setattr(settings.backend, key, value)

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "output" in config:
        for key, value in config["output"].items():
            setattr(settings.output, key, value)

    # Environment wins over the file so deployments can repoint the backend
    base_url = os.getenv("RESOURCE_BACKEND_URL")
    if base_url:
        settings.backend.base_url = base_url

    return settings
