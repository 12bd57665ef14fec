"""Backend adapters."""

from resource_enhancer.adapters.backend.http_backend import HttpResourceBackend

__all__ = ["HttpResourceBackend"]
