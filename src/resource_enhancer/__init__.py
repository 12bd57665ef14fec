"""Normalize AI-enhanced learning resources from an unreliable backend."""

__version__ = "0.1.0"
