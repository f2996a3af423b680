"""LLM infrastructure."""

from .client import VertexRestClient

__all__ = ["VertexRestClient"]
