"""Infrastructure components for the techscreen system.

This module contains low-level technical components that provide
foundational capabilities for the extraction and question pipelines.
"""

# LLM infrastructure
from .llm import VertexRestClient

__all__ = [
    # LLM client
    "VertexRestClient"
]
