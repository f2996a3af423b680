"""
Service classes for the two pipelines: resume extraction and question generation.
"""
import logging
from typing import Optional, Union

from .extraction import ModelFieldExtractor, extract_fields
from .models import QuestionSet, ResumeExtraction
from .normalizer import normalize_text
from .policy import DEFAULT_POLICY, TopicPolicy
from .questions import QuestionGenerator, sanitize_questions
from .validation import reconcile
from ..config import Config
from ..errors import ModelServiceError
from ..infrastructure.llm import VertexRestClient

logger = logging.getLogger("services")


def build_llm_client(config: Config) -> VertexRestClient:
    """Create the completion endpoint client from configuration."""
    return VertexRestClient(
        project=config.google_cloud_project,
        location=config.vertex_location,
        model=config.model_name,
        credentials_json=config.google_application_credentials,
        timeout=config.llm_timeout,
    )


class ResumeExtractionService:
    """Normalizes an upload, runs both extractors and grounds the merged result."""

    def __init__(self, llm_client, raise_on_model_error: bool = False):
        self.model_extractor = ModelFieldExtractor(llm_client)
        self.raise_on_model_error = raise_on_model_error

    def extract(self,
                content: Union[str, bytes],
                declared_type: str = "",
                is_encoded: bool = False,
                file_name: str = "") -> ResumeExtraction:
        """
        Extract a grounded candidate profile from an uploaded resume.

        Args:
            content: Plain text, or a base64 payload when ``is_encoded``
            declared_type: MIME type reported by the uploader
            is_encoded: Whether ``content`` is an opaque encoded document
            file_name: Original file name, used as a hint only

        Returns:
            ResumeExtraction; ``model_error`` is set when the model pass failed
            and the profile rests on heuristic values alone

        Raises:
            ModelServiceError: Only when constructed with ``raise_on_model_error``
        """
        logger.info("Parsing resume, type: %s, name: %s, encoded: %s", declared_type, file_name, is_encoded)
        text = normalize_text(content, is_encoded=is_encoded, declared_type=declared_type, file_name=file_name)

        heuristic = extract_fields(text)
        logger.info("Heuristic first pass: %s", heuristic)

        model = None
        model_error: Optional[str] = None
        try:
            model = self.model_extractor.extract(text, declared_type, file_name, is_encoded)
        except ModelServiceError as e:
            logger.error("Model extraction failed: %s", e)
            if self.raise_on_model_error:
                raise
            model_error = str(e)

        result = reconcile(heuristic, model, text)
        result.model_error = model_error
        if result.needs_user_input:
            logger.info("Candidate must complete fields manually: %s", result.missing_fields)
        return result


class QuestionGenerationService:
    """Produces a quota-exact question set for an interview."""

    def __init__(self, llm_client, policy: TopicPolicy = DEFAULT_POLICY):
        self.policy = policy
        self.generator = QuestionGenerator(llm_client, policy)

    def generate(self, role: str, resume_context: str = "") -> QuestionSet:
        """
        Generate and sanitize six questions.

        Raises:
            ModelServiceError: If the model call fails; there is no silent fallback here
        """
        items = self.generator.generate(role, resume_context)
        question_set = sanitize_questions(items, self.policy)
        logger.info("Generated questions: %s", [q.to_dict() for q in question_set])
        return question_set
