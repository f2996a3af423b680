"""Interview system components.

This module contains the resume extraction and question generation pipelines,
plus the session that times a candidate's answers.
"""

# Data models
from .models import (
    CandidateProfile, ExtractionResult, ResumeExtraction,
    Difficulty, Question, QuestionSet, Answer, InterviewResult,
)

# Pipeline stages
from .normalizer import normalize_text
from .extraction import extract_fields, ModelFieldExtractor
from .validation import GroundedFieldValidator, merge_results, reconcile
from .policy import TopicPolicy, DEFAULT_POLICY
from .questions import QuestionGenerator, coerce_questions, fill_quota, sanitize_questions

# Service classes
from .services import ResumeExtractionService, QuestionGenerationService, build_llm_client

# Answer timing
from .session import InterviewSession

__all__ = [
    # Data models
    "CandidateProfile", "ExtractionResult", "ResumeExtraction",
    "Difficulty", "Question", "QuestionSet", "Answer", "InterviewResult",

    # Pipeline stages
    "normalize_text", "extract_fields", "ModelFieldExtractor",
    "GroundedFieldValidator", "merge_results", "reconcile",
    "TopicPolicy", "DEFAULT_POLICY",
    "QuestionGenerator", "coerce_questions", "fill_quota", "sanitize_questions",

    # Services
    "ResumeExtractionService", "QuestionGenerationService", "build_llm_client",

    # Session
    "InterviewSession",
]
