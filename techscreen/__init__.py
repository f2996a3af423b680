"""
Techscreen: automated technical screening.

Extracts grounded candidate details from uploaded resumes and builds
quota-exact, topic-constrained interview question sets with an LLM.
"""

__version__ = "1.0.0"

# Main entry points
from .interview.services import ResumeExtractionService, QuestionGenerationService
from .interview.models import CandidateProfile, Question, QuestionSet

__all__ = [
    "ResumeExtractionService", "QuestionGenerationService",
    "CandidateProfile", "Question", "QuestionSet",
]
