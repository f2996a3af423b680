"""
Structured-output schemas for the completion endpoint.

The function declarations are what the model is forced to call; the pydantic
models validate whatever arguments actually come back.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .models import Difficulty, ExtractionResult
from ..errors import MalformedModelResponseError


RESUME_INFO_FUNCTION: Dict[str, Any] = {
    "name": "extract_resume_info",
    "description": "Extract candidate information from resume",
    "parameters": {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "email": {"type": "string"},
            "phone": {"type": "string"},
            "role": {"type": "string"},
        },
        "required": ["name"],
    },
}

QUESTIONS_FUNCTION: Dict[str, Any] = {
    "name": "generate_questions",
    "description": "Generate technical interview questions with difficulty levels",
    "parameters": {
        "type": "object",
        "properties": {
            "questions": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "text": {"type": "string"},
                        "difficulty": {"type": "string", "enum": Difficulty.values()},
                    },
                    "required": ["text", "difficulty"],
                },
            }
        },
        "required": ["questions"],
    },
}


class ResumeInfoPayload(BaseModel):
    """Arguments of an ``extract_resume_info`` call."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""

    @field_validator("name", "email", "phone", "role", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # Anything that is not a string carries no usable value
        if isinstance(value, str):
            return value.strip()
        return ""


class QuestionsPayload(BaseModel):
    """Arguments of a ``generate_questions`` call. Items are sanitized later."""
    model_config = ConfigDict(extra="ignore")

    questions: List[Any]

    @field_validator("questions", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> List[Any]:
        return value if isinstance(value, list) else []


def parse_resume_info(args: Dict[str, Any]) -> ExtractionResult:
    """
    Validate ``extract_resume_info`` arguments into an ExtractionResult.

    Raises:
        MalformedModelResponseError: If the arguments do not fit the schema
    """
    try:
        payload = ResumeInfoPayload.model_validate(args)
    except ValidationError as e:
        raise MalformedModelResponseError(f"Invalid resume info payload: {e}") from e
    return ExtractionResult(**payload.model_dump())


def parse_questions(args: Dict[str, Any]) -> List[Any]:
    """
    Validate ``generate_questions`` arguments and return the raw question items.

    Raises:
        MalformedModelResponseError: If the ``questions`` key is absent
    """
    try:
        payload = QuestionsPayload.model_validate(args)
    except ValidationError as e:
        raise MalformedModelResponseError(f"Invalid questions payload: {e}") from e
    return payload.questions
