"""
Data models for the extraction and question pipelines.
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Optional

from ..config import DIFFICULTY_TIME_LIMITS

# Order in which missing fields are reported
PROFILE_FIELDS = ("name", "email", "role", "phone")
# Fields the candidate must supply by hand when extraction cannot ground them
REQUIRED_FIELDS = ("name", "email", "role")


class Difficulty(str, Enum):
    """Valid question difficulties."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def values(cls) -> List[str]:
        return [d.value for d in cls]


@dataclass
class ExtractionResult:
    """Raw field values proposed by one extractor. Nothing here is grounded yet."""
    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class CandidateProfile:
    """Candidate contact data where every non-empty field is grounded in the resume text."""
    name: str = ""
    email: str = ""
    phone: str = ""
    role: str = ""

    def missing_fields(self) -> List[str]:
        """Names of empty fields, in reporting order."""
        return [f for f in PROFILE_FIELDS if not getattr(self, f)]

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class ResumeExtraction:
    """Outcome of one resume extraction request."""
    profile: CandidateProfile
    missing_fields: List[str] = field(default_factory=list)
    needs_user_input: bool = False
    # Set when the model pass failed and only heuristic values were used
    model_error: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        """Wire shape returned to the upload handler."""
        payload: Dict[str, object] = self.profile.to_dict()
        payload["needsUserInput"] = self.needs_user_input
        payload["missingFields"] = list(self.missing_fields)
        return payload


@dataclass(frozen=True)
class Question:
    """A single interview question."""
    text: str
    difficulty: str

    @property
    def time_limit(self) -> int:
        """Seconds the candidate gets to answer."""
        return DIFFICULTY_TIME_LIMITS[self.difficulty]

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "difficulty": self.difficulty}


@dataclass
class QuestionSet:
    """Finalized, quota-exact question sequence."""
    questions: List[Question] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)

    @property
    def difficulties(self) -> List[str]:
        return [q.difficulty for q in self.questions]

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {"questions": [q.to_dict() for q in self.questions]}


@dataclass
class Answer:
    """A timed answer to one question."""
    question_order: int
    answer_text: str
    time_taken: int


@dataclass
class InterviewResult:
    """Everything a reviewer needs once the last question is answered."""
    candidate: CandidateProfile
    questions: List[Question] = field(default_factory=list)
    answers: List[Answer] = field(default_factory=list)

    @property
    def total_time_taken(self) -> int:
        return sum(a.time_taken for a in self.answers)
