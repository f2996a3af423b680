"""
Field extractors for resume text.

The heuristic extractor is a pure pattern matcher over the normalized text.
The model extractor asks the completion endpoint for the same four fields.
Neither one grounds its output; that happens in validation.
"""
import logging
import re
from typing import List

from .models import ExtractionResult
from .prompts import ResumePrompts
from .rules import Rule, first_match
from .schemas import RESUME_INFO_FUNCTION, parse_resume_info

logger = logging.getLogger("extraction")


# =============================================================================
# NAME
# =============================================================================

_NAME_TOKEN = r"[A-Z][a-z'-]+"
_NAME = rf"{_NAME_TOKEN}(?:[ \t]+{_NAME_TOKEN}){{1,2}}"

PLACEHOLDER_NAMES = frozenset({"john doe", "jane doe", "john smith", "jane smith", "jaden smith"})

_SECTION_WORDS = re.compile(
    r"\b(?:resume|cv|curriculum|vitae|application|profile|contact|information|summary|objective|"
    r"experience|education|skills|projects|certifications|awards|interests|references|linkedin|"
    r"github|portfolio)\b",
    re.IGNORECASE,
)


def is_plausible_name(name: str) -> bool:
    if name.lower() in PLACEHOLDER_NAMES:
        return False
    if _SECTION_WORDS.search(name):
        return False
    if not 3 < len(name) < 50:
        return False
    return bool(re.search(r"[A-Z]", name)) and bool(re.search(r"[a-z]", name))


NAME_RULES: List[Rule] = [
    # Name on the very first line
    Rule(re.compile(rf"\A\s*({_NAME})"), is_plausible_name, first_only=True),
    Rule(re.compile(rf"(?i:Full Name|Candidate Name|Name):[ \t]*({_NAME})"), is_plausible_name, first_only=True),
    # Name right before a line break or a contact detail
    Rule(
        re.compile(rf"\b({_NAME})(?=[ \t]*(?:[\r\n]|$|Email|Phone|Contact|@))"),
        is_plausible_name, first_only=True,
    ),
    Rule(re.compile(rf"(?i:Best regards|Sincerely|Regards),\s*({_NAME})"), is_plausible_name, first_only=True),
    Rule(re.compile(rf"(?i:Contact|About Me):\s*({_NAME})"), is_plausible_name, first_only=True),
]


# =============================================================================
# EMAIL
# =============================================================================

PLACEHOLDER_EMAILS = frozenset({
    "example@email.com", "test@email.com", "sample@email.com", "user@email.com",
    "admin@email.com", "contact@email.com", "info@email.com", "hello@email.com",
    "world@email.com",
})

EMAIL_SHAPE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_plausible_email(email: str) -> bool:
    lowered = email.lower()
    if lowered in PLACEHOLDER_EMAILS:
        return False
    if any(word in lowered for word in ("example", "test", "sample")):
        return False
    return len(email) > 5 and bool(EMAIL_SHAPE.match(email))


EMAIL_RULES: List[Rule] = [
    Rule(re.compile(r"\b([A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,})\b"), is_plausible_email),
    Rule(
        re.compile(
            r"\b([A-Za-z0-9._%+-]+@(?:gmail|yahoo|outlook|hotmail|icloud|protonmail)\.[A-Za-z]{2,})\b",
            re.IGNORECASE,
        ),
        is_plausible_email,
    ),
    Rule(re.compile(r"(?i:E-mail|Email|Mail):\s*([A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,})"), is_plausible_email),
]


# =============================================================================
# PHONE
# =============================================================================

PHONE_RULES: List[Rule] = [
    # (123) 456-7890
    Rule(re.compile(r"\(\d{3}\)[ \t]*\d{3}[- \t]?\d{4}(?!\d)"), group=0),
    # 123-456-7890
    Rule(re.compile(r"(?<!\d)\d{3}[- \t]?\d{3}[- \t]?\d{4}(?!\d)"), group=0),
    # +1 123 456 7890
    Rule(re.compile(r"(?<![\d+])\+?\d{1,3}[- \t]?\d{3}[- \t]?\d{3}[- \t]?\d{4}(?!\d)"), group=0),
    # 123.456.7890
    Rule(re.compile(r"(?<!\d)\d{3}\.\d{3}\.\d{4}(?!\d)"), group=0),
]


# =============================================================================
# ROLE
# =============================================================================

COMMON_JOB_TITLES = (
    "Senior Software Engineer", "Software Engineer", "Full Stack Developer", "Full Stack Engineer",
    "Frontend Developer", "Frontend Engineer", "Backend Developer", "Backend Engineer",
    "Web Developer", "Mobile Developer", "iOS Developer", "Android Developer", "Data Scientist",
    "Machine Learning Engineer", "DevOps Engineer", "System Administrator", "Network Engineer",
    "Security Engineer", "Quality Assurance Engineer", "QA Engineer", "Product Manager",
    "Project Manager", "Business Analyst", "UX Designer", "UI Designer", "Graphic Designer",
    "Marketing Manager", "Sales Manager", "HR Manager", "Operations Manager", "Finance Manager",
    "Account Manager", "Customer Success Manager", "Technical Lead", "Team Lead",
    "React Developer", "Node.js Developer", "JavaScript Developer", "Python Developer",
    "Java Developer", ".NET Developer", "Architect", "Consultant", "Analyst", "Specialist",
    "Coordinator", "Associate", "Assistant", "Intern",
)

_ROLE_FILLER = re.compile(
    r"^(?:I am an?|I'm an?|As an?|Working as an?|Position:|Title:|Role:|Current Role:|Job Title:)\s*",
    re.IGNORECASE,
)
_ROLE_TRAILERS = (
    re.compile(r"\s+(?:with|at|for|in)\b.*$"),
    re.compile(r"\s*\|.*$"),
    re.compile(r"\s*[•·▪●].*$"),
    re.compile(r"\s+[-–—]+\s.*$"),
)

_CONTACT_LIKE = re.compile(r"@|://|www\.|\w\.(?:com|io|org|net|dev|me)\b", re.IGNORECASE)

PLACEHOLDER_ROLE_WORDS = frozenset({
    "resume", "cv", "contact", "email", "phone", "address", "summary", "objective", "experience",
    "education", "skills", "projects", "certifications", "awards", "interests", "references",
    "role", "title", "position", "job", "candidate", "applicant",
})


def clean_role(role: str) -> str:
    """Strip leading filler and trailing separators from a role candidate."""
    role = _ROLE_FILLER.sub("", role.strip())
    for trailer in _ROLE_TRAILERS:
        role = trailer.sub("", role)
    return role.strip(" \t,;:.")


def is_plausible_role(role: str) -> bool:
    if not 3 < len(role) < 60:
        return False
    if not re.search(r"[A-Za-z]", role):
        return False
    # Contact lines and links are never titles
    if _CONTACT_LIKE.search(role):
        return False
    return role.lower() not in PLACEHOLDER_ROLE_WORDS


_AT_ORG = r"[ \t]+(?:at|with|for)\b"

ROLE_RULES: List[Rule] = [
    Rule(
        re.compile(r"(?i:Professional Summary|Career Objective|Summary|Objective|Profile|About Me):[ \t]*([^\n\r]+)"),
        is_plausible_role, clean=clean_role,
    ),
    # Short line right under a name-shaped line
    Rule(
        re.compile(rf"^{_NAME}[ \t]*\r?\n[ \t]*([^\n\r]{{4,59}})\r?$", re.MULTILINE),
        is_plausible_role, clean=clean_role,
    ),
    Rule(
        re.compile(
            rf"^[ \t]*(?i:Work Experience|Professional Experience|Employment History|Experience)[ \t]*:?[^\n]*\r?\n"
            rf"[ \t]*([^\n\r]+?)(?={_AT_ORG}|[ \t]*\r?$)",
            re.MULTILINE,
        ),
        is_plausible_role, clean=clean_role,
    ),
    Rule(
        re.compile(
            rf"\b(?i:Current|Present|Recent)\b[^\n]*\r?\n[ \t]*([^\n\r]{{5,50}}?)(?={_AT_ORG}|[ \t]*\r?$)",
            re.MULTILINE,
        ),
        is_plausible_role, clean=clean_role,
    ),
    Rule(
        re.compile(
            r"(?<![A-Za-z])(" + "|".join(re.escape(t) for t in COMMON_JOB_TITLES) + r")\b",
            re.IGNORECASE,
        ),
        is_plausible_role, clean=clean_role,
    ),
    # "<title> at Acme"
    Rule(
        re.compile(r"([^\n\r]{5,50}?)[ \t]+(?:at|with|for)[ \t]+[A-Z][A-Za-z]+"),
        is_plausible_role, clean=clean_role,
    ),
]


# =============================================================================
# EXTRACTORS
# =============================================================================

def extract_name(text: str) -> str:
    return first_match(text, NAME_RULES)


def extract_email(text: str) -> str:
    return first_match(text, EMAIL_RULES)


def extract_phone(text: str) -> str:
    return first_match(text, PHONE_RULES)


def extract_role(text: str) -> str:
    return first_match(text, ROLE_RULES)


def extract_fields(text: str) -> ExtractionResult:
    """Run all four heuristic extractors independently over ``text``."""
    return ExtractionResult(
        name=extract_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        role=extract_role(text),
    )


class ModelFieldExtractor:
    """Asks the completion endpoint for the same four fields."""

    def __init__(self, llm_client):
        self.llm_client = llm_client

    def extract(self, text: str, declared_type: str = "", file_name: str = "",
                is_encoded: bool = False) -> ExtractionResult:
        """
        Extract fields with the model.

        Raises:
            ModelServiceError: If the endpoint fails or returns no usable payload
        """
        args = self.llm_client.generate_function_call(
            ResumePrompts.system_instruction(),
            ResumePrompts.user_message(text, declared_type, file_name, is_encoded),
            RESUME_INFO_FUNCTION,
        )
        result = parse_resume_info(args)
        logger.info("Model extraction: %s", result)
        return result
