"""
Reconciliation of heuristic and model extraction results.

Every merged value is checked again against the source text. A value that
looks like a known model default, or that cannot be traced back to the text,
is dropped to "".
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Pattern

from .extraction import EMAIL_SHAPE, extract_phone
from .models import (
    CandidateProfile, ExtractionResult, PROFILE_FIELDS, REQUIRED_FIELDS, ResumeExtraction,
)

logger = logging.getLogger("validation")


FAKE_NAME_PATTERNS: Tuple[Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"^(john|jane)\s+(doe|smith)$",
    r"^(jaden|alex|sam|taylor|jordan|casey|morgan|riley|avery|quinn)\s+"
    r"(doe|smith|johnson|williams|brown|jones|garcia|miller|davis)$",
    r"^(candidate|applicant|user|test|example|sample)\s+(name|user|person)$",
    r"^(mr|mrs|ms|dr)\.?\s+(doe|smith|test|example)$",
))

FAKE_EMAIL_PATTERNS: Tuple[Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"^(example|test|sample|user|admin|contact|info|hello|world|candidate|applicant)@",
    r"^.*@(example|test|sample|fake|dummy|temp|placeholder)\.",
))

FAKE_ROLE_PATTERNS: Tuple[Pattern, ...] = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"^(example|test|sample|fake|dummy|temp|placeholder)\s+(role|position|title|job)$",
    r"^(candidate|applicant|user|employee|worker|staff|person)$",
    r"^(position|title|role|job|occupation|profession)$",
    r"^(unknown|not specified|to be determined|tbd|n/a)$",
))

# Addresses on these domains are easy to invent, so they must appear verbatim
PUBLIC_EMAIL_DOMAIN = re.compile(r"@(gmail|yahoo|outlook|hotmail)\.com$", re.IGNORECASE)

STOPWORDS = frozenset({
    "the", "and", "or", "of", "in", "at", "to", "for", "with", "by", "from", "on", "as", "is",
    "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can", "this", "that", "these",
    "those", "a", "an",
})


@dataclass(frozen=True)
class GroundedFieldValidator:
    """
    Reject a value if it matches a known placeholder, otherwise keep it only
    when ``is_grounded(value, source_text)`` holds.
    """
    field: str
    is_grounded: Callable[[str, str], bool]
    placeholders: Tuple[Pattern, ...] = ()
    is_well_formed: Optional[Callable[[str], bool]] = None

    def validate(self, value: str, source_text: str) -> str:
        if not value:
            return ""
        if self.is_well_formed is not None and not self.is_well_formed(value):
            logger.debug("Rejected %s %r: malformed", self.field, value)
            return ""
        for pattern in self.placeholders:
            if pattern.search(value):
                logger.debug("Rejected %s %r: placeholder pattern %s", self.field, value, pattern.pattern)
                return ""
        if not self.is_grounded(value, source_text or ""):
            logger.debug("Rejected %s %r: not found in source text", self.field, value)
            return ""
        return value


def _any_token_in_text(value: str, text: str) -> bool:
    lowered = text.lower()
    return any(token.lower() in lowered for token in value.split())


def _email_grounded(email: str, text: str) -> bool:
    lowered = text.lower()
    if PUBLIC_EMAIL_DOMAIN.search(email):
        return email.lower() in lowered
    local, _, domain = email.lower().partition("@")
    # Ignore the TLD, it would match almost any text
    labels = domain.split(".")[:-1]
    tokens = [t for t in re.split(r"[^a-z0-9]+", local) + labels if len(t) > 2]
    return any(t in lowered for t in tokens)


def _phone_grounded(phone: str, text: str) -> bool:
    # Only survives when the phone pattern finds the same value in the text
    return extract_phone(text) == phone


def _role_grounded(role: str, text: str) -> bool:
    lowered = text.lower()
    for token in role.split():
        token = token.lower()
        if len(token) > 2 and token not in STOPWORDS and token in lowered:
            return True
    return False


NAME_VALIDATOR = GroundedFieldValidator("name", _any_token_in_text, FAKE_NAME_PATTERNS)
EMAIL_VALIDATOR = GroundedFieldValidator(
    "email", _email_grounded, FAKE_EMAIL_PATTERNS, is_well_formed=lambda v: bool(EMAIL_SHAPE.match(v)),
)
PHONE_VALIDATOR = GroundedFieldValidator("phone", _phone_grounded)
ROLE_VALIDATOR = GroundedFieldValidator("role", _role_grounded, FAKE_ROLE_PATTERNS)

VALIDATORS = {
    "name": NAME_VALIDATOR,
    "email": EMAIL_VALIDATOR,
    "phone": PHONE_VALIDATOR,
    "role": ROLE_VALIDATOR,
}


def merge_results(heuristic: ExtractionResult, model: Optional[ExtractionResult]) -> ExtractionResult:
    """Per field: the heuristic value wins when present, the model only fills gaps."""
    model = model or ExtractionResult()
    return ExtractionResult(**{
        f: getattr(heuristic, f) or getattr(model, f) or ""
        for f in PROFILE_FIELDS
    })


def reconcile(heuristic: ExtractionResult,
              model: Optional[ExtractionResult],
              source_text: str) -> ResumeExtraction:
    """
    Merge both extractor outputs and ground every field in ``source_text``.

    Args:
        heuristic: Output of the pattern extractor
        model: Output of the model extractor, or None if it was unavailable
        source_text: Normalized text both extractors ran on

    Returns:
        ResumeExtraction with the grounded profile and missing-field diagnostics
    """
    merged = merge_results(heuristic, model)
    logger.debug("Merged info before validation: %s", merged)

    profile = CandidateProfile(**{
        f: VALIDATORS[f].validate(getattr(merged, f), source_text)
        for f in PROFILE_FIELDS
    })
    missing = profile.missing_fields()
    needs_user_input = any(f in REQUIRED_FIELDS for f in missing)
    logger.info("Final info after validation: %s (missing: %s)", profile, missing)

    return ResumeExtraction(
        profile=profile,
        missing_fields=missing,
        needs_user_input=needs_user_input,
    )
