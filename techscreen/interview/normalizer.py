"""
Best-effort recovery of printable text from uploaded resume content.
"""
import base64
import binascii
import logging
import re

from ..config import ENCODED_SLICE_CHARS, MIN_PRINTABLE_CHARS, PLACEHOLDER_SAMPLE_CHARS

logger = logging.getLogger("normalizer")

_NON_PRINTABLE = re.compile(r"[^\x09\x0A\x0D\x20-\x7E]")
_WHITESPACE = re.compile(r"\s")


def _document_kind(declared_type: str, file_name: str) -> str:
    declared = (declared_type or "").lower()
    name = (file_name or "").lower()
    if declared == "application/pdf" or name.endswith(".pdf"):
        return "PDF"
    if "word" in declared or name.endswith(".docx") or name.endswith(".doc"):
        return "DOCX"
    return declared_type or "binary"


def _placeholder(content: str, declared_type: str, file_name: str) -> str:
    kind = _document_kind(declared_type, file_name)
    return (
        f"This is a {kind} resume file. The content below is base64 encoded. "
        f"Try to infer readable text.\n\n"
        f"Base64 sample (first {PLACEHOLDER_SAMPLE_CHARS} chars):\n"
        f"{content[:PLACEHOLDER_SAMPLE_CHARS]}"
    )


def normalize_text(content, is_encoded: bool = False, declared_type: str = "", file_name: str = "") -> str:
    """
    Turn uploaded content into text the extractors can work on.

    Plain text passes through unchanged. Encoded content is base64-decoded and
    every byte outside printable ASCII (plus tab, newline, carriage return) is
    replaced by a space. If decoding fails or too little printable text comes
    back, a placeholder naming the document type and carrying a prefix of the
    raw payload is returned instead. Never raises.
    """
    if content is None:
        return ""
    if isinstance(content, (bytes, bytearray)):
        if not is_encoded:
            return bytes(content).decode("utf-8", errors="replace")
        content = bytes(content).decode("ascii", errors="ignore")
    if not is_encoded:
        return content

    working = _WHITESPACE.sub("", content[:ENCODED_SLICE_CHARS])
    # Truncation can leave a partial quantum; drop it rather than fail
    working = working[: len(working) - len(working) % 4]
    try:
        decoded = base64.b64decode(working, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning("Base64 decode failed: %s", e)
        return _placeholder(content, declared_type, file_name)

    printable = _NON_PRINTABLE.sub(" ", decoded.decode("latin-1"))
    non_blank = len(_WHITESPACE.sub("", printable))
    if non_blank < MIN_PRINTABLE_CHARS:
        logger.info("Only %d printable characters recovered, using placeholder text", non_blank)
        return _placeholder(content, declared_type, file_name)

    logger.debug("Recovered %d printable characters from encoded upload", non_blank)
    return printable
