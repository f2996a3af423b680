import base64

from techscreen.interview.extraction import extract_fields
from techscreen.interview.models import ExtractionResult
from techscreen.interview.normalizer import normalize_text
from techscreen.interview.testing import SAMPLE_RESUME_TEXT, encode_resume


def test_plain_text_passes_through():
    assert normalize_text(SAMPLE_RESUME_TEXT) == SAMPLE_RESUME_TEXT


def test_plain_bytes_are_decoded():
    assert normalize_text(SAMPLE_RESUME_TEXT.encode("utf-8")) == SAMPLE_RESUME_TEXT


def test_none_content():
    assert normalize_text(None, is_encoded=True) == ""


def test_encoded_text_is_recovered():
    text = normalize_text(encode_resume(SAMPLE_RESUME_TEXT), is_encoded=True, declared_type="application/pdf")
    assert "jane.martinez@acme.io" in text
    assert "Jane Martinez" in text


def test_non_printable_bytes_become_spaces():
    raw = b"%PDF-1.4\x00\x01\xff" + SAMPLE_RESUME_TEXT.encode("ascii") + b"\x02\x03"
    text = normalize_text(base64.b64encode(raw).decode("ascii"), is_encoded=True)
    assert text.startswith("%PDF-1.4   ")
    assert "\x00" not in text and "\xff" not in text
    assert "(415) 555-2020" in text


def test_encoded_payload_with_line_breaks():
    encoded = encode_resume(SAMPLE_RESUME_TEXT)
    wrapped = "\n".join(encoded[i:i + 76] for i in range(0, len(encoded), 76))
    assert "jane.martinez@acme.io" in normalize_text(wrapped, is_encoded=True)


def test_undecodable_payload_falls_back_to_placeholder():
    text = normalize_text("%%% definitely not base64 %%%", is_encoded=True, declared_type="application/pdf")
    assert text.startswith("This is a PDF resume file.")
    assert "%%% definitely not base64 %%%" in text


def test_too_little_printable_text_falls_back_to_placeholder():
    payload = base64.b64encode(b"\x00" * 500 + b"Hi").decode("ascii")
    text = normalize_text(payload, is_encoded=True, file_name="cv.docx")
    assert text.startswith("This is a DOCX resume file.")
    assert payload[:50] in text


def test_placeholder_yields_no_heuristic_fields():
    text = normalize_text("%%% not base64 %%%", is_encoded=True, declared_type="application/pdf")
    assert extract_fields(text) == ExtractionResult()
