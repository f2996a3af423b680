import pytest

from techscreen.errors import MalformedModelResponseError, ModelServiceError
from techscreen.interview.models import CandidateProfile
from techscreen.interview.policy import DEFAULT_FALLBACK_QUESTIONS
from techscreen.interview.services import QuestionGenerationService, ResumeExtractionService
from techscreen.interview.testing import (
    SAMPLE_RESUME_TEXT, MockLLMClient, encode_resume, make_question_items,
)


def test_scenario_resume_from_encoded_upload():
    client = MockLLMClient([{"name": "Jane Martinez", "email": "jane.martinez@acme.io",
                             "phone": "", "role": "Senior Frontend Developer"}])
    result = ResumeExtractionService(client).extract(
        encode_resume(SAMPLE_RESUME_TEXT), declared_type="application/pdf", is_encoded=True, file_name="jane.pdf",
    )
    assert result.profile == CandidateProfile(
        name="Jane Martinez",
        email="jane.martinez@acme.io",
        phone="(415) 555-2020",
        role="Software Engineer",
    )
    assert result.needs_user_input is False
    assert result.model_error is None
    assert result.to_dict()["missingFields"] == []


def test_model_request_carries_file_metadata():
    client = MockLLMClient()
    ResumeExtractionService(client).extract(
        encode_resume(SAMPLE_RESUME_TEXT), declared_type="application/pdf", is_encoded=True, file_name="jane.pdf",
    )
    request = client.request_history[0]
    assert request["function"] == "extract_resume_info"
    assert "application/pdf" in request["user_message"]
    assert "jane.pdf" in request["user_message"]


def test_model_fills_a_field_the_patterns_missed():
    text = "Jane Martinez\njane.martinez@acme.io\nI lead platform engineering teams"
    client = MockLLMClient([{"name": "Jane Martinez", "role": "Platform Engineering Lead"}])
    result = ResumeExtractionService(client).extract(text)
    assert result.profile.role == "Platform Engineering Lead"
    assert result.missing_fields == ["phone"]
    assert result.needs_user_input is False


def test_model_failure_degrades_to_heuristic_result():
    client = MockLLMClient([ModelServiceError("Vertex REST error 503: unavailable")])
    result = ResumeExtractionService(client).extract(SAMPLE_RESUME_TEXT)
    assert result.profile.name == "Jane Martinez"
    assert result.profile.email == "jane.martinez@acme.io"
    assert result.model_error == "Vertex REST error 503: unavailable"


def test_malformed_model_response_degrades_too():
    client = MockLLMClient([MalformedModelResponseError("No function call in model response")])
    result = ResumeExtractionService(client).extract("nothing useful here")
    assert result.needs_user_input is True
    assert result.missing_fields == ["name", "email", "role", "phone"]
    assert result.model_error


def test_strict_mode_propagates_model_failure():
    client = MockLLMClient([ModelServiceError("boom")])
    with pytest.raises(ModelServiceError):
        ResumeExtractionService(client, raise_on_model_error=True).extract(SAMPLE_RESUME_TEXT)


def test_undecodable_upload_rejects_hallucinated_fields():
    client = MockLLMClient([{"name": "Alex Rivera", "email": "alex.rivera@gmail.com",
                             "phone": "555-010-9999", "role": "Full Stack Developer"}])
    result = ResumeExtractionService(client).extract(
        "%%% scanned image %%%", declared_type="application/pdf", is_encoded=True,
    )
    assert result.profile == CandidateProfile()
    assert result.needs_user_input is True
    assert result.to_dict() == {
        "name": "", "email": "", "phone": "", "role": "",
        "needsUserInput": True,
        "missingFields": ["name", "email", "role", "phone"],
    }


def test_question_service_returns_six_planned_questions():
    client = MockLLMClient([{"questions": make_question_items(
        ("Explain how React hooks manage state between renders.", "easy"),
        ("Explain Python generators.", "medium"),
    )}])
    question_set = QuestionGenerationService(client).generate("Frontend Developer")
    assert len(question_set) == 6
    assert question_set.difficulties == ["easy", "easy", "medium", "medium", "hard", "hard"]
    assert [q.time_limit for q in question_set] == [20, 20, 60, 60, 120, 120]
    assert list(question_set)[2:] == list(DEFAULT_FALLBACK_QUESTIONS[2:])


def test_question_service_propagates_model_failure():
    client = MockLLMClient([ModelServiceError("timeout")])
    with pytest.raises(ModelServiceError):
        QuestionGenerationService(client).generate("Frontend Developer")
