import pytest

from techscreen.errors import InterviewStateError
from techscreen.interview.models import CandidateProfile, QuestionSet
from techscreen.interview.policy import DEFAULT_FALLBACK_QUESTIONS
from techscreen.interview.session import InterviewSession

CANDIDATE = CandidateProfile(name="Jane Martinez", email="jane.martinez@acme.io",
                             phone="(415) 555-2020", role="Software Engineer")


@pytest.fixture
def session():
    return InterviewSession(CANDIDATE, QuestionSet(list(DEFAULT_FALLBACK_QUESTIONS)))


def test_time_limits_follow_difficulty(session):
    limits = []
    while not session.is_complete:
        limits.append(session.time_limit)
        session.record_answer("answer", session.time_limit)
    assert limits == [20, 20, 60, 60, 120, 120]


def test_time_taken_is_limit_minus_remaining(session):
    answer = session.record_answer("  Keys identify list items.  ", 12)
    assert answer.time_taken == 8
    assert answer.answer_text == "Keys identify list items."
    assert answer.question_order == 0
    assert session.current_index == 1


def test_remaining_time_is_clamped(session):
    assert session.record_answer("", -3).time_taken == 20
    assert session.record_answer("fast", 99).time_taken == 0
    assert session.record_answer("half", 30.9).time_taken == 30


def test_timeout_records_empty_answer(session):
    answer = session.record_answer(None, 0)
    assert answer.answer_text == ""
    assert answer.time_taken == 20


def test_result_requires_every_answer(session):
    session.record_answer("one", 10)
    with pytest.raises(InterviewStateError):
        session.result()


def test_completed_session(session):
    for _ in range(6):
        session.record_answer("done", 0)
    assert session.is_complete
    assert session.current_question is None

    result = session.result()
    assert result.candidate == CANDIDATE
    assert result.total_time_taken == 20 + 20 + 60 + 60 + 120 + 120

    with pytest.raises(InterviewStateError):
        session.record_answer("extra", 0)
    with pytest.raises(InterviewStateError):
        session.time_limit


def test_empty_question_set_is_rejected():
    with pytest.raises(InterviewStateError):
        InterviewSession(CANDIDATE, QuestionSet([]))


def test_records_for_persistence(session):
    session.record_answer("Keys identify list items.", 5)
    records = session.to_records()
    assert records["candidate"] == {
        "name": "Jane Martinez",
        "email": "jane.martinez@acme.io",
        "phone": "(415) 555-2020",
        "role_applied": "Software Engineer",
    }
    assert records["questions"][4] == {
        "question_text": DEFAULT_FALLBACK_QUESTIONS[4].text,
        "difficulty": "hard",
        "time_limit": 120,
        "question_order": 4,
    }
    assert records["answers"] == [
        {"answer_text": "Keys identify list items.", "time_taken": 15, "question_order": 0},
    ]
