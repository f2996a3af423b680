import pytest

from techscreen.config import DIFFICULTY_PLAN
from techscreen.errors import MalformedModelResponseError
from techscreen.interview.models import Question
from techscreen.interview.policy import DEFAULT_FALLBACK_QUESTIONS, DEFAULT_POLICY, TopicPolicy
from techscreen.interview.questions import (
    QuestionGenerator, coerce_questions, fill_quota, sanitize_questions,
)
from techscreen.interview.testing import MockLLMClient, make_question_items

FALLBACK_EASY = [q for q in DEFAULT_FALLBACK_QUESTIONS if q.difficulty == "easy"]
FALLBACK_MEDIUM = [q for q in DEFAULT_FALLBACK_QUESTIONS if q.difficulty == "medium"]
FALLBACK_HARD = [q for q in DEFAULT_FALLBACK_QUESTIONS if q.difficulty == "hard"]


def test_coerce_drops_unusable_items_and_repairs_difficulty():
    items = [
        "not a dict",
        {"text": "", "difficulty": "easy"},
        {"text": 5, "difficulty": "easy"},
        {"text": "  How do React hooks work?  ", "difficulty": " HARD "},
        {"text": "Explain Express middleware.", "difficulty": "extreme"},
        {"text": "What is JSX?"},
    ]
    assert coerce_questions(items) == [
        Question("How do React hooks work?", "hard"),
        Question("Explain Express middleware.", "hard"),
        Question("What is JSX?", "hard"),
    ]


def test_coerce_beyond_plan_defaults_to_easy():
    items = make_question_items(*[("React question %d" % i, "bogus") for i in range(8)])
    assert [q.difficulty for q in coerce_questions(items)][6:] == ["easy", "easy"]


def test_policy_denied_vocabulary_wins():
    assert DEFAULT_POLICY.is_on_topic("How does React state update?")
    assert not DEFAULT_POLICY.is_on_topic("How would you port a React app to Vue?")
    assert not DEFAULT_POLICY.is_on_topic("Tell me about yourself.")


def test_fallback_bank_is_on_topic():
    assert all(DEFAULT_POLICY.is_on_topic(q.text) for q in DEFAULT_FALLBACK_QUESTIONS)


def test_no_model_questions_yields_fallback_bank():
    question_set = sanitize_questions([])
    assert list(question_set) == list(DEFAULT_FALLBACK_QUESTIONS)
    assert question_set.difficulties == list(DIFFICULTY_PLAN)


def test_mixed_model_output_is_filtered_and_backfilled():
    on_easy = ("Explain how React hooks manage state between renders.", "easy")
    on_hard = ("How does the Node.js event loop schedule promise callbacks?", "hard")
    items = make_question_items(
        ("What is a Python decorator and how does it keep state?", "easy"),
        on_easy,
        ("How do Java generics relate to React component props?", "easy"),
        ("How do Kubernetes pods restart a Node.js process?", "easy"),
        ("Tell me about yourself.", "easy"),
        ("Design a Docker build pipeline for a Node.js service.", "hard"),
        on_hard,
        ("Compare Vue and Svelte reactivity.", "hard"),
    )
    question_set = sanitize_questions(items)
    assert list(question_set) == [
        Question(*on_easy),
        FALLBACK_EASY[0],
        FALLBACK_MEDIUM[0],
        FALLBACK_MEDIUM[1],
        Question(*on_hard),
        FALLBACK_HARD[0],
    ]


def test_duplicate_model_questions_count_once():
    items = make_question_items(
        ("What does a React component re-render on?", "easy"),
        ("what does a  react component re-render on?", "easy"),
    )
    questions = list(sanitize_questions(items))
    assert questions[0].text == "What does a React component re-render on?"
    assert questions[1] == FALLBACK_EASY[0]


def test_fallback_already_used_by_model_is_skipped():
    items = make_question_items((FALLBACK_EASY[0].text, "easy"))
    questions = list(sanitize_questions(items))
    assert questions[:2] == [FALLBACK_EASY[0], FALLBACK_EASY[1]]
    assert len({q.text for q in questions}) == 6


def test_exhausted_bank_synthesizes_distinct_on_topic_questions():
    policy = TopicPolicy(fallback=())
    question_set = sanitize_questions([], policy)
    texts = [q.text for q in question_set]
    assert question_set.difficulties == list(DIFFICULTY_PLAN)
    assert len(set(texts)) == 6
    assert all(policy.is_on_topic(t) for t in texts)


def test_sanitizing_is_idempotent():
    items = make_question_items(
        ("Explain how React hooks manage state between renders.", "easy"),
        ("How do you handle errors in Express?", "medium"),
        ("Tell me about yourself.", "hard"),
    )
    first = sanitize_questions(items)
    second = sanitize_questions(first.to_dict()["questions"])
    assert list(second) == list(first)

    synthesized = sanitize_questions([], TopicPolicy(fallback=()))
    assert list(sanitize_questions(synthesized.to_dict()["questions"], TopicPolicy(fallback=()))) == list(synthesized)


def test_fill_quota_follows_custom_plan():
    result = fill_quota([], ["hard", "easy"], DEFAULT_FALLBACK_QUESTIONS)
    assert result == [FALLBACK_HARD[0], FALLBACK_EASY[0]]


def test_fill_quota_caps_each_difficulty():
    candidates = [Question(f"React easy {i}", "easy") for i in range(4)]
    result = fill_quota(candidates, DIFFICULTY_PLAN, DEFAULT_FALLBACK_QUESTIONS)
    assert [q.text for q in result[:2]] == ["React easy 0", "React easy 1"]
    assert result[2:] == FALLBACK_MEDIUM + FALLBACK_HARD


def test_generator_requests_question_function():
    items = make_question_items(("Explain React context.", "easy"))
    client = MockLLMClient([{"questions": items}])
    assert QuestionGenerator(client).generate("Frontend Developer", "Built dashboards") == items

    request = client.request_history[0]
    assert request["function"] == "generate_questions"
    assert request["kwargs"] == {"temperature": 0.7}
    assert "Frontend Developer" in request["user_message"]


def test_generator_rejects_payload_without_questions():
    with pytest.raises(MalformedModelResponseError):
        QuestionGenerator(MockLLMClient([{}])).generate("Backend Engineer")


def test_generator_treats_non_list_questions_as_empty():
    assert QuestionGenerator(MockLLMClient([{"questions": "none"}])).generate("Backend Engineer") == []
