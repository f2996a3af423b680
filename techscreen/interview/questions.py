"""
Question generation and the deterministic repair step that follows it.

The model is asked for six questions but may return any number, on any
topic, in any difficulty mix. ``sanitize_questions`` always returns exactly
the planned six, filling gaps from the fallback bank.
"""
import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..config import DIFFICULTY_PLAN
from .models import Difficulty, Question, QuestionSet
from .policy import DEFAULT_POLICY, TopicPolicy
from .prompts import QuestionPrompts
from .schemas import QUESTIONS_FUNCTION, parse_questions

logger = logging.getLogger("question_generation")


def _key(text: str) -> str:
    return " ".join(text.split()).lower()


def coerce_questions(items: Iterable[Any], plan: Sequence[str] = DIFFICULTY_PLAN) -> List[Question]:
    """
    Turn raw model items into Questions.

    Items without a non-empty string ``text`` are dropped. An invalid or
    missing difficulty becomes the one planned for the item's position.
    """
    valid = Difficulty.values()
    questions = []
    for idx, item in enumerate(items or []):
        if not isinstance(item, dict):
            continue
        text = item.get("text")
        if not isinstance(text, str) or not text.strip():
            continue
        difficulty = item.get("difficulty")
        difficulty = difficulty.strip().lower() if isinstance(difficulty, str) else ""
        if difficulty not in valid:
            difficulty = plan[idx] if idx < len(plan) else Difficulty.EASY.value
        questions.append(Question(text=text.strip(), difficulty=difficulty))
    return questions


def synthesize_question(difficulty: str, ordinal: int) -> Question:
    """Last-resort question for a slot nothing else could fill."""
    article = "an" if difficulty[:1] in "aeiou" else "a"
    return Question(
        text=f"Explain a core React or Node.js concept suitable for {article} {difficulty} question (#{ordinal}).",
        difficulty=difficulty,
    )


def fill_quota(candidates: Sequence[Question],
               plan: Sequence[str],
               fallback: Sequence[Question]) -> List[Question]:
    """
    Build exactly ``len(plan)`` questions whose difficulties follow ``plan``.

    Candidates are used first, in order, capped per difficulty at the number
    of slots that difficulty has. Empty slots take the next unused fallback of
    the same difficulty whose text is not already in the output, then a
    synthesized question. No two output questions share text.
    """
    required = Counter(plan)
    buckets: Dict[str, List[Question]] = {d: [] for d in required}
    reserved = set()
    for question in candidates:
        key = _key(question.text)
        bucket = buckets.get(question.difficulty)
        if bucket is None or key in reserved or len(bucket) >= required[question.difficulty]:
            continue
        bucket.append(question)
        reserved.add(key)

    used_fallback = set()
    ordinals: Counter = Counter()
    result: List[Question] = []
    for difficulty in plan:
        ordinals[difficulty] += 1
        picked: Optional[Question] = None
        if buckets[difficulty]:
            picked = buckets[difficulty].pop(0)
        else:
            for idx, candidate in enumerate(fallback):
                if idx in used_fallback or candidate.difficulty != difficulty:
                    continue
                if _key(candidate.text) in reserved:
                    continue
                used_fallback.add(idx)
                picked = candidate
                break
        if picked is None:
            picked = synthesize_question(difficulty, ordinals[difficulty])
            while _key(picked.text) in reserved:
                ordinals[difficulty] += 1
                picked = synthesize_question(difficulty, ordinals[difficulty])
            logger.warning("Fallback bank exhausted for %s, synthesized a question", difficulty)
        reserved.add(_key(picked.text))
        result.append(picked)
    return result


def sanitize_questions(items: Iterable[Any],
                       policy: TopicPolicy = DEFAULT_POLICY,
                       plan: Sequence[str] = DIFFICULTY_PLAN) -> QuestionSet:
    """Coerce, topic-filter and backfill raw model items into a finalized set."""
    coerced = coerce_questions(items, plan)
    on_topic = [q for q in coerced if policy.is_on_topic(q.text)]
    logger.info("Model questions: %d usable, %d on topic", len(coerced), len(on_topic))
    return QuestionSet(fill_quota(on_topic, plan, policy.fallback))


class QuestionGenerator:
    """Requests a raw question set from the completion endpoint."""

    def __init__(self, llm_client, policy: TopicPolicy = DEFAULT_POLICY):
        self.llm_client = llm_client
        self.policy = policy

    def generate(self, role: str, resume_context: str = "") -> List[Any]:
        """
        Ask the model for six questions.

        Returns:
            Raw question items exactly as the model produced them

        Raises:
            ModelServiceError: If the endpoint fails or returns no usable payload
        """
        logger.info("Generating questions for role: %s", role or "(unspecified)")
        args = self.llm_client.generate_function_call(
            QuestionPrompts.system_instruction(self.policy.subject_areas),
            QuestionPrompts.user_message(role, resume_context),
            QUESTIONS_FUNCTION,
            temperature=0.7,
        )
        items = parse_questions(args)
        logger.debug("Model returned %d question items", len(items))
        return items
