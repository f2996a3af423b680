"""
Timed walk through a finalized question set.
"""
import logging
from typing import Any, Dict, List, Optional

from .models import Answer, CandidateProfile, InterviewResult, Question, QuestionSet
from ..errors import InterviewStateError

logger = logging.getLogger("session")


class InterviewSession:
    """Tracks the current question and the time spent on each answer."""

    def __init__(self, candidate: CandidateProfile, questions: QuestionSet):
        if not len(questions):
            raise InterviewStateError("Cannot start an interview without questions")
        self.candidate = candidate
        self.questions: List[Question] = list(questions)
        self.answers: List[Answer] = []

    @property
    def current_index(self) -> int:
        return len(self.answers)

    @property
    def is_complete(self) -> bool:
        return self.current_index >= len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        if self.is_complete:
            return None
        return self.questions[self.current_index]

    @property
    def time_limit(self) -> int:
        """Seconds allowed for the current question."""
        question = self.current_question
        if question is None:
            raise InterviewStateError("Interview is already complete")
        return question.time_limit

    def record_answer(self, answer_text: str, seconds_remaining: float) -> Answer:
        """
        Store the answer to the current question and advance.

        Args:
            answer_text: What the candidate typed; empty when the timer ran out
            seconds_remaining: Timer value when the answer was submitted

        Returns:
            The recorded Answer
        """
        question = self.current_question
        if question is None:
            raise InterviewStateError("All questions have already been answered")

        limit = question.time_limit
        remaining = max(0, min(limit, int(seconds_remaining)))
        answer = Answer(
            question_order=self.current_index,
            answer_text=(answer_text or "").strip(),
            time_taken=limit - remaining,
        )
        self.answers.append(answer)
        logger.info("Answer %d recorded after %ds (limit %ds)", answer.question_order + 1, answer.time_taken, limit)
        return answer

    def result(self) -> InterviewResult:
        if not self.is_complete:
            raise InterviewStateError(
                f"Interview still has {len(self.questions) - self.current_index} unanswered question(s)"
            )
        return InterviewResult(candidate=self.candidate, questions=list(self.questions), answers=list(self.answers))

    def to_records(self) -> Dict[str, Any]:
        """Plain records for the persistence layer."""
        candidate = self.candidate
        return {
            "candidate": {
                "name": candidate.name,
                "email": candidate.email,
                "phone": candidate.phone,
                "role_applied": candidate.role,
            },
            "questions": [
                {
                    "question_text": q.text,
                    "difficulty": q.difficulty,
                    "time_limit": q.time_limit,
                    "question_order": idx,
                }
                for idx, q in enumerate(self.questions)
            ],
            "answers": [
                {
                    "answer_text": a.answer_text,
                    "time_taken": a.time_taken,
                    "question_order": a.question_order,
                }
                for a in self.answers
            ],
        }
