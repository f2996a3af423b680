"""
Topic policy for generated interview questions.
"""
from dataclasses import dataclass
from typing import Tuple

from .models import Question


DEFAULT_ALLOWED_TOPICS: Tuple[str, ...] = (
    "react", "hook", "jsx", "component", "state", "context", "redux", "router", "vite", "next.js",
    "node", "express", "event loop", "async", "promise", "middleware", "jwt", "authentication",
    "authorization", "postgres", "mongodb", "orm", "prisma", "nest.js", "error", "logging",
    "stream", "cluster",
)

DEFAULT_DENIED_TOPICS: Tuple[str, ...] = (
    "python", "java", "c#", "c++", "go ", "golang", "rust", "devops", "kubernetes", "docker",
    "ml", "machine learning", "data science", "android", "ios", "swift", "kotlin", "php",
    "laravel", "ruby", "rails", "hadoop", "spark", "scala", "angular", "vue", "svelte",
    "system design",
)

DEFAULT_FALLBACK_QUESTIONS: Tuple[Question, ...] = (
    Question("What problems do React keys solve? Show a case that breaks without keys.", "easy"),
    Question("In a React component, how does useEffect differ from useLayoutEffect? When do you prefer each?", "easy"),
    Question("Walk through the Node.js event loop phases and microtasks vs macrotasks.", "medium"),
    Question("Design Express middleware for request validation and error handling.", "medium"),
    Question("Optimize a React list of 10k items: techniques and trade-offs.", "hard"),
    Question("Scale a Node.js API under heavy load: clustering, workers, and bottlenecks.", "hard"),
)

SUBJECT_AREAS = """
- React Hooks: useState, useEffect, useMemo, useCallback, useContext, useReducer, useRef, custom hooks
- Component Architecture: functional components, Higher-Order Components, render props
- State Management: Context API, Redux, Zustand
- Performance Optimization: React.memo, code splitting, lazy loading, virtualization
- React Router: nested routes, route parameters, navigation
- React Internals: Virtual DOM, reconciliation, fiber architecture
- Node.js Runtime: event loop, async/await, promises, streams, cluster
- Express & APIs: middleware, error handling, logging, JWT authentication and authorization
- Persistence from Node.js: Postgres, MongoDB, Prisma and other ORMs
""".strip()


@dataclass(frozen=True)
class TopicPolicy:
    """Allow/deny vocabulary plus the fallback bank used to fill empty slots."""
    allowed: Tuple[str, ...] = DEFAULT_ALLOWED_TOPICS
    denied: Tuple[str, ...] = DEFAULT_DENIED_TOPICS
    fallback: Tuple[Question, ...] = DEFAULT_FALLBACK_QUESTIONS
    subject_areas: str = SUBJECT_AREAS

    def is_on_topic(self, text: str) -> bool:
        """Denied vocabulary disqualifies outright; otherwise some allowed term must appear."""
        lowered = (text or "").lower()
        if any(term in lowered for term in self.denied):
            return False
        return any(term in lowered for term in self.allowed)


DEFAULT_POLICY = TopicPolicy()
