"""
Ordered pattern rules: try each pattern in turn, first accepted candidate wins.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Pattern


def _accept_any(value: str) -> bool:
    return bool(value)


@dataclass(frozen=True)
class Rule:
    """One extraction pattern and the checks its candidates must pass."""
    pattern: Pattern
    accept: Callable[[str], bool] = _accept_any
    # Capture group holding the value; 0 means the whole match
    group: int = 1
    clean: Optional[Callable[[str], str]] = None
    # Only the first match is a candidate; a rejected one ends the rule
    first_only: bool = False

    def candidates(self, text: str) -> Iterable[str]:
        for match in self.pattern.finditer(text):
            value = match.group(self.group)
            if value is not None:
                value = value.strip()
                if self.clean is not None:
                    value = self.clean(value)
                yield value
            if self.first_only:
                return


def first_match(text: str, rules: Iterable[Rule]) -> str:
    """
    Evaluate ``rules`` in order against ``text``.

    Returns the first candidate accepted by its rule's filter, or "" when no
    rule produces one.
    """
    if not text:
        return ""
    for rule in rules:
        for value in rule.candidates(text):
            if rule.accept(value):
                return value
    return ""
