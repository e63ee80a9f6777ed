"""Three-stage question matcher.

A query is compared against every stored question after both are passed
through :func:`normalize`:

1. **Exact** – the normalized strings are equal.
2. **Containment** – one normalized string is a substring of the other.
3. **Fuzzy** – the closest question by :func:`edit_distance`, accepted only
   when the distance is within a fraction of the longer string's length.

Stages run in that order and the first hit wins.  Within a stage the corpus
is scanned front to back, so earlier entries win ties.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .corpus import QAEntry

logger = logging.getLogger(__name__)


#: Default fraction of the longer normalized length a fuzzy hit may differ by.
FUZZY_THRESHOLD = 0.4

APPROXIMATE_SUFFIX = "\n\n(Respuesta aproximada basada en coincidencia de texto)"

NOT_FOUND_MESSAGE = (
    "No encontré una respuesta precisa — intenta escribir la pregunta con más "
    "palabras clave."
)

_PUNCTUATION_RE = re.compile(r"[¿?!.:,;\"'()\-]")
_WHITESPACE_RE = re.compile(r"\s+")


class MatchStage(str, Enum):
    """Which stage of the lookup produced the answer."""

    EXACT = "exact"
    CONTAINMENT = "containment"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of :func:`match`."""

    stage: MatchStage
    entry: Optional[QAEntry] = None
    index: Optional[int] = None
    #: Edit distance of the fuzzy candidate; ``None`` for other stages.
    distance: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.stage is not MatchStage.NONE

    def render(self) -> str:
        """Return the user-facing answer text for this result."""
        if self.entry is None:
            return NOT_FOUND_MESSAGE
        if self.stage is MatchStage.FUZZY:
            return self.entry.answer + APPROXIMATE_SUFFIX
        return self.entry.answer


def normalize(text: Optional[str]) -> str:
    """Lower-case *text*, blank out punctuation and collapse whitespace.

    ``None`` normalizes to the empty string.  Accented letters are kept as
    they are, so ``"Qué"`` becomes ``"qué"``.
    """
    if text is None:
        return ""
    text = text.lower()
    text = _PUNCTUATION_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def edit_distance(a: Optional[str], b: Optional[str]) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    Insertions, deletions and substitutions each cost 1.  Only two rows of the
    table are kept, sized by the shorter operand.
    """
    a = a or ""
    b = b or ""
    if not a:
        return len(b)
    if not b:
        return len(a)

    if len(a) < len(b):
        a, b = b, a

    previous: List[int] = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, start=1):
            insert = current[j - 1] + 1
            delete = previous[j] + 1
            replace = previous[j - 1] + (char_a != char_b)
            current[j] = min(insert, delete, replace)
        previous = current
    return previous[len(b)]


def match(
    corpus: Sequence[QAEntry],
    query: Optional[str],
    *,
    threshold: float = FUZZY_THRESHOLD,
) -> MatchResult:
    """Run the three-stage lookup of *query* against *corpus*.

    Args:
        corpus: Ordered question/answer entries.  Order decides ties.
        query: The user's question.  ``None`` is treated as empty.
        threshold: Largest accepted fuzzy distance, as a fraction of the
            longer of the two normalized strings.

    Returns:
        A :class:`MatchResult`; its stage is ``NONE`` when nothing qualifies.
    """
    normalized_query = normalize(query)
    questions = [normalize(entry.question) for entry in corpus]

    for index, question in enumerate(questions):
        if question == normalized_query:
            logger.debug(f"Exact match at entry {index} for {normalized_query!r}")
            return MatchResult(MatchStage.EXACT, corpus[index], index)

    for index, question in enumerate(questions):
        if normalized_query in question or question in normalized_query:
            logger.debug(f"Containment match at entry {index} for {normalized_query!r}")
            return MatchResult(MatchStage.CONTAINMENT, corpus[index], index)

    best_index: Optional[int] = None
    best_distance = 0
    for index, question in enumerate(questions):
        distance = edit_distance(question, normalized_query)
        if best_index is None or distance < best_distance:
            best_index = index
            best_distance = distance

    if best_index is not None:
        target_len = max(len(questions[best_index]), len(normalized_query))
        if target_len > 0 and best_distance <= target_len * threshold:
            logger.debug(
                f"Fuzzy match at entry {best_index} (distance {best_distance}) "
                f"for {normalized_query!r}"
            )
            return MatchResult(
                MatchStage.FUZZY, corpus[best_index], best_index, best_distance
            )

    logger.debug(f"No match for {normalized_query!r}")
    return MatchResult(MatchStage.NONE)


def find_answer(
    corpus: Sequence[QAEntry],
    query: Optional[str],
    *,
    threshold: float = FUZZY_THRESHOLD,
) -> str:
    """Return the answer text for *query*.

    The result is the stored answer for an exact or containment hit, the
    stored answer plus :data:`APPROXIMATE_SUFFIX` for a fuzzy hit, or
    :data:`NOT_FOUND_MESSAGE`.
    """
    return match(corpus, query, threshold=threshold).render()
