"""Question/answer corpus: entries, the ordered container, and the loader."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Union, overload

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .default_corpus import default_qa_bank

logger = logging.getLogger(__name__)


class QAEntry(BaseModel):
    """One stored question and its answer.

    Serialised as ``{"Question": ..., "Answer": ...}``; the lower-case field
    names are accepted on input as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str = Field(alias="Question")
    answer: str = Field(alias="Answer")


_ENTRIES_ADAPTER = TypeAdapter(List[QAEntry])


class CorpusSource(str, Enum):
    """Where a :class:`Corpus` was loaded from."""

    FILE = "file"
    BUILTIN = "builtin"


class Corpus(Sequence[QAEntry]):
    """Ordered, read-only collection of :class:`QAEntry`.

    Order matters: it is the tie-break order for matching and the order used
    when listing questions.

    Args:
        entries: The entries, in corpus order.
        source: Where the entries came from.
        path: The file the entries were read from (or attempted from).
        load_error: Message of the error that forced a fallback, if any.
    """

    def __init__(
        self,
        entries: Iterable[QAEntry] = (),
        *,
        source: CorpusSource = CorpusSource.BUILTIN,
        path: Optional[Path] = None,
        load_error: Optional[str] = None,
    ) -> None:
        self._entries = tuple(entries)
        self.source = source
        self.path = path
        self.load_error = load_error

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Sequence[str]], **kwargs
    ) -> "Corpus":
        """Build a corpus from ``(question, answer)`` pairs."""
        return cls((QAEntry(question=q, answer=a) for q, a in pairs), **kwargs)

    @overload
    def __getitem__(self, index: int) -> QAEntry: ...

    @overload
    def __getitem__(self, index: slice) -> "Corpus": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[QAEntry, "Corpus"]:
        if isinstance(index, slice):
            return Corpus(
                self._entries[index],
                source=self.source,
                path=self.path,
                load_error=self.load_error,
            )
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QAEntry]:
        return iter(self._entries)

    def questions(self) -> List[str]:
        """Return the stored questions in corpus order."""
        return [entry.question for entry in self._entries]

    def __repr__(self) -> str:  # pragma: no cover
        return f"Corpus({len(self)} entries, source={self.source.value})"


def builtin_corpus(**kwargs) -> Corpus:
    """Return the built-in Linux administration corpus."""
    return Corpus.from_pairs(default_qa_bank(), source=CorpusSource.BUILTIN, **kwargs)


def parse_corpus(data: Union[str, bytes]) -> List[QAEntry]:
    """Parse a JSON array of ``{Question, Answer}`` records.

    Raises:
        pydantic.ValidationError: If *data* is not valid JSON or not a list
            of complete records.
    """
    return _ENTRIES_ADAPTER.validate_json(data)


def load_corpus(path: Optional[Union[str, Path]] = None) -> Corpus:
    """Load the corpus from *path*, falling back to the built-in bank.

    A missing file (or no *path* at all) silently selects the built-in bank.
    A file that exists but cannot be read or parsed also selects it, and the
    error message is kept on :attr:`Corpus.load_error`.
    """
    if path is None:
        logger.info("No questions file configured; using built-in corpus")
        return builtin_corpus()

    path = Path(path)
    if not path.exists():
        logger.info(f"Questions file {path} not found; using built-in corpus")
        return builtin_corpus(path=path)

    try:
        entries = parse_corpus(path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Failed to load questions from {path}: {e}")
        return builtin_corpus(path=path, load_error=str(e))

    logger.info(f"Loaded {len(entries)} questions from {path}")
    return Corpus(entries, source=CorpusSource.FILE, path=path)
