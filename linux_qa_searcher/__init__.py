"""linux_qa_searcher – answer Linux questions from a fixed question bank."""

from .config import Settings, configure_logging, get_settings
from .corpus import Corpus, CorpusSource, QAEntry, builtin_corpus, load_corpus
from .default_corpus import default_qa_bank
from .matcher import (
    APPROXIMATE_SUFFIX,
    FUZZY_THRESHOLD,
    NOT_FOUND_MESSAGE,
    MatchResult,
    MatchStage,
    edit_distance,
    find_answer,
    match,
    normalize,
)
from .session import SearchSession, load_report

__all__ = [
    "APPROXIMATE_SUFFIX",
    "Corpus",
    "CorpusSource",
    "FUZZY_THRESHOLD",
    "MatchResult",
    "MatchStage",
    "NOT_FOUND_MESSAGE",
    "QAEntry",
    "SearchSession",
    "Settings",
    "builtin_corpus",
    "configure_logging",
    "default_qa_bank",
    "edit_distance",
    "find_answer",
    "get_settings",
    "load_corpus",
    "load_report",
    "match",
    "normalize",
]
