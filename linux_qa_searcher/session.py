"""Interactive command loop – one question in, one answer out."""
from __future__ import annotations

from typing import Callable, List, Optional

from .corpus import Corpus, CorpusSource
from .matcher import FUZZY_THRESHOLD, find_answer

BANNER = "Linux Q&A Searcher - una sola respuesta por pregunta\n"

PROMPT = (
    "Ingrese la pregunta (escriba 'salir' para terminar, o 'listar' para ver "
    "preguntas):"
)

EXIT_COMMAND = "salir"
LIST_COMMAND = "listar"
GOODBYE = "Saliendo. ¡Éxito!"


def load_report(corpus: Corpus) -> List[str]:
    """Return the startup lines describing where *corpus* came from."""
    name = corpus.path.name if corpus.path is not None else "Questions.json"
    lines: List[str] = []
    if corpus.load_error:
        lines.append(f"Error cargando {name}: {corpus.load_error}")
    if corpus.source == CorpusSource.FILE:
        lines.append(f"Cargadas {len(corpus)} preguntas desde {name}\n")
    else:
        lines.append(f"Cargadas {len(corpus)} preguntas (fallback integrado).\n")
    return lines


class SearchSession:
    """Reads questions, answers them from *corpus*, and handles commands.

    Recognised commands (case-insensitive): ``listar`` prints every stored
    question, ``salir`` ends the session.  Blank lines are ignored and end of
    input ends the session like ``salir``.

    Args:
        corpus: The corpus to search.
        input_fn: Callable used to read a line.  It is called with an empty
            prompt, since the prompt text is printed through *output_fn*.
            Defaults to the built-in :func:`input`.
        output_fn: Callable used to print text.  Defaults to :func:`print`.
        threshold: Fuzzy acceptance ratio passed to :func:`find_answer`.
    """

    def __init__(
        self,
        corpus: Corpus,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        threshold: float = FUZZY_THRESHOLD,
    ) -> None:
        self.corpus = corpus
        self.threshold = threshold
        self._input_fn: Callable[[str], str] = input_fn if input_fn is not None else input
        self._output_fn: Callable[[str], None] = output_fn if output_fn is not None else print

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def list_questions(self) -> str:
        """Return the numbered list of stored questions."""
        lines = ["Preguntas disponibles:"]
        lines.extend(
            f"{number}. {question}"
            for number, question in enumerate(self.corpus.questions(), start=1)
        )
        lines.append("")
        return "\n".join(lines)

    def answer(self, question: str) -> str:
        """Return the formatted response block for *question*."""
        answer = find_answer(self.corpus, question, threshold=self.threshold)
        return f"\nRespuesta: \n{answer}\n"

    @staticmethod
    def is_exit(line: str) -> bool:
        return line.strip().lower() == EXIT_COMMAND

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Answer questions until ``salir`` or end of input.

        Returns:
            The number of questions answered.
        """
        answered = 0
        while True:
            self._output_fn(PROMPT)
            try:
                line = self._input_fn("")
            except EOFError:
                break
            line = line.strip()
            if not line:
                continue
            if self.is_exit(line):
                break
            if line.lower() == LIST_COMMAND:
                self._output_fn(self.list_questions())
                continue
            self._output_fn(self.answer(line))
            answered += 1

        self._output_fn(GOODBYE)
        return answered
