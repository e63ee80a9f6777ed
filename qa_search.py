#!/usr/bin/env python3
"""
Linux Q&A Searcher
One question at a time - one answer per question
"""

import sys

from pydantic import ValidationError

from linux_qa_searcher import SearchSession, configure_logging, get_settings, load_corpus
from linux_qa_searcher.session import BANNER, load_report


def run_search_session() -> int:
    """Load settings and the corpus, then answer questions until 'salir'."""
    print(BANNER)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"❌ Configuración inválida: {e}")
        return 1

    configure_logging(settings.log_level)

    corpus = load_corpus(settings.questions_file)
    for line in load_report(corpus):
        print(line)

    session = SearchSession(corpus, threshold=settings.fuzzy_threshold)
    session.run()
    return 0


def main() -> None:
    try:
        sys.exit(run_search_session())
    except KeyboardInterrupt:
        print("\n\nSaliendo.")
        sys.exit(0)
    except Exception as e:
        print(f"\n❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
