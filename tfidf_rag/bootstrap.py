"""Process-wide engine construction.

The engine is built exactly once by an explicit call to
``initialize_engine()`` during startup, before any search is served.
``get_engine()`` never builds on first access; it raises if startup
has not run.
"""

import logging
import os

from tfidf_rag.context import retrieve_context
from tfidf_rag.document import load_documents
from tfidf_rag.errors import EngineNotInitializedError, TfidfRagError
from tfidf_rag.search_engine import DEFAULT_K, SearchEngine

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE_ENV = "TFIDF_RAG_KNOWLEDGE_BASE"
DEFAULT_KNOWLEDGE_BASE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", "knowledgebase.json"
)

_UNSET = object()
_engine = _UNSET


def knowledge_base_path(path=None):
    """Explicit path, else $TFIDF_RAG_KNOWLEDGE_BASE, else the bundled sample."""
    return path or os.environ.get(KNOWLEDGE_BASE_ENV) or DEFAULT_KNOWLEDGE_BASE


def create_engine(documents=None, path=None, **engine_kwargs):
    """Build a SearchEngine, or return None if the corpus cannot be loaded.

    ``documents`` takes precedence over ``path``. A failed build never
    yields a partially built engine.
    """
    try:
        if documents is None:
            documents = load_documents(knowledge_base_path(path))
        return SearchEngine(documents, **engine_kwargs)
    except (TfidfRagError, AttributeError, TypeError) as exc:
        logger.error("Failed to build search engine: %s", exc)
        return None


def initialize_engine(documents=None, path=None, **engine_kwargs):
    """Build the process-wide engine once and return it (None on failure).

    Later calls return the already built engine without rebuilding; use
    reset_engine() first to rebuild.
    """
    global _engine
    if _engine is _UNSET:
        logger.info("Initializing TF-IDF search")
        _engine = create_engine(documents=documents, path=path, **engine_kwargs)
    return _engine


def get_engine():
    """Return the process-wide engine (None if its build failed)."""
    if _engine is _UNSET:
        raise EngineNotInitializedError("initialize_engine() must run before searching")
    return _engine


def is_initialized():
    return _engine is not _UNSET


def reset_engine():
    global _engine
    _engine = _UNSET


def retrieve_context_default(query, n=DEFAULT_K):
    """retrieve_context() against the process-wide engine.

    Degrades to is_working=False when startup never ran or the build failed.
    """
    try:
        engine = get_engine()
    except EngineNotInitializedError:
        logger.warning("retrieve_context_default called before initialize_engine()")
        engine = None
    return retrieve_context(engine, query, n)
