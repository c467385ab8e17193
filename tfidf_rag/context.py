"""Assemble retrieval results into grounding context for a generation call."""

import json
import logging
from dataclasses import dataclass, field

from tfidf_rag.search_engine import DEFAULT_K

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n---\n\n"
SNIPPET_LENGTH = 150
ELLIPSIS = "..."


@dataclass(frozen=True)
class SourceRecord:
    """Attribution for one retrieved document, for display next to an answer."""

    id: str
    display_name: str
    snippet: str
    score: float

    def to_dict(self):
        return {
            "id": self.id,
            "fileName": self.display_name,
            "snippet": self.snippet,
            "score": self.score,
        }


@dataclass(frozen=True)
class RetrievalContext:
    context: str
    is_working: bool
    sources: tuple = field(default_factory=tuple)

    def to_dict(self):
        return {
            "context": self.context,
            "isRagWorking": self.is_working,
            "ragSources": [s.to_dict() for s in self.sources],
        }


def make_snippet(content, length=SNIPPET_LENGTH):
    """First ``length`` characters of content plus an ellipsis marker."""
    return content[:length] + ELLIPSIS


def source_record(result):
    doc = result.document
    return SourceRecord(
        id=doc.id,
        display_name=doc.title,
        snippet=make_snippet(doc.content),
        score=round(result.score, 2),
    )


def format_context(results, separator=CONTEXT_SEPARATOR):
    return separator.join(
        "%s:\n%s" % (r.document.title, r.document.content) for r in results
    )


def sources_header(sources):
    """Compact JSON list of sources, suitable for an HTTP response header."""
    return json.dumps([s.to_dict() for s in sources], separators=(",", ":"))


def retrieve_context(engine, query, n=DEFAULT_K):
    """Retrieve the top ``n`` documents and build the grounding context.

    Never raises. A missing engine or any failure during retrieval is
    logged and reported as ``is_working=False`` with empty context and
    sources, so the caller can answer without grounding.
    """
    if engine is None:
        logger.warning("Search engine unavailable; answering without retrieval context")
        return RetrievalContext(context="", is_working=False, sources=())
    try:
        results = engine.search(query, n)
        if not results:
            return RetrievalContext(context="", is_working=True, sources=())
        return RetrievalContext(
            context=format_context(results),
            is_working=True,
            sources=tuple(source_record(r) for r in results),
        )
    except Exception:
        logger.exception("Retrieval failed for query %r", query)
        return RetrievalContext(context="", is_working=False, sources=())
