"""TF-IDF retrieval engine for grounding text generation on a fixed corpus."""

from tfidf_rag.errors import (
    TfidfRagError,
    DocumentError,
    KnowledgeBaseError,
    EngineNotInitializedError,
)
from tfidf_rag.math_utils import (
    dot_product,
    vector_magnitude,
    cosine_similarity,
)
from tfidf_rag.tokenizer import Tokenizer
from tfidf_rag.document import Document, load_documents, parse_documents
from tfidf_rag.corpus import Corpus
from tfidf_rag.weighting import IDFTable
from tfidf_rag.vectorizer import TfidfVectorizer
from tfidf_rag.index import DocumentIndex
from tfidf_rag.search_engine import SearchEngine, SearchResult, EngineStatus
from tfidf_rag.context import (
    SourceRecord,
    RetrievalContext,
    retrieve_context,
    sources_header,
)
from tfidf_rag.bootstrap import (
    create_engine,
    initialize_engine,
    get_engine,
    reset_engine,
    retrieve_context_default,
)
from tfidf_rag.diagnostics import DiagnosticsRunner

__all__ = [
    "TfidfRagError",
    "DocumentError",
    "KnowledgeBaseError",
    "EngineNotInitializedError",
    "dot_product",
    "vector_magnitude",
    "cosine_similarity",
    "Tokenizer",
    "Document",
    "load_documents",
    "parse_documents",
    "Corpus",
    "IDFTable",
    "TfidfVectorizer",
    "DocumentIndex",
    "SearchEngine",
    "SearchResult",
    "EngineStatus",
    "SourceRecord",
    "RetrievalContext",
    "retrieve_context",
    "sources_header",
    "create_engine",
    "initialize_engine",
    "get_engine",
    "reset_engine",
    "retrieve_context_default",
    "DiagnosticsRunner",
]
