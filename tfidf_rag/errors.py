"""Exception hierarchy for the retrieval engine."""


class TfidfRagError(Exception):
    """Base class for all errors raised by tfidf_rag."""


class DocumentError(TfidfRagError):
    """A knowledge-base record is missing a field or has the wrong type."""


class KnowledgeBaseError(TfidfRagError):
    """The knowledge-base source is missing or cannot be parsed."""


class EngineNotInitializedError(TfidfRagError):
    """The process-wide engine was used before initialize_engine() ran."""
