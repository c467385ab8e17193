"""Cosine-similarity ranking over a TF-IDF document index."""

from dataclasses import dataclass

from tfidf_rag.document import Document
from tfidf_rag.index import DocumentIndex
from tfidf_rag.math_utils import cosine_similarity

MODEL_NAME = "tf-idf"
DEFAULT_K = 3
TITLE_BOOST = 0.2
KEYWORD_BOOST = 0.1


@dataclass(frozen=True)
class SearchResult:
    document: Document
    score: float


@dataclass(frozen=True)
class EngineStatus:
    ready: bool
    model_name: str

    def to_dict(self):
        return {"ready": self.ready, "modelName": self.model_name}


class SearchEngine:
    """Ranks documents against free-text queries.

    The score of a document is its cosine similarity to the query vector
    plus two lexical boosts:

        score = cos(q, d) + 0.2 * [query in title] + 0.1 * [query in any keyword]

    Both boosts use case-insensitive substring containment of the raw
    query string. The index is built in the constructor and never
    modified, so concurrent searches need no locking.
    """

    def __init__(self, documents, tokenizer=None,
                 title_boost=TITLE_BOOST, keyword_boost=KEYWORD_BOOST):
        self.index = DocumentIndex.build(documents, tokenizer=tokenizer)
        self.title_boost = title_boost
        self.keyword_boost = keyword_boost

    @property
    def documents(self):
        return self.index.documents

    def boost(self, query, doc):
        """Additive lexical boost for title and keyword substring matches."""
        query_lower = query.lower()
        total = 0.0
        if query_lower in doc.title.lower():
            total += self.title_boost
        if any(query_lower in kw.lower() for kw in doc.keywords):
            total += self.keyword_boost
        return total

    def score(self, query, query_vector, doc, doc_vector):
        return cosine_similarity(query_vector, doc_vector) + self.boost(query, doc)

    def search(self, query, k=DEFAULT_K):
        """Return the top ``k`` SearchResults, best first.

        Equal scores keep corpus order. Returns min(k, N) results.
        """
        if k < 1:
            raise ValueError("k must be a positive integer, got %r" % (k,))
        query_vector = self.index.vectorize(query)
        scored = [
            SearchResult(doc, self.score(query, query_vector, doc, doc_vector))
            for doc, doc_vector in self.index.entries()
        ]
        # list.sort is stable, so ties stay in corpus order
        scored.sort(key=lambda r: r.score, reverse=True)
        return scored[:k]

    def status(self):
        return EngineStatus(ready=True, model_name=MODEL_NAME)
