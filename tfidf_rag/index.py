"""Precomputed per-document TF-IDF vectors."""

import logging
from types import MappingProxyType

from tfidf_rag.corpus import Corpus
from tfidf_rag.tokenizer import Tokenizer
from tfidf_rag.vectorizer import TfidfVectorizer
from tfidf_rag.weighting import IDFTable

logger = logging.getLogger(__name__)


class DocumentIndex:
    """Read-only index holding the corpus, IDF table and document vectors.

    Use ``DocumentIndex.build(documents)``. Vectors are computed once from
    the IDF table as it stood at build time; there are no mutation methods.
    """

    def __init__(self, corpus, idf_table, vectorizer, vectors):
        self.corpus = corpus
        self.idf_table = idf_table
        self.vectorizer = vectorizer
        # one entry per corpus position, so duplicate ids keep their own vector
        self._positional_vectors = tuple(vectors)
        self._vectors_by_id = {}
        for doc, vector in zip(corpus.documents, self._positional_vectors):
            self._vectors_by_id[doc.id] = vector

    @classmethod
    def build(cls, documents, tokenizer=None):
        """Run vocabulary, DF, IDF and vectorization over ``documents``."""
        tokenizer = tokenizer or Tokenizer()
        corpus = Corpus(documents, tokenizer=tokenizer)
        idf_table = IDFTable(corpus)
        vectorizer = TfidfVectorizer(tokenizer, idf_table)
        vectors = [
            MappingProxyType(vectorizer.vectorize(corpus.document_text(doc)))
            for doc in corpus.documents
        ]
        logger.info(
            "Built TF-IDF index: %d documents, %d terms",
            corpus.n, len(corpus.vocabulary),
        )
        return cls(corpus, idf_table, vectorizer, vectors)

    @property
    def documents(self):
        return self.corpus.documents

    @property
    def vocabulary(self):
        return self.corpus.vocabulary

    def vector_for(self, doc_id):
        """Stored vector for ``doc_id``, or None if the id is unknown."""
        return self._vectors_by_id.get(doc_id)

    def entries(self):
        """Yield (document, vector) pairs in corpus order."""
        return zip(self.corpus.documents, self._positional_vectors)

    def vectorize(self, text):
        return self.vectorizer.vectorize(text)

    def __len__(self):
        return len(self._positional_vectors)
