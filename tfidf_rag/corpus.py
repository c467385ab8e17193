"""Document corpus with vocabulary and document-frequency statistics."""

import logging

from tfidf_rag.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class Corpus:
    """Stores documents and builds the statistics needed for IDF weighting.

    Statistics are computed once in the constructor; the corpus is never
    mutated afterwards. Rebuilding requires a new Corpus over the full
    document set.
    """

    def __init__(self, documents, tokenizer=None):
        self.tokenizer = tokenizer or Tokenizer()
        self.documents = tuple(documents)
        self._doc_by_id = {}
        self.n = 0
        self.vocabulary = {}  # term -> dense id, in first-seen order
        self.df = {}  # term -> document frequency
        self._build_statistics()

    @staticmethod
    def document_text(doc):
        """Combined indexable text of a document: content, title, keywords."""
        return doc.content + " " + doc.title + " " + " ".join(doc.keywords)

    def _build_statistics(self):
        """Compute N, df(t) and the vocabulary in a single pass."""
        self.n = len(self.documents)
        for doc in self.documents:
            if doc.id in self._doc_by_id:
                logger.warning("Duplicate document id %r; the later document wins lookups", doc.id)
            self._doc_by_id[doc.id] = doc
            # distinct terms, in order of first occurrence
            for term in dict.fromkeys(self.tokenizer.tokenize(self.document_text(doc))):
                self.df[term] = self.df.get(term, 0) + 1
                if term not in self.vocabulary:
                    self.vocabulary[term] = len(self.vocabulary)

    def get_document(self, doc_id):
        """Look up a document by ID, or None."""
        return self._doc_by_id.get(doc_id)

    def __len__(self):
        return self.n
