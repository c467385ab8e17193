"""Inverse-document-frequency weighting."""

import math


class IDFTable:
    """Per-term IDF weights derived from a Corpus.

    Computed once at construction and read-only afterwards. Every stored
    term has df >= 1, so every weight is >= 0, and exactly 0 for terms
    that occur in every document.
    """

    def __init__(self, corpus):
        self.n = corpus.n
        self._weights = {
            term: math.log(self.n / df_t) for term, df_t in corpus.df.items()
        }

    def idf(self, term):
        """Classic unsmoothed IDF.

        IDF(t) = ln(N / df(t)), and 0.0 for terms outside the corpus.
        """
        return self._weights.get(term, 0.0)

    @property
    def weights(self):
        return dict(self._weights)

    def __contains__(self, term):
        return term in self._weights

    def __len__(self):
        return len(self._weights)
