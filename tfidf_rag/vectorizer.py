"""TF-IDF vectorizer shared by documents and queries."""

from collections import Counter


class TfidfVectorizer:
    """Turns text into a sparse term -> weight vector.

    Term frequency is normalised by the most frequent term of the same
    text, then multiplied by the corpus IDF:

        w(t) = tf(t) / max_tf * IDF(t)

    Terms with zero IDF stay in the vector with weight 0.
    """

    def __init__(self, tokenizer, idf_table):
        self.tokenizer = tokenizer
        self.idf_table = idf_table

    def term_frequencies(self, text):
        return Counter(self.tokenizer.tokenize(text))

    def vectorize(self, text):
        """Return the TF-IDF vector for ``text``; empty text gives {}."""
        tf = self.term_frequencies(text)
        if not tf:
            return {}
        max_freq = max(tf.values())
        return {
            term: (freq / max_freq) * self.idf_table.idf(term)
            for term, freq in tf.items()
        }
