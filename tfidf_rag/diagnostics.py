"""Self-checks of the ranking properties over a built engine."""

from tfidf_rag.math_utils import cosine_similarity

TOLERANCE = 1e-9


class DiagnosticsRunner:
    """Runs property checks against a SearchEngine and a list of queries.

    Each check returns ``(passed, details)``; ``run_all`` collects them as
    ``(name, passed, details)`` tuples for reporting.
    """

    def __init__(self, engine, queries):
        self.engine = engine
        self.index = engine.index
        self.queries = list(queries)

    def run_all(self):
        """Run every check and return the results."""
        checks = [
            ("1. Tokenizer Determinism", self.check_tokenizer_determinism),
            ("2. IDF Monotonicity", self.check_idf_monotonicity),
            ("3. Self-Similarity", self.check_self_similarity),
            ("4. Zero-Vector Safety", self.check_zero_vector_safety),
            ("5. Top-k Contract", self.check_top_k_contract),
            ("6. Boost Additivity", self.check_boost_additivity),
        ]
        results = []
        for name, func in checks:
            passed, details = func()
            results.append((name, passed, details))
        return results

    def check_tokenizer_determinism(self):
        """Tokenizing the same text twice gives the same tokens, none short."""
        tokenizer = self.index.corpus.tokenizer
        texts = self.queries + [self.index.corpus.document_text(d) for d in self.index.documents]
        stable = all(tokenizer.tokenize(t) == tokenizer.tokenize(t) for t in texts)
        min_len = min(
            (len(tok) for t in texts for tok in tokenizer.tokenize(t)), default=None
        )
        length_ok = min_len is None or min_len >= tokenizer.min_token_len
        passed = stable and length_ok
        return passed, "texts=%d, stable=%s, min_token_len=%s" % (len(texts), stable, min_len)

    def check_idf_monotonicity(self):
        """Rarer terms never weigh less; terms in every document weigh 0."""
        corpus = self.index.corpus
        idf = self.index.idf_table
        pairs = sorted((df_t, idf.idf(t)) for t, df_t in corpus.df.items())
        monotonic_ok = True
        for i in range(len(pairs) - 1):
            df1, idf1 = pairs[i]
            df2, idf2 = pairs[i + 1]
            if df1 < df2 and idf1 < idf2 - TOLERANCE:
                monotonic_ok = False

        ubiquitous = [t for t, df_t in corpus.df.items() if df_t == corpus.n]
        zero_ok = all(idf.idf(t) == 0.0 for t in ubiquitous)
        non_neg_ok = all(w >= 0.0 for w in idf.weights.values())

        passed = monotonic_ok and zero_ok and non_neg_ok
        detail = "monotonic=%s, ubiquitous_zero=%s (%d terms), non_neg=%s" % (
            monotonic_ok, zero_ok, len(ubiquitous), non_neg_ok
        )
        return passed, detail

    def check_self_similarity(self):
        """cos(d, d) == 1 for every non-zero document vector."""
        max_diff = 0.0
        checked = 0
        for _, vector in self.index.entries():
            if not any(vector.values()):
                continue
            max_diff = max(max_diff, abs(cosine_similarity(vector, vector) - 1.0))
            checked += 1
        passed = max_diff < TOLERANCE
        return passed, "max_diff=%.2e across %d vectors" % (max_diff, checked)

    def check_zero_vector_safety(self):
        """Similarity against empty or all-zero vectors is exactly 0."""
        zero = {term: 0.0 for term in self.index.vocabulary}
        sims = []
        for _, vector in self.index.entries():
            sims.append(cosine_similarity({}, vector))
            sims.append(cosine_similarity(zero, vector))
        sims.append(cosine_similarity({}, {}))
        passed = all(s == 0.0 for s in sims)
        return passed, "comparisons=%d, all_zero=%s" % (len(sims), passed)

    def check_top_k_contract(self):
        """search returns min(k, N) results with non-increasing scores."""
        n_docs = len(self.index)
        violations = []
        for query in self.queries:
            for k in range(1, n_docs + 2):
                results = self.engine.search(query, k)
                if len(results) != min(k, n_docs):
                    violations.append("query=%r k=%d len=%d" % (query, k, len(results)))
                scores = [r.score for r in results]
                if any(a < b for a, b in zip(scores, scores[1:])):
                    violations.append("query=%r k=%d unsorted" % (query, k))
        passed = not violations
        detail = "queries=%d, k=1..%d" % (len(self.queries), n_docs + 1)
        if violations:
            detail += ", violations: " + "; ".join(violations[:3])
        return passed, detail

    def check_boost_additivity(self):
        """score == cosine + 0.2 * title match + 0.1 * keyword match."""
        max_diff = 0.0
        boosted = 0
        for query in self.queries:
            q_lower = query.lower()
            q_vec = self.index.vectorize(query)
            expected = {}
            for doc, vector in self.index.entries():
                bonus = 0.0
                if q_lower in doc.title.lower():
                    bonus += self.engine.title_boost
                if any(q_lower in kw.lower() for kw in doc.keywords):
                    bonus += self.engine.keyword_boost
                if bonus:
                    boosted += 1
                expected[id(doc)] = cosine_similarity(q_vec, vector) + bonus
            for result in self.engine.search(query, len(self.index) or 1):
                max_diff = max(max_diff, abs(result.score - expected[id(result.document)]))
        passed = max_diff < TOLERANCE
        return passed, "max_diff=%.2e, boosted_pairs=%d" % (max_diff, boosted)
