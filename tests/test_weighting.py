import math

from tfidf_rag.corpus import Corpus
from tfidf_rag.weighting import IDFTable

from conftest import make_doc


def test_idf_formula(billing_docs):
    idf = IDFTable(Corpus(billing_docs))
    assert math.isclose(idf.idf("refund"), math.log(3 / 2))
    assert math.isclose(idf.idf("password"), math.log(3))


def test_unknown_term_is_zero(billing_docs):
    idf = IDFTable(Corpus(billing_docs))
    assert idf.idf("nonexistent") == 0.0
    assert "nonexistent" not in idf


def test_ubiquitous_term_is_zero():
    docs = [make_doc(str(i), "", "common word%d" % i) for i in range(4)]
    idf = IDFTable(Corpus(docs))
    assert idf.idf("common") == 0.0


def test_monotonic_in_document_frequency():
    docs = [
        make_doc("1", "", "rare often always"),
        make_doc("2", "", "often always"),
        make_doc("3", "", "always"),
    ]
    idf = IDFTable(Corpus(docs))
    assert idf.idf("rare") >= idf.idf("often") >= idf.idf("always")
    assert all(w >= 0.0 for w in idf.weights.values())
    assert len(idf) == 3
