import pytest

from tfidf_rag.bootstrap import reset_engine
from tfidf_rag.document import Document
from tfidf_rag.search_engine import SearchEngine


def make_doc(doc_id, title, content, category="general", keywords=()):
    return Document(id=doc_id, title=title, content=content,
                    category=category, keywords=tuple(keywords))


@pytest.fixture
def billing_docs():
    return [
        make_doc("A", "Billing FAQ", "refund policy explained"),
        make_doc("B", "Security Overview", "password reset process"),
        make_doc("C", "refund policy", "how refunds are processed quickly"),
    ]


@pytest.fixture
def billing_engine(billing_docs):
    return SearchEngine(billing_docs)


@pytest.fixture(autouse=True)
def _clean_engine():
    reset_engine()
    yield
    reset_engine()
