import json

import pytest

from tfidf_rag import bootstrap
from tfidf_rag.errors import EngineNotInitializedError
from tfidf_rag.search_engine import SearchEngine


def test_get_engine_before_initialize_raises():
    with pytest.raises(EngineNotInitializedError):
        bootstrap.get_engine()
    assert not bootstrap.is_initialized()


def test_initialize_once(billing_docs):
    engine = bootstrap.initialize_engine(documents=billing_docs)
    assert isinstance(engine, SearchEngine)
    assert bootstrap.get_engine() is engine
    assert bootstrap.initialize_engine(documents=[]) is engine


def test_reset_allows_rebuild(billing_docs):
    first = bootstrap.initialize_engine(documents=billing_docs)
    bootstrap.reset_engine()
    second = bootstrap.initialize_engine(documents=billing_docs)
    assert second is not first


def test_default_knowledge_base_loads():
    engine = bootstrap.create_engine()
    assert engine is not None
    assert len(engine.documents) > 0


def test_env_var_overrides_path(tmp_path, monkeypatch):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps({"documents": [{
        "id": "only", "title": "Only", "content": "single document",
        "category": "misc", "keywords": [],
    }]}))
    monkeypatch.setenv(bootstrap.KNOWLEDGE_BASE_ENV, str(path))
    engine = bootstrap.create_engine()
    assert [d.id for d in engine.documents] == ["only"]


def test_construction_failure_returns_none(tmp_path, caplog):
    engine = bootstrap.create_engine(path=str(tmp_path / "missing.json"))
    assert engine is None
    assert "Failed to build search engine" in caplog.text


def test_malformed_documents_return_none():
    assert bootstrap.create_engine(documents=[{"id": "raw dict"}]) is None


def test_failed_initialize_degrades_retrieval(tmp_path):
    assert bootstrap.initialize_engine(path=str(tmp_path / "missing.json")) is None
    assert bootstrap.get_engine() is None
    result = bootstrap.retrieve_context_default("refund")
    assert result.is_working is False


def test_retrieve_context_default_before_initialize():
    result = bootstrap.retrieve_context_default("refund")
    assert result.is_working is False
    assert result.context == ""


def test_retrieve_context_default(billing_docs):
    bootstrap.initialize_engine(documents=billing_docs)
    result = bootstrap.retrieve_context_default("refund policy", 2)
    assert result.is_working is True
    assert [s.id for s in result.sources] == ["C", "A"]
