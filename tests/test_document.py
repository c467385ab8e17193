import json

import pytest

from tfidf_rag.document import Document, load_documents, parse_documents
from tfidf_rag.errors import DocumentError, KnowledgeBaseError

RECORD = {
    "id": "kb-1",
    "title": "Billing FAQ",
    "content": "refund policy explained",
    "category": "billing",
    "keywords": ["refund", "invoice"],
}


def test_from_dict():
    doc = Document.from_dict(RECORD)
    assert doc.id == "kb-1"
    assert doc.keywords == ("refund", "invoice")
    assert doc.to_dict() == RECORD


def test_from_dict_missing_field():
    data = dict(RECORD)
    del data["title"]
    with pytest.raises(DocumentError):
        Document.from_dict(data)


def test_from_dict_bad_keywords():
    with pytest.raises(DocumentError):
        Document.from_dict(dict(RECORD, keywords="refund"))
    with pytest.raises(DocumentError):
        Document.from_dict(dict(RECORD, keywords=["ok", 3]))


def test_parse_documents_requires_list():
    with pytest.raises(KnowledgeBaseError):
        parse_documents({"docs": []})
    with pytest.raises(KnowledgeBaseError):
        parse_documents([RECORD])


def test_load_documents(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps({"documents": [RECORD, dict(RECORD, id="kb-2")]}))
    docs = load_documents(str(path))
    assert [d.id for d in docs] == ["kb-1", "kb-2"]


def test_load_documents_missing_file(tmp_path):
    with pytest.raises(KnowledgeBaseError):
        load_documents(str(tmp_path / "nope.json"))


def test_load_documents_invalid_json(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text("{not json")
    with pytest.raises(KnowledgeBaseError):
        load_documents(str(path))


def test_load_documents_malformed_record(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps({"documents": [{"id": "x"}]}))
    with pytest.raises(KnowledgeBaseError):
        load_documents(str(path))
