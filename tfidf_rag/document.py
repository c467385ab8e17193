"""Knowledge-base document records and JSON loading."""

import json
import logging
from dataclasses import dataclass, field

from tfidf_rag.errors import DocumentError, KnowledgeBaseError

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("id", "title", "content", "category")


@dataclass(frozen=True)
class Document:
    """Immutable knowledge-base entry. Identity is ``id``."""

    id: str
    title: str
    content: str
    category: str
    keywords: tuple = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data):
        """Build a Document from a JSON object, validating every field."""
        if not isinstance(data, dict):
            raise DocumentError("document must be an object, got %s" % type(data).__name__)
        for name in _TEXT_FIELDS:
            if name not in data:
                raise DocumentError("document is missing field %r" % name)
            if not isinstance(data[name], str):
                raise DocumentError(
                    "document %r: field %r must be a string" % (data.get("id"), name)
                )
        keywords = data.get("keywords")
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise DocumentError(
                "document %r: field 'keywords' must be a list of strings" % data["id"]
            )
        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            category=data["category"],
            keywords=tuple(keywords),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "keywords": list(self.keywords),
        }


def parse_documents(payload):
    """Turn a decoded ``{"documents": [...]}`` payload into Documents."""
    if not isinstance(payload, dict) or not isinstance(payload.get("documents"), list):
        raise KnowledgeBaseError("knowledge base must be an object with a 'documents' list")
    return [Document.from_dict(item) for item in payload["documents"]]


def load_documents(path):
    """Read a knowledge-base JSON file and return its documents in file order.

    Raises KnowledgeBaseError when the file is missing, is not valid JSON,
    or contains a malformed record.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as exc:
        raise KnowledgeBaseError("knowledge base not found: %s" % path) from exc
    except (OSError, ValueError) as exc:
        raise KnowledgeBaseError("cannot read knowledge base %s: %s" % (path, exc)) from exc
    try:
        documents = parse_documents(payload)
    except DocumentError as exc:
        raise KnowledgeBaseError("malformed knowledge base %s: %s" % (path, exc)) from exc
    logger.debug("Loaded %d documents from %s", len(documents), path)
    return documents
