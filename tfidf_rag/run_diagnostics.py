"""Entry point: run the ranking self-checks on the bundled knowledge base."""

import sys

from tfidf_rag.bootstrap import DEFAULT_KNOWLEDGE_BASE
from tfidf_rag.diagnostics import DiagnosticsRunner
from tfidf_rag.document import load_documents
from tfidf_rag.search_engine import SearchEngine

QUERIES = [
    "refund policy",
    "how do I reset my password",
    "api",
    "login",
    "export data before deleting account",
    "encryption at rest",
    "what are the rate limits for webhooks",
    "xyzzy",
    "",
]


def build_engine(path=DEFAULT_KNOWLEDGE_BASE):
    """Build the engine over the knowledge base at ``path``."""
    return SearchEngine(load_documents(path))


def report(engine, results, out=None):
    """Print a check report; return True when every check passed."""
    out = out or sys.stdout
    index = engine.index
    print("=" * 72, file=out)
    print("TF-IDF Retrieval Self-Checks", file=out)
    print("=" * 72, file=out)
    print(file=out)
    print("Corpus: %d documents, vocabulary=%d terms" % (
        len(index), len(index.vocabulary)
    ), file=out)
    print(file=out)

    all_passed = True
    for name, passed, details in results:
        status = "PASS" if passed else "FAIL"
        if not passed:
            all_passed = False
        print("-" * 72, file=out)
        print("[%s] %s" % (status, name), file=out)
        for line in details.split("\n"):
            print("       %s" % line, file=out)
        print(file=out)

    print("=" * 72, file=out)
    if all_passed:
        print("All %d checks PASSED." % len(results), file=out)
    else:
        failed = [name for name, passed, _ in results if not passed]
        print("FAILED checks: %s" % ", ".join(failed), file=out)
    print("=" * 72, file=out)
    return all_passed


def main():
    """Run all checks and print results."""
    engine = build_engine()
    results = DiagnosticsRunner(engine, QUERIES).run_all()
    return 0 if report(engine, results) else 1


if __name__ == "__main__":
    sys.exit(main())
