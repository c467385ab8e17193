import argparse
import json
import logging
import sys

from tfidf_rag.bootstrap import create_engine, knowledge_base_path
from tfidf_rag.context import retrieve_context
from tfidf_rag.diagnostics import DiagnosticsRunner
from tfidf_rag.run_diagnostics import QUERIES, report
from tfidf_rag.search_engine import DEFAULT_K


def _engine_or_exit(args):
    engine = create_engine(path=args.kb)
    if engine is None:
        print("error: could not build search engine from %s" % knowledge_base_path(args.kb),
              file=sys.stderr)
        sys.exit(2)
    return engine


def cmd_query(args):
    engine = _engine_or_exit(args)
    results = engine.search(args.query, args.k)
    if args.json:
        for r in results:
            print(json.dumps({"document": r.document.to_dict(), "score": r.score},
                             ensure_ascii=False))
    else:
        for i, r in enumerate(results, 1):
            print(f"[{i}] {r.document.id} {r.document.title} score={r.score:.4f}")
            print(r.document.content)
            print("-" * 80)


def cmd_context(args):
    # a failed build still answers, with is_working=False
    engine = create_engine(path=args.kb)
    result = retrieve_context(engine, args.query, args.n)
    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        if not result.is_working:
            print("(retrieval unavailable)")
        print(result.context)
        for s in result.sources:
            print(f"- {s.display_name} ({s.id}) score={s.score:.2f}: {s.snippet}")


def cmd_status(args):
    engine = create_engine(path=args.kb)
    if engine is None:
        status = {"ready": False, "modelName": None}
    else:
        status = engine.status().to_dict()
    print(json.dumps(status))


def cmd_check(args):
    engine = _engine_or_exit(args)
    queries = args.queries or QUERIES
    results = DiagnosticsRunner(engine, queries).run_all()
    if not report(engine, results):
        sys.exit(1)


def main(argv=None):
    p = argparse.ArgumentParser(description="TF-IDF retrieval over a JSON knowledge base")
    p.add_argument("--kb", default=None,
                   help="Knowledge base JSON file (default: $TFIDF_RAG_KNOWLEDGE_BASE or bundled sample)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    pq = sub.add_parser("query", help="Rank documents for a query")
    pq.add_argument("query", help="Search query")
    pq.add_argument("--k", type=int, default=DEFAULT_K)
    pq.add_argument("--json", action="store_true")
    pq.set_defaults(func=cmd_query)

    pc = sub.add_parser("context", help="Build grounding context for a query")
    pc.add_argument("query", help="Search query")
    pc.add_argument("--n", type=int, default=DEFAULT_K)
    pc.add_argument("--json", action="store_true")
    pc.set_defaults(func=cmd_context)

    ps = sub.add_parser("status", help="Show engine status")
    ps.set_defaults(func=cmd_status)

    pk = sub.add_parser("check", help="Run ranking self-checks")
    pk.add_argument("queries", nargs="*", help="Queries to check (default: built-in set)")
    pk.set_defaults(func=cmd_check)

    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
