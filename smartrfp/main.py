"""Main entry point for SmartRFP."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from smartrfp.analysis.analyzer import analyze_rfp
from smartrfp.generation.generator import generate_proposal_from_rfp
from smartrfp.loaders.pdf_loader import PDFLoader
from smartrfp.models.analysis import RFPAnalysis
from smartrfp.models.knowledge import KnowledgeBase, KnowledgeBaseItem
from smartrfp.utils.exceptions import SmartRFPError
from smartrfp.utils.logging import get_logger, setup_logging


logger = get_logger(__name__)

_ITEM_LIST = TypeAdapter(list[KnowledgeBaseItem])


def read_rfp(path: Path) -> tuple[str, dict[str, Any] | None]:
    """Read RFP text from a PDF or plain text file.

    Args:
        path: Document path.

    Returns:
        The text and, for PDFs, metadata carrying the page count.
    """
    if PDFLoader.supports(path):
        document = PDFLoader(path).load()
        return document.text, {"page_count": document.page_count}
    return path.read_text(encoding="utf-8"), None


def load_knowledge_base(path: Path) -> KnowledgeBase:
    """Load a knowledge base from JSON.

    The file may hold a knowledge base object or a bare list of items.
    """
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if isinstance(data, list):
        return KnowledgeBase(name=path.stem, items=_ITEM_LIST.validate_python(data))
    return KnowledgeBase.model_validate(data)


def print_analysis(analysis: RFPAnalysis) -> None:
    """Print a readable analysis report."""
    print("\n" + "=" * 60)
    print("RFP ANALYSIS")
    print("=" * 60)

    print(f"\nPages: {analysis.total_pages}")
    print(f"Sections: {len(analysis.sections)}")
    print(f"Questions: {analysis.total_questions}")

    for section in analysis.sections:
        print(f"\n[{section.id}] {section.title} ({len(section.questions)} questions)")
        for question in section.questions:
            flag = " !" if question.requires_attention else ""
            print(f"  - ({question.type.value}/{question.priority.value}{flag}) {question.question[:100]}")

    if analysis.deadlines:
        print("\nDeadlines:")
        for deadline in analysis.deadlines:
            print(f"  - {deadline}")

    print(f"\n{analysis.summary}")
    print("\n" + "=" * 60)


def run_analyze(path: Path, as_json: bool) -> None:
    """Analyze one RFP document and print the result."""
    text, metadata = read_rfp(path)
    analysis = analyze_rfp(text, metadata)

    if as_json:
        print(analysis.model_dump_json(indent=2))
    else:
        print_analysis(analysis)


def run_generate(
    path: Path,
    kb_path: Path,
    title: str,
    client: str,
    context: str | None,
    as_json: bool,
    output: Path | None,
) -> None:
    """Analyze an RFP and draft a proposal against a knowledge base."""
    text, metadata = read_rfp(path)
    analysis = analyze_rfp(text, metadata)
    knowledge_base = load_knowledge_base(kb_path)

    proposal = generate_proposal_from_rfp(analysis, knowledge_base.items, title, client, context)

    rendered = proposal.model_dump_json(indent=2) if as_json else proposal.full_text
    if output:
        output.write_text(rendered, encoding="utf-8")
        logger.info("Proposal written", path=str(output))
    else:
        print(rendered)

    print(
        f"\nCoverage: {proposal.questions_addressed}/{proposal.total_questions} "
        f"({proposal.coverage_percentage:.1f}%)",
        file=sys.stderr,
    )
    for recommendation in proposal.recommendations:
        print(f"  * {recommendation}", file=sys.stderr)
    for gap in proposal.missing_information:
        print(f"  ? {gap}", file=sys.stderr)


def run_search(kb_path: Path, query: str) -> None:
    """Search a knowledge base file."""
    knowledge_base = load_knowledge_base(kb_path)
    results = knowledge_base.search(query)

    print(f"{len(results)} result(s) for '{query}'")
    for item in results:
        print(f"  - [{item.type.value}] {item.title} ({', '.join(item.tags)})")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="SmartRFP - RFP analysis and proposal drafting")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze an RFP document")
    analyze_parser.add_argument("path", type=Path, help="RFP as .pdf or plain text")
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON")

    generate_parser = subparsers.add_parser("generate", help="Draft a proposal for an RFP")
    generate_parser.add_argument("path", type=Path, help="RFP as .pdf or plain text")
    generate_parser.add_argument("--kb", type=Path, required=True, help="Knowledge base JSON")
    generate_parser.add_argument("--title", required=True, help="Project title")
    generate_parser.add_argument("--client", required=True, help="Client name")
    generate_parser.add_argument("--context", default=None, help="Client priorities")
    generate_parser.add_argument("--json", action="store_true", help="Print JSON")
    generate_parser.add_argument("--output", type=Path, default=None, help="Write to file")

    search_parser = subparsers.add_parser("search-kb", help="Search a knowledge base")
    search_parser.add_argument("kb", type=Path, help="Knowledge base JSON")
    search_parser.add_argument("query", help="Search text")

    server_parser = subparsers.add_parser("serve", help="Start API server")
    server_parser.add_argument("--host", default="0.0.0.0", help="Host")
    server_parser.add_argument("--port", type=int, default=8000, help="Port")

    args = parser.parse_args(argv)
    setup_logging(log_level=args.log_level)

    try:
        if args.command == "analyze":
            run_analyze(args.path, args.json)
        elif args.command == "generate":
            run_generate(
                args.path, args.kb, args.title, args.client, args.context, args.json, args.output
            )
        elif args.command == "search-kb":
            run_search(args.kb, args.query)
        elif args.command == "serve":
            import uvicorn
            uvicorn.run("smartrfp.api.app:app", host=args.host, port=args.port)
        else:
            parser.print_help()
            return 2
    except (SmartRFPError, OSError, ValidationError, json.JSONDecodeError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
