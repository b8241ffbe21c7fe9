"""DeepContent — Command Line Entry Point.

Usage:
    # Trending topics for a business, ranked by relevance
    python main.py trending --business-type "internet provider" --sources reddit,rss

    # Research a topic (Claude or Perplexity deep research)
    python main.py research "rural broadband" --audience "rural families" --platform social --sub-platform facebook
    python main.py research "Acme Fiber" --provider perplexity --website acmefiber.com

    # Write content from saved research
    python main.py content --research outputs/research_rural-broadband.md --content-type social-media \\
        --platform social --audience "rural families" --style ariastar

    # Follow-up questions and refinement
    python main.py questions --content outputs/content.md
    python main.py refine --content outputs/content.md --feedback "Shorter, more playful"

    # Images
    python main.py image "a sunrise over farmland with a fiber cable"
    python main.py image "make the sky purple" --edit photo.jpg

    # Run the API server
    python main.py serve
"""

from __future__ import annotations

import argparse
import base64
import logging
import re
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

import config
from pipeline.llm import LLMError, get_usage_summary

console = Console()


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL),
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")[:60] or "output"


def _read_file(path_str: str | None) -> str:
    if not path_str:
        return ""
    path = Path(path_str)
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        sys.exit(1)
    return path.read_text("utf-8")


def _save_output(name: str, text: str, explicit: str | None = None) -> Path:
    path = Path(explicit) if explicit else config.OUTPUT_DIR / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, "utf-8")
    console.print(f"  [green]Output saved:[/green] {path}")
    return path


def _context_string(args: argparse.Namespace) -> str:
    parts = []
    if args.audience:
        parts.append(f"Target Audience: {args.audience}")
    if args.content_type:
        parts.append(f"Content Type: {args.content_type}")
    if args.platform:
        parts.append(f"Platform: {args.platform}")
    if args.sub_platform:
        parts.append(f"Sub-Platform: {args.sub_platform}")
    return ", ".join(parts)


def _print_usage():
    summary = get_usage_summary()
    if summary.get("calls"):
        console.print(
            f"  [dim]{summary['calls']} LLM call(s), "
            f"{summary['total_input_tokens']} in / {summary['total_output_tokens']} out tokens, "
            f"${summary['total_cost']:.4f}[/dim]"
        )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def run_trending_cmd(args: argparse.Namespace):
    from pipeline.relevance import rank_topics
    from pipeline.trending import get_trending_topics

    result = get_trending_topics(args.business_type, limit=config.TRENDING_FETCH_LIMIT, sources=args.sources)
    if not result.topics:
        console.print("[red]No trending topics found from any source[/red]")
        sys.exit(1)

    topics = rank_topics(result.topics, args.business_type, limit=args.limit)
    table = Table(title=f"Trending for '{args.business_type or 'general'}'")
    table.add_column("Score", justify="right")
    table.add_column("Title")
    table.add_column("Source")
    table.add_column("Published")
    for topic in topics:
        table.add_row(
            str(topic.relevance_score),
            topic.title,
            topic.source,
            topic.pub_date.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)
    flags = result.sources.model_dump()
    console.print("  [dim]Sources: " + ", ".join(f"{k}={'yes' if v else 'no'}" for k, v in flags.items()) + "[/dim]")


def run_research_cmd(args: argparse.Namespace):
    from pipeline.research import generate_claude_research, generate_perplexity_research

    context = _context_string(args)
    console.print(
        Panel(
            f"[bold]RESEARCH[/bold] — {args.topic}\n"
            f"Provider: {args.provider} | Context: {context or 'none'}",
            border_style="cyan",
        )
    )

    if args.provider == "perplexity":
        website = None
        if args.website:
            from pipeline.scraper import scrape_website
            website = scrape_website(args.website, max_pages=args.max_pages)
            console.print(f"  [dim]Scraped {len(website['subpagesScraped'])} page(s) from {website['url']}[/dim]")
        research = generate_perplexity_research(
            args.topic,
            context,
            language=args.language,
            company_name=args.company or "",
            website_content=website,
        )
    else:
        result = generate_claude_research(args.topic, context, args.language)
        research = result["research"]

    if args.show:
        console.print(Markdown(research))
    _save_output(f"research_{_slug(args.topic)}.md", research, args.output)
    _print_usage()


def run_content_cmd(args: argparse.Namespace):
    from pipeline.content import generate_content
    from schemas.content import ContentDetails

    details = ContentDetails(
        content_type=args.content_type,
        platform=args.platform,
        sub_platform=args.sub_platform or "",
        audience=args.audience or "",
        research_topic=args.topic or "",
        research_data=_read_file(args.research),
        youtube_transcript=_read_file(args.transcript),
        style=args.style,
        style_intensity=args.intensity,
        language=args.language,
        length=args.length,
        include_cta=not args.no_cta,
        include_hashtags=not args.no_hashtags,
    )
    console.print(
        Panel(
            f"[bold]CONTENT[/bold] — {details.content_type} for {details.platform}\n"
            f"Persona: {details.style} | Language: {details.language}",
            border_style="bright_magenta",
        )
    )
    text = generate_content(details)
    console.print(Markdown(text))
    _save_output(f"content_{_slug(details.content_type + '-' + details.platform)}.md", text, args.output)
    _print_usage()


def run_questions_cmd(args: argparse.Namespace):
    from pipeline.content import answer_question, generate_follow_up_questions
    from schemas.content import AnswerQuestionRequest, FollowUpRequest

    shared = dict(
        content=_read_file(args.content),
        research=_read_file(args.research),
        content_type=args.content_type,
        platform=args.platform,
        language=args.language,
    )
    if args.ask:
        result = answer_question(AnswerQuestionRequest(question=args.ask, **shared))
        console.print(Panel(result["answer"], title=args.ask, border_style="cyan"))
        return

    result = generate_follow_up_questions(FollowUpRequest(**shared))
    for i, question in enumerate(result["questions"], 1):
        console.print(f"  [bold]{i}.[/bold] {question}")


def run_refine_cmd(args: argparse.Namespace):
    from pipeline.content import refine_content
    from schemas.content import RefineRequest

    req = RefineRequest(
        original_content=_read_file(args.content),
        feedback=args.feedback,
        content_type=args.content_type,
        style=args.style,
        language="es" if args.spanish else "en",
        is_spanish_mode=args.spanish,
    )
    text = refine_content(req)
    console.print(Markdown(text))
    default_name = f"refined_{Path(args.content).stem}.md"
    _save_output(default_name, text, args.output)
    _print_usage()


def _write_data_url(data_url: str, path: Path):
    header, _, payload = data_url.partition(",")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(base64.b64decode(payload))
    console.print(f"  [green]Image saved:[/green] {path} ({header.split(';')[0][5:]})")


def run_image_cmd(args: argparse.Namespace):
    from pipeline import images

    if args.edit:
        source = base64.b64encode(Path(args.edit).read_bytes()).decode("ascii")
        target = base64.b64encode(Path(args.target).read_bytes()).decode("ascii") if args.target else ""
        result = images.edit_image(source, args.prompt, target)
        if result.get("error"):
            console.print(f"[red]{result['error']}[/red]")
            sys.exit(1)
        if result.get("apiLimited"):
            console.print(f"[yellow]{result['textResponse']}[/yellow]")
            sys.exit(1)
        console.print(f"  {result['textResponse']}")
    else:
        result = images.generate_image(args.prompt, args.language)

    out = Path(args.output) if args.output else config.OUTPUT_DIR / f"image_{_slug(args.prompt)}.png"
    _write_data_url(result["image"], out)
    console.print(f"  [dim]Model: {result['modelUsed']}[/dim]")


def run_serve_cmd(args: argparse.Namespace):
    import uvicorn
    uvicorn.run("server:app", host=args.host, port=args.port, log_level="info", reload=args.reload)


def main():
    parser = argparse.ArgumentParser(
        description="DeepContent — research-driven content generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # -- trending --
    tr = subparsers.add_parser("trending", help="Show ranked trending topics")
    tr.add_argument("--business-type", "-b", default="", help="Business type for relevance ranking")
    tr.add_argument("--sources", default="reddit,rss,x", help="Comma-separated: reddit, rss, x")
    tr.add_argument("--limit", type=int, default=10, help="Topics to show (default: 10)")

    # -- research --
    rs = subparsers.add_parser("research", help="Generate research for a topic")
    rs.add_argument("topic", help="Research topic or company name")
    rs.add_argument("--provider", choices=["claude", "perplexity"], default="claude")
    _add_context_args(rs)
    rs.add_argument("--language", default="en", choices=["en", "es"])
    rs.add_argument("--company", help="Company name for company-focused research")
    rs.add_argument("--website", help="Website to scrape for company context (perplexity only)")
    rs.add_argument("--max-pages", type=int, default=5, help="Pages to scrape (default: 5)")
    rs.add_argument("--show", action="store_true", help="Print the research to the console")
    rs.add_argument("--output", "-o", help="Output file (default: outputs/research_<topic>.md)")

    # -- content --
    ct = subparsers.add_parser("content", help="Generate content from research or a transcript")
    _add_context_args(ct)
    ct.add_argument("--research", "-r", help="Path to research text file")
    ct.add_argument("--transcript", help="Path to a transcript text file")
    ct.add_argument("--topic", help="Research topic")
    ct.add_argument("--style", "-s", default="professional", help="Persona style (e.g. ariastar)")
    ct.add_argument("--intensity", type=float, default=1, help="Persona trait intensity (1-3)")
    ct.add_argument("--language", default="en", choices=["en", "es"])
    ct.add_argument("--length", default="medium", choices=["short", "medium", "long"])
    ct.add_argument("--no-cta", action="store_true", help="Omit the call to action")
    ct.add_argument("--no-hashtags", action="store_true", help="Omit hashtags")
    ct.add_argument("--output", "-o", help="Output file")

    # -- questions --
    qs = subparsers.add_parser("questions", help="Follow-up questions about content, or answer one")
    qs.add_argument("--content", "-c", required=True, help="Path to content file")
    qs.add_argument("--research", "-r", help="Path to research file")
    qs.add_argument("--content-type", default="generic")
    qs.add_argument("--platform", default="generic")
    qs.add_argument("--language", default="en", choices=["en", "es"])
    qs.add_argument("--ask", help="Answer this question instead of suggesting questions")

    # -- refine --
    rf = subparsers.add_parser("refine", help="Refine content with feedback")
    rf.add_argument("--content", "-c", required=True, help="Path to content file")
    rf.add_argument("--feedback", "-f", required=True, help="What to change")
    rf.add_argument("--content-type", default="")
    rf.add_argument("--style", "-s", default="professional")
    rf.add_argument("--spanish", action="store_true", help="Refine in Spanish")
    rf.add_argument("--output", "-o", help="Output file")

    # -- image --
    im = subparsers.add_parser("image", help="Generate or edit an image with Gemini")
    im.add_argument("prompt", help="Image description or edit instructions")
    im.add_argument("--edit", help="Path to a JPEG to edit")
    im.add_argument("--target", help="Optional second reference image for edits")
    im.add_argument("--language", default="en", choices=["en", "es"])
    im.add_argument("--output", "-o", help="Output image path")

    # -- serve --
    sv = subparsers.add_parser("serve", help="Run the API server")
    sv.add_argument("--host", default=config.SERVER_HOST)
    sv.add_argument("--port", type=int, default=config.SERVER_PORT)
    sv.add_argument("--reload", action="store_true")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        run_serve_cmd(args)
        return

    setup_logging()

    console.print(
        Panel(
            "[bold]DEEPCONTENT[/bold]\n"
            "Research-Driven Content",
            border_style="bright_magenta",
        )
    )

    commands = {
        "trending": run_trending_cmd,
        "research": run_research_cmd,
        "content": run_content_cmd,
        "questions": run_questions_cmd,
        "refine": run_refine_cmd,
        "image": run_image_cmd,
    }
    try:
        commands[args.command](args)
    except (ValueError, LLMError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _add_context_args(parser: argparse.ArgumentParser):
    """Audience / content type / platform arguments shared by research and content."""
    parser.add_argument("--audience", "-a", help="Target audience")
    parser.add_argument("--content-type", "-t", default="", help="Content type (e.g. blog-post, social-media)")
    parser.add_argument("--platform", "-p", default="", help="Platform (e.g. social, blog, email)")
    parser.add_argument("--sub-platform", help="Sub-platform (e.g. facebook, linkedin)")


if __name__ == "__main__":
    main()
