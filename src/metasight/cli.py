"""Command-line interface for MetaSight."""

import sys
from pathlib import Path

from metasight.analyzer import MetaSightAnalyzer
from metasight.config import AnalysisThresholds, Config, settings
from metasight.logging_config import setup_logging
from metasight.report_generator import ReportGenerator
from metasight.session import AnalysisSession


def _emit(generator: ReportGenerator, result, args) -> None:
    """Render a result and print it or write it to a file."""
    output = generator.render(result, args.output)
    if args.output_file:
        generator.write(output, Path(args.output_file))
        print(f"Results written to {args.output_file}")
    else:
        print(output)


def _generator(args) -> ReportGenerator:
    if getattr(args, "thresholds_file", None):
        thresholds = AnalysisThresholds.from_file(args.thresholds_file)
    else:
        thresholds = AnalysisThresholds.from_env()
    return ReportGenerator(thresholds=thresholds)


def analyze_command(args):
    """Fetch a URL and report its SEO metadata."""
    try:
        config = Config.from_env()
        if args.timeout:
            config.timeout = args.timeout

        analyzer = MetaSightAnalyzer(config=config)
        session = AnalysisSession()

        print(f"Analyzing {args.url}...", file=sys.stderr)
        result = session.run(analyzer, args.url)

        if result is None or not result.success:
            print(f"Error: {session.error or 'Failed to analyze URL'}")
            sys.exit(1)

        _emit(_generator(args), result, args)

    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


def extract_command(args):
    """Report SEO metadata for a local HTML file."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {path}")
        sys.exit(1)

    try:
        html = path.read_text(encoding="utf-8", errors="replace")
        analyzer = MetaSightAnalyzer(config=Config.from_env())
        result = analyzer.analyze_html(html, args.base_url)
        _emit(_generator(args), result, args)

    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


def _add_output_arguments(parser) -> None:
    parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json", "html"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )
    parser.add_argument(
        "--thresholds-file",
        help="JSON file with metric card thresholds",
    )


def main():
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="MetaSight - Inspect SEO metadata and social previews of a web page"
    )

    # Global flags (before subcommands)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging verbosity (default: LOG_LEVEL from env, else INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Fetch a URL and analyze its SEO metadata."
    )
    analyze_parser.add_argument("url", help="URL to analyze (https:// is added if missing)")
    analyze_parser.add_argument(
        "--timeout",
        type=int,
        default=None,
        help=f"Retrieval timeout in seconds (default: {settings.TIMEOUT})",
    )
    _add_output_arguments(analyze_parser)
    analyze_parser.set_defaults(func=analyze_command)

    extract_parser = subparsers.add_parser(
        "extract", help="Analyze a local HTML file."
    )
    extract_parser.add_argument("file", help="Path to an HTML file")
    extract_parser.add_argument(
        "--base-url",
        required=True,
        help="Absolute URL the HTML was served from (used to classify links)",
    )
    _add_output_arguments(extract_parser)
    extract_parser.set_defaults(func=extract_command)

    args = parser.parse_args()

    setup_logging(
        level=args.log_level or settings.LOG_LEVEL,
        log_file=getattr(args, 'log_file', None),
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
