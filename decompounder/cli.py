"""Command-line interface for the decompounding engine."""

import argparse
import logging
import sys
from pathlib import Path

from .analysis import Analyzer
from .config import Config
from .pipeline import DecompoundPipeline


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Split German compound words into their parts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a sentence
  decompounder analyze --dictionary words.txt "Die Jahresfeier auf dem Donaudampfschiff"

  # Use a named analyzer profile from a config file
  decompounder analyze --config config.yaml --analyzer with_keywords "Schlüsselwort"

  # Decompound a JSONL corpus into a token CSV
  decompounder run --config config.yaml --input data/input.jsonl --output data/tokens.csv
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze text given on the command line")
    setup_common_arguments(analyze_parser)
    analyze_parser.add_argument("text", nargs="+", help="Text to analyze")
    analyze_parser.add_argument(
        "--show-positions",
        action="store_true",
        help="Print position increment and offsets next to each token",
    )

    run_parser = subparsers.add_parser("run", help="Decompound a JSONL file")
    setup_common_arguments(run_parser)
    run_parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL file",
    )
    run_parser.add_argument(
        "--output",
        type=Path,
        help="Path of the CSV file to write",
    )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        parser.exit(2)
    return args


def setup_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Setup arguments shared by all commands."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        help="Path to a word list with one morpheme per line",
    )
    parser.add_argument(
        "--keywords",
        type=Path,
        help="Path to a list of tokens protected from decompounding",
    )
    parser.add_argument(
        "--analyzer",
        type=str,
        help="Named analyzer profile from the config file",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        help="Minimum subword length (default: 2)",
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Match dictionary entries case-insensitively",
    )
    parser.add_argument(
        "--respect-keywords",
        action="store_true",
        help="Never decompound tokens listed as keywords",
    )
    parser.add_argument(
        "--subwords-only",
        action="store_true",
        help="Emit only the subwords of decomposed tokens",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if args.dictionary:
        config.dictionary.path = args.dictionary
    if args.ignore_case:
        config.dictionary.ignore_case = True
    if args.keywords:
        config.keywords.path = args.keywords
    if args.respect_keywords:
        config.keywords.respect_keywords = True
    if args.min_length is not None:
        config.decompound.min_subword_length = args.min_length
    if args.subwords_only:
        config.decompound.subwords_only = True

    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "output", None):
        config.output.output_path = args.output

    # Validate once more after the overrides
    return Config.model_validate(config.model_dump())


def handle_analyze(args: argparse.Namespace) -> int:
    """Handle analyze command."""
    try:
        config = build_config(args)
        analyzer = Analyzer.from_config(config, name=args.analyzer)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for token in analyzer.analyze(" ".join(args.text)):
        if args.show_positions:
            print(f"{token.text}\t{token.position_increment}\t{token.start}\t{token.end}")
        else:
            print(token.text)
    return 0


def handle_run(args: argparse.Namespace) -> int:
    """Handle run command."""
    try:
        config = build_config(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = DecompoundPipeline(config, analyzer_name=args.analyzer)
        line_count = pipeline.run()
        print(f"\nProcessed {line_count} lines")
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Decompounding failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "analyze":
        return handle_analyze(args)
    return handle_run(args)


if __name__ == "__main__":
    sys.exit(main())
