"""Main CLI entry point for the ssml-markup command-line tool.

Provides parse (JSON tree output), format (normalized markup output) and
validate (well-formedness report) commands over files or standard input.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ssml_markup import __version__
from ssml_markup.api import SSMLProcessor
from ssml_markup.shared import (
    ConfigValidationError,
    MalformedMarkupError,
    ParserConfig,
    get_logger,
)

STDIN_PATH = "-"
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.parser_config = ParserConfig.lenient()
        self.output_format = "text"
        self.verbose = False
        self.quiet = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CLIConfig":
        """Build configuration from a config file plus command-line overrides.

        Raises:
            ConfigValidationError: if the config file or overrides are invalid
        """
        config = cls()
        if args.config:
            config.parser_config = ParserConfig.from_json_file(args.config)
        if args.strict:
            config.parser_config = config.parser_config.override(
                strict_closing_tags=True, reject_trailing_content=True
            )
        if args.max_depth is not None:
            config.parser_config = config.parser_config.override(
                max_depth=args.max_depth
            )
        if args.decode_quotes:
            config.parser_config = config.parser_config.override(
                decode_quote_entities=True
            )
        config.output_format = getattr(args, "format", config.output_format)
        config.verbose = args.verbose
        config.quiet = args.quiet
        return config


class MarkupProcessor:
    """Reads markup sources and runs them through an SSMLProcessor."""

    def __init__(self, config: CLIConfig) -> None:
        self.config = config
        self.processor = SSMLProcessor(config=config.parser_config)
        self.logger = get_logger(__name__, None, "cli_processor")

    def read_source(self, path: str) -> str:
        if path == STDIN_PATH:
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")

    def process(self, path: str, operation: str) -> Dict[str, Any]:
        """Run ``operation`` ("parse", "format" or "validate") on one source."""
        try:
            markup = self.read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(
                "Could not read input",
                extra={"file": path, "error_type": type(e).__name__}
            )
            return {"file": path, "success": False, "error": str(e)}

        try:
            node = self.processor.parse(markup)
        except MalformedMarkupError as e:
            return {
                "file": path,
                "success": False,
                "error": str(e),
                "offset": e.offset,
                "reason": e.reason.name,
            }

        result: Dict[str, Any] = {"file": path, "success": True}
        if operation == "parse":
            result["tree"] = node.to_dict()
        elif operation == "format":
            result["markup"] = self.processor.serialize(node)
        return result


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="ssml-markup",
        description="Parse, normalize and validate SSML markup"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet output")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "paths",
        nargs="+",
        help="Markup files to process ('-' reads standard input)"
    )
    common.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON parser configuration file"
    )
    common.add_argument(
        "--strict",
        action="store_true",
        help="Require matching closing tags and reject trailing content"
    )
    common.add_argument(
        "--max-depth",
        type=int,
        help="Maximum element nesting depth"
    )
    common.add_argument(
        "--decode-quotes",
        action="store_true",
        help="Also decode &quot; and &apos; entity references"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "parse", parents=[common], help="Parse markup and print the node tree as JSON"
    )
    subparsers.add_parser(
        "format", parents=[common], help="Parse markup and print it re-serialized"
    )
    validate_parser = subparsers.add_parser(
        "validate", parents=[common], help="Check markup is well-formed"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)"
    )

    return parser


def format_validation(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format validation results for output."""
    if format_type == "json":
        return json.dumps(
            [{key: value for key, value in result.items() if key != "tree"}
             for result in results],
            indent=2
        )

    valid_count = sum(1 for r in results if r["success"])
    lines = [f"Validated {len(results)} inputs, {valid_count} well-formed", "-" * 50]
    for result in results:
        status = "✓" if result["success"] else "✗"
        lines.append(f"{status} {result['file']}")
        if not result["success"]:
            lines.append(f"   Error: {result['error']}")
    return "\n".join(lines)


def _exit_code(results: List[Dict[str, Any]]) -> int:
    return EXIT_OK if results and all(r["success"] for r in results) else EXIT_FAILURE


def cmd_parse(processor: MarkupProcessor, args: argparse.Namespace) -> int:
    """Handle parse command."""
    results = [processor.process(path, "parse") for path in args.paths]
    if len(results) == 1 and results[0]["success"]:
        print(json.dumps(results[0]["tree"], indent=2))
    else:
        print(json.dumps(results, indent=2))
    return _exit_code(results)


def cmd_format(processor: MarkupProcessor, args: argparse.Namespace) -> int:
    """Handle format command."""
    results = [processor.process(path, "format") for path in args.paths]
    for result in results:
        if result["success"]:
            print(result["markup"])
        else:
            print(f"{result['file']}: {result['error']}", file=sys.stderr)
    return _exit_code(results)


def cmd_validate(processor: MarkupProcessor, args: argparse.Namespace) -> int:
    """Handle validate command."""
    results = [processor.process(path, "validate") for path in args.paths]
    print(format_validation(results, processor.config.output_format))
    return _exit_code(results)


COMMANDS = {
    "parse": cmd_parse,
    "format": cmd_format,
    "validate": cmd_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    try:
        config = CLIConfig.from_args(args)
    except ConfigValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if config.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif config.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        return COMMANDS[args.command](MarkupProcessor(config), args)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
