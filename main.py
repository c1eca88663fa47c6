"""callflow — show the routing decisions the switch applied to a dialed number."""

import logging
import sys
from argparse import ArgumentParser

from callflow_analyzer.config import load_config
from callflow_analyzer.formatter import get_formatter
from callflow_analyzer.pipeline import CallFlowAnalyzer


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="callflow",
        description="Reconstruct the call flow for a dialed phone number from the switch log.",
    )
    parser.add_argument(
        "phone_number",
        help="Dialed phone number, matched literally against log lines",
    )
    parser.add_argument(
        "--log-file",
        help="Path to the switch log (overrides config and CALLFLOW_LOG_FILE)",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (default: $CONFIG_PATH)",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run(args) -> int:
    """Run one query and print the result. Returns the exit code."""
    overrides = {"log_file": args.log_file}
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    config = load_config(args.config, overrides)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [CALLFLOW] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    analyzer = CallFlowAnalyzer(config.log_file)
    result = analyzer.analyze(args.phone_number)

    if not result.found:
        print(f"No call flow found for {args.phone_number}", file=sys.stderr)
        return 1

    formatter = get_formatter(args.output)
    print(formatter(result))
    return 0


def main():
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
