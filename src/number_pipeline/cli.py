"""
Command-line entry point.

    number-pipeline FILTER SOURCE [options]

Exit codes:
    0: run completed
    1: the filter name could not be resolved
    2: invalid arguments or configuration
    3: the source could not be read (observers still finished)
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from number_pipeline import configure_logging
from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.adapters.metrics_collector import InMemoryMetricsCollector
from number_pipeline.adapters.observers import create_observers
from number_pipeline.adapters.sinks import SINK_TYPES, create_sink
from number_pipeline.config.loader import ConfigLoader, load_config
from number_pipeline.config.models import PipelineConfig
from number_pipeline.domain.errors import ConfigError
from number_pipeline.domain.value_objects import RunStatus
from number_pipeline.observability.run_logger import RunLogger
from number_pipeline.pipeline.number_pipeline import execute
from number_pipeline.registry.defaults import create_default_registry


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""

    epilog_text = """
Examples:
  %(prog)s EVEN numbers.txt                   # Print even numbers and their count
  %(prog)s GT5 numbers.txt                    # Numbers greater than 5
  %(prog)s ODD numbers.txt --sink file        # Append output to app.log
  %(prog)s GT0 numbers.txt --observers counter

Filters:
  EVEN, ODD, GT<n> (n is an integer, e.g. GT5 or GT-3)
"""

    parser = argparse.ArgumentParser(
        prog="number-pipeline",
        description="Filter integers from a file and report the ones that pass",
        epilog=epilog_text,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("filter", metavar="FILTER", help="Filter name, e.g. EVEN, ODD, GT5")
    parser.add_argument("source", metavar="SOURCE", help="File with whitespace-separated integers")

    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML configuration file",
    )

    parser.add_argument(
        "--sink",
        metavar="TYPE",
        help=f"Output sink: {', '.join(SINK_TYPES)} (default: console)",
    )

    parser.add_argument(
        "--sink-path",
        metavar="PATH",
        help="Target file for the file sink (default: app.log)",
    )

    parser.add_argument(
        "--observers",
        metavar="NAMES",
        help="Comma-separated observers in notification order (default: printer,counter)",
    )

    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Diagnostic log level (default: WARNING)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render run events as JSON lines on stderr",
    )

    return parser


def _collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Turn command-line options into a config overlay."""
    overrides: Dict[str, Any] = {}
    sink: Dict[str, Any] = {}
    log: Dict[str, Any] = {}

    if args.sink:
        sink["type"] = args.sink
    if args.sink_path:
        sink["path"] = args.sink_path
    if args.observers is not None:
        overrides["observers"] = [n for n in args.observers.split(",") if n.strip()]
    if args.log_level:
        log["level"] = args.log_level
    if args.json_logs:
        log["json"] = True

    if sink:
        overrides["sink"] = sink
    if log:
        overrides["logging"] = log
    return overrides


def _load(args: argparse.Namespace) -> PipelineConfig:
    overrides = _collect_overrides(args)
    if args.config:
        return load_config(args.config, overrides)
    return ConfigLoader().load_from_dict(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the number pipeline from the command line."""
    args = build_parser().parse_args(argv)

    try:
        config = _load(args)
    except FileNotFoundError as e:
        print(f"Config file not found: {e.filename}", file=sys.stderr)
        return 2
    except (ConfigError, ValidationError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    configure_logging(config.logging.level_number)

    registry = create_default_registry()
    sink = create_sink(config.sink.type, config.sink.path)
    observers = create_observers(config.observers, sink)
    run_logger = RunLogger(
        use_json=config.logging.json_output,
        log_level=config.logging.level_number,
    )

    result = execute(
        registry,
        args.filter,
        FileNumberSource(),
        args.source,
        observers,
        metrics_collector=InMemoryMetricsCollector(),
        run_logger=run_logger,
    )

    if result.status == RunStatus.FAILED:
        print(result.error, file=sys.stderr)
        print(f"Available filters: {', '.join(registry.prefixes())}", file=sys.stderr)
    elif result.status == RunStatus.DEGRADED:
        print(f"Warning: {result.error}", file=sys.stderr)

    return result.exit_code
