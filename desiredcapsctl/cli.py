import argparse
import logging
import sys

from pydantic import ValidationError

from desiredcaps.bootstrap.config.loader import get_configfile
from desiredcaps.bootstrap.config.settings import DesiredCapsConfig
from desiredcaps.bootstrap.deps import get_parser
from desiredcaps.core.utils.log import setup_logging
from desiredcapsctl.commands import render_explain, render_json
from desiredcapsctl.repl import repl


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="desiredcapsctl",
        description=(
            "Convert a capability string into typed capabilities.\n\n"
            "Entries are name=value pairs separated by commas. Values may be\n"
            "literals, \"quoted strings\", JSON arrays or JSON objects.\n"
            "Without CAPABILITIES an interactive prompt is started."
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "capabilities",
        nargs="?",
        help=(
            "Capability string to convert.\n\n"
            "Example:\n"
            "  desiredcapsctl 'browserName=chrome,version=120,chromeOptions={\"args\":[\"--headless\"]}'"
        )
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to a YAML configuration file"
    )

    parser.add_argument(
        "-l", "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (overrides the configuration)"
    )

    parser.add_argument(
        "--diagnostics",
        choices=["log", "stderr", "silent"],
        help="Destination of warnings about discarded trailing symbols"
    )

    parser.add_argument(
        "--no-promote",
        action="store_true",
        help="Keep '*options' JSON objects as text"
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum bracket nesting depth inside a value"
    )

    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print one 'name: KIND = value' line per capability instead of JSON"
    )

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> dict:
    parser = {}
    if args.no_promote:
        parser["promote_options"] = False
    if args.max_depth is not None:
        parser["max_depth"] = args.max_depth

    log = {}
    if args.log_level:
        log["level"] = args.log_level
    if args.diagnostics:
        log["diagnostics"] = args.diagnostics

    overrides = {}
    if parser:
        overrides["parser"] = parser
    if log:
        overrides["logging"] = log
    return overrides


def main(argv=None) -> int:
    args = parse_args(argv)

    configfile = get_configfile(args.config)
    try:
        config = DesiredCapsConfig.load(configfile, **build_overrides(args))
    except ValidationError as exc:
        print(f"[config] Invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    setup_logging(config.logging.level)
    logger = logging.getLogger("desiredcapsctl")
    logger.debug(f"Loaded configuration: {config.model_dump()}")

    capability_parser = get_parser(config)

    if args.capabilities is None:
        repl(capability_parser)
        return 0

    capabilities = capability_parser.convert(args.capabilities)
    if args.explain:
        print(render_explain(capabilities))
    else:
        print(render_json(capabilities))
    return 0


def entrypoint():
    sys.exit(main())
