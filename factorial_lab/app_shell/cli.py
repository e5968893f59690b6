import argparse
import logging
import sys
from pathlib import Path

from factorial_lab.adapters.stdout import StreamWriter
from factorial_lab.app_shell.term_color import ColorFormatter
from factorial_lab.components.entry import EntryInput, run_entry
from factorial_lab.components.factorial import FactorialService
from factorial_lab.rules.loader import load_rules
from factorial_lab.rules.models import LoggingRules, Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def setup_logging(log_rules: LoggingRules, verbose: bool = False, no_color: bool = False) -> None:
    """Route diagnostics to stderr; stdout is reserved for program output."""
    handler = logging.StreamHandler(sys.stderr)
    use_color = log_rules.color and not no_color and sys.stderr.isatty()
    handler.setFormatter(ColorFormatter(log_rules.format, use_color=use_color))

    level = logging.DEBUG if verbose else log_rules.level
    logging.basicConfig(level=level, handlers=[handler], force=True)


def resolve_rules_path(explicit: str | None) -> Path | None:
    if explicit:
        return Path(explicit)

    default = Path(RULES_PATH)
    if default.exists():
        return default
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="factorial-lab",
        description="Print the factorial of 5",
    )
    parser.add_argument("--rules", help=f"Path to rules file (default: ./{RULES_PATH} if present)")
    parser.add_argument("--verbose", action="store_true", help="Log debug diagnostics to stderr")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured log output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(LoggingRules(), verbose=args.verbose, no_color=args.no_color)

    rules_path = resolve_rules_path(args.rules)
    try:
        rules = load_rules(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    setup_logging(rules.logging, verbose=args.verbose, no_color=args.no_color)
    if rules_path is None:
        logger.debug("No rules file found, using defaults")
    else:
        logger.debug(f"Rules loaded from {rules_path}")

    return run(rules)


def run(rules: Rules) -> int:
    service = FactorialService(max_argument=rules.factorial.max_argument)
    writer = StreamWriter()

    result = run_entry(EntryInput(), service, writer)
    writer.flush()

    if not result.success:
        for error in result.errors:
            logger.error(f"{error.code}: {error.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
