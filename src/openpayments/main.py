"""
Command-line entry point.

    openpayments validate FILE...
    openpayments convert FILE [--format json|xml]
    openpayments messages

validate exits with status 1 if any file fails to decode or validate.
"""

import argparse
import logging
import sys
from pathlib import Path

from openpayments import __version__
from openpayments.config import get_settings
from openpayments.domain.errors import OpenPaymentsError, ValidationError
from openpayments.domain.registry import registered_messages
from openpayments.services.documents import (
    parse_document,
    render_document,
    to_json,
    validate_document,
)

logger = logging.getLogger(__name__)


def cmd_validate(args: argparse.Namespace) -> int:
    failed = 0
    for path in args.files:
        report = validate_document(Path(path).read_bytes())
        if report.is_valid:
            print(f"{path}: OK ({report.identifier})")
            continue
        failed += 1
        error = report.error
        if isinstance(error, ValidationError):
            print(f"{path}: FAIL [{error.code}] {error.path}: {error.message}")
        else:
            print(f"{path}: FAIL {error}")
    logger.info("Validated %d file(s), %d failed", len(args.files), failed)
    return 1 if failed else 0


def cmd_convert(args: argparse.Namespace) -> int:
    try:
        message = parse_document(Path(args.file).read_bytes())
    except OpenPaymentsError as e:
        print(f"{args.file}: {e}", file=sys.stderr)
        return 1
    if args.format == "json":
        print(to_json(message, indent=2))
    else:
        sys.stdout.buffer.write(render_document(message))
    return 0


def cmd_messages(args: argparse.Namespace) -> int:
    for definition in registered_messages():
        print(f"{definition.identifier}\t{definition.root_tag}\t{definition.model.__name__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openpayments",
        description="Validate and convert ISO 20022 documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override OPENPAYMENTS_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Decode and validate XML documents")
    validate.add_argument("files", nargs="+", metavar="FILE")
    validate.set_defaults(handler=cmd_validate)

    convert = sub.add_parser("convert", help="Re-render an XML document")
    convert.add_argument("file", metavar="FILE")
    convert.add_argument("--format", choices=["json", "xml"], default="json")
    convert.set_defaults(handler=cmd_convert)

    messages = sub.add_parser("messages", help="List supported messages")
    messages.set_defaults(handler=cmd_messages)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        stream=sys.stderr,
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
