"""Command line interface for provisioning bucket → topic → queue notifications."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from cli import config, output
from core import provisioner

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CLIError(Exception):
    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        raise CLIError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def _bucket_name(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("bucket name must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="notifysetup",
        description="Route a bucket's object-created events to an SQS queue through an SNS topic",
    )
    parser.add_argument("bucket", type=_bucket_name, help="Name of the S3 bucket to wire up")
    parser.add_argument("--format", choices=output.FORMATS, help="Output format override")
    parser.add_argument("--output", type=Path, help="Write the resulting identifiers to a file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def app(argv: list[str] | None = None, *, session: Any | None = None) -> int:
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)
        settings = config.load_settings().merge_cli(format_override=args.format)

        result = provisioner.run(args.bucket, settings, session=session)
        if not result.ok:
            raise CLIError(f"Error: {result.error}")

        output.emit(result.identifiers(), settings.default_format, output_path=args.output)
    except CLIError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    except Exception as exc:  # pragma: no cover - unexpected errors bubble up
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)


def main() -> None:
    raise SystemExit(app())


if __name__ == "__main__":
    main()
