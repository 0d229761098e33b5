from __future__ import annotations

import argparse
import logging
import sys

from binx.config import ConfigError, load_config
from binx.core.io import ByteBuffer
from binx.logs import setup_logging

log = logging.getLogger("binx.cli")


def _positive_int(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="binx", description="binx byte map viewer (Textual)")
    parser.add_argument("-f", "--file", required=True, help="Name of file to view")
    parser.add_argument("-c", "--config", help="Path to a YAML config file")
    parser.add_argument("-w", "--width", type=_positive_int, help="Bytes per grid row")
    parser.add_argument("--log-file", help="Write a debug log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"binx: {e}", file=sys.stderr)
        return 1
    config = config.with_overrides(
        viewport_width=args.width,
        log_file=args.log_file,
        log_level="DEBUG" if args.verbose else None,
    )
    setup_logging(config.log_file, config.log_level)

    try:
        buffer = ByteBuffer.from_path(args.file)
    except FileNotFoundError:
        print(f"binx: file not found: {args.file}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"binx: cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    log.info("loaded %s (%d bytes)", args.file, buffer.size)

    # Imported late so flag and file errors are reported without starting Textual
    from binx.app import BinxApp

    app = BinxApp(buffer, config)
    try:
        app.run()
    except Exception as e:
        log.exception("terminal session failed")
        print(f"binx: {e}", file=sys.stderr)
        return 1
    return app.return_code or 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
