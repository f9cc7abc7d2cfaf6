"""qrterm CLI — print a QR code in the terminal."""

import argparse
import sys

from qrterm.encoder import DEFAULT_ECC, ECC_NAMES, DataOverflowError
from qrterm.logging import audit, get_logger, setup_logging
from qrterm.renderer import QUIET_ZONE_WIDTH, print_qr
from qrterm.sink import SinkError

log = get_logger("cli")


def _read_text(args) -> str:
    """Take the text from the command line, or stdin when omitted or '-'."""
    if args.text is not None and args.text != "-":
        return args.text
    data = sys.stdin.read()
    if data.endswith("\n"):
        data = data[:-1]
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qrterm", description="Print text as a QR code in the terminal")

    parser.add_argument("text", nargs="?", default=None, help="Text to encode (stdin if omitted or '-')")
    parser.add_argument("-e", "--ecc", default=DEFAULT_ECC, choices=sorted(ECC_NAMES),
                        help="Error correction level")
    parser.add_argument("-v", "--version", type=int, default=None, choices=range(1, 41), metavar="1-40",
                        help="QR version 1-40 (auto if omitted)")
    parser.add_argument("-m", "--mask", type=int, default=None, choices=range(8), metavar="0-7",
                        help="Mask pattern 0-7 (auto if omitted)")
    parser.add_argument("-b", "--border", type=int, default=QUIET_ZONE_WIDTH,
                        help=f"Quiet zone modules (default: {QUIET_ZONE_WIDTH})")

    # Global logging flags
    parser.add_argument("-V", "--verbose", action="store_true", help="Enable DEBUG-level logging")
    parser.add_argument("--log-file", default=None, help="Write JSON logs to file")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.border < 0:
        parser.error("--border must be >= 0")

    setup_logging(level="DEBUG" if args.verbose else "CRITICAL", log_file=args.log_file)
    audit("cli.start", logger=log, verbose=args.verbose, ecc=args.ecc, border=args.border)

    text = _read_text(args)
    try:
        print_qr(text, ecc=args.ecc, border=args.border, version=args.version, mask=args.mask)
    except DataOverflowError:
        print(f"qrterm: text too long to encode ({len(text)} characters)", file=sys.stderr)
        return 1
    except SinkError as exc:
        print(f"qrterm: {exc}", file=sys.stderr)
        return 1

    audit("cli.done", logger=log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
