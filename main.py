from __future__ import annotations
import argparse
import logging
import sys

from pbkdf2_mod.errors import DerivationError, HexDecodingError, ValidationError
from pbkdf2_mod.kdf import timed_derive
from pbkdf2_mod.report import Report, format_report
from pbkdf2_mod.salt import resolve_salt
from pbkdf2_mod.validate import parse_hash_type, parse_iteration_count

log = logging.getLogger(__name__)

USAGE = "%(prog)s [-h] [-v] hashType salt iterationCount password [doItRight]"

EPILOG = """\
positional arguments:
  hashType        1=SHA-1, 2=SHA-256, 3=SHA-384, 4=SHA-512 (legacy slot), 5=SHA-512
  salt            decimal integer, or hex string when doItRight is given
  iterationCount  iteration count (1-5000000)
  password        any text, UTF-8 encoded before derivation
  doItRight       if present the salt is read as a hex byte string,
                  otherwise the salt is read as an integer

Options are only recognized in front of hashType. Everything after it is
taken literally, so passwords may start with "-". Extra arguments are ignored.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbkdf2-demo",
        usage=USAGE,
        description="Compute PBKDF2 and show the difference between an integer salt and a byte salt.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("values", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.values) < 4:
        missing = ["hashType", "salt", "iterationCount", "password"][len(args.values):]
        parser.error(f"the following arguments are required: {', '.join(missing)}")

    raw_hash_type, raw_salt, raw_iteration_count, password = args.values[:4]
    do_it_right = len(args.values) >= 5

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    log.debug("args=%r doItRight=%s", args.values, do_it_right)

    try:
        hash_type = parse_hash_type(raw_hash_type)
        salt = resolve_salt(do_it_right, raw_salt)
        iterations = parse_iteration_count(raw_iteration_count)
    except (ValidationError, HexDecodingError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        key, elapsed_ms = timed_derive(hash_type, salt.salt, iterations, password)
    except DerivationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    report = Report(
        hash_type=hash_type,
        salt_display=salt.display,
        iterations=iterations,
        password=password,
        derived_key=key,
        elapsed_ms=elapsed_ms,
    )
    sys.stdout.write(format_report(report))
    return 0


def main() -> int:
    logging.basicConfig(stream=sys.stderr, level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
