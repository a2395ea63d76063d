"""
Command-line front end.

    vigenere-breaker                         # sample ciphertext, key length 4
    vigenere-breaker RIJVSUYVJN -k 3
    vigenere-breaker -f intercept.txt -k 5 -n 5 --chart freq.png -v

Ciphertext whitespace is dropped and letters upper-cased before
analysis; any other character is rejected.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .alphabet import clean_text
from .config import BreakerConfig
from .errors import AnalysisError, InvalidCharacterError
from .pipeline import VigenereBreaker
from .report import format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vigenere-breaker",
        description="Frequency-analysis attack on a Vigenère ciphertext of known key length.",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("ciphertext", nargs="?", help="ciphertext (A-Z)")
    src.add_argument("-f", "--file", type=Path, help="read the ciphertext from a file")
    p.add_argument("-k", "--key-length", type=int, help="key length (default 4)")
    p.add_argument("-n", "--top", type=int, dest="top_n",
                   help="ranked letters shown per segment (default 3)")
    p.add_argument("--legacy-count", action="store_true",
                   help="legacy counting: a letter's first occurrence counts as 0")
    p.add_argument("--modular-offset", action="store_true",
                   help="infer key letters with (index - index('E')) mod 26")
    p.add_argument("--chart", type=Path, metavar="PNG",
                   help="also write a frequency chart to this PNG file")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def resolve_config(args: argparse.Namespace, environ=None) -> BreakerConfig:
    """Defaults < VIGENERE_* environment < command-line flags."""
    config = BreakerConfig.from_env(environ)
    ciphertext = args.ciphertext
    if args.file is not None:
        try:
            ciphertext = args.file.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidCharacterError(
                chr(e.object[e.start]), e.start, f"{args.file} (not UTF-8)") from None
    return config.with_overrides(
        ciphertext=clean_text(ciphertext) if ciphertext is not None else None,
        key_length=args.key_length,
        top_n=args.top_n,
        count_first_occurrence=False if args.legacy_count else None,
        modular_offset=True if args.modular_offset else None,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=' %(message)s')
    try:
        config = resolve_config(args)
        result = VigenereBreaker(config).run()
    except AnalysisError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_report(result))

    if args.chart is not None:
        from .chart import FrequencyChart
        try:
            path = FrequencyChart().save(result, args.chart)
        except OSError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        logger.info(f"Chart written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
