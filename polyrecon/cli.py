"""Command-line boundary: stdin JSON → reconstruction → stdout report.

Exit codes:
    0 — отчёт напечатан (в том числе когда fits all n points = false)
    1 — ошибка разбора входа или арифметики; в stdout ничего не пишется
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional, Sequence, TextIO

from polyrecon.core.contracts import parse_shares_document
from polyrecon.core.exceptions import PolyReconError
from polyrecon.reconstruction import (
    ReconstructionConfig,
    ReconstructionDriver,
    render_report,
)

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "POLYRECON_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

EXIT_OK = 0
EXIT_FAILURE = 1


async def read_input(stream: TextIO) -> str:
    """Чтение всего потока целиком; вычисления начинаются только после EOF."""
    return await asyncio.to_thread(stream.read)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyrecon",
        description="Reconstruct a polynomial from base-encoded shares read as JSON on stdin",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"diagnostics level on stderr (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--strict-count",
        action="store_true",
        help="fail when keys.n differs from the number of shares",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def allow_unbounded_int_text() -> None:
    """Снимает лимит длины десятичной записи int (Python 3.11+ и патчи 3.10).

    Иначе json.loads и str(int) отказывают на числах длиннее 4300 цифр.
    """
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def run(raw_text: str, config: ReconstructionConfig) -> str:
    """Разбор, реконструкция и рендеринг; исключения пробрасываются вызывающему."""
    document = parse_shares_document(raw_text)
    result = ReconstructionDriver(config).reconstruct(document)
    return render_report(result)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    allow_unbounded_int_text()

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    raw_text = asyncio.run(read_input(stdin))
    config = ReconstructionConfig(require_declared_count=args.strict_count)

    try:
        report = run(raw_text, config)
    except PolyReconError as e:
        logger.error("Reconstruction failed: %s: %s", type(e).__name__, e)
        return EXIT_FAILURE

    print(report, file=stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
