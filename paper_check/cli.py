from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .cleaning import SegmentOptions
from .model import check_documents, format_console_line

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare two Chinese documents and write their duplication rate"
    )
    parser.add_argument("paper", type=Path, help="Path to the original paper")
    parser.add_argument("reference", type=Path, help="Path to the document checked against the paper")
    parser.add_argument("result", type=Path, help="Where to write the percentage score")
    parser.add_argument(
        "--no-hmm",
        action="store_false",
        dest="hmm",
        help="Disable jieba's HMM discovery of unknown words",
    )
    parser.add_argument(
        "--user-dict",
        type=Path,
        default=None,
        help="Optional jieba user dictionary to load before segmenting",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const=logging.DEBUG,
        dest="log_level",
        help="Log debug details",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const=logging.WARNING,
        dest="log_level",
        help="Only log warnings and errors",
    )
    parser.set_defaults(log_level=logging.INFO)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")

    options = SegmentOptions(hmm=args.hmm, user_dict=args.user_dict)
    try:
        result = check_documents(args.paper, args.reference, args.result, options=options)
    except (OSError, ValueError) as exc:
        LOGGER.error("文件操作失败: %s", exc)
        return EXIT_IO_ERROR

    print(f"论文查重完成，结果已保存至: {args.result}")
    print(format_console_line(result["similarity"]))
    return EXIT_OK


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
