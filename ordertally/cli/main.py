import argparse
import logging
import sys

from ordertally._version import _detect_version
from ordertally.cli import check, reprice, total
from ordertally.cli.exitcodes import EXIT_ENGINE_ERROR
from ordertally.core.config import LOG_LEVELS, OUTPUT_FORMATS, load_config

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ordertally", description="ordertally: consistency-checked order totals")
    p.add_argument("--version", action="version", version=f"%(prog)s {_detect_version()}")
    p.add_argument("--config", default=None, help="Config file (default: ./ordertally.yaml if present).")
    p.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING).",
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    # total
    total_p = sub.add_parser("total", help="Build an order from a document and print its total.")
    total_p.add_argument("file", help="Order document (.yaml, .yml or .json).")
    total_p.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format.")

    # reprice
    reprice_p = sub.add_parser("reprice", help="Change one line item's price and print the new order.")
    reprice_p.add_argument("file", help="Order document (.yaml, .yml or .json).")
    reprice_p.add_argument("--id", dest="item_id", required=True, help="Line item id.")
    reprice_p.add_argument("--price", required=True, help="New price, e.g. 3.00")
    reprice_p.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format.")

    # check
    check_p = sub.add_parser("check", help="Verify that a document builds a consistent order.")
    check_p.add_argument("file", help="Order document (.yaml, .yml or .json).")

    return p


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config).with_overrides(
            log_level=args.log_level,
            output_format=getattr(args, "format", None),
        )
        configure_logging(cfg.log_level)

        if args.cmd == "total":
            return total.run(path=args.file, cfg=cfg)

        if args.cmd == "reprice":
            return reprice.run(path=args.file, item_id=args.item_id, price=args.price, cfg=cfg)

        if args.cmd == "check":
            return check.run(path=args.file, cfg=cfg)

        print("Unknown command.", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    except Exception as e:
        print(f"ordertally: error: {e}", file=sys.stderr)
        return EXIT_ENGINE_ERROR
