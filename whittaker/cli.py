"""
GNU GENERAL PUBLIC LICENSE
Copyright (C) 2025 Will D. Rust, Marko Stojanovic, Daniel M. Simms

https://github.com/dspix/laspy/blob/main/LICENSE
"""

import argparse
import logging
import sys

import pandas as pd

from whittaker.datasets import DATASETS
from whittaker.errors import WhittakerError
from whittaker.filters import smooth

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="whittaker-smooth",
        description="Whittaker-Henderson smoothing of an equally spaced series.",
    )
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("csv", nargs="?", help="input CSV file")
    src.add_argument("--dataset", choices=sorted(DATASETS), help="bundled dataset")
    parser.add_argument("--column", default=None,
                        help="CSV column to smooth (default: first column)")
    parser.add_argument("--lmbd", type=float, required=True,
                        help="smoothing parameter, larger is smoother")
    parser.add_argument("--order", type=int, default=2, help="order of the smoothing")
    parser.add_argument("--dense", action="store_true",
                        help="use dense matrices instead of sparse")
    parser.add_argument("-o", "--output", default=None,
                        help="output CSV (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def load_values(args):
    if args.dataset:
        return DATASETS[args.dataset]()
    df = pd.read_csv(args.csv)
    column = args.column if args.column is not None else df.columns[0]
    if column not in df.columns:
        raise KeyError(f"column {column!r} not in {args.csv}")
    return df[column].to_numpy(dtype=float)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        raw = load_values(args)
    except (OSError, KeyError, ValueError) as err:
        logger.error("could not load input: %s", err)
        return 1

    try:
        smoothed = smooth(raw, args.lmbd, d=args.order, sparse=not args.dense)
    except WhittakerError as err:
        logger.error("smoothing failed (%s): %s", type(err).__name__, err)
        return 1

    out = pd.DataFrame({"raw": raw, "smoothed": smoothed})
    try:
        out.to_csv(args.output if args.output else sys.stdout, index_label="index")
    except OSError as err:
        logger.error("could not write output: %s", err)
        return 1
    logger.info("smoothed %d samples (lambda=%g, order=%d)",
                len(raw), args.lmbd, args.order)
    return 0


if __name__ == "__main__":
    sys.exit(main())
