import argparse
import random
import sys

from .markov import DEFAULT_WORD_BUDGET, MarkovMachine
from .sources import METHODS, SourceError, load_text


def build_parser():
    parser = argparse.ArgumentParser(
        prog="maketext",
        description="Generate Markov text from a file or a URL",
    )
    parser.add_argument("method", nargs="?", help="where to read the corpus from: file or url")
    parser.add_argument("path", nargs="?", help="file path or URL")
    parser.add_argument(
        "--words", type=int, default=DEFAULT_WORD_BUDGET,
        help="maximum number of words to generate",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for repeatable output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.method not in METHODS:
        sys.exit(f"Unknown method: {args.method}")
    if not args.path:
        sys.exit(f"Missing path for method: {args.method}")
    if args.words < 1:
        sys.exit(f"Word count must be positive: {args.words}")

    try:
        text = load_text(args.method, args.path)
    except SourceError as e:
        sys.exit(str(e))

    rng = random.Random(args.seed) if args.seed is not None else None
    mm = MarkovMachine(text, rng=rng)
    print(mm.make_text(args.words))


if __name__ == "__main__":
    main()
