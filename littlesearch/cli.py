"""Build the keyword index from files and run one two-keyword search.

Usage:
    python -m littlesearch beginning Alice --docs docs.txt --noise noisewords.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_DOCS_FILE, DEFAULT_NOISE_WORDS_FILE, MAX_RESULTS
from .search import Searcher
from .sources import make_index


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Little Search Engine")
    parser.add_argument("kw1", help="First keyword")
    parser.add_argument("kw2", help="Second keyword")
    parser.add_argument("--docs", default=DEFAULT_DOCS_FILE, help="File listing document names")
    parser.add_argument("--noise", default=DEFAULT_NOISE_WORDS_FILE, help="File listing noise words")
    parser.add_argument("--max-results", type=int, default=MAX_RESULTS, help="Result cap")
    parser.add_argument("--lenient", action="store_true",
                        help="Only strip trailing punctuation; keep words with digits or inner punctuation")
    parser.add_argument("--unique", action="store_true", help="List each document at most once")
    parser.add_argument("--dump", action="store_true", help="Print the whole index before searching")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log indexing progress")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("Little Search Engine")
    try:
        idx = make_index(args.docs, args.noise, strict=not args.lenient)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dump:
        for line in idx.dump():
            print(line)

    sr = Searcher(idx, max_results=args.max_results, unique=args.unique)
    results = sr.search(args.kw1, args.kw2)
    if results is None:
        print(f"No matching documents for {args.kw1!r} or {args.kw2!r}")
    else:
        print(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
