import argparse
import logging
import sys
from typing import Optional, Sequence

from src.dary_heap.dary_heap import DaryHeap
from src.dary_heap.errors import ConstructionError
from src.dary_heap.loader import load_nodes
from src.dary_heap.menu import HeapMenu

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def branching_factor(value: str) -> int:
    """argparse type for ``-d``: an integer of at least 2."""
    try:
        d = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if d < 2:
        raise argparse.ArgumentTypeError(
            f"a heap node needs room for at least 2 children, got {d}"
        )
    return d


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dheap",
        description="Build and modify a d-ary max-heap interactively.",
    )
    parser.add_argument(
        "-d",
        type=branching_factor,
        required=True,
        metavar="max-nodes",
        help='the "d" of the heap, i.e. how many children each node can have',
    )
    parser.add_argument(
        "-f",
        "--file",
        metavar="filepath",
        help="optional path to a comma separated list of numbers, e.g. 2,3,4,5",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug messages to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    nodes = []
    if args.file is not None:
        try:
            nodes = load_nodes(args.file)
        except ConstructionError as e:
            logger.error("Could not load %s: %s", args.file, e)
            return 1

    heap = DaryHeap(nodes, args.d)
    logger.debug("Starting with %r", heap)
    return HeapMenu(heap).run()


if __name__ == "__main__":
    sys.exit(main())
