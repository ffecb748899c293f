import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from .tree import Deletion, RBTree, natural_order

logger = logging.getLogger(__name__)

DEMO_ITEMS = [10, 5, 12, 11, 11, 12, 4, 7, 6, 9]
PROBES = [11, 7, 1]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rbset", description="Fill a red/black tree and remove from it."
    )
    parser.add_argument(
        "--remove",
        type=int,
        action="append",
        metavar="X",
        help="element to remove (repeatable, default: 11)",
    )
    parser.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="insert N random integers instead of the fixed demo sequence",
    )
    parser.add_argument("--seed", type=int, default=0, help="seed for --random")
    parser.add_argument(
        "--deletion",
        choices=[d.value for d in Deletion],
        default=Deletion.REBALANCE.value,
    )
    parser.add_argument(
        "--tree", action="store_true", help="also print the tree shape"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.random is not None:
        rng = np.random.default_rng(args.seed)
        items = rng.integers(0, max(args.random, 1) * 2, size=args.random).tolist()
    else:
        items = DEMO_ITEMS

    tree = RBTree(natural_order, Deletion(args.deletion))
    for x in items:
        tree.insert(x)
    logger.info("inserted %d items", len(items))

    print(tree.inorder_colors())
    if args.tree:
        print(tree.print(), end="")

    for x in args.remove or [11]:
        print("remove {}: {}".format(x, tree.remove(x)))

    for x in PROBES:
        print("contains {}: {}".format(x, x in tree))

    print(tree.inorder_colors())
    if args.tree:
        print(tree.print(), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
