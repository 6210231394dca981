# ==============================================
# CLI - Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides a command-line interface to the classifier, backed by
#   the store configured in the environment / .env file.
#
# COMMANDS:
# ---------
# 1. Suggest a category:
#    python -m product_categorizer.cli classify "iPhone 14 Pro"
#    python -m product_categorizer.cli classify "iPhone 14 Pro" --json
#
# 2. Teach a correction:
#    python -m product_categorizer.cli learn "blue mug" "Ev & Bahçe > Dekorasyon"
#
# 3. Show learned state:
#    python -m product_categorizer.cli stats
#
# 4. List selectable categories:
#    python -m product_categorizer.cli categories
#
# 5. Forget everything learned:
#    python -m product_categorizer.cli reset --confirm
#
# ==============================================

import argparse
import json
import sys
from typing import List, Optional

import structlog

from .analysis.rules import CATEGORY_CATALOG, is_known_category
from .classifier import ProductCategoryClassifier, build_store
from .config import configure_logging, get_config
from .persistence.kv_store import PersistenceError
from .persistence.learned_store import LearnedTableStore

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-categorizer",
        description="Suggest product categories and learn from corrections.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_classify = sub.add_parser("classify", help="Suggest a category for a product name")
    p_classify.add_argument("name", help="Product name")
    p_classify.add_argument("--json", action="store_true", help="Print the result as JSON")

    p_learn = sub.add_parser("learn", help="Teach the category chosen for a product name")
    p_learn.add_argument("name", help="Product name")
    p_learn.add_argument("category", help="Selected category")

    p_stats = sub.add_parser("stats", help="Show learned words")
    p_stats.add_argument("--top", type=int, default=10, help="How many words to list")

    sub.add_parser("categories", help="List selectable categories")

    p_reset = sub.add_parser("reset", help="Delete the learned table")
    p_reset.add_argument("--confirm", action="store_true", help="Required to actually reset")

    return parser


def _cmd_classify(args, classifier: ProductCategoryClassifier) -> int:
    result = classifier.classify(args.name)
    if args.json:
        payload = result.to_dict()
        payload["level"] = result.level.value
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(f"{result.category}  ({result.percent} güven, {result.method.value})")
    return 0


def _cmd_learn(args, classifier: ProductCategoryClassifier) -> int:
    if not is_known_category(args.category):
        logger.warning("unknown_category", category=args.category)
    persisted = classifier.learn(args.name, args.category)
    print(f"Learned words: {classifier.learned_entry_count()}")
    return 0 if persisted else 1


def _cmd_stats(args, classifier: ProductCategoryClassifier) -> int:
    entries = classifier.learned_entries()
    print(f"Learned words: {len(entries)}")
    ranked = sorted(entries.items(), key=lambda item: (-item[1].count, item[0]))
    for word, entry in ranked[: max(args.top, 0)]:
        print(f"  {word:20s} → {entry.category} (x{entry.count})")
    return 0


def _cmd_categories(args, classifier: ProductCategoryClassifier) -> int:
    for category in CATEGORY_CATALOG:
        print(category)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    configure_logging(config.logging)

    if args.command == "reset":
        if not args.confirm:
            print("Refusing to reset without --confirm", file=sys.stderr)
            return 1
        try:
            LearnedTableStore(build_store(config), config.store.slot_key).clear()
        except PersistenceError as exc:
            logger.error("reset_failed", error=str(exc))
            return 1
        print("Learned table cleared")
        return 0

    try:
        classifier = ProductCategoryClassifier.from_config(config)
    except PersistenceError as exc:
        logger.error("store_unavailable", error=str(exc))
        return 1

    handlers = {
        "classify": _cmd_classify,
        "learn": _cmd_learn,
        "stats": _cmd_stats,
        "categories": _cmd_categories,
    }
    return handlers[args.command](args, classifier)


if __name__ == "__main__":
    sys.exit(main())
