# opentdb/cli.py
import argparse
import asyncio
import sys
from typing import List, Optional

from opentdb.client import OpenTDBClient
from opentdb.config import load_settings
from opentdb.errors import OpenTDBError
from opentdb.links import OTDB_AMOUNT_MAX
from opentdb.logger import configure_logging
from opentdb.params import Category, Difficulty, QuestionType, resolve_category

LABELS = "ABCDEFGH"

DIFFICULTIES = {d.value: d for d in Difficulty}
TYPES = {"any": QuestionType.ANY, "multiple": QuestionType.MULTIPLE_CHOICE, "boolean": QuestionType.TRUE_FALSE}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="opentdb", description="Query the Open Trivia Database.")
    sub = parser.add_subparsers(dest="command", required=True)

    q = sub.add_parser("questions", help="fetch questions")
    q.add_argument("-n", "--amount", type=int, default=5, help=f"number of questions (1-{OTDB_AMOUNT_MAX})")
    q.add_argument("-c", "--category", default=None, help="category name or ID")
    q.add_argument("-d", "--difficulty", choices=sorted(DIFFICULTIES), default="any")
    q.add_argument("-t", "--type", choices=sorted(TYPES), default="any")
    q.add_argument("--token", action="store_true", help="use a session token")

    c = sub.add_parser("count", help="question totals for one category")
    c.add_argument("category", help="category name or ID")

    sub.add_parser("global", help="global question totals")
    sub.add_parser("categories", help="list categories")
    return parser


async def _questions(client: OpenTDBClient, args: argparse.Namespace) -> None:
    if args.token:
        await client.initialize_token()
    questions = await client.get_questions(
        args.amount,
        resolve_category(args.category),
        DIFFICULTIES[args.difficulty],
        TYPES[args.type],
    )
    for num, q in enumerate(questions, start=1):
        choices, answer = q.shuffled_choices()
        print(f"Q{num} [{q.category} · {q.difficulty}] {q.question}")
        for idx, choice in enumerate(choices):
            mark = " *" if idx == answer else ""
            print(f"   {LABELS[idx]}) {choice}{mark}")


async def _count(client: OpenTDBClient, args: argparse.Namespace) -> None:
    category = resolve_category(args.category)
    totals = await client.get_category_question_totals(category)
    print(f"{category.display_name} ({totals.category_id})")
    print(f"  total:  {totals.total_questions}")
    print(f"  easy:   {totals.total_easy}")
    print(f"  medium: {totals.total_medium}")
    print(f"  hard:   {totals.total_hard}")


async def _global(client: OpenTDBClient, args: argparse.Namespace) -> None:
    totals = await client.get_global_question_totals()
    print(
        f"total {totals.total_questions} · verified {totals.total_verified} · "
        f"pending {totals.total_pending} · rejected {totals.total_rejected}"
    )
    for cid in sorted(totals.categories):
        entry = totals.categories[cid]
        try:
            name = Category.from_id(cid).display_name
        except OpenTDBError:
            name = f"Category {cid}"
        print(f"  {cid:>3} {name}: {entry.total_questions} ({entry.verified} verified)")


async def _categories(client: OpenTDBClient, args: argparse.Namespace) -> None:
    for c in await client.get_categories():
        print(f"{c.id:>3} {c.name}")


COMMANDS = {
    "questions": _questions,
    "count": _count,
    "global": _global,
    "categories": _categories,
}


async def run(args: argparse.Namespace) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level_value)
    async with OpenTDBClient.from_settings(settings) as client:
        try:
            await COMMANDS[args.command](client, args)
        except OpenTDBError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
