"""Reads the food file and prints the food report."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable
from typing import TextIO, TypeVar

from foodreport.date import Date
from foodreport.food import Dairy, Food, Fruit, Vegetable

FOOD_FILE_NAME = "Food.txt"
CAPACITY = 100

VEGETABLE = 1
FRUIT = 2
DAIRY = 3

INVALID_TYPE_MESSAGE = "Invalid food type in file - ignored"
ENDING_MESSAGE = "Program ending, have an amazing day!"

_T = TypeVar("_T")


class _Tokens:
    """Whitespace-separated fields of the food file."""

    def __init__(self, text: str) -> None:
        self._items = deque(text.split())

    def __bool__(self) -> bool:
        return bool(self._items)

    def take(self, convert: Callable[[str], _T]) -> _T:
        if not self._items:
            raise ValueError("incomplete food record")
        token = self._items.popleft()
        try:
            return convert(token)
        except ValueError:
            raise ValueError(f"malformed field in food file: {token!r}") from None


def parse_foods(text: str, out: TextIO) -> list[Food]:
    """Parse the food file text, writing a message to ``out`` for each unknown type."""
    tokens = _Tokens(text)
    purchased = Date()
    expired = Date()
    foods: list[Food] = []
    while tokens:
        kind = tokens.take(int)
        if kind not in (VEGETABLE, FRUIT, DAIRY):
            print(INVALID_TYPE_MESSAGE, file=out)
            continue
        if len(foods) >= CAPACITY:
            raise ValueError(f"more than {CAPACITY} foods in file")
        name = tokens.take(str)
        purchased.assign(tokens.take(int), tokens.take(int), tokens.take(int))
        expired.assign(tokens.take(int), tokens.take(int), tokens.take(int))
        dates = {
            "name": name,
            "date_purchased": purchased.copy(),
            "expire_date": expired.copy(),
        }
        match kind:
            case 1:
                fiber = tokens.take(int)
                sodium = tokens.take(int)
                food: Food = Vegetable(**dates, total_fiber=fiber, total_sodium=sodium)
            case 2:
                sugar = tokens.take(int)
                vitamin_c = tokens.take(float)
                food = Fruit(**dates, sugar_amount=sugar, total_c=vitamin_c)
            case _:
                fat = tokens.take(int)
                cholesterol = tokens.take(float)
                food = Dairy(**dates, fat=fat, cholesterol=cholesterol)
        foods.append(food)
    # A file that is empty or ends in whitespace yields one more, failed, read of a type.
    if not text or text[-1].isspace():
        print(INVALID_TYPE_MESSAGE, file=out)
    return foods


def format_report(foods: Iterable[Food]) -> str:
    """Return the report text for the given foods."""
    foods = list(foods)
    lines = [
        "",
        "",
        "",
        f"Total Food read from the file: {len(foods)}",
        "Food Report",
        "===========",
    ]
    lines.extend(food.report_line() for food in foods)
    return "\n".join(lines) + "\n"


def run(filename: str, out: TextIO) -> int:
    """Read the named food file and write the report to ``out``."""
    if filename != FOOD_FILE_NAME:
        print("Error: The file does not exist or has been inputed incorrectly.", file=out)
    else:
        try:
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            out.write("Failed to open the file.")
        else:
            foods = parse_foods(text, out)
            out.write(format_report(foods))
    print(file=out)
    print(ENDING_MESSAGE, file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Ask for the food file name, or take it from the arguments, and print the report."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Welcome to my food reporting system")
    if args:
        filename = args[0]
    else:
        try:
            filename = input("Enter the file name please: ")
        except EOFError:
            filename = ""
    return run(filename, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())