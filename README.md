# foodreport

A small console tool that reads a food inventory file and prints a report of
what is in your refrigerator.

## Installing

    pip install .

To also install what the tests need:

    pip install ".[test]"

## Running

    foodreport

The program prints a greeting and asks for a file name. You can also give the
name on the command line:

    foodreport Food.txt

Only the name `Food.txt` is accepted, and the file is read from the current
directory. Any other name prints
`Error: The file does not exist or has been inputed incorrectly.` If `Food.txt`
cannot be opened, the program prints `Failed to open the file.` It always ends
with `Program ending, have an amazing day!` and exits with status 0.

## Input format

The file holds whitespace-separated records. Each record starts with a type
code, then a name (one word), the purchase date (month day year) and the expiry
date (month day year). Two values follow, and their meaning depends on the type:

| Code | Kind      | Extra fields                       |
|------|-----------|------------------------------------|
| 1    | Vegetable | fiber (int), sodium (int)          |
| 2    | Fruit     | sugar (int), vitamin C (number)    |
| 3    | Dairy     | total fat (int), cholesterol (number) |

For any other type code, the program prints
`Invalid food type in file - ignored` and moves on to the next field. If the
file is empty or ends in whitespace, which includes a final newline, that
message is printed once more after the last record.

The program raises `ValueError` when a record is incomplete, when a field is
not a number where a number is expected, or when the file holds more than 100
foods.

Date parts are validated. Years must be 1–9999, months 1–12, and days must fit
the month (February always has 28 days). A rejected part keeps its previous
value. The purchase date and the expiry date are each reused from one record
to the next. Month and day are set before year, and a month is only accepted
once a year has been read. As a result, the first record's dates carry only
their year, and their month and day show as 0.

Example:

    1 Carrot 4 20 2021 5 10 2021 3 50
    2 Apple 4 21 2021 5 1 2021 19 8.4
    3 Milk 4 22 2021 4 30 2021 5 20.5

## Report

The report starts with three blank lines, the number of foods read, and a
heading. It then has one line per food:

- Vegetable: name and sodium
- Fruit: name and sugar
- Dairy: name, fat, purchase date and expiry date (as `year/month/day`), and cholesterol

## Library use

- `foodreport.date.Date` is a month/day/year date. It has `set_year`,
  `set_month` and `set_day`, and each of these raises `ValueError` on a bad
  value. It also has:
  - `assign(month, day, year)`, which skips rejected parts;
  - `as_ymd()`;
  - `copy()`;
  - `str()`, which gives `month/day/year`, or `Invalid date sent` if any part
    is unset.
- `foodreport.food` provides the abstract `Food` and the dataclasses
  `Vegetable`, `Fruit` and `Dairy`. Each one has `who_am_i()` and
  `report_line()`.
- `foodreport.cli` provides:
  - `parse_foods(text, out)`, which turns file text into food objects and
    writes the invalid-type messages to `out`;
  - `format_report(foods)`, which builds the report text;
  - `run(filename, out)`, which runs the whole interaction for a file name;
  - `main(argv=None)`, the command's entry point.