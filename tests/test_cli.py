import io

import pytest

from foodreport.cli import format_report, main, parse_foods, run
from foodreport.food import Dairy, Fruit, Vegetable

INVALID = "Invalid food type in file - ignored"
ENDING = "Program ending, have an amazing day!"

RECORDS = (
    "1 Carrot 4 20 2021 5 1 2021 3 40\n"
    "2 Apple 4 21 2021 5 2 2021 19 8.5\n"
    "3 Milk 4 22 2021 5 3 2021 8 2.5"
)


def test_parse_three_records_without_trailing_newline():
    out = io.StringIO()
    foods = parse_foods(RECORDS, out)
    assert [type(f) for f in foods] == [Vegetable, Fruit, Dairy]
    assert out.getvalue() == ""
    veg, fruit, dairy = foods
    assert (veg.name, veg.total_fiber, veg.total_sodium) == ("Carrot", 3, 40)
    assert (fruit.name, fruit.sugar_amount, fruit.total_c) == ("Apple", 19, 8.5)
    assert (dairy.name, dairy.fat, dairy.cholesterol) == ("Milk", 8, 2.5)


def test_trailing_newline_gives_one_invalid_message():
    out = io.StringIO()
    foods = parse_foods(RECORDS + "\n", out)
    assert len(foods) == 3
    assert out.getvalue().splitlines() == [INVALID]


def test_empty_text_gives_one_invalid_message():
    out = io.StringIO()
    assert parse_foods("", out) == []
    assert out.getvalue().splitlines() == [INVALID]


def test_unknown_type_is_ignored():
    out = io.StringIO()
    foods = parse_foods("7 1 Pea 1 2 2021 3 4 2021 1 2", out)
    assert [f.name for f in foods] == ["Pea"]
    assert out.getvalue().splitlines() == [INVALID]


def test_first_record_dates_only_keep_year():
    foods = parse_foods(RECORDS, io.StringIO())
    first, second = foods[0], foods[1]
    assert (first.date_purchased.year, first.date_purchased.month) == (2021, 0)
    assert first.date_purchased.day == 0
    assert (second.date_purchased.month, second.date_purchased.day) == (4, 21)
    assert (second.expire_date.month, second.expire_date.day) == (5, 2)


def test_foods_do_not_share_dates():
    foods = parse_foods(RECORDS, io.StringIO())
    assert foods[1].date_purchased is not foods[2].date_purchased
    assert foods[1].date_purchased.day == 21
    assert foods[2].date_purchased.day == 22


def test_incomplete_record_raises():
    with pytest.raises(ValueError):
        parse_foods("1 Carrot 4 20 2021", io.StringIO())


def test_non_numeric_type_raises():
    with pytest.raises(ValueError):
        parse_foods("Carrot", io.StringIO())


def test_capacity_limit():
    record = "2 Apple 4 21 2021 5 2 2021 19 8.5\n"
    with pytest.raises(ValueError):
        parse_foods(record * 101, io.StringIO())
    assert len(parse_foods(record * 100, io.StringIO())) == 100


def test_format_report():
    foods = parse_foods(RECORDS, io.StringIO())
    report = format_report(foods)
    lines = report.splitlines()
    assert lines[:3] == ["", "", ""]
    assert lines[3] == "Total Food read from the file: 3"
    assert lines[4:6] == ["Food Report", "==========="]
    assert lines[6:] == [f.report_line() for f in foods]
    assert report.endswith("\n")


def test_format_report_empty():
    assert "Total Food read from the file: 0" in format_report([])


def test_run_wrong_name():
    out = io.StringIO()
    assert run("Other.txt", out) == 0
    text = out.getvalue()
    assert "Error: The file does not exist or has been inputed incorrectly." in text
    assert text.endswith(ENDING + "\n")


def test_run_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    run("Food.txt", out)
    assert out.getvalue().startswith("Failed to open the file.\n")


def test_run_reads_food_file(tmp_path, monkeypatch):
    (tmp_path / "Food.txt").write_text(RECORDS, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    run("Food.txt", out)
    text = out.getvalue()
    assert "Total Food read from the file: 3" in text
    assert "Milk" in text
    assert INVALID not in text
    assert text.endswith(ENDING + "\n")


def test_main_with_argument(capsys):
    assert main(["Other.txt"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome to my food reporting system\n")
    assert ENDING in out


def test_main_prompts_for_name(tmp_path, monkeypatch, capsys):
    (tmp_path / "Food.txt").write_text(RECORDS + "\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("Food.txt\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter the file name please: " in out
    assert "Total Food read from the file: 3" in out
    assert out.count(INVALID) == 1


def test_main_without_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main([])
    out = capsys.readouterr().out
    assert "Error: The file does not exist or has been inputed incorrectly." in out