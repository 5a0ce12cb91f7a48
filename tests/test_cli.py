import pytest

from pushswap.cli import main


def test_no_arguments_reports_error(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_duplicate_reports_error(capsys):
    assert main(["1", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_two_values_are_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "1 ->2 ->NULL\n"


def test_three_values_in_one_argument(capsys):
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "1 ->2 ->3 ->NULL\n"


def test_four_values_printed_unchanged(capsys):
    args = ["4", "3", "2", "1"]
    main(args)
    assert capsys.readouterr().out == " ->".join(args) + " ->NULL\n"


def test_five_values_leave_largest_in_a(capsys):
    args = ["5", "4", "3", "2", "1"]
    main(args)
    assert capsys.readouterr().out == f"{max(int(x) for x in args)} ->NULL\n"


@pytest.mark.parametrize("args", [["1", "2"], ["-3 0 8"]])
def test_sorted_input_printed_as_is(args, capsys):
    main(args)
    values = " ".join(args).split()
    assert capsys.readouterr().out == "".join(f"{v} ->" for v in values) + "NULL\n"