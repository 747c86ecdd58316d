import io

import pytest

from oslabs.array_stats import average, main, min_max, replace_extremes


def test_replace_min_max_with_average():
    assert replace_extremes([1, 2, 3, 4, 5]) == [3, 2, 3, 4, 3]


def test_all_equal_elements():
    assert replace_extremes([7, 7, 7]) == [7, 7, 7]


def test_input_is_not_modified():
    data = [1, 2, 3, 4, 5]
    replace_extremes(data)
    assert data == [1, 2, 3, 4, 5]


def test_min_max_values():
    assert min_max([3, -1, 8, 0]) == (-1, 8)


def test_min_max_single():
    assert min_max([4]) == (4, 4)


def test_average_value():
    assert average([1, 2]) == pytest.approx(1.5)


def test_average_truncates_toward_zero_on_replace():
    assert replace_extremes([-1, -2]) == [-1, -1]


def test_result_length_preserved():
    data = [9, 1, 5, 5, 9, 1]
    result = replace_extremes(data)
    assert len(result) == len(data)
    assert [v for v in result if v not in (1, 9)] == result


@pytest.mark.parametrize("func", [min_max, average, replace_extremes])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_main_reprompts_and_prints(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n3\n1 2 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Enter the size of the array: ") == 2
    assert "Min: 1, Max: 3" in out
    assert "Average: 2" in out
    assert "Modified array: 2 2 2" in out


def test_main_input_ends_early(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1


def test_main_bad_number(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 x\n"))
    assert main([]) == 1