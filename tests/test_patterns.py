import pytest

from algobox.patterns import double_sided_arrow, ganesha, hollow_diamond, hourglass


def test_ganesha_size_seven_matches_drawing():
    expected = "*  ****\n*  *\n*  *\n*******\n   *  *\n   *  *\n****  *\n"
    assert ganesha(7) == expected


def test_hourglass_size_five_outer_and_middle_rows():
    lines = hourglass(5).splitlines()
    assert lines[0] == "5 4 3 2 1 0 1 2 3 4 5 "
    assert lines[-1] == "5 4 3 2 1 0 1 2 3 4 5 "
    assert lines[5] == "          0"


@pytest.mark.parametrize("n", [1, 2, 4, 7])
def test_hourglass_is_symmetric(n):
    lines = hourglass(n).splitlines()
    assert len(lines) == 2 * n + 1
    assert lines[:n] == list(reversed(lines[n + 1:]))


def test_double_sided_arrow_size_seven_rows():
    lines = double_sided_arrow(7).splitlines()
    assert lines[0] == "            1"
    assert lines[1] == "        2 1   1 2 "
    assert lines[3] == "4 3 2 1           1 2 3 4 "
    assert lines[-1] == lines[0]
    assert len(lines) == 7


def test_double_sided_arrow_size_one():
    assert double_sided_arrow(1) == "1"


@pytest.mark.parametrize("n", [3, 5, 7, 9])
def test_double_sided_arrow_odd_is_symmetric(n):
    lines = double_sided_arrow(n).splitlines()
    assert lines == list(reversed(lines))


@pytest.mark.parametrize("n", [1, 3, 6])
def test_hollow_diamond_shape(n):
    lines = hollow_diamond(n).splitlines()
    assert len(lines) == 2 * n
    assert lines == list(reversed(lines))
    assert lines[0].count("*") == 1
    assert all(line.count("*") == 2 for line in lines[1:-1])


def test_hollow_diamond_smallest():
    assert hollow_diamond(1) == "* \n* \n"


@pytest.mark.parametrize("draw", [double_sided_arrow, ganesha, hourglass, hollow_diamond])
def test_rejects_non_positive_size(draw):
    with pytest.raises(ValueError):
        draw(0)