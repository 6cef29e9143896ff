import pytest

from liteutil.text import chomp


@pytest.mark.parametrize(
    "given, expected",
    [
        ("hej\ndej", "hej\ndej"),
        ("Slime\n\n\\n", "Slime\n\n\\n"),
        ("Tripple\n\n\n", "Tripple"),
    ],
)
def test_chomp_cases(given, expected):
    result = chomp(given)
    assert result == expected
    assert not result.endswith("\n")


def test_chomp_only_newlines_gives_empty():
    assert chomp("\n\n") == ""


def test_chomp_keeps_other_trailing_whitespace():
    assert chomp("line \r\n") == "line \r"


@pytest.mark.parametrize("bad", ["", None])
def test_chomp_rejects_empty(bad):
    with pytest.raises(ValueError):
        chomp(bad)