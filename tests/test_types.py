import click
import pytest

from parking_deployment.types import WeiAmount


@pytest.mark.parametrize(
    "value,expected",
    [("1000000000000000", 10**15), (" 42 ", 42), ("0", 0), (7, 7)],
)
def test_wei_amount(value, expected):
    assert WeiAmount().convert(value, None, None) == expected


@pytest.mark.parametrize("value", ["0.001", "ten", "-5"])
def test_invalid_wei_amount(value):
    with pytest.raises(click.BadParameter):
        WeiAmount().convert(value, None, None)
