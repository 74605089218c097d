"""
Id parsing of the data access base.
"""
import pytest

from core.crud import parse_id
from core.exception import InvalidIdError


@pytest.mark.parametrize("value, expected", [(1, 1), ("7", 7), (" 12 ", 12), ("1000000", 1000000)])
def test_parse_id_accepts_positive_integers(value, expected):
    assert parse_id(value) == expected


@pytest.mark.parametrize("value", [0, -1, "0", "007", "abc", "", "1.5", None, True, 2.0, "64b7f0c2e4b0a1a2b3c4d5e6"])
def test_parse_id_rejects_malformed_ids(value):
    with pytest.raises(InvalidIdError) as exc:
        parse_id(value)
    assert exc.value.status_code == 400
