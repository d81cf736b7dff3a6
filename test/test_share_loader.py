import json

import pytest

from client.share_loader import (
    InputFormatError,
    load_share_record,
    parse_int,
    parse_share_record,
)
from conftest import EXAMPLE_RECORD
from core.shamir_core import Share


def test_load_share_record_from_file(share_file):
    record = load_share_record(share_file)

    assert record.expected_secret == 1234
    assert record.prime == 2087
    assert record.shares == [Share(1, 1494), Share(2, 1942), Share(3, 491)]
    assert record.threshold is None


def test_numeric_text_is_accepted():
    payload = {
        "expectedSecret": " 1234 ",
        "prime": "2087",
        "threshold": "3",
        "shares": [{"x": "1", "y": "1494"}, {"x": 2, "y": 1942}, {"x": 3, "y": 491}],
    }
    record = parse_share_record(payload)
    assert record.expected_secret == 1234
    assert record.threshold == 3
    assert record.shares[0] == Share(1, 1494)


@pytest.mark.parametrize("value", ["12a", "", 1.5, True, None, [1]])
def test_parse_int_rejects_non_integers(value):
    with pytest.raises(InputFormatError):
        parse_int(value, "prime")


def test_missing_fields_are_reported():
    with pytest.raises(InputFormatError) as excinfo:
        parse_share_record({"shares": []})
    assert "expectedSecret" in str(excinfo.value)
    assert "prime" in str(excinfo.value)


def test_expected_secret_optional_when_not_required():
    payload = {key: value for key, value in EXAMPLE_RECORD.items() if key != "expectedSecret"}
    record = parse_share_record(payload, require_expected=False)
    assert record.expected_secret is None


def test_null_expected_secret_rejected_when_required():
    with pytest.raises(InputFormatError):
        parse_share_record({**EXAMPLE_RECORD, "expectedSecret": None})


@pytest.mark.parametrize(
    "shares",
    [{"x": 1, "y": 2}, [[1, 2]], [{"x": 1}], [{"y": 2}]],
)
def test_malformed_shares_are_rejected(shares):
    with pytest.raises(InputFormatError):
        parse_share_record({**EXAMPLE_RECORD, "shares": shares})


def test_document_must_be_an_object():
    with pytest.raises(InputFormatError):
        parse_share_record([EXAMPLE_RECORD])


def test_invalid_json_file(tmp_path):
    path = tmp_path / "roto.json"
    path.write_text('{"expectedSecret": 1234, "prime": ', encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_share_record(path)


def test_missing_file(tmp_path):
    with pytest.raises(InputFormatError):
        load_share_record(tmp_path / "no_existe.json")


def test_loader_errors_are_value_errors(tmp_path):
    path = tmp_path / "vacio.json"
    path.write_text(json.dumps({}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_share_record(path)
