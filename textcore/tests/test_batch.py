"""Unit tests for the line batch driver."""

import logging

import pytest

from textcore.services.batch import NameBatch, normalize_phones, parse_names, process_lines, split_lines
from textcore.services.name_parser import INVALID_NAME
from textcore.services.phone_normalizer import INVALID_PHONE


def test_split_lines_caps_line_count():
    """Test lines past the cap are ignored."""
    assert split_lines("a\nb\nc", max_lines=2) == ["a", "b"]
    assert split_lines("a\nb\n") == ["a", "b", ""]
    assert split_lines("") == []


def test_process_lines_preserves_order():
    """Test results keep input order and the keep filter applies."""
    result = process_lines(["3", "", "1", "2"], lambda line: line * 2, bool)
    assert result == ["33", "11", "22"]


def test_parse_names_end_to_end():
    """Test pasted names split into first and last columns."""
    result = parse_names("นาย สมชาย ใจดี\nนางสาว สวย มาก\nMr. John\n")
    assert result == NameBatch(first_names="สมชาย\nสวย\nJohn", last_names="ใจดี\nมาก\n")


def test_parse_names_drops_blank_lines_keeps_invalid():
    """Test blank and prefix-only lines drop, invalid lines stay."""
    result = parse_names("\nสมชาย1\n   \nนาย\nนาย สมศรี")
    assert result.first_names == f"{INVALID_NAME}\nสมศรี"
    assert result.last_names == "\n"


def test_parse_names_blank_input():
    """Test blank input returns empty columns."""
    assert parse_names("") == NameBatch("", "")
    assert parse_names(" \n \n") == NameBatch("", "")


def test_parse_names_line_cap():
    """Test only the first 200 lines are parsed."""
    text = "\n".join(["นาย สมชาย ใจดี"] * 250)
    result = parse_names(text, max_lines=200)
    assert len(result.first_names.split("\n")) == 200


def test_parse_names_default_cap_from_config():
    """Test the configured cap applies when none is passed."""
    text = "\n".join(["Mr. John Smith"] * 250)
    result = parse_names(text)
    assert result.first_names.split("\n") == ["John"] * 200


def test_normalize_phones_end_to_end():
    """Test blank lines drop while invalid markers stay."""
    assert normalize_phones("081-111-1111\n+6691111111\nabc\n") == f"0811111111\n{INVALID_PHONE}"


def test_normalize_phones_order_preserved():
    """Test output order follows input order."""
    text = "0899999999\n12\n+66811111111\n\n"
    assert normalize_phones(text) == f"0899999999\n{INVALID_PHONE}\n0811111111"


def test_normalize_phones_blank_input():
    """Test blank input returns empty output."""
    assert normalize_phones("") == ""
    assert normalize_phones("\n\n") == ""


def test_normalize_phones_line_cap():
    """Test only the first 200 lines are normalized."""
    text = "\n".join(["081-234-5678"] * 250)
    assert normalize_phones(text).split("\n") == ["0812345678"] * 200
    assert normalize_phones(text, max_lines=3).split("\n") == ["0812345678"] * 3


def test_normalize_phones_crlf_input():
    """Test Windows line endings do not leak into results."""
    assert normalize_phones("0812345678\r\n+66891234567\r\n") == "0812345678\n0891234567"


def test_batch_logs_summary(caplog):
    """Test each batch emits one structured summary record."""
    caplog.set_level(logging.INFO, logger="textcore.services.batch")
    normalize_phones("0812345678\n12\nabc")

    records = [r for r in caplog.records if getattr(r, "stage", None) == "phones"]
    assert len(records) == 1
    assert records[0].line_count == 3
    assert records[0].kept_count == 2
    assert records[0].invalid_count == 1


@pytest.mark.parametrize("max_lines", [0, -1])
def test_line_cap_below_one_rejected(max_lines):
    """Test a cap below 1 raises instead of dropping lines."""
    with pytest.raises(ValueError):
        split_lines("a\nb\nc", max_lines=max_lines)
    with pytest.raises(ValueError):
        normalize_phones("0812345678\n0812345679", max_lines=max_lines)
    with pytest.raises(ValueError):
        parse_names("นาย สมชาย ใจดี", max_lines=max_lines)
