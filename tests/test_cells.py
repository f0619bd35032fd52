"""Tests for cells module."""

from __future__ import annotations

from translation_export.cells import CellContent, cell_text, parse_entry


def test_cell_text_absent_cell() -> None:
	assert cell_text(None) is None


def test_cell_text_prefers_display() -> None:
	assert cell_text(CellContent(value="raw", display="shown")) == "shown"


def test_cell_text_falls_back_to_value() -> None:
	assert cell_text(CellContent(value="raw")) == "raw"


def test_cell_text_empty_display_falls_back_to_value() -> None:
	assert cell_text(CellContent(value="raw", display="")) == "raw"


def test_cell_text_non_text_value() -> None:
	assert cell_text(CellContent(value=42)) is None
	assert cell_text(CellContent(value=True)) is None


def test_cell_text_empty_string() -> None:
	assert cell_text(CellContent(value="")) is None


def test_cell_text_numeric_with_display() -> None:
	assert cell_text(CellContent(value=0.5, display="50%")) == "50%"


def test_parse_entry_basic() -> None:
	assert parse_entry('"hello": "Hi there"') == ("hello", "Hi there")


def test_parse_entry_whitespace_around_colon() -> None:
	assert parse_entry('"hello"  :\t"Hi"') == ("hello", "Hi")
	assert parse_entry('"hello":"Hi"') == ("hello", "Hi")


def test_parse_entry_no_match() -> None:
	assert parse_entry("Some note") is None


def test_parse_entry_empty_key_does_not_match() -> None:
	assert parse_entry('"": "value"') is None


def test_parse_entry_empty_value() -> None:
	assert parse_entry('"title": ""') == ("title", "")


def test_parse_entry_multiline_value() -> None:
	assert parse_entry('"body": "first\nsecond"') == ("body", "first\nsecond")


def test_parse_entry_keeps_escaped_quotes() -> None:
	assert parse_entry(r'"quote": "He said \"hi\""') == ("quote", r'He said \"hi\"')


def test_parse_entry_no_unescaping() -> None:
	assert parse_entry(r'"path": "a\nb"') == ("path", r"a\nb")


def test_parse_entry_surrounding_text() -> None:
	assert parse_entry('note: "k": "v",') == ("k", "v")
