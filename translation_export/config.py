#!/usr/bin/env python3
"""
Fixed layout of the translation workbook.
All indices are zero-based: row 1 is the second spreadsheet row, column 1 is column B.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, Tuple

# Name kept as shipped in existing workbooks, typo included
SHEET_NAME = "json_tranlsation"

HEADER_ROW = 1
DATA_START_ROW = 2

# B..J and N..V
TRANSLATION_COLUMNS: Tuple[int, int] = (1, 9)
EULA_COLUMNS: Tuple[int, int] = (13, 21)

TRANSLATION_FILENAME = "translation.json"
EULA_FILENAME = "eula.json"

IRREGULAR_FOLDER_NAMES: Dict[str, str] = {
	"italian": "ita",
}


@dataclass(frozen=True)
class Category:
	"""One kind of string table: where its columns live and what file it produces."""

	name: str
	columns: Tuple[int, int]
	filename: str

	def column_indices(self) -> Iterator[int]:
		start, end = self.columns
		return iter(range(start, end + 1))


@dataclass(frozen=True)
class SheetLayout:
	sheet_name: str
	header_row: int
	data_start_row: int
	categories: Tuple[Category, ...]

	def with_sheet_name(self, sheet_name: str) -> SheetLayout:
		return replace(self, sheet_name=sheet_name)


DEFAULT_LAYOUT = SheetLayout(
	sheet_name=SHEET_NAME,
	header_row=HEADER_ROW,
	data_start_row=DATA_START_ROW,
	categories=(
		Category("translation", TRANSLATION_COLUMNS, TRANSLATION_FILENAME),
		Category("eula", EULA_COLUMNS, EULA_FILENAME),
	),
)
