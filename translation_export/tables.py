#!/usr/bin/env python3
"""
Builds per-language string tables from the translation sheet.

The header row names a language per column. Every data cell below it may carry
one `"key": "value"` entry which is added to that column's language table.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol

from .cells import CellContent, cell_text, parse_entry
from .config import SheetLayout

logger = logging.getLogger(__name__)

# category name -> column index -> language name
HeaderMap = Dict[str, Dict[int, str]]
# category name -> language name -> key -> value
LanguageTables = Dict[str, Dict[str, Dict[str, str]]]


class SheetReader(Protocol):
	@property
	def last_row(self) -> int:
		...

	def cell(self, row: int, col: int) -> Optional[CellContent]:
		...


def resolve_headers(reader: SheetReader, layout: SheetLayout) -> HeaderMap:
	"""Map each category's columns to the language named in the header row.

	Columns with an empty or blank header are left out and contribute nothing.
	"""
	headers: HeaderMap = {}
	for category in layout.categories:
		columns: Dict[int, str] = {}
		for col in category.column_indices():
			name = cell_text(reader.cell(layout.header_row, col))
			if name is None or not name.strip():
				continue
			columns[col] = name
		headers[category.name] = columns
		logger.info("%s languages: %s", category.name, ", ".join(dict.fromkeys(columns.values())) or "none")
	return headers


def accumulate(reader: SheetReader, layout: SheetLayout, headers: HeaderMap) -> LanguageTables:
	"""Collect every entry below the header row into per-language tables.

	Each language named in the header gets a table, empty or not. Keys keep the
	order they are first seen in; a later row overwrites the value of an earlier one.
	"""
	tables: LanguageTables = {}
	for category in layout.categories:
		columns = headers.get(category.name, {})
		tables[category.name] = {language: {} for language in columns.values()}

	skipped = 0
	for row in range(layout.data_start_row, reader.last_row + 1):
		for category in layout.categories:
			languages = tables[category.name]
			for col, language in headers.get(category.name, {}).items():
				text = cell_text(reader.cell(row, col))
				if text is None:
					continue
				entry = parse_entry(text)
				if entry is None:
					skipped += 1
					continue
				key, value = entry
				languages[language][key] = value

	if skipped:
		logger.debug("Skipped %d cells without a key/value entry", skipped)
	return tables
