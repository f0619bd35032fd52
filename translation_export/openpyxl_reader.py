#!/usr/bin/env python3
"""
OpenPyXL-based sheet reader for cross-platform environments without local Excel.
Limitations:
- No calculation engine; formula cells yield the value cached at last save, or nothing
- No rendered display text; cells carry their raw value only, so a numeric or date
  header is not treated as a language name (use the xlwings engine for those)
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Optional

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .cells import CellContent
from .errors import InputNotFoundError, InputUnreadableError, SheetNotFoundError

logger = logging.getLogger(__name__)


class OpenpyxlSheetReader:
	"""Read cells of a single worksheet using openpyxl (cross-platform)."""

	def __init__(self, excel_file_path: str):
		self.excel_file_path = Path(excel_file_path)
		self.workbook: Optional[Workbook] = None
		self.worksheet: Optional[Worksheet] = None
		self._last_row = -1
		if not self.excel_file_path.is_file():
			raise InputNotFoundError(str(excel_file_path))

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		# data_only=True returns cached results instead of formula text
		try:
			self.workbook = load_workbook(filename=str(self.excel_file_path), data_only=True, read_only=False)
		except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
			raise InputUnreadableError(str(self.excel_file_path), str(e) or type(e).__name__) from e
		logger.info("Opened %s", self.excel_file_path.name)

	def close_workbook(self) -> None:
		if self.workbook is not None:
			self.workbook.close()
			self.workbook = None
		self.worksheet = None

	def select_sheet(self, sheet_name: str) -> Worksheet:
		if self.workbook is None:
			raise RuntimeError("Workbook is not open")
		if sheet_name not in self.workbook.sheetnames:
			raise SheetNotFoundError(str(self.excel_file_path), sheet_name)
		ws = self.workbook[sheet_name]
		# Computed once: reading cells below creates them and would move max_row/max_column
		if ws.max_row == 1 and ws.max_column == 1 and ws["A1"].value is None:
			self._last_row = -1
		else:
			self._last_row = ws.max_row - 1
		self.worksheet = ws
		return ws

	@property
	def last_row(self) -> int:
		"""Zero-based index of the last occupied row, -1 for an empty sheet."""
		self._require_sheet()
		return self._last_row

	def cell(self, row: int, col: int) -> Optional[CellContent]:
		ws = self._require_sheet()
		if row < 0 or col < 0 or row > self._last_row:
			return None
		value = ws.cell(row=row + 1, column=col + 1).value
		if value is None:
			return None
		return CellContent(value=value, display=None)

	def _require_sheet(self) -> Worksheet:
		if self.worksheet is None:
			raise RuntimeError("No worksheet selected")
		return self.worksheet
