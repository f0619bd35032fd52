#!/usr/bin/env python3
"""
Sheet reader using xlwings
Drives a local Excel instance, so cells carry the text exactly as Excel displays it
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import xlwings as xw

from .cells import CellContent
from .errors import InputNotFoundError, InputUnreadableError, SheetNotFoundError

logger = logging.getLogger(__name__)


class XlwingsSheetReader:
	"""Read cells of a single worksheet through Excel using xlwings"""

	def __init__(self, excel_file_path: str):
		"""
		Initialize the reader with an Excel file path

		Args:
			excel_file_path (str): Path to the Excel file

		Raises:
			InputNotFoundError: If the file does not exist
		"""
		self.excel_file_path = Path(excel_file_path)
		self.app = None
		self.workbook = None
		self.worksheet = None
		self._last_row = -1

		if not self.excel_file_path.is_file():
			raise InputNotFoundError(str(excel_file_path))

	def __enter__(self):
		"""Context manager entry"""
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close_workbook()

	def open_workbook(self):
		"""Open the Excel workbook in a hidden Excel instance"""
		try:
			self.app = xw.App(visible=False, add_book=False)
			self.workbook = self.app.books.open(str(self.excel_file_path))
		except Exception as e:
			self.close_workbook()
			raise InputUnreadableError(str(self.excel_file_path), str(e) or type(e).__name__) from e
		logger.info("Opened %s", self.excel_file_path.name)

	def close_workbook(self):
		"""Close the workbook and quit the Excel instance"""
		try:
			if self.workbook:
				self.workbook.close()
			if self.app:
				self.app.quit()
		except Exception as e:
			logger.warning("Error closing workbook: %s", e)
		finally:
			self.workbook = None
			self.app = None
			self.worksheet = None

	def select_sheet(self, sheet_name: str):
		"""
		Select the worksheet all further reads come from

		Args:
			sheet_name (str): Exact worksheet name

		Raises:
			SheetNotFoundError: If the workbook has no sheet with that name
		"""
		if self.workbook is None:
			raise RuntimeError("Workbook is not open")
		names = [sheet.name for sheet in self.workbook.sheets]
		if sheet_name not in names:
			raise SheetNotFoundError(str(self.excel_file_path), sheet_name)
		self.worksheet = self.workbook.sheets[sheet_name]

		last_cell = self.worksheet.used_range.last_cell
		if last_cell.row == 1 and last_cell.column == 1 and last_cell.value is None:
			self._last_row = -1
		else:
			self._last_row = last_cell.row - 1
		return self.worksheet

	@property
	def last_row(self) -> int:
		"""Zero-based index of the last occupied row, -1 for an empty sheet"""
		self._require_sheet()
		return self._last_row

	def cell(self, row: int, col: int) -> Optional[CellContent]:
		"""
		Read one cell

		Args:
			row (int): Zero-based row index
			col (int): Zero-based column index

		Returns:
			CellContent with raw value and displayed text, or None for an empty cell
		"""
		ws = self._require_sheet()
		if row < 0 or col < 0 or row > self._last_row:
			return None
		rng = ws.cells(row + 1, col + 1)
		value = rng.value
		display = self._get_cell_display_text(rng)
		if value is None and not display:
			return None
		return CellContent(value=value, display=display)

	def _get_cell_display_text(self, cell) -> Optional[str]:
		try:
			text = cell.api.Text
		except Exception:
			return None
		return text if isinstance(text, str) else None

	def _require_sheet(self):
		if self.worksheet is None:
			raise RuntimeError("No worksheet selected")
		return self.worksheet
