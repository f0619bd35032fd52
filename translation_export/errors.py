#!/usr/bin/env python3
"""
Fatal conditions of an export run.
Readers and the writer raise these; the exporter turns them into a failure result.
"""

from __future__ import annotations


class ExportError(Exception):
	"""Base class for every error that aborts an export.

	Attributes:
		path: File or directory the failure relates to.
		message: Human-readable description, shown to the user as-is.
	"""

	def __init__(self, path: str, message: str) -> None:
		self.path = path
		self.message = message
		super().__init__(message)


class InputNotFoundError(ExportError):
	"""The input spreadsheet does not exist."""

	def __init__(self, path: str) -> None:
		super().__init__(path, f"Excel file not found: {path}")


class InputUnreadableError(ExportError):
	"""The input exists but cannot be opened as a spreadsheet."""

	def __init__(self, path: str, reason: str) -> None:
		super().__init__(path, f"Could not read Excel file {path}: {reason}")


class SheetNotFoundError(ExportError):
	"""The workbook has no sheet with the expected name."""

	def __init__(self, path: str, sheet_name: str) -> None:
		self.sheet_name = sheet_name
		super().__init__(path, f'Sheet "{sheet_name}" not found')


class OutputWriteError(ExportError):
	"""A directory or file under the output directory could not be written."""

	def __init__(self, path: str, reason: str) -> None:
		super().__init__(path, f"Could not write {path}: {reason}")
