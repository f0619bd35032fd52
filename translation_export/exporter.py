#!/usr/bin/env python3
"""
End-to-end export: workbook in, one JSON file per language and category out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from .config import DEFAULT_LAYOUT, SheetLayout
from .errors import ExportError
from .openpyxl_reader import OpenpyxlSheetReader
from .tables import accumulate, resolve_headers
from .writer import ensure_dir, language_dir, write_json

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Export completed successfully!"

ENGINES = ("openpyxl", "xlwings")


@dataclass
class ExportResult:
	success: bool
	message: str
	files: List[str] = field(default_factory=list)

	@property
	def files_created(self) -> int:
		return len(self.files)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"success": self.success,
			"message": self.message,
			"filesCreated": self.files_created,
			"files": list(self.files),
		}


def _open_reader(input_file: str, engine: str):
	if engine == "openpyxl":
		return OpenpyxlSheetReader(input_file)
	if engine == "xlwings":
		# Only touch xlwings when it is asked for
		from .xlwings_reader import XlwingsSheetReader
		return XlwingsSheetReader(input_file)
	raise ValueError(f"Unknown engine: {engine}")


def export(
	input_file: Union[str, Path],
	output_dir: Union[str, Path],
	layout: SheetLayout = DEFAULT_LAYOUT,
	engine: str = "openpyxl",
) -> ExportResult:
	"""
	Export the translation sheet of a workbook as per-language JSON files.

	Writes <output_dir>/<folder>/<category file> for every language named in the
	header row. Never raises: any fatal condition is returned as a failed result
	whose message explains it. Files written before a failure stay on disk and
	are listed in the result.
	"""
	written: List[str] = []
	try:
		with _open_reader(str(input_file), engine) as reader:
			reader.select_sheet(layout.sheet_name)
			headers = resolve_headers(reader, layout)
			tables = accumulate(reader, layout, headers)

		out_root = Path(output_dir)
		ensure_dir(out_root)
		for category in layout.categories:
			for language, entries in tables[category.name].items():
				path = language_dir(out_root, language) / category.filename
				write_json(entries, path)
				written.append(str(path))
	except ExportError as e:
		logger.error("Export failed: %s", e.message)
		return ExportResult(success=False, message=e.message, files=written)
	except Exception as e:
		logger.exception("Unexpected error during export")
		return ExportResult(success=False, message=str(e) or type(e).__name__, files=written)

	logger.info("Wrote %d files to %s", len(written), output_dir)
	return ExportResult(success=True, message=SUCCESS_MESSAGE, files=written)
