"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from translation_export.config import SHEET_NAME

from .fakes import Cells, write_workbook


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
	def _make(cells: Cells, sheet_name: str = SHEET_NAME, name: str = "strings.xlsx") -> Path:
		return write_workbook(tmp_path / name, cells, sheet_name)

	return _make
