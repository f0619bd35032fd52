#!/usr/bin/env python3
"""
Cell text extraction and the `"key": "value"` entry grammar used in translation cells.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple, Optional, Tuple

# Value is greedy up to the last quote so escaped quotes (\") stay inside it
ENTRY_PATTERN = re.compile(r'"([^"]+)"\s*:\s*"([\s\S]*)"')


class CellContent(NamedTuple):
	value: Any
	display: Optional[str] = None


def cell_text(cell: Optional[CellContent]) -> Optional[str]:
	"""Return the text shown in a cell, preferring Excel's rendered display string."""
	if cell is None:
		return None
	text = cell.display or cell.value
	if not text or not isinstance(text, str):
		return None
	return text


def parse_entry(text: str) -> Optional[Tuple[str, str]]:
	"""Extract the first `"key": "value"` pair from text, or None if the text carries none."""
	match = ENTRY_PATTERN.search(text)
	if match is None:
		return None
	return match.group(1), match.group(2)
