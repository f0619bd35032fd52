#!/usr/bin/env python3
"""
Output side of an export: language folder names and the JSON files inside them.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Mapping

from .config import IRREGULAR_FOLDER_NAMES
from .errors import OutputWriteError

logger = logging.getLogger(__name__)

INDENT = "  "

# Escapes already present in sheet text are kept; anything else JSON forbids is escaped
_STRING_TOKEN = re.compile(r'\\(?:["\\/bfnrt]|u[0-9a-fA-F]{4})|\\|"|[\x00-\x1f]')

_CONTROL_ESCAPES: Dict[str, str] = {
	"\b": "\\b",
	"\f": "\\f",
	"\n": "\\n",
	"\r": "\\r",
	"\t": "\\t",
}


def folder_name(language: str) -> str:
	"""Short folder name for a language: "Italian" -> "ita", "English" -> "en"."""
	lowered = language.lower()
	if not lowered.strip():
		raise ValueError("Language name is empty")
	return IRREGULAR_FOLDER_NAMES.get(lowered, lowered[:2])


def language_dir(out_root: Path, language: str) -> Path:
	"""Folder for a language, always a direct child of out_root.

	Path separators around the folder name are dropped, so a header such as
	"/English" lands in <out_root>/e rather than at the filesystem root.
	"""
	name = folder_name(language).strip("/\\")
	path = out_root / name
	if name in ("", ".", "..") or path.parent != out_root or path.name != name:
		raise OutputWriteError(str(out_root), f"Language {language!r} does not map to a folder inside the output directory")
	return path


def _escape_token(match: re.Match) -> str:
	token = match.group(0)
	if len(token) > 1:
		return token
	if token == "\\":
		return "\\\\"
	if token == '"':
		return '\\"'
	return _CONTROL_ESCAPES.get(token, f"\\u{ord(token):04x}")


def json_string(text: str) -> str:
	return '"' + _STRING_TOKEN.sub(_escape_token, text) + '"'


def format_json(entries: Mapping[str, str]) -> str:
	"""Render a flat string table as a two-space indented JSON object.

	Members keep the mapping's order, one per line, and the document ends with a
	newline, so the same table always renders to the same text.
	"""
	if not entries:
		return "{}\n"
	members = [f"{INDENT}{json_string(key)}: {json_string(value)}" for key, value in entries.items()]
	return "{\n" + ",\n".join(members) + "\n}\n"


def ensure_dir(path: Path) -> None:
	try:
		path.mkdir(parents=True, exist_ok=True)
	except OSError as e:
		raise OutputWriteError(str(path), e.strerror or str(e)) from e


def write_json(entries: Mapping[str, str], path: Path) -> Path:
	ensure_dir(path.parent)
	try:
		with path.open("w", encoding="utf-8", newline="\n") as f:
			f.write(format_json(entries))
	except OSError as e:
		raise OutputWriteError(str(path), e.strerror or str(e)) from e
	logger.debug("Wrote %s (%d entries)", path, len(entries))
	return path
