#!/usr/bin/env python3
"""
Command-line interface for the translation_export package.
Usage:
  python -m translation_export <excel_file> [options]
"""

import argparse
import json
import logging
import platform
import sys
from typing import List, Optional

from .config import DEFAULT_LAYOUT
from .exporter import ENGINES, export


def default_engine() -> str:
	# Excel itself renders display text on Windows; elsewhere read the file directly
	return 'xlwings' if platform.system().lower().startswith('win') else 'openpyxl'


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(description='Export per-language translation and EULA JSON files from an Excel workbook')
	parser.add_argument('excel_file', help='Path to Excel file')
	parser.add_argument('--out', '-o', default='exports', help='Output directory (default: exports)')
	parser.add_argument('--engine', choices=ENGINES, help='Backend engine to use')
	parser.add_argument('--sheet', '-s', help=f'Worksheet name (default: {DEFAULT_LAYOUT.sheet_name})')
	parser.add_argument('--json', action='store_true', help='Print the result as JSON')
	parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format='%(levelname)s %(name)s: %(message)s',
	)

	layout = DEFAULT_LAYOUT.with_sheet_name(args.sheet) if args.sheet else DEFAULT_LAYOUT
	result = export(args.excel_file, args.out, layout=layout, engine=args.engine or default_engine())

	if args.json:
		print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
	elif result.success:
		print(f"\n{result.message}")
		print(f"Files created: {result.files_created}")
		print(f"Destination: {args.out}")
	else:
		print(f"\nExport failed: {result.message}", file=sys.stderr)

	return 0 if result.success else 1


if __name__ == "__main__":
	sys.exit(main())
