from .exporter import ExportResult, export
from .openpyxl_reader import OpenpyxlSheetReader

__all__ = ["ExportResult", "export", "OpenpyxlSheetReader"]

__version__ = "0.1.0"
