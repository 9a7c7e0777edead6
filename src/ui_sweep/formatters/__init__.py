"""Report rendering."""

from .base import BaseFormatter
from .text_formatter import DISCLAIMER, SUCCESS_MESSAGE, TextReportFormatter

__all__ = ["BaseFormatter", "DISCLAIMER", "SUCCESS_MESSAGE", "TextReportFormatter"]
