"""Services package exports."""

from .analyze_handler import AnalyzeHandler

__all__ = ["AnalyzeHandler"]
