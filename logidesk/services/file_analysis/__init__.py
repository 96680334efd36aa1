"""File analysis service module"""
from .file_analysis_service import analyze_file

__all__ = [
    "analyze_file",
]
