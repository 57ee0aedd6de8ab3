"""Bundled MTR data: line catalogue, source CSV and generated directions."""

from .lines import MTR_LINES, get_mtr_line

__all__ = ["MTR_LINES", "get_mtr_line"]
