"""SVG path data for text2path.

This subpackage provides:
- Path-data string formatting (``M``/``L``/``Q``/``C``/``Z``)
- Parsing path-data strings back into structured paths (svg.path)
"""

from text2path.svg.pathdata import format_number, format_path_data, parse_path_data

__all__ = ["format_number", "format_path_data", "parse_path_data"]
