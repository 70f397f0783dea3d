"""Font handling for text2path.

This subpackage provides:
- FontFace: a parsed font with its HarfBuzz face and pipeline metrics
- FontTable: the keyed, freezable collection of faces a conversion reads
"""

from text2path.fonts.face import FontFace
from text2path.fonts.table import FontTable

__all__ = ["FontFace", "FontTable"]
