"""Font table: the caller-owned mapping from font key to :class:`FontFace`."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from text2path.exceptions import FontTableFrozenError
from text2path.fonts.face import FontFace

logger = logging.getLogger(__name__)


class FontTable(Mapping[str, FontFace]):
    """Fonts by key.

    Populate with :meth:`add` or :meth:`load`, then :meth:`freeze` before
    sharing the table between threads. Conversions only read from it.
    """

    def __init__(self, faces: Mapping[str, FontFace] | None = None) -> None:
        self._faces: dict[str, FontFace] = dict(faces or {})
        self._frozen = False

    def __getitem__(self, key: str) -> FontFace:
        return self._faces[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._faces)

    def __len__(self) -> int:
        return len(self._faces)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, key: str, face: FontFace) -> None:
        if self._frozen:
            raise FontTableFrozenError(f"Cannot add font {key!r}: table is frozen")
        self._faces[key] = face

    def load(self, key: str, path: Path | str, index: int = 0) -> FontFace:
        """Parse a font file and register it under ``key``."""
        if self._frozen:
            raise FontTableFrozenError(f"Cannot load font {key!r}: table is frozen")
        face = FontFace.from_file(path, index)
        self._faces[key] = face
        logger.info("Registered font %r from %s", key, path)
        return face

    def freeze(self) -> FontTable:
        """Fully load every face and reject further writes."""
        for face in self._faces.values():
            face.ensure_loaded()
        self._frozen = True
        return self
