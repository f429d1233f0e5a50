"""TrueType/OpenType font metrics backed by fontTools.

Reads advances from ``hmtx``, the character map from ``cmap``, vertical
metrics from ``hhea`` and pair kerning from the legacy ``kern`` table
and from GPOS pair adjustment lookups registered under the ``kern``
feature. All font-unit values are scaled by ``size / unitsPerEm``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fontTools.ttLib import TTFont

from glyphflow.fonts.provider import GlyphMetrics, VerticalMetrics
from glyphflow.layout.constants import DEFAULT_SIZE_FACTOR

logger = logging.getLogger(__name__)

_PAIR_ADJUSTMENT = 2
_EXTENSION = 9


class TrueTypeFontMetrics:
    """``FontMetricsProvider`` for a font file (or an already loaded ``TTFont``)."""

    def __init__(
        self,
        font: TTFont | str | Path,
        size_factor: float = DEFAULT_SIZE_FACTOR,
        font_number: int = 0,
    ) -> None:
        if isinstance(font, TTFont):
            self.font = font
            self.path: Path | None = None
        else:
            self.path = Path(font)
            self.font = TTFont(str(self.path), fontNumber=font_number, lazy=True)
        self.size_factor = size_factor

        self.units_per_em: int = self.font["head"].unitsPerEm
        self.glyph_order: list[str] = self.font.getGlyphOrder()
        self._glyph_ids = {name: gid for gid, name in enumerate(self.glyph_order)}
        self._cmap: dict[int, str] = self.font.getBestCmap() or {}
        self._advances: dict[str, int] = {
            name: advance for name, (advance, _lsb) in self.font["hmtx"].metrics.items()
        }

        hhea = self.font["hhea"]
        self._ascent = hhea.ascent
        self._descent = hhea.descent
        self._line_gap = hhea.lineGap

        self._pairs: dict[tuple[int, int], int] = {}
        self._class_subtables: list = []
        self._pair_cache: dict[tuple[int, int], int] = {}
        self._load_kern_table()
        self._load_gpos_kerning()

        if not self._pairs and not self._class_subtables:
            logger.warning("Font %s has no usable kerning data", self.name)
        else:
            logger.debug(
                "Font %s: %d kerning pairs, %d class-based subtables",
                self.name, len(self._pairs), len(self._class_subtables),
            )

    @property
    def name(self) -> str:
        if self.path is not None:
            return self.path.name
        name_table = self.font.get("name")
        if name_table is not None:
            family = name_table.getDebugName(4) or name_table.getDebugName(1)
            if family:
                return family
        return "<in-memory font>"

    @property
    def cache_key(self) -> tuple:
        source = str(self.path) if self.path is not None else id(self.font)
        return ("truetype", source, self.size_factor)

    def _scale(self, size: float) -> float:
        return size / self.units_per_em

    # -----------------------------------------------------------------
    # FontMetricsProvider
    # -----------------------------------------------------------------

    def glyph(self, char: str, size: float) -> GlyphMetrics:
        # Unmapped characters fall back to glyph 0 (.notdef)
        name = self._cmap.get(ord(char), self.glyph_order[0])
        advance = self._advances.get(name, 0)
        return GlyphMetrics(self._glyph_ids.get(name, 0), advance * self._scale(size))

    def pair_kerning(self, first: int, second: int, size: float) -> float:
        key = (first, second)
        value = self._pair_cache.get(key)
        if value is None:
            value = self._lookup_pair(first, second)
            self._pair_cache[key] = value
        return value * self._scale(size)

    def v_metrics(self, size: float) -> VerticalMetrics:
        scale = self._scale(size)
        return VerticalMetrics(
            self._ascent * scale, self._descent * scale, self._line_gap * scale
        )

    # -----------------------------------------------------------------
    # Kerning tables
    # -----------------------------------------------------------------

    def _lookup_pair(self, first: int, second: int) -> int:
        value = self._pairs.get((first, second))
        if value is not None:
            return value
        if not self._class_subtables:
            return 0
        first_name = self.glyph_order[first]
        second_name = self.glyph_order[second]
        for subtable in self._class_subtables:
            if first_name not in subtable.Coverage.glyphs:
                continue
            class1 = subtable.ClassDef1.classDefs.get(first_name, 0)
            class2 = subtable.ClassDef2.classDefs.get(second_name, 0)
            record = subtable.Class1Record[class1].Class2Record[class2]
            return _x_advance(record.Value1)
        return 0

    def _load_kern_table(self) -> None:
        if "kern" not in self.font:
            return
        for subtable in self.font["kern"].kernTables:
            pairs = getattr(subtable, "kernTable", None)
            if not pairs:
                continue
            for (left, right), value in pairs.items():
                key = (self._glyph_ids.get(left), self._glyph_ids.get(right))
                if None in key:
                    continue
                self._pairs.setdefault(key, value)

    def _load_gpos_kerning(self) -> None:
        if "GPOS" not in self.font:
            return
        gpos = self.font["GPOS"].table
        if gpos.FeatureList is None or gpos.LookupList is None:
            return

        lookup_indices: set[int] = set()
        for record in gpos.FeatureList.FeatureRecord:
            if record.FeatureTag == "kern":
                lookup_indices.update(record.Feature.LookupListIndex)

        for index in sorted(lookup_indices):
            lookup = gpos.LookupList.Lookup[index]
            for subtable in _pair_subtables(lookup):
                if subtable.Format == 1:
                    self._load_glyph_pairs(subtable)
                elif subtable.Format == 2:
                    self._class_subtables.append(subtable)

    def _load_glyph_pairs(self, subtable) -> None:
        for first_name, pair_set in zip(subtable.Coverage.glyphs, subtable.PairSet):
            first = self._glyph_ids.get(first_name)
            if first is None:
                continue
            for record in pair_set.PairValueRecord:
                second = self._glyph_ids.get(record.SecondGlyph)
                if second is None:
                    continue
                # Earlier lookups win, like a shaper applying them in order
                self._pairs.setdefault((first, second), _x_advance(record.Value1))


def _pair_subtables(lookup) -> list:
    """Pair adjustment subtables of a GPOS lookup, unwrapping extensions."""
    if lookup.LookupType == _PAIR_ADJUSTMENT:
        return list(lookup.SubTable)
    if lookup.LookupType == _EXTENSION:
        return [
            ext.ExtSubTable
            for ext in lookup.SubTable
            if ext.ExtensionLookupType == _PAIR_ADJUSTMENT
        ]
    return []


def _x_advance(value_record) -> int:
    if value_record is None:
        return 0
    return getattr(value_record, "XAdvance", 0) or 0
