"""
Palette pipeline: the caller side of the ramp engine and token builder.

Normalizes and validates each palette color, generates one ramp per color
while isolating per-color failures, checks that theme roles point at known
colors, and builds the exportable token bundle. ``PaletteDocument`` bundles a
palette, its theme mapping and stop set, and reads/writes them as JSON.
"""
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .defaults import (
    DEFAULT_GAMUT_MODE,
    DEFAULT_MAPPING,
    DEFAULT_PALETTE,
    DEFAULT_STOP_SET,
    NEW_COLOR_HEX,
    NEW_COLOR_ID,
    NEW_COLOR_LABEL,
)
from .errors import MissingReferenceError, RampError
from .hex import is_valid_hex, normalize_hex
from .ramp import generate_ramp9, stop_positions
from .tokens import build_tokens, slugify_id, unique_id
from .types.color_types import GamutMode, Ramp, StopSet
from .types.token_types import ROLE_KEYS, THEME_NAMES, PaletteColor, ThemeMapping, TokenBundle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteRow:
    """A palette color with either its ramp or the reason it has none."""
    color: PaletteColor
    ramp: Optional[Ramp] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.ramp is not None and self.error is None


def compute_rows(
    palette: Iterable[PaletteColor],
    stop_set: StopSet = DEFAULT_STOP_SET,
    gamut: Union[GamutMode, str] = DEFAULT_GAMUT_MODE,
) -> List[PaletteRow]:
    """
    Generate a ramp for every palette color.

    A color that fails validation or generation yields a row with ``error``
    set; the remaining colors are still computed.
    """
    rows: List[PaletteRow] = []
    for color in palette:
        if not is_valid_hex(color.hex):
            logger.warning("Skipping ramp for %r: invalid hex %r", color.id, color.hex)
            rows.append(PaletteRow(color, error="Invalid hex"))
            continue
        try:
            normalized = normalize_hex(color.hex)
            ramp = generate_ramp9(normalized, stop_set, gamut)
        except RampError as e:
            logger.warning("Failed to generate ramp for %r: %s", color.id, e)
            rows.append(PaletteRow(color, error=str(e) or "Failed to generate ramp"))
            continue
        rows.append(PaletteRow(replace(color, hex=normalized), ramp=ramp))
    return rows


def ramps_by_id(rows: Iterable[PaletteRow]) -> Dict[str, Ramp]:
    return {row.color.id: row.ramp for row in rows if row.ramp is not None}


def validate_mapping(
    color_ids: Iterable[str],
    mapping: Dict[str, ThemeMapping],
) -> List[Tuple[str, str, str]]:
    """
    Find theme roles that reference unknown color ids.

    Returns:
        List of (theme, role, color id) triples; empty when every role resolves.
    """
    ids = set(color_ids)
    problems = []
    for theme in THEME_NAMES:
        for role, color_id in mapping[theme].roles():
            if color_id not in ids:
                problems.append((theme, role, color_id))
    return problems


@dataclass
class PaletteDocument:
    palette: List[PaletteColor] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    mapping: Dict[str, ThemeMapping] = field(default_factory=lambda: dict(DEFAULT_MAPPING))
    stop_set: StopSet = DEFAULT_STOP_SET

    def __post_init__(self):
        stop_positions(self.stop_set)

    @classmethod
    def default(cls) -> PaletteDocument:
        return cls()

    # ---- serialization ----

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PaletteDocument:
        """Missing sections fall back to the defaults."""
        doc = cls()
        if isinstance(data.get("palette"), list):
            doc.palette = [PaletteColor.from_dict(entry) for entry in data["palette"]]
        if isinstance(data.get("mapping"), dict):
            doc.mapping = {
                theme: ThemeMapping.from_dict(data["mapping"][theme]) for theme in THEME_NAMES
            }
        if data.get("stopSet"):
            doc.stop_set = str(data["stopSet"])
            stop_positions(doc.stop_set)
        return doc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "palette": [color.to_dict() for color in self.palette],
            "mapping": {theme: self.mapping[theme].to_dict() for theme in THEME_NAMES},
            "stopSet": self.stop_set,
        }

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> PaletteDocument:
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def dump(self, path: Union[str, os.PathLike]) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    # ---- editing ----

    @property
    def color_ids(self) -> List[str]:
        return [color.id for color in self.palette]

    def get(self, color_id: str) -> PaletteColor:
        for color in self.palette:
            if color.id == color_id:
                return color
        raise KeyError(color_id)

    def add_color(self, label: str = NEW_COLOR_LABEL, hex: str = NEW_COLOR_HEX) -> PaletteColor:
        color = PaletteColor(unique_id(NEW_COLOR_ID, self.color_ids), label, hex)
        self.palette.append(color)
        return color

    def remove_color(self, color_id: str) -> None:
        """Remove a color; roles still pointing at it will fail validation."""
        self.palette = [color for color in self.palette if color.id != color_id]

    def update_color(
        self,
        color_id: str,
        *,
        label: Optional[str] = None,
        hex: Optional[str] = None,
        new_id: Optional[str] = None,
    ) -> PaletteColor:
        """
        Edit a color in place. ``new_id`` is slugified; an empty slug keeps the
        current id. Theme roles follow a rename.
        """
        old = self.get(color_id)
        changes: Dict[str, str] = {}
        if label is not None:
            changes["label"] = label
        if hex is not None:
            changes["hex"] = hex
        if new_id is not None:
            slug = slugify_id(new_id) or old.id
            if slug != old.id and slug in self.color_ids:
                raise ValueError(f"Color id {slug!r} already exists")
            changes["id"] = slug
        updated = replace(old, **changes)
        self.palette = [updated if color.id == color_id else color for color in self.palette]
        if updated.id != old.id:
            self._rename_in_mapping(old.id, updated.id)
        return updated

    def set_role(self, theme: str, role: str, color_id: str) -> None:
        """
        Point ``role`` (camelCase or snake_case) of ``theme`` at ``color_id``.

        Raises:
            KeyError: if ``theme`` or ``role`` is unknown
        """
        key = ROLE_KEYS.get(role, role)
        if key not in ROLE_KEYS.values():
            raise KeyError(f"Unknown role {role!r}")
        values = self.mapping[theme].to_dict()
        values[key] = color_id
        self.mapping[theme] = ThemeMapping.from_dict(values)

    def _rename_in_mapping(self, old_id: str, new_id: str) -> None:
        for theme in THEME_NAMES:
            values = {
                role: (new_id if color_id == old_id else color_id)
                for role, color_id in self.mapping[theme].to_dict().items()
            }
            self.mapping[theme] = ThemeMapping.from_dict(values)

    # ---- generation ----

    def rows(self, gamut: Union[GamutMode, str] = DEFAULT_GAMUT_MODE) -> List[PaletteRow]:
        return compute_rows(self.palette, self.stop_set, gamut)

    def bundle(self, gamut: Union[GamutMode, str] = DEFAULT_GAMUT_MODE) -> TokenBundle:
        """
        Build the token bundle for this document.

        Raises:
            RampError: if any color failed to produce a ramp
            MissingReferenceError: if a theme role names an unknown color
        """
        rows = self.rows(gamut)
        failed = [row for row in rows if not row.ok]
        if failed:
            details = ", ".join(f"{row.color.id}: {row.error}" for row in failed)
            raise RampError(f"Cannot export tokens; invalid colors ({details})")

        problems = validate_mapping(self.color_ids, self.mapping)
        if problems:
            raise MissingReferenceError(*problems[0])

        logger.debug("Building tokens for %d colors (stop set %s)", len(rows), self.stop_set)
        return build_tokens([row.color for row in rows], ramps_by_id(rows), self.mapping)
