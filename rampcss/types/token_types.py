from __future__ import annotations
import json
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Literal, Tuple, Union

ThemeName = Literal["light", "dark"]
THEME_NAMES: Tuple[ThemeName, ...] = ("light", "dark")


@dataclass(frozen=True)
class PaletteColor:
    id: str
    label: str
    hex: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PaletteColor:
        return cls(id=str(data["id"]), label=str(data.get("label", data["id"])), hex=str(data["hex"]))

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "label": self.label, "hex": self.hex}


# attribute name -> key used in palette documents
ROLE_KEYS = {
    "surface_primary": "surfacePrimary",
    "surface_inverse": "surfaceInverse",
    "text_primary": "textPrimary",
    "text_inverse": "textInverse",
    "accent_primary": "accentPrimary",
    "accent_inverse": "accentInverse",
}


@dataclass(frozen=True)
class ThemeMapping:
    """Palette color ids feeding the six semantic roles of one theme."""
    surface_primary: str
    surface_inverse: str
    text_primary: str
    text_inverse: str
    accent_primary: str
    accent_inverse: str

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> ThemeMapping:
        """Accepts either camelCase document keys or snake_case attribute names."""
        values = {}
        for attr, key in ROLE_KEYS.items():
            if key in data:
                values[attr] = data[key]
            elif attr in data:
                values[attr] = data[attr]
            else:
                raise KeyError(f"Theme mapping is missing role {key!r}")
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, attr) for attr, key in ROLE_KEYS.items()}

    def roles(self) -> Tuple[Tuple[str, str], ...]:
        """(document key, color id) pairs in declaration order."""
        return tuple((ROLE_KEYS[f.name], getattr(self, f.name)) for f in fields(self))


@dataclass(frozen=True)
class TokenRef:
    """Reference to another custom property, rendered as ``var(name)`` in CSS."""
    name: str

    def css(self) -> str:
        return f"var({self.name})"

    def __str__(self) -> str:
        return self.name


TokenValue = Union[TokenRef, str]


@dataclass(frozen=True)
class TokenBundle:
    css: str
    json: Dict[str, Any]

    @property
    def primitives(self) -> Dict[str, str]:
        return self.json["primitives"]

    @property
    def themes(self) -> Dict[str, Dict[str, str]]:
        return self.json["themes"]

    @property
    def components(self) -> Dict[str, Dict[str, str]]:
        return self.json["components"]

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.json, indent=indent)

    def write(self, directory: Union[str, os.PathLike]) -> Tuple[str, str]:
        """Write ``tokens.css`` and ``tokens.json`` into ``directory``."""
        os.makedirs(directory, exist_ok=True)
        css_path = os.path.join(directory, "tokens.css")
        json_path = os.path.join(directory, "tokens.json")
        with open(css_path, "w", encoding="utf-8") as f:
            f.write(self.css)
        with open(json_path, "w", encoding="utf-8") as f:
            f.write(self.to_json())
        return css_path, json_path
