"""
Design-token bundle builder.

Three layers are produced from a palette, its ramps and a per-theme role
mapping:

- primitives: ``--c-<id>-<step>`` -> hex, one per palette color and step
- semantic tokens per theme, each a reference to a primitive
- component tokens per theme, each aliasing a semantic token (or a literal)

The bundle is rendered as CSS custom properties and as a JSON tree that keeps
references as variable names.
"""
from __future__ import annotations
import re
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from .errors import MissingReferenceError
from .types.color_types import RAMP_STEPS, Ramp, RampStep
from .types.token_types import (
    ROLE_KEYS,
    THEME_NAMES,
    PaletteColor,
    ThemeMapping,
    TokenBundle,
    TokenRef,
    TokenValue,
)

# (token, role attribute, light step, dark step)
SEMANTIC_SLOTS: Tuple[Tuple[str, str, RampStep, RampStep], ...] = (
    ("--surface-primary", "surface_primary", 100, 900),
    ("--surface-secondary", "surface_primary", 200, 800),
    ("--surface-inverse", "surface_inverse", 900, 100),
    ("--text-primary", "text_primary", 900, 100),
    ("--text-secondary", "text_primary", 700, 200),
    ("--text-muted", "text_primary", 600, 400),
    ("--text-disabled", "text_primary", 400, 500),
    ("--text-inverse", "text_inverse", 100, 900),
    ("--border-default", "text_primary", 300, 700),
    ("--border-strong", "text_primary", 400, 600),
    ("--border-subtle", "text_primary", 200, 800),
    ("--accent", "accent_primary", 500, 500),
    ("--accent-hover", "accent_primary", 600, 600),
    ("--accent-active", "accent_primary", 700, 700),
    ("--accent-inverse", "accent_inverse", 500, 500),
)

SEMANTIC_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("--link", "--accent"),
    ("--link-hover", "--accent-hover"),
    ("--link-active", "--accent-active"),
)

TRANSPARENT = "transparent"

# (token, semantic token it aliases, or a literal value)
COMPONENT_SLOTS: Tuple[Tuple[str, str], ...] = (
    ("--btn-primary-bg", "--surface-inverse"),
    ("--btn-primary-text", "--text-inverse"),
    ("--btn-primary-bg-hover", "--accent-hover"),
    ("--btn-primary-bg-active", "--accent-active"),
    ("--btn-primary-bg-disabled", "--surface-secondary"),
    ("--btn-primary-text-disabled", "--text-disabled"),

    ("--btn-secondary-bg", TRANSPARENT),
    ("--btn-secondary-text", "--text-primary"),
    ("--btn-secondary-border", "--border-default"),
    ("--btn-secondary-bg-hover", "--surface-secondary"),
    ("--btn-secondary-bg-active", "--surface-secondary"),
    ("--btn-secondary-text-disabled", "--text-disabled"),
    ("--btn-secondary-border-disabled", "--border-subtle"),

    ("--input-bg", "--surface-primary"),
    ("--input-text", "--text-primary"),
    ("--input-placeholder", "--text-muted"),
    ("--input-border", "--border-default"),
    ("--input-border-focus", "--accent"),
    ("--input-bg-disabled", "--surface-secondary"),
    ("--input-text-disabled", "--text-disabled"),
)

PaletteInput = Union[PaletteColor, Mapping[str, str]]
MappingInput = Mapping[str, Union[ThemeMapping, Mapping[str, str]]]


def primitive_name(color_id: str, step: RampStep) -> str:
    return f"--c-{color_id}-{step}"


def slugify_id(text: str) -> str:
    """Lowercase kebab-case id: runs of anything but a-z0-9 become one dash."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.strip().lower())
    return slug.strip("-")


def unique_id(base: str, used: Iterable[str]) -> str:
    """``base`` if unused, else the first free ``base-2``, ``base-3``, ..."""
    used = set(used)
    i = 1
    candidate = base
    while candidate in used:
        i += 1
        candidate = f"{base}-{i}"
    return candidate


def _as_palette_color(entry: PaletteInput) -> PaletteColor:
    if isinstance(entry, PaletteColor):
        return entry
    return PaletteColor.from_dict(dict(entry))


def _as_theme_mapping(entry: Union[ThemeMapping, Mapping[str, str]]) -> ThemeMapping:
    if isinstance(entry, ThemeMapping):
        return entry
    return ThemeMapping.from_dict(dict(entry))


def build_primitives(palette: Iterable[PaletteInput], ramps: Mapping[str, Ramp]) -> Dict[str, str]:
    """One entry per color x step; colors without a ramp are skipped."""
    primitives: Dict[str, str] = {}
    for entry in palette:
        color = _as_palette_color(entry)
        ramp = ramps.get(color.id)
        if ramp is None:
            continue
        for step in RAMP_STEPS:
            primitives[primitive_name(color.id, step)] = ramp[step]
    return primitives


def build_semantic(
    theme: str,
    mapping: ThemeMapping,
    primitives: Mapping[str, str],
) -> Dict[str, TokenRef]:
    """
    Semantic tokens for one theme.

    Raises:
        MissingReferenceError: if a role's color id has no primitives
    """
    dark = theme == "dark"
    semantic: Dict[str, TokenRef] = {}
    for token, role, light_step, dark_step in SEMANTIC_SLOTS:
        color_id = getattr(mapping, role)
        name = primitive_name(color_id, dark_step if dark else light_step)
        if name not in primitives:
            raise MissingReferenceError(theme, ROLE_KEYS[role], color_id)
        semantic[token] = TokenRef(name)
    for alias, target in SEMANTIC_ALIASES:
        semantic[alias] = semantic[target]
    return semantic


def build_components(semantic: Mapping[str, TokenRef]) -> Dict[str, TokenValue]:
    components: Dict[str, TokenValue] = {}
    for token, source in COMPONENT_SLOTS:
        components[token] = semantic[source] if source.startswith("--") else source
    return components


def _css_value(value: TokenValue) -> str:
    return value.css() if isinstance(value, TokenRef) else value


def _json_value(value: TokenValue) -> str:
    return value.name if isinstance(value, TokenRef) else value


def _var_line(name: str, value: str) -> str:
    return f"  {name}: {value};"


def render_css(
    primitives: Mapping[str, str],
    themes: Mapping[str, Mapping[str, TokenValue]],
    components: Mapping[str, Mapping[str, TokenValue]],
) -> str:
    lines: List[str] = [":root {", "  /* Primitive ramps */"]
    for key in sorted(primitives):
        lines.append(_var_line(key, primitives[key]))
    lines.append("}")
    lines.append("")

    for theme in themes:
        lines.append(f'[data-theme="{theme}"] {{')
        lines.append("  /* Semantic tokens */")
        for key, value in themes[theme].items():
            lines.append(_var_line(key, _css_value(value)))
        lines.append("")
        lines.append("  /* Component tokens */")
        for key, value in components[theme].items():
            lines.append(_var_line(key, _css_value(value)))
        lines.append("}")
        lines.append("")

    return "\n".join(lines)


def build_tokens(
    palette: Iterable[PaletteInput],
    ramps: Mapping[str, Ramp],
    mapping: MappingInput,
) -> TokenBundle:
    """
    Build the CSS and JSON token bundle.

    Args:
        palette: Palette colors (``PaletteColor`` or ``{"id", "label", "hex"}`` dicts)
        ramps: Ramp per color id; colors without one emit no primitives
        mapping: ``{"light": ThemeMapping, "dark": ThemeMapping}``; plain dicts
            with camelCase role keys are accepted

    Returns:
        TokenBundle: ``css`` text and the ``json`` tree

    Raises:
        MissingReferenceError: if any role in either theme names a color
            without primitives
        KeyError: if a theme is missing from ``mapping``
    """
    primitives = build_primitives(palette, ramps)

    themes: Dict[str, Dict[str, TokenRef]] = {}
    components: Dict[str, Dict[str, TokenValue]] = {}
    for theme in THEME_NAMES:
        theme_mapping = _as_theme_mapping(mapping[theme])
        themes[theme] = build_semantic(theme, theme_mapping, primitives)
        components[theme] = build_components(themes[theme])

    css = render_css(primitives, themes, components)
    json_tree = {
        "primitives": dict(primitives),
        "themes": {
            theme: {k: _json_value(v) for k, v in values.items()}
            for theme, values in themes.items()
        },
        "components": {
            theme: {k: _json_value(v) for k, v in values.items()}
            for theme, values in components.items()
        },
    }
    return TokenBundle(css=css, json=json_tree)
