"""
rampcss - Color Ramps and CSS Design Tokens
===========================================

Generates deterministic 9-step (100..900) color ramps in OKLCH from a single
base color and exports them, together with a light/dark semantic role
mapping, as CSS custom properties and an equivalent JSON token tree.

Key Features
------------
- Perceptual ramps: white -> base -> black gradient in OKLCH, refined to
  light -> base -> dark and sampled at "figma" or "even" stop positions
- Shortest-arc hue interpolation and chroma-preserving gamut mapping
- Step 500 is always the normalized base color
- Token bundle with primitive, semantic and component layers
- Pure functions; no global state

Quick Start
-----------
>>> from rampcss import generate_ramp9, build_tokens, DEFAULT_PALETTE, DEFAULT_MAPPING
>>>
>>> ramp = generate_ramp9("#1c2e7a", "figma")
>>> ramp[500]
'#1c2e7a'
>>>
>>> ramps = {c.id: generate_ramp9(c.hex) for c in DEFAULT_PALETTE}
>>> bundle = build_tokens(DEFAULT_PALETTE, ramps, DEFAULT_MAPPING)
>>> bundle.themes["light"]["--text-primary"]
'--c-deep-blue-900'
"""

from .errors import RampError, InvalidColorError, ConversionError, MissingReferenceError
from .types import (
    OKLCH,
    RAMP_STEPS,
    GamutMode,
    PaletteColor,
    ThemeMapping,
    TokenBundle,
    TokenRef,
)
from .hex import is_valid_hex, normalize_hex
from .ramp import STOP_SETS, generate_ramp, generate_ramp9
from .tokens import build_tokens, slugify_id, unique_id
from .defaults import DEFAULT_MAPPING, DEFAULT_PALETTE
from .palette import PaletteDocument, PaletteRow, compute_rows, ramps_by_id, validate_mapping

__version__ = "0.1.0"

__all__ = [
    # Errors
    'RampError',
    'InvalidColorError',
    'ConversionError',
    'MissingReferenceError',

    # Types
    'OKLCH',
    'RAMP_STEPS',
    'GamutMode',
    'PaletteColor',
    'ThemeMapping',
    'TokenBundle',
    'TokenRef',

    # Ramp engine
    'STOP_SETS',
    'generate_ramp',
    'generate_ramp9',
    'is_valid_hex',
    'normalize_hex',

    # Token builder
    'build_tokens',
    'slugify_id',
    'unique_id',

    # Palette pipeline
    'DEFAULT_MAPPING',
    'DEFAULT_PALETTE',
    'PaletteDocument',
    'PaletteRow',
    'compute_rows',
    'ramps_by_id',
    'validate_mapping',
]
