"""Basic rampcss usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rampcss import (
    DEFAULT_MAPPING,
    DEFAULT_PALETTE,
    PaletteDocument,
    build_tokens,
    generate_ramp9,
    normalize_hex,
)
from rampcss.ramp import ramp_samples


def demonstrate_ramps() -> None:
    # One base color, both stop sets.
    base = normalize_hex("#1C2E7A")
    figma = generate_ramp9(base, "figma")
    even = generate_ramp9(base, "even")
    for step in figma:
        print(f"{step}: figma {figma[step]}  even {even[step]}")

    # The perceptual points behind the ramp, before gamut mapping.
    for step, point in ramp_samples(base).items():
        print(f"{step}: L={point.l:.3f} C={point.c:.3f} H={point.h:.1f}")

    # Fast channel clipping instead of chroma reduction.
    print("clip 100:", generate_ramp9("#00ff00", gamut="clip")[100])
    print("chroma 100:", generate_ramp9("#00ff00", gamut="chroma")[100])


def demonstrate_tokens() -> None:
    ramps = {color.id: generate_ramp9(color.hex) for color in DEFAULT_PALETTE}
    bundle = build_tokens(DEFAULT_PALETTE, ramps, DEFAULT_MAPPING)
    print(bundle.css.split("\n\n")[1])
    print("light text:", bundle.themes["light"]["--text-primary"])
    print("dark text:", bundle.themes["dark"]["--text-primary"])


def demonstrate_document() -> None:
    doc = PaletteDocument.default()
    extra = doc.add_color(label="Signal Red", hex="#d7263d")
    doc.update_color(extra.id, new_id=extra.label)
    doc.set_role("light", "accentPrimary", "signal-red")
    print(doc.bundle().themes["light"]["--accent"])


if __name__ == "__main__":
    demonstrate_ramps()
    demonstrate_tokens()
    demonstrate_document()
