import json
import logging

import pytest

from rampcss import (
    DEFAULT_MAPPING,
    DEFAULT_PALETTE,
    MissingReferenceError,
    PaletteDocument,
    RampError,
    compute_rows,
    ramps_by_id,
    validate_mapping,
)
from rampcss.types import PaletteColor, ThemeMapping


def test_compute_rows_default_palette():
    rows = compute_rows(DEFAULT_PALETTE)
    assert [row.color.id for row in rows] == [c.id for c in DEFAULT_PALETTE]
    assert all(row.ok for row in rows)
    for row in rows:
        assert row.ramp[500] == row.color.hex


def test_compute_rows_isolates_failures(caplog):
    palette = [
        PaletteColor("good", "Good", "#1C2E7A"),
        PaletteColor("bad", "Bad", "#zzzzzz"),
        PaletteColor("css", "CSS", "rgb(1, 2, 3)"),
        PaletteColor("short", "Short", "#abc"),
    ]
    with caplog.at_level(logging.WARNING, logger="rampcss.palette"):
        rows = compute_rows(palette)

    good, bad, css, short = rows
    assert good.ok and good.color.hex == "#1c2e7a"
    assert bad.ramp is None and bad.error == "Invalid hex"
    assert css.ramp is None and css.error == "Invalid hex"
    assert short.ok and short.ramp[500] == "#aabbcc"
    assert "bad" in caplog.text

    assert set(ramps_by_id(rows)) == {"good", "short"}


def test_validate_mapping():
    ids = [c.id for c in DEFAULT_PALETTE]
    assert validate_mapping(ids, DEFAULT_MAPPING) == []

    problems = validate_mapping([i for i in ids if i != "deep-blue"], DEFAULT_MAPPING)
    assert ("light", "surfaceInverse", "deep-blue") in problems
    assert ("light", "textPrimary", "deep-blue") in problems
    assert ("dark", "surfacePrimary", "deep-blue") in problems
    assert ("dark", "textInverse", "deep-blue") in problems
    assert len(problems) == 4


def test_theme_mapping_from_dict_keys():
    camel = ThemeMapping.from_dict(DEFAULT_MAPPING["light"].to_dict())
    assert camel == DEFAULT_MAPPING["light"]
    snake = ThemeMapping.from_dict({
        "surface_primary": "a", "surface_inverse": "b", "text_primary": "c",
        "text_inverse": "d", "accent_primary": "e", "accent_inverse": "f",
    })
    assert snake.accent_inverse == "f"
    with pytest.raises(KeyError):
        ThemeMapping.from_dict({"surfacePrimary": "a"})


def test_document_defaults():
    doc = PaletteDocument.default()
    assert doc.palette == list(DEFAULT_PALETTE)
    assert doc.mapping == DEFAULT_MAPPING
    assert doc.stop_set == "figma"


def test_document_round_trip(tmp_path):
    doc = PaletteDocument.default()
    doc.stop_set = "even"
    path = tmp_path / "palette.json"
    doc.dump(path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert set(raw) == {"palette", "mapping", "stopSet"}
    assert raw["mapping"]["light"]["surfacePrimary"] == "light-yellow"
    assert raw["palette"][0] == {"id": "deep-blue", "label": "Deep Blue", "hex": "#1c2e7a"}

    loaded = PaletteDocument.load(path)
    assert loaded == doc


def test_document_from_partial_dict():
    doc = PaletteDocument.from_dict({"stopSet": "even"})
    assert doc.stop_set == "even"
    assert doc.palette == list(DEFAULT_PALETTE)


def test_document_rejects_unknown_stop_set():
    with pytest.raises(ValueError):
        PaletteDocument.from_dict({"stopSet": "tailwind"})
    with pytest.raises(ValueError):
        PaletteDocument(stop_set="tailwind")


def test_default_list_is_not_shared():
    first = PaletteDocument.default()
    first.add_color()
    assert len(PaletteDocument.default().palette) == len(DEFAULT_PALETTE)


def test_add_color_uses_unique_ids():
    doc = PaletteDocument.default()
    first = doc.add_color()
    second = doc.add_color()
    assert first == PaletteColor("new-color", "New Color", "#888888")
    assert second.id == "new-color-2"
    assert doc.color_ids[-2:] == ["new-color", "new-color-2"]


def test_remove_color_breaks_bundle():
    doc = PaletteDocument.default()
    doc.remove_color("deep-blue")
    assert "deep-blue" not in doc.color_ids
    with pytest.raises(MissingReferenceError):
        doc.bundle()


def test_update_color():
    doc = PaletteDocument.default()
    updated = doc.update_color("deep-blue", label="Navy", hex="#000080")
    assert updated == PaletteColor("deep-blue", "Navy", "#000080")
    assert doc.get("deep-blue") == updated


def test_rename_color_follows_mapping():
    doc = PaletteDocument.default()
    renamed = doc.update_color("deep-blue", new_id="Brand Navy")
    assert renamed.id == "brand-navy"
    assert "deep-blue" not in doc.color_ids
    assert doc.mapping["light"].text_primary == "brand-navy"
    assert doc.mapping["dark"].surface_primary == "brand-navy"
    assert doc.bundle().themes["light"]["--text-primary"] == "--c-brand-navy-900"


def test_rename_to_empty_slug_keeps_id():
    doc = PaletteDocument.default()
    assert doc.update_color("deep-blue", new_id="!!!").id == "deep-blue"


def test_rename_collision_raises():
    doc = PaletteDocument.default()
    with pytest.raises(ValueError):
        doc.update_color("deep-blue", new_id="light-blue")


def test_set_role():
    doc = PaletteDocument.default()
    doc.set_role("light", "accentPrimary", "deep-blue")
    assert doc.mapping["light"].accent_primary == "deep-blue"
    assert doc.bundle().themes["light"]["--accent"] == "--c-deep-blue-500"


def test_set_role_accepts_snake_case():
    doc = PaletteDocument.default()
    doc.set_role("light", "text_primary", "light-blue")
    assert doc.mapping["light"].text_primary == "light-blue"
    assert doc.mapping["dark"].text_primary == DEFAULT_MAPPING["dark"].text_primary


def test_set_role_rejects_unknown_role():
    doc = PaletteDocument.default()
    before = dict(doc.mapping)
    for role in ["textPrimry", "text-primary", ""]:
        with pytest.raises(KeyError):
            doc.set_role("light", role, "light-blue")
    assert doc.mapping == before


def test_set_role_rejects_unknown_theme():
    doc = PaletteDocument.default()
    with pytest.raises(KeyError):
        doc.set_role("sepia", "textPrimary", "light-blue")


def test_bundle_matches_direct_build():
    from rampcss import build_tokens, generate_ramp9

    doc = PaletteDocument.default()
    ramps = {c.id: generate_ramp9(c.hex, "figma") for c in DEFAULT_PALETTE}
    assert doc.bundle().css == build_tokens(DEFAULT_PALETTE, ramps, DEFAULT_MAPPING).css


def test_bundle_refuses_invalid_colors():
    doc = PaletteDocument.default()
    doc.update_color("deep-yellow", hex="#nope")
    with pytest.raises(RampError, match="deep-yellow"):
        doc.bundle()
