import json

from rampcss.cli import main


def test_ramp_lines(capsys):
    assert main(["ramp", "#1c2e7a"]) == 0
    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 9
    assert lines[0].startswith("100 #")
    assert "500 #1c2e7a" in lines


def test_ramp_json(capsys):
    assert main(["ramp", "#ABC", "--stops", "even", "--gamut", "clip", "--json"]) == 0
    ramp = json.loads(capsys.readouterr().out)
    assert list(ramp) == ["100", "200", "300", "400", "500", "600", "700", "800", "900"]
    assert ramp["500"] == "#aabbcc"


def test_ramp_invalid_color(capsys):
    assert main(["ramp", "not-a-color"]) == 1
    assert "error:" in capsys.readouterr().err


def test_tokens_default_palette_css(capsys):
    assert main(["tokens"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(":root {")
    assert "--c-deep-blue-500: #1c2e7a;" in out


def test_tokens_json(capsys):
    assert main(["tokens", "--format", "json"]) == 0
    tree = json.loads(capsys.readouterr().out)
    assert tree["themes"]["light"]["--text-primary"] == "--c-deep-blue-900"


def test_init_then_tokens_to_file(tmp_path):
    doc = tmp_path / "palette.json"
    out = tmp_path / "tokens.css"
    assert main(["init", str(doc)]) == 0
    assert doc.exists()
    assert main(["tokens", str(doc), "--stops", "even", "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8").startswith(":root {")


def test_tokens_broken_document(tmp_path, capsys):
    doc = tmp_path / "palette.json"
    doc.write_text(json.dumps({"palette": [{"id": "a", "label": "A", "hex": "#123456"}]}), encoding="utf-8")
    assert main(["tokens", str(doc)]) == 1
    assert "references unknown color id" in capsys.readouterr().err
