"""
vigenere_breaker — config, CLI and chart tests
===============================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from PIL import Image
import io

from vigenere_breaker.cli                  import main, clean_text
from vigenere_breaker.config               import BreakerConfig, SAMPLE_CIPHERTEXT
from vigenere_breaker.chart                import FrequencyChart
from vigenere_breaker.pipeline             import break_vigenere
from vigenere_breaker.stages.stage4_decode import encode
from vigenere_breaker.errors               import InvalidArgumentError, EmptyInputError

PLAIN = "E" * 40 + "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("VIGENERE_"):
            monkeypatch.delenv(name)

# ── Config ───────────────────────────────────────────────────────────────────
def test_config_defaults():
    cfg = BreakerConfig().validate()
    assert cfg.ciphertext == SAMPLE_CIPHERTEXT
    assert cfg.key_length == 4
    assert cfg.top_n == 3
    assert cfg.count_first_occurrence is True
    assert cfg.modular_offset is False

def test_config_from_env():
    cfg = BreakerConfig.from_env({
        "VIGENERE_CIPHERTEXT": "RIJVSUYVJN",
        "VIGENERE_KEY_LENGTH": "3",
        "VIGENERE_TOP_N":      "2",
        "VIGENERE_LEGACY_COUNT": "yes",
    })
    assert cfg.ciphertext == "RIJVSUYVJN"
    assert cfg.key_length == 3
    assert cfg.top_n == 2
    assert cfg.count_first_occurrence is False
    assert cfg.modular_offset is False

def test_config_from_env_modular_offset():
    assert BreakerConfig.from_env({"VIGENERE_MODULAR_OFFSET": "1"}).modular_offset is True
    assert BreakerConfig.from_env({"VIGENERE_MODULAR_OFFSET": "off"}).modular_offset is False

def test_config_from_env_cleans_ciphertext():
    cfg = BreakerConfig.from_env({"VIGENERE_CIPHERTEXT": "rijv suyv\njn"})
    assert cfg.ciphertext == "RIJVSUYVJN"
    cfg.validate()

@pytest.mark.parametrize("env", [
    {"VIGENERE_KEY_LENGTH": "four"},
    {"VIGENERE_MODULAR_OFFSET": "maybe"},
])
def test_config_from_env_rejects_garbage(env):
    with pytest.raises(InvalidArgumentError):
        BreakerConfig.from_env(env)

@pytest.mark.parametrize("changes,error", [
    ({"key_length": 0},    InvalidArgumentError),
    ({"key_length": 1000}, InvalidArgumentError),
    ({"top_n": 0},         InvalidArgumentError),
    ({"ciphertext": ""},   EmptyInputError),
])
def test_config_validate(changes, error):
    with pytest.raises(error):
        BreakerConfig().with_overrides(**changes).validate()

# ── CLI ──────────────────────────────────────────────────────────────────────
def test_clean_text():
    assert clean_text("wiev hsmy\nrsmc\t") == "WIEVHSMYRSMC"

def test_cli_default_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Segment 3: " in out
    assert "Most likely key: " in out

def test_cli_positional_ciphertext(capsys):
    ct = encode(PLAIN, "CODE").lower()
    assert main([ct, "-k", "4"]) == 0
    out = capsys.readouterr().out
    assert "Most likely key: CODE" in out
    assert PLAIN in out

def test_cli_file_and_top(tmp_path, capsys):
    path = tmp_path / "intercept.txt"
    path.write_text(encode(PLAIN, "CODE") + "\n", encoding="utf-8")
    assert main(["-f", str(path), "-k", "4", "-n", "1"]) == 0
    out = capsys.readouterr().out
    assert "Top 1 frequent letters:" in out
    assert "2. Letter" not in out

def test_cli_env_key_length(monkeypatch, capsys):
    monkeypatch.setenv("VIGENERE_KEY_LENGTH", "2")
    assert main(["RIJVSUYVJN"]) == 0
    assert "Segment 2:" not in capsys.readouterr().out

def test_cli_legacy_count(capsys):
    ct = encode(PLAIN, "CODE")
    assert main([ct, "-k", "4", "--legacy-count"]) == 0
    out = capsys.readouterr().out
    assert "1. Letter: G | Frequency: 9 |" in out
    assert "Most likely key: CODE" in out

def test_cli_modular_offset(capsys):
    ct = encode(PLAIN, "WXYZ")
    assert main([ct, "-k", "4"]) == 0
    assert "Most likely key: EDCB" in capsys.readouterr().out
    assert main([ct, "-k", "4", "--modular-offset"]) == 0
    assert "Most likely key: WXYZ" in capsys.readouterr().out

def test_cli_env_modular_offset(monkeypatch, capsys):
    monkeypatch.setenv("VIGENERE_MODULAR_OFFSET", "1")
    assert main([encode(PLAIN, "WXYZ"), "-k", "4"]) == 0
    assert "Most likely key: WXYZ" in capsys.readouterr().out

def test_cli_env_ciphertext_cleaned(monkeypatch, capsys):
    monkeypatch.setenv("VIGENERE_CIPHERTEXT", "rijv suyv\njn")
    assert main(["-k", "3"]) == 0
    assert "Segment 0: RVYN" in capsys.readouterr().out

def test_cli_contract_errors(capsys):
    assert main(["ABC!", "-k", "2"]) == 2
    assert main(["ABC", "-k", "9"]) == 2
    assert "error:" in capsys.readouterr().err

def test_cli_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "nope.txt")]) == 1

def test_cli_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "intercept.bin"
    path.write_bytes(b"ABC\xff\xfeDEF")
    assert main(["-f", str(path), "-k", "2"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert "not UTF-8" in err

def test_cli_unwritable_chart(tmp_path, capsys):
    assert main(["--chart", str(tmp_path / "no" / "such" / "x.png")]) == 1
    assert "error:" in capsys.readouterr().err

# ── Chart ────────────────────────────────────────────────────────────────────
def test_chart_png():
    result = break_vigenere(encode(PLAIN, "CODE"), 4)
    chart = FrequencyChart()
    png = chart.render(result)
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    img = Image.open(io.BytesIO(png))
    assert img.size == chart.size(result)

def test_chart_highlights_top_letter():
    result = break_vigenere(encode(PLAIN, "CODE"), 4)
    chart = FrequencyChart()
    img = chart.draw(result)
    # tallest bar of segment 0 is 'G' (shifted 'E'), index 6
    x = chart.MARGIN + 6 * (chart.BAR_WIDTH + chart.BAR_GAP) + 1
    y = chart.MARGIN + chart.LABEL_HEIGHT + chart.PANEL_HEIGHT - 2
    assert img.getpixel((x, y)) == chart.HIGHLIGHT

def test_chart_uses_legacy_counts():
    ct = encode(PLAIN, "CODE")
    chart = FrequencyChart()
    # segment 0: G x10, V once; V is not among the ranked letters
    x = chart.MARGIN + 21 * (chart.BAR_WIDTH + chart.BAR_GAP) + 1
    y = chart.MARGIN + chart.LABEL_HEIGHT + chart.PANEL_HEIGHT - 2
    true_counts = chart.draw(break_vigenere(ct, 4))
    legacy = chart.draw(break_vigenere(ct, 4, count_first_occurrence=False))
    assert true_counts.getpixel((x, y)) == chart.BAR
    assert legacy.getpixel((x, y)) == chart.BACKGROUND

def test_cli_writes_chart(tmp_path, capsys):
    out = tmp_path / "freq.png"
    assert main(["--chart", str(out)]) == 0
    assert out.read_bytes()[:4] == b"\x89PNG"
