"""Preset sanitizing, argument parsing and command line output."""

import subprocess
import sys
from pathlib import Path

from twister import MersenneTwister64, TwisterPreset, TwisterSample, TwisterTools

FIRST_VALUES = [
    "14514284786278117030",
    "4620546740167642908",
    "13109570281517897720",
]


def test_preset_defaults_are_valid():
    preset = TwisterPreset()
    assert preset.valid
    assert preset.seed == 5489
    assert preset.count == 10
    assert preset.output_format == "int"


def test_preset_sanitizes_values(capsys):
    preset = TwisterPreset(count=0, skip=-4, output_format="HEX", image_width=0, image_height=-1)
    assert preset.count == 10
    assert preset.skip == 0
    assert preset.output_format == "hex"
    assert (preset.image_width, preset.image_height) == (1, 1)

    TwisterPreset(output_format="octal")
    assert "Defaulting to int" in capsys.readouterr().out


def test_preset_invalid_directory(tmp_path, capsys):
    preset = TwisterPreset(output=str(tmp_path / "missing" / "out.txt"))
    assert not preset.valid
    assert "Directory doesn't exist" in capsys.readouterr().out


def test_format_value():
    assert TwisterTools.formatValue(255, "hex") == "0x00000000000000ff"
    assert TwisterTools.formatValue(255, "int") == "255"
    assert float(TwisterTools.formatValue(14514284786278117030, "float")) == 0.78682095486780179


def test_parse_seed_accepts_hex():
    assert TwisterTools.parseSeed("0x1571") == 5489
    assert TwisterTools.parseSeed(" 5489 ") == 5489


def test_parser_builds_preset():
    preset = TwisterSample.parser(["twister_sample.py", "-s", "0x1571", "-n", "3", "-f", "hex", "-S", "true"])

    assert preset.seed == 5489
    assert preset.count == 3
    assert preset.output_format == "hex"
    assert preset.print_stats is True
    assert preset.logging is False


def test_parser_rejects_bad_number(capsys):
    assert TwisterSample.parser(["twister_sample.py", "-n", "three"]) is None
    assert "Invalid number" in capsys.readouterr().out


def test_use_preset_prints_values(capsys):
    lines = TwisterSample.usePreset(TwisterPreset(count=3))
    captured = capsys.readouterr()

    assert lines == FIRST_VALUES
    assert captured.out.split() == FIRST_VALUES


def test_use_preset_skip_and_secondary_seed(capsys):
    lines = TwisterSample.usePreset(TwisterPreset(seed=5489 ^ 77, y=77, count=2, skip=1))
    capsys.readouterr()

    assert lines == FIRST_VALUES[1:3]


def test_use_preset_writes_outputs(tmp_path, capsys):
    out_path = tmp_path / "values.txt"
    img_path = tmp_path / "noise.png"
    preset = TwisterPreset(
        count=3,
        output=str(out_path),
        image=str(img_path),
        image_width=4,
        image_height=4,
        print_stats=True,
        logging=True,
    )

    TwisterSample.usePreset(preset)
    captured = capsys.readouterr()

    assert out_path.read_text().split() == FIRST_VALUES
    assert img_path.exists()
    assert "Using seed 0x0000000000001571" in captured.out
    assert "Samples: 3" in captured.out


def test_use_preset_rejects_missing_preset(capsys):
    assert TwisterSample.usePreset(None) is None
    assert "Invalid preset" in capsys.readouterr().out


def test_script_runs_from_repo_root():
    repo_root = Path(__file__).resolve().parents[1]
    result = subprocess.run(
        [sys.executable, str(repo_root / "twister_sample.py"), "-n", "3"],
        cwd=repo_root,
        check=False,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == FIRST_VALUES


def test_preset_rejects_non_integer_seed(capsys):
    preset = TwisterPreset(seed="abc")
    assert not preset.valid
    assert "Invalid seed 'abc'" in capsys.readouterr().out

    assert not TwisterPreset(y=1.5).valid


def test_use_preset_skips_invalid_preset(capsys):
    assert TwisterSample.usePreset(TwisterPreset(seed="abc")) is None
    assert "Invalid preset" in capsys.readouterr().out


def test_float_format_matches_generator_floats():
    values = MersenneTwister64(5489).randomInt((4,))
    floats = MersenneTwister64(5489).random((4,))
    lines = TwisterTools.formatValues(values, "float")
    assert [float(line) for line in lines] == floats.tolist()


def test_validate_output_list(tmp_path, capsys):
    assert TwisterTools.validateOutputList([None, str(tmp_path / "out.txt")])
    assert not TwisterTools.validateOutputList([""])
    assert "Undefined file" in capsys.readouterr().out
