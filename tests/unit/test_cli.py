"""Tests for the command-line interface."""

import pytest

from schemgrid import __version__
from schemgrid.circuit.loader import save_circuit
from schemgrid.cli import build_parser, main


@pytest.fixture
def circuit_file(tmp_path, builder_circuit):
    path = tmp_path / "circuit.yaml"
    save_circuit(builder_circuit.build(), path)
    return path


class TestRender:

    def test_prints_schematic(self, circuit_file, capsys):
        assert main(["render", str(circuit_file)]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "          U1",
            "          ┌───┐",
            "X──R2─────┤1 4├───W",
            "       Y──┤2 3├───Z",
            "          └───┘",
        ]

    def test_no_chip_labels(self, circuit_file, capsys):
        assert main(["render", str(circuit_file), "--no-chip-labels"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "          ┌───┐"

    def test_ascii_glyphs(self, circuit_file, capsys):
        assert main(["render", str(circuit_file), "--glyphs", "ascii"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "          +---+"
        assert lines[2] == "X--R2-----+1 4+---W"

    def test_scale_and_axis(self, circuit_file, capsys):
        args = ["render", str(circuit_file), "--scale-x", "2", "--scale-y", "2", "--axis"]
        assert main(args) == 0
        out = capsys.readouterr().out
        assert "0.0" in out
        assert "U1" in out

    def test_writes_output_file(self, circuit_file, tmp_path, capsys):
        output = tmp_path / "schematic.txt"
        assert main(["render", str(circuit_file), "-o", str(output)]) == 0
        assert "Schematic saved to" in capsys.readouterr().out
        assert output.read_text(encoding="utf-8").splitlines()[2] == "X──R2─────┤1 4├───W"

    def test_config_file(self, circuit_file, tmp_path, capsys):
        config = tmp_path / "render.yaml"
        config.write_text("render:\n  chip_labels: false\n  glyph_set: ascii\n")
        assert main(["render", str(circuit_file), "--config", str(config)]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "          +---+"

    def test_command_line_overrides_config(self, circuit_file, tmp_path, capsys):
        config = tmp_path / "render.yaml"
        config.write_text("glyph_set: ascii\n")
        args = ["render", str(circuit_file), "--config", str(config), "--glyphs", "unicode"]
        assert main(args) == 0
        assert "┌───┐" in capsys.readouterr().out

    def test_mistyped_config_value(self, circuit_file, tmp_path, capsys):
        config = tmp_path / "render.yaml"
        config.write_text("grid_scale_x: \"2\"\n")
        assert main(["render", str(circuit_file), "--config", str(config)]) == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "grid_scale_x" in err

    def test_zero_scale_renders(self, circuit_file, capsys):
        assert main(["render", str(circuit_file), "--scale-x", "0"]) == 0
        assert capsys.readouterr().out.strip()

    def test_missing_circuit(self, tmp_path, capsys):
        assert main(["render", str(tmp_path / "missing.yaml")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_malformed_circuit(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("chips:\n  - id: U1\n    width: wide\n    height: 3\n")
        assert main(["render", str(path)]) == 1
        assert "chips[0].width" in capsys.readouterr().err

    def test_unknown_glyph_set(self, circuit_file, capsys):
        assert main(["render", str(circuit_file), "--glyphs", "braille"]) == 1
        assert "Unknown glyph set" in capsys.readouterr().err


class TestGlyphs:

    def test_lists_sets(self, capsys):
        assert main(["glyphs"]) == 0
        out = capsys.readouterr().out
        assert "ascii" in out
        assert "unicode" in out
        assert "┌─┐┤●" in out


class TestParser:

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "render" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--version"])
        assert __version__ in capsys.readouterr().out
