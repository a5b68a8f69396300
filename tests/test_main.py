"""Tests for the command-line entry point."""

import pytest

import main


class TestCommandLine:
    """Tests for argument parsing and headless runs."""

    def test_defaults(self):
        """The parser defaults to the preview with the standard grid."""
        args = main.build_parser().parse_args([])
        assert not args.headless
        assert args.max_ticks == 200
        assert args.size == [16, 16, 16]

    def test_build_config(self):
        """Grid and rule flags end up in the config."""
        args = main.build_parser().parse_args(
            ["--size", "4", "5", "6", "--survive", "2", "3", "--birth", "3", "--seed", "9"]
        )
        config = main.build_config(args)
        assert config.automata.size == (4, 5, 6)
        assert config.automata.survive == (2, 3)
        assert config.automata.birth == (3,)
        assert config.seed == 9

    def test_headless_run(self, caplog):
        """A short headless run completes and logs its summary."""
        caplog.set_level("INFO")
        main.main(
            ["--headless", "--max-ticks", "2", "--size", "4", "4", "4", "--seed", "1"]
        )
        assert "Finished 2 ticks" in caplog.text

    def test_invalid_config_exits(self):
        """Configuration errors exit with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--headless", "--density", "2.0", "--max-ticks", "1"])
        assert excinfo.value.code == 1


class TestPresets:
    """Tests for the --preset flag."""

    def test_preset_defaults_to_none(self):
        args = main.build_parser().parse_args([])
        assert args.preset is None

    def test_unknown_preset_rejected(self):
        """argparse refuses presets that do not exist."""
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(["--preset", "nope"])

    def test_cgol_engine_uses_preset(self):
        """The cgol preset brings its own grid, rule and palette."""
        from blocksim.presets.cgol import CGOL_CONFIG, cgol_state_function

        args = main.build_parser().parse_args(
            ["--headless", "--preset", "cgol", "--seed", "3", "--size", "4", "4", "4"]
        )
        engine = main.build_engine(args)
        assert engine.automata.size.as_tuple() == CGOL_CONFIG.automata.size
        assert engine.state_function is cgol_state_function
        assert engine.config.headless
        assert engine.config.seed == 3

    def test_cgol_headless_run(self, caplog):
        """A headless cgol run completes from the command line."""
        caplog.set_level("INFO")
        main.main(["--headless", "--preset", "cgol", "--max-ticks", "1", "--seed", "1"])
        assert "Using preset: cgol" in caplog.text
        assert "Finished 1 ticks" in caplog.text
