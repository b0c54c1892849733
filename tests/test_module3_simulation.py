# file: tests/test_module3_simulation.py

"""
Unit tests for Module 3: Transmission Simulation.

Test coverage:
    - Configuration loading, merging and validation
    - Session encode / inject / toggle / correct cycle
    - Correction outcome classification
    - Command-line front end
"""

import numpy as np
import pytest
import yaml

from src.module1_hamming_codec import InvalidInputError
from src.module2_error_injection import ErrorInjector, ErrorMode, InvalidPositionError, UnknownModeError
from src.module3_simulation import (
    TransmissionSession,
    CorrectionStatus,
    load_config,
    DEFAULT_CONFIG_PATH,
    ConfigurationError,
    NoDataError,
    SimulationError,
)
from src.module3_simulation.config import deep_merge, validate_config
from src.module3_simulation.run_simulation import main


class ScriptedSource:
    """RandomSource replaying a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, low, high):
        return self.values.pop(0)


def write_yaml(path, data):
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return str(path)


class TestConfig:
    """Test configuration loading."""

    def test_packaged_defaults(self):
        config = load_config()
        assert config["hamming"]["max_data_bits"] == 12
        assert config["hamming"]["min_data_bits"] == 1
        assert config["simulation"]["default_mode"] == "single"
        assert config["simulation"]["random_seed"] is None
        assert config["examples"] == {
            "basic": "1011",
            "intermediate": "1101001",
            "advanced": "11010011",
        }

    def test_default_file_shipped(self):
        with open(DEFAULT_CONFIG_PATH) as f:
            assert "hamming" in yaml.safe_load(f)

    def test_user_file_merged(self, tmp_path):
        path = write_yaml(tmp_path / "cfg.yaml", {
            "hamming": {"max_data_bits": 26},
            "simulation": {"random_seed": 5},
        })
        config = load_config(path)
        assert config["hamming"]["max_data_bits"] == 26
        assert config["hamming"]["min_data_bits"] == 1
        assert config["simulation"]["random_seed"] == 5
        assert config["simulation"]["default_mode"] == "single"

    def test_empty_user_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == load_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(str(tmp_path / "nope.yaml"))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("hamming: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Malformed"):
            load_config(str(path))

    def test_top_level_not_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    @pytest.mark.parametrize("override", [
        {"hamming": {"max_data_bits": 0}},
        {"hamming": {"max_data_bits": "12"}},
        {"hamming": {"min_data_bits": 8, "max_data_bits": 4}},
        {"simulation": {"default_mode": "burst"}},
        {"simulation": {"random_seed": "abc"}},
        {"examples": {"basic": 1011}},
        {"examples": {"basic": "10x1"}},
    ])
    def test_invalid_values(self, tmp_path, override):
        path = write_yaml(tmp_path / "cfg.yaml", override)
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_section(self):
        with pytest.raises(ConfigurationError, match="Missing"):
            validate_config({"hamming": {}})

    def test_deep_merge_does_not_mutate(self):
        base = {"a": {"b": 1, "c": 2}}
        merged = deep_merge(base, {"a": {"b": 9}})
        assert merged == {"a": {"b": 9, "c": 2}}
        assert base == {"a": {"b": 1, "c": 2}}

    def test_error_hierarchy(self):
        assert issubclass(ConfigurationError, SimulationError)
        assert issubclass(NoDataError, SimulationError)


class TestSessionEncode:
    """Test encoding through the session."""

    def test_encode_basic(self):
        session = TransmissionSession(rng=0)
        info = session.encode("1011")
        assert info.total_bits == 7
        assert info.parity_bits == 3
        assert session.encoded.tolist() == [0, 1, 1, 0, 0, 1, 1]
        assert np.array_equal(session.transmitted, session.encoded)
        assert session.error_position == 0

    def test_input_is_stripped(self):
        session = TransmissionSession(rng=0)
        session.encode("  1011\n")
        assert session.original_data == "1011"

    @pytest.mark.parametrize("data", ["", "   ", None, "10a1"])
    def test_invalid_input(self, data):
        session = TransmissionSession(rng=0)
        with pytest.raises(InvalidInputError):
            session.encode(data)
        assert not session.has_data

    def test_too_long(self):
        session = TransmissionSession(rng=0)
        with pytest.raises(InvalidInputError, match="between 1 and 12"):
            session.encode("1" * 13)

    def test_limit_from_config(self):
        config = load_config()
        config["hamming"]["max_data_bits"] = 20
        session = TransmissionSession(config, rng=0)
        assert session.encode("1" * 20).total_bits == 25

    def test_reencode_resets_errors(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.toggle_bit(3)
        session.encode("1101001")
        assert not session.injector.has_errors()
        assert session.error_position == 0


class TestSessionErrors:
    """Test error injection through the session."""

    def test_requires_data(self):
        session = TransmissionSession(rng=0)
        with pytest.raises(NoDataError):
            session.simulate_error()
        with pytest.raises(NoDataError):
            session.toggle_bit(1)
        with pytest.raises(NoDataError):
            session.correct()

    def test_simulate_single_is_corrected(self):
        injector = ErrorInjector(rng=ScriptedSource([6]))
        session = TransmissionSession(injector=injector)
        session.encode("1011")

        result = session.simulate_error()
        assert result.positions == [6]
        assert session.error_position == 6

        outcome = session.correct()
        assert outcome.status is CorrectionStatus.CORRECTED
        assert outcome.successful
        assert outcome.recovered == "1011"
        assert outcome.injected_positions == [6]

    def test_simulate_starts_from_encoded_word(self):
        session = TransmissionSession(rng=ScriptedSource([2, 5]))
        session.encode("1011")
        session.simulate_error()
        result = session.simulate_error()
        assert result.positions == [5]
        assert session.error_position == 5

    def test_simulate_double_miscorrects(self):
        session = TransmissionSession(rng=ScriptedSource([2, 6]))
        session.encode("1011")

        session.simulate_error(ErrorMode.DOUBLE)
        assert session.error_position == 4

        outcome = session.correct()
        assert outcome.status is CorrectionStatus.MISCORRECTED
        assert not outcome.successful
        assert outcome.injected_positions == [2, 6]
        assert session.error_info().can_correct is False

    def test_random_multiple_errors_never_recovered(self):
        for mode in ("double", "triple"):
            session = TransmissionSession(rng=31)
            session.encode("11010011")
            for _ in range(50):
                session.simulate_error(mode)
                outcome = session.correct()
                assert outcome.status in (
                    CorrectionStatus.MISCORRECTED, CorrectionStatus.UNDETECTED
                )

    def test_unknown_mode(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        with pytest.raises(UnknownModeError):
            session.simulate_error("burst")

    def test_mode_from_config(self):
        config = load_config()
        config["simulation"]["default_mode"] = "triple"
        session = TransmissionSession(config, rng=3)
        session.encode("1011")
        assert session.simulate_error().count == 3

    def test_seed_from_config(self):
        config = load_config()
        config["simulation"]["random_seed"] = 99
        a = TransmissionSession(config)
        b = TransmissionSession(config)
        a.encode("1101001")
        b.encode("1101001")
        assert a.simulate_error().positions == b.simulate_error().positions


class TestSessionToggle:
    """Test manual bit toggling."""

    def test_single_toggle_corrected(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.toggle_bit(5)
        assert session.syndrome.tolist() == [1, 0, 1]
        assert session.error_position == 5
        assert session.correct().status is CorrectionStatus.CORRECTED

    def test_two_toggles_accumulate(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.toggle_bit(2)
        session.toggle_bit(6)
        assert session.injector.error_positions == [2, 6]
        assert session.correct().status is CorrectionStatus.MISCORRECTED

    def test_toggle_back_restores(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.toggle_bit(3)
        session.toggle_bit(3)
        assert not session.injector.has_errors()
        assert session.correct().status is CorrectionStatus.NO_ERROR

    def test_three_toggles_undetected(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        for p in (1, 2, 3):
            session.toggle_bit(p)
        assert session.error_position == 0
        outcome = session.correct()
        assert outcome.status is CorrectionStatus.UNDETECTED
        assert outcome.injected_positions == [1, 2, 3]

    @pytest.mark.parametrize("position", [0, 8])
    def test_invalid_position(self, position):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        with pytest.raises(InvalidPositionError):
            session.toggle_bit(position)
        assert np.array_equal(session.transmitted, session.encoded)


class TestSessionState:
    """Test reset, clear and snapshot."""

    def test_no_error_outcome(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        outcome = session.correct()
        assert outcome.status is CorrectionStatus.NO_ERROR
        assert outcome.recovered == "1011"

    def test_reset_transmission(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.toggle_bit(4)
        session.correct()
        session.reset_transmission()
        assert np.array_equal(session.transmitted, session.encoded)
        assert session.corrected.size == 0
        assert session.error_position == 0
        assert not session.injector.has_errors()

    def test_clear(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.clear()
        assert not session.has_data
        assert session.original_data == ""

    def test_encoded_word_untouched(self):
        session = TransmissionSession(rng=4)
        session.encode("1011")
        session.simulate_error("triple")
        session.correct()
        assert session.encoded.tolist() == [0, 1, 1, 0, 0, 1, 1]

    def test_snapshot(self):
        session = TransmissionSession(rng=0)
        session.encode("1011")
        session.toggle_bit(5)
        session.correct()
        snap = session.snapshot()
        assert snap == {
            "original_data": "1011",
            "encoded": "0110011",
            "transmitted": "0110111",
            "syndrome": "101",
            "error_position": 5,
            "corrected": "0110011",
            "injected_positions": [5],
            "mode": "single",
        }


class TestCommandLine:
    """Test the hamming-sim entry point."""

    def test_manual_position(self, capsys):
        assert main(["--data", "1011", "--position", "5"]) == 0
        out = capsys.readouterr().out
        assert "Codeword:           0110011" in out
        assert "Transmitted:        0110111" in out
        assert "Error corrected successfully" in out

    def test_two_positions_miscorrect(self, capsys):
        assert main(["--data", "1011", "--position", "2", "--position", "6"]) == 0
        assert "INCORRECT" in capsys.readouterr().out

    def test_example_with_seed(self, capsys):
        assert main(["--example", "basic", "--mode", "double", "--seed", "1"]) == 0
        assert "INCORRECT" in capsys.readouterr().out

    def test_seeded_runs_repeat(self, capsys):
        main(["--example", "advanced", "--seed", "8"])
        first = capsys.readouterr().out
        main(["--example", "advanced", "--seed", "8"])
        assert capsys.readouterr().out == first

    def test_invalid_data(self):
        assert main(["--data", "10a1"]) == 1

    def test_invalid_position(self):
        assert main(["--data", "1011", "--position", "9"]) == 1

    def test_unknown_example(self):
        assert main(["--example", "nope"]) == 1

    def test_missing_config(self, tmp_path):
        assert main(["--data", "1011", "--config", str(tmp_path / "x.yaml")]) == 1

    def test_requires_data_source(self):
        with pytest.raises(SystemExit):
            main(["--mode", "single"])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
