"""
Tests for the interactive session and CLI entry point.
"""

import io

import pytest

from bohrcalc.cli.main import WELCOME_BANNER, main, run_session
from bohrcalc.console.readers import EndOfInputError
from bohrcalc.core.config import CalculatorSettings

ORDERING_MESSAGE = (
    "The initial principal quantum number must be greater than "
    "the final principal quantum number!"
)
CONTINUE_QUESTION = "Do you wish to continue? [y/n]:"


def test_hydrogen_in_electron_volts(console):
    stream, out = console("1", "2", "1", "ev", "n")
    assert run_session(stream, out) == 1

    output = out.getvalue()
    assert output.startswith(WELCOME_BANNER)
    assert "For a (1, 2, 1) transition the energy was calculated to be: " in output
    assert "    E = 10.2eV\n" in output
    assert output.count(CONTINUE_QUESTION) == 1


def test_helium_ion_in_joules(console):
    stream, out = console("2", "3", "1", "J", "no")
    run_session(stream, out)
    assert "E = 7.74e-18J" in out.getvalue()


def test_ordering_violation_restarts_without_asking(console):
    stream, out = console("1", "1", "2", "1", "2", "1", "e", "n")
    assert run_session(stream, out) == 1

    output = out.getvalue()
    assert output.count(ORDERING_MESSAGE) == 1
    assert "Let's start again!" in output
    # The restart comes before any unit or continue question
    assert output.index(ORDERING_MESSAGE) < output.index("electron-volts or joules?")
    assert output.count(CONTINUE_QUESTION) == 1
    assert output.count("atomic number") == 2


def test_equal_levels_allowed(console):
    stream, out = console("3", "4", "4", "e", "n")
    run_session(stream, out)
    assert "E = 0eV" in out.getvalue()


def test_multiple_iterations(console):
    stream, out = console("1", "2", "1", "e", "yes", "1", "3", "2", "ev", "n")
    assert run_session(stream, out) == 2

    output = out.getvalue()
    assert output.count(WELCOME_BANNER) == 1
    assert "For a (1, 3, 2) transition" in output
    assert "E = 1.89eV" in output


def test_invalid_inputs_reprompt_locally(console):
    stream, out = console("zero", "0", "1", "2x", "2", "1", "calories", "e", "maybe", "n")
    assert run_session(stream, out) == 1

    output = out.getvalue()
    assert output.count("Sorry, the value you inputted was not valid.") == 5
    assert "Electron-volts or joules? ['e', 'J']:" in output
    assert "Yay, or nay? [y/n]:" in output
    assert "E = 10.2eV" in output


def test_settings_control_output(console):
    settings = CalculatorSettings(ev_to_joule=1.602176634e-19, significant_digits=5)
    stream, out = console("1", "2", "1", "j", "n")
    run_session(stream, out, settings)
    assert "E = 1.6349e-18J" in out.getvalue()


def test_oversized_numbers_reprompt(console):
    """Values past the 32-bit limit are rejected before reaching the kernel."""
    stream, out = console("1" + "0" * 400, "2147483648", "1", "2", "1", "e", "n")
    assert run_session(stream, out) == 1

    output = out.getvalue()
    assert output.count("Input an integer between 1 and 2147483647:") == 2
    assert "For a (1, 2, 1) transition" in output
    assert "E = 10.2eV" in output


def test_end_of_input_raises(console):
    stream, out = console("1", "2")
    with pytest.raises(EndOfInputError):
        run_session(stream, out)


def test_main_normal_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n1\ne\nn\n"))
    assert main([]) == 0

    captured = capsys.readouterr()
    assert "E = 10.2eV" in captured.out


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 1

    captured = capsys.readouterr()
    assert "Input ended before the calculation was complete." in captured.out


def test_main_with_config(monkeypatch, capsys, temp_config_file):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n1\nev\nn\n"))
    assert main(["--config", str(temp_config_file)]) == 0

    captured = capsys.readouterr()
    assert "E = 10.204eV" in captured.out


def test_main_missing_config(capsys):
    assert main(["--config", "nonexistent.yaml"]) == 1

    captured = capsys.readouterr()
    assert "ERROR: Failed to load configuration" in captured.out


def test_main_invalid_config(tmp_path, capsys):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("calculator:\n  significant_digits: 0\n")
    assert main(["--config", str(config_path)]) == 1


def test_main_config_is_directory(tmp_path, capsys):
    config_dir = tmp_path / "settings.yaml"
    config_dir.mkdir()
    assert main(["--config", str(config_dir)]) == 1

    captured = capsys.readouterr()
    assert "ERROR: Failed to load configuration" in captured.out


def test_main_version(capsys):
    """Test version flag."""
    with pytest.raises(SystemExit):
        main(["--version"])

    captured = capsys.readouterr()
    assert "0.1.0" in captured.out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
