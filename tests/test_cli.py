#!/usr/bin/env python3
"""
Tests for the multiply_digits.py and dynamic_array_demo.py entry scripts.
"""
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import dynamic_array_demo
import multiply_digits


@pytest.fixture
def config_path(tmp_path):
    """Config file that keeps the log inside the temp directory."""
    path = tmp_path / 'coursework.yaml'
    path.write_text(
        "multiply:\n"
        "  default_base: 10\n"
        "dynamic_array:\n"
        "  default_capacity: 4\n"
        "  sample_data: [Java, Python, C, C++, Fortran]\n"
        "  find: C++\n"
        "logging:\n"
        f"  file: {tmp_path / 'logs' / 'coursework.log'}\n"
        "  level: WARNING\n",
        encoding='utf-8'
    )
    return str(path)


class TestMultiplyDigits:
    def test_demo_operands(self, config_path, capsys):
        assert multiply_digits.main(['--config', config_path]) == 0
        assert capsys.readouterr().out.strip() == "[5, 6, 0, 8, 8]"

    def test_explicit_operands(self, config_path, capsys):
        assert multiply_digits.main(['--config', config_path, '--x', '9,9', '--y', '99']) == 0
        assert capsys.readouterr().out.strip() == "[9, 8, 0, 1]"

    def test_base_option(self, config_path, capsys):
        argv = ['--config', config_path, '--x', '15,15', '--y', '15,15', '--base', '16']
        assert multiply_digits.main(argv) == 0
        assert capsys.readouterr().out.strip() == "[15, 14, 0, 1]"

    def test_base_from_config(self, tmp_path, config_path, capsys):
        (tmp_path / 'coursework.local.yaml').write_text("multiply:\n  default_base: 2\n", encoding='utf-8')
        assert multiply_digits.main(['--config', config_path, '--x', '11', '--y', '11']) == 0
        assert capsys.readouterr().out.strip() == "[1, 0, 0, 1]"

    def test_invalid_digit(self, config_path, capsys):
        assert multiply_digits.main(['--config', config_path, '--x', '1,12', '--y', '2']) == 1
        captured = capsys.readouterr()
        assert "Invalid digit 12" in captured.err
        assert captured.out == ""

    def test_check(self, config_path, capsys):
        assert multiply_digits.main(['--config', config_path, '--check']) == 0
        out = capsys.readouterr().out
        assert "Multiplier self-checks" in out
        assert "Test for multiply(123, 456):" in out
        assert "Fail" not in out

    def test_missing_config(self, tmp_path, capsys):
        assert multiply_digits.main(['--config', str(tmp_path / 'nope.yaml')]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_quiet(self, config_path, capsys):
        assert multiply_digits.main(['--config', config_path, '--quiet']) == 0
        assert capsys.readouterr().out == ""

    def test_scalar_config(self, tmp_path, capsys):
        path = tmp_path / 'coursework.yaml'
        path.write_text("5\n", encoding='utf-8')
        assert multiply_digits.main(['--config', str(path)]) == 1
        assert "must contain a mapping" in capsys.readouterr().err

    def test_null_log_file_uses_default(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        path = tmp_path / 'coursework.yaml'
        path.write_text("logging:\n  file:\n  level: WARNING\n", encoding='utf-8')
        assert multiply_digits.main(['--config', str(path)]) == 0
        assert capsys.readouterr().out.strip() == "[5, 6, 0, 8, 8]"
        assert (tmp_path / 'data' / 'logs').is_dir()

    def test_bad_argument_exits_with_usage_error(self, config_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            multiply_digits.main(['--config', config_path, '--base', '1'])
        assert exc_info.value.code == 2
        assert "Base must be >= 2: 1" in capsys.readouterr().err


class TestDynamicArrayDemo:
    def test_sample_data(self, config_path, capsys):
        assert dynamic_array_demo.main(['--config', config_path]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "[Java, Python, C, C++, Fortran]",
            "index(C++): 3",
            "usage: 100.0",
        ]

    def test_capacity_and_inserts(self, config_path, capsys):
        argv = ['--config', config_path, '--capacity', '2', '--insert', 'Ada', 'Rust', 'Go', '--find', 'Go']
        assert dynamic_array_demo.main(argv) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["[Ada, Rust, Go]", "index(Go): 2", "usage: 100.0"]

    def test_empty_uses_configured_capacity(self, config_path, capsys):
        argv = ['--config', config_path, '--empty', '--insert', 'Ada', '--find', 'Ada']
        assert dynamic_array_demo.main(argv) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["[Ada, null, null, null]", "index(Ada): 0", "usage: 25.0"]

    def test_explicit_data(self, config_path, capsys):
        argv = ['--config', config_path, '--data', 'x', 'y', '--find', 'z']
        assert dynamic_array_demo.main(argv) == 0
        assert "index(z): -1" in capsys.readouterr().out

    def test_strict_index_failure(self, config_path, capsys):
        argv = ['--config', config_path, '--empty', '--insert', 'Ada', '--find', 'Ada', '--strict-index']
        assert dynamic_array_demo.main(argv) == 1
        assert "absent slot at position 1" in capsys.readouterr().err

    def test_check(self, config_path, capsys):
        assert dynamic_array_demo.main(['--config', config_path, '--check']) == 0
        out = capsys.readouterr().out
        assert "Dynamic array self-checks" in out
        assert "Test for contains(null):" in out
        assert "Test for remove(out of bounds):" in out
        assert "Fail" not in out

    def test_data_ignored_with_capacity_warns(self, config_path, capsys):
        argv = ['--config', config_path, '--data', 'x', '--capacity', '2', '--insert', 'Ada', '--find', 'Ada']
        assert dynamic_array_demo.main(argv) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Warning: --data is ignored when --capacity or --empty is given"
        assert lines[1:] == ["[Ada, null]", "index(Ada): 0", "usage: 50.0"]

    def test_non_mapping_section(self, tmp_path, capsys):
        path = tmp_path / 'coursework.yaml'
        path.write_text("dynamic_array: 5\nlogging:\n  level: WARNING\n", encoding='utf-8')
        assert dynamic_array_demo.main(['--config', str(path)]) == 1
        assert "'dynamic_array' must be a mapping" in capsys.readouterr().err
