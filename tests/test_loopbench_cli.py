"""Tests for the loopbench command-line interface."""

import pytest

import loopbench.cli as loopbench_cli
from loopbench.utils.errors import InvalidInputError


def test_version_flag_prints_and_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    """`loopbench --version` should print version and exit with code 0."""
    parser = loopbench_cli.setup_parser()
    with pytest.raises(SystemExit) as exc:
        parser.parse_args(["--version"])
    assert exc.value.code == 0
    assert "loopbench" in capsys.readouterr().out.lower()


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert loopbench_cli.main([]) == 0
    assert "usage: loopbench" in capsys.readouterr().out


class TestRunCommand:
    """`loopbench run`."""

    def test_run_small_n_succeeds(self, capsys):
        assert loopbench_cli.main(["run", "100"]) == 0
        out = capsys.readouterr().out
        assert "Sequence length: 100" in out
        assert "[OK] All strategies summed to 5050" in out
        for label in ("for (indexed)", "while", "for...of", "for...in", "forEach"):
            assert label in out

    def test_run_zero_exits_non_zero(self, capsys):
        assert loopbench_cli.main(["run", "0"]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    def test_run_negative_exits_non_zero(self, capsys):
        assert loopbench_cli.main(["run", "-5"]) == 2

    def test_run_non_integer_exits_non_zero(self):
        with pytest.raises(SystemExit) as exc:
            loopbench_cli.main(["run", "ten"])
        assert exc.value.code != 0

    def test_run_selected_strategies(self, capsys):
        assert loopbench_cli.main(["run", "10", "--strategy", "callback", "--repeat", "2"]) == 0
        out = capsys.readouterr().out
        assert "forEach" in out
        assert "for...in" not in out

    def test_run_reads_config_file(self, capsys, yaml_config_file):
        assert loopbench_cli.main(["--config", yaml_config_file, "run"]) == 0
        out = capsys.readouterr().out
        assert "Sequence length: 50 | timed runs: 2 | warm-up runs: 1" in out
        assert "[OK] All strategies summed to 1275" in out

    def test_run_reads_config_from_env(self, capsys, monkeypatch, yaml_config_file):
        monkeypatch.setenv(loopbench_cli.CONFIG_ENV_VAR, yaml_config_file)
        assert loopbench_cli.main(["run", "5"]) == 0
        assert "Sequence length: 5 | timed runs: 2" in capsys.readouterr().out

    def test_run_bad_config_exits_non_zero(self, capsys, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]")
        assert loopbench_cli.main(["--config", str(path), "run", "5"]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    def test_run_invalid_repeat_in_runner(self, capsys, mocker):
        mocker.patch.object(loopbench_cli, "run_benchmark", side_effect=InvalidInputError("repeat must be >= 1"))
        assert loopbench_cli.main(["run", "5"]) == 2
        assert "repeat must be >= 1" in capsys.readouterr().err


def test_strategies_command_lists_all(capsys: pytest.CaptureFixture[str]) -> None:
    assert loopbench_cli.main(["strategies"]) == 0
    out = capsys.readouterr().out
    for name in ("for_index", "while_loop", "for_item", "for_key", "callback"):
        assert name in out


class TestRunCommandBadConfig:
    """Malformed config files end in [ERROR] and exit code 2."""

    def test_undecodable_config_file(self, capsys, tmp_path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"\xff\xfe")
        assert loopbench_cli.main(["--config", str(path), "run", "5"]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    def test_config_path_is_directory(self, capsys, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.mkdir()
        assert loopbench_cli.main(["--config", str(path), "run", "5"]) == 2
        assert "[ERROR]" in capsys.readouterr().err

    @pytest.mark.parametrize("value", ["5", "for_item"])
    def test_scalar_strategies_setting(self, capsys, tmp_path, value):
        path = tmp_path / "strategies.yaml"
        path.write_text(f"benchmark:\n  strategies: {value}\n")
        assert loopbench_cli.main(["--config", str(path), "run", "5"]) == 2
        assert "strategies must be a list" in capsys.readouterr().err

    def test_string_show_sums_setting(self, capsys, tmp_path):
        path = tmp_path / "report.yaml"
        path.write_text('report:\n  show_sums: "no"\n')
        assert loopbench_cli.main(["--config", str(path), "run", "5"]) == 2
        err = capsys.readouterr().err
        assert "report.show_sums must be true or false" in err
