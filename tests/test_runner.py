"""Tests for command echo and process replacement/spawning."""

import os
from unittest.mock import MagicMock, patch

import pytest

from britto.errors import LaunchTargetNotFound
from britto.launcher.runner import echo_command, exec_runner, format_command, resolve_exec_mode, restore_terminal, shell_exit_code


class _Replaced(Exception):
    """Stands in for os.execvpe never returning."""


class TestExecMode:
    @pytest.mark.parametrize(
        "platform,expected",
        [("linux", "replace"), ("darwin", "replace"), ("win32", "spawn"), ("cygwin", "spawn")],
    )
    def test_auto(self, platform, expected):
        assert resolve_exec_mode("auto", platform) == expected

    def test_explicit_mode_wins(self):
        assert resolve_exec_mode("spawn", "linux") == "spawn"
        assert resolve_exec_mode("replace", "win32") == "replace"

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            resolve_exec_mode("fork")


class TestFormat:
    def test_single_line_is_shell_quoted(self):
        line = format_command("/opt/jdk/bin/java", ["-cp", "lib/*", "Main", "two words"])
        assert line == "/opt/jdk/bin/java -cp 'lib/*' Main 'two words'"

    def test_verbose_one_arg_per_line(self):
        text = format_command("java", ["-Xmx1m", "Main"], verbose=True)
        assert text.splitlines() == ["# Executing command line:", "java", "-Xmx1m", "Main"]

    def test_echo_writes_stdout(self, capsys):
        echo_command("java", ["Main"])
        assert capsys.readouterr().out == "java Main\n"


class TestExecRunner:
    def test_replace_calls_execvpe(self):
        with patch("britto.launcher.runner.os.execvpe", side_effect=_Replaced) as mock_exec:
            with pytest.raises(_Replaced):
                exec_runner("/opt/jdk/bin/java", ["-cp", "lib/*", "Main"], {"A": "1"}, mode="replace")
        mock_exec.assert_called_once_with(
            "/opt/jdk/bin/java", ["/opt/jdk/bin/java", "-cp", "lib/*", "Main"], {"A": "1"}
        )

    def test_replace_failure_is_launch_target_not_found(self):
        with patch("britto.launcher.runner.os.execvpe", side_effect=FileNotFoundError("no such file")):
            with pytest.raises(LaunchTargetNotFound):
                exec_runner("/missing/java", [], {}, mode="replace")

    def test_spawn_returns_child_exit_code(self):
        with patch("britto.launcher.runner.subprocess.run", return_value=MagicMock(returncode=7)) as mock_run:
            assert exec_runner("java", ["Main"], {"A": "1"}, mode="spawn") == 7
        assert mock_run.call_args[0][0] == ["java", "Main"]
        assert mock_run.call_args[1]["env"] == {"A": "1"}

    def test_spawn_failure_is_launch_target_not_found(self):
        with patch("britto.launcher.runner.subprocess.run", side_effect=PermissionError("denied")):
            with pytest.raises(LaunchTargetNotFound):
                exec_runner("java", [], {}, mode="spawn")

    def test_cygwin_spawns_and_restores_terminal(self):
        with patch("britto.launcher.runner.subprocess.run", return_value=MagicMock(returncode=0)):
            with patch("britto.launcher.runner.restore_terminal") as mock_restore:
                assert exec_runner("java", [], {}, platform="cygwin") == 0
        mock_restore.assert_called_once_with()

    def test_linux_spawn_does_not_touch_terminal(self):
        with patch("britto.launcher.runner.subprocess.run", return_value=MagicMock(returncode=2)):
            with patch("britto.launcher.runner.restore_terminal") as mock_restore:
                assert exec_runner("java", [], {}, mode="spawn", platform="linux") == 2
        mock_restore.assert_not_called()


class TestShellExitCode:
    @pytest.mark.parametrize("returncode,expected", [(0, 0), (3, 3), (-15, 143), (-9, 137)])
    def test_signal_deaths_map_to_128_plus_n(self, returncode, expected):
        assert shell_exit_code(returncode) == expected

    def test_spawned_child_killed_by_sigterm_reports_143(self):
        with patch("britto.launcher.runner.subprocess.run", return_value=MagicMock(returncode=-15)):
            assert exec_runner("java", [], {}, mode="spawn", platform="linux") == 143


class TestRestoreTerminal:
    def test_non_tty_is_ignored(self):
        read_fd, write_fd = os.pipe()
        try:
            restore_terminal(read_fd)
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_closed_fd_is_ignored(self):
        read_fd, write_fd = os.pipe()
        os.close(read_fd)
        os.close(write_fd)
        restore_terminal(read_fd)
