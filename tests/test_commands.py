"""Tests pour le module commands."""

import os
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from cmdline_presenter.commands import (
    CommandExecutor,
    CommandResult,
    LinuxCommandExecutor,
)
from cmdline_presenter.logging.base import Logger


# --- Tests CommandResult ---


class TestCommandResult:
    """Tests pour la dataclass CommandResult."""

    def test_creation_avec_tous_les_champs(self):
        result = CommandResult(
            command="echo hi",
            cwd="/tmp",
            return_code=0,
            output=["hi"],
            success=True,
            duration=0.5,
        )
        assert result.command == "echo hi"
        assert result.cwd == "/tmp"
        assert result.output == ["hi"]
        assert result.duration == 0.5

    def test_frozen(self):
        result = CommandResult(command="ls", cwd="/", return_code=0)
        with pytest.raises(AttributeError):
            result.return_code = 1

    def test_last_line(self):
        result = CommandResult(
            command="cmd", cwd="/", return_code=0, output=["a", "b"]
        )
        assert result.last_line == "b"

    def test_last_line_vide(self):
        result = CommandResult(command="cmd", cwd="/", return_code=0)
        assert result.last_line == ""

    def test_text(self):
        result = CommandResult(
            command="cmd", cwd="/", return_code=1, output=["a", "b"],
            success=False,
        )
        assert result.text == "a\nb"


# --- Tests LinuxCommandExecutor.run_shell ---


class TestLinuxCommandExecutorRunShell:
    """Tests pour run_shell() avec subprocess simulé."""

    def setup_method(self):
        self.mock_logger = MagicMock(spec=Logger)
        self.executor = LinuxCommandExecutor(logger=self.mock_logger)

    def test_implemente_l_interface(self):
        assert isinstance(self.executor, CommandExecutor)

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_commande_reussie(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="hi\nbye  \n")
        result = self.executor.run_shell("echo hi && echo bye", "/tmp")

        assert result.success is True
        assert result.return_code == 0
        assert result.output == ["hi", "bye"]
        assert result.cwd == "/tmp"
        assert result.duration >= 0

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_arguments_subprocess(self, mock_run):
        """stderr fusionné, shell actif, répertoire transmis."""
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        self.executor.run_shell("a && b", "/srv")

        args, kwargs = mock_run.call_args
        assert args[0] == "a && b"
        assert kwargs["shell"] is True
        assert kwargs["cwd"] == "/srv"
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.STDOUT
        assert kwargs["env"] is None

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_commande_echouee(self, mock_run):
        mock_run.return_value = MagicMock(returncode=2, stdout="erreur\n")
        result = self.executor.run_shell("false", "/tmp")

        assert result.success is False
        assert result.return_code == 2
        assert result.output == ["erreur"]
        self.mock_logger.log_error.assert_called_once()

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_erreur_systeme(self, mock_run):
        mock_run.side_effect = OSError("shell introuvable")
        result = self.executor.run_shell("ls", "/tmp")

        assert result.success is False
        assert result.return_code == -1
        assert result.output == ["shell introuvable"]
        self.mock_logger.log_error.assert_called_once()

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_log_commande(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        self.executor.run_shell("ls -la", "/tmp")

        message = self.mock_logger.log_info.call_args[0][0]
        assert "ls -la" in message
        assert "/tmp" in message

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_sans_logger(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="ok")
        result = LinuxCommandExecutor().run_shell("echo ok", "/tmp")
        assert result.output == ["ok"]

    @patch("cmdline_presenter.commands.runner.subprocess.run")
    def test_shell_et_env_personnalises(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="")
        executor = LinuxCommandExecutor(
            env={"PATH": "/usr/bin"}, shell="/bin/bash"
        )
        executor.run_shell("ls", "/tmp")

        kwargs = mock_run.call_args[1]
        assert kwargs["executable"] == "/bin/bash"
        assert kwargs["env"] == {"PATH": "/usr/bin"}


# --- Tests d'exécution réelle ---


class TestLinuxCommandExecutorReal:
    """Tests avec un vrai shell."""

    def test_enchainement_une_seule_unite(self, tmp_path):
        result = LinuxCommandExecutor().run_shell(
            "echo hi && echo bye", str(tmp_path)
        )
        assert result.output == ["hi", "bye"]
        assert result.success is True

    def test_stderr_fusionne(self, tmp_path):
        result = LinuxCommandExecutor().run_shell(
            "echo oops >&2; exit 3", str(tmp_path)
        )
        assert result.return_code == 3
        assert result.output == ["oops"]

    def test_repertoire_de_travail(self, tmp_path):
        result = LinuxCommandExecutor().run_shell("pwd", str(tmp_path))
        assert result.output == [str(tmp_path)]

    def test_repertoire_courant_inchange(self, tmp_path):
        before = os.getcwd()
        LinuxCommandExecutor().run_shell("cd / && pwd", str(tmp_path))
        assert os.getcwd() == before


# --- Tests command_exists ---


class TestCommandExists:
    """Tests pour la détection de programmes."""

    def test_programme_present(self):
        assert LinuxCommandExecutor().command_exists("sh") is True

    def test_programme_absent(self):
        assert LinuxCommandExecutor().command_exists(
            "programme-qui-n-existe-pas-42"
        ) is False

    def test_path_de_l_environnement(self, tmp_path):
        executor = LinuxCommandExecutor(env={"PATH": str(tmp_path)})
        assert executor.command_exists("sh") is False
