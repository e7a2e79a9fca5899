"""Tests pour le point d'entrée en ligne de commande."""

import json

import pytest

from cmdline_presenter.__main__ import (
    EXIT_ABORTED,
    EXIT_OK,
    EXIT_STEP_FAILED,
    build_parser,
    main,
    run,
)


@pytest.fixture
def write_script(tmp_path):
    """Écrit un fichier de script JSON et retourne son chemin."""

    def _write(steps, presenter=None):
        path = tmp_path / "script.json"
        data = {"steps": steps}
        if presenter is not None:
            data["presenter"] = presenter
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


class TestBuildParser:
    """Tests pour l'analyse des arguments."""

    def test_valeurs_par_defaut(self):
        args = build_parser().parse_args(["script.toml"])
        assert args.script == "script.toml"
        assert args.run_immediately is None
        assert args.break_on_errors is False
        assert args.format == "auto"

    def test_modes_exclusifs(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["script.toml", "--run-now", "--render-only"]
            )

    def test_render_only(self):
        args = build_parser().parse_args(["s.toml", "--render-only"])
        assert args.run_immediately is False


class TestRun:
    """Tests pour run()."""

    def test_succes(self, tmp_path, write_script, capsys):
        script = write_script([
            {"directory": str(tmp_path), "command": "echo hi && echo bye",
             "comment": "greet"},
        ])
        assert run([script, "--format", "terminal"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "# greet" in out
        assert "✔✔✔" in out

    def test_etape_en_echec_sans_arret(self, tmp_path, write_script, capsys):
        script = write_script([
            {"directory": str(tmp_path), "command": "exit 1",
             "comment": "échec"},
            {"directory": str(tmp_path), "command": "echo suite",
             "comment": "suite"},
        ])
        assert run([script, "--format", "terminal"]) == EXIT_STEP_FAILED
        assert "suite" in capsys.readouterr().out

    def test_arret_sur_erreur(self, tmp_path, write_script, capsys):
        marker = tmp_path / "jamais"
        script = write_script([
            {"directory": str(tmp_path), "command": "echo non; exit 1",
             "comment": "échec"},
            {"directory": str(tmp_path), "command": f"touch {marker}",
             "comment": "jamais exécuté"},
        ])
        code = run([script, "--format", "terminal", "--break-on-errors"])
        captured = capsys.readouterr()
        assert code == EXIT_ABORTED
        assert "------ STOPPED -----" in captured.out
        assert "CommandAbortedError" in captured.err
        assert not marker.exists()

    def test_rendu_html_sans_execution(self, tmp_path, write_script, capsys):
        marker = tmp_path / "marqueur"
        script = write_script([
            {"directory": str(tmp_path), "command": f"touch {marker}",
             "comment": "création"},
        ])
        assert run([script, "--format", "html"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.lstrip().startswith("<!DOCTYPE html>")
        assert "</html>" in out
        assert "tput setaf 33" in out
        assert not marker.exists()

    def test_repertoire_absent(self, write_script, capsys):
        script = write_script([
            {"directory": "/nonexistent/dir", "command": "echo hi",
             "comment": "x"},
        ])
        assert run([script, "--format", "terminal"]) == EXIT_ABORTED
        assert "DirectoryNotFoundError" in capsys.readouterr().err

    def test_script_invalide(self, tmp_path, capsys):
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"steps": [{"command": "ls"}]}))
        assert run([str(path)]) == EXIT_ABORTED
        err = capsys.readouterr().err
        assert "🛑 ValidationError" in err
        assert "directory" in err

    def test_script_illisible(self, tmp_path, capsys):
        path = tmp_path / "script.toml"
        path.write_text("[[steps]\n", encoding="utf-8")
        assert run([str(path)]) == EXIT_ABORTED
        assert "FileConfigurationError" in capsys.readouterr().err

    def test_script_absent(self, tmp_path, capsys):
        assert run([str(tmp_path / "absent.toml")]) == EXIT_ABORTED
        assert "FileConfigurationError" in capsys.readouterr().err

    def test_fichiers_miroirs(self, tmp_path, write_script, capsys):
        log_file = tmp_path / "out.log"
        notes = tmp_path / "notes.log"
        script = write_script([
            {"directory": str(tmp_path), "command": "echo miroir",
             "comment": "miroir"},
        ])
        code = run([
            script, "--format", "terminal",
            "--log-file", str(log_file), "--key-notes", str(notes),
        ])
        assert code == EXIT_OK
        log_text = log_file.read_text(encoding="utf-8")
        notes_text = notes.read_text(encoding="utf-8")
        assert "# miroir" in log_text
        # même contenu après l'en-tête daté
        assert notes_text.split("\n", 1)[1] == log_text.split("\n", 1)[1]

    def test_journal_de_diagnostic(self, tmp_path, write_script, capsys):
        debug_log = tmp_path / "debug.log"
        script = write_script(
            [{"directory": "/nonexistent/dir", "command": "ls",
              "comment": "x"}],
            presenter={"diagnostic_log": str(debug_log)},
        )
        assert run([script, "--format", "terminal"]) == EXIT_ABORTED
        content = debug_log.read_text(encoding="utf-8")
        assert "DirectoryNotFoundError" in content


class TestMain:
    """Tests pour main() et sa sortie de processus."""

    def test_sortie_ok(self, tmp_path, write_script, monkeypatch, capsys):
        script = write_script([
            {"directory": str(tmp_path), "command": "echo hi",
             "comment": "greet"},
        ])
        monkeypatch.setattr(
            "sys.argv", ["cmdline_presenter", script, "--format", "terminal"]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == EXIT_OK

    def test_sortie_sur_arret(self, tmp_path, write_script, monkeypatch,
                              capsys):
        script = write_script([
            {"directory": str(tmp_path), "command": "exit 3",
             "comment": "échec"},
        ])
        monkeypatch.setattr("sys.argv", [
            "cmdline_presenter", script, "--format", "terminal",
            "--break-on-errors",
        ])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == EXIT_ABORTED
        assert "CommandAbortedError" in capsys.readouterr().err

    def test_sortie_script_invalide(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"steps": [{"command": "ls"}]}))
        monkeypatch.setattr("sys.argv", ["cmdline_presenter", str(path)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == EXIT_ABORTED
        assert "ValidationError" in capsys.readouterr().err
