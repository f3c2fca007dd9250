"""Tests für die Demo-Abläufe und die Kommandozeile."""

from click.testing import CliRunner

from config.defaults import default_office_config, default_patterns_config
from demo.office_demo import run_office_demo
from demo.patterns_demo import run_patterns_demo
from main import cli
from models.context import AppContext


# ─── DEMO-ABLÄUFE ─────────────────────────────────────────────────────────────

class TestOfficeDemo:
    def test_final_state(self):
        ctx = run_office_demo(AppContext(), default_office_config())
        office = ctx.office
        assert len(office) == 3
        r1, r2, r3 = office.rooms
        assert (r1.max_capacity, r2.max_capacity, r3.max_capacity) == (10, 8, 0)
        # letzter Aufruf add_occupants(3) → belegt
        assert r1.occupied is True
        assert r2.occupied is False
        assert r3.occupied is False
        assert all(o.is_on for o in r1.observers)

    def test_transition_sequence(self, capsys):
        run_office_demo(AppContext(), default_office_config())
        out = capsys.readouterr().out
        steps = [
            "Büro mit 3 Besprechungsräumen konfiguriert",
            "Raum 1: maximale Belegung auf 10 gesetzt",
            "Raum 2: maximale Belegung auf 8 gesetzt",
            "Raum 1 gebucht ab 09:00 für 60 Minuten",
            "Raum 1 ist jetzt frei",
            "Buchung für Raum 1 erfolgreich storniert",
            "Raum 1 gebucht ab 09:00 für 60 Minuten",
            "Raum 2 ist nicht gebucht",
            "Raum 1: Belegung reicht nicht aus",
            "Raum 1 ist jetzt mit 3 Personen belegt",
        ]
        pos = 0
        for step in steps:
            pos = out.index(step, pos) + len(step)
        assert "bereits gebucht" not in out

    def test_defaults_without_config(self):
        ctx = run_office_demo(AppContext())
        assert ctx.office.get_room(1).occupied is True


class TestPatternsDemo:
    def test_sorted_result(self):
        assert run_patterns_demo(AppContext(), default_patterns_config()) == [2, 5, 7, 8, 10]

    def test_output_sequence(self, capsys):
        run_patterns_demo(AppContext())
        out = capsys.readouterr().out
        steps = [
            "Mobilanzeige zeigt Temperatur: 25.5°C",
            "Fernsehanzeige zeigt Temperatur: 25.5°C",
            "Sortiere mit Bubble Sort",
            "Sortiere mit Quick Sort",
            "Datenbankverbindung wird aufgebaut",
            "Führe Abfrage aus: SELECT * FROM users",
            "Zeichne einen Kreis",
            "Zeichne ein Quadrat",
            "$100.0",
            "Simple Coffee, Milk, Sugar kostet $2.70",
        ]
        pos = 0
        for step in steps:
            pos = out.index(step, pos) + len(step)

    def test_shared_connection_across_runs(self, capsys):
        ctx = AppContext()
        run_patterns_demo(ctx)
        run_patterns_demo(ctx)
        out = capsys.readouterr().out
        assert out.count("Datenbankverbindung wird aufgebaut") == 1
        assert len(ctx.get_connection().executed_queries) == 2

    def test_unknown_shape_is_skipped(self, capsys):
        config = default_patterns_config().model_copy(update={"shapes": ["triangle", "circle"]})
        run_patterns_demo(AppContext(), config)
        out = capsys.readouterr().out
        assert "Unbekannte Form: triangle" in out
        assert "bekannt: circle, square" in out
        assert "Zeichne einen Kreis" in out


# ─── CLI ──────────────────────────────────────────────────────────────────────

class TestCLI:
    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_run_command(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["run"])
        assert result.exit_code == 0, result.output
        assert "Büro-Demo" in result.output
        assert "kostet $2.70" in result.output

    def test_office_command(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["office"])
        assert result.exit_code == 0, result.output
        assert "Raumstatus" in result.output

    def test_patterns_command(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["patterns"])
        assert result.exit_code == 0, result.output
        assert "Sortiere mit Quick Sort" in result.output

    def test_sort_command(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["sort", "10", "5", "2", "8", "7", "-s", "quick"])
        assert result.exit_code == 0, result.output
        assert "2 5 7 8 10" in result.output

    def test_sort_command_negative_values(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["sort", "--", "3", "-1", "2"])
        assert result.exit_code == 0, result.output
        assert "-1 2 3" in result.output

    def test_sort_unknown_strategy(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["sort", "1", "2", "-s", "merge"])
        assert result.exit_code != 0

    def test_coffee_command(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["coffee", "-t", "sugar", "-t", "milk"])
        assert result.exit_code == 0, result.output
        assert "Simple Coffee, Sugar, Milk kostet $2.70" in result.output

    def test_coffee_unknown_topping(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["coffee", "-t", "caramel"])
        assert result.exit_code != 0

    def test_config_init_and_show(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 0, result.output
            result = runner.invoke(cli, ["config", "init"])
            assert "existiert bereits" in result.output
            result = runner.invoke(cli, ["config", "show"])
            assert result.exit_code == 0, result.output
            assert "Büro" in result.output

    def test_custom_config_file(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open("eigene.yaml", "w", encoding="utf-8") as f:
                f.write("patterns:\n  sort_input: [3, 1, 2]\n  coffee_toppings: []\n")
            result = runner.invoke(cli, ["--config", "eigene.yaml", "patterns"])
        assert result.exit_code == 0, result.output
        assert "Ergebnis: [1, 2, 3]" in result.output
        assert "Simple Coffee kostet $2.00" in result.output

    def test_missing_config_file_aborts(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["--config", "fehlt.yaml", "run"])
        assert result.exit_code == 1
        assert "Konfiguration nicht ladbar" in result.output

    def test_broken_yaml_config_aborts(self):
        """YAML-Syntaxfehler → rote Meldung und Exit-Code 1 statt Traceback."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open("kaputt.yaml", "w", encoding="utf-8") as f:
                f.write("patterns: [unclosed\n")
            result = runner.invoke(cli, ["--config", "kaputt.yaml", "patterns"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Konfiguration nicht ladbar" in result.output

    def test_sort_long_presorted_input(self):
        runner = CliRunner()
        values = [str(v) for v in range(1500)]
        result = runner.invoke(cli, ["sort", "-s", "quick", *values])
        assert result.exit_code == 0, result.output
        assert result.output.split() == values

    def test_config_show_prints_brackets_verbatim(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            with open("eigene.yaml", "w", encoding="utf-8") as f:
                f.write("patterns:\n  query: 'SELECT [name] FROM t'\n")
            result = runner.invoke(cli, ["--config", "eigene.yaml", "config", "show"])
        assert result.exit_code == 0, result.output
        assert "[name]" in result.output
