"""Entwurfsmuster-Demo — Haupt-CLI.

Verwendung:
  python main.py                          Beide Demos ausführen (= run)
  python main.py run                      Büro-Demo → Muster-Demo
  python main.py office                   Büro-Demo (Observer, Singleton, Command)
  python main.py patterns                 Muster-Demo (Observer … Decorator)
  python main.py sort 3 1 2 -s quick      Zahlen mit einer Strategie sortieren
  python main.py coffee -t milk -t sugar  Kaffee zusammenstellen
  python main.py config show              Konfiguration anzeigen
  python main.py config init              Default-Konfiguration speichern
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config_or_abort(config_path: Optional[Path]):
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red bold]Konfiguration nicht ladbar:[/red bold]\n{escape(str(e))}")
        sys.exit(1)


# ─── RUN / OFFICE / PATTERNS ──────────────────────────────────────────────────

@click.command("office")
@click.pass_context
def cmd_office(ctx: click.Context):
    """Büro-Demo: Räume, Geräte und Buchungen."""
    from demo.office_demo import run_office_demo
    from models.context import AppContext

    config = _load_config_or_abort(ctx.obj["config_path"])
    run_office_demo(AppContext(), config.office)


@click.command("patterns")
@click.pass_context
def cmd_patterns(ctx: click.Context):
    """Muster-Demo: Wetter, Sortierung, Verbindung, Formen, Zahlung, Kaffee."""
    from demo.patterns_demo import run_patterns_demo
    from models.context import AppContext

    config = _load_config_or_abort(ctx.obj["config_path"])
    run_patterns_demo(AppContext(), config.patterns)


@click.command("run")
@click.pass_context
def cmd_run(ctx: click.Context):
    """Führt Büro-Demo → Muster-Demo aus."""
    from demo.office_demo import run_office_demo
    from demo.patterns_demo import run_patterns_demo
    from models.context import AppContext

    config = _load_config_or_abort(ctx.obj["config_path"])
    console.print(Panel(f"[bold]{config.title}[/bold]", border_style="cyan"))

    app_ctx = AppContext()
    run_office_demo(app_ctx, config.office)
    console.print()
    run_patterns_demo(app_ctx, config.patterns)


# ─── SORT ─────────────────────────────────────────────────────────────────────

@click.command("sort")
@click.argument("values", nargs=-1, type=int, required=True)
@click.option("--strategy", "-s", "strategy_name", default="bubble",
              type=click.Choice(["bubble", "quick"], case_sensitive=False),
              help="Sortierverfahren.")
def cmd_sort(values: tuple[int, ...], strategy_name: str):
    """Sortiert die übergebenen Zahlen aufsteigend."""
    from patterns.sorting import SorterContext, get_strategy

    array = list(values)
    SorterContext(get_strategy(strategy_name)).sort_array(array)
    console.print(" ".join(str(v) for v in array))


# ─── COFFEE ───────────────────────────────────────────────────────────────────

@click.command("coffee")
@click.option("--topping", "-t", "toppings", multiple=True,
              help="Zutat (milk, sugar); mehrfach angebbar, Reihenfolge zählt.")
def cmd_coffee(toppings: tuple[str, ...]):
    """Stellt einen Kaffee zusammen und zeigt den Preis."""
    from patterns.coffee import build_coffee

    try:
        coffee = build_coffee(toppings)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--topping") from e
    console.print(f"{coffee.get_description()} kostet ${coffee.cost():.2f}")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config_or_abort(ctx.obj["config_path"])

    console.print(Panel(f"[bold]{config.title}[/bold]",
                        title="Konfiguration", border_style="cyan"))

    oc = config.office
    table = Table(title="Büro", box=box.ROUNDED)
    table.add_column("Raum")
    table.add_column("Kapazität")
    caps = {c.room_number: c.max_capacity for c in oc.capacities}
    for n in range(1, oc.room_count + 1):
        table.add_row(str(n), str(caps.get(n, "—")))
    console.print(table)
    console.print(
        f"[bold]Buchung:[/bold] Raum {oc.primary_booking.room_number} ab "
        f"{oc.primary_booking.start_time} für "
        f"{oc.primary_booking.duration_minutes} min | "
        f"[bold]Belegungen:[/bold] {oc.occupancy_changes}"
    )

    pc = config.patterns
    table2 = Table(title="Muster", box=box.ROUNDED)
    table2.add_column("Parameter", style="bold")
    table2.add_column("Wert")
    for k, v in pc.model_dump().items():
        table2.add_row(k, escape(str(v)))
    console.print(table2)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Datei überschreiben.")
@click.pass_context
def config_init(ctx: click.Context, force: bool):
    """Speichert die Default-Konfiguration als YAML."""
    from config.defaults import default_demo_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    target = ctx.obj["config_path"] or mgr.DEFAULT_CONFIG
    if target.exists() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {target}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_demo_config(), target)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur YAML-Konfiguration.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliches Logging (DEBUG).")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Entwurfsmuster-Demo: Observer, Singleton, Command, Strategy,
    Factory, Adapter, Decorator.

    Starten Sie mit: python main.py run
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def main():
    """Einstiegspunkt. Ohne Argumente laufen beide Demos."""
    if len(sys.argv) == 1:
        sys.argv.append("run")
    cli()


# Befehle registrieren
cli.add_command(cmd_run)
cli.add_command(cmd_office)
cli.add_command(cmd_patterns)
cli.add_command(cmd_sort)
cli.add_command(cmd_coffee)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
