"""Raumbuchung — Haupt-CLI.

Verwendung:
  python main.py demo                     Demo-Szenario durchspielen
  python main.py demo --config <datei>    Szenario aus eigener YAML-Datei
  python main.py config init              Default-Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config_or_abort(path: Optional[Path] = None):
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    if path is None and mgr.first_run_check():
        console.print(
            "[red]Keine Konfiguration gefunden.[/red]\n"
            "Führen Sie zunächst [bold]python main.py config init[/bold] aus."
        )
        sys.exit(1)
    try:
        return mgr, mgr.load(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red bold]Konfiguration fehlerhaft:[/red bold]\n{e}")
        sys.exit(1)


# ─── DEMO ─────────────────────────────────────────────────────────────────────

@click.command("demo")
@click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path),
              default=None, help="YAML-Konfiguration mit eigenem Szenario.")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
              help="Log-Level (überschreibt die Konfiguration).")
def cmd_demo(config_path: Optional[Path], log_level: Optional[str]):
    """Spielt das Demo-Szenario im Speicher durch."""
    from config.defaults import default_system_config
    from system import ReservationSystem

    if config_path is not None:
        _, config = _load_config_or_abort(config_path)
    else:
        config = default_system_config()
    _setup_logging(log_level or config.log_level.value)

    console.print(Panel(f"[bold]{config.system_name}[/bold]  |  Demo-Szenario",
                        border_style="cyan"))

    system = ReservationSystem(config)
    log_view = None
    for label, outcome in system.run_demo():
        if outcome.entries:
            log_view = outcome
            continue
        mark = "[green]✓[/green]" if outcome.ok else "[red]✗[/red]"
        console.print(f"{mark} [bold]{label}:[/bold] {outcome.message}")
        if outcome.ok and label.startswith("Reservierung"):
            console.print(f"[dim]{outcome.reservation.details()}[/dim]")

    if log_view is not None:
        table = Table(title="Audit-Log", box=box.ROUNDED)
        table.add_column("#", justify="right")
        table.add_column("Eintrag")
        for i, entry in enumerate(log_view.entries, start=1):
            table.add_row(str(i), entry)
        console.print(table)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Default-Konfiguration als YAML an."""
    from config.defaults import default_system_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        return
    mgr.save(default_system_config())


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    mgr, config = _load_config_or_abort()

    console.print(Panel(
        f"[bold]{config.system_name}[/bold]  |  Log-Level {config.log_level.value}  |  "
        f"Umgekehrte Zeitfenster ablehnen: "
        f"{'ja' if config.booking.reject_inverted_ranges else 'nein'}",
        title="Systemkonfiguration",
        border_style="cyan",
    ))

    demo = config.demo
    table = Table(title="Konten", box=box.ROUNDED)
    table.add_column("Nutzer")
    table.add_column("Rolle")
    for u in demo.users:
        table.add_row(u.username, u.role.label)
    console.print(table)

    table2 = Table(title="Räume", box=box.ROUNDED)
    table2.add_column("Raum")
    table2.add_column("Belegungszeiten")
    for r in demo.rooms:
        table2.add_row(r.room_number, "\n".join(
            f"{s.start_time:%Y-%m-%d %H:%M} - {s.end_time:%H:%M}" for s in r.schedules
        ))
    console.print(table2)

    table3 = Table(title="Reservierungen", box=box.ROUNDED)
    table3.add_column("Nutzer")
    table3.add_column("Raum")
    table3.add_column("Beginn")
    table3.add_column("Ende")
    for res in demo.reservations:
        table3.add_row(res.username, res.room_number,
                       f"{res.start_time:%Y-%m-%d %H:%M}",
                       f"{res.end_time:%Y-%m-%d %H:%M}")
    console.print(table3)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Raumbuchung: Räume reservieren, stornieren und verwalten (im Speicher).

    Starten Sie mit: python main.py demo
    """


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_demo)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
