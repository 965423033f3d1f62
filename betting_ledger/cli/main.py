"""CLI principale per la simulazione del ledger."""

import logging

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config.settings import Config
from ..data.feeds import FeedError
from ..simulation import BettingSimulation, SimulationResult

console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.option('--config', '-c', default='config/config.yaml', help='Path al file di configurazione')
@click.pass_context
def cli(ctx, config):
    """🎲 Simulatore di ledger per scommesse sportive."""
    ctx.ensure_object(dict)
    ctx.obj['config'] = Config.load(config)
    logging.basicConfig(level=ctx.obj['config'].logging.level.upper())


@cli.command()
@click.option('--players', '-p', default=None, help='File operazioni giocatori')
@click.option('--matches', '-m', default=None, help='File partite')
@click.option('--output', '-o', default=None, help='File output report')
@click.option('--csv', 'csv_path', default=None, help='Esporta i giocatori in CSV (opzionale)')
@click.pass_context
def run(ctx, players, matches, output, csv_path):
    """📒 Riesegue le operazioni e scrive il report."""
    config = ctx.obj['config']

    console.print(Panel.fit(
        "[bold blue]🎲 Betting Ledger - Simulazione[/bold blue]",
        border_style="blue"
    ))

    simulation = BettingSimulation(
        player_data=players or config.files.player_data,
        match_data=matches or config.files.match_data,
        results=output or config.files.results,
    )

    console.print(f"[cyan]Operazioni:[/cyan] {simulation.player_data}")
    console.print(f"[cyan]Partite:[/cyan] {simulation.match_data}")

    try:
        result = simulation.run()
        if csv_path:
            result.report.export_to_csv(csv_path)
    except (OSError, FeedError) as e:
        logger.error(f"Simulazione interrotta: {e}")
        console.print(f"[red]Errore: {escape(str(e))}[/red]")
        return

    display_results(result)
    console.print(f"\n[green]✅ Report salvato in {result.output_path}[/green]")
    if csv_path:
        console.print(f"[green]✅ Giocatori esportati in {csv_path}[/green]")


@cli.command(name='report-config')
@click.pass_context
def report_config(ctx):
    """⚙️ Mostra la configurazione effettiva."""
    config = ctx.obj['config']
    console.print(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))


def display_results(result: SimulationResult):
    """Mostra i conti finali e le statistiche."""
    system = result.system
    console.print("\n")

    table = Table(title="👥 Giocatori", show_header=True, header_style="bold cyan")
    table.add_column("Giocatore", style="white")
    table.add_column("Saldo", style="green")
    table.add_column("Scommesse", style="yellow")
    table.add_column("Win Rate", style="magenta")
    table.add_column("Stato", style="white")

    for player in list(system.players.values())[:50]:
        status = "✅" if player.is_legitimate else "⚠️"
        table.add_row(
            player.player_id,
            str(player.balance),
            f"{player.won_bets} / {player.total_bets}",
            str(player.win_rate()),
            status,
        )

    console.print(table)

    stats = system.get_statistics()
    console.print(f"\n[bold]Operazioni eseguite:[/bold] {result.operations}")
    console.print(f"[bold]Scommesse regolate / rifiutate:[/bold] "
                  f"{stats['total_bets']} / {stats['rejected_bets']}")
    console.print(f"[bold]Variazione saldo casinò:[/bold] {stats['casino_balance']}")


def main():
    """Entry point."""
    cli(obj={})


if __name__ == '__main__':
    main()
