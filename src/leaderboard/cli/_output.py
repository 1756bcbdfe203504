from rich.console import Console
from rich.markup import escape
from rich.table import Table

from leaderboard.domain.participant import AWARD_PLACES, Participant, RankedParticipant, ThresholdConfig

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_AWARD_STYLES = {1: "bold yellow", 2: "bold white", 3: "bold red"}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def print_warning(message: str) -> None:
    err_console.print(f"[yellow bold]Warning:[/yellow bold] {escape(message)}")


def print_thresholds(thresholds: ThresholdConfig) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Place", justify="right")
    table.add_column("Min score", justify="right")
    for place, minimum in thresholds.award_gates():
        table.add_row(str(place), str(minimum))
    console.print(table)


def print_standings(standings: list[RankedParticipant], participants: list[Participant]) -> None:
    """Print the standings table ordered by place."""
    if not standings:
        console.print("No participants.")
        return
    scores = {p.id: p.score for p in participants}
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Place", justify="right")
    table.add_column("Id")
    table.add_column("Score", justify="right")
    for entry in sorted(standings, key=lambda r: r.place):
        table.add_row(
            str(entry.place),
            entry.id,
            str(scores.get(entry.id, "")),
            style=_AWARD_STYLES.get(entry.place),
        )
    console.print(table)
    awarded = sum(1 for r in standings if r.place <= AWARD_PLACES)
    console.print(f"{awarded} award place(s) granted, {len(standings) - awarded} ranked from {AWARD_PLACES + 1}")


def print_standings_json(standings: list[RankedParticipant]) -> None:
    payload = [{"id": r.id, "place": r.place} for r in sorted(standings, key=lambda r: r.place)]
    console.print_json(data=payload)
