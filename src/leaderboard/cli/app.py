import logging
from pathlib import Path
from typing import Annotated

import typer

from leaderboard.cli._logging import configure_logging
from leaderboard.cli._output import (
    print_error,
    print_standings,
    print_standings_json,
    print_thresholds,
    print_warning,
)
from leaderboard.config import create_config, load_thresholds
from leaderboard.exceptions import InvalidInputError, LeaderboardException
from leaderboard.ingest.csv_source import CsvParticipantSource
from leaderboard.services.place_assigner import assign_places
from leaderboard.services.validation import check_thresholds

logger = logging.getLogger(__name__)

app = typer.Typer(name="leaderboard", help="Leaderboard places: award and rank scored participants")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Leaderboard places: award and rank scored participants."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_ConfigOpt = Annotated[Path, typer.Option("--config", help="YAML file with a 'thresholds' section")]
_FirstOpt = Annotated[int | None, typer.Option("--first", help="Minimum score for place 1")]
_SecondOpt = Annotated[int | None, typer.Option("--second", help="Minimum score for place 2")]
_ThirdOpt = Annotated[int | None, typer.Option("--third", help="Minimum score for place 3")]


@app.command()
def places(
    csv_path: Annotated[Path, typer.Argument(help="CSV file with participant ids and scores")],
    first: _FirstOpt = None,
    second: _SecondOpt = None,
    third: _ThirdOpt = None,
    config_path: _ConfigOpt = Path("leaderboard.yaml"),
    id_column: Annotated[str, typer.Option("--id-column", help="CSV column holding the identifier")] = "id",
    score_column: Annotated[str, typer.Option("--score-column", help="CSV column holding the score")] = "score",
    delimiter: Annotated[str, typer.Option("--delimiter", help="CSV field delimiter")] = ",",
    validate: Annotated[bool, typer.Option("--validate/--no-validate", help="Check input before ranking")] = True,
    as_json: Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table")] = False,
) -> None:
    """Assign places to the participants in a CSV file."""
    if not csv_path.is_file():
        print_error(f"not a file: {csv_path}")
        raise typer.Exit(code=1)

    try:
        cfg = create_config(yaml_path=str(config_path), first=first, second=second, third=third)
        thresholds = load_thresholds(cfg)
        source = CsvParticipantSource(csv_path, id_column=id_column, score_column=score_column, delimiter=delimiter)
        participants = source.read()
        logger.debug("Loaded %d participants from %s", len(participants), source.path)
        standings = assign_places(participants, thresholds, validate=validate)
    except InvalidInputError as e:
        print_error(str(e))
        for reason in e.reasons[1:]:
            print_error(reason)
        raise typer.Exit(code=1)
    except LeaderboardException as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    logger.debug("Assigned %d places", len(standings))
    if as_json:
        print_standings_json(standings)
    else:
        print_standings(standings, participants)


@app.command(name="thresholds")
def show_thresholds(
    config_path: _ConfigOpt = Path("leaderboard.yaml"),
    first: _FirstOpt = None,
    second: _SecondOpt = None,
    third: _ThirdOpt = None,
) -> None:
    """Show the effective award thresholds."""
    try:
        resolved = load_thresholds(create_config(yaml_path=str(config_path), first=first, second=second, third=third))
    except LeaderboardException as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_thresholds(resolved)
    for reason in check_thresholds(resolved):
        print_warning(reason)
