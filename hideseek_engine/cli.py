"""Command-line interface and live view for hide and seek tournaments."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from hideseek_engine.grid import Position

if TYPE_CHECKING:
    from core.score_store import ScoreRecord
    from hideseek_engine.state import MatchState

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\u001b[H\u001b[2J"


def format_grid(state: MatchState) -> str:
    """Render the board: H hider, S seeker, # obstacle, . empty."""
    rows = []
    for y in range(state.grid_size):
        row = []
        for x in range(state.grid_size):
            cell = Position(x, y)
            if cell == state.hider.position:
                row.append("H")
            elif cell == state.seeker.position:
                row.append("S")
            elif cell in state.obstacles:
                row.append("#")
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows)


def format_standings(title: str, standings: dict[str, ScoreRecord]) -> str:
    """Format a ranked standings table."""
    from simulation.tournament import rank_standings

    lines = [
        title,
        f"{'Player':<15}| {'Wins as Seeker':>15} | {'Survived as Hider':>20} | Played",
    ]
    for name, record in rank_standings(standings):
        lines.append(
            f"{name:<15}| {record.seeker_wins:>15} | "
            f"{record.hider_survived:>20} | {record.games_played}"
        )
    return "\n".join(lines)


def format_state(state: MatchState, label: str = "") -> str:
    """Format a match state for display."""
    lines = []
    if label:
        lines.append(label)
    lines.append(f"Tick {state.tick} ({state.phase.name})")
    lines.append(format_grid(state))
    if state.is_over:
        lines.append(f"MATCH OVER - {state.outcome.name}")
    return "\n".join(lines)


class LiveView:
    """Redraws the board and both standings tables after every tick."""

    def __init__(self, stream: TextIO | None = None, clear: bool = True):
        self.stream = stream or sys.stdout
        self.clear = clear

    def __call__(
        self,
        state: MatchState,
        label: str,
        session: dict[str, ScoreRecord],
        cumulative: dict[str, ScoreRecord],
    ) -> None:
        parts = [
            format_state(state, label),
            "",
            format_standings("Scoreboard:", session),
            "",
            format_standings("All-time statistics:", cumulative),
        ]
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write("\n".join(parts) + "\n")
        self.stream.flush()


def build_config(args: argparse.Namespace):
    """Environment config with command-line overrides applied."""
    from core.config import TournamentConfig

    config = TournamentConfig.from_env()
    overrides = {
        "players_dir": args.players_dir,
        "scores_path": args.scores,
        "log_path": args.log,
        "seed": getattr(args, "seed", None),
        "grid_size": getattr(args, "grid_size", None),
        "max_ticks": getattr(args, "max_ticks", None),
        "hiding_ticks": getattr(args, "hiding_ticks", None),
        "obstacle_count": getattr(args, "obstacles", None),
        "tick_delay": getattr(args, "tick_delay", None),
        "match_delay": getattr(args, "match_delay", None),
    }
    data = config.to_dict()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return TournamentConfig.from_dict(data).validate()


def run_tournament_command(args: argparse.Namespace) -> int:
    """Run one round-robin over every player in the players directory."""
    from core.pacing import SleepPacer
    from simulation.tournament import TournamentRunner
    from strategies.registry import load_player_modules

    config = build_config(args)
    registry = load_player_modules(config.players_dir)

    runner = TournamentRunner(
        registry,
        config,
        pacer=None if args.no_view else SleepPacer(),
        view=None if args.no_view else LiveView(),
    )
    result = runner.run()

    print()
    print(result)
    print()
    print(format_standings("All-time statistics:", result.cumulative))
    return 0


def show_standings_command(args: argparse.Namespace) -> int:
    """Print the persisted cumulative standings."""
    from core.score_store import ScoreStore

    config = build_config(args)
    print(format_standings("All-time statistics:", ScoreStore(config.scores_path).load()))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    from dotenv import load_dotenv

    load_dotenv()

    parser = argparse.ArgumentParser(description="Hide and seek tournament runner")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--players-dir", help="Directory of player modules")
    common.add_argument("--scores", help="Cumulative score file (JSON)")
    common.add_argument("--log", help="Match log file (CSV)")

    # Tournament command
    tournament_parser = subparsers.add_parser(
        "tournament", parents=[common], help="Run a round-robin tournament"
    )
    tournament_parser.add_argument("--seed", type=int, help="Obstacle layout seed")
    tournament_parser.add_argument("--grid-size", type=int, help="Grid side length")
    tournament_parser.add_argument("--max-ticks", type=int, help="Ticks per match")
    tournament_parser.add_argument("--hiding-ticks", type=int, help="Ticks in hiding phase")
    tournament_parser.add_argument("--obstacles", type=int, help="Number of obstacle draws")
    tournament_parser.add_argument("--tick-delay", type=float, help="Seconds between ticks")
    tournament_parser.add_argument("--match-delay", type=float, help="Seconds between matches")
    tournament_parser.add_argument(
        "--no-view", action="store_true", help="Run without the live view or pauses"
    )

    # Standings command
    subparsers.add_parser("standings", parents=[common], help="Show all-time standings")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "tournament":
        return run_tournament_command(args)
    if args.command == "standings":
        return show_standings_command(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
