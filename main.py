#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--seed S]
    python main.py evaluate [--size N] [--games N] [--seed S]
"""
import argparse
import logging
import random
from typing import Optional

from minesweeper import (
    Board,
    BoardConfig,
    GameController,
    IndexOutOfBoundsError,
    InvalidSizeError,
    render_board,
    render_outcome,
)
from agents import Evaluator, RandomAgent

logger = logging.getLogger(__name__)

HELP = "Commands: o <index> open | f <index> flag | r restart | q quit"


def handle_command(controller: GameController, line: str) -> bool:
    """
    Apply one line of player input.

    Returns:
        False when the player asked to quit.
    """
    parts = line.split()
    if not parts:
        return True
    command = parts[0].lower()

    if command == "q":
        return False
    if command == "r":
        controller.restart()
        return True
    if command in ("o", "f") and len(parts) == 2:
        try:
            index = int(parts[1])
            if command == "o":
                controller.open_cell(index)
            else:
                controller.toggle_flag(index)
        except ValueError:
            print(f"Not a cell index: {parts[1]}")
        except IndexOutOfBoundsError as error:
            print(error)
        return True

    print(HELP)
    return True


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    rng = random.Random(args.seed)
    controller = GameController(Board(BoardConfig(args.size), rng=rng))
    controller.subscribe(
        lambda change: logger.debug(
            "%s changed %d cell(s)", change.action.name, len(change.indices)
        )
    )

    print(f"Board: {args.size}x{args.size} with {controller.board.mine_count} mines")
    print(HELP)
    while True:
        print()
        print(render_board(controller.board, with_index=True))
        banner = render_outcome(controller.outcome)
        if banner:
            print(f"\n*** {banner} *** (r to restart, q to quit)")
        try:
            line = input("> ")
        except EOFError:
            break
        if not handle_command(controller, line):
            break


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent."""
    config = BoardConfig(args.size)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(RandomAgent(args.size, seed=args.seed))

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--size", type=int, default=5, help="Board size (NxN)")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the random agent")
    eval_parser.add_argument("--size", type=int, default=5, help="Board size (NxN)")
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except InvalidSizeError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
