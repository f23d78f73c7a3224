#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py simulate [--games G] [--size N] [--mines M] [--seed S]
    python main.py watch [--games G] [--delay D] [--size N] [--mines M] [--seed S]
"""
import argparse
import random
import sys
import time
from typing import Optional, Tuple

from minefield import (
    BoardConfig,
    GameEngine,
    GameStatus,
    InvalidConfigurationError,
    MinefieldEnv,
    OutcomeKind,
    RevealOutcome,
)
from minefield.agents import RandomAgent
from minefield.logging_config import setup_logging
from minefield.render import render_game


HELP_TEXT = "Enter 'row col' to reveal a cell, 'r' to reset, 'q' to quit."


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_move(line: str) -> Optional[Tuple[int, int]]:
    """Parse a 'row col' input line, or None if it is not two integers."""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play an interactive game in the terminal."""
    rng = random.Random(args.seed)
    engine = GameEngine(config, rng=rng)

    print(HELP_TEXT)
    print(render_game(engine, coordinates=True))

    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            print()
            return

        if line in ("q", "quit"):
            return
        if line in ("r", "reset"):
            engine.initialize()
            print(render_game(engine, coordinates=True))
            continue

        move = parse_move(line)
        if move is None:
            print(HELP_TEXT)
            continue

        outcome = engine.reveal(*move)
        if not outcome.changed:
            print("Nothing to reveal there.")
            continue
        print(render_game(engine, coordinates=True))
        if engine.is_over:
            print("Press 'r' to play again or 'q' to quit.")


def describe_outcome(outcome: RevealOutcome) -> str:
    """One-line summary of what a reveal uncovered."""
    if outcome.kind == OutcomeKind.NO_EFFECT:
        return "no effect"
    if outcome.kind == OutcomeKind.LOSS:
        return f"hit a mine ({len(outcome.mines)} mines exposed)"

    cells = ", ".join(
        f"({cell.row}, {cell.col})={cell.neighbor_mines}"
        for cell in outcome.revealed[:8]
    )
    if len(outcome.revealed) > 8:
        cells += ", ..."
    summary = f"revealed {len(outcome.revealed)} cells: {cells}"
    if outcome.kind == OutcomeKind.WIN:
        summary += " - board cleared"
    return summary


def simulate(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play games with the random agent and print statistics."""
    env = MinefieldEnv(config=config)
    agent = RandomAgent(config.size, seed=args.seed)

    wins = 0
    total_revealed = 0
    total_steps = 0

    print(f"Simulating {args.games} games on a {config.size}x{config.size} "
          f"board with {config.num_mines} mines...")

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        agent.reset()
        done = False

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, done, _, info = env.step(action)

        total_steps += info["steps"]
        total_revealed += info["revealed"]
        if info["game_state"] == "WON":
            wins += 1

    print("Results for Random:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def watch(args: argparse.Namespace, config: BoardConfig) -> None:
    """Show the random agent playing, one move at a time."""
    engine = GameEngine(config, rng=random.Random(args.seed))
    agent = RandomAgent(config.size, seed=args.seed)
    wins = 0

    for game in range(1, args.games + 1):
        engine.initialize()
        agent.reset()
        move = 0

        while not engine.is_over:
            action = agent.select_action(engine.get_observation())
            row, col = divmod(action, config.size)
            outcome = engine.reveal(row, col)
            move += 1

            print(f"Game {game}/{args.games}, move {move}: ({row}, {col}) "
                  f"{describe_outcome(outcome)}")
            print(render_game(engine, coordinates=True))
            print()
            time.sleep(args.delay)

        if engine.status == GameStatus.WON:
            wins += 1

    print(f"Won {wins} of {args.games} games.")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minefield - a minesweeper game")
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    simulate_parser = subparsers.add_parser(
        "simulate", help="Play games with a random agent"
    )
    simulate_parser.add_argument(
        "--games", type=positive_int, default=100, help="Number of games to play"
    )
    watch_parser = subparsers.add_parser(
        "watch", help="Watch the random agent play"
    )
    watch_parser.add_argument(
        "--games", type=positive_int, default=3, help="Number of games to show"
    )
    watch_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )
    for sub in (play_parser, simulate_parser, watch_parser):
        sub.add_argument("--size", type=int, default=9, help="Board size (NxN)")
        sub.add_argument("--mines", type=int, default=10, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()
    setup_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return

    try:
        config = BoardConfig(size=args.size, num_mines=args.mines)
    except InvalidConfigurationError as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        sys.exit(2)

    if args.command == "play":
        play(args, config)
    elif args.command == "simulate":
        simulate(args, config)
    elif args.command == "watch":
        watch(args, config)


if __name__ == "__main__":
    main()
