#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py simulate [--games G] [--width W] [--height H] [--mines N]
"""
import argparse
import logging

import numpy as np

from src.mines import Game, MinesweeperEnv, InvalidConfigurationError, clamp_settings


PLAY_HELP = """Commands:
  r X Y    reveal column X, row Y
  f X Y    toggle flag on column X, row Y
  c        toggle cheat (show mines)
  check    check flags and end the game
  new      start a new game
  q        quit"""


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    config = clamp_settings(args.width, args.height, args.mines)
    game = Game(config, seed=args.seed)
    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print(PLAY_HELP)

    while True:
        print()
        print(game.render())
        print(f"Status: {game.status.name}")
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break
        parts = line.split()
        if not parts:
            continue
        command = parts[0]

        if command == "q":
            break
        if command == "new":
            game.reset()
        elif command == "c":
            game.toggle_cheat()
        elif command == "check":
            print(f"*** {game.check_win().name} ***")
        elif command in ("r", "f") and len(parts) == 3:
            try:
                x, y = int(parts[1]), int(parts[2])
            except ValueError:
                print(PLAY_HELP)
                continue
            action = game.reveal if command == "r" else game.toggle_flag
            if not action(x, y):
                print("Nothing happened")
        else:
            print(PLAY_HELP)


def simulate(args: argparse.Namespace) -> None:
    """
    Play games with a random policy through the Gymnasium environment.

    The policy reveals random unexplored cells; once only as many cells
    remain as there are mines, it flags them all and checks.
    """
    config = clamp_settings(args.width, args.height, args.mines)
    env = MinesweeperEnv(config=config, render_mode="ansi" if args.render else None)
    rng = np.random.default_rng(args.seed)

    print(f"Simulating {args.games} games on {config.width}x{config.height} "
          f"with {config.num_mines} mines...")

    wins = 0
    total_steps = 0
    for episode in range(args.games):
        seed = None if args.seed is None else args.seed + episode
        obs, info = env.reset(seed=seed)
        done = False

        while not done:
            unexplored = np.flatnonzero(obs.flatten() == -1)
            if len(unexplored) == config.num_mines:
                for index in unexplored:
                    env.step(env.num_cells + int(index))
                action = env.check_action
            else:
                action = int(rng.choice(unexplored))

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        total_steps += info["steps"]
        if info["game_state"] == "WIN":
            wins += 1
        if args.render:
            print(env.render())
            print(f"Game {episode + 1}: {info['game_state']}\n")

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.1f}%) ===")
    print(f"Average steps: {total_steps / args.games:.1f}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Minesweeper engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine events")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--width", type=int, default=8, help="Board columns (1-20)")
        sub.add_argument("--height", type=int, default=8, help="Board rows (1-20)")
        sub.add_argument("--mines", type=int, default=10, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_args(play_parser)

    sim_parser = subparsers.add_parser("simulate", help="Run random-policy games")
    add_board_args(sim_parser)
    sim_parser.add_argument("--games", type=int, default=100, help="Number of games")
    sim_parser.add_argument("--render", action="store_true", help="Print final boards")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except InvalidConfigurationError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
