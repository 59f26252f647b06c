#!/usr/bin/env python3
"""Watch the random agent play Minesweeper."""
import logging
import os
import time

from minesweeper import BoardConfig, MinesweeperEnv, render_outcome
from agents import RandomAgent


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 5, seed: int = None):
    """Run demo games with visualization."""
    config = BoardConfig(size)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(size, seed=seed)

    print(f"Board: {size}x{size} with {config.num_mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, _ = env.reset(seed=seed if game == 0 else None)
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            row, col = divmod(action, size)

            obs, reward, done, _, info = env.step(action)
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {action} ({row}, {col})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                print(f"\n*** {render_outcome(env.controller.outcome)} ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/max(games, 1):.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=5, help="Board size (NxN)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    demo(delay=args.delay, games=args.games, size=args.size, seed=args.seed)
