"""Autoplay demo -- headless runs driven by a simple steering bot.

The bot picks a platform to aim for (the highest reachable one while
rising, the nearest one below while falling), skips hazards, and steers
toward its center. Every run's final score goes to an in-memory
leaderboard; signals are printed as they are delivered.

Run:
    python packages/ascent-game/examples/autoplay.py [OPTIONS]

Options:
    --seed       RNG seed (default: 42)
    --runs       Number of runs (default: 3)
    --ticks      Tick limit per run (default: 20000)
    --latency    Simulated leaderboard latency in seconds (default: 0.05)
    --quiet      Only print run summaries
"""
from __future__ import annotations

import argparse

from ascent import GameState, PlatformKind, World
from ascent_game import Game, QueuedInput
from ascent_leaderboard import MockLeaderboard
from ascent_signal import Signal

DEAD_ZONE = 8.0
LOOK_BELOW = 400.0

_LOUD = (
    Signal.GAME_STARTED,
    Signal.MILESTONE_CROSSED,
    Signal.NEW_PERSONAL_BEST,
    Signal.POWERUP_ACTIVATED,
    Signal.POWERUP_EXPIRED,
    Signal.HAZARD_DEFEATED,
    Signal.HAZARD_BLOCKED,
    Signal.COMBO_ACHIEVED,
    Signal.DEATH,
    Signal.SCORE_SUBMITTED,
    Signal.SCORE_SUBMISSION_FAILED,
)


def choose_direction(world: World, reach: float) -> int:
    player = world.player
    feet = player.bottom
    rising = player.vy < 0
    best = None
    for platform in world.platforms:
        if platform.broken or platform.kind is PlatformKind.EVIL:
            continue
        if rising and not (feet - reach < platform.y < feet):
            continue
        if not rising and not (feet <= platform.y <= feet + LOOK_BELOW):
            continue
        if best is None or platform.y < best.y:
            best = platform
    if best is None:
        return 0
    dx = (best.x + best.width / 2) - (player.x + player.width / 2)
    if abs(dx) < DEAD_ZONE:
        return 0
    return 1 if dx > 0 else -1


def play(game: Game, source: QueuedInput, max_ticks: int) -> int:
    reach = game.config.player.jump_reach * 0.9
    ticks = 0
    while ticks < max_ticks and game.step():
        ticks += 1
        source.set_direction(choose_direction(game.world, reach))
        game.world.direction = source.direction
    return ticks


def main() -> None:
    parser = argparse.ArgumentParser(description="Autoplay demo -- headless bot runs")
    parser.add_argument("--seed", type=int, default=42, help="RNG seed (default: 42)")
    parser.add_argument("--runs", type=int, default=3, help="Number of runs (default: 3)")
    parser.add_argument("--ticks", type=int, default=20_000,
                        help="Tick limit per run (default: 20000)")
    parser.add_argument("--latency", type=float, default=0.05,
                        help="Leaderboard latency in seconds (default: 0.05)")
    parser.add_argument("--quiet", action="store_true", help="Only print run summaries")
    args = parser.parse_args()

    board = MockLeaderboard(latency=args.latency)
    source = QueuedInput()
    game = Game(seed=args.seed, leaderboard=board, input_source=source)

    if not args.quiet:
        def show(name: str, data: dict) -> None:
            fields = " ".join(f"{k}={v}" for k, v in data.items())
            print(f"  [{game.engine.clock.tick_number:>6}] {name:<24} {fields}")

        for signal in _LOUD:
            game.bus.subscribe(signal, show)

    print(f"=== Autoplay (seed={args.seed}, runs={args.runs}) ===\n")
    for run in range(1, args.runs + 1):
        game.start()
        ticks = play(game, source, args.ticks)
        reason = game.engine.end_reason or "tick limit"
        print(f"Run {run}: score={game.score} best={game.best_score} "
              f"ticks={ticks} ended={reason}\n")
        if game.state is GameState.PLAYING:
            print("Bot survived the tick limit; stopping.\n")
            break

    game.submitter.wait(timeout=5.0)
    game.frame(game.engine.clock.frame_interval_ms)
    print(f"Leaderboard: {board.top(5)}")
    game.shutdown()


if __name__ == "__main__":
    main()
