import argparse
import random
import sys
import time
from collections import Counter
from typing import Optional

from loguru import logger

from ludo_table import AIPlayer, GameEngine, GameStatus, TurnPhase, config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play headless Ludo games with every seat driven by the AI"
    )
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Dice seed (defaults to LUDO_SEED)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=50_000,
        help="Safety cap on scheduler steps per game",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Sleep through the roll and AI delays instead of skipping them",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args()


def drive_human(engine: GameEngine, ai: AIPlayer) -> bool:
    """Act for the human seat through the public API. Returns True if it acted."""
    if not engine.is_human_turn():
        return False
    if engine.phase == TurnPhase.AWAITING_MOVE:
        choice = ai.choose_move(
            engine.players,
            engine.active_player.color,
            engine.dice_value,
            engine.movable_pieces,
        )
        if choice is not None and engine.move_piece(choice.piece_id):
            return True
    return engine.roll_dice()


def play_game(
    seed: Optional[int], max_steps: int, realtime: bool
) -> tuple[Optional[str], int]:
    engine = GameEngine(rng=random.Random(seed))
    ai = AIPlayer()
    engine.start_game()

    steps = 0
    while engine.game_state.status == GameStatus.IN_PROGRESS and steps < max_steps:
        steps += 1
        if drive_human(engine, ai):
            continue
        due = engine.scheduler.next_due()
        if due is None:
            logger.warning(f"Game stalled in phase {engine.phase.value}")
            break
        if realtime:
            time.sleep(max(due - engine.scheduler.now, 0.0))
        engine.scheduler.run_next()

    if engine.winner is None:
        return None, steps
    return engine.winner.display_name, steps


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    results: Counter = Counter()
    start_time = time.time()
    for game_idx in range(args.games):
        seed = None if args.seed is None else args.seed + game_idx
        winner, steps = play_game(seed, args.max_steps, args.realtime)
        results[winner or "unfinished"] += 1
        print(f"Game {game_idx + 1}: winner={winner or 'none'} steps={steps}")

    print("\n--- SIMULATION COMPLETE ---")
    for name, count in results.most_common():
        print(f"{name}: {count}")
    print(f"Simulation Time: {time.time() - start_time:.2f} seconds")


if __name__ == "__main__":
    main()
