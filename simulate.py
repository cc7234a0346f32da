import argparse
import sys
import time
from collections import Counter

from loguru import logger

from ludo_duel.config import config
from ludo_duel.simulator import Simulator


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play random two-seat Ludo matches through the rules engine"
    )
    parser.add_argument("--games", type=int, default=10, help="Matches to play")
    parser.add_argument("--seed", type=int, default=config.SEED, help="RNG seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Roll limit per match before it is abandoned",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every engine decision"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else config.LOG_LEVEL)

    sim = Simulator(seed=args.seed, max_turns=args.max_turns)
    wins: Counter = Counter()
    total_turns = 0
    total_captures = 0

    start_time = time.time()
    for game_number in range(1, args.games + 1):
        result = sim.play()
        winner = result.winner.name if result.winner is not None else "DRAW"
        wins[winner] += 1
        total_turns += result.turns
        total_captures += result.captures
        logger.info(
            f"Game {game_number}: {winner} in {result.turns} turns, "
            f"{result.captures} captures"
        )

    elapsed = time.time() - start_time
    logger.info("=" * 50)
    logger.info(f"Games played: {args.games}")
    for name, count in sorted(wins.items()):
        logger.info(f"   • {name}: {count}")
    if args.games:
        logger.info(f"Average turns: {total_turns / args.games:.1f}")
        logger.info(f"Average captures: {total_captures / args.games:.2f}")
    logger.info(f"Simulation time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    main()
