#!/usr/bin/env python3
"""
Duzza Round Scorer CLI

Scores every team's selection for a round, applying bench and reserve
substitutions, and writes the scored round as JSON.
Selections come from data/selections/{year}/round_{N}.json
Player stats come from data/stats/{year}/round_{N}.csv (or --stats)

Usage:
    python score_round.py --round 5
    python score_round.py --round 5 --round-ended --dead-certs data/tipping/2025/round_5.json
    python score_round.py --year 2025 --round 5 --stats exports/round_5.parquet
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from duzza import save_round_scores, score_round_from_json
from duzza.config import get_current_year, get_team_names
from duzza.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Duzza fantasy round scorer")
    parser.add_argument(
        "--round", "-r",
        type=int,
        required=True,
        help="Round number to score",
    )
    parser.add_argument(
        "--year", "-y",
        type=int,
        default=None,
        help="Season year (defaults to current_year in league_config.json)",
    )
    parser.add_argument(
        "--data-dir", "-d",
        default="data",
        help="Path to data directory",
    )
    parser.add_argument(
        "--stats", "-s",
        default=None,
        help="Stats table for the round (defaults to data/stats/{year}/round_{N}.csv)",
    )
    parser.add_argument(
        "--dead-certs",
        default=None,
        help="JSON mapping team id to dead cert bonus",
    )
    parser.add_argument(
        "--round-ended",
        action="store_true",
        help="The round is over: allow reserves to replace starters who did not play",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output path for scored round JSON (defaults to data/results/{year}/round_{N}.json)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every substitution decision",
    )

    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    config_path = data_dir / "league_config.json"
    logger = setup_logging(
        log_dir=data_dir.parent / "logs",
        level=logging.DEBUG if args.debug else logging.INFO,
        round_number=args.round,
    )

    try:
        year = args.year or get_current_year(config_path)
        team_names = get_team_names(config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load league config: {e}")
        sys.exit(1)

    selections_path = data_dir / "selections" / str(year) / f"round_{args.round}.json"
    stats_path = Path(args.stats) if args.stats else data_dir / "stats" / str(year) / f"round_{args.round}.csv"
    if args.output:
        output_path = Path(args.output)
    else:
        output_path = data_dir / "results" / str(year) / f"round_{args.round}.json"

    if not selections_path.exists():
        print(f"⚠️  Selections file not found: {selections_path}")
        print("   Teams need to be selected before scoring.")
        sys.exit(0)

    print(f"Scoring Round {args.round} of {year}...")

    try:
        round_number, results = score_round_from_json(
            selections_path=selections_path,
            stats_path=stats_path,
            round_end_passed=args.round_ended,
            dead_certs_path=args.dead_certs,
            team_names=team_names,
            verbose=not args.quiet,
        )
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    if round_number != args.round:
        logger.warning(
            f"Selections file is for round {round_number}, not round {args.round}"
        )

    print("\n" + "=" * 60)
    print("ROUND RESULTS")
    print("=" * 60)

    ranked = sorted(results.items(), key=lambda item: item[1].final_score, reverse=True)
    for rank, (team_id, result) in enumerate(ranked, 1):
        print(f"  {rank}. {team_names.get(team_id, team_id)}: {result.final_score} pts")

    save_round_scores(output_path, round_number, results, args.round_ended, team_names)


if __name__ == "__main__":
    main()
