"""JSON-based round scoring.

Team selections come from data/selections/{year}/round_{N}.json, dead-cert
bonuses from the tipping module's export, and player stats from the round's
stats table (see stats_loader).
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from .models import TeamScoreResult
from .round_scorer import RoundScorer
from .schemas import DeadCertScores, RoundSelectionsFile
from .stats_loader import load_round_stats
from .utils import load_json, save_json

logger = logging.getLogger('duzza.json_scorer')


def load_round_selections(selections_path: str | Path) -> RoundSelectionsFile:
    """Load and validate a round's team selections file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file doesn't match RoundSelectionsFile
    """
    return load_json(selections_path, schema=RoundSelectionsFile)


def load_dead_cert_scores(dead_certs_path: Optional[str | Path]) -> dict[str, int]:
    """Load team id -> dead-cert bonus; no path means no bonuses.

    A path that was given must load.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file doesn't match DeadCertScores
    """
    if dead_certs_path is None:
        return {}
    return load_json(dead_certs_path, schema=DeadCertScores).root


def score_round_from_json(
    selections_path: str | Path,
    stats_path: str | Path,
    round_end_passed: bool,
    dead_certs_path: Optional[str | Path] = None,
    team_names: Optional[dict[str, str]] = None,
    verbose: bool = True,
) -> tuple[int, dict[str, TeamScoreResult]]:
    """Score all teams for a round using JSON selections and a stats table.

    Args:
        selections_path: Path to the round's selections JSON
        stats_path: Path to the stats table (rows for other rounds are ignored)
        round_end_passed: Whether reserve substitutions are enabled
        dead_certs_path: Optional path to team id -> dead-cert bonus JSON
        team_names: Optional team id -> display name
        verbose: Whether to print detailed output

    Returns:
        Tuple of (round_number, results) where results maps team id to TeamScoreResult
    """
    selections = load_round_selections(selections_path)
    stats = load_round_stats(stats_path, selections.round)
    dead_certs = load_dead_cert_scores(dead_certs_path)

    logger.info(
        f'Scoring round {selections.round}: {len(selections.teams)} teams, '
        f'{len(stats)} players with stats'
    )

    scorer = RoundScorer(selections.round, stats, round_end_passed)
    results = scorer.score_teams(selections.teams, dead_certs, team_names, verbose=verbose)
    return selections.round, results


def result_to_dict(team_id: str, name: str, result: TeamScoreResult) -> dict[str, Any]:
    """Serialize one team's result for the scored round file."""
    return {
        'team': team_id,
        'name': name,
        'positions': [
            {
                'position': pos.position.value,
                'starting_player': pos.starting_player,
                'final_player': pos.final_player,
                'original_score': pos.original_score,
                'final_score': pos.final_score,
                'played': pos.played,
                'was_substituted': pos.was_substituted,
                'substitution_kind': pos.substitution_kind,
                'breakdown': pos.breakdown,
            }
            for pos in result.positions
        ],
        'substitutions': [
            {
                'position': event.position.value,
                'original_player': event.original_player,
                'original_score': event.original_score,
                'replacement_player': event.replacement_player,
                'replacement_score': event.replacement_score,
                'replacement_kind': event.replacement_kind,
            }
            for event in result.substitutions
        ],
        'unused': [
            {
                'player_name': unused.player_name,
                'slot': unused.slot_label,
                'position': unused.position.value if unused.position else None,
                'score': unused.score,
            }
            for unused in result.unused
        ],
        'total_score': result.total_score,
        'dead_cert_score': result.dead_cert_score,
        'final_score': result.final_score,
    }


def save_round_scores(
    output_path: str | Path,
    round_number: int,
    results: dict[str, TeamScoreResult],
    round_end_passed: bool,
    team_names: Optional[dict[str, str]] = None,
) -> None:
    """Save a scored round to JSON, teams ranked by final score.

    Args:
        output_path: Path to output JSON file
        round_number: Round number
        results: Team id -> TeamScoreResult
        round_end_passed: Recorded so readers know whether reserves were applied
        team_names: Optional team id -> display name
    """
    team_names = team_names or {}
    teams_data = [
        result_to_dict(team_id, team_names.get(team_id, team_id), result)
        for team_id, result in results.items()
    ]

    teams_data.sort(key=lambda t: t['final_score'], reverse=True)
    for rank, team_dict in enumerate(teams_data, 1):
        team_dict['score_rank'] = rank

    save_json(
        output_path,
        {
            'round': round_number,
            'scored_at': datetime.now(timezone.utc).isoformat(),
            'round_end_passed': round_end_passed,
            'teams': teams_data,
            'has_scores': any(t['total_score'] > 0 for t in teams_data),
        },
    )
    logger.info(f'Scores saved to {output_path}')
