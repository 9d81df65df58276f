"""Scores every team in a round with the shared team-score engine."""

import logging
from collections.abc import Mapping
from typing import Optional

from .models import Roster, TeamScoreResult
from .roster import Selections, StatsMap, build_roster
from .team_score import compute_team_score
from .validators import validate_round

logger = logging.getLogger('duzza.round_scorer')


class RoundScorer:
    """
    Scoring for one round.

    Holds the round's stats snapshot and round-end flag so every team is
    scored against the same inputs.
    """

    def __init__(self, round_number: int, stats_by_player_name: StatsMap, round_end_passed: bool):
        """
        Initialize scorer.

        Args:
            round_number: Round being scored
            stats_by_player_name: Player name -> stats for the round
            round_end_passed: Whether reserves may replace starters who did not play
        """
        self.round_number = round_number
        self.stats = stats_by_player_name
        self.round_end_passed = round_end_passed

    def build_rosters(self, team_selections: Mapping[str, Selections]) -> dict[str, Roster]:
        """Build a Roster for each team id."""
        return {
            team_id: build_roster(selections)
            for team_id, selections in team_selections.items()
        }

    def score_roster(self, roster: Roster, dead_cert_score: int = 0) -> TeamScoreResult:
        """Score one roster against this round's stats."""
        return compute_team_score(roster, self.stats, self.round_end_passed, dead_cert_score)

    def score_teams(
        self,
        team_selections: Mapping[str, Selections],
        dead_cert_scores: Optional[Mapping[str, int]] = None,
        team_names: Optional[Mapping[str, str]] = None,
        verbose: bool = True,
    ) -> dict[str, TeamScoreResult]:
        """
        Score every team in the round.

        Args:
            team_selections: Team id -> raw selection entries
            dead_cert_scores: Team id -> dead-cert bonus (missing teams get 0)
            team_names: Team id -> display name for verbose output
            verbose: Whether to print a per-team report

        Returns:
            Dict mapping team id to TeamScoreResult
        """
        dead_cert_scores = dead_cert_scores or {}
        team_names = team_names or {}

        rosters = self.build_rosters(team_selections)
        results = {
            team_id: self.score_roster(roster, dead_cert_scores.get(team_id, 0))
            for team_id, roster in rosters.items()
        }

        errors, warnings = validate_round(rosters, results)
        for message in warnings:
            logger.warning(message)
        for message in errors:
            logger.error(message)

        if verbose:
            print(f'\nRound {self.round_number}: {len(results)} teams')
            if not self.round_end_passed:
                print('  Round not finished - reserve substitutions disabled')
            for team_id, result in results.items():
                self._print_team(team_names.get(team_id, team_id), result)

        return results

    @staticmethod
    def _print_team(name: str, result: TeamScoreResult) -> None:
        print(f'\n{"=" * 60}')
        print(f'Scoring: {name}')
        print('=' * 60)
        for pos in result.positions:
            status = '✓' if pos.played else '✗'
            line = f'  {pos.position.value}: {pos.starting_player or "-"} {pos.original_score} pts {status}'
            if pos.was_substituted:
                line += f' -> {pos.final_player} {pos.final_score} pts [{pos.substitution_kind}]'
            print(line)
            for key, val in pos.breakdown.items():
                print(f'      {key}: {val}')
        for unused in result.unused:
            print(f'  {unused.slot_label} (unused) {unused.player_name}: {unused.score} pts')
        print(f'\n  TOTAL: {result.total_score} points')
        if result.dead_cert_score:
            print(f'  DEAD CERTS: {result.dead_cert_score:+d}')
        print(f'  FINAL: {result.final_score} points')
