"""Team totals for a scored round."""

import logging
from typing import Optional

from .models import (
    PositionKind,
    ReserveSlot,
    Roster,
    TeamScoreResult,
    UnusedReplacement,
)
from .resolver import Resolution, resolve_substitutions
from .roster import Selections, StatsMap, attach_stats, build_roster
from .scoring import score_position

logger = logging.getLogger('duzza.team_score')


def reserve_standalone_score(slot: ReserveSlot) -> tuple[Optional[PositionKind], int]:
    """
    Score a reserve on their own.

    Uses the declared backup position if there is one, otherwise the
    best-scoring position in the reserve's group (earlier group position
    on a tie).
    """
    if slot.backup_position is not None:
        return slot.backup_position, score_position(slot.backup_position, slot.stats)
    best = max(slot.group.positions, key=lambda kind: score_position(kind, slot.stats))
    return best, score_position(best, slot.stats)


def unused_replacements(resolution: Resolution) -> list[UnusedReplacement]:
    """Bench and reserve players who played but were not substituted in."""
    unused = []
    for candidate in resolution.bench_candidates:
        if candidate.slot.player_name in resolution.used_players:
            continue
        unused.append(
            UnusedReplacement(
                player_name=candidate.slot.player_name,
                slot_label=candidate.slot.label,
                position=candidate.slot.backup_position,
                score=candidate.score,
            )
        )
    for slot in resolution.reserve_candidates:
        if slot.player_name in resolution.used_players:
            continue
        position, score = reserve_standalone_score(slot)
        unused.append(
            UnusedReplacement(
                player_name=slot.player_name,
                slot_label=slot.label,
                position=position,
                score=score,
            )
        )
    return unused


def compute_team_score(
    roster: Roster,
    stats_by_player_name: Optional[StatsMap],
    round_end_passed: bool,
    dead_cert_score: int = 0,
) -> TeamScoreResult:
    """
    Score a team for one round, applying bench and reserve substitutions.

    Args:
        roster: Team roster for the round
        stats_by_player_name: Player name -> StatLine (or raw stats dict, or
            None for a player with no stats). Pass None to use the stats
            already attached to the roster.
        round_end_passed: Whether the round is over, enabling reserves
        dead_cert_score: Tipping bonus added to the team total (may be negative)

    Returns:
        TeamScoreResult with per-position results, substitutions, unused
        bench/reserve players and totals
    """
    if stats_by_player_name is not None:
        roster = attach_stats(roster, stats_by_player_name)

    resolution = resolve_substitutions(roster, round_end_passed)
    total = sum(result.final_score for result in resolution.positions)

    result = TeamScoreResult(
        positions=resolution.positions,
        substitutions=resolution.substitutions,
        unused=unused_replacements(resolution),
        total_score=total,
        dead_cert_score=dead_cert_score,
        final_score=total + dead_cert_score,
        reserve_substitutions_enabled=round_end_passed,
    )
    logger.debug(
        f'Team total {result.total_score} + dead certs {dead_cert_score} = {result.final_score} '
        f'({len(result.substitutions)} substitutions)'
    )
    return result


def score_team_selection(
    selections: Selections,
    stats_by_player_name: StatsMap,
    round_end_passed: bool,
    dead_cert_score: int = 0,
) -> TeamScoreResult:
    """Build a roster from raw selection entries and score it."""
    roster = build_roster(selections)
    return compute_team_score(roster, stats_by_player_name, round_end_passed, dead_cert_score)
