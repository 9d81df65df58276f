"""Bench and reserve substitution for a team's main positions."""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from .constants import BENCH_LABEL
from .models import (
    BenchSlot,
    PositionKind,
    PositionResult,
    ReserveSlot,
    Roster,
    SubstitutionEvent,
)
from .scoring import did_player_play, score_position_with_breakdown

logger = logging.getLogger('duzza.resolver')

# Reserve candidates matched by their declared backup position outrank group matches
BACKUP_MATCH_PRIORITY = 2
GROUP_MATCH_PRIORITY = 1


class BenchCandidate(NamedTuple):
    """A bench player who played, scored in their backup position."""
    slot: BenchSlot
    score: int
    breakdown: dict


class Replacement(NamedTuple):
    player_name: str
    score: int
    breakdown: dict
    kind: str


@dataclass
class Resolution:
    """Outcome of resolving substitutions for one roster."""
    positions: list[PositionResult] = field(default_factory=list)
    substitutions: list[SubstitutionEvent] = field(default_factory=list)
    bench_candidates: list[BenchCandidate] = field(default_factory=list)
    reserve_candidates: list[ReserveSlot] = field(default_factory=list)
    used_players: set[str] = field(default_factory=set)


def eligible_bench(roster: Roster) -> list[BenchCandidate]:
    """Bench players who played and declared a backup position, in list order."""
    candidates = []
    for slot in roster.bench_slots:
        if slot.backup_position is None or not did_player_play(slot.stats):
            continue
        score, breakdown = score_position_with_breakdown(slot.backup_position, slot.stats)
        candidates.append(BenchCandidate(slot, score, breakdown))
    return candidates


def eligible_reserves(roster: Roster) -> list[ReserveSlot]:
    """Reserve players who played, in list order."""
    return [slot for slot in roster.reserve_slots if did_player_play(slot.stats)]


def pick_bench(
    position: PositionKind,
    original_score: int,
    bench: list[BenchCandidate],
    used: set[str],
) -> Optional[Replacement]:
    """
    Pick the first unused bench player covering this position who beat the starter.

    First match in list order, not best match: a later bench player with
    the same backup position is only considered if earlier ones are used
    or did not outscore the starter.
    """
    for candidate in bench:
        if candidate.slot.player_name in used:
            continue
        if candidate.slot.backup_position != position:
            continue
        if candidate.score > original_score:
            return Replacement(
                candidate.slot.player_name, candidate.score, candidate.breakdown, BENCH_LABEL
            )
    return None


def pick_reserve(
    position: PositionKind,
    reserves: list[ReserveSlot],
    used: set[str],
) -> Optional[Replacement]:
    """
    Pick the best unused reserve for a position whose starter did not play.

    Candidates are scored under the position being filled. Ranking is by
    priority (declared backup position over group coverage), then score,
    then list order.
    """
    ranked = []
    for slot in reserves:
        if slot.player_name in used:
            continue
        if slot.backup_position == position:
            priority, kind = BACKUP_MATCH_PRIORITY, position.value
        elif slot.group.covers(position):
            priority, kind = GROUP_MATCH_PRIORITY, slot.group.value
        else:
            continue
        score, breakdown = score_position_with_breakdown(position, slot.stats)
        ranked.append((priority, score, Replacement(slot.player_name, score, breakdown, kind)))

    if not ranked:
        return None
    # sorted() is stable, so equal (priority, score) keep list order
    ranked.sort(key=lambda r: (-r[0], -r[1]))
    return ranked[0][2]


def resolve_substitutions(roster: Roster, round_end_passed: bool) -> Resolution:
    """
    Decide the final player and score for every main position.

    Main positions are processed in fixed order, which decides who gets a
    bench or reserve player when several positions could claim the same one.
    Each bench and reserve player is used at most once.

    Args:
        roster: Roster with stats attached
        round_end_passed: Whether reserves may replace starters who did not play

    Returns:
        Resolution with per-position results, substitution events, the
        eligible bench/reserve candidates and the names that were used
    """
    resolution = Resolution(
        bench_candidates=eligible_bench(roster),
        reserve_candidates=eligible_reserves(roster),
    )
    used = resolution.used_players

    for main in roster.main_slots:
        position = main.position
        original_score, breakdown = score_position_with_breakdown(position, main.stats)
        played = did_player_play(main.stats)

        result = PositionResult(
            position=position,
            starting_player=main.player_name,
            final_player=main.player_name,
            final_score=original_score,
            original_score=original_score,
            played=played,
            breakdown=breakdown,
        )

        replacement = pick_bench(position, original_score, resolution.bench_candidates, used)
        if replacement is None and not played and round_end_passed:
            replacement = pick_reserve(position, resolution.reserve_candidates, used)

        if replacement is not None:
            used.add(replacement.player_name)
            result.final_player = replacement.player_name
            result.final_score = replacement.score
            result.breakdown = replacement.breakdown
            result.was_substituted = True
            result.substitution_kind = replacement.kind
            resolution.substitutions.append(
                SubstitutionEvent(
                    position=position,
                    original_player=main.player_name,
                    original_score=original_score,
                    replacement_player=replacement.player_name,
                    replacement_score=replacement.score,
                    replacement_kind=replacement.kind,
                )
            )
            logger.debug(
                f'{replacement.kind} player {replacement.player_name} ({replacement.score}) '
                f'replaces {main.player_name or "empty slot"} ({original_score}) at {position.value}'
            )

        resolution.positions.append(result)

    return resolution
