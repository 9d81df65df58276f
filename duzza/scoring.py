"""Scoring functions for each position type."""

from typing import Callable, Dict, Optional, Tuple, Union

from .constants import (
    MIDFIELDER_BONUS_MULTIPLIER,
    MIDFIELDER_DISPOSAL_CAP,
    RUCK_BONUS_MULTIPLIER,
    RUCK_THRESHOLD,
    STAT_FIELDS,
)
from .models import PositionKind, StatLine

StatsInput = Union[StatLine, dict, None]


def _as_stat_line(stats: StatsInput) -> Optional[StatLine]:
    if stats is None or isinstance(stats, StatLine):
        return stats
    return StatLine.from_dict(stats)


def score_full_forward(stats: StatLine) -> Tuple[int, Dict[str, int]]:
    """
    Score a Full Forward.

    Scoring:
        - Goals: 9 points each
        - Behinds: 1 point each
    """
    breakdown = {}
    goal_pts = stats.goals * 9
    if goal_pts:
        breakdown['goals'] = goal_pts
    if stats.behinds:
        breakdown['behinds'] = stats.behinds
    return goal_pts + stats.behinds, breakdown


def score_tall_forward(stats: StatLine) -> Tuple[int, Dict[str, int]]:
    """
    Score a Tall Forward.

    Scoring:
        - Goals: 6 points each
        - Marks: 2 points each
    """
    breakdown = {}
    goal_pts = stats.goals * 6
    mark_pts = stats.marks * 2
    if goal_pts:
        breakdown['goals'] = goal_pts
    if mark_pts:
        breakdown['marks'] = mark_pts
    return goal_pts + mark_pts, breakdown


def score_offensive(stats: StatLine) -> Tuple[int, Dict[str, int]]:
    """
    Score an Offensive player.

    Scoring:
        - Goals: 7 points each
        - Kicks: 1 point each
    """
    breakdown = {}
    goal_pts = stats.goals * 7
    if goal_pts:
        breakdown['goals'] = goal_pts
    if stats.kicks:
        breakdown['kicks'] = stats.kicks
    return goal_pts + stats.kicks, breakdown


def score_midfielder(stats: StatLine) -> Tuple[int, Dict[str, int]]:
    """
    Score a Midfielder.

    Scoring:
        - First 30 disposals (kicks + handballs): 1 point each
        - Every disposal beyond 30: 3 points each
    """
    breakdown = {}
    disposals = stats.disposals
    base_pts = min(disposals, MIDFIELDER_DISPOSAL_CAP)
    extra = max(0, disposals - MIDFIELDER_DISPOSAL_CAP)
    extra_pts = extra * MIDFIELDER_BONUS_MULTIPLIER
    if base_pts:
        breakdown['disposals'] = base_pts
    if extra_pts:
        breakdown['bonus_disposals'] = extra_pts
    return base_pts + extra_pts, breakdown


def score_tackler(stats: StatLine) -> Tuple[int, Dict[str, int]]:
    """
    Score a Tackler.

    Scoring:
        - Tackles: 4 points each
        - Handballs: 1 point each
    """
    breakdown = {}
    tackle_pts = stats.tackles * 4
    if tackle_pts:
        breakdown['tackles'] = tackle_pts
    if stats.handballs:
        breakdown['handballs'] = stats.handballs
    return tackle_pts + stats.handballs, breakdown


def score_ruck(stats: StatLine) -> Tuple[int, Dict[str, int]]:
    """
    Score a Ruck.

    Scoring:
        - Hitouts: 1 point each
        - Marks: 1 point each while hitouts + marks stays within 18
        - Marks past the 18 combined: 3 points each

    Hitouts always count first, so a ruck with 18+ hitouts earns the
    bonus on every mark.
    """
    breakdown = {}
    combined = stats.hitouts + stats.marks

    if combined <= RUCK_THRESHOLD:
        regular_marks = stats.marks
        bonus_marks = 0
    else:
        regular_marks = max(0, RUCK_THRESHOLD - stats.hitouts)
        bonus_marks = stats.marks - regular_marks

    bonus_pts = bonus_marks * RUCK_BONUS_MULTIPLIER
    if stats.hitouts:
        breakdown['hitouts'] = stats.hitouts
    if regular_marks:
        breakdown['marks'] = regular_marks
    if bonus_pts:
        breakdown['bonus_marks'] = bonus_pts
    return stats.hitouts + regular_marks + bonus_pts, breakdown


POSITION_SCORERS: Dict[PositionKind, Callable[[StatLine], Tuple[int, Dict[str, int]]]] = {
    PositionKind.FULL_FORWARD: score_full_forward,
    PositionKind.TALL_FORWARD: score_tall_forward,
    PositionKind.OFFENSIVE: score_offensive,
    PositionKind.MIDFIELDER: score_midfielder,
    PositionKind.TACKLER: score_tackler,
    PositionKind.RUCK: score_ruck,
}


def score_position_with_breakdown(
    position: PositionKind, stats: StatsInput
) -> Tuple[int, Dict[str, int]]:
    """
    Score a stat line under a position's rule.

    Args:
        position: Position whose rule applies
        stats: StatLine, raw stats dict, or None when the player has no stats

    Returns:
        Tuple of (points, breakdown); (0, {}) when stats are absent
    """
    stat_line = _as_stat_line(stats)
    if stat_line is None:
        return 0, {}
    return POSITION_SCORERS[position](stat_line)


def score_position(position: PositionKind, stats: StatsInput) -> int:
    """Score a stat line under a position's rule, without the breakdown."""
    points, _ = score_position_with_breakdown(position, stats)
    return points


def did_player_play(stats: StatsInput) -> bool:
    """
    Check whether a stat line shows the player took the field.

    A player who played can still score 0 in a position (a Tackler with
    only kicks), so substitution eligibility uses this check, not the score.
    """
    stat_line = _as_stat_line(stats)
    if stat_line is None:
        return False
    return any(getattr(stat_line, name) > 0 for name in STAT_FIELDS)
