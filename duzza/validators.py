"""Validation functions for rosters and team score results.

These never raise; each returns a list of messages for the caller to log.
"""

from collections import Counter

from .models import MAIN_POSITION_ORDER, Roster, TeamScoreResult


def validate_roster(team_id: str, roster: Roster) -> list[str]:
    """
    Check a roster for selections that will silently score 0 or never substitute.

    Checks:
    - Every main position has a player
    - Every bench player has a backup position
    - No player is selected in more than one slot

    Args:
        team_id: Team identifier for messages
        roster: Roster to check

    Returns:
        List of warning messages (empty if the roster is complete)
    """
    warnings = []

    empty = [slot.label for slot in roster.main_slots if not slot.player_name]
    if empty:
        warnings.append(f'{team_id} has no player at: {", ".join(empty)}')

    for slot in roster.bench_slots:
        if slot.backup_position is None:
            warnings.append(
                f'{team_id} bench player {slot.player_name} has no backup position and cannot substitute'
            )

    duplicates = sorted(name for name, count in Counter(roster.player_names()).items() if count > 1)
    if duplicates:
        warnings.append(f'{team_id} has duplicate players: {", ".join(duplicates)}')

    return warnings


def validate_team_result(team_id: str, result: TeamScoreResult) -> list[str]:
    """
    Check that a team result is internally consistent.

    Checks:
    - One result per main position, in order
    - Total equals the sum of position scores
    - Final score equals total plus dead certs
    - No replacement player used more than once

    Returns:
        List of error messages (empty if consistent)
    """
    errors = []

    positions = tuple(r.position for r in result.positions)
    if positions != MAIN_POSITION_ORDER:
        errors.append(f'{team_id} result has positions {[p.value for p in positions]}')

    position_sum = sum(r.final_score for r in result.positions)
    if position_sum != result.total_score:
        errors.append(
            f'{team_id} position scores sum to {position_sum} but total is {result.total_score}'
        )

    if result.total_score + result.dead_cert_score != result.final_score:
        errors.append(
            f'{team_id} final score {result.final_score} != total {result.total_score} '
            f'+ dead certs {result.dead_cert_score}'
        )

    reused = sorted(
        name
        for name, count in Counter(e.replacement_player for e in result.substitutions).items()
        if count > 1
    )
    if reused:
        errors.append(f'{team_id} used replacement players more than once: {", ".join(reused)}')

    return errors


def validate_round(
    rosters: dict[str, Roster],
    results: dict[str, TeamScoreResult],
) -> tuple[list[str], list[str]]:
    """
    Validate every team in a round.

    Returns:
        Tuple of (errors, warnings)
        - errors: inconsistent results, which point at a scoring bug
        - warnings: incomplete selections worth telling the coach about
    """
    errors: list[str] = []
    warnings: list[str] = []

    for team_id, roster in rosters.items():
        warnings.extend(validate_roster(team_id, roster))

    for team_id, result in results.items():
        errors.extend(validate_team_result(team_id, result))

    return errors, warnings
