"""Build rosters from raw team selections.

Team selections arrive as stored by the team-selection page: position
labels in whatever case and spacing the client used, an optional backup
position for bench and reserve players, and gaps wherever a coach has not
picked a player yet. This module turns them into a Roster the resolver can
trust, so the scoring core never sees a label string.

Nothing here raises on bad selection data. Unknown labels and malformed
entries are logged and skipped, and a position with nobody in it stays an
empty MainSlot that scores 0.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any, Optional, Union

from pydantic import ValidationError

from .constants import BENCH_LABEL, POSITION_ALIASES
from .models import (
    MAIN_POSITION_ORDER,
    BenchSlot,
    MainSlot,
    PositionKind,
    ReserveGroup,
    ReserveSlot,
    Roster,
    StatLine,
)
from .schemas import SelectionEntry

logger = logging.getLogger('duzza.roster')

Selections = Union[Mapping[str, Any], Iterable[Any]]
StatsMap = Mapping[str, Union[StatLine, dict, None]]

_POSITIONS_BY_KEY = {kind.name: kind for kind in PositionKind}
_RESERVES_BY_KEY = {group.name: group for group in ReserveGroup}


def normalize_label(label: str) -> str:
    """Upper-case a label and join its words with underscores ('full forward' -> 'FULL_FORWARD')."""
    return re.sub(r'[\s\-_]+', '_', label.strip()).upper()


def parse_position_label(label: Optional[str]) -> Optional[PositionKind]:
    """
    Parse a main position label.

    Args:
        label: Label such as 'Full Forward', 'FULL_FORWARD' or 'Forward'

    Returns:
        Matching PositionKind, or None if the label is not a main position
    """
    if not label:
        return None
    key = normalize_label(label)
    key = POSITION_ALIASES.get(key, key)
    return _POSITIONS_BY_KEY.get(key)


def parse_reserve_group(label: Optional[str]) -> Optional[ReserveGroup]:
    """Parse 'Reserve A' / 'RESERVE_B' style labels."""
    if not label:
        return None
    return _RESERVES_BY_KEY.get(normalize_label(label))


def is_bench_label(label: Optional[str]) -> bool:
    """Bench labels may carry a suffix ('Bench', 'BENCH', 'Bench 2')."""
    if not label:
        return False
    return normalize_label(label).startswith(normalize_label(BENCH_LABEL))


def _iter_entries(selections: Selections):
    if isinstance(selections, Mapping):
        yield from selections.items()
    else:
        for raw in selections:
            yield None, raw


def _to_stat_line(stats: Union[StatLine, dict, None]) -> Optional[StatLine]:
    if stats is None or isinstance(stats, StatLine):
        return stats
    return StatLine.from_dict(stats)


def build_roster(selections: Selections, stats_by_player_name: Optional[StatsMap] = None) -> Roster:
    """
    Build a Roster from raw selection entries.

    Args:
        selections: Either a mapping of position label -> entry, or a list of
            entries that carry their own 'position'. Entries are dicts with
            'player_name' (or 'playerName') and optionally 'backup_position'
            (or 'backupPosition' / 'bench_position').
        stats_by_player_name: Optional stats to attach to every slot

    Returns:
        Roster with exactly one MainSlot per position. The first entry with a
        player wins a main position; later duplicates are ignored.
    """
    mains: dict[PositionKind, MainSlot] = {}
    bench: list[BenchSlot] = []
    reserves: dict[ReserveGroup, ReserveSlot] = {}

    for key, raw in _iter_entries(selections):
        if raw is None:
            continue
        try:
            entry = SelectionEntry.model_validate(raw)
        except ValidationError as e:
            logger.warning(f'Skipping malformed selection entry {raw!r}: {e}')
            continue

        label = entry.position or key
        if not entry.player_name:
            logger.debug(f'No player selected for {label}')
            continue

        kind = parse_position_label(label)
        if kind is not None:
            if kind in mains:
                logger.warning(
                    f'Duplicate selection for {kind.value}: keeping {mains[kind].player_name}, '
                    f'ignoring {entry.player_name}'
                )
                continue
            mains[kind] = MainSlot(kind, entry.player_name)
            continue

        backup = parse_position_label(entry.backup_position)
        if entry.backup_position and backup is None:
            logger.warning(
                f'Unknown backup position {entry.backup_position!r} for {entry.player_name}'
            )

        if is_bench_label(label):
            bench.append(BenchSlot(entry.player_name, backup))
            continue

        group = parse_reserve_group(label)
        if group is not None:
            if group in reserves:
                logger.warning(
                    f'Duplicate selection for {group.value}: keeping {reserves[group].player_name}, '
                    f'ignoring {entry.player_name}'
                )
                continue
            reserves[group] = ReserveSlot(entry.player_name, group, backup)
            continue

        logger.warning(f'Unknown position {label!r} for {entry.player_name}; skipping')

    roster = Roster(
        main_slots=tuple(mains.get(kind, MainSlot(kind)) for kind in MAIN_POSITION_ORDER),
        bench_slots=tuple(bench),
        reserve_slots=tuple(reserves.values()),
    )
    if stats_by_player_name is not None:
        roster = attach_stats(roster, stats_by_player_name)
    return roster


def attach_stats(roster: Roster, stats_by_player_name: StatsMap) -> Roster:
    """
    Return a copy of the roster with each slot's StatLine looked up by player name.

    Players missing from the map (or mapped to None) get no stats, which the
    engine treats as did-not-play. The input roster is not modified.
    """

    def lookup(name: Optional[str]) -> Optional[StatLine]:
        if not name:
            return None
        return _to_stat_line(stats_by_player_name.get(name))

    return Roster(
        main_slots=tuple(replace(s, stats=lookup(s.player_name)) for s in roster.main_slots),
        bench_slots=tuple(replace(s, stats=lookup(s.player_name)) for s in roster.bench_slots),
        reserve_slots=tuple(replace(s, stats=lookup(s.player_name)) for s in roster.reserve_slots),
    )
