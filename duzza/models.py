"""Data models for the Duzza scoring engine."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .constants import BENCH_LABEL, RESERVE_A_LABEL, RESERVE_B_LABEL, STAT_FIELDS


class PositionKind(str, Enum):
    """The six main positions. Definition order is substitution priority."""
    FULL_FORWARD = 'Full Forward'
    TALL_FORWARD = 'Tall Forward'
    OFFENSIVE = 'Offensive'
    MIDFIELDER = 'Midfielder'
    TACKLER = 'Tackler'
    RUCK = 'Ruck'


MAIN_POSITION_ORDER: Tuple[PositionKind, ...] = tuple(PositionKind)


class ReserveGroup(str, Enum):
    """Reserve slots, each covering a group of three main positions."""
    RESERVE_A = RESERVE_A_LABEL
    RESERVE_B = RESERVE_B_LABEL

    @property
    def positions(self) -> Tuple[PositionKind, ...]:
        return RESERVE_GROUP_POSITIONS[self]

    def covers(self, position: PositionKind) -> bool:
        return position in RESERVE_GROUP_POSITIONS[self]


RESERVE_GROUP_POSITIONS: Dict[ReserveGroup, Tuple[PositionKind, ...]] = {
    ReserveGroup.RESERVE_A: (
        PositionKind.FULL_FORWARD,
        PositionKind.TALL_FORWARD,
        PositionKind.RUCK,
    ),
    ReserveGroup.RESERVE_B: (
        PositionKind.OFFENSIVE,
        PositionKind.MIDFIELDER,
        PositionKind.TACKLER,
    ),
}


@dataclass(frozen=True)
class StatLine:
    """A player's counting stats for one round."""
    kicks: int = 0
    handballs: int = 0
    marks: int = 0
    tackles: int = 0
    hitouts: int = 0
    goals: int = 0
    behinds: int = 0

    @property
    def disposals(self) -> int:
        return self.kicks + self.handballs

    @classmethod
    def from_dict(cls, stats: dict) -> 'StatLine':
        """Build from a stats row, ignoring unknown keys and reading None or NaN as 0."""
        return cls(**{name: _read_count(stats.get(name)) for name in STAT_FIELDS})


def _read_count(value) -> int:
    # Blank cells arrive as None from JSON and as NaN from pandas-style exports
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0
    return int(value)


@dataclass(frozen=True)
class MainSlot:
    """A main position; the player may be unassigned."""
    position: PositionKind
    player_name: Optional[str] = None
    stats: Optional[StatLine] = None

    @property
    def label(self) -> str:
        return self.position.value


@dataclass(frozen=True)
class BenchSlot:
    """A bench player nominated to cover one main position."""
    player_name: str
    backup_position: Optional[PositionKind] = None
    stats: Optional[StatLine] = None

    @property
    def label(self) -> str:
        return BENCH_LABEL


@dataclass(frozen=True)
class ReserveSlot:
    """A reserve player covering its group, or its declared backup position."""
    player_name: str
    group: ReserveGroup
    backup_position: Optional[PositionKind] = None
    stats: Optional[StatLine] = None

    @property
    def label(self) -> str:
        return self.group.value


@dataclass(frozen=True)
class Roster:
    """A team's selection for one round.

    main_slots always holds one slot per PositionKind, in MAIN_POSITION_ORDER.
    """
    main_slots: Tuple[MainSlot, ...] = tuple(MainSlot(kind) for kind in MAIN_POSITION_ORDER)
    bench_slots: Tuple[BenchSlot, ...] = ()
    reserve_slots: Tuple[ReserveSlot, ...] = ()

    def main_slot(self, position: PositionKind) -> MainSlot:
        for slot in self.main_slots:
            if slot.position == position:
                return slot
        return MainSlot(position)

    def player_names(self) -> List[str]:
        """All assigned player names, in slot order."""
        names = [s.player_name for s in self.main_slots if s.player_name]
        names.extend(s.player_name for s in self.bench_slots if s.player_name)
        names.extend(s.player_name for s in self.reserve_slots if s.player_name)
        return names


@dataclass(frozen=True)
class SubstitutionEvent:
    """One replacement of a starter by a bench or reserve player."""
    position: PositionKind
    original_player: Optional[str]
    original_score: int
    replacement_player: str
    replacement_score: int
    replacement_kind: str  # 'Bench', a reserve group label, or a backup position label


@dataclass
class PositionResult:
    """Container for a main position's final outcome."""
    position: PositionKind
    starting_player: Optional[str]
    final_player: Optional[str]
    final_score: int = 0
    original_score: int = 0
    was_substituted: bool = False
    substitution_kind: Optional[str] = None
    played: bool = False  # whether the starter took the field
    breakdown: Dict[str, int] = field(default_factory=dict)


@dataclass
class UnusedReplacement:
    """A bench or reserve player who played but was not needed."""
    player_name: str
    slot_label: str
    position: Optional[PositionKind]
    score: int = 0


@dataclass
class TeamScoreResult:
    """Container for a team's scored round."""
    positions: List[PositionResult] = field(default_factory=list)
    substitutions: List[SubstitutionEvent] = field(default_factory=list)
    unused: List[UnusedReplacement] = field(default_factory=list)
    total_score: int = 0
    dead_cert_score: int = 0
    final_score: int = 0
    reserve_substitutions_enabled: bool = False

    def position(self, kind: PositionKind) -> Optional[PositionResult]:
        for result in self.positions:
            if result.position == kind:
                return result
        return None
