"""Unit tests for building rosters from raw selections."""

import logging

import pytest

from duzza.models import (
    MAIN_POSITION_ORDER,
    PositionKind,
    ReserveGroup,
    Roster,
    StatLine,
)
from duzza.roster import (
    attach_stats,
    build_roster,
    is_bench_label,
    parse_position_label,
    parse_reserve_group,
)


class TestLabelParsing:
    """Tests for position label normalization."""

    @pytest.mark.parametrize(
        'label',
        ['Full Forward', 'FULL_FORWARD', 'full forward', 'Full-Forward', '  full   forward ', 'Forward'],
    )
    def test_full_forward_spellings(self, label):
        """Test the spellings stored by different clients all parse."""
        assert parse_position_label(label) == PositionKind.FULL_FORWARD

    def test_every_position_label_round_trips(self):
        """Test each PositionKind's display label parses back to itself."""
        for kind in PositionKind:
            assert parse_position_label(kind.value) == kind

    def test_unknown_and_empty(self):
        """Test unknown labels parse to None rather than raising."""
        assert parse_position_label('Goalkeeper') is None
        assert parse_position_label('') is None
        assert parse_position_label(None) is None

    def test_reserve_groups(self):
        """Test reserve labels in both stored formats."""
        assert parse_reserve_group('Reserve A') == ReserveGroup.RESERVE_A
        assert parse_reserve_group('RESERVE_B') == ReserveGroup.RESERVE_B
        assert parse_reserve_group('Reserve C') is None

    def test_bench_labels(self):
        """Test bench labels with and without a suffix."""
        assert is_bench_label('Bench')
        assert is_bench_label('BENCH')
        assert is_bench_label('Bench 2')
        assert not is_bench_label('Ruck')


class TestBuildRoster:
    """Tests for build_roster."""

    def test_list_of_entries(self):
        """Test the list format used by the team-selection store."""
        roster = build_roster(
            [
                {'position': 'Full Forward', 'player_name': 'Jeremy Cameron'},
                {'position': 'Ruck', 'playerName': 'Max Gawn'},
                {'position': 'Bench', 'player_name': 'Tom Hawkins', 'backup_position': 'Full Forward'},
                {'position': 'Reserve B', 'player_name': 'Zach Merrett', 'backupPosition': 'Midfielder'},
            ]
        )
        assert roster.main_slot(PositionKind.FULL_FORWARD).player_name == 'Jeremy Cameron'
        assert roster.main_slot(PositionKind.RUCK).player_name == 'Max Gawn'
        assert roster.bench_slots[0].backup_position == PositionKind.FULL_FORWARD
        assert roster.reserve_slots[0].group == ReserveGroup.RESERVE_B
        assert roster.reserve_slots[0].backup_position == PositionKind.MIDFIELDER

    def test_mapping_keyed_by_label(self):
        """Test the mapping format, where the key is the position label."""
        roster = build_roster(
            {
                'Tall Forward': {'player_name': 'Charlie Curnow'},
                'Bench': {'player_name': 'Harry McKay', 'bench_position': 'Tall Forward'},
                'Reserve A': {'player_name': 'Tim English'},
            }
        )
        assert roster.main_slot(PositionKind.TALL_FORWARD).player_name == 'Charlie Curnow'
        assert roster.bench_slots[0].backup_position == PositionKind.TALL_FORWARD
        assert roster.reserve_slots[0].backup_position is None

    def test_always_six_main_slots_in_order(self):
        """Test an empty selection still yields six empty main slots."""
        roster = build_roster([])
        assert tuple(s.position for s in roster.main_slots) == MAIN_POSITION_ORDER
        assert all(s.player_name is None for s in roster.main_slots)
        assert roster.bench_slots == ()
        assert roster.reserve_slots == ()

    def test_empty_player_names_leave_slot_empty(self):
        """Test blank or missing player names don't fill a slot."""
        roster = build_roster(
            [
                {'position': 'Midfielder', 'player_name': '   '},
                {'position': 'Tackler'},
                None,
            ]
        )
        assert roster.main_slot(PositionKind.MIDFIELDER).player_name is None
        assert roster.main_slot(PositionKind.TACKLER).player_name is None

    def test_unknown_position_skipped(self, caplog):
        """Test an unknown label is logged and skipped, not raised."""
        with caplog.at_level(logging.WARNING, logger='duzza.roster'):
            roster = build_roster([{'position': 'Goalkeeper', 'player_name': 'Nobody'}])
        assert 'Nobody' not in roster.player_names()
        assert 'Goalkeeper' in caplog.text

    def test_malformed_entry_skipped(self):
        """Test entries that aren't dicts are skipped."""
        roster = build_roster([['Full Forward', 'Someone'], {'position': 'Ruck', 'player_name': 'Max Gawn'}])
        assert roster.player_names() == ['Max Gawn']

    def test_duplicate_main_position_first_wins(self, caplog):
        """Test the first player listed at a position keeps it."""
        with caplog.at_level(logging.WARNING, logger='duzza.roster'):
            roster = build_roster(
                [
                    {'position': 'Ruck', 'player_name': 'Max Gawn'},
                    {'position': 'RUCK', 'player_name': 'Brodie Grundy'},
                ]
            )
        assert roster.main_slot(PositionKind.RUCK).player_name == 'Max Gawn'
        assert 'Brodie Grundy' not in roster.player_names()
        assert 'Duplicate' in caplog.text

    def test_duplicate_reserve_group_first_wins(self):
        """Test only one slot per reserve group is kept."""
        roster = build_roster(
            [
                {'position': 'Reserve A', 'player_name': 'First'},
                {'position': 'Reserve A', 'player_name': 'Second'},
            ]
        )
        assert [s.player_name for s in roster.reserve_slots] == ['First']

    def test_multiple_bench_slots_keep_order(self):
        """Test bench slots keep their listed order."""
        roster = build_roster(
            [
                {'position': 'Bench', 'player_name': 'A', 'backup_position': 'Ruck'},
                {'position': 'Bench', 'player_name': 'B', 'backup_position': 'Ruck'},
            ]
        )
        assert [s.player_name for s in roster.bench_slots] == ['A', 'B']

    def test_unknown_backup_position(self):
        """Test an unparseable backup position leaves the bench slot without one."""
        roster = build_roster([{'position': 'Bench', 'player_name': 'A', 'backup_position': 'Sweeper'}])
        assert roster.bench_slots[0].backup_position is None


class TestAttachStats:
    """Tests for attaching stats to a roster."""

    def test_stats_attached_by_name(self):
        """Test stats are matched by player name, dicts converted to StatLine."""
        roster = build_roster(
            [
                {'position': 'Full Forward', 'player_name': 'A'},
                {'position': 'Bench', 'player_name': 'B', 'backup_position': 'Ruck'},
            ],
            {'A': {'goals': 2}, 'B': StatLine(hitouts=20)},
        )
        assert roster.main_slot(PositionKind.FULL_FORWARD).stats == StatLine(goals=2)
        assert roster.bench_slots[0].stats == StatLine(hitouts=20)

    def test_missing_player_has_no_stats(self):
        """Test players absent from the stats map get None."""
        roster = build_roster([{'position': 'Ruck', 'player_name': 'Ghost'}], {})
        assert roster.main_slot(PositionKind.RUCK).stats is None

    def test_input_roster_not_modified(self):
        """Test attach_stats returns a new roster."""
        roster = build_roster([{'position': 'Ruck', 'player_name': 'A'}])
        attached = attach_stats(roster, {'A': StatLine(hitouts=5)})
        assert roster.main_slot(PositionKind.RUCK).stats is None
        assert attached.main_slot(PositionKind.RUCK).stats == StatLine(hitouts=5)
        assert isinstance(attached, Roster)
