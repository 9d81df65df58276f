from .models import (
    PositionKind,
    ReserveGroup,
    StatLine,
    MainSlot,
    BenchSlot,
    ReserveSlot,
    Roster,
    SubstitutionEvent,
    PositionResult,
    UnusedReplacement,
    TeamScoreResult,
)
from .scoring import (
    score_full_forward,
    score_tall_forward,
    score_offensive,
    score_midfielder,
    score_tackler,
    score_ruck,
    score_position,
    score_position_with_breakdown,
    did_player_play,
)
from .roster import build_roster, attach_stats, parse_position_label
from .resolver import resolve_substitutions
from .team_score import compute_team_score, score_team_selection
from .round_scorer import RoundScorer
from .stats_loader import RoundStatsLoader, load_round_stats
from .json_scorer import (
    load_round_selections,
    load_dead_cert_scores,
    score_round_from_json,
    save_round_scores,
)

__all__ = [
    # Models
    'PositionKind',
    'ReserveGroup',
    'StatLine',
    'MainSlot',
    'BenchSlot',
    'ReserveSlot',
    'Roster',
    'SubstitutionEvent',
    'PositionResult',
    'UnusedReplacement',
    'TeamScoreResult',
    # Scoring functions
    'score_full_forward',
    'score_tall_forward',
    'score_offensive',
    'score_midfielder',
    'score_tackler',
    'score_ruck',
    'score_position',
    'score_position_with_breakdown',
    'did_player_play',
    # Rosters and substitutions
    'build_roster',
    'attach_stats',
    'parse_position_label',
    'resolve_substitutions',
    'compute_team_score',
    'score_team_selection',
    # Round scoring
    'RoundScorer',
    'RoundStatsLoader',
    'load_round_stats',
    # JSON-based
    'load_round_selections',
    'load_dead_cert_scores',
    'score_round_from_json',
    'save_round_scores',
]
