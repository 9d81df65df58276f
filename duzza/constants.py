"""Constants and mappings for the Duzza fantasy league."""

# Stat counters tracked per player per round
STAT_FIELDS = (
    'kicks',
    'handballs',
    'marks',
    'tackles',
    'hitouts',
    'goals',
    'behinds',
)

# Midfielder: disposals beyond the cap score triple
MIDFIELDER_DISPOSAL_CAP = 30
MIDFIELDER_BONUS_MULTIPLIER = 3

# Ruck: marks beyond the hitouts + marks threshold score triple
RUCK_THRESHOLD = 18
RUCK_BONUS_MULTIPLIER = 3

# Slot labels for non-main positions
BENCH_LABEL = 'Bench'
RESERVE_A_LABEL = 'Reserve A'
RESERVE_B_LABEL = 'Reserve B'

# Older selections used 'Forward' before the position was renamed
POSITION_ALIASES = {
    'FORWARD': 'FULL_FORWARD',
    'FF': 'FULL_FORWARD',
    'TF': 'TALL_FORWARD',
    'MID': 'MIDFIELDER',
}

# Team names by team id (fallback when league_config.json has none)
TEAM_NAMES = {
    '1': 'Scrennys Soldiers',
    '2': 'Scotts Tots',
    '3': 'ROBbed',
    '4': 'Le Mallards',
    '5': 'Clarries Cookers',
    '6': 'Balls Deep Briz',
    '7': 'Strings Souvlakis',
    '8': 'Cutsys Cucks',
}
