# =============================================================================
# STAT ASSUMPTIONS - competitive defaults used when real stats are unknown
# =============================================================================
ASSUMED_LEVEL = 100
ASSUMED_EV = 252
ASSUMED_IV = 31
NEUTRAL_NATURE = 1.0

# Speed ranges: slowest plausible spread vs fastest plausible spread
MIN_SPEED_EV = 0
MIN_SPEED_NATURE = 0.9
MAX_SPEED_EV = 252
MAX_SPEED_NATURE = 1.1

# =============================================================================
# POKEMON STATS - indices into RosterEntry.statStages
# =============================================================================
STAT_HP = 0
STAT_ATK = 1
STAT_DEF = 2
STAT_SPATK = 3
STAT_SPDEF = 4
STAT_SPEED = 5
NUM_STATS = 6

# Keys used by observed stat readings (tooltips) and narration
STAT_KEYS = {
    STAT_HP: "hp",
    STAT_ATK: "atk",
    STAT_DEF: "def",
    STAT_SPATK: "spa",
    STAT_SPDEF: "spd",
    STAT_SPEED: "spe",
}

MIN_BOOST_STAGE = -6
DEFAULT_BOOST_STAGE = 0
MAX_BOOST_STAGE = 6

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0  # immune
TYPE_MUL_NOT_EFFECTIVE = 0.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_SUPER_EFFECTIVE = 2.0


# =============================================================================
# ROSTER & FIELD LIMITS
# =============================================================================
MAX_TEAM_SIZE = 6
MAX_HP_PERCENT = 100.0
MAX_SPIKES_LAYERS = 3
MAX_TOXIC_SPIKES_LAYERS = 2

# Names shorter than this after cleanup are UI debris, not creatures
MIN_NAME_LENGTH = 3

# Out-of-order narration lines held back before a gap is given up on
LOG_BACKLOG_LIMIT = 50

# =============================================================================
# DAMAGE ESTIMATION
# =============================================================================
RANDOM_ROLL_MIN_PERCENT = 85
FALLBACK_STAT = 200
FALLBACK_MAX_HP = 400
FULL_HP_THRESHOLD = 99.0  # Multiscale-style abilities count as "undamaged" above this

# Low Kick / Grass Knot power by target weight (kg), ascending thresholds
WEIGHT_POWER_TABLE = [
    (10.0, 20),
    (25.0, 40),
    (50.0, 60),
    (100.0, 80),
    (200.0, 100),
]
WEIGHT_POWER_MAX = 120
WEIGHT_POWER_FALLBACK = 60

# =============================================================================
# ARCHETYPE CLASSIFICATION
# =============================================================================
FAST_BASE_SPEED = 100  # strictly greater counts as fast
BULKY_STAT_SUM = 280  # hp + def + spdef strictly greater counts as bulky
HO_MIN_FAST_MEMBERS = 3
HO_MIN_SETUP_SIGHTINGS = 2
STALL_MIN_RECOVERY_SIGHTINGS = 3
STALL_MIN_BULKY_MEMBERS = 3

# =============================================================================
# SWITCH PREDICTION
# =============================================================================
SWITCH_WEIGHT_TYPE_DISADVANTAGE = 40
SWITCH_LOW_HP_THRESHOLD = 30.0
SWITCH_WEIGHT_LOW_HP_WITH_COUNTER = 25
SWITCH_WEIGHT_LOW_HP_NO_COUNTER = 15
SWITCH_WEIGHT_STALL = 10
SWITCH_WEIGHT_HYPER_OFFENSE = -5
SWITCH_WEIGHT_RESISTED = -20
SWITCH_WEIGHT_NO_BENCH_ANSWER = -15
SWITCH_HIGH_THRESHOLD = 40
SWITCH_MEDIUM_THRESHOLD = 20
SWITCH_SCORE_MIN = 0
SWITCH_SCORE_MAX = 100

# =============================================================================
# OPPONENT MOVE PREDICTION
# =============================================================================
MAX_MON_MOVES = 4
PREDICTION_BASE_SCORE = 25
PREDICTION_HEAVY_DAMAGE = 70
PREDICTION_WEIGHT_HEAVY_DAMAGE = 30
PREDICTION_SOLID_DAMAGE = 40
PREDICTION_WEIGHT_SOLID_DAMAGE = 15
PREDICTION_WEIGHT_STAB = 10
PREDICTION_WEIGHT_SUPER_EFFECTIVE = 20
PREDICTION_WEIGHT_RESISTED = -20
PREDICTION_WEIGHT_IMMUNE = -50
PREDICTION_RECOVERY_HP_THRESHOLD = 50.0
PREDICTION_WEIGHT_RECOVERY = 25
PREDICTION_WEIGHT_SAFE_SETUP = 15
PREDICTION_WEIGHT_THREATENED_SETUP = -10
PREDICTION_WEIGHT_STATUS_OPEN = 5
PREDICTION_WEIGHT_STATUS_REDUNDANT = -15
PREDICTION_SCORE_MIN = 5
PREDICTION_SCORE_MAX = 95

# =============================================================================
# MOVE RECOMMENDATION
# =============================================================================
RECOMMEND_WEIGHT_GUARANTEED_KO = 50
RECOMMEND_WEIGHT_POSSIBLE_KO = 30
RECOMMEND_WEIGHT_PIVOT = 25
RECOMMEND_WEIGHT_COVERAGE = 10
RECOMMEND_WEIGHT_PRIORITY_KO = 40
RECOMMEND_WEIGHT_PRIORITY = 10
RECOMMEND_SAFE_SETUP_DAMAGE = 35
RECOMMEND_WEIGHT_SAFE_SETUP = 20
RECOMMEND_WEIGHT_UNSAFE_SETUP = -10
RECOMMEND_RECOVERY_HP_THRESHOLD = 50.0
RECOMMEND_SAFE_RECOVERY_DAMAGE = 40
RECOMMEND_WEIGHT_RECOVERY = 15
RECOMMEND_EARLY_HAZARD_TURN = 3
RECOMMEND_WEIGHT_HAZARD = 10
RECOMMEND_IMMUNE_SCORE = -50

# =============================================================================
# SWITCH RECOMMENDATION
# =============================================================================
SWITCH_IN_BASE_SCORE = 50
SWITCH_IN_WEIGHT_KO = 40
SWITCH_IN_SIGNIFICANT_DAMAGE = 50
SWITCH_IN_WEIGHT_SIGNIFICANT = 25
SWITCH_IN_DECENT_DAMAGE = 30
SWITCH_IN_WEIGHT_DECENT = 10
SWITCH_IN_WEIGHT_WEAK_OFFENSE = -10

# Forced switch (active fainted): entry is free, speed dominates
FORCED_WEIGHT_FASTER = 30
FORCED_WEIGHT_SLOWER = -15
FORCED_OHKO_RISK_DAMAGE = 80
FORCED_WEIGHT_OHKO_RISK = -30
FORCED_WALL_DAMAGE = 30
FORCED_WEIGHT_WALLS = 15

# Voluntary switch: the switch-in takes a hit, incoming damage dominates
VOLUNTARY_RESIST_DAMAGE = 25
VOLUNTARY_WEIGHT_RESISTS = 40
VOLUNTARY_MODERATE_DAMAGE = 50
VOLUNTARY_WEIGHT_MODERATE = 10
VOLUNTARY_WEIGHT_HEAVY = -30
VOLUNTARY_WEIGHT_FASTER = 10

SWITCH_IN_WEIGHT_WEAK_TO_STAB = -20
SWITCH_IN_WEIGHT_RESISTS_STAB = 15

# A switch must beat the best move by this much to be preferred
SWITCH_PREFERENCE_MARGIN = 20
