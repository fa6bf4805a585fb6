"""
Football career constants: positions, personalities, training tables, honours weights.
Positions, scales, and lookup tables shared by the training, season, transfer, and scoring engines.
"""
from typing import Dict

# Positions (detailed); the primary position decides eligible training types and stat rates
POSITIONS = [
    "GK",
    "LWB", "LB", "CB", "RB", "RWB",
    "CDM", "LM", "CM", "RM", "CAM",
    "LW", "CF", "RW", "ST",
]

POSITIONS_DEFENDER = ["LWB", "LB", "CB", "RB", "RWB"]
POSITIONS_MIDFIELDER = ["CDM", "LM", "CM", "RM", "CAM"]
POSITIONS_ATTACKER = ["LW", "CF", "RW", "ST"]
FIELD_POSITIONS = POSITIONS_DEFENDER + POSITIONS_MIDFIELDER + POSITIONS_ATTACKER

# Attributes 1-99. Outfield players use the first six; goalkeepers add the GK block.
OUTFIELD_ATTRIBUTES: tuple[str, ...] = (
    "pace", "shooting", "passing", "dribbling", "defending", "physical",
)
GOALKEEPER_ATTRIBUTES: tuple[str, ...] = (
    "diving", "handling", "reflexes", "positioning",
)
ALL_ATTRIBUTES: tuple[str, ...] = OUTFIELD_ATTRIBUTES + GOALKEEPER_ATTRIBUTES

ATTRIBUTE_MIN = 1
ATTRIBUTE_MAX = 99

# Overall = weighted sum of attributes for the position (weights sum to 1.0)
_ATTACKER_WEIGHTS = {"pace": 0.22, "shooting": 0.34, "passing": 0.10, "dribbling": 0.22, "defending": 0.02, "physical": 0.10}
_WINGER_WEIGHTS = {"pace": 0.30, "shooting": 0.20, "passing": 0.16, "dribbling": 0.28, "defending": 0.02, "physical": 0.04}
_AM_WEIGHTS = {"pace": 0.12, "shooting": 0.20, "passing": 0.32, "dribbling": 0.30, "defending": 0.02, "physical": 0.04}
_CM_WEIGHTS = {"pace": 0.10, "shooting": 0.12, "passing": 0.34, "dribbling": 0.20, "defending": 0.14, "physical": 0.10}
_WIDE_MID_WEIGHTS = {"pace": 0.24, "shooting": 0.14, "passing": 0.26, "dribbling": 0.24, "defending": 0.06, "physical": 0.06}
_DM_WEIGHTS = {"pace": 0.06, "shooting": 0.04, "passing": 0.26, "dribbling": 0.08, "defending": 0.36, "physical": 0.20}
_FULLBACK_WEIGHTS = {"pace": 0.26, "shooting": 0.02, "passing": 0.18, "dribbling": 0.10, "defending": 0.32, "physical": 0.12}
_CB_WEIGHTS = {"pace": 0.10, "shooting": 0.00, "passing": 0.08, "dribbling": 0.02, "defending": 0.52, "physical": 0.28}
_GK_WEIGHTS = {"diving": 0.26, "handling": 0.22, "reflexes": 0.30, "positioning": 0.22}

POSITION_OVERALL_WEIGHTS: Dict[str, Dict[str, float]] = {
    "ST": _ATTACKER_WEIGHTS,
    "CF": _ATTACKER_WEIGHTS,
    "LW": _WINGER_WEIGHTS,
    "RW": _WINGER_WEIGHTS,
    "CAM": _AM_WEIGHTS,
    "CM": _CM_WEIGHTS,
    "LM": _WIDE_MID_WEIGHTS,
    "RM": _WIDE_MID_WEIGHTS,
    "CDM": _DM_WEIGHTS,
    "LB": _FULLBACK_WEIGHTS,
    "RB": _FULLBACK_WEIGHTS,
    "LWB": _FULLBACK_WEIGHTS,
    "RWB": _FULLBACK_WEIGHTS,
    "CB": _CB_WEIGHTS,
    "GK": _GK_WEIGHTS,
}

# Ordered scales (index arithmetic moves up/down a step)
MORALE_LEVELS = ["Very Low", "Low", "Normal", "High", "Very High"]

PERSONALITIES = [
    "Ambitious", "Lazy", "Professional", "Temperamental", "Loyal",
    "Determined", "Media Darling", "Reserved", "Inconsistent", "Leader",
]

TACTICS = ["Attacking", "Defensive", "Balanced", "Possession", "Direct", "Counter", "High Press"]

SQUAD_STATUSES = ["Key Player", "Rotation", "Prospect", "Reserve", "Surplus", "Captain"]

AGENT_TIERS = ["Rookie", "Average", "Good", "Super Agent"]

CAREER_MODES = ("dynamic", "tactical")

# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

# Fatigue from simultaneous focuses: index = session position among concurrent sessions
MULTI_SESSION_PENALTY: tuple[float, ...] = (1.0, 0.6, 0.3, 0.1, 0.05)

MAX_TRAINING_SLOTS = 5

INTENSITY_LEVELS = ("low", "medium", "high", "extreme")

# intensity -> (effectiveness, injury_risk, fatigue, cost_multiplier)
INTENSITY_MODIFIERS: Dict[str, Dict[str, float]] = {
    "low": {"effectiveness": 0.6, "injury_risk": 0.02, "fatigue": 5, "cost": 0.5},
    "medium": {"effectiveness": 1.0, "injury_risk": 0.05, "fatigue": 15, "cost": 1.0},
    "high": {"effectiveness": 1.3, "injury_risk": 0.12, "fatigue": 30, "cost": 1.5},
    "extreme": {"effectiveness": 1.6, "injury_risk": 0.25, "fatigue": 50, "cost": 2.0},
}

# Category multiplier on attribute gains
TRAINING_CATEGORY_MULTIPLIERS: Dict[str, float] = {
    "specific_competitive": 1.15,
    "specific_simple": 1.05,
    "general": 1.0,
    "recovery": 0.5,
}

# Age -> learning speed (upper bound inclusive, factor); anything older uses AGE_FACTOR_FLOOR
AGE_FACTOR_TABLE: tuple[tuple[int, float], ...] = (
    (17, 1.30), (20, 1.20), (23, 1.10), (26, 1.00), (29, 0.90), (31, 0.70),
    (33, 0.50), (35, 0.30), (37, 0.15), (39, 0.08), (41, 0.04),
)
AGE_FACTOR_FLOOR = 0.02

# Average infrastructure level -> effectiveness bonus (threshold, bonus), highest first
INFRASTRUCTURE_BONUS_TABLE: tuple[tuple[float, float], ...] = (
    (4.8, 0.25), (4.5, 0.20), (4.0, 0.15), (3.5, 0.11), (3.0, 0.08),
    (2.5, 0.05), (2.0, 0.03), (1.5, 0.01),
)

# League tier -> club training facilities (1-5)
INFRASTRUCTURE_BY_LEAGUE_TIER: Dict[int, int] = {1: 5, 2: 4, 3: 3, 4: 2, 5: 1}

# Infrastructure level -> base concurrent training slots
BASE_TRAINING_SLOTS: Dict[int, int] = {1: 2, 2: 2, 3: 3, 4: 3, 5: 4}

TRAINER_TIER_ORDER = ["basic", "standard", "premium", "elite", "worldClass"]

# tier -> (cost_per_week, effectiveness_bonus, specialties, injury_reduction, extra_slot)
TRAINER_TIERS: Dict[str, Dict] = {
    "basic": {
        "cost_per_week": 2000,
        "effectiveness_bonus": 0.0,
        "specialties": (),
        "injury_reduction": 0.0,
        "extra_slot": 0,
    },
    "standard": {
        "cost_per_week": 10000,
        "effectiveness_bonus": 0.1,
        "specialties": ("balanced",),
        "injury_reduction": 0.05,
        "extra_slot": 0,
    },
    "premium": {
        "cost_per_week": 35000,
        "effectiveness_bonus": 0.2,
        "specialties": ("shooting", "playmaking", "skillMoves"),
        "injury_reduction": 0.1,
        "extra_slot": 0,
    },
    "elite": {
        "cost_per_week": 100000,
        "effectiveness_bonus": 0.35,
        "specialties": ("shooting", "playmaking", "skillMoves", "gym", "marking"),
        "injury_reduction": 0.2,
        "extra_slot": 1,
    },
    "worldClass": {
        "cost_per_week": 250000,
        "effectiveness_bonus": 0.5,
        "specialties": ("shooting", "playmaking", "skillMoves", "gym", "marking", "gkReflexes"),
        "injury_reduction": 0.3,
        "extra_slot": 1,
    },
}

AGENT_TRAINING_BONUS: Dict[str, float] = {
    "Super Agent": 0.06, "Good": 0.04, "Average": 0.02, "Rookie": 0.01,
}
MORALE_TRAINING_FACTOR: Dict[str, float] = {
    "Very High": 1.05, "High": 1.02, "Normal": 1.0, "Low": 0.95, "Very Low": 0.85,
}
PERSONALITY_TRAINING_FACTOR: Dict[str, float] = {
    "Professional": 1.05, "Ambitious": 1.03, "Determined": 1.03, "Lazy": 0.92,
}

_FIELD = tuple(FIELD_POSITIONS)
_ALL = tuple(POSITIONS)
_STRIKERS = ("ST", "CF")
_WIDE = ("LW", "RW", "LM", "RM", "LWB", "RWB", "LB", "RB")
_FULLBACKS = ("LB", "RB", "LWB", "RWB")
_ATTACKING = ("ST", "CF", "LW", "RW", "CAM", "CM", "LM", "RM")

# id -> (category, primary, secondary, penalty, cost_multiplier, duration_weeks, positions)
TRAINING_TYPES: Dict[str, tuple] = {
    "clubTraining": ("general", (), ("pace", "shooting", "passing", "dribbling", "defending"), (), 0.0, 4, _ALL),
    "balanced": ("general", (), ("pace", "shooting", "passing", "dribbling", "defending"), (), 1.0, 4, _ALL),
    "scrimmage": ("specific_competitive", ("passing", "dribbling"), ("shooting", "defending", "pace"), (), 0.6, 4, _FIELD),
    "activeRest": ("recovery", (), ("physical",), (), 0.4, 1, _ALL),
    "sprints": ("general", ("pace",), (), (), 1.0, 4, _FIELD),
    "endurance": ("general", ("physical",), ("pace", "defending"), (), 0.9, 5, _FIELD),
    "explosiveness": ("general", ("pace",), ("shooting", "physical"), (), 1.3, 4, ("ST", "CF", "LW", "RW", "CAM", "LM", "RM") + _FULLBACKS),
    "gym": ("general", ("physical", "defending"), ("shooting", "pace"), ("dribbling",), 1.2, 6, _ALL),
    "agility": ("general", ("pace", "dribbling"), (), (), 1.1, 4, _ALL),
    "flexibility": ("recovery", (), ("pace", "dribbling"), (), 0.5, 2, _ALL),
    "shooting": ("specific_simple", ("shooting",), ("pace",), ("defending",), 1.2, 4, _ATTACKING),
    "longshots": ("specific_simple", ("shooting",), ("passing",), (), 1.3, 4, ("ST", "CF", "CAM", "CM", "CDM", "LM", "RM")),
    "playmaking": ("specific_simple", ("passing",), ("dribbling",), ("defending",), 1.0, 4, ("CAM", "CM", "CDM", "CF")),
    "crossing": ("specific_simple", ("passing",), ("pace",), (), 1.1, 4, _WIDE),
    "heading": ("specific_simple", ("shooting", "defending"), ("physical",), (), 1.0, 4, ("ST", "CF", "CB", "CDM")),
    "setpieces": ("specific_simple", ("shooting", "passing"), (), (), 1.0, 3, _FIELD),
    "skillMoves": ("specific_simple", ("dribbling",), ("pace",), (), 1.4, 4, ("ST", "CF", "LW", "RW", "CAM", "LM", "RM")),
    "firstTouch": ("specific_simple", ("dribbling",), ("passing",), (), 1.2, 4, _ATTACKING),
    "weakFoot": ("specific_simple", ("shooting", "passing", "dribbling"), (), (), 1.5, 6, _FIELD),
    "positioning": ("specific_competitive", ("shooting",), ("pace",), (), 1.1, 4, ("ST", "CF", "LW", "RW", "CAM")),
    "marking": ("specific_competitive", ("defending",), ("pace",), ("dribbling",), 1.0, 4, ("CB", "CDM") + _FULLBACKS),
    "pressing": ("specific_competitive", ("defending", "pace"), ("physical",), (), 1.0, 4, _FIELD),
    "counterAttack": ("specific_competitive", ("pace",), ("passing", "dribbling"), (), 1.1, 4, _ATTACKING),
    "poacher": ("specific_competitive", ("shooting",), ("pace",), ("passing",), 1.4, 5, _STRIKERS),
    "targetMan": ("specific_competitive", ("shooting", "physical"), ("passing",), ("pace",), 1.3, 5, _STRIKERS),
    "winger": ("specific_competitive", ("pace", "dribbling"), ("passing",), ("defending",), 1.3, 5, ("LW", "RW", "LM", "RM")),
    "boxToBox": ("specific_competitive", ("pace", "passing"), ("defending", "shooting", "physical"), (), 1.3, 5, ("CM", "LM", "RM", "CDM")),
    "playmaker": ("specific_competitive", ("passing", "dribbling"), ("shooting",), ("defending", "pace"), 1.4, 5, ("CAM", "CM", "CF")),
    "defensiveMid": ("specific_competitive", ("defending", "passing"), ("physical",), ("shooting", "dribbling"), 1.2, 5, ("CDM", "CM")),
    "aerialDefense": ("specific_competitive", ("defending",), ("physical",), (), 1.1, 4, ("CB", "CDM")),
    "tackles": ("specific_simple", ("defending",), ("pace",), (), 1.0, 4, ("CB", "CDM") + _FULLBACKS),
    "covering": ("specific_competitive", ("defending",), ("pace", "passing"), (), 1.1, 4, ("CB", "CDM")),
    "fullback": ("specific_competitive", ("pace", "passing"), ("defending", "dribbling"), (), 1.3, 5, _FULLBACKS),
    "gkReflexes": ("specific_simple", ("reflexes",), ("diving",), (), 1.2, 4, ("GK",)),
    "gkDiving": ("specific_simple", ("diving",), ("reflexes",), (), 1.2, 4, ("GK",)),
    "gkPositioning": ("specific_simple", ("positioning",), ("reflexes", "handling"), (), 1.0, 4, ("GK",)),
    "gkDistribution": ("specific_simple", ("handling",), ("passing",), (), 1.1, 4, ("GK",)),
    "gkCrosses": ("specific_competitive", ("handling", "positioning"), (), (), 1.1, 4, ("GK",)),
    "gkOneOnOne": ("specific_competitive", ("reflexes", "positioning"), ("diving",), (), 1.3, 4, ("GK",)),
}

CLUB_TRAINING_ID = "clubTraining"

# Weekly wage share used as the per-session training base cost, and its bounds
TRAINING_BASE_COST_WAGE_SHARE = 0.10
TRAINING_BASE_COST_MIN = 500
TRAINING_BASE_COST_MAX = 50000

# ---------------------------------------------------------------------------
# Honours
# ---------------------------------------------------------------------------

# Competition prestige: world > continental > domestic
TROPHY_SCORE_WEIGHTS: Dict[str, int] = {
    "world_cup": 5000,
    "continental_cup": 3000,
    "champions_league": 2500,
    "libertadores": 2000,
    "club_world_cup": 1500,
    "europa_league": 1200,
    "copa_sudamericana": 1000,
    "league": 1000,
    "nations_league": 800,
    "conference_league": 600,
    "cup": 400,
    "super_cup": 200,
}

AWARD_SCORE_WEIGHTS: Dict[str, int] = {
    "world_player_award": 6000,
    "world_cup_best_player": 2500,
    "continental_player_award": 2000,
    "young_player_award": 1500,
    "league_player_of_year": 1000,
    "top_scorer_award": 800,
    "best_goalkeeper_award": 800,
    "top_assister_award": 500,
    "team_of_the_year": 400,
    "goal_of_the_year": 300,
}

# Career tier bands: (label, minimum score exclusive, minimum peak overall), best first
CAREER_TIERS: tuple[tuple[str, int, int], ...] = (
    ("All-Time Great", 50000, 94),
    ("Legend", 35000, 90),
    ("World Class", 25000, 86),
    ("Elite", 15000, 82),
    ("Star", 8000, 78),
    ("Established Pro", 4000, 74),
)
CAREER_TIER_DEFAULT = "Journeyman"

LEADERBOARD_CRITERIA = ("score", "goals", "assists", "matches", "clean_sheets", "trophies", "awards")
LEADERBOARD_TOP_N = 30

# ---------------------------------------------------------------------------
# Clubs and competitions
# ---------------------------------------------------------------------------

LEAGUE_TIERS = (1, 2, 3, 4, 5)

COMPETITION_TYPES = ("League", "Cup", "Continental", "International")

# League tier -> league fixtures per season
LEAGUE_MATCHES_BY_TIER: Dict[int, int] = {1: 38, 2: 46, 3: 46, 4: 46, 5: 40}

# Continental competition by country confederation
CONTINENTAL_TROPHY_BY_CONFEDERATION: Dict[str, str] = {
    "UEFA": "champions_league",
    "CONMEBOL": "libertadores",
}
SECONDARY_CONTINENTAL_TROPHY_BY_CONFEDERATION: Dict[str, str] = {
    "UEFA": "europa_league",
    "CONMEBOL": "copa_sudamericana",
}

# Reputation -> star rating bands (threshold, stars), highest first
REPUTATION_STARS: tuple[tuple[int, float], ...] = (
    (95, 5.0), (90, 4.5), (85, 4.0), (80, 3.5), (75, 3.0),
    (68, 2.5), (60, 2.0), (52, 1.5), (45, 1.0), (40, 0.5),
)

# Team stars -> overall needed to be a key player
KEY_PLAYER_THRESHOLDS: Dict[float, int] = {
    5.0: 87, 4.5: 84, 4.0: 82, 3.5: 79, 3.0: 76,
    2.5: 73, 2.0: 69, 1.5: 66, 1.0: 63, 0.5: 59,
}

# Weekly wage bands by league tier for a key player / rotation player
WAGE_BANDS_BY_TIER: Dict[int, tuple[int, int]] = {
    1: (40000, 350000),
    2: (12000, 80000),
    3: (4000, 25000),
    4: (1500, 8000),
    5: (1000, 3000),
}
WAGE_MIN = 1000
WAGE_MAX = 800000

TRANSFER_OFFER_MAX_AGE = 35
ONE_CLUB_TRAIT = "One-Club Man"
INJURY_PRONE_TRAIT = "Injury Prone"
CAREER_ENDING_INJURY = "Career-Ending"

# Event flag names (issued with a season stamp, lapse after one season)
FLAG_WANTS_TRANSFER = "wants_transfer"
FLAG_MANAGER_CONFLICT = "manager_conflict"
FLAG_TEAMMATE_CONFLICT = "teammate_conflict"
FLAG_HIGH_INTENSITY_TRAINING = "high_intensity_training"
EVENT_FLAGS = (
    FLAG_WANTS_TRANSFER,
    FLAG_MANAGER_CONFLICT,
    FLAG_TEAMMATE_CONFLICT,
    FLAG_HIGH_INTENSITY_TRAINING,
)

# Share of annual wage saved into the bank each season
SEASON_SAVINGS_RATE = 0.40
WEEKS_PER_YEAR = 52

STARTING_AGE = 16
CAREER_START_AGE = 14

# National team strength (0-100) and confederation; unknown nations use the defaults
NATION_STRENGTH: Dict[str, int] = {
    "Brazil": 88, "France": 88, "Argentina": 87, "England": 86, "Spain": 86,
    "Germany": 85, "Portugal": 84, "Netherlands": 83, "Italy": 83, "Belgium": 81,
    "Croatia": 80, "Uruguay": 79, "Colombia": 78, "Japan": 76, "USA": 75, "Mexico": 75,
}
NATION_STRENGTH_DEFAULT = 68

NATION_CONFEDERATION: Dict[str, str] = {
    "Brazil": "CONMEBOL", "Argentina": "CONMEBOL", "Uruguay": "CONMEBOL", "Colombia": "CONMEBOL",
    "USA": "CONCACAF", "Mexico": "CONCACAF", "Japan": "AFC",
}
NATION_CONFEDERATION_DEFAULT = "UEFA"

# Minimum overall for a national team call-up
CALL_UP_OVERALL = 70

# Tactic -> (goal, assist, clean-sheet) multipliers
TACTIC_MODIFIERS: Dict[str, tuple[float, float, float]] = {
    "Attacking": (1.12, 1.05, 0.85),
    "Defensive": (0.85, 0.90, 1.20),
    "Balanced": (1.0, 1.0, 1.0),
    "Possession": (0.95, 1.12, 1.0),
    "Direct": (1.08, 0.95, 0.95),
    "Counter": (1.05, 1.05, 1.0),
    "High Press": (1.05, 1.0, 0.92),
}

SEASON_FOCUSES = ("scoring", "playmaking", "consistency", "titles")

# Per-match goal / assist rates for a 75-rated player
GOAL_RATE_BY_POSITION: Dict[str, float] = {
    "ST": 0.55, "CF": 0.50, "LW": 0.35, "RW": 0.35, "CAM": 0.30,
    "LM": 0.20, "RM": 0.20, "CM": 0.12, "CDM": 0.05,
    "LWB": 0.05, "RWB": 0.05, "LB": 0.03, "RB": 0.03, "CB": 0.04, "GK": 0.0,
}
ASSIST_RATE_BY_POSITION: Dict[str, float] = {
    "ST": 0.18, "CF": 0.25, "LW": 0.28, "RW": 0.28, "CAM": 0.32,
    "LM": 0.22, "RM": 0.22, "CM": 0.18, "CDM": 0.08,
    "LWB": 0.15, "RWB": 0.15, "LB": 0.10, "RB": 0.10, "CB": 0.03, "GK": 0.005,
}
CLEAN_SHEET_POSITIONS = ("GK", "LWB", "LB", "CB", "RB", "RWB")

# Squad status -> base share of team matches played
PLAYING_SHARE_BY_STATUS: Dict[str, float] = {
    "Captain": 0.92, "Key Player": 0.88, "Rotation": 0.60,
    "Prospect": 0.35, "Reserve": 0.20, "Surplus": 0.08,
}

# ---------------------------------------------------------------------------
# World generation
# ---------------------------------------------------------------------------

# country -> (confederation, league strength 0-1, number of league tiers, cities)
CLUB_COUNTRIES: Dict[str, tuple] = {
    "England": ("UEFA", 1.0, 5, ("London", "Manchester", "Liverpool", "Leeds", "Bristol", "Newcastle", "Sheffield", "Birmingham", "Norwich", "Brighton", "Leicester", "Derby")),
    "Spain": ("UEFA", 0.97, 5, ("Madrid", "Barcelona", "Sevilla", "Valencia", "Bilbao", "Malaga", "Vigo", "Zaragoza", "Granada", "Oviedo", "Cadiz", "Murcia")),
    "Germany": ("UEFA", 0.94, 5, ("Munich", "Dortmund", "Berlin", "Hamburg", "Cologne", "Leipzig", "Bremen", "Stuttgart", "Frankfurt", "Hannover", "Mainz", "Kiel")),
    "Italy": ("UEFA", 0.93, 5, ("Milan", "Turin", "Rome", "Naples", "Florence", "Genoa", "Bologna", "Verona", "Bergamo", "Parma", "Bari", "Lecce")),
    "France": ("UEFA", 0.90, 5, ("Paris", "Marseille", "Lyon", "Lille", "Nice", "Nantes", "Rennes", "Bordeaux", "Lens", "Reims", "Metz", "Brest")),
    "Portugal": ("UEFA", 0.82, 3, ("Lisbon", "Porto", "Braga", "Guimaraes", "Coimbra", "Faro", "Aveiro", "Setubal", "Funchal", "Leiria", "Viseu", "Chaves")),
    "Netherlands": ("UEFA", 0.82, 3, ("Amsterdam", "Rotterdam", "Eindhoven", "Utrecht", "Alkmaar", "Arnhem", "Groningen", "Twente", "Breda", "Heerenveen", "Zwolle", "Tilburg")),
    "Brazil": ("CONMEBOL", 0.84, 3, ("Sao Paulo", "Rio de Janeiro", "Belo Horizonte", "Porto Alegre", "Salvador", "Recife", "Curitiba", "Fortaleza", "Santos", "Goiania", "Belem", "Campinas")),
    "Argentina": ("CONMEBOL", 0.82, 3, ("Buenos Aires", "Rosario", "Cordoba", "La Plata", "Avellaneda", "Mendoza", "Tucuman", "Santa Fe", "Mar del Plata", "Salta", "Lanus", "Banfield")),
}

CLUB_NAME_SUFFIXES = ("FC", "United", "City", "Athletic", "Rovers", "Sporting", "Racing", "Albion", "Wanderers", "Dynamo")

CLUBS_PER_LEAGUE = 10

# League tier -> (reputation range, squad strength range) before the country's league strength
TIER_REPUTATION_RANGE: Dict[int, tuple[int, int]] = {1: (72, 94), 2: (58, 74), 3: (48, 62), 4: (40, 52), 5: (30, 44)}
TIER_SQUAD_STRENGTH_RANGE: Dict[int, tuple[int, int]] = {1: (72, 86), 2: (64, 74), 3: (58, 66), 4: (52, 60), 5: (46, 54)}

# Top-flight and second-tier clubs run an academy side
YOUTH_ACADEMY_MAX_TIER = 2
YOUTH_SUFFIX = "U19"
