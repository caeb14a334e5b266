# Output limits enforced by the game settings screen
SENSITIVITY_MIN = 1
SENSITIVITY_MAX = 200

# Channel order matters: the first five form the descending precision chain
CHANNELS = (
    "general",
    "red_dot",
    "scope_2x",
    "scope_4x",
    "awm_scope",
    "free_look",
)
PRECISION_CHAIN = ("general", "red_dot", "scope_2x", "scope_4x", "awm_scope")

# Base values tuned to output ~170 general for a large iOS flagship at balanced
BASE_SENSITIVITIES = {
    "general": 165,
    "red_dot": 160,
    "scope_2x": 145,
    "scope_4x": 130,
    "awm_scope": 110,
    "free_look": 185,
}

# Rows ordered from most aggressive to most precision-focused
PLAYSTYLE_MODIFIERS = {
    "freestyle": {
        "general": 1.22,
        "red_dot": 1.20,
        "scope_2x": 1.15,
        "scope_4x": 1.10,
        "awm_scope": 1.05,
        "free_look": 1.08,
    },
    "instaplayer": {
        "general": 1.18,
        "red_dot": 1.15,
        "scope_2x": 1.10,
        "scope_4x": 1.05,
        "awm_scope": 1.0,
        "free_look": 1.05,
    },
    "rusher": {
        "general": 1.12,
        "red_dot": 1.08,
        "scope_2x": 1.05,
        "scope_4x": 1.02,
        "awm_scope": 0.98,
        "free_look": 1.03,
    },
    "balanced": {
        "general": 1.03,
        "red_dot": 1.03,
        "scope_2x": 1.03,
        "scope_4x": 1.03,
        "awm_scope": 1.03,
        "free_look": 1.03,
    },
    "onetap": {
        "general": 1.0,
        "red_dot": 0.97,
        "scope_2x": 0.94,
        "scope_4x": 0.90,
        "awm_scope": 0.85,
        "free_look": 1.0,
    },
    "sniper": {
        "general": 0.95,
        "red_dot": 0.92,
        "scope_2x": 0.88,
        "scope_4x": 0.82,
        "awm_scope": 0.75,
        "free_look": 0.95,
    },
}

# Higher latency nudges sensitivity up to compensate for delayed feedback
PING_MODIFIERS = {
    "low": 0.95,
    "medium": 1.0,
    "high": 1.08,
}

# (inclusive upper bound, modifier) pairs, evaluated in ascending order
SCREEN_SIZE_STEPS = [
    (5.5, 1.08),
    (6.0, 1.04),
    (6.5, 1.0),
    (7.0, 0.96),
]
TABLET_SCREEN_MODIFIER = 0.92

REFRESH_RATE_STEPS = [
    (60, 0.95),
    (90, 1.0),
    (120, 1.05),
]
HIGH_REFRESH_MODIFIER = 1.08  # 144Hz+

# Platform adjustments
IOS_MODIFIER = 0.92
STANDARD_DPI = 420
DPI_MODIFIER_MIN = 0.85
DPI_MODIFIER_MAX = 1.15

# Closed input value sets
VALID_PLATFORMS = ("android", "ios", "unknown")
VALID_PLAYSTYLES = tuple(PLAYSTYLE_MODIFIERS)
VALID_PING_LEVELS = tuple(PING_MODIFIERS)

# Fallbacks applied by the input parser to missing or unparsable form fields
DEFAULT_PLATFORM = "unknown"
DEFAULT_PLAYSTYLE = "balanced"
DEFAULT_PING_LEVEL = "medium"
DEFAULT_SCREEN_SIZE = 6.5
DEFAULT_REFRESH_RATE = 60
DEFAULT_ANDROID_DPI = 440
