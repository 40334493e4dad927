"""
Default configuration for the lane duel simulation
Plain dictionaries, splatted into the constructors that consume them.
"""

# Field geometry and projectile kinematics
ARENA_CONFIG = {
    "width": 800,
    "height": 600,
    "hero_radius": 15,
    "bullet_radius": 5,
    "bullet_speed": 5,      # px per tick
    "evasion_buffer": 30,   # px around the cursor that makes a hero turn
}

# Starting line-up. Hero 0 guards the left lane, hero 1 the right lane.
HERO_CONFIGS = [
    {
        "x": 100,
        "y": 300,
        "color": "red",
        "facing": 1,
        "direction": 1,
        "projectile_color": "blue",
        "fire_interval": 1000,  # ms
        "moving_speed": 2,      # px per tick
    },
    {
        "x": 700,
        "y": 300,
        "color": "blue",
        "facing": -1,
        "direction": 1,
        "projectile_color": "green",
        "fire_interval": 1000,
        "moving_speed": 2,
    },
]

CLOCK_CONFIG = {
    "period_ms": 16,
}

RULES_CONFIG = {
    # The stored fire interval is informational unless this is switched on
    "enforce_fire_interval": False,
}

# Gymnasium wrapper
ENV_CONFIG = {
    "max_steps": 1800,
    "k_projectiles": 6,
}

# ==============================================================================
# ALLOWED VALUES FOR HERO RECONFIGURATION
# ==============================================================================

PALETTE = ("red", "blue", "green", "yellow")

FIRE_INTERVAL_RANGE = (500, 3000)   # ms

MOVING_SPEED_RANGE = (1, 10)        # px per tick
