"""
Evaluation configuration for the headless shooter environment
"""

# Environment parameters
ENV_CONFIG = {
    "level": 1,
    "width": 1000,
    "height": 700,
    "fps": 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "m_pickups": 2,
    "score_scale": 50.0,
    "damage_scale": 20.0,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "seeds": [42, 123, 456],
    "n_episodes": 5,            # per seed
    "levels": [1, 2, 3],
    "policies": ["random", "tracker"],
}

# Scripted "tracker" policy: line up with the nearest enemy and keep firing
TRACKER_POLICY_CONFIG = {
    "deadzone": 0.02,       # normalized vertical distance considered aligned
    "min_player_x": -0.6,   # stay near the left side of the playfield
}


def get_evaluation_matrix():
    """
    Generate all evaluation runs.
    Returns list of dicts with: policy, level, seed, name
    """
    runs = []
    for policy in EVAL_CONFIG["policies"]:
        for level in EVAL_CONFIG["levels"]:
            for seed in EVAL_CONFIG["seeds"]:
                runs.append({
                    "name": f"{policy}_l{level}_s{seed}",
                    "policy": policy,
                    "level": level,
                    "seed": seed,
                })
    return runs
