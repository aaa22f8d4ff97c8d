"""
Animation parameters for the decorative layer (rocket, particles, hover
cards). Values are plain dicts in initial/animate/transition form; the
page hands them to its motion library unchanged.
"""

import random
from typing import Any, Dict, List, Optional

PARTICLE_COLORS = ["bg-primary", "bg-secondary", "bg-accent"]
ROCKET_SHOW_AFTER = 0.1
TRAIL_SHOW_AFTER = 0.2
EXHAUST_PARTICLES = 8


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def rocket_frame(scroll_progress: float) -> Dict[str, Any]:
    p = _clamp(scroll_progress)
    if p <= ROCKET_SHOW_AFTER:
        return {"visible": False}
    return {
        "visible": True,
        "initial": {"x": "-50%", "y": "50%", "scale": 0.5, "opacity": 0, "rotate": 0},
        "animate": {
            "x": "-50%",
            "y": f"-{round(p * 150, 4)}%",
            "scale": max(0.3, 1 - p * 0.7),
            "opacity": max(0.0, 1 - p * 1.2),
            "rotate": p * 360,
        },
        "transition": {"duration": 0.1, "ease": "easeOut"},
        "trail": {
            "animate": {"height": p * 200, "opacity": 0.8 if p > TRAIL_SHOW_AFTER else 0},
            "transition": {"duration": 0.2},
        },
        "exhaust": [
            {
                "animate": {"y": [0, -100, -200], "opacity": [1, 0.5, 0], "scale": [1, 0.5, 0]},
                "transition": {"duration": 1.5, "repeat": "Infinity", "delay": i * 0.1},
            }
            for i in range(EXHAUST_PARTICLES)
        ],
    }


def particle_field(count: int = 50, seed: Optional[int] = None) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    return [
        {
            "id": i,
            "x": rng.random() * 100,
            "y": 100,
            "size": rng.random() * 4 + 1,
            "color": rng.choice(PARTICLE_COLORS),
            "speed": rng.random() * 2 + 1,
            "delay": rng.random() * 4,
        }
        for i in range(max(0, count))
    ]


def hover_card(index: int, hovered: bool) -> Dict[str, Any]:
    return {
        "initial": {"opacity": 0, "y": 50, "rotateX": -15},
        "animate": {"opacity": 1, "y": 0, "rotateX": 0},
        "transition": {"duration": 0.6, "delay": index * 0.1},
        "whileHover": {"rotateX": 15, "rotateY": 5, "scale": 1.1},
        "whileTap": {"scale": 0.95},
        "inner": {"rotateY": 12 if hovered else 0, "z": 20 if hovered else 0},
        "glow_class": "glow-cyan" if hovered else "hover:glow-purple",
    }
