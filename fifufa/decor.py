"""Presentational state for the page: palette, labels and floating shapes."""
from __future__ import annotations

import random
from typing import Dict, List, Optional

COLORS = {"primary": "#514FC2", "yellow": "#FFD93D", "white": "#F9F9F9"}

FLOATING_ELEMENT_COUNT = 8


def floating_elements(
    count: int = FLOATING_ELEMENT_COUNT, rng: Optional[random.Random] = None
) -> List[Dict[str, float]]:
    rng = rng or random.Random()
    elements = []
    for _ in range(count):
        elements.append(
            {
                "left": round(rng.random() * 100, 2),
                "top": round(rng.random() * 100, 2),
                "duration": round(3 + rng.random() * 2, 2),
                "delay": round(rng.random() * 2, 2),
            }
        )
    return elements


def accent_for(index: int) -> str:
    # Fact cards alternate between the two brand colors.
    return "primary" if index % 2 == 0 else "yellow"


def button_labels(loading: bool, loading_more: bool) -> Dict[str, str]:
    return {
        "submit": "Generating Magic..." if loading else "Discover Amazing Facts 🚀",
        "more": "Loading More..." if loading_more else "More Facts ✨",
    }
