from typing import Dict


def init_metrics() -> Dict[str, int | float | str | None]:
    return {
        'cells': 0,
        'carves': 0,
        'frontier_offers': 0,
        'frontier_peak': 0,
        'stale_draws': 0,
        'seed_direction': None,
        'runtime_ms': 0.0,
    }
