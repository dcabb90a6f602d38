# scheduler/services/travel_slots/confidence.py

from .config import TravelConfig


def score_confidence(origin_source: str, distance_km: float, config: TravelConfig) -> float:
    """
    Heuristic confidence in the travel estimate.

    Starts at 1.0:
      - unknown origin       → -unknown_origin_penalty (0.2)
      - distance             → -min(distance_km / distance_penalty_km, max_distance_penalty)
    Floored at min_confidence (0.4).
    """
    source_penalty = config.unknown_origin_penalty if origin_source == "unknown" else 0.0
    distance_penalty = min(distance_km / config.distance_penalty_km, config.max_distance_penalty)
    return min(1.0, max(config.min_confidence, 1.0 - source_penalty - distance_penalty))
