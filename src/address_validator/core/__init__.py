"""Deterministic core of the validation pipeline.

Usage:
    from address_validator.core import (
        # Normalization
        normalize_street,
        normalize_city,
        normalize_state,
        normalize_zip_code,
        normalize_number,
        normalize_components,
        # Match heuristics
        is_exact_match,
        component_match_ratio,
        # Scoring
        calculate_confidence,
        map_accuracy_tier,
        round_confidence,
    )
"""

from __future__ import annotations

from address_validator.core.matching import component_match_ratio, is_exact_match
from address_validator.core.normalizer import (
    normalize_city,
    normalize_components,
    normalize_number,
    normalize_state,
    normalize_street,
    normalize_zip_code,
)
from address_validator.core.scoring import (
    CONFIDENCE_WEIGHTS,
    TIER_ACCURACY,
    UNKNOWN_TIER_ACCURACY,
    calculate_confidence,
    map_accuracy_tier,
    round_confidence,
)

__all__ = [
    # Normalization
    "normalize_street",
    "normalize_city",
    "normalize_state",
    "normalize_zip_code",
    "normalize_number",
    "normalize_components",
    # Match heuristics
    "is_exact_match",
    "component_match_ratio",
    # Scoring
    "CONFIDENCE_WEIGHTS",
    "TIER_ACCURACY",
    "UNKNOWN_TIER_ACCURACY",
    "calculate_confidence",
    "map_accuracy_tier",
    "round_confidence",
]
