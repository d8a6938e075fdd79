"""Confidence scoring.

The score combines provider accuracy, component completeness and the two
match heuristics with fixed additive weights:

    accuracy * 0.4
    + (0.4 if all components present else match_ratio * 0.3)
    + (0.2 if exact match else match_ratio * 0.1)

and is clamped to [0, 1]. The weights do not sum to 1 by construction.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from address_validator.models.enums import AccuracyTier

CONFIDENCE_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "provider_accuracy": 0.4,
        "completeness_full": 0.4,
        "completeness_partial": 0.3,
        "exact_match_bonus": 0.2,
        "partial_match_reduced": 0.1,
    }
)

TIER_ACCURACY: Mapping[str, float] = MappingProxyType(
    {
        AccuracyTier.ROOFTOP.value: 1.0,
        AccuracyTier.RANGE_INTERPOLATED.value: 0.85,
        AccuracyTier.GEOMETRIC_CENTER.value: 0.7,
        AccuracyTier.APPROXIMATE.value: 0.5,
    }
)

# Accuracy assigned to any tier the table does not know
UNKNOWN_TIER_ACCURACY = 0.3


def map_accuracy_tier(tier: str | AccuracyTier | None) -> float:
    """Map a provider accuracy tier to a score in [0, 1].

    Args:
        tier: Tier name such as "ROOFTOP".

    Returns:
        Accuracy for the tier, or 0.3 for unknown/missing tiers.
    """
    if isinstance(tier, AccuracyTier):
        tier = tier.value
    if not tier:
        return UNKNOWN_TIER_ACCURACY
    return TIER_ACCURACY.get(tier, UNKNOWN_TIER_ACCURACY)


def calculate_confidence(
    *,
    has_all_components: bool,
    provider_accuracy: float,
    is_exact_match: bool,
    component_match_ratio: float,
) -> float:
    """Combine the validation signals into a single confidence score.

    Args:
        has_all_components: Every normalized component is non-empty.
        provider_accuracy: Accuracy mapped from the provider's tier (0-1).
        is_exact_match: Formatted address is a near-duplicate of the input.
        component_match_ratio: Share of components found in the input (0-1).

    Returns:
        Score clamped to [0, 1].
    """
    score = provider_accuracy * CONFIDENCE_WEIGHTS["provider_accuracy"]

    if has_all_components:
        score += CONFIDENCE_WEIGHTS["completeness_full"]
    else:
        score += component_match_ratio * CONFIDENCE_WEIGHTS["completeness_partial"]

    if is_exact_match:
        score += CONFIDENCE_WEIGHTS["exact_match_bonus"]
    else:
        score += component_match_ratio * CONFIDENCE_WEIGHTS["partial_match_reduced"]

    return min(1.0, max(0.0, score))


def round_confidence(value: float) -> float:
    """Round half-up to two decimals (0.875 -> 0.88)."""
    return math.floor(value * 100 + 0.5) / 100
