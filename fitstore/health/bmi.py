# -*- coding: utf-8 -*-
"""Body-mass index."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..errors import InvalidInputError


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """
    BMI = weight (kg) / height (m)^2, rounded half-up to one decimal.

    Raises InvalidInputError for a non-positive height.
    """
    if height_cm <= 0:
        raise InvalidInputError(f"height must be positive, got {height_cm}")
    height_m = height_cm / 100
    bmi = weight_kg / (height_m ** 2)
    return float(Decimal(repr(bmi)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
