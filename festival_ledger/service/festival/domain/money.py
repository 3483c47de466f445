"""
Money amounts are EUR floats: finite and never negative.

inf and NaN cannot be written to the snapshot document (JSON has no literal for
them), so they are refused wherever an amount enters the store.
"""

import math

import attrs


def is_valid_amount(value: float) -> bool:
    return math.isfinite(value) and value >= 0


def validate_amount(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if not is_valid_amount(value):
        raise ValueError(f'{attribute.name} must be a finite amount >= 0, got {value!r}')
