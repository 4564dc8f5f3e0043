"""Testing generators – Hypothesis strategies."""
from country_code_picker.testing.generators.strategies import (
    allow_list_strategy,
    country_strategy,
    raw_digits_strategy,
)

__all__ = ["allow_list_strategy", "country_strategy", "raw_digits_strategy"]
