"""
Congruence criteria that the learner can select.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Union


class CriterionMode(StrEnum):
    """The active congruence criterion. Exactly one is active at a time."""
    SSS = "SSS"
    SAS = "SAS"
    ASA = "ASA"
    AAS = "AAS"
    RHS = "RHS"
    AAA = "AAA"
    ASS = "ASS"
    ALL = "ALL"  # free exploration, evaluated like SSS

    @classmethod
    def parse(cls, value: Union[CriterionMode, str]) -> CriterionMode:
        """
        Resolve a user-supplied mode. Accepts members and case-insensitive names.

        Raises:
            ValueError: If the value does not name a criterion.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown criterion mode {value!r}. Expected one of: {valid}.")
