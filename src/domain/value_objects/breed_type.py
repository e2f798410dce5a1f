from __future__ import annotations

from enum import Enum


class BreedType(str, Enum):
    PUREBRED = "Purebred"
    MIX_BREED = "Mix-breed"
    CROSS_BREED = "Cross-breed"
