from __future__ import annotations

from enum import Enum


class SourceTag(str, Enum):
    FCI = "FCI"
    AKC = "AKC"
