"""Domain enumerations for the price oracle.

String-valued so they serialize cleanly and compare equal to plain strings.
"""

from enum import Enum


class AssetKind(str, Enum):
    NATIVE = "native"
    OTHER = "other"
