"""Utility modules for MoistAir."""

from moistair.utils.constants import MW_RATIO, P_ATM, T_CELSIUS_OFFSET

__all__ = ["MW_RATIO", "P_ATM", "T_CELSIUS_OFFSET"]
