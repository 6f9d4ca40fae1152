"""migaddr - Converts addresses between Chrysalis bech32 and legacy migration trytes."""

__version__ = "0.1.0"
__author__ = "migaddr team"
__description__ = "Chrysalis to legacy migration address converter with CLI and web interfaces"

# Make key modules available at package level
from . import lib

__all__ = ["lib"]
