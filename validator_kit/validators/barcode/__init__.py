"""
Barcode Package

The Barcode validator and its format adapters.
"""

from .adapters import (
    ADAPTERS,
    Code25,
    Code39,
    Code39ext,
    Code93,
    Code93ext,
    Ean2,
    Ean5,
    Ean8,
    Ean13,
    Gtin14,
    Upca,
)
from .base import CHECKSUM_ALGORITHMS, AbstractAdapter, AdapterInterface
from .validator import Barcode

__all__ = [
    "Barcode",
    "AdapterInterface",
    "AbstractAdapter",
    "ADAPTERS",
    "CHECKSUM_ALGORITHMS",
    "Code25",
    "Code39",
    "Code39ext",
    "Code93",
    "Code93ext",
    "Ean2",
    "Ean5",
    "Ean8",
    "Ean13",
    "Gtin14",
    "Upca",
]
