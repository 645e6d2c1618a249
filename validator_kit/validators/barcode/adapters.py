"""
Barcode Format Adapters

Concrete adapters for the supported barcode formats, and the name table
the Barcode validator uses to look them up.
"""

from typing import Dict, Type

from .base import (
    ANY_LENGTH,
    ASCII_CHARACTERS,
    CODE39_CHARACTERS,
    AbstractAdapter,
)

DIGITS = "0123456789"


class Code25(AbstractAdapter):
    """Code 2 of 5 (industrial); optional modulo 10 checksum"""

    def __init__(self):
        super().__init__(ANY_LENGTH, DIGITS, "code25", use_checksum=False)


class Code39(AbstractAdapter):
    """Code 39; optional modulo 43 checksum"""

    def __init__(self):
        super().__init__(ANY_LENGTH, CODE39_CHARACTERS, "code39", use_checksum=False)


class Code39ext(AbstractAdapter):
    """Code 39 extended (full ASCII), no checksum"""

    def __init__(self):
        super().__init__(ANY_LENGTH, ASCII_CHARACTERS)


class Code93(AbstractAdapter):
    """Code 93; optional double modulo 47 checksum"""

    def __init__(self):
        super().__init__(ANY_LENGTH, CODE39_CHARACTERS, "code93", use_checksum=False)


class Code93ext(AbstractAdapter):
    """Code 93 extended (full ASCII), no checksum"""

    def __init__(self):
        super().__init__(ANY_LENGTH, ASCII_CHARACTERS)


class Ean2(AbstractAdapter):
    def __init__(self):
        super().__init__(2, DIGITS)


class Ean5(AbstractAdapter):
    def __init__(self):
        super().__init__(5, DIGITS)


class Ean8(AbstractAdapter):
    """EAN-8; the 7 digit form carries no check digit"""

    def __init__(self):
        super().__init__([7, 8], DIGITS, "gtin")

    def has_valid_checksum(self, value: str) -> bool:
        if len(value) == 7:
            return True
        return super().has_valid_checksum(value)


class Ean13(AbstractAdapter):
    def __init__(self):
        super().__init__(13, DIGITS, "gtin")


class Gtin14(AbstractAdapter):
    def __init__(self):
        super().__init__(14, DIGITS, "gtin")


class Upca(AbstractAdapter):
    def __init__(self):
        super().__init__(12, DIGITS, "gtin")


ADAPTERS: Dict[str, Type[AbstractAdapter]] = {
    "code25": Code25,
    "code39": Code39,
    "code39ext": Code39ext,
    "code93": Code93,
    "code93ext": Code93ext,
    "ean2": Ean2,
    "ean5": Ean5,
    "ean8": Ean8,
    "ean13": Ean13,
    "gtin14": Gtin14,
    "upca": Upca,
}
