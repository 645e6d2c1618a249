"""
Barcode Adapter Base Classes

An adapter describes one barcode format: the lengths it allows, the
characters it allows, and the checksum algorithm it uses.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Union

# Length forms: exact length, list of allowed lengths, "even", "odd", or -1 (any)
LengthSpec = Union[int, str, List[int]]
# Character forms: string of allowed characters, or 128 (any 7-bit ASCII)
CharacterSpec = Union[int, str]

ANY_LENGTH = -1
ASCII_CHARACTERS = 128

CODE39_CHARACTERS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"
# Code 93 appends four shift symbols (values 43-46) to the Code 39 table
CODE93_CHECK_CHARACTERS = CODE39_CHARACTERS + "!\"#&"


class AdapterInterface(ABC):
    """Interface every barcode adapter implements"""

    @abstractmethod
    def has_valid_length(self, value: str) -> bool:
        """Checks the length of a barcode"""

    @abstractmethod
    def has_valid_characters(self, value: str) -> bool:
        """Checks for allowed characters within the barcode"""

    @abstractmethod
    def has_valid_checksum(self, value: str) -> bool:
        """Validates the checksum"""

    @abstractmethod
    def get_length(self) -> LengthSpec:
        """Returns the allowed barcode length"""

    @abstractmethod
    def get_characters(self) -> CharacterSpec:
        """Returns the allowed characters"""

    @abstractmethod
    def get_checksum(self) -> Optional[str]:
        """Returns the name of the checksum algorithm, if the format has one"""

    @abstractmethod
    def use_checksum(self, check: Optional[bool] = None) -> bool:
        """Sets checksum validation; with no argument returns the current setting"""


def gtin_checksum(value: str) -> bool:
    """GTIN/EAN/UPC modulo 10 check with weights 3,1 from the right"""
    data, check = value[:-1], value[-1:]
    if not (data.isdigit() and check.isdigit()):
        return False
    total = sum(
        int(digit) * (3 if position % 2 == 0 else 1)
        for position, digit in enumerate(reversed(data))
    )
    return (10 - total % 10) % 10 == int(check)


def code25_checksum(value: str) -> bool:
    """Code 2 of 5 modulo 10 check with weights 3,1 from the left"""
    data, check = value[:-1], value[-1:]
    if not (data.isdigit() and check.isdigit()):
        return False
    total = sum(
        int(digit) * (3 if position % 2 == 0 else 1)
        for position, digit in enumerate(data)
    )
    return (10 - total % 10) % 10 == int(check)


def code39_checksum(value: str) -> bool:
    """Code 39 modulo 43 check character"""
    data, check = value[:-1], value[-1:]
    try:
        total = sum(CODE39_CHARACTERS.index(char) for char in data)
    except ValueError:
        return False
    return CODE39_CHARACTERS[total % 43] == check


def _code93_check_character(data: str, max_weight: int) -> str:
    total = 0
    for position, char in enumerate(reversed(data)):
        total += CODE93_CHECK_CHARACTERS.index(char) * (position % max_weight + 1)
    return CODE93_CHECK_CHARACTERS[total % 47]


def code93_checksum(value: str) -> bool:
    """Code 93 double modulo 47 check characters (C then K)"""
    if len(value) < 3:
        return False
    data, check = value[:-2], value[-2:]
    try:
        first = _code93_check_character(data, 20)
        second = _code93_check_character(data + first, 15)
    except ValueError:
        return False
    return first + second == check


CHECKSUM_ALGORITHMS: Dict[str, Callable[[str], bool]] = {
    "gtin": gtin_checksum,
    "code25": code25_checksum,
    "code39": code39_checksum,
    "code93": code93_checksum,
}


class AbstractAdapter(AdapterInterface):
    """Adapter driven by length, character and checksum settings"""

    def __init__(
        self,
        length: LengthSpec = ANY_LENGTH,
        characters: CharacterSpec = ASCII_CHARACTERS,
        checksum: Optional[str] = None,
        use_checksum: bool = True,
    ):
        if checksum is not None and checksum not in CHECKSUM_ALGORITHMS:
            raise ValueError(f"Unknown checksum algorithm: {checksum}")
        self._length = length
        self._characters = characters
        self._checksum = checksum
        self._use_checksum = bool(use_checksum) and checksum is not None

    @property
    def name(self) -> str:
        return self.__class__.__name__.lower()

    def has_valid_length(self, value: str) -> bool:
        length = self.get_length()
        actual = len(value)
        if isinstance(length, (list, tuple)):
            return actual in length
        if length == "even":
            return actual % 2 == 0
        if length == "odd":
            return actual % 2 == 1
        if length == ANY_LENGTH:
            return True
        return actual == length

    def has_valid_characters(self, value: str) -> bool:
        characters = self.get_characters()
        if characters == ASCII_CHARACTERS:
            return all(ord(char) < ASCII_CHARACTERS for char in value)
        return all(char in characters for char in value)

    def has_valid_checksum(self, value: str) -> bool:
        if self._checksum is None:
            return True
        return CHECKSUM_ALGORITHMS[self._checksum](value)

    def get_length(self) -> LengthSpec:
        return self._length

    def get_characters(self) -> CharacterSpec:
        return self._characters

    def get_checksum(self) -> Optional[str]:
        return self._checksum

    def use_checksum(self, check: Optional[bool] = None) -> bool:
        if check is not None:
            self._use_checksum = bool(check) and self._checksum is not None
        return self._use_checksum

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(length={self._length!r}, "
            f"checksum={self._checksum!r}, use_checksum={self._use_checksum})"
        )
