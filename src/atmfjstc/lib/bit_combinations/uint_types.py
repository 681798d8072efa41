"""
Fixed-width unsigned integer arithmetic, as needed for enumerating bit combinations.

Python integers have unlimited precision, so the wrapping and overflow behavior of C-style fixed-width unsigned integers
(``uint8_t``, ``uint32_t`` etc.) is emulated here by masking. Values belonging to such a type, which we call *words*,
are plain non-negative `int` objects that fit in the type's number of bits.

The main feature of this module is `UIntType.next_combination`, which, given a word, finds the next lower word having
the same number of set bits, in O(1) arithmetic steps.
"""

import operator

from typing import Optional, Union, Dict


class UIntType:
    """
    Describes an unsigned integer type of a fixed bit width.

    Instances are immutable and compare equal if they have the same width. For the standard widths, use the predefined
    instances `U8`, `U16`, `U32`, `U64` and `U128` or call `uint_type()`.
    """

    _bits: int
    _mask: int

    def __init__(self, bits: int):
        bits = operator.index(bits)
        if bits < 1:
            raise ValueError(f"Invalid bit width: {bits}")

        self._bits = bits
        self._mask = (1 << bits) - 1

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def mask(self) -> int:
        """
        The word with all bits set.
        """
        return self._mask

    @property
    def max_value(self) -> int:
        return self._mask

    @property
    def zero(self) -> int:
        return 0

    def contains(self, value: int) -> bool:
        """
        Checks whether a value is a word of this type, i.e. an integer in the range ``[0, 2**bits - 1]``.
        """
        return 0 <= value <= self._mask

    def validate(self, value: int) -> int:
        """
        Checks that a value is a word of this type and returns it as a plain `int`.

        Args:
            value: Any integer-like object (i.e. one accepted by `operator.index`)

        Returns:
            The value, converted to `int`.

        Raises:
            TypeError: If the value is not an integer.
            ValueError: If the value is negative or does not fit in `bits` bits.
        """
        try:
            value = operator.index(value)
        except TypeError:
            raise TypeError(f"Expected an integer, got {value!r}") from None

        if not self.contains(value):
            raise ValueError(f"Value {value} is not a valid {self._bits}-bit unsigned integer")

        return value

    def wrapping_add(self, x: int, y: int) -> int:
        return (x + y) & self._mask

    def wrapping_sub(self, x: int, y: int) -> int:
        return (x - y) & self._mask

    def wrapping_neg(self, x: int) -> int:
        """
        Two's complement negation, i.e. ``(~x + 1)`` truncated to the width.
        """
        return (-x) & self._mask

    def checked_add(self, x: int, y: int) -> Optional[int]:
        """
        Adds two words, returning None if the result does not fit in the width.
        """
        result = x + y

        return result if result <= self._mask else None

    def trailing_zeros(self, x: int) -> int:
        """
        Counts the zero bits below the lowest set bit of a word. For 0, this is the full width.
        """
        if x == 0:
            return self._bits

        return (x & -x).bit_length() - 1

    def count_ones(self, x: int) -> int:
        """
        Counts the set bits in a word (i.e. computes its population count).
        """
        return bin(x).count('1')

    def next_combination(self, value: int) -> Optional[int]:
        """
        Finds the largest word strictly less than `value` that has the same number of set bits.

        For instance, for ``0b00010100`` this returns ``0b00010010``, and for ``0b00010001`` it returns ``0b00001100``.
        Calling this repeatedly enumerates all words with a given popcount in descending order.

        Args:
            value: Any word of this type. There is no restriction on its popcount.

        Returns:
            The next lower word with the same popcount, or None if `value` is already the smallest one (this includes
            0, and also the all-ones word, which is the only one with its popcount).

        Raises:
            TypeError, ValueError: If `value` is not a word of this type (see `validate`).
        """
        a = self.validate(value)

        b = a ^ self.wrapping_add(a, 1)  # Lowest run of 1s, plus the 0 above it
        c = self.wrapping_sub(a, b >> 1)

        # This only overflows for the all-ones word. It must be checked here, as a wrapped 0 would yield a bogus shift.
        d = self.checked_add(b, 1)
        if d is None:
            return None

        e = self.wrapping_sub(c, (c & self.wrapping_neg(c)) >> self.trailing_zeros(d))

        return e if e != 0 else None

    def __eq__(self, other) -> bool:
        if not isinstance(other, UIntType):
            return NotImplemented

        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash((UIntType, self._bits))

    def __repr__(self) -> str:
        return f"UIntType({self._bits})"


U8 = UIntType(8)
U16 = UIntType(16)
U32 = UIntType(32)
U64 = UIntType(64)
U128 = UIntType(128)

_STANDARD_TYPES: Dict[int, UIntType] = {t.bits: t for t in (U8, U16, U32, U64, U128)}


UIntTypeSpec = Union[int, UIntType]


def uint_type(bits: UIntTypeSpec) -> UIntType:
    """
    Gets the `UIntType` for a given bit width.

    The standard widths (8, 16, 32, 64 and 128) map to the predefined instances `U8` ... `U128`. Any other positive
    width is also supported. If `bits` is already a `UIntType`, it is returned as-is.
    """
    if isinstance(bits, UIntType):
        return bits

    bits = operator.index(bits)

    return _STANDARD_TYPES[bits] if bits in _STANDARD_TYPES else UIntType(bits)


def next_combination(value: int, bits: UIntTypeSpec = 64) -> Optional[int]:
    """
    Shortcut for ``uint_type(bits).next_combination(value)``. See `UIntType.next_combination` for details.
    """
    return uint_type(bits).next_combination(value)
