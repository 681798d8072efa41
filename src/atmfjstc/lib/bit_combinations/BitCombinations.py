"""
This module contains the `BitCombinations` class, an iterator that enumerates, in descending order, all the words of a
given width that have the same number of set bits as some starting word.
"""

from typing import Optional, Iterator

from atmfjstc.lib.bit_combinations.uint_types import UIntType, UIntTypeSpec, uint_type


class BitCombinations(Iterator[int]):
    """
    Enumerates all the words smaller than a given word that have the same number of bits set, from largest to smallest.

    Example::

        list(BitCombinations(0b1100, bits=4))  # [0b1010, 0b1001, 0b0110, 0b0101, 0b0011]

    Note that the starting word itself is not produced by the iteration. It can be obtained by calling `peek()` before
    the first call to `advance()` or `next()`.

    The whole state of the enumeration is the current word, with 0 doing double duty as the "finished" marker. Thus
    starting at 0 yields an already finished enumeration. Once finished, the enumeration stays finished.

    Objects of this class are cheap to copy (see `copy()`), and the copies advance independently.
    """

    _uint_type: UIntType
    _current: int

    def __init__(self, start: int, bits: UIntTypeSpec = 64):
        """
        Creates a new enumeration positioned at the word `start`.

        Args:
            start: The starting word. It can have any popcount, including 0 (all zero bits) and `bits` (all bits set).
            bits: The width of the words, either as an integer or as a `UIntType`. The default is 64.

        Raises:
            TypeError: If `start` is not an integer.
            ValueError: If `start` does not fit in `bits` bits or the width itself is invalid.
        """
        self._uint_type = uint_type(bits)
        self._current = self._uint_type.validate(start)

    @property
    def uint_type(self) -> UIntType:
        return self._uint_type

    @property
    def bits(self) -> int:
        return self._uint_type.bits

    @property
    def exhausted(self) -> bool:
        return self._current == 0

    def peek(self) -> Optional[int]:
        """
        Returns the current word without advancing, or None if the enumeration is finished.
        """
        return self._current if self._current != 0 else None

    def advance(self) -> Optional[int]:
        """
        Moves on to the next lower word with the same popcount.

        Returns:
            The new current word, or None if there are no more words to enumerate. In the latter case, the enumeration
            is finished and all subsequent calls will also return None.
        """
        result = self._uint_type.next_combination(self._current)
        self._current = result if result is not None else 0

        return result

    def copy(self) -> 'BitCombinations':
        return BitCombinations(self._current, self._uint_type)

    def __copy__(self) -> 'BitCombinations':
        return self.copy()

    def __iter__(self) -> 'BitCombinations':
        return self

    def __next__(self) -> int:
        result = self.advance()
        if result is None:
            raise StopIteration

        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitCombinations):
            return NotImplemented

        return (self._uint_type == other._uint_type) and (self._current == other._current)

    __hash__ = None

    def __repr__(self) -> str:
        return f"BitCombinations(0b{self._current:0{self.bits}b}, bits={self.bits})"
