"""
Enumeration of bit combinations, i.e. of all fixed-width integers that have a given number of bits set.

Starting from some word, e.g. ``0b00010100``, the `BitCombinations` iterator produces all smaller words with the same
number of set bits, in descending order (``0b00010010``, ``0b00010001``, ``0b00001100``, ...). Each step is computed
with a constant number of arithmetic operations, without generating or storing the full set of combinations.

The widths 8, 16, 32, 64 and 128 are predefined (`U8` ... `U128`), with the wraparound behavior of the corresponding C
unsigned integer types emulated faithfully. Other widths are supported through `uint_type()`.

Note that owing to the interpreted nature of Python, this cannot possibly match the performance of a native
implementation. For enumerating very large sets, it's better to use a library written in C or some other systems
programming language.

Reference: https://graphics.stanford.edu/~seander/bithacks.html#NextBitPermutation
"""

__version__ = '0.1.0'


from atmfjstc.lib.bit_combinations.uint_types import UIntType, U8, U16, U32, U64, U128, uint_type, next_combination
from atmfjstc.lib.bit_combinations.BitCombinations import BitCombinations
