"""
Micro-benchmarks for `BitCombinations`.

Each case times one full enumeration starting from a word that has its ones packed at the top, so that every
combination with that popcount is visited. Run as::

    python benchmarks/bench_bit_combinations.py [--number N]
"""

import logging
import timeit

from argparse import ArgumentParser
from typing import List, Tuple

from atmfjstc.lib.bit_combinations import BitCombinations, UIntType, U8, U32, U64


LOG = logging.getLogger()


BENCHMARK_CASES: List[Tuple[str, UIntType, int]] = [
    ('u8_3', U8, 0b111 << 5),
    ('u8_5', U8, 0b11111 << 3),
    ('u8_1', U8, 0b1 << 7),
    ('u32_3', U32, 0b111 << 29),
    ('u64_3', U64, 0b111 << 61),
]


def run_case(uint_type: UIntType, start: int) -> int:
    count = 0
    for _ in BitCombinations(start, uint_type):
        count += 1

    return count


def main():
    parser = ArgumentParser(description="Times full enumerations of bit combinations")
    parser.add_argument('--number', type=int, default=10, help="How many times to run each case (default: 10)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, style='{', format='{levelname}: {message}')

    for name, uint_type, start in BENCHMARK_CASES:
        n_items = run_case(uint_type, start)
        total = timeit.timeit(lambda: run_case(uint_type, start), number=args.number)

        LOG.info(f"{name}: {n_items} items, {total / args.number * 1e6:.1f} us/iter")


if __name__ == '__main__':
    main()
