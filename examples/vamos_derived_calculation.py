#!/usr/bin/env python3
"""
Example: Derived matroid of the Vámos matroid

The Vámos matroid V8 is the smallest non-representable matroid (rank 4
on 8 elements, 41 circuits). Its combinatorial derived matroid has the
41 circuits as ground set; the result is cached in a MatroidStore so a
second run only reloads and revalidates it.

Prints the rank, circuit count and generalized Hamming distances d_i.
"""

import sys
sys.path.insert(0, '.')

from matroids import DerivationConfig, MatroidStore, Vamos, configure_logging


def main():
    configure_logging(verbose=True)

    vamos = Vamos()
    print(f"Source: {vamos!r}, {len(vamos.circuits())} circuits")

    store = MatroidStore("calculated_matroids")
    config = DerivationConfig(workers=4)
    derived = store.derived("vamos_derived", vamos, config)

    print(f"Got derived vamos matroid of rank: {derived.k}")
    print(f"It has {len(derived.circuits())} circuits...")

    for i in range(1, derived.corank + 1):
        print(f"d_{i}: {derived.generalized_hamming_distance(i)}")


if __name__ == "__main__":
    main()
