#!/usr/bin/env python3
"""
Example: Hamming [7,4] code

The code is the binary matroid of its generator matrix. Generalized
Hamming weights d_1..d_4 are read off the matroid, and the derived
matroid of the code is compared with the dual (the simplex code) by
their bases series.
"""

import sys
sys.path.insert(0, '.')

import numpy as np

from matroids import MatrixMatroid
from matroids.core.matroids.catalog import HAMMING_7_4


def main():
    G = np.array(HAMMING_7_4)
    code = MatrixMatroid(G, p=2)
    print(f"Generator matrix (rank {code.k} over GF(2)):\n{G}")

    for i in range(1, code.k + 1):
        print(f"d_{i}: {code.generalized_hamming_distance(i)}")

    derived = code.combinatorial_derived()
    print(f"\nDerived matroid: {derived!r}")
    print(f"  bases series:      {derived.bases_series()}")
    print(f"  dual bases series: {code.dual().bases_series()}")

    print("\nDerived elements (supports of minimal dual codewords):")
    for index, circuit in enumerate(derived.elements):
        vector = "".join('1' if e in circuit else '0' for e in range(code.n))
        print(f"  {index:2d}: {vector}")


if __name__ == "__main__":
    main()
