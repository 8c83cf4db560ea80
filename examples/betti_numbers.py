#!/usr/bin/env python3
"""
Example: Betti numbers of elongated derived uniform matroids

For every U(k, n) with n ≤ 6 the derived matroid is elongated by
0..corank and the free resolution of its Stanley-Reisner ring printed.
"""

import sys
sys.path.insert(0, '.')

from matroids import UniformMatroid


def main(max_n: int = 6):
    for n in range(1, max_n + 1):
        for k in range(1, n):
            derived = UniformMatroid(k, n).combinatorial_derived()
            # The maximal elongation is the corank
            for elongation in range(derived.corank + 1):
                elongated = derived.elongate(elongation)
                print(f"U_{k}{n}^({elongation}): {elongated.betti()}")


if __name__ == "__main__":
    main()
