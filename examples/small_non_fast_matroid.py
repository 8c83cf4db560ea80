#!/usr/bin/env python3
"""
Example: Oxley-Wang vs combinatorial derived matroid

The Oxley-Wang derived matroid of a binary matroid is the binary column
matroid of its circuit incidence matrix (rows are elements, columns are
circuits). For the doubled triangle it is compared with the
combinatorial derived matroid set by set.
"""

import sys
sys.path.insert(0, '.')

from string import ascii_lowercase

import numpy as np

from matroids import MatrixMatroid, all_subsets
from matroids.core.matroids import non_fast_matroid


def info(m):
    print(f"Got matroid of rank: {m.k} on {m.n} elements")
    print(f"Got {len(m.bases())} bases")
    print(f"Got {len(m.circuits())} circuits")


def one_based(subset) -> str:
    return ", ".join(str(i + 1) for i in subset)


def main():
    matroid = non_fast_matroid()
    circuits = matroid.circuits()

    incidence = np.array([[1 if e in c else 0 for c in circuits] for e in range(matroid.n)])
    print(incidence)
    oxley_wang = MatrixMatroid(incidence, p=2)

    for index, circuit in enumerate(circuits):
        print(f"{ascii_lowercase[index]}: {''.join(str(i + 1) for i in circuit)}")

    derived = matroid.combinatorial_derived()
    print(", ".join("".join(ascii_lowercase[i] for i in c) for c in derived.circuits()))

    print("Oxley-Wang:")
    info(oxley_wang)
    print("Combinatorial derived:")
    info(derived)

    only_ow = only_fjk = 0
    for subset in all_subsets(derived.n):
        in_ow = oxley_wang.is_independent(subset)
        in_fjk = derived.is_independent(subset)
        if in_ow and not in_fjk:
            print(f"{one_based(subset)} is independent in Oxley-Wang but not in combinatorial derived")
            only_ow += 1
        elif in_fjk and not in_ow:
            print(f"{one_based(subset)} is independent in combinatorial derived but not in Oxley-Wang")
            only_fjk += 1

    print(f"Independent in Oxley-Wang but not in combinatorial derived: {only_ow}")
    print(f"Independent in combinatorial derived but not in Oxley-Wang: {only_fjk}")


if __name__ == "__main__":
    main()
