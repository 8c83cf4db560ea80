#!/usr/bin/env python3
"""
Example: Derived circuits outside A₀

The initial dependents A₀ are the selections X of circuits with
|X| > nullity(∪X). For the doubled triangle (a non-fast source) the
ε-closure produces further circuits; this prints every derived circuit
C with |C| <= nullity(∪C), i.e. one that is not in A₀.

Derived elements (circuits of the source) are named a, b, c, ...
"""

import sys
sys.path.insert(0, '.')

from string import ascii_lowercase

from matroids.core.matroids import non_fast_matroid


def main():
    matroid = non_fast_matroid()
    derived = matroid.combinatorial_derived()

    for circuit in derived.circuits():
        nullity = matroid.nullity(derived.circuit_union(circuit))
        if circuit.size <= nullity:
            name = "".join(ascii_lowercase[i] for i in circuit)
            print(f"{name} is a circuit, but not in A_0! (it has nullity {nullity})")


if __name__ == "__main__":
    main()
