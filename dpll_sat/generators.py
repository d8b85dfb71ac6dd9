"""
Generators for benchmark and test instances.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cnf import CNFFormula


def random_ksat(n_vars: int, n_clauses: int, k: int = 3, seed: Optional[int] = None) -> CNFFormula:
    """
    Uniform random k-SAT: each clause draws ``k`` distinct variables and
    independent signs.

    Args:
        n_vars: Number of variables (1..n_vars)
        n_clauses: Number of clauses
        k: Clause width, at most ``n_vars``
        seed: Seed for ``numpy.random.default_rng``

    Returns:
        CNFFormula object
    """
    if not 0 < k <= n_vars:
        raise ValueError(f"clause width k={k} must be in 1..{n_vars}")

    rng = np.random.default_rng(seed)
    clauses = []
    for _ in range(n_clauses):
        variables = rng.choice(n_vars, size=k, replace=False) + 1
        signs = rng.integers(0, 2, size=k) * 2 - 1
        clauses.append([int(v) * int(s) for v, s in zip(variables, signs)])

    return CNFFormula.from_clauses(clauses, variables=range(1, n_vars + 1))


def pigeonhole(n_pigeons: int, n_holes: int) -> CNFFormula:
    """
    Pigeonhole principle: every pigeon sits in a hole, no hole holds two.

    Unsatisfiable whenever ``n_pigeons > n_holes``. Pigeon p in hole h is
    variable ``p * n_holes + h + 1``.
    """
    clauses = []

    # Each pigeon must be in at least one hole
    for pigeon in range(n_pigeons):
        clauses.append([pigeon * n_holes + hole + 1 for hole in range(n_holes)])

    # At most one pigeon per hole
    for hole in range(n_holes):
        for p1 in range(n_pigeons):
            for p2 in range(p1 + 1, n_pigeons):
                clauses.append([-(p1 * n_holes + hole + 1), -(p2 * n_holes + hole + 1)])

    return CNFFormula.from_clauses(clauses)


def graph_coloring(edges: Iterable[Tuple[int, int]], n_colors: int) -> CNFFormula:
    """
    Graph coloring: vertex v has color c is variable ``v * n_colors + c + 1``.

    Vertices are the integers appearing in ``edges``.
    """
    edges = list(edges)
    vertices = sorted({v for edge in edges for v in edge})

    def var(vertex: int, color: int) -> int:
        return vertex * n_colors + color + 1

    clauses: List[List[int]] = []
    for v in vertices:
        # at least one color
        clauses.append([var(v, c) for c in range(n_colors)])
        # at most one color
        for c1 in range(n_colors):
            for c2 in range(c1 + 1, n_colors):
                clauses.append([-var(v, c1), -var(v, c2)])

    # adjacent vertices differ
    for a, b in edges:
        for c in range(n_colors):
            clauses.append([-var(a, c), -var(b, c)])

    return CNFFormula.from_clauses(clauses)
