#!/usr/bin/env python3
"""
Examples for the DPLL SAT solver
"""

from dpll_sat import CNFFormula, DPLLSolver, parse_dimacs, polarities, solve
from dpll_sat.generators import graph_coloring, pigeonhole
from dpll_sat.printing import format_formula, format_result


def example_3_coloring():
    """
    Graph 3-coloring problem.

    Graph: Triangle (3 vertices, all connected)
    This is satisfiable.
    """
    print("\n" + "="*60)
    print("Example: Graph 3-Coloring (Triangle)")
    print("="*60)

    n_colors = 3
    formula = graph_coloring([(0, 1), (0, 2), (1, 2)], n_colors)
    result = solve(formula)

    if result:
        print("SAT - 3-coloring exists!")
        print("\nColoring:")
        values = result.as_dict()
        for vertex in range(3):
            for color in range(n_colors):
                if values[vertex * n_colors + color + 1]:
                    print(f"  Vertex {vertex}: Color {color}")
    else:
        print("UNSAT - No 3-coloring exists")


def example_with_polarity_analysis():
    """
    Show the polarity of each variable before solving.
    """
    print("\n" + "="*60)
    print("Example: Polarity Analysis")
    print("="*60)

    formula = CNFFormula.from_clauses([
        [1, 2],
        [1, 3],
        [1, 4],
        [-1, 5],
        [-2, -3, -4]
    ])
    print("\nFormula: " + format_formula(formula))

    print("\nPolarities:")
    for var, pol in sorted(polarities(formula).items()):
        print(f"  Variable {var}: {pol.value}")

    solver = DPLLSolver(formula)
    result = solver.solve()
    print("\n" + format_result(result))
    print(f"calls={solver.stats.calls} decisions={solver.stats.decisions}")


def example_dimacs_format():
    """
    Example using DIMACS format.
    """
    print("\n" + "="*60)
    print("Example: DIMACS Format")
    print("="*60)

    dimacs = """
    c (x1 | ~x2) & (x2 | x3) & (~x1 | ~x3)
    p cnf 3 3
    1 -2 0
    2 3 0
    -1 -3 0
    """

    print("\nDIMACS input:")
    print(dimacs)

    print(format_result(solve(parse_dimacs(dimacs))))


def example_pigeonhole():
    """
    Pigeonhole principle: 4 pigeons in 3 holes is UNSAT.
    """
    print("\n" + "="*60)
    print("Example: Pigeonhole Principle (4 pigeons, 3 holes)")
    print("="*60)

    formula = pigeonhole(4, 3)
    print(f"\n{len(formula)} clauses generated")

    result = solve(formula)

    if result:
        print("SAT - Assignment found (unexpected!)")
    else:
        print("UNSAT - Cannot fit 4 pigeons in 3 holes (as expected)")
        print(f"explored {result.stats.calls} nodes, {result.stats.backtracks} backtracks")


if __name__ == "__main__":
    print("\nDPLL SAT Solver - Examples")
    print("="*60)

    example_with_polarity_analysis()
    example_3_coloring()
    example_dimacs_format()
    example_pigeonhole()

    print("\n" + "="*60)
    print("All examples completed!")
    print("="*60)
