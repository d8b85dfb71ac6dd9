"""
DPLL SAT solver: unit propagation, pure-literal elimination and
backtracking search over CNF formulas.
"""

from .cnf import CNFFormula, Literal
from .dimacs import parse_dimacs, read_dimacs
from .polarity import Polarity, polarities, variable_polarity
from .simplify import pure_literal_assign, unit_propagate
from .solver import DPLLSolver, SolveResult, SolverOptions, SolveStatus, solve, solve_sat

__all__ = [
    "CNFFormula", "Literal", "Polarity", "DPLLSolver", "SolveResult", "SolverOptions",
    "SolveStatus", "parse_dimacs", "read_dimacs", "polarities", "variable_polarity",
    "pure_literal_assign", "unit_propagate", "solve", "solve_sat",
]
