"""
Human readable and DIMACS style rendering of formulas and results.
"""

from typing import Iterable, List, Tuple

from .cnf import CNFFormula, Literal, Variable


def _var_name(var: Variable) -> str:
    return f"x{var}" if isinstance(var, int) else str(var)


def format_literal(lit: Literal) -> str:
    return ("" if lit.sign else "~") + _var_name(lit.var)


def format_clause(clause: Iterable[Literal]) -> str:
    return "(" + " | ".join(format_literal(lit) for lit in clause) + ")"


def format_formula(formula: CNFFormula) -> str:
    """Render e.g. ``(x1 | ~x2) & (x3)``."""
    return " & ".join(format_clause(clause) for clause in formula.clauses)


def format_result(result) -> str:
    """Render a SolveResult as ``UNSAT`` or ``SAT:`` followed by one pair per line."""
    if not result.satisfiable:
        return "UNSAT"
    lines = ["SAT:"]
    lines.extend(f"{_var_name(var)} = {str(value).lower()}" for var, value in result.assignment)
    return "\n".join(lines)


def format_dimacs_result(result) -> str:
    """
    Render a SolveResult in SAT competition output format.

    Only integer variables can be written as DIMACS literals.
    """
    if not result.satisfiable:
        return "s UNSATISFIABLE"
    ordered: List[Tuple[Variable, bool]] = sorted(result.assignment, key=lambda pair: pair[0])
    values = [str(var if value else -var) for var, value in ordered]
    return "s SATISFIABLE\nv " + " ".join(values + ["0"])
