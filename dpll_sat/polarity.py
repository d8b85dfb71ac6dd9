"""
Polarity analysis.

The polarity of a variable records which signs it occurs with: not at all,
only positive, only negative, or both. Polarities form a small lattice whose
join combines the occurrences seen so far.
"""

from enum import Enum
from typing import Dict, List, Tuple

from .cnf import CNFFormula, Variable
from .log_utils import get_logger

logger = get_logger()


class Polarity(Enum):
    UNKNOWN = "unknown"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MIXED = "mixed"

    @classmethod
    def of(cls, sign: bool) -> "Polarity":
        """Polarity of a single literal."""
        return cls.POSITIVE if sign else cls.NEGATIVE

    def join(self, other: "Polarity") -> "Polarity":
        """
        Least upper bound of two polarities.

        UNKNOWN is the identity, MIXED absorbs everything, and POSITIVE
        joined with NEGATIVE is MIXED.
        """
        if self is other or other is Polarity.UNKNOWN:
            return self
        if self is Polarity.UNKNOWN:
            return other
        return Polarity.MIXED

    @property
    def is_pure(self) -> bool:
        return self in (Polarity.POSITIVE, Polarity.NEGATIVE)


def polarities(formula: CNFFormula) -> Dict[Variable, Polarity]:
    """
    Compute the polarity of every variable in one pass over the clauses.

    Does not modify the formula.
    """
    pols: Dict[Variable, Polarity] = {}
    for clause in formula.clauses:
        for lit in clause:
            pols[lit.var] = pols.get(lit.var, Polarity.UNKNOWN).join(Polarity.of(lit.sign))
    return pols


def clause_polarity(var: Variable, clause: List) -> Polarity:
    """Polarity of ``var`` within a single clause."""
    pol = Polarity.UNKNOWN
    for lit in clause:
        if lit.var == var:
            pol = pol.join(Polarity.of(lit.sign))
    return pol


def variable_polarity(formula: CNFFormula, var: Variable) -> Polarity:
    """
    Compute the polarity of one variable across the formula.

    Side effect: every clause in which ``var`` occurs with both signs is a
    tautology and is removed from ``formula.clauses``. Such clauses do not
    contribute to the result.
    """
    pol = Polarity.UNKNOWN
    remaining = []
    for clause in formula.clauses:
        c_pol = clause_polarity(var, clause)
        if c_pol is Polarity.MIXED:
            continue
        pol = pol.join(c_pol)
        remaining.append(clause)
    if len(remaining) != len(formula.clauses):
        formula.clauses = remaining
        formula.reconcile()
    return pol


def is_consistent(pols: Dict[Variable, Polarity]) -> bool:
    """True if every variable occurs with exactly one sign."""
    return all(pol.is_pure for pol in pols.values())


def consistent_assignment(pols: Dict[Variable, Polarity]) -> List[Tuple[Variable, bool]]:
    """Read an assignment directly off a consistent polarity map."""
    return [(var, pol is Polarity.POSITIVE) for var, pol in pols.items()]


def report_unknown(formula: CNFFormula) -> List[Variable]:
    """
    Log declared variables that occur in no clause (UNKNOWN polarity).

    Returns:
        Those variables.
    """
    present = set(formula.free_variables())
    unknown = [var for var in formula.declared if var not in present]
    if unknown:
        logger.warning(
            "unknown polarity for variables %s (they don't occur anywhere in the formula)",
            unknown)
    return unknown


def eliminate_tautologies(formula: CNFFormula) -> List[Variable]:
    """
    Run the single-variable polarity pass for every declared variable.

    Tautological clauses are dropped along the way. Variables that occur
    in no clause at all are reported first; a variable whose only clauses
    were tautologies removed by an earlier pass is not.

    Returns:
        The variables found with UNKNOWN polarity.
    """
    unknown = report_unknown(formula)
    for var in formula.declared:
        variable_polarity(formula, var)
    return unknown
