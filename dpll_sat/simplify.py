"""
Simplification rules applied at every node of the search.

Both rules shrink the formula in place and return the assignments they
decided, or None when the formula became unsatisfiable. An empty list means
there was nothing to do.
"""

from typing import Dict, Optional

from .cnf import Assignment, CNFFormula, Variable
from .log_utils import get_logger
from .polarity import Polarity

logger = get_logger()


def unit_propagate(formula: CNFFormula) -> Optional[Assignment]:
    """
    Perform one round of unit propagation.

    The unit clauses present on entry are processed left to right. Units
    created by this round are left for the next call.

    Returns:
        The decided (variable, value) pairs, or None on conflict.
    """
    units = [clause[0] for clause in formula.clauses if len(clause) == 1]
    decided: Dict[Variable, bool] = {}

    for lit in units:
        if lit.var in decided:
            if decided[lit.var] != lit.sign:
                logger.debug("conflicting unit clauses on %s", lit.var)
                return None
            continue

        decided[lit.var] = lit.sign
        if not formula.assign(lit.var, lit.sign):
            logger.debug("unit %s=%s produced an empty clause", lit.var, lit.sign)
            return None

    return list(decided.items())


def pure_literal_assign(formula: CNFFormula, pols: Dict[Variable, Polarity]) -> Optional[Assignment]:
    """
    Eliminate pure literals (variables that appear with only one sign).

    Args:
        formula: Formula to simplify in place
        pols: Polarity map computed for ``formula`` before this call

    Returns:
        The decided (variable, value) pairs, or None on conflict.
    """
    assigns: Assignment = []
    free = set(formula.variables)
    for var, pol in pols.items():
        if not pol.is_pure or var not in free:
            continue
        value = pol is Polarity.POSITIVE
        assigns.append((var, value))
        if not formula.assign(var, value):
            logger.debug("pure literal %s=%s produced an empty clause", var, value)
            return None
        # assigning can make other variables vanish
        free = set(formula.variables)
    return assigns
