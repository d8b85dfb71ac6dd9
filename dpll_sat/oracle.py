"""
Truth-table oracle for small formulas.
"""

import itertools
from typing import List, Optional, Tuple

from . import config
from .cnf import CNFFormula, Variable
from .exceptions import ConfigurationError


def brute_force(formula: CNFFormula) -> Optional[List[Tuple[Variable, bool]]]:
    """
    Try all ``2^n`` assignments of the formula's variables.

    Returns:
        The first satisfying assignment found, or None if there is none.
    """
    variables = formula.free_variables()
    if len(variables) > config.MAX_BRUTE_FORCE_VARIABLES:
        raise ConfigurationError(
            f"{len(variables)} variables exceed the brute force limit of "
            f"{config.MAX_BRUTE_FORCE_VARIABLES}")

    for values in itertools.product((False, True), repeat=len(variables)):
        assignment = list(zip(variables, values))
        if formula.evaluate(assignment):
            return assignment
    return None
