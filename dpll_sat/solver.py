"""
DPLL solver.

Each call of the search works on its own copy of the formula, simplifies it
with unit propagation and pure-literal elimination, and otherwise splits on
a free variable, trying the negative value before the positive one.
"""

import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from . import config
from .cnf import Assignment, CNFFormula, Literal, LiteralLike, Variable
from .exceptions import ConfigurationError, InvalidSolutionError, SolverTimeoutError
from .log_utils import get_logger
from .polarity import (
    consistent_assignment, eliminate_tautologies, is_consistent, polarities, report_unknown
)
from .simplify import pure_literal_assign, unit_propagate

logger = get_logger()


class SolveStatus(Enum):
    SATISFIABLE = "SAT"
    UNSATISFIABLE = "UNSAT"


@dataclass
class SolverOptions:
    """Settings for one solver run. Defaults come from ``config``."""

    default_value: bool = config.DEFAULT_VALUE
    fill_unconstrained: bool = config.FILL_UNCONSTRAINED
    verify: bool = config.VERIFY_SOLUTION
    preprocess_tautologies: bool = config.PREPROCESS_TAUTOLOGIES
    max_decisions: Optional[int] = config.MAX_DECISIONS
    timeout: Optional[float] = config.TIMEOUT_SECONDS

    def __post_init__(self):
        if self.max_decisions is not None and self.max_decisions < 0:
            raise ConfigurationError(f"max_decisions must be >= 0, got {self.max_decisions}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")


@dataclass
class SolverStats:
    calls: int = 0
    decisions: int = 0
    backtracks: int = 0
    max_depth: int = 0
    elapsed: float = 0.0


@dataclass
class SolveResult:
    """
    Outcome of a solver run.

    ``assignment`` is empty for UNSAT; for SAT it covers every variable of
    the input formula (see ``SolverOptions.fill_unconstrained``).
    """

    status: SolveStatus
    assignment: Tuple[Tuple[Variable, bool], ...] = ()
    stats: SolverStats = field(default_factory=SolverStats)

    @property
    def satisfiable(self) -> bool:
        return self.status is SolveStatus.SATISFIABLE

    def as_dict(self) -> Dict[Variable, bool]:
        return dict(self.assignment)

    def __bool__(self) -> bool:
        return self.satisfiable


class DPLLSolver:
    """
    Recursive DPLL search over a CNF formula.

    The input formula is never modified.
    """

    def __init__(self, formula: CNFFormula, options: Optional[SolverOptions] = None):
        self.formula = formula
        self.options = options or SolverOptions()
        self.stats = SolverStats()
        self._start = 0.0

    def solve(self) -> SolveResult:
        """
        Solve the SAT problem.

        Returns:
            A SolveResult; UNSAT is reported through its status, never raised.

        Raises:
            SolverTimeoutError: the decision or time budget ran out.
            InvalidSolutionError: verification of a found assignment failed.
        """
        self.stats = SolverStats()
        self._start = time.monotonic()

        working = self.formula.copy()
        working.reconcile()
        if self.options.preprocess_tautologies:
            eliminate_tautologies(working)
        else:
            report_unknown(working)

        limit = sys.getrecursionlimit()
        needed = working.num_variables + config.RECURSION_HEADROOM
        if needed > limit:
            sys.setrecursionlimit(needed)
        try:
            assigns = self._dpll(working, 0)
        finally:
            sys.setrecursionlimit(limit)
            self.stats.elapsed = time.monotonic() - self._start

        if assigns is None:
            logger.info("UNSAT after %d calls, %d decisions", self.stats.calls, self.stats.decisions)
            return SolveResult(SolveStatus.UNSATISFIABLE, (), self.stats)

        complete = self._complete(assigns)
        if self.options.verify and not self.formula.evaluate(complete):
            raise InvalidSolutionError(assignment=complete)
        if self.options.fill_unconstrained:
            assigns = complete

        logger.info("SAT after %d calls, %d decisions", self.stats.calls, self.stats.decisions)
        return SolveResult(SolveStatus.SATISFIABLE, tuple(assigns), self.stats)

    def _complete(self, assigns: Assignment) -> Assignment:
        """Give unconstrained variables the default value."""
        decided = {var for var, _ in assigns}
        # includes variables of clauses appended after construction
        candidates = dict.fromkeys(self.formula.declared)
        candidates.update(dict.fromkeys(self.formula.free_variables()))
        filler = [(var, self.options.default_value)
                  for var in candidates if var not in decided]
        if filler:
            logger.debug("unconstrained variables set to %s: %s",
                         self.options.default_value, [var for var, _ in filler])
        return assigns + filler

    def _check_budget(self) -> None:
        max_decisions = self.options.max_decisions
        if max_decisions is not None and self.stats.decisions > max_decisions:
            raise SolverTimeoutError("Decision budget exhausted",
                                     time_spent=time.monotonic() - self._start,
                                     decisions=self.stats.decisions)
        if self.options.timeout is not None:
            spent = time.monotonic() - self._start
            if spent > self.options.timeout:
                raise SolverTimeoutError(time_spent=spent, decisions=self.stats.decisions)

    def _dpll(self, formula: CNFFormula, depth: int) -> Optional[Assignment]:
        """
        DPLL algorithm.

        Args:
            formula: Formula of the caller; it is copied, never modified
            depth: Number of decisions on the current path

        Returns:
            The assignments decided in this subtree if SAT, None if UNSAT.
        """
        self._check_budget()
        self.stats.calls += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        formula = formula.copy()

        pols = polarities(formula)
        if formula.has_empty_clause():
            return None
        if is_consistent(pols):
            shortcut = consistent_assignment(pols)
            if formula.evaluate(shortcut):
                return shortcut

        assigns = unit_propagate(formula)
        if assigns is None:
            return None

        pure = pure_literal_assign(formula, polarities(formula))
        if pure is None:
            return None
        assigns = assigns + pure

        if formula.num_variables == 0:
            # every remaining clause was satisfied
            return assigns

        var = self._choose_variable(formula)
        self.stats.decisions += 1

        # First try negative polarity.
        logger.debug("depth %d: trying %s=False", depth, var)
        formula.clauses.append([Literal(var, False)])
        result = self._dpll(formula, depth + 1)
        if result is not None:
            return assigns + result

        # The formula was unsat; flip the decision.
        self.stats.backtracks += 1
        logger.debug("depth %d: backtracking, trying %s=True", depth, var)
        formula.clauses[-1][0] = Literal(var, True)
        result = self._dpll(formula, depth + 1)
        return None if result is None else assigns + result

    def _choose_variable(self, formula: CNFFormula) -> Variable:
        """Pick the last free variable."""
        return formula.variables[-1]


def solve(formula: CNFFormula, options: Optional[SolverOptions] = None) -> SolveResult:
    """Solve ``formula`` with a fresh DPLLSolver."""
    return DPLLSolver(formula, options).solve()


def solve_sat(clauses: Iterable[Iterable[LiteralLike]],
              options: Optional[SolverOptions] = None) -> Optional[Dict[Variable, bool]]:
    """
    Convenience function to solve a SAT problem.

    Args:
        clauses: List of clauses in CNF format, e.g. ``[[1, -2], [2]]``

    Returns:
        Satisfying assignment if SAT, None if UNSAT
    """
    result = solve(CNFFormula.from_clauses(clauses), options)
    return result.as_dict() if result.satisfiable else None
