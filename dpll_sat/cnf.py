"""
CNF formula model.

A formula is a conjunction of clauses, a clause is a disjunction of
literals, and a literal is a variable together with a sign. Variables can be
any hashable value; formulas read from DIMACS use integers.
"""

from typing import Dict, Hashable, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from .exceptions import UnassignedVariableError
from .log_utils import get_logger

logger = get_logger()

Variable = Hashable
Assignment = List[Tuple[Variable, bool]]


class Literal(NamedTuple):
    """A positive (``sign=True``) or negative occurrence of a variable."""

    var: Variable
    sign: bool

    @classmethod
    def from_int(cls, value: int) -> "Literal":
        """Convert a signed DIMACS integer, e.g. ``-7`` -> ``Literal(7, False)``."""
        if value == 0:
            raise ValueError("0 is a clause terminator, not a literal")
        return cls(abs(value), value > 0)

    def negate(self) -> "Literal":
        return Literal(self.var, not self.sign)

    def is_true(self, value: bool) -> bool:
        """Truth value of the literal when its variable is set to ``value``."""
        return self.sign == value


Clause = List[Literal]
LiteralLike = Union[int, Literal, Tuple[Variable, bool]]


def _as_literal(item: LiteralLike) -> Literal:
    if isinstance(item, Literal):
        return item
    if isinstance(item, int) and not isinstance(item, bool):
        return Literal.from_int(item)
    var, sign = item
    return Literal(var, bool(sign))


def _dedupe(clause: Iterable[Literal]) -> Clause:
    # dict keeps the first occurrence and the original order
    return list(dict.fromkeys(clause))


class CNFFormula:
    """
    Represents a CNF formula together with its free variables.

    ``variables`` always lists exactly the identifiers that still occur in
    ``clauses``; ``declared`` keeps every variable the formula was built
    with, so that a complete assignment can be reported at the end.
    """

    def __init__(self, clauses: List[Clause], variables: Optional[Iterable[Variable]] = None,
                 declared: Optional[Iterable[Variable]] = None):
        """
        Initialize a formula from already-built clauses.

        Args:
            clauses: List of clauses, each a list of ``Literal``.
            variables: Declared free variables. Derived from the clauses when
                omitted. Identifiers that occur in the clauses but are missing
                here are added with a warning; listed identifiers that occur
                nowhere are kept in ``declared`` only.
            declared: Every variable of the original problem. Defaults to the
                reconciled ``variables``.
        """
        self.clauses = clauses
        present = self.free_variables()
        if variables is None:
            self.variables = present
            listed = present
        else:
            listed = list(dict.fromkeys(variables))
            known = set(listed)
            missing = [var for var in present if var not in known]
            if missing:
                logger.warning("variables %s occur in clauses but were not declared", missing)
            listed = listed + missing
            self.variables = listed
            self.reconcile()

        if declared is None:
            self.declared = tuple(listed)
        else:
            declared = list(dict.fromkeys(declared))
            known = set(declared)
            self.declared = tuple(declared + [var for var in listed if var not in known])

    @classmethod
    def from_clauses(cls, clauses: Iterable[Iterable[LiteralLike]],
                     variables: Optional[Iterable[Variable]] = None) -> "CNFFormula":
        """
        Build a formula, deduplicating literals and reconciling variables.

        Args:
            clauses: Clauses given as signed integers, ``Literal`` values or
                ``(variable, sign)`` pairs.
            variables: Optional declared variable list, reconciled as in
                ``__init__``.

        Returns:
            CNFFormula object
        """
        built = [_dedupe(_as_literal(item) for item in clause) for clause in clauses]
        return cls(built, variables)

    @property
    def num_variables(self) -> int:
        return len(self.variables)

    def copy(self) -> "CNFFormula":
        """Return a formula whose clause lists are independent of this one."""
        return CNFFormula([clause[:] for clause in self.clauses], self.variables, self.declared)

    def free_variables(self) -> List[Variable]:
        """The distinct variables occurring in the clauses, in order of first occurrence."""
        return list(dict.fromkeys(lit.var for clause in self.clauses for lit in clause))

    def reconcile(self) -> None:
        """Make ``variables`` match the identifiers still present in ``clauses``."""
        present = self.free_variables()
        present_set = set(present)
        kept = [var for var in self.variables if var in present_set]
        listed = set(kept)
        self.variables = kept + [var for var in present if var not in listed]

    def has_empty_clause(self) -> bool:
        return any(len(clause) == 0 for clause in self.clauses)

    def assign(self, var: Variable, value: bool) -> bool:
        """
        Fix ``var`` to ``value`` in place.

        Clauses satisfied by the assignment are removed and literals it
        falsifies are stripped from the rest.

        Returns:
            False if some clause became empty (the formula is unsatisfiable),
            True otherwise.
        """
        satisfied = Literal(var, value)
        consistent = True
        remaining = []
        for clause in self.clauses:
            if satisfied in clause:
                continue
            reduced = [lit for lit in clause if lit.var != var]
            if not reduced:
                consistent = False
            remaining.append(reduced)
        self.clauses = remaining
        self.reconcile()
        return consistent

    def evaluate(self, assignment: Union[Mapping[Variable, bool], Iterable[Tuple[Variable, bool]]]) -> bool:
        """
        Evaluate the formula under a total assignment.

        Raises:
            UnassignedVariableError: a variable of the formula has no value.
        """
        env: Dict[Variable, bool] = dict(assignment)
        for var in self.free_variables():
            if var not in env:
                raise UnassignedVariableError(variable=var)
        return all(any(lit.is_true(env[lit.var]) for lit in clause) for clause in self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNFFormula):
            return NotImplemented
        return self.clauses == other.clauses

    __hash__ = None

    def __repr__(self) -> str:
        return f"CNFFormula(variables={self.variables!r}, clauses={self.clauses!r})"
