"""
Custom exception classes for the DPLL solver.

Unsatisfiability is a normal solver result and is never raised; the classes
here cover malformed input, misuse of the formula model, exhausted budgets
and configuration problems.
"""


class SATBaseException(Exception):
    """Base exception class for all solver related exceptions."""
    pass


class DimacsParseError(SATBaseException):
    """
    Raised when a DIMACS clause line cannot be parsed.

    Attributes:
        line_number: 1-based line number in the input (None if unknown)
        line: The offending line text
    """
    def __init__(self, message="Malformed DIMACS input", line_number=None, line=None):
        self.line_number = line_number
        self.line = line
        self.message = message
        if line_number is not None:
            self.message = f"{message} (line {line_number}: {line!r})"
        super().__init__(self.message)


class UnassignedVariableError(SATBaseException):
    """
    Raised when a formula is evaluated under an assignment that does not
    cover every variable occurring in it.
    """
    def __init__(self, message="Variable missing from assignment", variable=None):
        self.variable = variable
        self.message = message
        if variable is not None:
            self.message = f"{message}: {variable}"
        super().__init__(self.message)


class InvalidSolutionError(SATBaseException, RuntimeError):
    """Raised when a satisfying assignment fails its own verification."""
    def __init__(self, message="Invalid solution found", assignment=None):
        self.assignment = assignment
        self.message = message
        super().__init__(self.message)


class SolverTimeoutError(SATBaseException):
    """
    Raised when a solver exceeds its allocated time or decision budget.

    Attributes:
        time_spent: Time spent before giving up, in seconds
        decisions: Number of branching decisions made
    """
    def __init__(self, message="Solver exceeded its budget", time_spent=None, decisions=None):
        self.time_spent = time_spent
        self.decisions = decisions
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        details = []
        if self.time_spent is not None:
            details.append(f"time_spent={self.time_spent:.2f}s")
        if self.decisions is not None:
            details.append(f"decisions={self.decisions}")

        detail_str = ", ".join(details)
        return f"{self.message} ({detail_str})" if details else self.message


class ConfigurationError(SATBaseException):
    """
    Raised when there's a problem with solver configuration.
    """
    pass
