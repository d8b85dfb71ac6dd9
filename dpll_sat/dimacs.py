"""
DIMACS CNF reader.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .cnf import CNFFormula, Literal
from .exceptions import DimacsParseError


def parse_clause_line(line: str, line_number: Optional[int] = None) -> List[Literal]:
    """
    Parse one clause line such as ``1 -3 0``.

    Raises:
        DimacsParseError: a token is not an integer or the trailing 0 is missing.
    """
    try:
        values = [int(token) for token in line.split()]
    except ValueError:
        raise DimacsParseError("Non-integer token", line_number, line) from None

    if not values or values[-1] != 0:
        raise DimacsParseError("Missing clause terminator 0", line_number, line)
    if 0 in values[:-1]:
        raise DimacsParseError("Terminator 0 before end of clause", line_number, line)

    return [Literal.from_int(value) for value in values[:-1]]


def parse_dimacs_lines(lines: Iterable[str]) -> CNFFormula:
    """
    Parse a CNF formula from DIMACS lines.

    Comment (``c``) and problem (``p``) lines are skipped, as are blank
    lines. A line holding only ``%`` ends the clause section.
    """
    clauses = []

    for line_number, line in enumerate(lines, start=1):
        line = line.strip()

        if not line:
            continue
        if line.startswith('c') or line.startswith('p'):
            continue
        if line == '%':
            break

        clauses.append(parse_clause_line(line, line_number))

    return CNFFormula.from_clauses(clauses)


def parse_dimacs(text: str) -> CNFFormula:
    """
    Parse a CNF formula in DIMACS format.

    Args:
        text: DIMACS format text

    Returns:
        CNFFormula object
    """
    return parse_dimacs_lines(text.splitlines())


def read_dimacs(path: Union[str, Path]) -> CNFFormula:
    """Read a DIMACS file from disk."""
    with open(path, encoding='utf-8') as f:
        return parse_dimacs_lines(f)
