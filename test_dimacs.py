#!/usr/bin/env python3
"""
Tests for DIMACS parsing, printing and instance generators
"""

import os
import tempfile
import unittest

from dpll_sat import CNFFormula, Literal, parse_dimacs, read_dimacs, solve
from dpll_sat.exceptions import DimacsParseError
from dpll_sat.generators import pigeonhole, random_ksat
from dpll_sat.printing import format_dimacs_result, format_formula, format_result


class TestDIMACSParser(unittest.TestCase):
    """Tests for DIMACS format parser."""

    def test_parse_simple(self):
        """Test parsing simple DIMACS format."""
        dimacs = """
        c This is a comment
        p cnf 3 2
        1 2 0
        -1 3 0
        """
        formula = parse_dimacs(dimacs)
        self.assertEqual(len(formula.clauses), 2)
        self.assertEqual(formula.clauses[0], [Literal(1, True), Literal(2, True)])
        self.assertEqual(formula.clauses[1], [Literal(1, False), Literal(3, True)])
        self.assertEqual(formula.variables, [1, 2, 3])

    def test_parse_with_comments(self):
        """Test parsing DIMACS with multiple comments."""
        dimacs = """
        c Comment 1
        c Comment 2
        p cnf 2 2
        1 2 0
        c Another comment
        -1 -2 0
        """
        formula = parse_dimacs(dimacs)
        self.assertEqual(len(formula.clauses), 2)

    def test_empty_clause(self):
        formula = parse_dimacs("p cnf 1 2\n1 0\n0\n")
        self.assertEqual(formula.clauses, [[Literal(1, True)], []])
        self.assertFalse(solve(formula).satisfiable)

    def test_percent_ends_clauses(self):
        formula = parse_dimacs("p cnf 2 1\n1 -2 0\n%\n0\n")
        self.assertEqual(len(formula.clauses), 1)

    def test_missing_terminator(self):
        with self.assertRaises(DimacsParseError) as ctx:
            parse_dimacs("p cnf 2 1\n1 -2\n")
        self.assertEqual(ctx.exception.line_number, 2)
        self.assertIn("terminator", str(ctx.exception))

    def test_non_integer_token(self):
        with self.assertRaises(DimacsParseError) as ctx:
            parse_dimacs("1 x 0\n")
        self.assertEqual(ctx.exception.line_number, 1)
        self.assertEqual(ctx.exception.line, "1 x 0")

    def test_zero_inside_clause(self):
        with self.assertRaises(DimacsParseError):
            parse_dimacs("1 0 2 0\n")

    def test_read_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "sample.cnf")
            with open(path, "w", encoding="utf-8") as f:
                f.write("p cnf 2 2\n1 2 0\n-1 0\n")
            formula = read_dimacs(path)
        self.assertEqual(solve(formula).as_dict(), {1: False, 2: True})


class TestPrinting(unittest.TestCase):

    def test_format_formula(self):
        formula = CNFFormula.from_clauses([[1, -2], [3]])
        self.assertEqual(format_formula(formula), "(x1 | ~x2) & (x3)")

    def test_format_named_formula(self):
        formula = CNFFormula.from_clauses([[("a", False)]])
        self.assertEqual(format_formula(formula), "(~a)")

    def test_format_result(self):
        result = solve(CNFFormula.from_clauses([[1], [-2]]))
        self.assertEqual(format_result(result), "SAT:\nx1 = true\nx2 = false")
        self.assertEqual(format_result(solve(CNFFormula.from_clauses([[1], [-1]]))), "UNSAT")

    def test_format_dimacs_result(self):
        result = solve(CNFFormula.from_clauses([[-2], [1]]))
        self.assertEqual(format_dimacs_result(result), "s SATISFIABLE\nv 1 -2 0")
        unsat = solve(CNFFormula.from_clauses([[1], [-1]]))
        self.assertEqual(format_dimacs_result(unsat), "s UNSATISFIABLE")


class TestGenerators(unittest.TestCase):

    def test_random_ksat_shape(self):
        formula = random_ksat(10, 25, k=3, seed=1)
        self.assertEqual(len(formula.clauses), 25)
        self.assertEqual(formula.declared, tuple(range(1, 11)))
        for clause in formula.clauses:
            self.assertEqual(len({lit.var for lit in clause}), 3)
            self.assertTrue(all(1 <= lit.var <= 10 for lit in clause))

    def test_random_ksat_seeded(self):
        self.assertEqual(random_ksat(6, 10, seed=4), random_ksat(6, 10, seed=4))

    def test_random_ksat_rejects_wide_clauses(self):
        with self.assertRaises(ValueError):
            random_ksat(2, 5, k=3)

    def test_pigeonhole_size(self):
        formula = pigeonhole(4, 3)
        self.assertEqual(len(formula.clauses), 4 + 3 * 6)
        self.assertEqual(formula.num_variables, 12)


if __name__ == '__main__':
    unittest.main()
