#!/usr/bin/env python3
"""
Tests for unit propagation and pure-literal elimination
"""

import unittest

from dpll_sat.cnf import CNFFormula, Literal
from dpll_sat.polarity import polarities
from dpll_sat.simplify import pure_literal_assign, unit_propagate


class TestUnitPropagation(unittest.TestCase):
    """Tests for unit_propagate."""

    def test_positive_unit(self):
        """(x) sets x, removes clauses with x and leaves no x behind."""
        formula = CNFFormula.from_clauses([[1], [1, 2], [-1, 3], [2, 3]])
        self.assertEqual(unit_propagate(formula), [(1, True)])
        self.assertEqual(formula.clauses, [[Literal(3, True)],
                                           [Literal(2, True), Literal(3, True)]])
        self.assertNotIn(1, formula.free_variables())
        self.assertNotIn(1, formula.variables)

    def test_negative_unit(self):
        formula = CNFFormula.from_clauses([[-1], [1, 2], [-1, 3]])
        self.assertEqual(unit_propagate(formula), [(1, False)])
        self.assertEqual(formula.clauses, [[Literal(2, True)]])

    def test_conflicting_units(self):
        self.assertIsNone(unit_propagate(CNFFormula.from_clauses([[1], [-1]])))
        self.assertIsNone(unit_propagate(CNFFormula.from_clauses([[-1], [1]])))

    def test_conflict_through_stripping(self):
        formula = CNFFormula.from_clauses([[1], [2], [-1, -2]])
        self.assertIsNone(unit_propagate(formula))

    def test_nothing_to_do(self):
        """No unit clause is an empty result, not a conflict."""
        formula = CNFFormula.from_clauses([[1, 2]])
        result = unit_propagate(formula)
        self.assertIsNotNone(result)
        self.assertEqual(result, [])
        self.assertEqual(len(formula.clauses), 1)

    def test_single_scan(self):
        """Units created during a round wait for the next call."""
        formula = CNFFormula.from_clauses([[1], [-1, 2], [-2, 3]])
        self.assertEqual(unit_propagate(formula), [(1, True)])
        self.assertEqual(formula.clauses, [[Literal(2, True)],
                                           [Literal(2, False), Literal(3, True)]])
        self.assertEqual(unit_propagate(formula), [(2, True)])
        self.assertEqual(formula.clauses, [[Literal(3, True)]])

    def test_repeated_unit(self):
        formula = CNFFormula.from_clauses([[1], [1], [1, 2]])
        self.assertEqual(unit_propagate(formula), [(1, True)])
        self.assertEqual(formula.clauses, [])


class TestPureLiteral(unittest.TestCase):
    """Tests for pure_literal_assign."""

    def test_negative_pure_literal(self):
        """A variable occurring only negated is set to False and its clauses vanish."""
        formula = CNFFormula.from_clauses([[-1, 2], [-1, -2]])
        self.assertEqual(pure_literal_assign(formula, polarities(formula)), [(1, False)])
        self.assertEqual(formula.clauses, [])
        self.assertEqual(formula.variables, [])

    def test_positive_pure_literal(self):
        formula = CNFFormula.from_clauses([[1, 2], [1, -2], [2, 3], [-2, -3]])
        self.assertEqual(pure_literal_assign(formula, polarities(formula)), [(1, True)])
        self.assertEqual(len(formula.clauses), 2)

    def test_mixed_variables_untouched(self):
        formula = CNFFormula.from_clauses([[1, 2], [-1, -2]])
        self.assertEqual(pure_literal_assign(formula, polarities(formula)), [])
        self.assertEqual(len(formula.clauses), 2)

    def test_vanished_variables_skipped(self):
        """Variables whose clauses were all removed are not assigned."""
        formula = CNFFormula.from_clauses([[-1, 2], [-1, -3], [3, 4], [-3, 4]])
        result = pure_literal_assign(formula, polarities(formula))
        self.assertEqual(result, [(1, False), (4, True)])
        self.assertEqual(formula.clauses, [])


if __name__ == '__main__':
    unittest.main()
