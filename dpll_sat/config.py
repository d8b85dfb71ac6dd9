"""
Default settings for the solver.

Edit these values to change the behaviour of every solver built without
explicit options. ``SolverOptions`` in ``solver.py`` reads them as its
defaults.
"""

from __future__ import annotations

import logging
from typing import Optional

# ==== Assignment completion ================================================

# Value given to variables that never have to be decided (they vanished
# from the clause set, or were declared but never occurred).
DEFAULT_VALUE: bool = False

# Whether such variables are added to the final assignment at all.
FILL_UNCONSTRAINED: bool = True

# ==== Checks ===============================================================

# Re-evaluate the input formula under the returned assignment.
VERIFY_SOLUTION: bool = True

# Drop tautological clauses (x | ~x | ...) once before the search.
PREPROCESS_TAUTOLOGIES: bool = True

# ==== Budget ===============================================================

# Upper bound on branching decisions; None means unlimited.
MAX_DECISIONS: Optional[int] = None

# Wall-clock budget in seconds; None means unlimited.
TIMEOUT_SECONDS: Optional[float] = None

# Extra interpreter frames kept on top of one frame per variable.
RECURSION_HEADROOM: int = 200

# ==== Oracle ===============================================================

# Largest instance the truth-table oracle will enumerate.
MAX_BRUTE_FORCE_VARIABLES: int = 20

# ==== Logging ==============================================================

LOG_LEVEL: int = logging.WARNING
