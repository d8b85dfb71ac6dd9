"""
Command line entry point.

Exit status follows the SAT competition convention: 10 for SAT, 20 for
UNSAT, 1 for errors.
"""

import argparse
import glob
import os
import sys
import time

from tqdm import tqdm

from .dimacs import read_dimacs
from .exceptions import SATBaseException
from .generators import random_ksat
from .log_utils import get_logger, set_verbosity
from .oracle import brute_force
from .printing import format_dimacs_result, format_formula, format_result
from .solver import SolverOptions, solve

logger = get_logger()

EXIT_SAT = 10
EXIT_UNSAT = 20
EXIT_ERROR = 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog='dpll-sat',
        description='Decide satisfiability of a CNF formula in DIMACS format with DPLL.')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('file', nargs='?', help='DIMACS CNF file to solve')
    source.add_argument('--bench', metavar='DIR', help='solve every *.cnf file in DIR')
    source.add_argument('--random', nargs=2, type=int, metavar=('VARS', 'CLAUSES'),
                        help='solve a random k-CNF instance')
    parser.add_argument('--k', type=int, default=3, help='clause width for --random')
    parser.add_argument('--seed', type=int, default=None, help='seed for --random')
    parser.add_argument('--show-formula', action='store_true', help='print the parsed formula')
    parser.add_argument('--dimacs-output', action='store_true',
                        help='print the result as "s ..." / "v ... 0" lines')
    parser.add_argument('--cross-check', action='store_true',
                        help='compare the verdict with a truth-table oracle (small instances)')
    parser.add_argument('--no-verify', action='store_true',
                        help='skip re-evaluating the formula under the found assignment')
    parser.add_argument('--max-decisions', type=int, default=None)
    parser.add_argument('--timeout', type=float, default=None, help='seconds')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def _options(opts):
    return SolverOptions(verify=not opts.no_verify,
                         max_decisions=opts.max_decisions,
                         timeout=opts.timeout)


def run_single(formula, opts):
    if opts.show_formula:
        print("Formula: " + format_formula(formula))

    result = solve(formula, _options(opts))

    if opts.cross_check:
        expected = brute_force(formula) is not None
        if expected != result.satisfiable:
            logger.error("oracle disagrees: solver=%s oracle=%s",
                         result.status.value, "SAT" if expected else "UNSAT")
            return EXIT_ERROR

    print(format_dimacs_result(result) if opts.dimacs_output else format_result(result))
    return EXIT_SAT if result.satisfiable else EXIT_UNSAT


def run_bench(directory, opts):
    files = sorted(glob.glob(os.path.join(directory, '*.cnf')))
    if not files:
        logger.error("no .cnf files found in %s", directory)
        return EXIT_ERROR

    counts = {"SAT": 0, "UNSAT": 0, "ERROR": 0}
    start_time = time.time()
    for cnf_filepath in tqdm(files, desc=f"Solving '{directory}'", dynamic_ncols=True):
        try:
            result = solve(read_dimacs(cnf_filepath), _options(opts))
        except (SATBaseException, OSError, ValueError) as e:
            logger.warning("%s: %s", os.path.basename(cnf_filepath), e)
            counts["ERROR"] += 1
            continue
        counts[result.status.value] += 1
    end_time = time.time()

    print(f"{len(files)} instances in {end_time - start_time:.2f}s: "
          f"{counts['SAT']} SAT, {counts['UNSAT']} UNSAT, {counts['ERROR']} errors")
    return EXIT_ERROR if counts["ERROR"] else 0


def main(argv=None):
    opts = build_parser().parse_args(argv)
    set_verbosity(opts.verbose)

    try:
        if opts.bench:
            return run_bench(opts.bench, opts)
        if opts.random:
            n_vars, n_clauses = opts.random
            return run_single(random_ksat(n_vars, n_clauses, opts.k, opts.seed), opts)
        return run_single(read_dimacs(opts.file), opts)
    except (SATBaseException, OSError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
