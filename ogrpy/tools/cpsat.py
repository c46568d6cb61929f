#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## cpsat.py
##
"""
    Enumerate Golomb rulers with OR-Tools' CP-SAT solver.

    Same model as the classic CSPLib problem 006 formulation (increasing marks,
    all differences distinct) but with a fixed length and no objective: the solver
    enumerates all solutions instead of searching for the shortest ruler. No symmetry
    breaking is added, as a ruler and its mirror image are different rulers.

    Useful to cross-check the enumeration algorithms of :mod:`ogrpy.enumeration`.

    Documentation of the solver's own Python API:
    https://google.github.io/or-tools/python/ortools/sat/python/cp_model.html
"""
import logging

from ..rulers.ruler import GolombRuler
from ..exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def golomb_rulers_cpsat(order, length, time_limit=None):
    """
        All Golomb rulers with order `order` and length `length`, sorted.

        :param: order: number of marks, including 0
        :param: length: largest mark
        :param: time_limit: optional, time limit in seconds for the solver
    """
    from ortools.sat.python import cp_model as ort

    if order < 1 or length < 0:
        raise InvalidParameterError(f"Need order >= 1 and length >= 0, got order {order} and length {length}")
    if order == 1:
        return [GolombRuler()] if length == 0 else []
    if length == 0:
        return []

    ort_model = ort.CpModel()
    marks = [ort_model.new_int_var(0, length, f"marks[{i}]") for i in range(order)]
    ort_model.add(marks[0] == 0)
    ort_model.add(marks[-1] == length)
    for lhs, rhs in zip(marks, marks[1:]):
        ort_model.add(lhs < rhs)

    diffs = []
    for i in range(order - 1):
        for j in range(i + 1, order):
            d = ort_model.new_int_var(1, length, f"diff[{i},{j}]")
            ort_model.add(d == marks[j] - marks[i])
            diffs.append(d)
    ort_model.add_all_different(diffs)

    class RulerCollector(ort.CpSolverSolutionCallback):
        """ Collects the marks of every solution as a `GolombRuler` """

        def __init__(self):
            super().__init__()
            self.rulers = []

        def on_solution_callback(self):
            self.rulers.append(GolombRuler([self.value(m) for m in marks[1:]]))

    ort_solver = ort.CpSolver()
    ort_solver.parameters.enumerate_all_solutions = True
    ort_solver.parameters.num_workers = 1  # enumeration is single-threaded in CP-SAT
    if time_limit is not None:
        ort_solver.parameters.max_time_in_seconds = float(time_limit)

    cb = RulerCollector()
    status = ort_solver.solve(ort_model, cb)
    logger.debug("CP-SAT status %s, %d Golomb rulers of order %d and length %d",
                 ort_solver.status_name(status), len(cb.rulers), order, length)
    return sorted(cb.rulers)
