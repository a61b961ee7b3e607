"""Bounded recursion evaluator."""

from telestate.engine.recursion import RecursionTrace, evaluate, evaluate_traced

__all__ = ["RecursionTrace", "evaluate", "evaluate_traced"]
