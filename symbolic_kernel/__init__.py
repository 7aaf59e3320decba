"""Symbolic Kernel Package

A small symbolic-computation kernel: immutable expression trees with numeric
evaluation, polynomial-property inference, symbolic differentiation,
peephole simplification and canonical rendering.
"""

from .expression_tree import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  OpType,
  constant, variable, add, sub, mul, div, negate, identity, power,
  sqrt, sin, cos, tan, cot, ln, derivative,
  free_variables, is_constant, is_polynomial, polynomial_degree,
  compute, evaluate_batch, differentiate, render,
  Expression, ExpressionSimplifier, to_sympy, latex_representation
)
from .errors import (
  EvalError, UndefinedVariable, DivisionByZero, NegativeRadicand,
  LogarithmDomainError, PowerDomainError
)
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Node", "Constant", "Variable", "UnaryOp", "BinaryOp", "Power", "NamedFunction",
  "Derivative", "OpType",
  "constant", "variable", "add", "sub", "mul", "div", "negate", "identity", "power",
  "sqrt", "sin", "cos", "tan", "cot", "ln", "derivative",
  "free_variables", "is_constant", "is_polynomial", "polynomial_degree",
  "compute", "evaluate_batch", "differentiate", "render",
  "Expression", "ExpressionSimplifier", "to_sympy", "latex_representation",
  "EvalError", "UndefinedVariable", "DivisionByZero", "NegativeRadicand",
  "LogarithmDomainError", "PowerDomainError",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
