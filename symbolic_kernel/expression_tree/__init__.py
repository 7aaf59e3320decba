"""Expression Tree Module

Immutable expression trees with evaluation, polynomial analysis,
differentiation, simplification and rendering.
"""

from .core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative
)
from .core.operators import OpType
from .builders import (
  constant, variable, add, sub, mul, div, negate, identity, power,
  sqrt, sin, cos, tan, cot, ln, derivative
)
from .analyzer import free_variables, is_constant, is_polynomial, polynomial_degree
from .evaluator import compute, evaluate_batch
from .differentiator import differentiate
from .renderer import render
from .expression import Expression
from .utils import ExpressionSimplifier, to_sympy, latex_representation

__all__ = [
  "Node", "Constant", "Variable", "UnaryOp", "BinaryOp", "Power", "NamedFunction",
  "Derivative", "OpType",
  "constant", "variable", "add", "sub", "mul", "div", "negate", "identity", "power",
  "sqrt", "sin", "cos", "tan", "cot", "ln", "derivative",
  "free_variables", "is_constant", "is_polynomial", "polynomial_degree",
  "compute", "evaluate_batch", "differentiate", "render",
  "Expression", "ExpressionSimplifier", "to_sympy", "latex_representation"
]
