"""Core expression tree components."""

from .node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  NodeVariant
)
from .operators import (
  OpType, UNARY_OP_MAP, BINARY_OP_MAP, FUNCTION_OP_MAP,
  evaluate_binary_op, evaluate_unary_op, evaluate_power, evaluate_function
)

__all__ = [
  'Node', 'Constant', 'Variable', 'UnaryOp', 'BinaryOp', 'Power', 'NamedFunction',
  'Derivative', 'NodeVariant',
  'OpType', 'UNARY_OP_MAP', 'BINARY_OP_MAP', 'FUNCTION_OP_MAP',
  'evaluate_binary_op', 'evaluate_unary_op', 'evaluate_power', 'evaluate_function'
]
