"""Leaf constructors and combinators.

Combinators are the only way the kernel builds composite nodes. Each accepts
nodes or plain numbers (wrapped with :func:`constant`) and passes the new
node through the simplifier unless ``simplify=False``.
"""

from numbers import Real
from typing import Union
from .core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative
)
from .core.operators import OpType
from .utils.simplifier import simplify as _simplify

Operand = Union[Node, float, int]


def constant(value: float) -> Constant:
  return Constant(value)


def variable(name: str) -> Variable:
  return Variable(name)


def as_node(value: Operand) -> Node:
  if isinstance(value, Node):
    return value
  if isinstance(value, Real) and not isinstance(value, bool):
    return Constant(float(value))
  raise TypeError(f"Cannot use {type(value).__name__} as an expression")


def _finish(node: Node, simplify: bool) -> Node:
  return _simplify(node) if simplify else node


def _binary(op: OpType, left: Operand, right: Operand, simplify: bool) -> Node:
  return _finish(BinaryOp(op, as_node(left), as_node(right)), simplify)


def add(left: Operand, right: Operand, *, simplify: bool = True) -> Node:
  return _binary(OpType.ADD, left, right, simplify)


def sub(left: Operand, right: Operand, *, simplify: bool = True) -> Node:
  return _binary(OpType.SUB, left, right, simplify)


def mul(left: Operand, right: Operand, *, simplify: bool = True) -> Node:
  return _binary(OpType.MUL, left, right, simplify)


def div(left: Operand, right: Operand, *, simplify: bool = True) -> Node:
  return _binary(OpType.DIV, left, right, simplify)


def negate(operand: Operand, *, simplify: bool = True) -> Node:
  return _finish(UnaryOp(OpType.MINUS, as_node(operand)), simplify)


def identity(operand: Operand, *, simplify: bool = True) -> Node:
  """Unary plus"""
  return _finish(UnaryOp(OpType.PLUS, as_node(operand)), simplify)


def power(base: Operand, exponent: Operand, *, simplify: bool = True) -> Node:
  return _finish(Power(as_node(base), as_node(exponent)), simplify)


def _function(op: OpType, operand: Operand) -> Node:
  return NamedFunction(op, as_node(operand))


def sqrt(operand: Operand) -> Node:
  return _function(OpType.SQRT, operand)


def sin(operand: Operand) -> Node:
  return _function(OpType.SIN, operand)


def cos(operand: Operand) -> Node:
  return _function(OpType.COS, operand)


def tan(operand: Operand) -> Node:
  return _function(OpType.TAN, operand)


def cot(operand: Operand) -> Node:
  return _function(OpType.COT, operand)


def ln(operand: Operand) -> Node:
  """Natural logarithm"""
  return _function(OpType.LN, operand)


def derivative(expression: Operand, with_respect_to: Union[str, Variable]) -> Derivative:
  """Lazy derivative, differentiated only when queried"""
  if isinstance(with_respect_to, str):
    with_respect_to = Variable(with_respect_to)
  return Derivative(as_node(expression), with_respect_to)
