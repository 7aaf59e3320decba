"""Symbolic differentiation.

Every derivative is assembled through the combinators in :mod:`.builders`,
so the result is simplified on the way up. Subtrees that do not contain the
variable are never descended into and contribute a constant 0.
"""

from typing import Union
from .core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  unhandled_node
)
from .core.operators import OpType
from .analyzer import free_variables
from .builders import (
  constant, add, sub, mul, div, negate, power, sqrt, sin, cos, ln
)

ZERO = Constant(0.0)
ONE = Constant(1.0)


def differentiate(node: Node, with_respect_to: Union[str, Variable]) -> Node:
  name = with_respect_to.name if isinstance(with_respect_to, Variable) else with_respect_to
  return _d(node, name)


def _d(node: Node, name: str) -> Node:
  if name not in free_variables(node):
    return ZERO

  if isinstance(node, Constant):
    return ZERO

  elif isinstance(node, Variable):
    return ONE if node.name == name else ZERO

  elif isinstance(node, UnaryOp):
    inner = _d(node.operand, name)
    return inner if node.op == OpType.PLUS else negate(inner)

  elif isinstance(node, BinaryOp):
    return _d_binary(node, name)

  elif isinstance(node, Power):
    return _d_power(node, name)

  elif isinstance(node, NamedFunction):
    return _d_function(node, name)

  elif isinstance(node, Derivative):
    inner = differentiate(node.expression, node.with_respect_to)
    return _d(inner, name)

  unhandled_node(node, "differentiate")


def _d_binary(node: BinaryOp, name: str) -> Node:
  a, b = node.left, node.right
  da, db = _d(a, name), _d(b, name)

  if node.op == OpType.ADD:
    return add(da, db)
  elif node.op == OpType.SUB:
    return sub(da, db)
  elif node.op == OpType.MUL:
    return add(mul(da, b), mul(db, a))
  elif node.op == OpType.DIV:
    return div(sub(mul(da, b), mul(db, a)), mul(b, b))
  unhandled_node(node, "differentiate")


def _d_power(node: Power, name: str) -> Node:
  base, exponent = node.base, node.exponent
  d_base = _d(base, name)

  if name not in free_variables(exponent):
    # n * B^(n-1) * B'
    return mul(mul(exponent, power(base, sub(exponent, 1))), d_base)

  # B^E * (E' * ln(B) + E * B' / B)
  d_exponent = _d(exponent, name)
  inner = add(mul(d_exponent, ln(base)), div(mul(exponent, d_base), base))
  return mul(node, inner)


def _d_function(node: NamedFunction, name: str) -> Node:
  u = node.operand
  du = _d(u, name)

  if node.op == OpType.SQRT:
    return div(du, mul(constant(2), sqrt(u)))
  elif node.op == OpType.SIN:
    return mul(cos(u), du)
  elif node.op == OpType.COS:
    return mul(negate(sin(u)), du)
  elif node.op == OpType.TAN:
    return div(du, power(cos(u), 2))
  elif node.op == OpType.COT:
    return negate(div(du, power(sin(u), 2)))
  elif node.op == OpType.LN:
    return div(du, u)
  unhandled_node(node, "differentiate")
