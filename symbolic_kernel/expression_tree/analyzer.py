"""Structural properties of expression trees.

Free variables, constancy, polynomiality and total polynomial degree are
derived from the node kinds alone and recomputed on every query.

Division is treated syntactically: a quotient counts as a polynomial when
every additive term of the numerator has at least the degree of the
denominator (see :func:`divides`). This over-approximates real polynomial
division: ``(x^2 + x) / (x + 1)`` passes, and so does ``sin(x) / 2``.
The rule is kept as is.
"""

from typing import FrozenSet
from .core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  unhandled_node
)
from .core.operators import OpType


def free_variables(node: Node) -> FrozenSet[str]:
  if isinstance(node, Constant):
    return frozenset()
  elif isinstance(node, Variable):
    return frozenset((node.name,))
  elif isinstance(node, (UnaryOp, NamedFunction)):
    return free_variables(node.operand)
  elif isinstance(node, BinaryOp):
    return free_variables(node.left) | free_variables(node.right)
  elif isinstance(node, Power):
    return free_variables(node.base) | free_variables(node.exponent)
  elif isinstance(node, Derivative):
    return free_variables(node.expression)
  unhandled_node(node, "free_variables")


def is_constant(node: Node) -> bool:
  if isinstance(node, Constant):
    return True
  elif isinstance(node, Variable):
    return False
  elif isinstance(node, (UnaryOp, NamedFunction)):
    return is_constant(node.operand)
  elif isinstance(node, BinaryOp):
    return is_constant(node.left) and is_constant(node.right)
  elif isinstance(node, Power):
    return is_constant(node.base) and is_constant(node.exponent)
  elif isinstance(node, Derivative):
    return is_constant(_materialise(node))
  unhandled_node(node, "is_constant")


def is_polynomial(node: Node) -> bool:
  if isinstance(node, (Constant, Variable)):
    return True

  elif isinstance(node, UnaryOp):
    return is_polynomial(node.operand)

  elif isinstance(node, BinaryOp):
    if node.op in (OpType.ADD, OpType.SUB):
      return is_polynomial(node.left) and is_polynomial(node.right)
    elif node.op == OpType.MUL:
      return is_polynomial(node.left) or is_polynomial(node.right)
    return divides(node.left, node.right)

  elif isinstance(node, Power):
    return _integer_exponent(node.exponent) is not None

  elif isinstance(node, NamedFunction):
    if is_constant(node.operand):
      return True
    if node.op == OpType.SQRT:
      return _even_degree_polynomial(node.operand)
    return False

  elif isinstance(node, Derivative):
    return is_polynomial(_materialise(node))

  unhandled_node(node, "is_polynomial")


def polynomial_degree(node: Node) -> int:
  """Total degree, reported as 0 whenever the node is not a polynomial"""
  if isinstance(node, Constant):
    return 0

  elif isinstance(node, Variable):
    return 1

  elif isinstance(node, UnaryOp):
    return polynomial_degree(node.operand)

  elif isinstance(node, BinaryOp):
    if node.op in (OpType.ADD, OpType.SUB):
      if not (is_polynomial(node.left) and is_polynomial(node.right)):
        return 0
      return max(polynomial_degree(node.left), polynomial_degree(node.right))
    elif node.op == OpType.MUL:
      return polynomial_degree(node.left) + polynomial_degree(node.right)
    if not divides(node.left, node.right):
      return 0
    return max(0, polynomial_degree(node.left) - polynomial_degree(node.right))

  elif isinstance(node, Power):
    exponent = _integer_exponent(node.exponent)
    if exponent is None:
      return 0
    return polynomial_degree(node.base) * exponent

  elif isinstance(node, NamedFunction):
    if node.op == OpType.SQRT and _even_degree_polynomial(node.operand):
      return polynomial_degree(node.operand) // 2
    return 0

  elif isinstance(node, Derivative):
    return polynomial_degree(_materialise(node))

  unhandled_node(node, "polynomial_degree")


def divides(numerator: Node, denominator: Node) -> bool:
  """Syntactic divisibility test used for quotients.

  A sum or difference divides when both of its terms do; anything else
  divides when its degree is at least the denominator's.
  """
  if isinstance(numerator, BinaryOp) and numerator.op in (OpType.ADD, OpType.SUB):
    return divides(numerator.left, denominator) and divides(numerator.right, denominator)
  return polynomial_degree(numerator) >= polynomial_degree(denominator)


def _integer_exponent(exponent: Node):
  """The exponent as an int when it is a non-negative integer constant"""
  if isinstance(exponent, Constant) and exponent.value >= 0 and exponent.value.is_integer():
    return int(exponent.value)
  return None


def _even_degree_polynomial(node: Node) -> bool:
  return is_polynomial(node) and polynomial_degree(node) % 2 == 0


def _materialise(node: Derivative) -> Node:
  from .differentiator import differentiate
  return differentiate(node.expression, node.with_respect_to)
