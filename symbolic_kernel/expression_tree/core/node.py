from dataclasses import dataclass
from typing import Union
from .operators import OpType, UNARY_OPS, BINARY_OPS, FUNCTION_OPS


class Node:
  """Base of every expression node.

  Nodes are frozen dataclasses, so equality and hashing are structural and a
  tree never changes after construction. The algorithms (evaluation,
  analysis, differentiation, rendering) live in their own modules and
  dispatch over the closed set of variants below; this base only carries the
  arithmetic operator sugar, which delegates to the simplifying combinators.
  """

  __slots__ = ()

  # Builders import this module, so they are imported lazily here.
  def __add__(self, other):
    from ..builders import add
    return add(self, other)

  def __radd__(self, other):
    from ..builders import add
    return add(other, self)

  def __sub__(self, other):
    from ..builders import sub
    return sub(self, other)

  def __rsub__(self, other):
    from ..builders import sub
    return sub(other, self)

  def __mul__(self, other):
    from ..builders import mul
    return mul(self, other)

  def __rmul__(self, other):
    from ..builders import mul
    return mul(other, self)

  def __truediv__(self, other):
    from ..builders import div
    return div(self, other)

  def __rtruediv__(self, other):
    from ..builders import div
    return div(other, self)

  def __pow__(self, other):
    from ..builders import power
    return power(self, other)

  def __rpow__(self, other):
    from ..builders import power
    return power(other, self)

  def __neg__(self):
    from ..builders import negate
    return negate(self)

  def __pos__(self):
    from ..builders import identity
    return identity(self)

  def __str__(self) -> str:
    from ..renderer import render
    return render(self)


@dataclass(frozen=True)
class Constant(Node):
  value: float

  def __post_init__(self):
    object.__setattr__(self, 'value', float(self.value))


@dataclass(frozen=True)
class Variable(Node):
  name: str


@dataclass(frozen=True)
class UnaryOp(Node):
  op: OpType
  operand: Node

  def __post_init__(self):
    if self.op not in UNARY_OPS:
      raise ValueError(f"Not a unary operator: {self.op!r}")


@dataclass(frozen=True)
class BinaryOp(Node):
  op: OpType
  left: Node
  right: Node

  def __post_init__(self):
    if self.op not in BINARY_OPS:
      raise ValueError(f"Not a binary operator: {self.op!r}")


@dataclass(frozen=True)
class Power(Node):
  base: Node
  exponent: Node


@dataclass(frozen=True)
class NamedFunction(Node):
  op: OpType
  operand: Node

  def __post_init__(self):
    if self.op not in FUNCTION_OPS:
      raise ValueError(f"Not a named function: {self.op!r}")


@dataclass(frozen=True)
class Derivative(Node):
  """Unevaluated derivative; materialised on demand by the algorithms."""
  expression: Node
  with_respect_to: Variable


NodeVariant = Union[Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative]


def unhandled_node(node, operation: str):
  """Raised at the end of every exhaustive dispatch chain."""
  raise TypeError(f"{operation} reached unexpected node type {type(node).__name__}")
