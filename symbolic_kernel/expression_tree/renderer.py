"""Canonical infix rendering of expression trees.

Composite nodes are wrapped in parentheses except at the outermost call.
Signs are normalised while rendering, never in the tree itself:
``A + (-B)`` renders as ``A - B``, ``A - (-B)`` as ``A + B`` and ``-(-B)``
as ``B``. A power whose base is itself a power renders as ``(x^2)^3``.
"""

import math
from .core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  unhandled_node
)
from .core.operators import OpType, OP_SYMBOLS, FUNCTION_NAMES


def render(node: Node) -> str:
  return _render(node, outermost=True)


def format_number(value: float) -> str:
  if value == 0:
    return "0"
  if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
    return str(int(value))
  return repr(value)


def _wrap(text: str, outermost: bool) -> str:
  return text if outermost else f"({text})"


def _negated(text: str) -> bool:
  return text.startswith('-')


def _render(node: Node, outermost: bool = False) -> str:
  if isinstance(node, Constant):
    return format_number(node.value)

  elif isinstance(node, Variable):
    return node.name

  elif isinstance(node, UnaryOp):
    if node.op == OpType.PLUS:
      return _render(node.operand, outermost)
    operand = _render(node.operand)
    if _negated(operand):
      return operand[1:]
    return f"-{operand}"

  elif isinstance(node, BinaryOp):
    left = _render(node.left)
    right = _render(node.right)
    if node.op == OpType.ADD and _negated(right):
      text = f"{left} - {right[1:]}"
    elif node.op == OpType.SUB and _negated(right):
      text = f"{left} + {right[1:]}"
    else:
      text = f"{left} {OP_SYMBOLS[node.op]} {right}"
    return _wrap(text, outermost)

  elif isinstance(node, Power):
    base = _render(node.base)
    exponent = _render(node.exponent)
    # ^ reads right-associatively, so a power base needs its own parentheses
    if _negated(base) or isinstance(node.base, (Power, Derivative)):
      base = f"({base})"
    if _negated(exponent):
      exponent = f"({exponent})"
    return f"{base}^{exponent}"

  elif isinstance(node, NamedFunction):
    return f"{FUNCTION_NAMES[node.op]}({_render(node.operand, outermost=True)})"

  elif isinstance(node, Derivative):
    variable = node.with_respect_to.name
    return f"d/d{variable}({_render(node.expression, outermost=True)})"

  unhandled_node(node, "render")
