import sympy as sp
from typing import Dict, Optional

from ..core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  unhandled_node
)
from ..core.operators import OpType

SYMPY_FUNCTIONS = {
  OpType.SQRT: sp.sqrt,
  OpType.SIN: sp.sin,
  OpType.COS: sp.cos,
  OpType.TAN: sp.tan,
  OpType.COT: sp.cot,
  OpType.LN: sp.log,
}


def to_sympy(node: Node, symbols: Optional[Dict[str, sp.Symbol]] = None) -> sp.Expr:
  """Convert a tree to the equivalent SymPy expression.

  Constants become SymPy Floats, except integral values which become
  Integers so that SymPy keeps exact arithmetic where it can. Pass
  ``symbols`` to reuse existing SymPy symbols by name.
  """
  if symbols is None:
    symbols = {}
  return _to_sympy(node, symbols)


def _symbol(name: str, symbols: Dict[str, sp.Symbol]) -> sp.Symbol:
  if name not in symbols:
    symbols[name] = sp.Symbol(name)
  return symbols[name]


def _to_sympy(node: Node, symbols: Dict[str, sp.Symbol]) -> sp.Expr:
  if isinstance(node, Constant):
    if node.value.is_integer():
      return sp.Integer(int(node.value))
    return sp.Float(node.value)

  elif isinstance(node, Variable):
    return _symbol(node.name, symbols)

  elif isinstance(node, UnaryOp):
    operand = _to_sympy(node.operand, symbols)
    return sp.Mul(-1, operand) if node.op == OpType.MINUS else operand

  elif isinstance(node, BinaryOp):
    left = _to_sympy(node.left, symbols)
    right = _to_sympy(node.right, symbols)
    if node.op == OpType.ADD:
      return sp.Add(left, right)
    elif node.op == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif node.op == OpType.MUL:
      return sp.Mul(left, right)
    return sp.Mul(left, sp.Pow(right, -1))

  elif isinstance(node, Power):
    return sp.Pow(_to_sympy(node.base, symbols), _to_sympy(node.exponent, symbols))

  elif isinstance(node, NamedFunction):
    return SYMPY_FUNCTIONS[node.op](_to_sympy(node.operand, symbols))

  elif isinstance(node, Derivative):
    expression = _to_sympy(node.expression, symbols)
    return sp.Derivative(expression, _symbol(node.with_respect_to.name, symbols)).doit()

  unhandled_node(node, "to_sympy")


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(to_sympy(node))
