import math
from typing import Optional
from ..core.node import Node, Constant, UnaryOp, BinaryOp, Power
from ..core.operators import OpType, apply_binary_op
from ...logging_system import log_debug, log_warning


def _is_value(node: Node, value: float) -> bool:
  return isinstance(node, Constant) and node.value == value


class ExpressionSimplifier:
  """Peephole rewrites applied to one freshly built node.

  A single, non-recursive pass: the rules only look at the node itself and
  its direct children, the first matching rule wins, and a node with no
  matching rule is returned unchanged. Identities such as ``A / A -> 1`` do
  not check that ``A`` is non-zero; that rewrite is logged as a warning.
  Folded constants are always finite.
  """

  def __init__(self, fold_constants: bool = True, merge_powers: bool = True):
    self.fold_constants = fold_constants
    self.merge_powers = merge_powers

  def simplify(self, node: Node) -> Node:
    if isinstance(node, BinaryOp):
      simplified = self._simplify_binary(node)
    elif isinstance(node, UnaryOp):
      simplified = self._simplify_unary(node)
    elif isinstance(node, Power):
      simplified = self._simplify_power(node.base, node.exponent)
    else:
      simplified = None
    return node if simplified is None else simplified

  @staticmethod
  def _rewrite(rule: str, result: Node) -> Node:
    log_debug(f"simplifier: {rule}")
    return result

  def _simplify_unary(self, node: UnaryOp) -> Optional[Node]:
    operand = node.operand
    if node.op != OpType.MINUS:
      return None

    if self.fold_constants and isinstance(operand, Constant):
      return self._rewrite("-c = constant", Constant(-operand.value))
    if isinstance(operand, UnaryOp) and operand.op == OpType.MINUS:
      return self._rewrite("-(-A) = A", operand.operand)
    return None

  def _simplify_binary(self, node: BinaryOp) -> Optional[Node]:
    left, right = node.left, node.right

    if self.fold_constants and isinstance(left, Constant) and isinstance(right, Constant):
      # x / 0 is left for compute() to reject
      if not (node.op == OpType.DIV and right.value == 0):
        value = apply_binary_op(left.value, right.value, node.op)
        if math.isfinite(value):
          return self._rewrite("constant folding", Constant(value))

    if node.op == OpType.ADD:
      return self._simplify_add(left, right)
    elif node.op == OpType.SUB:
      return self._simplify_sub(left, right)
    elif node.op == OpType.MUL:
      return self._simplify_mul(left, right)
    elif node.op == OpType.DIV:
      return self._simplify_div(left, right)
    return None

  def _simplify_add(self, left: Node, right: Node) -> Optional[Node]:
    if _is_value(right, 0):
      return self._rewrite("A + 0 = A", left)
    if _is_value(left, 0):
      return self._rewrite("0 + A = A", right)
    if left == right:
      return self._rewrite("A + A = 2*A", BinaryOp(OpType.MUL, Constant(2.0), left))
    if self._is_scaled(left, right):
      factor = Constant(left.left.value + 1)
      return self._rewrite("c*A + A = (c+1)*A", BinaryOp(OpType.MUL, factor, right))
    if self._is_scaled(right, left):
      factor = Constant(right.left.value + 1)
      return self._rewrite("A + c*A = (c+1)*A", BinaryOp(OpType.MUL, factor, left))
    return None

  def _simplify_sub(self, left: Node, right: Node) -> Optional[Node]:
    if _is_value(right, 0):
      return self._rewrite("A - 0 = A", left)
    if left == right:
      return self._rewrite("A - A = 0", Constant(0.0))
    return None

  def _simplify_mul(self, left: Node, right: Node) -> Optional[Node]:
    if _is_value(right, 0):
      return self._rewrite("A * 0 = 0", Constant(0.0))
    if _is_value(left, 0):
      return self._rewrite("0 * A = 0", Constant(0.0))
    if _is_value(left, 1):
      return self._rewrite("1 * A = A", right)
    if _is_value(right, 1):
      return self._rewrite("A * 1 = A", left)

    if self.merge_powers:
      if isinstance(left, Power) and isinstance(right, Power) and left.base == right.base:
        exponent = self._combine(OpType.ADD, left.exponent, right.exponent)
        return self._rewrite("B^m * B^n = B^(m+n)", self._make_power(left.base, exponent))
      if isinstance(left, Power) and left.base == right:
        exponent = self._combine(OpType.ADD, left.exponent, Constant(1.0))
        return self._rewrite("B^m * B = B^(m+1)", self._make_power(right, exponent))
      if isinstance(right, Power) and right.base == left:
        exponent = self._combine(OpType.ADD, right.exponent, Constant(1.0))
        return self._rewrite("B * B^m = B^(m+1)", self._make_power(left, exponent))
      if left == right:
        return self._rewrite("A * A = A^2", Power(left, Constant(2.0)))
    return None

  def _simplify_div(self, left: Node, right: Node) -> Optional[Node]:
    if left == right:
      if not (isinstance(left, Constant) and left.value != 0):
        log_warning(f"simplifier: A / A = 1 assumes {left} is non-zero")
      return self._rewrite("A / A = 1", Constant(1.0))
    if _is_value(right, 1):
      return self._rewrite("A / 1 = A", left)
    if _is_value(left, 0):
      return self._rewrite("0 / A = 0", Constant(0.0))

    if self.merge_powers:
      if isinstance(left, Power) and isinstance(right, Power) and left.base == right.base:
        exponent = self._combine(OpType.SUB, left.exponent, right.exponent)
        return self._rewrite("B^m / B^n = B^(m-n)", self._make_power(left.base, exponent))
      if isinstance(left, Power) and left.base == right:
        exponent = self._combine(OpType.SUB, left.exponent, Constant(1.0))
        return self._rewrite("B^m / B = B^(m-1)", self._make_power(right, exponent))
    return None

  def _simplify_power(self, base: Node, exponent: Node) -> Optional[Node]:
    if _is_value(exponent, 1):
      return self._rewrite("B^1 = B", base)
    if _is_value(exponent, 0):
      return self._rewrite("B^0 = 1", Constant(1.0))
    if self.fold_constants and isinstance(base, Constant) and isinstance(exponent, Constant):
      try:
        value = math.pow(base.value, exponent.value)
      except (ValueError, OverflowError):
        # left unfolded for compute()
        return None
      if math.isfinite(value):
        return self._rewrite("constant folding", Constant(value))
    return None

  def _make_power(self, base: Node, exponent: Node) -> Node:
    simplified = self._simplify_power(base, exponent)
    return Power(base, exponent) if simplified is None else simplified

  @staticmethod
  def _combine(op: OpType, left: Node, right: Node) -> Node:
    """Exponent arithmetic for power merging"""
    if isinstance(left, Constant) and isinstance(right, Constant):
      return Constant(apply_binary_op(left.value, right.value, op))
    return BinaryOp(op, left, right)

  @staticmethod
  def _is_scaled(candidate: Node, term: Node) -> bool:
    """True when ``candidate`` is ``c * term`` for a constant ``c``"""
    return (isinstance(candidate, BinaryOp) and candidate.op == OpType.MUL and
            isinstance(candidate.left, Constant) and candidate.right == term)


DEFAULT_SIMPLIFIER = ExpressionSimplifier()


def simplify(node: Node) -> Node:
  return DEFAULT_SIMPLIFIER.simplify(node)
