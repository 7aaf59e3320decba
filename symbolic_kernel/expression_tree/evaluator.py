"""Numeric evaluation of expression trees.

:func:`compute` reduces a tree to a float for one set of bindings.
:func:`evaluate_batch` does the same over numpy arrays, one array per
variable, using the compiled kernels in :mod:`.core.operators`. Both walk the
whole tree on every call and raise an :class:`~symbolic_kernel.errors.EvalError`
as soon as a subexpression has no value.
"""

import math
import numpy as np
from typing import Mapping, Tuple
from .core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  unhandled_node
)
from .core.operators import (
  OpType, apply_binary_op, apply_function,
  evaluate_binary_op, evaluate_unary_op, evaluate_power, evaluate_function
)
from ..errors import (
  EvalError, UndefinedVariable, DivisionByZero, NegativeRadicand,
  LogarithmDomainError, PowerDomainError
)
from ..logging_system import log_debug


def compute(node: Node, bindings: Mapping[str, float]) -> float:
  try:
    return _compute(node, bindings)
  except EvalError as e:
    log_debug(f"compute failed: {e}")
    raise


def _compute(node: Node, bindings: Mapping[str, float]) -> float:
  if isinstance(node, Constant):
    return node.value

  elif isinstance(node, Variable):
    if node.name not in bindings:
      raise UndefinedVariable(node.name)
    return float(bindings[node.name])

  elif isinstance(node, UnaryOp):
    value = _compute(node.operand, bindings)
    return -value if node.op == OpType.MINUS else value

  elif isinstance(node, BinaryOp):
    left = _compute(node.left, bindings)
    right = _compute(node.right, bindings)
    if node.op == OpType.DIV and right == 0:
      raise DivisionByZero()
    return apply_binary_op(left, right, node.op)

  elif isinstance(node, Power):
    base = _compute(node.base, bindings)
    exponent = _compute(node.exponent, bindings)
    return _real_power(base, exponent)

  elif isinstance(node, NamedFunction):
    value = _compute(node.operand, bindings)
    _check_function_domain(node.op, value)
    return apply_function(value, node.op)

  elif isinstance(node, Derivative):
    from .differentiator import differentiate
    return _compute(differentiate(node.expression, node.with_respect_to), bindings)

  unhandled_node(node, "compute")


def _real_power(base: float, exponent: float) -> float:
  """math.pow with overflow saturating to a signed infinity, as np.power does"""
  try:
    return math.pow(base, exponent)
  except ValueError:
    raise PowerDomainError(base, exponent) from None
  except OverflowError:
    odd_exponent = exponent.is_integer() and int(exponent) % 2 == 1
    return -math.inf if base < 0 and odd_exponent else math.inf


def _check_function_domain(op: OpType, value: float):
  if op == OpType.SQRT and value < 0:
    raise NegativeRadicand(value)
  if op == OpType.LN and value <= 0:
    raise LogarithmDomainError(value)
  if op == OpType.COT and math.isfinite(value) and math.tan(value) == 0:
    raise DivisionByZero("Cotangent of a multiple of pi")


def evaluate_batch(node: Node, columns: Mapping[str, np.ndarray]) -> np.ndarray:
  """Evaluate over arrays of bindings; columns broadcast against each other"""
  shape, flat = _prepare_columns(columns)
  try:
    result = _evaluate(node, flat, int(np.prod(shape, dtype=np.int64)))
  except EvalError as e:
    log_debug(f"batch evaluation failed: {e}")
    raise
  return result.reshape(shape)


def _prepare_columns(columns: Mapping[str, np.ndarray]) -> Tuple[tuple, dict]:
  arrays = {name: np.asarray(values, dtype=np.float64) for name, values in columns.items()}
  shape = np.broadcast_shapes(*(a.shape for a in arrays.values())) if arrays else ()
  flat = {
    name: np.ascontiguousarray(np.broadcast_to(a, shape).ravel())
    for name, a in arrays.items()
  }
  return shape, flat


def _evaluate(node: Node, columns: Mapping[str, np.ndarray], n_samples: int) -> np.ndarray:
  if isinstance(node, Constant):
    return np.full(n_samples, node.value, dtype=np.float64)

  elif isinstance(node, Variable):
    if node.name not in columns:
      raise UndefinedVariable(node.name)
    return columns[node.name].copy()

  elif isinstance(node, UnaryOp):
    return evaluate_unary_op(_evaluate(node.operand, columns, n_samples), node.op)

  elif isinstance(node, BinaryOp):
    left_val = _evaluate(node.left, columns, n_samples)
    right_val = _evaluate(node.right, columns, n_samples)
    if node.op == OpType.DIV and np.any(right_val == 0):
      raise DivisionByZero()
    return evaluate_binary_op(left_val, right_val, node.op)

  elif isinstance(node, Power):
    base_val = _evaluate(node.base, columns, n_samples)
    exponent_val = _evaluate(node.exponent, columns, n_samples)
    invalid = ((base_val < 0) & (exponent_val != np.floor(exponent_val))) | \
              ((base_val == 0) & (exponent_val < 0))
    if np.any(invalid):
      i = int(np.argmax(invalid))
      raise PowerDomainError(float(base_val[i]), float(exponent_val[i]))
    return evaluate_power(base_val, exponent_val)

  elif isinstance(node, NamedFunction):
    operand_val = _evaluate(node.operand, columns, n_samples)
    _check_function_domain_batch(node.op, operand_val)
    return evaluate_function(operand_val, node.op)

  elif isinstance(node, Derivative):
    from .differentiator import differentiate
    return _evaluate(differentiate(node.expression, node.with_respect_to), columns, n_samples)

  unhandled_node(node, "evaluate_batch")


def _check_function_domain_batch(op: OpType, values: np.ndarray):
  if op == OpType.SQRT and np.any(values < 0):
    raise NegativeRadicand(float(values[np.argmax(values < 0)]))
  if op == OpType.LN and np.any(values <= 0):
    raise LogarithmDomainError(float(values[np.argmax(values <= 0)]))
  if op == OpType.COT:
    with np.errstate(invalid='ignore'):
      tangent = np.tan(values)
    if np.any(tangent == 0):
      raise DivisionByZero("Cotangent of a multiple of pi")
