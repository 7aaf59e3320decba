import math
import numpy as np
import numba
from enum import IntEnum


class OpType(IntEnum):
  # Unary ops
  PLUS = 0
  MINUS = 1
  # Binary ops
  ADD = 2
  SUB = 3
  MUL = 4
  DIV = 5
  # Named functions
  SQRT = 6
  SIN = 7
  COS = 8
  TAN = 9
  COT = 10
  LN = 11

# Mapping dictionaries
UNARY_OP_MAP = {'+': OpType.PLUS, '-': OpType.MINUS}
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
FUNCTION_OP_MAP = {
    'sqrt': OpType.SQRT, 'sin': OpType.SIN, 'cos': OpType.COS,
    'tan': OpType.TAN, 'cot': OpType.COT, 'ln': OpType.LN
}

UNARY_OPS = frozenset(UNARY_OP_MAP.values())
BINARY_OPS = frozenset(BINARY_OP_MAP.values())
FUNCTION_OPS = frozenset(FUNCTION_OP_MAP.values())
PERIODIC_OPS = frozenset((OpType.SIN, OpType.COS, OpType.TAN, OpType.COT))

OP_SYMBOLS = {op: symbol for symbol, op in BINARY_OP_MAP.items()}
FUNCTION_NAMES = {op: name for name, op in FUNCTION_OP_MAP.items()}


def apply_binary_op(left: float, right: float, op: OpType) -> float:
  """Scalar arithmetic for a binary operator; the caller guards division"""
  if op == OpType.ADD:
    return left + right
  elif op == OpType.SUB:
    return left - right
  elif op == OpType.MUL:
    return left * right
  elif op == OpType.DIV:
    return left / right
  raise ValueError(f"Not a binary operator: {op!r}")


def apply_function(value: float, op: OpType) -> float:
  """Scalar primitive for a named function; the caller guards domains"""
  if op in PERIODIC_OPS and math.isinf(value):
    # np.sin and friends give nan here rather than raising
    return math.nan
  if op == OpType.SQRT:
    return math.sqrt(value)
  elif op == OpType.SIN:
    return math.sin(value)
  elif op == OpType.COS:
    return math.cos(value)
  elif op == OpType.TAN:
    return math.tan(value)
  elif op == OpType.COT:
    return 1.0 / math.tan(value)
  elif op == OpType.LN:
    return math.log(value)
  raise ValueError(f"Not a named function: {op!r}")


@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  raise ValueError("unknown binary operator")

@numba.njit(cache=True)
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.PLUS:
    return operand_val.copy()
  elif op_type == OpType.MINUS:
    return -operand_val
  raise ValueError("unknown unary operator")

@numba.njit(cache=True)
def evaluate_power(base_val, exponent_val):
  return np.power(base_val, exponent_val)

@numba.njit(cache=True)
def evaluate_function(operand_val, op_type):
  if op_type == OpType.SQRT:
    return np.sqrt(operand_val)
  elif op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  elif op_type == OpType.TAN:
    return np.tan(operand_val)
  elif op_type == OpType.COT:
    return 1.0 / np.tan(operand_val)
  elif op_type == OpType.LN:
    return np.log(operand_val)
  raise ValueError("unknown function")
