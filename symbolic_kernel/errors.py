"""Evaluation errors.

Only numeric evaluation can fail: building, differentiating and rendering a
tree are total. Each error also derives from the closest builtin exception so
callers may catch either.
"""


class EvalError(Exception):
  """Base class for failures raised while computing an expression"""


class UndefinedVariable(EvalError, LookupError):

  def __init__(self, name: str):
    super().__init__(f"Variable '{name}' is not defined")
    self.name = name


class DivisionByZero(EvalError, ZeroDivisionError):

  def __init__(self, message: str = "Division by zero"):
    super().__init__(message)


class NegativeRadicand(EvalError, ValueError):

  def __init__(self, value: float):
    super().__init__(f"Square root of negative value {value}")
    self.value = value


class LogarithmDomainError(EvalError, ValueError):

  def __init__(self, value: float):
    super().__init__(f"Logarithm of non-positive value {value}")
    self.value = value


class PowerDomainError(EvalError, ValueError):

  def __init__(self, base: float, exponent: float):
    super().__init__(f"{base} raised to {exponent} has no real value")
    self.base = base
    self.exponent = exponent
