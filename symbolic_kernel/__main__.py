"""Demonstration: build the sample trees and print their properties."""

import argparse

from . import (
  Expression, variable, constant, add, sub, mul, div, sqrt, cos, differentiate,
  EvalError
)
from .logging_system import LogLevel, configure_logging, log_info


def build_samples():
  x = variable("x")
  y = variable("y")
  c = constant(3)
  return {
    "(x - 4) * (3x + y^2) / 5": div(mul(sub(x, 4), add(mul(3, x), mul(y, y))), 5),
    "(5 - 3c) * sqrt(16 + c^2)": mul(sub(5, mul(3, c)), sqrt(add(16, mul(c, c)))),
    "d/dx cos(y)": differentiate(cos(y), "x"),
    "d/dx (x^3 / y)": differentiate(div(mul(x, mul(x, x)), y), "x"),
  }


def describe(label: str, expression: Expression, bindings: dict):
  print(f"{label}")
  print(f"  render:      {expression}")
  print(f"  constant:    {expression.is_constant()}")
  print(f"  polynomial:  {expression.is_polynomial()}")
  print(f"  degree:      {expression.polynomial_degree()}")
  try:
    print(f"  value:       {expression.compute(bindings)}")
  except EvalError as e:
    print(f"  value:       error ({e})")


def main():
  parser = argparse.ArgumentParser(description="Symbolic kernel demonstration")
  parser.add_argument("--x", type=float, default=1.0, help="Value bound to x")
  parser.add_argument("--y", type=float, default=2.0, help="Value bound to y")
  parser.add_argument("--log-level", default="MINIMAL",
                      choices=[level.name for level in LogLevel],
                      help="Logging verbosity (VERBOSE shows simplifier rewrites)")
  args = parser.parse_args()

  configure_logging(LogLevel[args.log_level])
  bindings = {"x": args.x, "y": args.y}
  log_info(f"Evaluating samples at {bindings}", LogLevel.MODERATE)

  for label, node in build_samples().items():
    describe(label, Expression(node), bindings)


if __name__ == "__main__":
  main()
