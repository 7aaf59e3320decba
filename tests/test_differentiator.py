import pytest
import sympy as sp

from symbolic_kernel import (
  Constant, BinaryOp, OpType,
  constant, variable, add, sub, mul, div, negate, identity, power,
  sqrt, sin, cos, tan, cot, ln, derivative, differentiate, compute, render, to_sympy
)

x = variable("x")
y = variable("y")
POINT = {"x": 0.7, "y": 1.3}


def test_leaves():
  assert differentiate(constant(5), "x") == Constant(0)
  assert differentiate(x, "x") == Constant(1)
  assert differentiate(y, "x") == Constant(0)


def test_variable_can_be_passed_as_node():
  assert differentiate(x, variable("x")) == Constant(1)


def test_unrelated_subtrees_are_not_differentiated():
  assert differentiate(mul(sin(y), sqrt(y)), "x") == Constant(0)
  assert differentiate(add(x, cos(y)), "x") == Constant(1)


def test_results_are_simplified():
  assert render(differentiate(mul(x, x), "x")) == "2 * x"
  assert render(differentiate(power(x, 3), "x")) == "3 * x^2"
  assert render(differentiate(sin(x), "x")) == "cos(x)"
  assert render(differentiate(cos(x), "x")) == "-sin(x)"
  assert differentiate(add(x, x), "x") == Constant(2)


def test_product_rule_order():
  node = differentiate(mul(sin(x), y), "x")
  assert node == BinaryOp(OpType.MUL, cos(x), y)


def test_unary_nodes():
  assert differentiate(negate(x), "x") == Constant(-1)
  assert differentiate(identity(mul(3, x)), "x") == Constant(3)


def test_derivative_of_lazy_derivative():
  second = differentiate(derivative(power(x, 3), "x"), "x")
  assert compute(second, {"x": 2}) == 12


def test_differentiation_never_fails():
  # the quotient rule yields 0 / 0 here, which A / A turns into 1
  node = differentiate(div(sqrt(x), sub(x, x)), "x")
  assert node == Constant(1)


@pytest.mark.parametrize("node", [
  mul(power(x, 3), sin(x)),
  div(x, add(x, 1)),
  div(mul(x, y), sub(power(x, 2), y)),
  sqrt(add(mul(x, x), 1)),
  tan(mul(2, x)),
  cot(x),
  cos(mul(x, y)),
  power(x, y),
  power(add(x, 1), mul(2, x)),
  ln(add(power(x, 2), y)),
  negate(sin(x)),
  identity(mul(x, x)),
  sub(power(x, 2), mul(3, x)),
  add(mul(4, x), x),
])
def test_derivative_agrees_with_sympy(node):
  expected = sp.diff(to_sympy(node), sp.Symbol("x"))
  expected_value = float(expected.subs({sp.Symbol(k): v for k, v in POINT.items()}))
  assert compute(differentiate(node, "x"), POINT) == pytest.approx(expected_value, rel=1e-9)
