from symbolic_kernel import (
  Constant, UnaryOp, BinaryOp, OpType,
  constant, variable, add, sub, mul, div, negate, identity, power,
  sqrt, sin, cos, tan, cot, ln, derivative, render
)
from symbolic_kernel.expression_tree.renderer import format_number

x = variable("x")
y = variable("y")


def test_numbers():
  assert format_number(3.0) == "3"
  assert format_number(-4.0) == "-4"
  assert format_number(2.5) == "2.5"
  assert format_number(-0.0) == "0"
  assert format_number(1e300) == "1e+300"
  assert format_number(float("inf")) == "inf"


def test_outermost_node_has_no_parentheses():
  assert render(add(x, y)) == "x + y"
  assert render(mul(add(x, 1), y)) == "(x + 1) * y"


def test_nested_nodes_are_fully_parenthesized():
  e = div(mul(sub(x, 4), add(mul(3, x), mul(y, y))), 5)
  assert render(e) == "((x - 4) * ((3 * x) + y^2)) / 5"


def test_adding_a_negation_renders_as_subtraction():
  assert render(add(x, negate(y))) == "x - y"
  assert render(add(x, constant(-3))) == "x - 3"


def test_subtracting_a_negation_renders_as_addition():
  assert render(sub(x, negate(y))) == "x + y"
  assert render(sub(x, -3)) == "x + 3"


def test_double_negation_renders_positive():
  node = UnaryOp(OpType.MINUS, UnaryOp(OpType.MINUS, x))
  assert render(node) == "x"
  assert render(UnaryOp(OpType.MINUS, Constant(-3))) == "3"


def test_negation_of_composite():
  assert render(negate(add(x, y))) == "-(x + y)"
  assert render(negate(sin(x))) == "-sin(x)"


def test_unary_plus_renders_its_operand():
  assert render(identity(x)) == "x"
  assert render(identity(add(x, 1))) == "x + 1"
  assert render(mul(identity(add(x, 1)), y)) == "(x + 1) * y"


def test_sign_rewrite_is_render_only():
  node = add(x, negate(y))
  assert isinstance(node, BinaryOp) and node.op == OpType.ADD
  assert render(node) == "x - y"


def test_named_functions():
  assert render(sqrt(add(x, 1))) == "sqrt(x + 1)"
  assert render(sin(x)) == "sin(x)"
  assert render(cos(mul(2, x))) == "cos(2 * x)"
  assert render(tan(x)) == "tan(x)"
  assert render(cot(x)) == "cot(x)"
  assert render(ln(x)) == "ln(x)"


def test_powers():
  assert render(power(x, 2)) == "x^2"
  assert render(power(add(x, 1), 3)) == "(x + 1)^3"
  assert render(power(x, -1)) == "x^(-1)"
  assert render(power(-2, y)) == "(-2)^y"
  assert render(power(negate(x), 2)) == "(-x)^2"


def test_lazy_derivative():
  assert render(derivative(mul(x, x), "x")) == "d/dx(x^2)"


def test_power_of_power_keeps_its_grouping():
  assert render(power(power(x, 2), 3)) == "(x^2)^3"
  assert render(power(power(-2, y), 3)) == "((-2)^y)^3"
  assert render(power(x, power(y, 2))) == "x^y^2"
  assert render(power(derivative(power(x, 3), "x"), 2)) == "(d/dx(x^3))^2"
