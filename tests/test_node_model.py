import dataclasses

import pytest

from symbolic_kernel import (
  Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, OpType,
  constant, variable, add, sub, mul, div, negate, power, sin, free_variables, render
)
from symbolic_kernel.expression_tree.builders import as_node
from symbolic_kernel.expression_tree.core.operators import UNARY_OPS, BINARY_OPS, FUNCTION_OPS


def test_constant_equality_is_by_value():
  assert Constant(3) == Constant(3.0)
  assert Constant(0.0) == Constant(-0.0)
  assert hash(Constant(3)) == hash(Constant(3.0))
  assert Constant(1) != Constant(2)


def test_variable_equality_is_by_name():
  assert variable("x") == Variable("x")
  assert variable("x") != variable("y")
  assert variable("x") != constant(1)


def test_composite_nodes_compare_structurally():
  x = variable("x")
  left = BinaryOp(OpType.ADD, sin(x), Power(x, Constant(2)))
  right = BinaryOp(OpType.ADD, sin(variable("x")), Power(variable("x"), constant(2)))
  assert left == right
  assert hash(left) == hash(right)
  assert left != BinaryOp(OpType.SUB, sin(x), Power(x, Constant(2)))
  assert NamedFunction(OpType.SIN, x) != NamedFunction(OpType.COS, x)


def test_nodes_are_immutable():
  node = constant(2)
  with pytest.raises(dataclasses.FrozenInstanceError):
    node.value = 3.0
  with pytest.raises(dataclasses.FrozenInstanceError):
    BinaryOp(OpType.ADD, node, node).left = variable("x")


def test_operator_kind_is_checked_per_variant():
  x = variable("x")
  with pytest.raises(ValueError):
    UnaryOp(OpType.ADD, x)
  with pytest.raises(ValueError):
    BinaryOp(OpType.SIN, x, x)
  with pytest.raises(ValueError):
    NamedFunction(OpType.MINUS, x)


def test_every_operator_belongs_to_one_variant():
  groups = (UNARY_OPS, BINARY_OPS, FUNCTION_OPS)
  for op in OpType:
    assert sum(op in group for group in groups) == 1
  assert not hasattr(Power(variable("x"), constant(2)), "op")
  assert not hasattr(Constant(1), "node_type")


def test_free_variables_are_the_union_of_children():
  x, y, z = variable("x"), variable("y"), variable("z")
  node = add(mul(x, sin(y)), div(power(z, 2), 7))
  assert free_variables(node) == {"x", "y", "z"}
  assert free_variables(constant(4)) == frozenset()
  assert free_variables(x) == {"x"}


def test_numbers_are_wrapped_as_constants():
  x = variable("x")
  assert add(x, 2) == BinaryOp(OpType.ADD, x, Constant(2))
  assert as_node(2.5) == Constant(2.5)
  with pytest.raises(TypeError):
    as_node("x")
  with pytest.raises(TypeError):
    as_node(True)


def test_python_operators_use_the_combinators():
  x = variable("x")
  assert x + 1 == add(x, 1)
  assert 1 - x == sub(1, x)
  assert 2 * x == mul(2, x)
  assert x / 2 == div(x, 2)
  assert x ** 3 == power(x, 3)
  assert -x == negate(x)
  assert +x == UnaryOp(OpType.PLUS, x)
  assert x - x == Constant(0)


def test_str_renders_the_tree():
  x = variable("x")
  node = (x - 4) * (3 * x)
  assert str(node) == render(node) == "(x - 4) * (3 * x)"


def test_subtrees_can_be_shared():
  x = variable("x")
  shared = add(x, 1)
  node = mul(shared, sub(shared, 2))
  assert node.left is shared
  assert node.right.left is shared
