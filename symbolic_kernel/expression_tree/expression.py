import numpy as np
import sympy as sp
from typing import FrozenSet, Mapping, Optional, Union

from .core.node import Node, Variable
from .builders import as_node
from .analyzer import free_variables, is_constant, is_polynomial, polynomial_degree
from .differentiator import differentiate
from .evaluator import compute, evaluate_batch
from .renderer import render
from .utils.sympy_utils import to_sympy
from .utils.tree_utils import count_nodes, calculate_tree_depth


class Expression:
  """Convenience wrapper around a root node with a cached rendering"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Union[Node, float, int]):
    self.root = as_node(root)
    self._string_cache: Optional[str] = None

  def compute(self, bindings: Optional[Mapping[str, float]] = None) -> float:
    return compute(self.root, bindings or {})

  def evaluate(self, columns: Mapping[str, np.ndarray]) -> np.ndarray:
    return evaluate_batch(self.root, columns)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = render(self.root)
    return self._string_cache

  def differentiate(self, with_respect_to: Union[str, Variable]) -> 'Expression':
    return Expression(differentiate(self.root, with_respect_to))

  def free_variables(self) -> FrozenSet[str]:
    return free_variables(self.root)

  def is_constant(self) -> bool:
    return is_constant(self.root)

  def is_polynomial(self) -> bool:
    return is_polynomial(self.root)

  def polynomial_degree(self) -> int:
    return polynomial_degree(self.root)

  def size(self) -> int:
    """Node count"""
    return count_nodes(self.root)

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def to_sympy(self) -> sp.Expr:
    return to_sympy(self.root)

  def latex(self) -> str:
    return sp.latex(self.to_sympy())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
