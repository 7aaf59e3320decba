"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, DEFAULT_SIMPLIFIER, simplify
from .sympy_utils import to_sympy, latex_representation
from .tree_utils import (
  get_children, get_all_nodes, count_nodes, calculate_tree_depth,
  get_constants, get_variables
)

__all__ = [
  'ExpressionSimplifier', 'DEFAULT_SIMPLIFIER', 'simplify',
  'to_sympy', 'latex_representation',
  'get_children', 'get_all_nodes', 'count_nodes', 'calculate_tree_depth',
  'get_constants', 'get_variables'
]
