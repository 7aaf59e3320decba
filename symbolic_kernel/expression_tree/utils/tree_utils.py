"""
Tree Utility Functions

Traversal and size measures for expression trees. Traversals use an
explicit worklist, so they are not limited by the interpreter's recursion
depth.
"""

from collections import deque
from typing import List, Tuple

from ..core.node import (
  Node, Constant, Variable, UnaryOp, BinaryOp, Power, NamedFunction, Derivative,
  unhandled_node
)


def get_children(node: Node) -> Tuple[Node, ...]:
  if isinstance(node, (Constant, Variable)):
    return ()
  elif isinstance(node, (UnaryOp, NamedFunction)):
    return (node.operand,)
  elif isinstance(node, BinaryOp):
    return (node.left, node.right)
  elif isinstance(node, Power):
    return (node.base, node.exponent)
  elif isinstance(node, Derivative):
    return (node.expression,)
  unhandled_node(node, "get_children")


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
  """
  Get all nodes in the tree using specified traversal order.

  Args:
      node: Root node of the tree
      traversal_order: 'breadth_first' (default) or 'depth_first' (pre-order)

  Returns:
      List of all nodes in the tree
  """
  if traversal_order == 'breadth_first':
    return _breadth_first_traversal(node)
  elif traversal_order == 'depth_first':
    return _depth_first_traversal(node)
  else:
    raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
  nodes_to_visit = deque([node])
  all_nodes = []

  while nodes_to_visit:
    current_node = nodes_to_visit.popleft()
    all_nodes.append(current_node)
    nodes_to_visit.extend(get_children(current_node))

  return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
  stack = [node]
  all_nodes = []

  while stack:
    current_node = stack.pop()
    all_nodes.append(current_node)
    stack.extend(reversed(get_children(current_node)))

  return all_nodes


def count_nodes(node: Node) -> int:
  return len(_breadth_first_traversal(node))


def calculate_tree_depth(node: Node) -> int:
  """
  Calculate the maximum depth of the tree.

  Returns:
      Maximum depth (leaf nodes have depth 1)
  """
  max_depth = 0
  stack = [(node, 1)]

  while stack:
    current_node, depth = stack.pop()
    max_depth = max(max_depth, depth)
    for child in get_children(current_node):
      stack.append((child, depth + 1))

  return max_depth


def get_constants(node: Node) -> List[float]:
  """Constant values in pre-order"""
  return [n.value for n in _depth_first_traversal(node) if isinstance(n, Constant)]


def get_variables(node: Node) -> List[str]:
  """Variable names in order of first occurrence (pre-order)"""
  names = []
  for n in _depth_first_traversal(node):
    if isinstance(n, Variable) and n.name not in names:
      names.append(n.name)
  return names
