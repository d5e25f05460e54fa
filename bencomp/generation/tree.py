"""
Depth- and breadth-constrained random tree generation.

Example:
    >>> from bencomp.core.config import ShapeConfig
    >>> from bencomp.core.random_source import RandomSource
    >>> tree = generate_tree(ShapeConfig(max_depth=2), rng=RandomSource(seed=7))
    >>> tree.depth()
    2
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from bencomp.core.config import ShapeConfig
from bencomp.core.random_source import RandomSource
from bencomp.generation.strings import StringProvider, build_string_provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeNode:
    """One node of a generated tree: ordered children plus string fields."""

    children: Tuple["TreeNode", ...] = ()
    fields: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_nodes(self, depth: int = 0) -> Iterator[Tuple[int, "TreeNode"]]:
        """Yield ``(depth, node)`` for this node and all descendants, depth first."""
        stack = [(depth, self)]
        while stack:
            node_depth, node = stack.pop()
            yield node_depth, node
            for child in reversed(node.children):
                stack.append((node_depth + 1, child))

    def depth(self) -> int:
        """Depth of the deepest node, with the root at depth 0."""
        return max(node_depth for node_depth, _ in self.iter_nodes())

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def to_dict(self) -> dict:
        # Empty children/fields are omitted, matching the wire format.
        data: Dict[str, object] = {}
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        if self.fields:
            data["fields"] = dict(self.fields)
        return data


class TreeGenerator:
    """Builds random trees under the constraints of a ShapeConfig.

    The same provider instance is used for every node, so a dictionary pool
    is shared by the whole tree rather than rebuilt per node.

    Attributes:
        config: Shape constraints
        provider: Source of keys and values
        rng: Random source for field counts and degrees
    """

    def __init__(
        self,
        config: ShapeConfig,
        provider: StringProvider,
        rng: RandomSource,
    ):
        self.config = config
        self.provider = provider
        self.rng = rng

    def generate(self) -> TreeNode:
        """Generate one tree, rooted at depth 0."""
        root = self._generate_node(0)
        logger.info(f"Generated tree with {root.count_nodes()} nodes (max depth {self.config.max_depth})")
        return root

    def _generate_node(self, depth: int) -> TreeNode:
        fields: Dict[str, str] = {}
        for _ in range(self.config.fields_per_node.draw(self.rng)):
            # Key is drawn before value; duplicate keys overwrite.
            key = self.provider.next_string()
            fields[key] = self.provider.next_string()

        num_children = self._num_children(depth)
        children = tuple(self._generate_node(depth + 1) for _ in range(num_children))
        return TreeNode(children=children, fields=fields)

    def _num_children(self, depth: int) -> int:
        if depth >= self.config.max_depth:
            return 0
        return self.config.degree.draw(self.rng)


def generate_tree(
    config: ShapeConfig,
    rng: Optional[RandomSource] = None,
    provider: Optional[StringProvider] = None,
) -> TreeNode:
    """Generate a single tree.

    Args:
        config: Shape constraints (validated here)
        rng: Random source; a fresh unseeded one when omitted
        provider: String provider; built from ``config`` when omitted

    Returns:
        Root node of the generated tree
    """
    config.validate()
    rng = rng or RandomSource()
    provider = provider or build_string_provider(config, rng)
    return TreeGenerator(config, provider, rng).generate()
