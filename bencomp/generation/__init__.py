from bencomp.generation.strings import (
    FileDictionary,
    GeneratedDictionary,
    RandomStrings,
    StringProvider,
    build_string_provider,
)
from bencomp.generation.tree import TreeGenerator, TreeNode, generate_tree

__all__ = [
    "StringProvider",
    "RandomStrings",
    "GeneratedDictionary",
    "FileDictionary",
    "build_string_provider",
    "TreeNode",
    "TreeGenerator",
    "generate_tree",
]
