"""Classic searching, sorting, data-structure, graph and maze algorithms."""

__version__ = "0.1.0"

__all__ = [
    "associative",
    "bst",
    "containers",
    "graphs",
    "linked_lists",
    "maze",
    "multiarray",
    "searching",
    "sorting",
    "waves_levels",
]