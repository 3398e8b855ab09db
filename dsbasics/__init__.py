"""Classic data structures: a high-score table, stacks, lists, deques, trees, hash maps and priority queues."""

__version__ = "0.1.0"
__all__ = [
    "array_stack",
    "binary_tree",
    "deque",
    "game_scores",
    "hash_map",
    "linked_lists",
    "priority_queues",
    "search_tree",
]