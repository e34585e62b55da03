"""Classic data structures (stacks, queues, trees, disjoint sets) and sorting algorithms."""

__version__ = "0.1.0"

__all__ = [
    "array_stack",
    "binary_tree",
    "bubble_sort",
    "circular_queue",
    "disjoint_set",
    "lcrs_tree",
    "linked_list_stack",
    "linked_queue",
    "quick_sort",
]