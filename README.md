# algods

Classic data structures and sorting algorithms in plain Python: stacks,
queues, a binary tree, a left-child right-sibling tree, a disjoint set,
bubble sort and several quick sort variants.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algods.linked_list_stack` | `LinkedListStack`, an unbounded stack |
| `algods.array_stack` | `ArrayStack`, which raises its capacity by 30% (at least one) when a push finds it full, and shrinks the capacity to 70% when a pop leaves it holding exactly that many items |
| `algods.circular_queue` | `CircularQueue`, a ring buffer with a fixed capacity |
| `algods.linked_queue` | `LinkedQueue`, an unbounded queue |
| `algods.binary_tree` | `BinaryTreeNode` with `preorder`, `inorder` and `postorder` generators; `format_traversal` |
| `algods.lcrs_tree` | `LCRSNode` with `add_child`, `children`, `format_tree` and `nodes_at_level` |
| `algods.disjoint_set` | `DisjointSet` with `find` and `union` |
| `algods.bubble_sort` | `bubble_sort`, with optional tracing of each swap |
| `algods.quick_sort` | `quick_sort`, `quick_sort_median_of_three`, `quick_sort_iterative`, the partition helpers `partition` and `partition_median_of_three`, and the comparators `compare_ascending` and `compare_descending` |

Popping or peeking an empty stack, dequeuing from an empty queue and
enqueuing onto a full `CircularQueue` raise `IndexError`.

## Examples

A stack:

```python
from algods.linked_list_stack import LinkedListStack

stack = LinkedListStack()
stack.push("abc")
stack.push("def")
print(len(stack))      # 2
print(stack.pop())     # def
```

A binary tree:

```python
from algods.binary_tree import BinaryTreeNode, format_traversal

root = BinaryTreeNode("A", BinaryTreeNode("B"), BinaryTreeNode("C"))
print(format_traversal(root.inorder()))   # " B A C"
```

Sorting in place:

```python
from algods.quick_sort import quick_sort

data = [6, 4, 2, 3, 1, 5]
quick_sort(data)
print(data)            # [1, 2, 3, 4, 5, 6]
```

The comparators work with `functools.cmp_to_key`:

```python
from functools import cmp_to_key
from algods.quick_sort import compare_descending

print(sorted([6, 4, 2], key=cmp_to_key(compare_descending)))   # [6, 4, 2]
```

A disjoint set:

```python
from algods.disjoint_set import DisjointSet

a, b = DisjointSet(1), DisjointSet(2)
a.union(b)
print(a.find() is b.find())   # True
```

## Command-line tools

Installing the package adds these commands. Each takes integers as
arguments and falls back to a built-in sample when given none.

- `algods-bubble-sort` prints the data, sorts it with bubble sort while
  printing the array after every swap, then prints the result.
- `algods-quick-sort` sorts the data with each quick sort variant in turn
  (first-element pivot, descending order by comparator, median of three,
  iterative) and prints each result on its own line.

## What this package does not do

It offers no linked list classes, no search strategies over lists, no
insertion sort and no expression calculator; its lists, searches and
arithmetic are left to Python's own built-ins.