# algo

Classic data structures and algorithms in plain Python, with no runtime
dependencies. This is a library only. It has no command-line program.

## Contents

| Module | What it holds |
| --- | --- |
| `algo.array` | `FixedArray`: an array with a fixed capacity. It supports `insert`, `append`, `find` and `delete` by index, and `str()` renders it as `\|1\|2\|3`. |
| `algo.linked_list` | `LinkedList` and `ListNode`: a singly linked list with a sentinel head. It has insertion before or after a node, at the head and at the tail, lookup by index, node deletion, in-place reversal, a cycle check and the middle node. `delete_nth_from_end(n)` removes the node `n - 1` places before the end, so `n == 2` removes the last node. |
| `algo.stack` | The abstract `Stack` with two implementations, `ArrayStack` and `LinkedListStack`. Both iterate from top to bottom. |
| `algo.queues` | The abstract `Queue` with three implementations. `ArrayQueue` is bounded and does not reuse freed slots. `CircularQueue` is a ring buffer that holds at most `capacity - 1` values. `LinkedListQueue` is unbounded. |
| `algo.sorting` | Bubble, insertion, selection, merge, quick, bucket (`bucket_sort`, `bucket_sort_simple`) and counting sort. Each one sorts its list in place and returns `None`. The bucket and counting sorts accept only non-negative integers. |
| `algo.search` | Binary search in loop and recursive forms. It also finds the first or last index equal to a value. `binary_search_first_gt` and `binary_search_last_lt` find the neighbouring index, but only when the value itself is present. Every function returns `-1` when there is no answer. |
| `algo.binary_tree` | `TreeNode` with `pre_order`, `in_order` and `post_order` traversals. |
| `algo.arithmetic` | `gcd` by binary halving and subtraction, `is_power_of_two`, and `remove_k_digits`. |
| `algo.array_problems` | `move_zeroes`, `two_sum`, `two_sum_hashed`, `max_area`, `rotate`, `remove_duplicates`, `plus_one`, `climb_stairs`, `merge_sorted`, `find_missing_number`, `repeated_numbers`, `find_max_and_min`, `dedupe_sorted` and `reverse_array`. |
| `algo.list_problems` | A bare `ListNode` with `build_list` and `to_list`, cycle detection (`has_cycle_two_pointer`, `has_cycle_visited`, `detect_cycle`), `reverse_list`, `merge_two_lists`, `swap_pairs` and `delete_duplicates`. |
| `algo.stack_problems` | `MinStack` (constant-time minimum), `StackQueue` (a queue built from two stacks) and `is_valid_parentheses`. |
| `algo.string_problems` | The following functions: <ul><li>`int_to_roman`, `roman_to_int`</li><li>`length_of_longest_substring`, `longest_common_prefix`</li><li>`letter_combinations`, `str_str`</li><li>`reverse_string`, `reverse_str`, `reverse_words`</li><li>`length_of_last_word`, `repeated_characters`</li><li>`simplify_path`</li></ul> |

Errors are raised as exceptions:

- Popping or peeking an empty stack or queue raises `IndexError`.
- Inserting into a full container raises `OverflowError`.
- A bad argument raises `ValueError`, as does `two_sum` when no pair exists.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

```python
from algo.sorting import quick_sort
from algo.search import binary_search_first

items = [5, 2, 2, 9, 1]
quick_sort(items)                      # items is now [1, 2, 2, 5, 9]
binary_search_first(items, 2)          # 1
```

```python
from algo.stack import ArrayStack

stack = ArrayStack()
stack.push(1)
stack.push(2)
stack.pop()     # 2
stack.top()     # 1
```

```python
from algo.queues import CircularQueue

queue = CircularQueue(3)
queue.enqueue("a")
str(queue)      # 'head <- a <- tail'
```

```python
from algo.string_problems import int_to_roman, roman_to_int, simplify_path

int_to_roman(1994)                # 'MCMXCIV'
roman_to_int("MCMXCIV")           # 1994
simplify_path("/a/./b/../../c/")  # '/c'
```

```python
from algo.list_problems import build_list, reverse_list, to_list

to_list(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

## Running the tests

```
pytest
```