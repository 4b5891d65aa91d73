# multiorder

`multiorder` provides `MyContainer`, a small container that keeps elements in
insertion order and can be walked in six different orders:

| Method         | Order                                                        |
|----------------|--------------------------------------------------------------|
| `order()`      | insertion order                                              |
| `reverse()`    | reverse insertion order                                      |
| `ascending()`  | smallest to largest                                          |
| `descending()` | largest to smallest                                          |
| `side_cross()` | smallest, largest, second smallest, second largest, ...      |
| `middle_out()` | middle element (index `len // 2`), then left and right neighbours alternately, left first |

Elements need only support `<` and `==`.

## Installation

```
pip install .
```

## Usage

```python
from multiorder.container import MyContainer

c = MyContainer([7, 15, 6, 1, 2])
len(c)                  # 5
list(c.ascending())     # [1, 2, 6, 7, 15]
list(c.descending())    # [15, 7, 6, 2, 1]
list(c.side_cross())    # [1, 15, 2, 7, 6]
list(c.reverse())       # [2, 1, 6, 15, 7]
list(c.order())         # [7, 15, 6, 1, 2]
list(c.middle_out())    # [6, 15, 1, 7, 2]
list(c)                 # same as order()

str(c)                  # "[ 7 15 6 1 2 ]"
str(MyContainer())      # "[ ]"
```

`MyContainer()` starts empty; `MyContainer(items)` starts with the elements
of any iterable. `add_element` appends an element. `remove_element` removes
every occurrence of a value and raises `ValueError("Element not found")` if
the value is not present. `copy()` returns an independent container.

Each traversal method returns an iterator over the elements as they are when
the method is called; later additions or removals do not change an iterator
that has already been obtained.

The index helpers are also available from `multiorder.container` for use on
plain sequences:

- `side_cross_indices(values)` returns the indices of `values` in side-cross
  order.
- `middle_out_indices(n)` returns `0 .. n-1` in middle-out order and raises
  `ValueError` for a negative `n`.

## Demo

```
multiorder-demo
```

prints the size of a sample container holding `7 15 6 1 2`, followed by its
ascending, descending, side-cross, reverse, insertion and middle-out
traversals, one per line. The same output is available from
`python -m multiorder.demo`.

## Tests

```
pip install .[test]
pytest
```