# dslists

Classic linked-list data structures with small demonstration programs.

- `dslists.singly`: a generic singly linked list (`LinkedList`, `Node`). It has
  front and back insertion (`push_front`, `push_back`), `insert_after`, search by
  predicate (`find`) and removal (`pop_front`, `pop_back`, `remove_after`,
  `remove_if`). `sort` takes a "less than" function, `insert_sorted` inserts into
  a list that is already ordered, and `render` formats each element on its own line.
- `dslists.doubly`: a doubly linked list (`DoublyLinkedList`, `DoublyNode`). It
  can be iterated forwards and backwards (`reversed`). It also has `find` by
  value, `max_node`, `min_node`, `insert_after` and `remove_node`.
- `dslists.circular`: a circular linked list (`CircularLinkedList`). Its
  `remove_value` removes every occurrence of a value and returns how many were removed.
- `dslists.polynomial`: a polynomial kept as a sequence of `Term`s (`coef`,
  `exp`) in a `Polynomial`. Terms can be inserted and deleted at either end, or
  after the first term with a given exponent (`insert_after_key`,
  `delete_after_key`). `sort` orders the terms by descending exponent,
  `insert_ordered` inserts into that order, and `evaluate` and `render` give the
  value at a point and the printed form.
- `dslists.students`: a `Student` record, `format_student`, and the `by_id`
  ordering, used with `dslists.singly.LinkedList`.

Errors are raised rather than ignored:

- Popping from an empty list raises `IndexError`.
- Passing `None` where a node is required raises `ValueError`.
- `Polynomial.insert_after_key` and `Polynomial.delete_after_key` raise `KeyError`
  when the exponent is not present, or when there is no term after it.
- `Polynomial.term_at` raises `IndexError` for a position past the end. A
  negative index gives the first term.

## Installation

```
pip install .
```

## Usage

```python
from dslists.singly import LinkedList

numbers = LinkedList([3, 1, 2])
numbers.sort(lambda a, b: a < b)
numbers.insert_sorted(0, lambda a, b: a < b)
print(list(numbers))        # [0, 1, 2, 3]
numbers.remove_if(lambda n: n % 2 == 0)
print(list(numbers))        # [1, 3]
```

```python
from dslists.polynomial import Polynomial, Term

p = Polynomial([Term(2, 1), Term(1, 2)])
p.sort()
print(p.render())           # f(x) = 1x^2 + 2x^1
print(p.evaluate(3))        # 15.0
```

## Demo commands

Each module with a demo installs a command:

```
dslists-circular      # circular list: push, pop and remove by value
dslists-doubly        # doubly linked list: insert after, min/max, removal
dslists-polynomial    # interactive: reads terms and positions from standard input
dslists-students      # student roster: sorted insertion and sorting by id
```

The demos take no options. Their messages are printed in unaccented Vietnamese.

## What it does not do

The student roster demo works on three fixed records. It does not read students
from input and does not save or load rosters. No module stores data anywhere
beyond memory.

## Running the tests

```
pip install .[test]
pytest
```