# searchtrees

Classic search structures in plain Python, with no dependencies outside the
standard library.

- `searchtrees.binary_search` has two ways to search a sorted sequence.
  `binary_search(arr, target)` is iterative and
  `binary_search_recursive(arr, target)` is recursive. Both return the index of
  `target`, or `-1` when it is absent.
- `searchtrees.bst` has `BST`, an unbalanced binary search tree keyed by any
  ordered type. Inserting a key that is already there replaces its value.
  - Membership and size: `key in tree`, `len(tree)` and `is_empty()`.
  - Lookup: `search(key)` returns the value for `key`, or `None` when it is
    absent.
  - Traversals: `pre_order()`, `in_order()`, `post_order()` and
    `level_order()` are generators of keys.
  - Extremes: `minimum()` and `maximum()` return the smallest and largest key.
    `remove_min()` and `remove_max()` remove them. On an empty tree all four
    raise `ValueError`.
  - Removal: `remove(key)` uses Hibbard deletion and ignores a missing key.
- `searchtrees.sequence_st` has `SequenceST`, a symbol table backed by a singly
  linked list. It is useful as a baseline for comparison.
  - It offers `insert`, `search` (returns `None` when a key is absent),
    `remove` (ignores a missing key), `is_empty`, `len()` and `in`.
  - Iterating over it yields keys from the most recently added to the oldest.
- `searchtrees.words` has `tokenize(text)` and `read_words(path)`.
  - `tokenize(text)` splits text into runs of ASCII letters and lower-cases
    them.
  - `read_words(path)` does the same for the contents of a file and raises
    `OSError` if the file cannot be opened.
- `searchtrees.word_count` has `count_frequencies(words, table)`. It adds one to
  the count of each word in either a `BST` or a `SequenceST`, starting new words
  at 1, and returns the same table.

## Installation

```
pip install .
```

## Usage

```python
from searchtrees.binary_search import binary_search

print(binary_search([1, 3, 5, 7], 5))   # 2
print(binary_search([1, 3, 5, 7], 4))   # -1
```

```python
from searchtrees.bst import BST

tree = BST()
for key in [5, 3, 8, 1, 4]:
    tree.insert(key, str(key))

print(3 in tree)                 # True
print(tree.search(4))            # "4"
print(list(tree.in_order()))     # [1, 3, 4, 5, 8]
print(list(tree.level_order()))  # [5, 3, 8, 1, 4]
tree.remove(3)
print(len(tree), tree.minimum(), tree.maximum())  # 4 1 8
```

To count words from a text file:

```python
from searchtrees.bst import BST
from searchtrees.words import read_words
from searchtrees.word_count import count_frequencies

table = count_frequencies(read_words("book.txt"), BST())
print(table.search("god"))
```

## Command line

To time the two binary search functions, run:

```
searchtrees-bench [--size N]
```

This builds the array `[0, N)`, with `N` defaulting to 1000000. It then looks up
every value in `[0, 2N)` with each function, checks each result, and prints the
processor time that each function took.

To count word frequencies in a text file, run:

```
searchtrees-wordcount [FILENAME]
```

`FILENAME` defaults to `bible.txt`. The command counts the words with a `BST`
and then with a `SequenceST`. For each table it prints the count of the word
`god` and the time taken. If the file cannot be opened, it prints a message and
exits.

## Limitations

- `BST` does no rebalancing, so keys inserted in sorted order give a tree as deep
  as it is long.
- The tables are held in memory only. Nothing is stored on disk.

## Tests

```
pip install .[test]
pytest
```