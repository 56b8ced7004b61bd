# dsalgo

A small library of classic data structures and algorithms, written in plain
Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.temperature` | `CityYear`, `CityTemperatureData`, `clean()`, `parse_city_year()`, `read_city()` for per-city yearly temperature records read from CSV |
| `dsalgo.search` | `linear_search()`, `binary_search()`, `random_int_array()`, `array_search_speed()` |
| `dsalgo.sequences` | `Collection`, `DynamicArray`, `LinkedList`, `search_speed()` |
| `dsalgo.sorting` | `bubble_sort()`, `selection_sort()`, `insertion_sort()`, `merge_sort()`, `quick_sort()`, `hybrid_sort()`, `sort_speed()` |
| `dsalgo.hash_table` | `HashTable`, a separately chained table that doubles its buckets past a load factor of 0.7 |
| `dsalgo.sequential` | `SequentialCollection`, `Queue`, `Stack` |
| `dsalgo.graph` | `Graph` with `edge_exists()`, `dfs()`, `bfs()`, and `path_map_to_path()` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Temperature records. `read_city()` reads data lines `start_line` to
`end_line` (inclusive, counted from 1 after the header line); each line has
two ignored cells followed by year, days below 32, days above 90, average,
average maximum and average minimum:

```python
from dsalgo.temperature import read_city

nyc = read_city("NYC", "tempdata.csv", 1, 51)
len(nyc)                      # number of years read
nyc.first_year                # year of the first record
nyc[1970].num_days_below_32   # KeyError if the year is missing
nyc.all_time_average()
nyc.total_days_below_32()
nyc.total_days_above_90()
```

Searching (both return `-1` when the key is absent):

```python
from dsalgo.search import linear_search, binary_search

linear_search([23, 4, 11, 4, 7, 8], 7)        # 4
binary_search([4, 4, 7, 72, 84], 72)          # 3
binary_search([5, 45, 112, 422], 345)         # -1
```

Sorting in place. `bubble_sort()` and `selection_sort()` sort the whole
list; the others take inclusive `start` and `end` bounds, with `end`
defaulting to the last index:

```python
from dsalgo.sorting import merge_sort, insertion_sort, quick_sort

values = [23, -3, -2, 4, 11, 4, 7, 8, 0, 0, -3]
merge_sort(values, 0, len(values) - 1)

partial = [5, -3, -2, 4, 11, 4, 7, 8, 0, 0, -3]
insertion_sort(partial, 2, 6)   # [5, -3, -2, 4, 4, 7, 11, 8, 0, 0, -3]

words = ["dog", "man", "jen", "aaa"]
quick_sort(words)               # random pivot
```

`hybrid_sort()` merge sorts until a run is shorter than ten items and
insertion sorts those runs.

Linked list and dynamic array share the same `Collection` interface; an
index out of range raises `IndexError`:

```python
from dsalgo.sequences import DynamicArray, LinkedList

items = LinkedList()
for n in (23, 4, 11):
    items.insert_at_end(n)
items.find(11)      # 2
11 in items         # True
items[0]            # 23
len(items)          # 3
list(items)         # [23, 4, 11]

array = DynamicArray(5)
for n in range(11):
    array.insert_at_end(n)
array.capacity      # 20
array.set_capacity(3)
len(array)          # 3, items past the new capacity are discarded
```

Hash table:

```python
from dsalgo.hash_table import HashTable

table = HashTable(5)
table.put("dog", 34)
table.get("dog")    # 34
table.get("cat")    # None
table.load_factor   # 0.2
table.capacity      # 5
print(table.dump()) # one line per bucket
table.remove("dog")
len(table)          # 0
```

Stacks and queues (`pop()` and `peek()` raise `IndexError` when empty;
`remove()` drops every occurrence of an item):

```python
from dsalgo.sequential import Queue, Stack

queue = Queue()
queue.push(1)
queue.push(2)
queue.pop()         # 1

stack = Stack()
stack.push(1)
stack.push(2)
stack.peek()        # 2
stack.pop()         # 2
```

Graphs. Edges are two-way unless `bidirectional=False`; `dfs()` and
`bfs()` return a list of vertices from start to goal, or `None`:

```python
from dsalgo.graph import Graph

graph = Graph()
for i in range(10):
    graph.add_edge(i, i + 1)
graph.bfs(0, 10)          # [0, 1, 2, ..., 10]
graph.edge_exists(4, 6)   # False
graph.neighbors(5)        # frozenset({4, 6})
```

## Timing helpers

`array_search_speed(length, num_tests)` and
`search_speed(length, num_tests)` return average nanoseconds per search as a
pair of ints; `sort_speed(length)` returns a `SortTimes` named tuple of
microseconds for merge, quick, insertion, hybrid and built-in sort on the
same random data. They return numbers only: the package draws no charts and
writes no files.

## Command line

A short demonstration of the hash table, which stores one entry and prints
its value:

```
dsalgo-hashtable
```