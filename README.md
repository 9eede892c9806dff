# dpkit

Dynamic-programming solvers and number-theory helpers for counting and
optimisation problems. Pure Python, no runtime dependencies, Python 3.10
or later.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `dpkit.arithmetic`

- `ext_gcd(a, b)` returns `(d, x, y)` with `a*x + b*y == d == gcd(a, b)`.
- `power_mod(base, exponent, modulus)` returns `base ** exponent % modulus`;
  raises `ValueError` for a non-positive modulus or a negative exponent.
- `mod_inverse(a, modulus)` returns the inverse of `a` modulo `modulus`
  (0 when the modulus is 1); raises `ValueError` when no inverse exists.
- `Binomial(limit, modulus)` precomputes factorials and inverse factorials
  up to `limit` modulo a prime. `factorial(n)` and `ncr(n, r)` answer
  queries for `0 <= n <= limit`; `ncr` gives 0 when `r` lies outside `0..n`.

### `dpkit.segtree`

`MaxSegmentTree(size)` holds positions `0..size-1`. `update(index, value)`
assigns a position; `query(left, right)` returns the maximum over the
half-open range `[left, right)`, or `MaxSegmentTree.EMPTY` (`-10**17`)
where nothing has been set.

### `dpkit.counting`

- `palindrome_sum_counts(limit)` returns a list whose entry `n` counts the
  ways to write `n` as an unordered sum of positive palindromic numbers,
  modulo 1 000 000 007; `count_palindrome_sums(n)` returns one such entry.
- `count_good_subsequences(values)` counts the non-empty subsequences that
  split into consecutive good arrays (a good array's first element is
  positive and equals its length minus one), modulo 998 244 353.
- `count_winning_arrays(n, k)` counts arrays of `n` values below `2**k`
  whose bitwise AND is at least their XOR, modulo 1 000 000 007.

### `dpkit.optimization`

- `min_deletions_to_even(s)` returns the fewest characters to delete from a
  lowercase string so that it is made of equal adjacent pairs.
- `min_total_cost(a, b)` minimises the sum over all pairs `i < j` of
  `(a_i + a_j)**2 + (b_i + b_j)**2`, where each `a_i` may be swapped with
  `b_i`. Values must be non-negative.
- `operation_costs(limit)` maps each value in `1..limit` reachable from 1
  to the fewest steps `v += v // x` (for some `x >= 1`) needed to reach it.
- `max_coins(targets, rewards, k)` is a 0/1 knapsack: turning a 1 into
  `targets[i]` (a value in `1..1023`) costs its operation count and earns
  `rewards[i]`; the best total reward within `k` operations is returned.

### `dpkit.bitmask`

- `min_cost_connect_groups(cost)` returns the least total cost of links
  between two groups such that every point of both groups is linked.
- `count_domino_tilings(n, m)` counts tilings of an `n` by `m` grid with
  1x2 dominoes, modulo 1 000 000 007.
- `can_avoid_palindromes(s)` tells whether each `?` in a string of `0`, `1`
  and `?` can be replaced so that no substring of length 5 or 6 is a
  palindrome.

### `dpkit.digits`

- `count_interesting(a, b)` counts integers in `[a, b]` whose digit product
  is divisible by their digit sum.
- `count_no_equal_adjacent(a, b)` counts integers in `[a, b]` with no two
  equal adjacent digits.

Both raise `ValueError` when `a` is negative or greater than `b`.

## Example

```python
from dpkit.arithmetic import Binomial, ext_gcd
from dpkit.segtree import MaxSegmentTree
from dpkit.bitmask import count_domino_tilings

g, x, y = ext_gcd(30, 12)        # g == 6 and 30*x + 12*y == 6

table = Binomial(1000, 1_000_000_007)
table.ncr(10, 3)                 # 120

tree = MaxSegmentTree(8)
tree.update(2, 5)
tree.update(6, 9)
tree.query(0, 4)                 # 5

count_domino_tilings(2, 3)       # 3
```

## What it does not do

dpkit is a library only. It installs no command-line program and does not
read problem input from standard input; call the functions from Python.