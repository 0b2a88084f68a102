"""A percolation grid on weighted quick-union.

Sites 1..n*n form the grid row by row; site 0 is a virtual top and
site n*n + 1 a virtual bottom, both open from the start.
"""

from dataclasses import dataclass


@dataclass
class Site:
    parent: int
    is_open: bool = False


class Percolator:
    """An n-by-n grid that percolates once the virtual top and bottom connect."""

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"grid size must not be negative: {n}")
        count = n * n + 2
        self.n = n
        self.sites = [Site(i, i in (0, count - 1)) for i in range(count)]
        self.sizes = [1] * count

    def root(self, i):
        """Return the root of ``i``'s tree, halving the path on the way."""
        if not 0 <= i < len(self.sites):
            raise IndexError(f"site {i} outside 0..{len(self.sites) - 1}")
        sites = self.sites
        while i != sites[i].parent:
            sites[i].parent = sites[sites[i].parent].parent
            i = sites[i].parent
        return i

    def connected(self, i, j):
        return self.root(i) == self.root(j)

    def union(self, i, j):
        """Merge the components of ``i`` and ``j``, smaller tree under larger."""
        ir, jr = self.root(i), self.root(j)
        if ir == jr:
            return
        if self.sizes[ir] < self.sizes[jr]:
            self.sites[ir].parent = jr
            self.sizes[jr] += self.sizes[ir]
        else:
            self.sites[jr].parent = ir
            self.sizes[ir] += self.sizes[jr]

    def open(self, i):
        """Open site ``i`` and join it to open neighbours; False if already open."""
        self.root(i)
        site = self.sites[i]
        if site.is_open:
            return False
        site.is_open = True
        n, last = self.n, self.n * self.n
        if 0 < i < n + 1:
            self.union(0, i)
        if last - n < i < last + 1:
            self.union(i, last + 1)
        for a, b, neighbour in ((i - n, i, i - n), (i, i + n, i + n),
                                (i - 1, i, i - 1), (i, i + 1, i + 1)):
            if 0 < neighbour < last + 1 and self.sites[neighbour].is_open:
                self.union(a, b)
        return True