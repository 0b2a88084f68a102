"""Union-find: quick-find and weighted quick-union with path compression."""


def _check(size, *indices):
    for index in indices:
        if not 0 <= index < size:
            raise IndexError(f"index {index} outside 0..{size - 1}")


class QuickFindUF:
    """Union-find where every element stores its component id directly."""

    def __init__(self, size):
        self._ids = list(range(size))

    def connected(self, p, q):
        _check(len(self._ids), p, q)
        return self._ids[p] == self._ids[q]

    def union(self, p, q):
        _check(len(self._ids), p, q)
        pid, qid = self._ids[p], self._ids[q]
        self._ids = [qid if ident == pid else ident for ident in self._ids]


class QuickUnionUF:
    """Weighted quick-union with path compression."""

    def __init__(self, size):
        self._parent = list(range(size))
        self._size = [1] * size

    def _root(self, i):
        parent = self._parent
        while i != parent[i]:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def connected(self, p, q):
        _check(len(self._parent), p, q)
        return self._root(p) == self._root(q)

    def union(self, p, q):
        _check(len(self._parent), p, q)
        i, j = self._root(p), self._root(q)
        if i == j:
            return
        if self._size[i] < self._size[j]:
            i, j = j, i
        self._parent[j] = i
        self._size[i] += self._size[j]