import pytest
from hypothesis import given
from hypothesis import strategies as st

from fanalgo.unionfind import QuickFindUF, QuickUnionUF

SIZE = 10

pairs = st.lists(
    st.tuples(st.integers(0, SIZE - 1), st.integers(0, SIZE - 1)), max_size=30
)


@pytest.mark.parametrize("cls", [QuickFindUF, QuickUnionUF])
def test_fresh_structure_has_singletons(cls):
    uf = cls(SIZE)
    for p in range(SIZE):
        for q in range(SIZE):
            assert uf.connected(p, q) == (p == q)


@pytest.mark.parametrize("cls", [QuickFindUF, QuickUnionUF])
def test_union_connects_transitively(cls):
    uf = cls(SIZE)
    uf.union(1, 2)
    uf.union(2, 3)
    assert uf.connected(1, 3)
    assert uf.connected(3, 1)
    assert not uf.connected(1, 4)


@pytest.mark.parametrize("cls", [QuickFindUF, QuickUnionUF])
def test_union_is_idempotent(cls):
    uf = cls(SIZE)
    uf.union(4, 5)
    uf.union(5, 4)
    uf.union(4, 5)
    assert uf.connected(4, 5)
    assert not uf.connected(4, 6)


@pytest.mark.parametrize("cls", [QuickFindUF, QuickUnionUF])
@pytest.mark.parametrize("bad", [-1, SIZE])
def test_out_of_range_raises(cls, bad):
    uf = cls(SIZE)
    with pytest.raises(IndexError):
        uf.connected(0, bad)
    with pytest.raises(IndexError):
        uf.union(bad, 0)


@given(pairs)
def test_implementations_agree(unions):
    quick_find = QuickFindUF(SIZE)
    quick_union = QuickUnionUF(SIZE)
    for p, q in unions:
        quick_find.union(p, q)
        quick_union.union(p, q)
    for p in range(SIZE):
        for q in range(SIZE):
            assert quick_find.connected(p, q) == quick_union.connected(p, q)


@given(pairs)
def test_connectivity_is_an_equivalence(unions):
    uf = QuickUnionUF(SIZE)
    for p, q in unions:
        uf.union(p, q)
        assert uf.connected(p, q)
    for p in range(SIZE):
        assert uf.connected(p, p)
        for q in range(SIZE):
            assert uf.connected(p, q) == uf.connected(q, p)
            if uf.connected(p, q):
                for r in range(SIZE):
                    assert uf.connected(q, r) == uf.connected(p, r)