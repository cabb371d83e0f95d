from __future__ import annotations
import pytest

from j2kcodec.errors import ProgressionPreconditionError
from j2kcodec.progression import RLCP, LRCP, ProgressionData, drain

def _two(r, c):
    return 2

def test_rlcp_concrete_scenario():
    got = [p.as_tuple() for p in drain(RLCP(2, 1, 1, _two))]
    assert got == [
        (0, 0, 0, 0), (0, 0, 0, 1), (1, 0, 0, 0), (1, 0, 0, 1),
        (0, 1, 0, 0), (0, 1, 0, 1), (1, 1, 0, 0), (1, 1, 0, 1),
    ]

def test_rlcp_order_is_resolution_major():
    pc = lambda r, c: 1 + (r + c) % 3
    got = drain(RLCP(3, 2, 2, pc))
    keys = [(p.resolution_level, p.layer, p.component, p.precinct) for p in got]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)
    for p in got:
        assert 0 <= p.precinct < pc(p.resolution_level, p.component)

def test_rlcp_sentinel_and_exhaustion():
    it = RLCP(2, 3, 2, _two)
    assert it.end == ProgressionData(0, 4, 0, 0)
    n = 0
    while it.has_next():
        it.take_next()
        n += 1
    assert n == 2 * 4 * 2 * 2
    with pytest.raises(ProgressionPreconditionError):
        it.take_next()

@pytest.mark.parametrize("L,N,C,pc", [
    (0, 2, 3, _two),
    (2, 2, 0, _two),
    (2, 2, 3, lambda r, c: 0),
])
def test_rlcp_degenerate_starts_exhausted(L, N, C, pc):
    it = RLCP(L, N, C, pc)
    assert it.has_next() is False

def test_rlcp_zero_precinct_first_pair_not_emitted():
    # (r=0, c=0) sans précinct : aucun tuple (0,0,0,0) ne doit sortir
    pc = lambda r, c: 0 if (r, c) == (0, 0) else 1
    got = [p.as_tuple() for p in drain(RLCP(1, 0, 2, pc))]
    assert got == [(0, 0, 1, 0)]

def test_rlcp_zero_precinct_pairs_match_lrcp():
    pc = lambda r, c: 0 if (c == 0 and r >= 1) or (c == 2 and r == 0) else 2
    rl = drain(RLCP(2, 2, 3, pc))
    lr = drain(LRCP(2, 2, 3, pc))
    assert sorted(p.as_tuple() for p in rl) == sorted(p.as_tuple() for p in lr)
    assert all(p.precinct < pc(p.resolution_level, p.component) for p in rl)

def test_rlcp_provider_called_only_within_bounds():
    seen = set()
    def pc(r, c):
        seen.add((r, c))
        return 1
    drain(RLCP(2, 1, 0, pc))
    assert seen == set()
    drain(RLCP(2, 1, 2, pc))
    assert seen == {(0, 0), (0, 1), (1, 0), (1, 1)}

def test_rlcp_tuples_not_shared():
    it = RLCP(1, 0, 1, _two)
    a = it.take_next()
    b = it.take_next()
    assert a is not b
    assert (a.precinct, b.precinct) == (0, 1)

@pytest.mark.parametrize("cls", [LRCP, RLCP])
@pytest.mark.parametrize("bad", [1.5, True, "2"])
def test_iterators_reject_non_int_bounds_alike(cls, bad):
    with pytest.raises(ValueError):
        cls(bad, 0, 1, _two)
    with pytest.raises(ValueError):
        cls(1, bad, 1, _two)
    with pytest.raises(ValueError):
        cls(1, 0, bad, _two)
