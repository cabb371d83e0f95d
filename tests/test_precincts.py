from __future__ import annotations
import numpy as np
import pytest

from j2kcodec.precincts import (
    ComponentGeometry, PrecinctTable, constant_precincts, precincts_from_geometry,
)
from j2kcodec.progression import LRCP, drain

def test_constant_precincts():
    pc = constant_precincts(3)
    assert pc(0, 0) == 3 and pc(9, 4) == 3
    with pytest.raises(ValueError):
        constant_precincts(-1)

def test_precinct_table_lookup_and_out_of_range():
    t = PrecinctTable([[1, 2], [3, 0]])
    assert t.shape == (2, 2)
    assert t.max_resolution_level == 1 and t.component_count == 2
    assert t(0, 1) == 2 and t(1, 0) == 3 and t(1, 1) == 0
    assert t(2, 0) == 0 and t(0, 2) == 0 and t(-1, 0) == 0
    assert isinstance(t(0, 0), int)
    assert t.total() == 6
    cfg = t.progression_config(layer_count=3)
    assert cfg.bounds() == (3, 2, 2)
    it = LRCP(cfg.layer_count, cfg.max_decomposition_levels, cfg.component_count, t)
    assert len(drain(it)) == 18

def test_precinct_table_is_read_only_and_validated():
    t = PrecinctTable(np.ones((2, 3), dtype=np.int32))
    with pytest.raises(ValueError):
        t.counts[0, 0] = 5
    with pytest.raises(ValueError):
        PrecinctTable([1, 2, 3])
    with pytest.raises(ValueError):
        PrecinctTable([[1, -1]])

def test_geometry_default_exponents_one_precinct_per_level():
    t = precincts_from_geometry((0, 0, 64, 64), [
        ComponentGeometry(decomposition_levels=2),
        ComponentGeometry(decomposition_levels=1),
    ])
    assert t.shape == (3, 2)
    assert t.counts[:, 0].tolist() == [1, 1, 1]
    # r=2 > N_L de la composante 1 : niveau vide (Nmax tuile)
    assert t.counts[:, 1].tolist() == [1, 1, 0]

def test_geometry_with_precinct_exponents():
    t = precincts_from_geometry((0, 0, 100, 60), [
        ComponentGeometry(decomposition_levels=1, precinct_exponents=[(4, 4), (5, 5)]),
    ])
    assert t.counts[:, 0].tolist() == [8, 8]

def test_geometry_offset_tile_and_subsampling():
    t = precincts_from_geometry((20, 20, 100, 60), [
        ComponentGeometry(decomposition_levels=0, precinct_exponents=[(3, 3)]),
    ])
    assert t(0, 0) == 11 * 6
    t = precincts_from_geometry((10, 10, 100, 60), [
        ComponentGeometry(decomposition_levels=0, subsampling=(2, 2), precinct_exponents=[(3, 3)]),
    ])
    assert t(0, 0) == 7 * 4

def test_geometry_validation():
    with pytest.raises(ValueError):
        precincts_from_geometry((10, 0, 10, 10), [ComponentGeometry(0)])
    with pytest.raises(ValueError):
        ComponentGeometry(decomposition_levels=-1)
    with pytest.raises(ValueError):
        ComponentGeometry(decomposition_levels=1, subsampling=(0, 1))
    with pytest.raises(ValueError):
        ComponentGeometry(decomposition_levels=2, precinct_exponents=[(15, 15)])

@pytest.mark.parametrize("counts", [{"r0": [1]}, [[1, 2], [3]], [["a", 1]]])
def test_precinct_table_rejects_non_integer_arrays(counts):
    with pytest.raises(ValueError):
        PrecinctTable(counts)

def test_component_geometry_is_hashable():
    a = ComponentGeometry(decomposition_levels=1, subsampling=[2, 2],
                          precinct_exponents=[[4, 4], (5, 5)])
    b = ComponentGeometry(decomposition_levels=1, subsampling=(2, 2),
                          precinct_exponents=((4, 4), (5, 5)))
    assert a == b and hash(a) == hash(b)
    assert a.precinct_exponents == ((4, 4), (5, 5))
    assert a.exponents(1) == (5, 5)
