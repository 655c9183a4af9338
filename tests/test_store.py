import numpy as np
import pytest

from particles.store import Particle, PointStore


def test_set_then_get():
    store = PointStore(3)
    store.set(1, Particle(x=1.5, y=-2.0, z=0.75, color="#fff"))
    assert store.get(1) == Particle(x=1.5, y=-2.0, z=0.75, color="#fff")
    assert len(store) == 3


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_raises(index):
    store = PointStore(3)
    with pytest.raises(IndexError):
        store.get(index)
    with pytest.raises(IndexError):
        store.set(index, Particle(0.0, 0.0, 1.0, "#fff"))


def test_advance_moves_every_particle():
    store = PointStore(4)
    store.z[:] = [1.0, 0.5, 0.25, 0.1]
    store.advance(0.1)
    np.testing.assert_allclose(store.z, [0.9, 0.4, 0.15, 0.0], atol=1e-12)


def test_colors_are_kept_as_given():
    store = PointStore(2)
    color = (1.0, 0.8, 0.8)
    store.set(0, Particle(0.0, 0.0, 1.0, color))
    assert store.get(0).color is color
