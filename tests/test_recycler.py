import math

import numpy as np
import pytest

from config.starfield_config import StarfieldConfig
from particles.recycler import Recycler, needs_recycle, needs_recycle_mask
from particles.store import Particle, PointStore


def test_spawned_particles_respect_config():
    config = StarfieldConfig(start_spread=10, start_distance=2.5, random_seed=3)
    recycler = Recycler(config)
    for _ in range(500):
        particle = recycler.spawn()
        assert -5 <= particle.x <= 5
        assert -5 <= particle.y <= 5
        assert particle.z == 2.5
        assert particle.color in config.point_colors


def test_spawn_uses_whole_palette():
    recycler = Recycler(StarfieldConfig(random_seed=0))
    colors = {recycler.spawn().color for _ in range(300)}
    assert colors == {"#ffffff", "#ffcccc", "#ccccff"}


def test_single_color_palette():
    recycler = Recycler(StarfieldConfig(point_colors=["#fff"], random_seed=0))
    assert all(recycler.spawn().color == "#fff" for _ in range(50))


@pytest.mark.parametrize("projected, expected", [
    ((0.0, 0.0, 1.0), False),
    ((0.5, -0.5, 0.0), False),
    ((0.6, 0.0, 1.0), True),   # leaving on x alone is enough
    ((0.0, -0.6, 1.0), True),  # leaving on y alone is enough
    ((0.7, 0.7, 1.0), True),
    ((0.1, 0.1, -0.01), True),
    ((math.inf, 0.0, 1.0), True),
    ((math.nan, 0.0, 1.0), True),
    ((0.0, 0.0, math.inf), True),
    ((0.0, 0.0, math.nan), True),
])
def test_needs_recycle(projected, expected):
    assert needs_recycle(*projected) is expected


def test_mask_agrees_with_scalar_test():
    pos_x = np.array([0.0, 0.6, 0.0, 0.1, math.inf, math.nan])
    pos_y = np.array([0.0, 0.0, -0.6, 0.1, 0.0, 0.0])
    size = np.array([1.0, 1.0, 1.0, -1.0, 1.0, 1.0])
    mask = needs_recycle_mask(pos_x, pos_y, size)
    expected = [needs_recycle(*p) for p in zip(pos_x, pos_y, size)]
    assert list(mask) == expected


def test_recycle_replaces_out_of_view_particle():
    config = StarfieldConfig(random_seed=11)
    recycler = Recycler(config)
    store = PointStore(1)
    store.set(0, Particle(x=25.0, y=0.0, z=0.1, color="#ffffff"))

    pos_x, pos_y, size = recycler.recycle(store, 0)

    assert store.get(0).z == config.start_distance
    assert abs(pos_x) <= 0.5 and abs(pos_y) <= 0.5 and size >= 0
    assert (pos_x, pos_y, size) == recycler.project(store.get(0))


def test_recycle_leaves_valid_particle_alone():
    recycler = Recycler(StarfieldConfig(random_seed=5))
    store = PointStore(1)
    particle = Particle(x=1.0, y=2.0, z=0.5, color="#ccccff")
    store.set(0, particle)

    recycler.recycle(store, 0)

    assert store.get(0) == particle


def test_zero_depth_is_recycled():
    recycler = Recycler(StarfieldConfig(random_seed=5))
    store = PointStore(1)
    store.set(0, Particle(x=0.0, y=0.0, z=0.0, color="#ffffff"))

    recycler.recycle(store, 0)

    assert store.get(0).z == 1


def test_pathological_spread_falls_back_to_center(capsys):
    config = StarfieldConfig(start_spread=1e9, max_respawn_attempts=3, random_seed=2)
    recycler = Recycler(config)
    store = PointStore(2)
    store.set(0, Particle(x=1e6, y=0.0, z=1.0, color="#ffffff"))
    store.set(1, Particle(x=1e6, y=0.0, z=1.0, color="#ffffff"))

    projected = recycler.recycle(store, 0)
    recycler.recycle(store, 1)

    particle = store.get(0)
    assert (particle.x, particle.y, particle.z) == (0.0, 0.0, 1)
    assert projected == (0.0, 0.0, pytest.approx(0.2))
    assert recycler.forced_respawns == 2
    # Warned once, not once per particle
    assert capsys.readouterr().out.count("Warning:") == 1
