import pytest

from raycaster2d.ray import Ray


def test_new_ray():
    ray = Ray(1000.0, (5.0, 6.0))
    assert ray.length == 1000.0
    assert ray.position == (5.0, 6.0)
    assert ray.width == 2.0
    assert ray.rotation == 0.0


def test_update_moves_start():
    ray = Ray(10.0, (0.0, 0.0))
    ray.update((3.0, 4.0))
    assert ray.position == (3.0, 4.0)
    assert ray.length == 10.0


def test_set_length_narrows():
    ray = Ray(1000.0, (0.0, 0.0))
    ray.set_length(42.5)
    assert ray.length == 42.5
    assert ray.width == 1.0


def test_set_rotation_adds_primary():
    ray = Ray(10.0, (0.0, 0.0), primary_rotation=15.0)
    ray.set_rotation(30.0)
    assert ray.rotation == pytest.approx(45.0)


@pytest.mark.parametrize("angle", [-720.0, -30.0, 0.0, 359.0, 800.0])
def test_set_rotation_stays_in_range(angle):
    ray = Ray(10.0, (0.0, 0.0), primary_rotation=350.0)
    ray.set_rotation(angle)
    assert 0.0 <= ray.rotation < 360.0
    assert (ray.rotation - angle - 350.0) % 360.0 == pytest.approx(0.0, abs=1e-9) or (
        ray.rotation - angle - 350.0
    ) % 360.0 == pytest.approx(360.0, abs=1e-9)