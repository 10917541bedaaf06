import pytest

from game2d.vector import VectorAdapter
from game2d.viewport import ViewportAdapter


@pytest.fixture
def size():
    return VectorAdapter(50, 50)


@pytest.fixture
def center():
    return VectorAdapter(25, 25)


@pytest.fixture
def viewport(size, center):
    return ViewportAdapter(size, center)


def test_initial_size_and_center(viewport, size, center):
    assert viewport.size.horizontal == size.horizontal
    assert viewport.size.vertical == size.vertical
    assert viewport.center.horizontal == center.horizontal
    assert viewport.center.vertical == center.vertical
    assert viewport.position == center


def test_update_size(viewport):
    new_size = VectorAdapter(100, 100)
    viewport.size = new_size
    assert viewport.size == new_size


def test_update_center(viewport):
    new_center = VectorAdapter(10, 10)
    viewport.center = new_center
    assert viewport.center == new_center


def test_reset_replaces_size(viewport, center):
    new_rect = VectorAdapter(300, 200)
    viewport.reset(new_rect)
    assert viewport.size == new_rect
    assert viewport.center == center


def test_stores_copies(size, center):
    viewport = ViewportAdapter(size, center)
    size += 7
    assert viewport.size == VectorAdapter(50, 50)


def test_convert_to_camera(viewport, size, center):
    cam = viewport.to_camera()
    assert cam.target.x == pytest.approx(center.horizontal)
    assert cam.target.y == pytest.approx(center.vertical)
    assert cam.offset.x == pytest.approx(size.horizontal)
    assert cam.offset.y == pytest.approx(size.vertical)
    assert cam.rotation == pytest.approx(0)
    assert cam.zoom == pytest.approx(1)


def test_apply_zoom(viewport):
    viewport.zoom = 2
    assert viewport.to_camera().zoom == pytest.approx(2)


def test_default_viewport_is_zero():
    viewport = ViewportAdapter()
    assert viewport.size == VectorAdapter()
    assert viewport.center == VectorAdapter()
    assert viewport.zoom == pytest.approx(1)


def test_str_format(viewport):
    expected = f"Viewport -> {viewport.position} {viewport.center} {viewport.size}"
    assert str(viewport) == expected
    assert str(viewport).startswith("Viewport -> VA -> H:25 V:25")