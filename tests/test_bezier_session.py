import pytest

from glsketch.bezier import BezierSession, Phase, format_points
from glsketch.linalg import Vec2


def build_segment(s, p0=(0, 0), p2=(1, 0), p1=(0.5, 1)):
    s.left_click(p0)
    s.left_click(p2)
    s.right_press(p1)
    s.right_release()


@pytest.fixture
def session():
    s = BezierSession()
    s.toggle()
    return s


def test_inactive_session_ignores_input():
    s = BezierSession()
    s.left_click((0, 0))
    assert s.points == []
    assert not s.finalize()


def test_phases(session):
    assert session.phase is Phase.EMPTY
    session.left_click((0, 0))
    assert session.phase is Phase.START_SET
    session.left_click((1, 0))
    assert session.phase is Phase.ENDS_SET
    session.right_press((0.5, 1))
    assert session.phase is Phase.COMPLETE
    assert session.dragging
    assert session.points == [Vec2(0, 0), Vec2(0.5, 1), Vec2(1, 0)]


def test_drag_moves_control_point(session):
    session.left_click((0, 0))
    session.left_click((1, 0))
    session.right_press((0.5, 1))
    session.motion((0.2, 0.3))
    assert session.points[1] == Vec2(0.2, 0.3)
    session.right_release()
    session.motion((0.9, 0.9))
    assert session.points[1] == Vec2(0.2, 0.3)
    assert session.hover == Vec2(0.9, 0.9)


def test_right_press_before_ends_is_ignored(session):
    session.left_click((0, 0))
    session.right_press((0.5, 1))
    assert session.points == [Vec2(0, 0)]
    assert not session.dragging


def test_left_click_resets_end(session):
    session.left_click((0, 0))
    session.left_click((1, 0))
    session.left_click((2, 0))
    assert session.points == [Vec2(0, 0), Vec2(2, 0)]
    session.right_press((0.5, 1))
    session.left_click((3, 0))
    assert session.phase is Phase.ENDS_SET
    assert session.points == [Vec2(0, 0), Vec2(3, 0)]


def test_finalize_needs_all_three_points(session):
    session.left_click((0, 0))
    session.left_click((1, 0))
    assert not session.finalize()
    assert session.path == []


def test_finalize_appends_control_and_anchor_without_duplicates(session):
    build_segment(session)
    assert session.finalize()
    assert session.path == [Vec2(0, 0), Vec2(0.5, 1), Vec2(1, 0)]
    # The end anchor seeds the next segment.
    assert session.points == [Vec2(1, 0)]
    assert session.phase is Phase.START_SET

    session.left_click((2, 0))
    session.right_press((1.5, -1))
    session.right_release()
    assert session.finalize()
    assert session.path == [Vec2(0, 0), Vec2(0.5, 1), Vec2(1, 0), Vec2(1.5, -1), Vec2(2, 0)]
    assert len(session.segments()) == 2


def test_toggle_exports_and_reseeds(session):
    build_segment(session)
    session.finalize()
    text = session.toggle()
    assert not session.active
    assert text == format_points(session.path)
    assert session.points == []

    assert session.toggle() is None
    assert session.points == [Vec2(1, 0)]


def test_toggle_with_empty_path_exports_nothing(session):
    assert session.toggle() is None


def test_clear_keeps_path_and_reseeds(session):
    build_segment(session)
    session.finalize()
    session.left_click((5, 5))
    session.clear()
    assert session.points == [Vec2(1, 0)]
    assert len(session.path) == 3


def test_format_points():
    text = format_points([Vec2(0.5, -0.25), (1.0 / 3, 2)], name="wing")
    assert text == "wing = [\n    (0.5, -0.25),\n    (0.333333, 2),\n]"
