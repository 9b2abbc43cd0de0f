"""Tests for scaling about an arbitrary point and the aggregate report."""

import math

import pytest

from figures import (
    AggregateReport,
    EmptyShapeCollection,
    FrameRect,
    InvalidGeometry,
    InvalidScaleFactor,
    Point,
    Polygon,
    Rectangle,
    Rubber,
    aggregate_report,
    default_scene,
    scale_relative,
    scale_relative_all,
    union_frame,
)

PENTAGON = [(0.0, 0.0), (1.0, 0.0), (2.0, 2.0), (2.0, 3.0), (1.0, 4.0)]


def _shapes():
    return [
        Rectangle(1.0, 5.0, Point(2.0, 3.0)),
        Rubber(4.4, Point(1.0, 1.0), 1.1, Point(1.1, 1.1)),
        Rubber(3.0, Point(0.0, 0.0), 1.0, Point(1.5, -0.5)),
        Polygon(PENTAGON),
        Polygon([(0.0, 0.0), (6.0, 0.0), (0.0, 1.0)]),
    ]


@pytest.fixture
def scene():
    return default_scene()


class TestScaleRelative:
    @pytest.mark.parametrize("k", [0.5, 2.0, 3.7])
    @pytest.mark.parametrize("p", [Point(0.0, 0.0), Point(-3.0, 4.5), Point(10.0, 10.0)])
    @pytest.mark.parametrize("idx", range(5))
    def test_frame_offset_and_area_scale(self, idx, p, k):
        shape = _shapes()[idx]
        area0 = shape.area()
        f0 = shape.frame_rect()
        scale_relative(shape, p, k)
        f1 = shape.frame_rect()
        assert f1.pos.x - p.x == pytest.approx(k * (f0.pos.x - p.x))
        assert f1.pos.y - p.y == pytest.approx(k * (f0.pos.y - p.y))
        assert f1.width == pytest.approx(k * f0.width)
        assert f1.height == pytest.approx(k * f0.height)
        assert shape.area() == pytest.approx(k * k * area0)

    @pytest.mark.parametrize("idx", range(5))
    def test_anchor_maps_like_a_point(self, idx):
        shape = _shapes()[idx]
        p = Point(2.0, -1.0)
        a0 = shape.anchor
        scale_relative(shape, p, 3.0)
        assert shape.anchor.x == pytest.approx(p.x + 3.0 * (a0.x - p.x))
        assert shape.anchor.y == pytest.approx(p.y + 3.0 * (a0.y - p.y))

    def test_offset_rubber_both_centers(self):
        r = Rubber(3.0, Point(0.0, 0.0), 1.0, Point(1.5, -0.5))
        scale_relative(r, Point(1.0, 1.0), 2.0)
        assert r.pos1.x == pytest.approx(-1.0)
        assert r.pos1.y == pytest.approx(-1.0)
        assert r.pos2.x == pytest.approx(2.0)
        assert r.pos2.y == pytest.approx(-2.0)
        assert r.r1 == pytest.approx(6.0)
        assert r.r2 == pytest.approx(2.0)

    def test_about_own_center_equals_scale(self):
        a = Rectangle(2.0, 3.0, Point(1.0, 1.0))
        b = a.copy()
        scale_relative(a, Point(1.0, 1.0), 2.5)
        b.scale(2.5)
        assert a.frame_rect() == b.frame_rect()

    def test_rectangle_about_origin(self):
        r = Rectangle(1.0, 5.0, Point(2.0, 3.0))
        scale_relative(r, Point(0.0, 0.0), 2.0)
        assert r.frame_rect() == FrameRect(2.0, 10.0, Point(4.0, 6.0))

    @pytest.mark.parametrize("k", [0.0, -2.0, float("nan"), float("inf")])
    @pytest.mark.parametrize("idx", range(5))
    def test_rejected_factor_leaves_shape_untouched(self, idx, k):
        shape = _shapes()[idx]
        f0 = shape.frame_rect()
        area0 = shape.area()
        with pytest.raises(InvalidScaleFactor):
            scale_relative(shape, Point(100.0, 100.0), k)
        assert shape.frame_rect() == f0
        assert shape.area() == area0

    @pytest.mark.parametrize("p", [
        Point(float("nan"), 0.0),
        Point(0.0, float("inf")),
        (float("-inf"), float("nan")),
    ])
    @pytest.mark.parametrize("idx", range(5))
    def test_non_finite_center_leaves_shape_untouched(self, idx, p):
        shape = _shapes()[idx]
        f0 = shape.frame_rect()
        area0 = shape.area()
        with pytest.raises(InvalidGeometry):
            scale_relative(shape, p, 2.0)
        assert shape.frame_rect() == f0
        assert shape.area() == area0

    def test_all_rejects_non_finite_center(self, scene):
        frames = [s.frame_rect() for s in scene]
        with pytest.raises(InvalidGeometry):
            scale_relative_all(scene, Point(float("nan"), float("nan")), 2.0)
        assert [s.frame_rect() for s in scene] == frames

    def test_all(self, scene):
        areas = [s.area() for s in scene]
        scale_relative_all(scene, Point(1.0, 2.0), 0.5)
        for s, a in zip(scene, areas):
            assert s.area() == pytest.approx(a * 0.25)

    def test_all_rejects_before_touching_any(self, scene):
        frames = [s.frame_rect() for s in scene]
        with pytest.raises(InvalidScaleFactor):
            scale_relative_all(scene, Point(1.0, 2.0), -1.0)
        assert [s.frame_rect() for s in scene] == frames


class TestUnionFrame:
    def test_edges(self):
        frames = [
            FrameRect.from_bounds(0.0, 0.0, 1.0, 1.0),
            FrameRect.from_bounds(-2.0, 0.5, 0.5, 3.0),
        ]
        u = union_frame(frames)
        assert (u.left, u.bottom, u.right, u.top) == (-2.0, 0.0, 1.0, 3.0)

    def test_single(self):
        f = FrameRect(2.0, 2.0, Point(5.0, 5.0))
        assert union_frame([f]) == f

    def test_empty(self):
        with pytest.raises(EmptyShapeCollection):
            union_frame([])


class TestAggregateReport:
    def test_default_scene(self, scene):
        report = aggregate_report(scene)
        assert isinstance(report, AggregateReport)
        assert len(report) == 3
        assert report.areas[0] == 5.0
        assert report.areas[1] == pytest.approx(math.pi * 18.15)
        assert report.areas[2] == pytest.approx(4.5)

    def test_total_is_ordered_sum(self, scene):
        report = aggregate_report(scene)
        expected = 0.0
        for s in scene:
            expected += s.area()
        assert report.total_area == expected

    def test_frames_in_insertion_order(self, scene):
        report = aggregate_report(scene)
        assert report.frames == [s.frame_rect() for s in scene]

    def test_union_matches_constituent_edges(self, scene):
        report = aggregate_report(scene)
        u = report.union
        assert u.left == pytest.approx(min(f.left for f in report.frames))
        assert u.right == pytest.approx(max(f.right for f in report.frames))
        assert u.bottom == pytest.approx(min(f.bottom for f in report.frames))
        assert u.top == pytest.approx(max(f.top for f in report.frames))
        assert (u.left, u.bottom, u.right, u.top) == pytest.approx((-3.4, -3.4, 5.4, 5.5))

    def test_empty_rejected(self):
        with pytest.raises(EmptyShapeCollection):
            aggregate_report([])

    def test_report_after_relative_scale(self, scene):
        before = aggregate_report(scene)
        scale_relative_all(scene, Point(0.0, 0.0), 2.0)
        after = aggregate_report(scene)
        assert after.total_area == pytest.approx(4.0 * before.total_area)
        assert after.union.width == pytest.approx(2.0 * before.union.width)
        assert after.union.pos.x == pytest.approx(2.0 * before.union.pos.x)
        assert after.union.pos.y == pytest.approx(2.0 * before.union.pos.y)
