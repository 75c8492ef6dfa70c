"""Tests for geometry and size bounds."""

import pytest

from ansi_grid.core.bounds import AreaBound, LengthBound, spread
from ansi_grid.core.geometry import CELL_MAX, Area, Dim, Edge, Pos
from ansi_grid.text.outline import Border


class TestEdge:
    """Tests for Edge flags."""

    def test_combinations(self) -> None:
        assert Edge.TOP_LEFT == Edge.TOP | Edge.LEFT
        assert Edge.ALL == Edge.TOP_BOTTOM | Edge.LEFT_RIGHT
        assert Edge.LEFT in Edge.BOTTOM_LEFT
        assert Edge.RIGHT not in Edge.BOTTOM_LEFT

    def test_columns_and_rows(self) -> None:
        assert Edge.ALL.columns == 2
        assert Edge.ALL.rows == 2
        assert Edge.TOP.columns == 0
        assert Edge.TOP.rows == 1
        assert Edge.LEFT.columns == 1
        assert Edge.NONE.rows == 0


class TestDim:
    """Tests for Dim."""

    def test_empty(self) -> None:
        assert Dim(0, 5).is_empty
        assert Dim(5, 0).is_empty
        assert not Dim(1, 1).is_empty

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Dim(-1, 1)
        with pytest.raises(ValueError):
            Dim(1, CELL_MAX + 1)


class TestArea:
    """Tests for Area rectangle algebra."""

    def test_properties(self) -> None:
        area = Area(2, 3, 10, 4)
        assert area.right == 12
        assert area.bottom == 7
        assert area.dim == Dim(10, 4)
        assert Area.from_dim(Dim(5, 6)) == Area(0, 0, 5, 6)

    def test_zero_size_is_valid(self) -> None:
        assert Area(4, 4, 0, 0).is_empty
        assert Area(4, 4, 3, 0).is_empty

    def test_overflowing_extent_rejected(self) -> None:
        with pytest.raises(ValueError):
            Area(CELL_MAX, 0, 1, 1)

    def test_split_left(self) -> None:
        left, right = Area(0, 0, 10, 5).split(Edge.LEFT, 3)
        assert left == Area(0, 0, 3, 5)
        assert right == Area(3, 0, 7, 5)

    def test_split_right(self) -> None:
        right, left = Area(0, 0, 10, 5).split(Edge.RIGHT, 3)
        assert right == Area(7, 0, 3, 5)
        assert left == Area(0, 0, 7, 5)

    def test_split_top_and_bottom(self) -> None:
        top, rest = Area(1, 1, 4, 6).split(Edge.TOP, 2)
        assert top == Area(1, 1, 4, 2)
        assert rest == Area(1, 3, 4, 4)
        bottom, rest = Area(1, 1, 4, 6).split(Edge.BOTTOM, 2)
        assert bottom == Area(1, 5, 4, 2)
        assert rest == Area(1, 1, 4, 4)

    def test_split_halves(self) -> None:
        left, right = Area(0, 0, 9, 2).split(Edge.LEFT_RIGHT)
        assert left.width == 4
        assert right.width == 5
        top, bottom = Area(0, 0, 2, 7).split(Edge.TOP_BOTTOM)
        assert top.height == 3
        assert bottom == Area(0, 3, 2, 4)

    def test_split_clamps_to_extent(self) -> None:
        near, far = Area(0, 0, 10, 5).split(Edge.LEFT, 50)
        assert near == Area(0, 0, 10, 5)
        assert far.width == 0
        assert far.col == 10

    @pytest.mark.parametrize("edge", [Edge.NONE, Edge.TOP_LEFT, Edge.ALL, Edge.BOTTOM_RIGHT])
    def test_split_invalid_edges(self, edge: Edge) -> None:
        with pytest.raises(ValueError):
            Area(0, 0, 10, 10).split(edge, 1)

    def test_split_parts_cover_area(self) -> None:
        area = Area(3, 2, 11, 7)
        for edge in (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM):
            for cells in (0, 1, 5, 11, 20):
                near, far = area.split(edge, cells)
                assert near.width * near.height + far.width * far.height == 77
                assert near.clip(area) == near
                assert far.clip(area) == far

    def test_trim(self) -> None:
        area = Area(0, 0, 10, 6)
        assert area.trim(Edge.LEFT, 2) == Area(2, 0, 8, 6)
        assert area.trim(Edge.ALL, 1) == Area(1, 1, 8, 4)
        assert area.trim(Edge.TOP_BOTTOM, 10) == Area(0, 6, 10, 0)

    def test_inset(self) -> None:
        area = Area(0, 0, 10, 6)
        assert area.inset(None) == area
        assert area.inset(Border()) == Area(1, 1, 8, 4)
        assert area.inset(Border(Edge.TOP)) == Area(0, 1, 10, 5)

    def test_clip(self) -> None:
        a = Area(0, 0, 10, 10)
        assert a.clip(Area(5, 5, 10, 10)) == Area(5, 5, 5, 5)
        assert a.clip(Area(2, 3, 4, 4)) == Area(2, 3, 4, 4)
        assert a.clip(Area(20, 20, 5, 5)).is_empty

    def test_contains_and_within(self) -> None:
        area = Area(2, 3, 4, 2)
        assert area.contains(Pos(2, 3))
        assert area.contains(Pos(5, 4))
        assert not area.contains(Pos(6, 4))
        assert not area.contains(Pos(5, 5))
        assert area.within(Pos(4, 4)) == Pos(2, 1)
        assert area.within(Pos(1, 3)) is None

    def test_empty_area_contains_nothing(self) -> None:
        assert not Area(2, 2, 0, 5).contains(Pos(2, 2))


class TestSpread:
    """Tests for even distribution of cells."""

    def test_remainder_goes_first(self) -> None:
        assert spread(10, 3) == [4, 3, 3]
        assert spread(2, 4) == [1, 1, 0, 0]

    def test_no_slots(self) -> None:
        assert spread(5, 0) == []


class TestLengthBound:
    """Tests for LengthBound."""

    def test_defaults_are_flexible(self) -> None:
        bound = LengthBound()
        assert bound.minimum == 0
        assert bound.is_flexible
        assert not bound.is_rigid

    def test_rigid(self) -> None:
        assert LengthBound(3, 3).is_rigid

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            LengthBound(5, 4)
        with pytest.raises(ValueError):
            LengthBound(-1)

    def test_clamp(self) -> None:
        bound = LengthBound(2, 6)
        assert bound.clamp(0) == 2
        assert bound.clamp(4) == 4
        assert bound.clamp(9) == 6
        assert LengthBound(2).clamp(100) == 100

    def test_expand(self) -> None:
        assert LengthBound(2, 6).expand(2) == LengthBound(4, 8)
        assert LengthBound(2).expand(1) == LengthBound(3, None)


class TestAreaBound:
    """Tests for AreaBound."""

    def test_builders(self) -> None:
        bound = AreaBound().with_columns(4, 10).with_rows(1)
        assert bound.columns == LengthBound(4, 10)
        assert bound.rows == LengthBound(1, None)

    def test_expand(self) -> None:
        bound = AreaBound().with_columns(4, 10).with_rows(1, 1).expand(2, 1)
        assert bound.columns == LengthBound(6, 12)
        assert bound.rows == LengthBound(2, 2)
