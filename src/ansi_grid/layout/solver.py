"""
Layout solver - negotiates the space each widget in a grid receives.

Each axis is solved independently: template columns against widget
column bounds, template rows against widget row bounds. A column or row
of the template is a "track".

1. Track minimums satisfy every widget's minimum. Widgets spanning several
   tracks spread their unmet deficit evenly (remainder to the first
   tracks).
2. If the minimums do not fit, every track is scaled down proportionally
   and the rounding remainder goes to the first truncated tracks, so the
   tracks add up to exactly the available extent.
3. Otherwise leftover space is water-filled over tracks that can still
   grow, in equal shares, never past a track's maximum. Space nobody can
   absorb stays unused after the last track.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ansi_grid.core.bounds import AreaBound, LengthBound, spread
from ansi_grid.core.geometry import Area

if TYPE_CHECKING:
    from ansi_grid.layout.grid import GridArea
    from ansi_grid.widget.base import Widget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackSpan:
    """One widget's claim on a run of tracks along an axis."""
    start: int
    count: int
    bound: LengthBound


@dataclass(frozen=True)
class Placement:
    """A widget and its resolved screen area."""
    widget: Widget
    area: Area


def track_minimums(tracks: int, spans: Sequence[TrackSpan]) -> list[int]:
    """Get the smallest track lengths satisfying every span's minimum."""
    mins = [0] * tracks
    for span in spans:
        if span.count == 1:
            mins[span.start] = max(mins[span.start], span.bound.minimum)
    # Shorter spans first, so wide spans see the tracks narrow ones claimed
    multi = sorted(
        (span for span in spans if span.count > 1),
        key=lambda span: span.count,
    )
    for span in multi:
        covered = range(span.start, span.start + span.count)
        deficit = span.bound.minimum - sum(mins[t] for t in covered)
        if deficit > 0:
            for t, extra in zip(covered, spread(deficit, span.count)):
                mins[t] += extra
    return mins


def track_maximums(tracks: int, spans: Sequence[TrackSpan], mins: Sequence[int]) -> list[Optional[int]]:
    """
    Get the largest useful length of each track (None = unbounded).

    A track is unbounded if any span covering it is unbounded; otherwise
    it takes the largest share of a covering span's maximum. Tracks with
    no spans at all stay at zero.
    """
    bounded = list(mins)
    unbounded = [False] * tracks
    for span in spans:
        covered = range(span.start, span.start + span.count)
        if span.bound.maximum is None:
            for t in covered:
                unbounded[t] = True
            continue
        for t, share in zip(covered, spread(span.bound.maximum, span.count)):
            bounded[t] = max(bounded[t], share)
    return [None if unbounded[t] else bounded[t] for t in range(tracks)]


def scale_down(mins: Sequence[int], extent: int) -> list[int]:
    """
    Scale track minimums down to fit an extent exactly.

    Each track gets floor(min * extent / total); the remainder is handed
    out one cell at a time to the first tracks that were rounded down.
    """
    total = sum(mins)
    if total <= extent:
        return list(mins)
    sizes = [m * extent // total for m in mins]
    remainder = extent - sum(sizes)
    for t, m in enumerate(mins):
        if remainder <= 0:
            break
        if sizes[t] * total < m * extent:
            sizes[t] += 1
            remainder -= 1
    return sizes


def water_fill(sizes: Sequence[int], maxs: Sequence[Optional[int]], leftover: int) -> list[int]:
    """
    Distribute leftover cells over tracks that can grow.

    A track can grow while it is unbounded or below its maximum, so a
    bounded track takes its share up to that maximum alongside the
    unbounded ones; whatever it cannot take goes round again to the rest.
    """
    sizes = list(sizes)
    while leftover > 0:
        growable = []
        for t, size in enumerate(sizes):
            maximum = maxs[t]
            if maximum is None or size < maximum:
                growable.append(t)
        if not growable:
            break
        given = 0
        for t, share in zip(growable, spread(leftover, len(growable))):
            maximum = maxs[t]
            room = share if maximum is None else min(share, maximum - sizes[t])
            sizes[t] += room
            given += room
        if given == 0:
            break
        leftover -= given
    return sizes


def solve_tracks(extent: int, tracks: int, spans: Sequence[TrackSpan]) -> list[int]:
    """
    Solve the lengths of the tracks along one axis.

    Args:
        extent: Available cells along the axis
        tracks: Number of tracks (template columns or rows)
        spans: Widget claims on the tracks

    Returns:
        Track lengths; their sum never exceeds `extent`
    """
    mins = track_minimums(tracks, spans)
    if sum(mins) > extent:
        return scale_down(mins, extent)
    maxs = track_maximums(tracks, spans, mins)
    return water_fill(mins, maxs, extent - sum(mins))


def _offsets(origin: int, lengths: Sequence[int]) -> list[int]:
    offsets = [origin]
    for length in lengths:
        offsets.append(offsets[-1] + length)
    return offsets


def widget_bound(widget: Widget) -> AreaBound:
    """Get a widget's bounds, including its border."""
    bound = widget.bounds()
    border = widget.border()
    if border is None:
        return bound
    return bound.expand(border.edges.columns, border.edges.rows)


class LayoutSolver:
    """Resolves a GridArea into widget placements within a bounding box."""

    def solve(self, grid: GridArea, bbox: Area) -> list[Placement]:
        """
        Solve the layout.

        The result is ordered like the template's labels (first
        occurrence order), which is also the mouse dispatch order.
        Identical inputs always give identical placements.
        """
        template = grid.template
        bounds = [widget_bound(widget) for widget, _ in grid.widgets]
        col_spans = [
            TrackSpan(item.col, item.width, bound.columns)
            for (_, item), bound in zip(grid.widgets, bounds)
        ]
        row_spans = [
            TrackSpan(item.row, item.height, bound.rows)
            for (_, item), bound in zip(grid.widgets, bounds)
        ]
        widths = solve_tracks(bbox.width, template.columns, col_spans)
        heights = solve_tracks(bbox.height, template.rows, row_spans)
        logger.debug("Solved %s in %s: columns=%s rows=%s", template, bbox, widths, heights)

        cols = _offsets(bbox.col, widths)
        rows = _offsets(bbox.row, heights)
        placements: list[Placement] = []
        for (widget, item), bound in zip(grid.widgets, bounds):
            col = cols[item.col]
            row = rows[item.row]
            width = cols[item.col + item.width] - col
            height = rows[item.row + item.height] - row
            # Spanned tracks may have grown for other widgets
            if bound.columns.maximum is not None:
                width = min(width, bound.columns.maximum)
            if bound.rows.maximum is not None:
                height = min(height, bound.rows.maximum)
            placements.append(Placement(widget, Area(col, row, width, height)))
        return placements


def solve(grid: GridArea, bbox: Area) -> list[Placement]:
    """Solve a grid layout within a bounding box."""
    return LayoutSolver().solve(grid, bbox)
