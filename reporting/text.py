from __future__ import annotations

from typing import List

from figures import AggregateReport, FrameRect


def format_frame(frame: FrameRect, precision: int = 2) -> str:
    """
    Corners of a frame as ``left bottom right top``.
    """
    return " ".join(f"{v:.{precision}f}" for v in (frame.left, frame.bottom, frame.right, frame.top))


def format_report(report: AggregateReport, precision: int = 2) -> List[str]:
    """
    Report lines in a fixed order: per-shape areas, total, per-shape frames, union frame.
    """
    lines: List[str] = []
    for i, area in enumerate(report.areas):
        lines.append(f"area[{i}] {area:.{precision}f}")
    lines.append(f"area total {report.total_area:.{precision}f}")
    for i, frame in enumerate(report.frames):
        lines.append(f"frame[{i}] {format_frame(frame, precision)}")
    lines.append(f"frame union {format_frame(report.union, precision)}")
    return lines
