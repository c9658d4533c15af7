"""
Constrained Transform Controller
================================
Pointer-driven state machine that lets the user edit one triangle at a time.

States:
    IDLE             nothing is possessed; moves are ignored
    ROTATING         rigid rotation about the centroid via the rotation handle
    DRAGGING_VERTEX  one vertex follows the pointer (RHS rules may apply)
    DRAGGING_BODY    rigid translation of the whole triangle

Why is this file needed?
------------------------
1. Exclusivity: only one triangle is ever possessed. The controller is the
   single place that enforces it, so no locking is needed anywhere else.
2. Constraints: in RHS mode a vertex drag must keep the corner at 90°. The
   projection lives here rather than in the host UI.

The host forwards raw pointer events and uses the boolean return value to
decide whether to run its own hit-testing (e.g. buttons).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence

from congruencelab import config
from congruencelab.controller.constraints import project_onto_perpendicular, snap_coordinate
from congruencelab.model.criteria import CriterionMode
from congruencelab.model.triangle import RIGHT_ANGLE_VERTEX, Triangle

logger = logging.getLogger(__name__)


class DragState(StrEnum):
    IDLE = "idle"
    DRAGGING_VERTEX = "dragging_vertex"
    DRAGGING_BODY = "dragging_body"
    ROTATING = "rotating"


@dataclass
class _Grab:
    """Possession record. Exists only while the state is not IDLE."""
    triangle: Triangle
    vertex_index: Optional[int] = None
    last_x: float = 0.0
    last_y: float = 0.0
    last_angle: float = 0.0


class TransformController:
    """Interprets press/move/release against a fixed set of triangles."""

    def __init__(
        self,
        triangles: Sequence[Triangle],
        *,
        bounds: Optional[tuple[float, float]] = None,
        snap_to_grid: bool = config.SNAP_TO_GRID,
        handle_radius: float = config.HANDLE_HIT_RADIUS,
        vertex_radius: float = config.VERTEX_HIT_RADIUS,
    ) -> None:
        """
        Args:
            triangles: Triangles in hit-test order (earlier ones win ties).
            bounds: Optional canvas ``(width, height)``; free vertex drags are
                clamped to ``[0, width] x [0, height]``.
            snap_to_grid: Round free vertex positions and body deltas to whole
                pixels, matching the quantized equality policy.
            handle_radius: Hit radius of the rotation handle disk.
            vertex_radius: Hit radius of each vertex.
        """
        self.triangles: tuple[Triangle, ...] = tuple(triangles)
        self.bounds = bounds
        self.snap_to_grid = snap_to_grid
        self.handle_radius = handle_radius
        self.vertex_radius = vertex_radius

        self._state: DragState = DragState.IDLE
        self._grab: Optional[_Grab] = None

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def possessed_triangle(self) -> Optional[Triangle]:
        return self._grab.triangle if self._grab else None

    @property
    def possessed_vertex(self) -> Optional[int]:
        return self._grab.vertex_index if self._grab else None

    # -------------------------------------------------------------------------
    # Pointer events
    # -------------------------------------------------------------------------

    def handle_pointer_down(self, x: float, y: float) -> bool:
        """
        Hit-test and start a manipulation.

        Priority: rotation handles, then vertices, then interiors. Within a
        tier the triangles are tried in order.

        Returns:
            True if a triangle was grabbed (the event is consumed).
        """
        if self._state is not DragState.IDLE:
            logger.debug(f"Pointer down while {self._state}; releasing stale possession.")
            self._release()

        for triangle in self.triangles:
            if triangle.rotation_handle().distance_to_xy(x, y) < self.handle_radius:
                self._start_rotation(triangle, x, y)
                return True

        for triangle in self.triangles:
            for i, p in enumerate(triangle.vertices):
                if p.distance_to_xy(x, y) < self.vertex_radius:
                    self._grab = _Grab(triangle=triangle, vertex_index=i, last_x=x, last_y=y)
                    self._set_state(DragState.DRAGGING_VERTEX)
                    return True

        for triangle in self.triangles:
            if triangle.contains_point(x, y):
                self._grab = _Grab(triangle=triangle, last_x=x, last_y=y)
                self._set_state(DragState.DRAGGING_BODY)
                return True

        return False

    def handle_pointer_move(self, x: float, y: float, mode: CriterionMode) -> bool:
        """
        Apply the active manipulation for a pointer at (x, y).

        Args:
            x, y: Pointer position in canvas pixels.
            mode: The criterion currently selected by the owner of the scene.

        Returns:
            True if the event belonged to a manipulation, False when IDLE.
        """
        grab = self._grab
        if self._state is DragState.IDLE or grab is None:
            return False

        if self._state is DragState.ROTATING:
            self._rotate(grab, x, y)
        elif self._state is DragState.DRAGGING_VERTEX:
            if mode == CriterionMode.RHS:
                self._drag_vertex_rhs(grab, x, y)
            else:
                self._drag_vertex_free(grab, x, y)
        elif self._state is DragState.DRAGGING_BODY:
            self._drag_body(grab, x, y)
        return True

    def handle_pointer_up(self, x: Optional[float] = None, y: Optional[float] = None) -> bool:
        """Unconditionally return to IDLE. True if something was being manipulated."""
        was_active = self._state is not DragState.IDLE
        self._release()
        return was_active

    cancel = handle_pointer_up

    # -------------------------------------------------------------------------
    # Manipulations
    # -------------------------------------------------------------------------

    def _start_rotation(self, triangle: Triangle, x: float, y: float) -> None:
        c = triangle.centroid()
        self._grab = _Grab(triangle=triangle, last_angle=math.atan2(y - c.y, x - c.x))
        self._set_state(DragState.ROTATING)

    def _rotate(self, grab: _Grab, x: float, y: float) -> None:
        c = grab.triangle.centroid()
        angle = math.atan2(y - c.y, x - c.x)
        # Incremental delta: no branch-cut jump over multi-turn drags
        grab.triangle.rotate(angle - grab.last_angle, c)
        grab.last_angle = angle

    def _drag_vertex_free(self, grab: _Grab, x: float, y: float) -> None:
        if self.bounds is not None:
            width, height = self.bounds
            x = min(max(x, 0.0), width)
            y = min(max(y, 0.0), height)
        if self.snap_to_grid:
            x, y = snap_coordinate(x), snap_coordinate(y)
        grab.triangle.vertices[grab.vertex_index].move_to(x, y)

    def _drag_vertex_rhs(self, grab: _Grab, x: float, y: float) -> None:
        triangle = grab.triangle
        corner = triangle.vertices[RIGHT_ANGLE_VERTEX]

        if grab.vertex_index == RIGHT_ANGLE_VERTEX:
            # Corner follows the pointer itself, so an off-centre grab jumps once
            dx, dy = x - corner.x, y - corner.y
            if self.snap_to_grid:
                dx, dy = snap_coordinate(dx), snap_coordinate(dy)
            triangle.translate(dx, dy)
            return

        other_index = 2 if grab.vertex_index == 0 else 0
        projected = project_onto_perpendicular(corner, triangle.vertices[other_index], x, y)
        if projected is None:
            return
        if projected.distance_to(corner) < config.MIN_LEG_LENGTH:
            # Would collapse the leg onto the corner and lose the right angle
            return
        # Projected points are not grid-snapped; rounding would pull them off the locked line.
        triangle.vertices[grab.vertex_index].move_to(projected.x, projected.y)

    def _drag_body(self, grab: _Grab, x: float, y: float) -> None:
        dx, dy = x - grab.last_x, y - grab.last_y
        if self.snap_to_grid:
            dx, dy = snap_coordinate(dx), snap_coordinate(dy)
        if dx == 0 and dy == 0:
            return
        grab.triangle.translate(dx, dy)
        grab.last_x += dx
        grab.last_y += dy

    # -------------------------------------------------------------------------
    # State bookkeeping
    # -------------------------------------------------------------------------

    def _set_state(self, state: DragState) -> None:
        logger.debug(f"Transform state {self._state} -> {state}")
        self._state = state

    def _release(self) -> None:
        if self._state is not DragState.IDLE:
            self._set_state(DragState.IDLE)
        self._grab = None
