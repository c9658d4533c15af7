"""
Scene State (Store)
===================
This module defines the central state object for a running congruence session.

Why is this file needed?
------------------------
1. State Management: It owns the two triangles, the active criterion and the
   transform controller in one place, instead of module-level globals.
2. Decoupling: The presentation layer forwards pointer events here and listens
   to Qt signals; it never touches the controller or the engine directly.
3. Edge detection: It remembers the previous verdict so a reward effect can be
   triggered exactly once when congruence is first reached.

Classes:
    SceneStore: QObject with signals for mode and verdict changes.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from PySide6.QtCore import QObject, Signal

from congruencelab import config
from congruencelab.controller.constraints import align_right_angle
from congruencelab.controller.transform import TransformController
from congruencelab.model.congruence import Verdict, evaluate
from congruencelab.model.criteria import CriterionMode
from congruencelab.model.triangle import Triangle

logger = logging.getLogger(__name__)


def default_triangle_coordinates(width: float, height: float) -> tuple[list[tuple[float, float]], list[tuple[float, float]]]:
    """Two identical right triangles (150 x 200 px) either side of the canvas centre."""
    cx = round(width / 2)
    cy = round(height / 2)
    subject = [(cx - 200, cy - 100), (cx - 200, cy + 100), (cx - 50, cy + 100)]
    reference = [(cx + 50, cy - 100), (cx + 50, cy + 100), (cx + 200, cy + 100)]
    return subject, reference


class SceneStore(QObject):
    """Central scene store with signals for the presentation layer."""
    mode_changed = Signal(object)
    verdict_changed = Signal(object)
    congruence_reached = Signal(object)

    def __init__(
        self,
        width: float = config.DEFAULT_CANVAS_WIDTH,
        height: float = config.DEFAULT_CANVAS_HEIGHT,
        mode: Union[CriterionMode, str] = CriterionMode.ALL,
        snap_to_grid: bool = config.SNAP_TO_GRID,
        promote_right_angle_ass: bool = config.ASS_RIGHT_ANGLE_PROMOTION,
    ) -> None:
        super().__init__()
        self._mode: CriterionMode = CriterionMode.parse(mode)
        self.snap_to_grid = snap_to_grid
        self.promote_right_angle_ass = promote_right_angle_ass

        subject, reference = default_triangle_coordinates(width, height)
        self.subject = Triangle.from_coordinates(subject)
        self.reference = Triangle.from_coordinates(reference)

        self.controller = TransformController(
            (self.subject, self.reference),
            bounds=(width, height),
            snap_to_grid=snap_to_grid,
        )
        self._verdict: Optional[Verdict] = None

    # -------------------------------------------------------------------------
    # Mode
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> CriterionMode:
        return self._mode

    def set_mode(self, value: Union[CriterionMode, str]) -> CriterionMode:
        """
        Select a criterion. Selecting RHS snaps both triangles to a right angle.

        Raises:
            ValueError: If ``value`` is not a known criterion.
        """
        try:
            mode = CriterionMode.parse(value)
        except ValueError as e:
            logger.error(f"Rejected criterion selection: {e}")
            raise

        if mode == CriterionMode.RHS:
            align_right_angle(self.subject, snap_to_grid=self.snap_to_grid)
            align_right_angle(self.reference, snap_to_grid=self.snap_to_grid)

        if mode != self._mode:
            logger.info(f"Criterion changed: {self._mode} -> {mode}")
            self._mode = mode
            self.mode_changed.emit(mode)
        return mode

    # -------------------------------------------------------------------------
    # Scene
    # -------------------------------------------------------------------------

    @property
    def verdict(self) -> Optional[Verdict]:
        """Verdict from the most recent tick, None before the first one."""
        return self._verdict

    def resize(self, width: float, height: float) -> None:
        self.controller.bounds = (width, height)

    def reset_triangles(self, width: float, height: float) -> None:
        """Put both triangles back to the default layout for a canvas of this size."""
        self.controller.handle_pointer_up()
        subject, reference = default_triangle_coordinates(width, height)
        for triangle, coords in ((self.subject, subject), (self.reference, reference)):
            for p, (x, y) in zip(triangle.vertices, coords):
                p.move_to(float(x), float(y))
        self.resize(width, height)
        logger.info(f"Scene reset for canvas {width}x{height}.")

    # -------------------------------------------------------------------------
    # Pointer forwarding
    # -------------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> bool:
        return self.controller.handle_pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> bool:
        return self.controller.handle_pointer_move(x, y, self._mode)

    def pointer_up(self, x: Optional[float] = None, y: Optional[float] = None) -> bool:
        return self.controller.handle_pointer_up(x, y)

    # -------------------------------------------------------------------------
    # Evaluation tick
    # -------------------------------------------------------------------------

    def tick(self) -> Verdict:
        """
        Evaluate the scene once (call per redraw).

        Emits ``verdict_changed`` when the verdict differs from the previous
        tick, and ``congruence_reached`` on the not-congruent -> congruent edge.
        """
        verdict = evaluate(
            self.subject,
            self.reference,
            self._mode,
            promote_right_angle_ass=self.promote_right_angle_ass,
        )
        previous = self._verdict
        self._verdict = verdict

        if verdict != previous:
            self.verdict_changed.emit(verdict)
        if verdict.congruence_holds and not (previous and previous.congruence_holds):
            logger.debug(f"Congruence reached under {self._mode}.")
            self.congruence_reached.emit(verdict)
        return verdict
