"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric constants shared by
the model, the controller and the scene store.

Why is this file needed?
------------------------
1. Consistency: the quantization scale used by the evaluator and the grid snap
   used by the transform controller must agree, so both read them from here.
2. Tuning: hit radii and handle distances are UX values that are adjusted
   together; keeping them in one place avoids magic numbers in the handlers.

Exports:
    SIDE_SCALE (int): Raw pixels per displayed side unit.
    RIGHT_ANGLE (int): Quantized value of a right angle in degrees.
    ASS_RIGHT_ANGLE_PROMOTION (bool): Whether ASS with a shared 90° angle counts
        as congruent.
"""

# Measurement quantization
SIDE_SCALE: int = 10
RIGHT_ANGLE: int = 90

# Triangle geometry
AREA_EPSILON: float = 1e-9
HANDLE_DISTANCE: float = 80.0

# Pointer hit-testing (pixels)
HANDLE_HIT_RADIUS: float = 25.0
VERTEX_HIT_RADIUS: float = 30.0

# Transform behaviour
SNAP_TO_GRID: bool = True
MIN_LEG_LENGTH: float = 1.0
DEFAULT_LEG_LENGTHS: tuple[float, float] = (120.0, 140.0)  # (vertical, horizontal)

# Evaluation
ASS_RIGHT_ANGLE_PROMOTION: bool = True

# Default scene
DEFAULT_CANVAS_WIDTH: int = 800
DEFAULT_CANVAS_HEIGHT: int = 600
