"""Interactive triangle congruence checking: geometry, criteria and pointer-driven editing."""
from congruencelab.model.criteria import CriterionMode
from congruencelab.model.congruence import DiagnosticTag, Verdict, evaluate, relevant_measurements
from congruencelab.model.measurements import Measurements, measure, measurements_equal
from congruencelab.model.triangle import Triangle
from congruencelab.controller.transform import DragState, TransformController

__all__ = [
    "CriterionMode",
    "DiagnosticTag",
    "DragState",
    "Measurements",
    "TransformController",
    "Triangle",
    "Verdict",
    "evaluate",
    "measure",
    "measurements_equal",
    "relevant_measurements",
]
