"""Command-line interface: evaluate the default scene under one or more criteria.

Usage:
    $ python -m congruencelab [MODE ...]
"""
import logging
import sys

from congruencelab.app.state import SceneStore
from congruencelab.logging_config import setup_logging
from congruencelab.model.criteria import CriterionMode
from congruencelab.model.measurements import angle_label, measure, side_label


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging(level=logging.INFO)
    args = sys.argv[1:] if argv is None else argv

    store = SceneStore()
    try:
        modes = [CriterionMode.parse(a) for a in args] or list(CriterionMode)
    except ValueError as e:
        logger.error(str(e))
        return 2

    for name, triangle in (("subject", store.subject), ("reference", store.reference)):
        m = measure(triangle)
        sides = " ".join(side_label(s) for s in m.sides)
        angles = " ".join(angle_label(a) for a in m.angles)
        logger.info(f"{name}: sides [{sides}] angles [{angles}]")

    for mode in modes:
        store.set_mode(mode)
        verdict = store.tick()
        logger.info(f"{mode}: congruent={verdict.congruence_holds} diagnostic={verdict.diagnostic}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
