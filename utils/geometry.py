import math
from typing import Tuple

from core.errors import DegenerateCirclesError
from core.models import Point

# Fraction of the gap/overlap closed when nudging non-intersecting circles together
RADIUS_DAMPING = 0.6


def circle_intersection(c1: Point, r1: float, c2: Point, r2: float) -> Tuple[Point, Point]:
    """
    Calculate the two intersection points of two circles.

    Circles that are too far apart or nested are first nudged towards touching
    (see RADIUS_DAMPING), so noisy distance estimates still give an answer.

    Args:
        c1: Centre of the first circle
        r1: Radius of the first circle
        c2: Centre of the second circle
        r2: Radius of the second circle

    Returns:
        Tuple of two points; they coincide when the circles are tangent

    Raises:
        DegenerateCirclesError: if the circles share a centre
    """
    dx = c2.x - c1.x
    dy = c2.y - c1.y
    d = math.sqrt(dx * dx + dy * dy)

    if d > r1 + r2:
        # too far apart: grow both radii
        delta = (d - (r1 + r2)) * RADIUS_DAMPING
        r1 += delta
        r2 += delta
    if d < abs(r1 - r2):
        # nested: shrink the larger, grow the smaller
        delta = (abs(r1 - r2) - d) * RADIUS_DAMPING
        if r1 > r2:
            r1 -= delta
            r2 += delta
        else:
            r1 += delta
            r2 -= delta

    if d == 0:
        if r1 == r2:
            raise DegenerateCirclesError(f"Circles at ({c1.x}, {c1.y}) with radius {r1} are coincident")
        raise DegenerateCirclesError(f"Circles at ({c1.x}, {c1.y}) are concentric")

    a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    # circles still nested after the nudge: project onto circle 1 along the centre line
    a = min(max(a, -r1), r1)
    h = math.sqrt(max(r1 * r1 - a * a, 0.0))
    xm = c1.x + a * dx / d
    ym = c1.y + a * dy / d
    p1 = Point(xm + h * dy / d, ym - h * dx / d)
    p2 = Point(xm - h * dy / d, ym + h * dx / d)
    return p1, p2
