import math

from config import CHECKPOINT_RADIUS, COLLISION_DISTANCE
from pilot.geometry import Point
from pilot.pod import Pod

def next_position(pod: Pod) -> Point:
    """One-step linear extrapolation. Thrust chosen this turn is not modelled."""
    return pod.position + pod.velocity

def distance_to(pod: Pod, target: Point) -> float:
    return (target - pod.position).length()

def angle_to(pod: Pod, target: Point) -> float:
    """
    Heading error in degrees, in [-180, 180].
    Positive when the target bearing is clockwise of the heading
    (pod heading minus bearing).
    """
    direction = target - pod.position
    bearing = math.degrees(math.atan2(direction.vy, direction.vx))
    diff = pod.angle - bearing
    # Both terms lie in [-360, 360], one wrap is enough
    if diff < -180:
        diff += 360
    elif diff > 180:
        diff -= 360
    return diff

def steps_to(pod: Pod, center: Point, radius: float = CHECKPOINT_RADIUS) -> float:
    """
    Number of turns at the current velocity until the pod is inside the disk
    of `radius` around `center`. Returns math.inf if it never gets there.
    """
    to_pod = pod.position - center
    a = pod.velocity.length2()
    b = 2 * pod.velocity.dot(to_pod)
    c = to_pod.length2() - radius * radius
    disc = b * b - 4 * a * c
    if a == 0.0 or disc < 0.0:
        return math.inf

    root = math.sqrt(disc)
    t_enter = (-b - root) / (2 * a)
    t_exit = (-b + root) / (2 * a)
    if t_enter >= 0.0:
        return t_enter
    if t_exit >= 0.0:
        # Already inside
        return 0.0
    return math.inf

def will_collide(a: Pod, b: Pod, threshold: float = COLLISION_DISTANCE) -> bool:
    return (next_position(a) - next_position(b)).length() < threshold
