from typing import Sequence

from config import LAP_SENTINEL
from pilot.geometry import Point, Vector, ZERO

class Pod:
    """
    Per-vehicle record, mutated in place once per turn by RaceContext.update().
    Strategies read it but never write to it.
    """
    def __init__(self, id, position=None, velocity=None, angle=0.0, next_checkpoint_id=0):
        self.id = id
        self.position = position if position is not None else Point(0.0, 0.0)
        self.velocity = velocity if velocity is not None else ZERO
        self.angle = angle # In degrees
        self.next_checkpoint_id = next_checkpoint_id
        self.lap = LAP_SENTINEL
        self.strategy = None

        # No previous index before the first update
        self._seen_update = False

    def bind(self, strategy, race):
        """Attach a strategy for the rest of the race."""
        self.strategy = strategy
        strategy.init(self, race)

    def update(self, x, y, vx, vy, angle, next_checkpoint_id, num_checkpoints):
        """
        Applies one turn of referee state.
        The lap counter only advances when the checkpoint index wraps
        from the last checkpoint back to 0.
        """
        old_id = self.next_checkpoint_id
        self.position = Point(float(x), float(y))
        self.velocity = Vector(float(vx), float(vy))
        self.angle = float(angle)
        self.next_checkpoint_id = int(next_checkpoint_id)

        # A single-checkpoint track never changes index, so it never wraps
        wrapped = old_id != self.next_checkpoint_id and old_id == num_checkpoints - 1 and self.next_checkpoint_id == 0
        if self._seen_update and wrapped:
            self.lap += 1
        self._seen_update = True

    def next_checkpoint(self, checkpoints: Sequence[Point], offset: int = 0) -> Point:
        return checkpoints[(self.next_checkpoint_id + offset) % len(checkpoints)]

    def progress_key(self, checkpoints: Sequence[Point]):
        # Larger is further ahead: lap, then checkpoint index, then closeness
        dist = self.position.distance(self.next_checkpoint(checkpoints))
        return (self.lap, self.next_checkpoint_id, -dist)

    def is_ahead_of(self, other: "Pod", checkpoints: Sequence[Point]) -> bool:
        return self.progress_key(checkpoints) > other.progress_key(checkpoints)

    def __repr__(self):
        return (f"Pod(id={self.id}, pos=({self.position}), vel=({self.velocity}), "
                f"angle={self.angle:.1f}, ncp={self.next_checkpoint_id}, lap={self.lap})")
