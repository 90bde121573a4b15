from typing import Callable, List, NamedTuple, Tuple

from config import NUM_POD_LINES
from pilot.geometry import Point

class ProtocolError(ValueError):
    pass

class PodState(NamedTuple):
    x: int
    y: int
    vx: int
    vy: int
    angle: int
    next_checkpoint_id: int

def _read(readline: Callable[[], str]) -> str:
    line = readline()
    if not line:
        raise EOFError("Referee closed the input stream")
    return line.strip()

def _ints(line: str, count: int, what: str) -> List[int]:
    parts = line.split()
    if len(parts) != count:
        raise ProtocolError(f"Expected {count} integers for {what}, got {line!r}")
    try:
        return [int(p) for p in parts]
    except ValueError as exc:
        raise ProtocolError(f"Non-integer field in {what}: {line!r}") from exc

def read_setup(readline: Callable[[], str]) -> Tuple[int, List[Point]]:
    """
    Setup block:
        laps
        checkpointCount
        checkpointX checkpointY   (checkpointCount lines)
    """
    laps = _ints(_read(readline), 1, "lap count")[0]
    count = _ints(_read(readline), 1, "checkpoint count")[0]
    if count <= 0:
        raise ProtocolError(f"Checkpoint count must be positive, got {count}")
    checkpoints = []
    for i in range(count):
        x, y = _ints(_read(readline), 2, f"checkpoint {i}")
        checkpoints.append(Point(float(x), float(y)))
    return laps, checkpoints

def parse_pod_state(line: str) -> PodState:
    return PodState(*_ints(line, 6, "pod state"))

def read_turn(readline: Callable[[], str]) -> List[PodState]:
    """Four pod lines: my pods first, then the opponents."""
    return [parse_pod_state(_read(readline)) for _ in range(NUM_POD_LINES)]

def format_decision(target: Point, action) -> str:
    return f"{target} {action}"
