# engine.py

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple


MAX_FRAME_COUNT = 25


class ReplacementPolicy:
    """Keys of the available page replacement algorithms."""
    FIFO = "fifo"
    LRU = "lru"
    OPTIMAL = "optimal"
    ALL = "all"


class Performance:
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"


# -----------------------------
# Errors
# -----------------------------
class SimulationError(ValueError):
    """Base class for rejected simulation inputs."""


class EmptySequenceError(SimulationError):
    pass


class InvalidReferenceError(SimulationError):
    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class InvalidFrameCountError(SimulationError):
    pass


class NoPolicySelectedError(SimulationError):
    pass


# -----------------------------
# Results
# -----------------------------
@dataclass(frozen=True)
class Step:
    page: int
    frames: Tuple[Optional[int], ...]
    fault: bool
    evicted: Optional[int] = None


@dataclass(frozen=True)
class SimulationResult:
    page_faults: int
    reference_count: int
    hit_ratio: float
    steps: Tuple[Step, ...]
    performance: str
    events: Tuple[str, ...] = ()

    @property
    def hits(self) -> int:
        return self.reference_count - self.page_faults

    @property
    def fault_ratio(self) -> float:
        return self.page_faults / self.reference_count * 100


# -----------------------------
# Validation
# -----------------------------
def validate_reference(reference):
    """Return the reference string as a tuple, rejecting anything that is
    not a non-empty sequence of non-negative integers."""
    pages = tuple(reference)
    if not pages:
        raise EmptySequenceError("Reference string cannot be empty")

    for position, page in enumerate(pages, start=1):
        if isinstance(page, bool) or not isinstance(page, int):
            raise InvalidReferenceError(
                f"Invalid page reference at position {position}", position
            )
        if page < 0:
            raise InvalidReferenceError("Page numbers must be non-negative", position)
    return pages


def validate_frame_count(frame_count, max_frames=None):
    if isinstance(frame_count, bool) or not isinstance(frame_count, int) or frame_count <= 0:
        raise InvalidFrameCountError("Frame count must be a positive integer")
    if max_frames is not None and frame_count > max_frames:
        raise InvalidFrameCountError(
            f"Frame count is capped at {max_frames} for readability"
        )
    return frame_count


# -----------------------------
# Classifier
# -----------------------------
def get_performance_rating(page_faults, reference_count):
    ratio = page_faults / reference_count
    if ratio <= 0.3:
        return Performance.EXCELLENT
    if ratio <= 0.5:
        return Performance.GOOD
    if ratio <= 0.7:
        return Performance.AVERAGE
    return Performance.POOR


def _build_result(page_faults, steps, events):
    reference_count = len(steps)
    hit_ratio = (reference_count - page_faults) / reference_count * 100
    return SimulationResult(
        page_faults=page_faults,
        reference_count=reference_count,
        hit_ratio=hit_ratio,
        steps=tuple(steps),
        performance=get_performance_rating(page_faults, reference_count),
        events=tuple(events),
    )


# -----------------------------
# Algorithms
# -----------------------------
def simulate_fifo(reference, frame_count):
    pages = validate_reference(reference)
    frame_count = validate_frame_count(frame_count)

    frames = [None] * frame_count
    pointer = 0
    page_faults = 0
    steps, events = [], []

    for page in pages:
        evicted = None
        hit = page in frames
        if hit:
            events.append(f"Hit: Page {page} in Frame {frames.index(page)}")
        else:
            events.append(f"Fault: Page {page} not in memory")
            evicted = frames[pointer]
            if evicted is not None:
                events.append(f"Evicting: Page {evicted} from Frame {pointer}")
            frames[pointer] = page
            events.append(f"Loaded: Page {page} -> Frame {pointer}")
            # pointer only advances on a load, a hit never reorders eviction
            pointer = (pointer + 1) % frame_count
            page_faults += 1
        steps.append(Step(page, tuple(frames), not hit, evicted))

    return _build_result(page_faults, steps, events)


def simulate_lru(reference, frame_count):
    pages = validate_reference(reference)
    frame_count = validate_frame_count(frame_count)

    frames = []  # oldest first
    page_faults = 0
    steps, events = [], []

    for page in pages:
        evicted = None
        hit = page in frames
        if hit:
            frames.remove(page)
            frames.append(page)
            events.append(f"Hit: Page {page} moved to most recent")
        else:
            events.append(f"Fault: Page {page} not in memory")
            if len(frames) == frame_count:
                evicted = frames.pop(0)
                events.append(f"Evicting: Page {evicted} (least recently used)")
            frames.append(page)
            events.append(f"Loaded: Page {page} as most recent")
            page_faults += 1
        steps.append(Step(page, tuple(frames), not hit, evicted))

    return _build_result(page_faults, steps, events)


def find_optimal_replacement_index(frames, reference, start):
    """
    Belady victim search: index of the frame whose page is next used
    furthest in reference[start:]. A page that never occurs again is taken
    immediately; ties go to the earliest frame.
    """
    index_to_replace = 0
    farthest = -1

    for i, page in enumerate(frames):
        distance = None
        for j in range(start, len(reference)):
            if reference[j] == page:
                distance = j - start
                break

        if distance is None:
            return i

        if distance > farthest:
            farthest = distance
            index_to_replace = i

    return index_to_replace


def simulate_optimal(reference, frame_count):
    pages = validate_reference(reference)
    frame_count = validate_frame_count(frame_count)

    frames = []
    page_faults = 0
    steps, events = [], []

    for index, page in enumerate(pages):
        evicted = None
        hit = page in frames
        if hit:
            events.append(f"Hit: Page {page} in Frame {frames.index(page)}")
        else:
            events.append(f"Fault: Page {page} not in memory")
            if len(frames) < frame_count:
                slot = len(frames)
                frames.append(page)
            else:
                slot = find_optimal_replacement_index(frames, pages, index + 1)
                evicted = frames[slot]
                events.append(f"Evicting: Page {evicted} from Frame {slot}")
                frames[slot] = page
            events.append(f"Loaded: Page {page} -> Frame {slot}")
            page_faults += 1
        steps.append(Step(page, tuple(frames), not hit, evicted))

    return _build_result(page_faults, steps, events)


# -----------------------------
# Registry
# -----------------------------
@dataclass(frozen=True)
class Algorithm:
    key: str
    name: str
    simulate: Callable[[Sequence[int], int], SimulationResult]


@dataclass(frozen=True)
class AlgorithmRun:
    key: str
    name: str
    result: SimulationResult


ALGORITHMS: Dict[str, Algorithm] = {
    ReplacementPolicy.FIFO: Algorithm(
        ReplacementPolicy.FIFO, "First-In First-Out (FIFO)", simulate_fifo
    ),
    ReplacementPolicy.LRU: Algorithm(
        ReplacementPolicy.LRU, "Least Recently Used (LRU)", simulate_lru
    ),
    ReplacementPolicy.OPTIMAL: Algorithm(
        ReplacementPolicy.OPTIMAL, "Optimal", simulate_optimal
    ),
}


def run_simulations(reference, frame_count, keys) -> List[AlgorithmRun]:
    """Run every requested algorithm on the same inputs, in request order."""
    keys = list(keys)
    if not keys:
        raise NoPolicySelectedError("No algorithm selected")
    for key in keys:
        if key not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm: {key}")

    pages = validate_reference(reference)
    frame_count = validate_frame_count(frame_count)

    runs = []
    for key in keys:
        algorithm = ALGORITHMS[key]
        runs.append(AlgorithmRun(key, algorithm.name, algorithm.simulate(pages, frame_count)))
    return runs
