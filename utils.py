# utils.py

import re

from engine import (
    ALGORITHMS,
    MAX_FRAME_COUNT,
    EmptySequenceError,
    InvalidFrameCountError,
    InvalidReferenceError,
    NoPolicySelectedError,
    Performance,
    ReplacementPolicy,
    validate_frame_count,
)

DEFAULT_REFERENCE_STRING = "7,0,1,2,0,3,0,4,2,3,0,3,2"
DEFAULT_FRAME_COUNT = 3

# (label, reference string, frames) presets shown in the sidebar
EXAMPLES = [
    ("Classic textbook", "7,0,1,2,0,3,0,4,2,3,0,3,2", 3),
    ("Belady's anomaly", "1,2,3,4,1,2,5,1,2,3,4,5", 4),
    ("Locality loop", "1,2,3,1,2,3,1,2,3,4,1,2", 3),
    ("Single page", "5", 1),
]

EMPTY_FRAME = "-"

_INT_TOKEN = re.compile(r"^[+-]?\d+$")


def parse_reference_string(raw):
    """Split on commas and/or whitespace and return the page numbers."""
    tokens = [token.strip() for token in re.split(r"[,\s]+", raw or "") if token.strip()]
    if not tokens:
        raise EmptySequenceError("Reference string cannot be empty")

    pages = []
    for position, token in enumerate(tokens, start=1):
        if not _INT_TOKEN.match(token):
            raise InvalidReferenceError(
                f"Invalid page reference at position {position}", position
            )
        value = int(token)
        if value < 0:
            raise InvalidReferenceError("Page numbers must be non-negative", position)
        pages.append(value)
    return pages


def parse_frame_count(raw, max_frames=MAX_FRAME_COUNT):
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw).strip()
        if not _INT_TOKEN.match(text):
            raise InvalidFrameCountError("Frame count must be a positive integer")
        value = int(text)
    return validate_frame_count(value, max_frames)


def select_algorithms(selection):
    """Map the algorithm selector value to the list of keys to run."""
    if selection == ReplacementPolicy.ALL:
        return list(ALGORITHMS)
    if selection in ALGORITHMS:
        return [selection]
    raise NoPolicySelectedError("No algorithm selected")


def format_frames(frames, frame_count):
    """Render a frame snapshot padded to frame_count, e.g. [7, 0, -]."""
    padded = list(frames) + [None] * (frame_count - len(frames))
    return "[" + ", ".join(EMPTY_FRAME if v is None else str(v) for v in padded) + "]"


def get_badge_color(performance):
    """Return a color for a performance rating badge."""
    return {
        Performance.EXCELLENT: "#22c55e",
        Performance.GOOD: "#3b82f6",
        Performance.AVERAGE: "#f59e0b",
    }.get(performance, "#ef4444")
