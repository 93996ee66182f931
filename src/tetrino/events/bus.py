from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# PIECES
# ============================================================================
EVENT_PIECE_PLACE_REQUEST = "piece_place_request"  # payload: level=int|None
EVENT_PIECE_PLACED = "piece_placed"                # payload: owner_id=int, level=int, origin=(x,y), rotations=int, cells=tuple[int,...]
EVENT_PIECE_PLACE_FAILED = "piece_place_failed"    # payload: level=int|None, reason=str
EVENT_SHAPE_GENERATED = "shape_generated"          # payload: level=int, width=int, height=int


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[int]


# ============================================================================
# DIAGNOSTICS
# ============================================================================
EVENT_PIECE_DEBUG = "piece_debug"                  # payload: message=str
