"""Text-mode driver for the tetrino placement core.

Sets up the ECS world, event bus and board system, then requests pieces
until the board is full or the requested count is reached.
"""
import argparse
import logging

from tetrino.world import create_world
from tetrino.constants import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH
from tetrino.events.bus import (
    EventBus,
    EVENT_PIECE_DEBUG,
    EVENT_PIECE_PLACE_FAILED,
    EVENT_PIECE_PLACE_REQUEST,
    EVENT_PIECE_PLACED,
)
from tetrino.systems.board import BoardSystem

logger = logging.getLogger("tetrino.main")


class TetrinoSession:
    def __init__(self, width: int, height: int, seed: int | None = None, trace: bool = False):
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, seed=seed)
        self.board_system = BoardSystem(self.world, self.event_bus, width, height)
        self.placed = 0
        self.failures: list[tuple[int | None, str]] = []
        self.event_bus.subscribe(EVENT_PIECE_PLACED, self.on_piece_placed)
        self.event_bus.subscribe(EVENT_PIECE_PLACE_FAILED, self.on_piece_failed)
        if trace:
            self.event_bus.subscribe(EVENT_PIECE_DEBUG, self.on_debug)

    def request(self, level: int | None = None):
        self.event_bus.emit(EVENT_PIECE_PLACE_REQUEST, level=level)

    def on_piece_placed(self, sender, **payload):
        self.placed += 1
        logger.info("owner %s (level %s) at %s", payload["owner_id"], payload["level"], payload["origin"])

    def on_piece_failed(self, sender, **payload):
        self.failures.append((payload.get("level"), payload.get("reason", "")))

    def on_debug(self, sender, **payload):
        logger.debug(payload.get("message", ""))


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Fill a board with random tetrinos and dump it.")
    ap.add_argument("--width", type=int, default=DEFAULT_BOARD_WIDTH)
    ap.add_argument("--height", type=int, default=DEFAULT_BOARD_HEIGHT)
    ap.add_argument("--pieces", type=int, default=10, help="placement requests to issue")
    ap.add_argument("--level", type=int, default=None, help="fixed level; random when omitted")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    session = TetrinoSession(args.width, args.height, seed=args.seed, trace=args.verbose > 1)
    for _ in range(args.pieces):
        session.request(args.level)

    print(session.board_system.render(), end="")
    print(f"placed {session.placed}/{args.pieces}")
    for failed_level, reason in session.failures:
        print(f"failed level {failed_level}: {reason}")
    return 0 if session.placed else 1


if __name__ == "__main__":
    raise SystemExit(main())
