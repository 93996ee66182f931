import logging
from typing import List, Optional

from esper import World

from tetrino.components.board import Board
from tetrino.components.piece import Piece
from tetrino.components.placed_piece import PlacedPiece
from tetrino.constants import DEFAULT_BOARD_HEIGHT, DEFAULT_BOARD_WIDTH, MAX_LEVEL, MIN_LEVEL
from tetrino.errors import TetrinoError
from tetrino.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_PIECE_DEBUG,
    EVENT_PIECE_PLACE_FAILED,
    EVENT_PIECE_PLACE_REQUEST,
    EVENT_PIECE_PLACED,
    EVENT_SHAPE_GENERATED,
)
from tetrino.systems.placement import Placement, place_piece, pre_rotate
from tetrino.systems.shape_generator import generate_shape
from tetrino.utils.random_source import RandomSource, default_source, draw_index

logger = logging.getLogger(__name__)


class BoardSystem:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = DEFAULT_BOARD_WIDTH,
        height: int = DEFAULT_BOARD_HEIGHT,
        rng: Optional[RandomSource] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.random = default_source(rng if rng is not None else getattr(world, "random", None))
        # Single board entity holding the occupancy grid
        self.board_entity = self.world.create_entity(Board.new(width, height))
        self.event_bus.subscribe(EVENT_PIECE_PLACE_REQUEST, self.on_place_request)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def width(self) -> int:
        return self.board.width()

    def height(self) -> int:
        return self.board.height()

    def render(self) -> str:
        return self.board.render()

    def random_level(self) -> int:
        # Uniform over the full level range; the original helper never drew 7 or 8.
        return MIN_LEVEL + draw_index(self.random, MAX_LEVEL - MIN_LEVEL + 1)

    def generate_shape(self, level: int) -> Piece:
        piece = generate_shape(level, self.width(), self.height(), self.random)
        self.event_bus.emit(
            EVENT_SHAPE_GENERATED, level=level, width=piece.width(), height=piece.height()
        )
        return piece

    def place_random_piece(self, level: Optional[int] = None) -> bool:
        """Generate a piece for ``level`` (random when omitted) and stamp it at the first fit.

        Raises InvalidLevelError for levels outside the supported range and
        CannotPlaceError when no position or rotation fits. The board is not
        modified on failure.
        """
        if level is None:
            level = self.random_level()
        piece = self.generate_shape(level)
        pre_rotate(piece, self.random)
        self._trace(piece)
        placement = place_piece(self.board, piece)
        self._record(piece, placement)
        return True

    def place(self, piece: Piece) -> Placement:
        """Place a ready-made piece without random pre-rotation."""
        self._trace(piece)
        placement = place_piece(self.board, piece)
        self._record(piece, placement)
        return placement

    def placed_pieces(self) -> List[PlacedPiece]:
        records = [record for _, record in self.world.get_component(PlacedPiece)]
        return sorted(records, key=lambda record: record.owner_id)

    def on_place_request(self, sender, **kwargs):
        level = kwargs.get('level')
        try:
            self.place_random_piece(level)
        except TetrinoError as exc:
            logger.info("placement request for level %s failed: %s", level, exc)
            self.event_bus.emit(EVENT_PIECE_PLACE_FAILED, level=getattr(exc, 'level', level), reason=str(exc))

    def _trace(self, piece: Piece) -> None:
        board = self.board
        self.event_bus.emit(
            EVENT_PIECE_DEBUG,
            message=f"piece {piece.width()}x{piece.height()} on board {board.width()}x{board.height()}",
        )
        self.event_bus.emit(EVENT_PIECE_DEBUG, message=piece.render())

    def _record(self, piece: Piece, placement: Placement) -> None:
        self.world.create_entity(
            PlacedPiece(
                owner_id=placement.owner_id,
                level=piece.level,
                origin=placement.origin,
                rotations=placement.rotations,
                cells=placement.cells,
            )
        )
        self.event_bus.emit(
            EVENT_PIECE_PLACED,
            owner_id=placement.owner_id,
            level=piece.level,
            origin=placement.origin,
            rotations=placement.rotations,
            cells=placement.cells,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='piece_placed', positions=list(placement.cells))
