"""Top-level window assembling the board, status line and menus."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from voidchess.core.move import Move
from voidchess.core.phase import GamePhase, describe_phase
from voidchess.core.types import Position
from voidchess.game.controller import GameController
from voidchess.game.interaction import (
    Interaction,
    InteractionEvent,
    PickedPromotion,
    PickingPromotion,
    PlacedPiece,
)
from voidchess.game.state import GameState
from voidchess.ui.board.board_view import BoardView
from voidchess.ui.dialogs.promotion_dialog import PromotionDialog
from voidchess.ui.settings import AppSettings
from voidchess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Voidchess."""

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Voidchess")
        self.setMinimumSize(480, 540)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self.apply_settings()
        self._refresh()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.interaction_requested.connect(self.handle_interaction)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks."""
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_game_over.append(self._on_game_over)
        events.on_interaction_changed.append(self._on_interaction_changed)

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Discard the current game and start from the standard position."""
        self._controller.new_game()
        self._refresh()

    def handle_interaction(self, event: InteractionEvent) -> None:
        """Feed a board event to the game, then ask for a promotion if needed."""
        state = self._controller.interact(event)
        if isinstance(state.interaction, PickingPromotion):
            self._ask_promotion(state.interaction)

    def apply_settings(self) -> None:
        """Push the current :class:`AppSettings` into the board scene."""
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_tile_size(s.tile_size)
        scene.set_flipped(s.flipped)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)

    def _ask_promotion(self, question: PickingPromotion) -> None:
        piece = PromotionDialog.ask(question.candidates, self)
        if piece is None:
            # Cancelled: drop the pending promotion and go back to idle.
            _LOGGER.debug("Promotion on %s cancelled", question.target)
            self._controller.interact(PlacedPiece(question.origin))
            return
        self._controller.interact(PickedPromotion(piece))

    def _on_flip(self) -> None:
        self._settings.flipped = not self._settings.flipped
        self._board_view.board_scene.set_flipped(self._settings.flipped)

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, _src: Position, _move: Move, _state: GameState) -> None:
        self._refresh()

    def _on_interaction_changed(self, _interaction: Interaction | None) -> None:
        self._board_view.board_scene.set_state(self._controller.state)

    def _on_game_over(self, phase: GamePhase) -> None:
        self._board_view.board_scene.set_interactive(False)
        self._status_label.setText(f"Game over: {describe_phase(phase)}")

    # ── Helpers ──────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        state = self._controller.state
        scene = self._board_view.board_scene
        scene.set_state(state)
        scene.set_interactive(not state.is_game_over)
        if state.is_game_over:
            self._status_label.setText(f"Game over: {describe_phase(state.phase)}")
        else:
            self._status_label.setText(describe_phase(state.phase))
