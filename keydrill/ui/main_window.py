from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtGui import QCloseEvent, QKeyEvent, QKeySequence
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from keydrill.core import clock as session_clock
from keydrill.core.engine import force_finish, handle_input, start_session, tick
from keydrill.core.evaluator import InputEvent, paragraph_marks, word_feedback
from keydrill.core.models import SUBMIT_KEY, Difficulty, GameMode, GameState, GameStats, KeyPress, TextChanged
from keydrill.core.session import Session
from keydrill.core.settings import Settings
from keydrill.core.vocabulary import Vocabulary
from keydrill.ui.colors import Palette, hover_color
from keydrill.ui.models import DIFFICULTY_LABELS, MODE_LABELS, SetupSelection, live_cards, result_cards
from keydrill.ui.typing_widgets import StatCard, TargetTextLabel

logger = logging.getLogger(__name__)


def _button_style(base: str) -> str:
    return f"""
        QPushButton {{
            background: {base};
            color: white;
            font-weight: 700;
            border: none;
            border-radius: 8px;
            padding: 10px 18px;
        }}
        QPushButton:hover {{ background: {hover_color(base)}; }}
        QPushButton:checked {{ background: {Palette.PRIMARY}; }}
        QPushButton:disabled {{ background: {Palette.CARD_BORDER}; }}
    """


def _is_alphanumeric_key(key: int) -> bool:
    return (
        int(Qt.Key.Key_A) <= key <= int(Qt.Key.Key_Z)
        or int(Qt.Key.Key_0) <= key <= int(Qt.Key.Key_9)
    )


def key_event_to_press(event: QKeyEvent) -> KeyPress:
    """Translate a Qt key event into the core's :class:`KeyPress`."""
    modifiers = event.modifiers()
    ctrl = bool(modifiers & Qt.ControlModifier)
    alt = bool(modifiers & Qt.AltModifier)
    meta = bool(modifiers & Qt.MetaModifier)
    key = int(event.key())
    text = event.text()
    if key in (int(Qt.Key.Key_Return), int(Qt.Key.Key_Enter)):
        name = SUBMIT_KEY
    elif (ctrl or alt or meta) and _is_alphanumeric_key(key):
        # Qt reports control characters as text here; name the key itself.
        name = chr(key).lower()
    elif text and len(text) == 1 and text.isprintable():
        name = text
    else:
        # Non-printing keys get a multi-character name so they never count as typos.
        name = QKeySequence(key).toString() or f"Key{int(key)}"
        if len(name) == 1:
            name = f"Key{name}"
    return KeyPress(name, ctrl=ctrl, alt=alt, meta=meta)


class MainWindow(QMainWindow):
    """Three-screen shell around the session engine: setup, playing, results.

    Holds the current :class:`GameState` and the live session, forwards key
    presses, text changes and one-second ticks to the engine, and redraws
    from whatever the engine returns.
    """

    def __init__(self, vocabulary: Vocabulary, settings: Settings) -> None:
        super().__init__()
        self._vocabulary = vocabulary
        self._settings = settings
        self._selection = SetupSelection()
        self._state = GameState.SETUP
        self._session: Optional[Session] = None

        self._stack: Optional[QStackedWidget] = None
        self._setup_screen: Optional[QWidget] = None
        self._playing_screen: Optional[QWidget] = None
        self._results_screen: Optional[QWidget] = None
        self._live_cards: List[StatCard] = []
        self._target_label: Optional[TargetTextLabel] = None
        self._input_box: Optional[QLineEdit] = None
        self._results_grid: Optional[QGridLayout] = None
        self._mode_buttons: Dict[GameMode, QPushButton] = {}
        self._difficulty_buttons: Dict[Difficulty, QPushButton] = {}

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(1000)
        self._tick_timer.timeout.connect(self._on_tick)

        self._build_ui()
        self._set_state(GameState.SETUP)

    @property
    def state(self) -> GameState:
        return self._state

    def _build_ui(self) -> None:
        self.setWindowTitle("Keydrill")
        self.setMinimumSize(760, 560)
        central = QWidget()
        central.setStyleSheet(f"background: {Palette.BG}; color: {Palette.TEXT_PRIMARY};")
        outer = QVBoxLayout(central)
        outer.setContentsMargins(32, 24, 32, 24)

        title = QLabel("Keydrill")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Palette.PRIMARY}; font-size: 36px; font-weight: 800;")
        outer.addWidget(title)

        self._stack = QStackedWidget()
        self._setup_screen = self._build_setup_screen()
        self._playing_screen = self._build_playing_screen()
        self._results_screen = self._build_results_screen()
        for screen in (self._setup_screen, self._playing_screen, self._results_screen):
            self._stack.addWidget(screen)
        outer.addWidget(self._stack, 1)
        self.setCentralWidget(central)

    def _card(self) -> QWidget:
        card = QWidget()
        card.setObjectName("panel")
        card.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        card.setStyleSheet(f"QWidget#panel {{ background: {Palette.CARD_BG}; border-radius: 12px; }}")
        return card

    def _build_setup_screen(self) -> QWidget:
        screen = self._card()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(18)

        def _choice_row(
            heading: str,
            options: Dict[Any, str],
            store: Dict[Any, QPushButton],
            on_pick: Callable[[Any], None],
        ) -> None:
            label = QLabel(heading)
            label.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 18px; font-weight: 600;")
            layout.addWidget(label)
            row = QHBoxLayout()
            group = QButtonGroup(screen)
            group.setExclusive(True)
            for value, text in options.items():
                button = QPushButton(text)
                button.setCheckable(True)
                button.setStyleSheet(_button_style(Palette.CARD_BG_RAISED))
                button.clicked.connect(lambda _checked=False, v=value: on_pick(v))
                group.addButton(button)
                row.addWidget(button)
                store[value] = button
            layout.addLayout(row)

        _choice_row("Select Mode", MODE_LABELS, self._mode_buttons, self._pick_mode)
        _choice_row("Select Difficulty", DIFFICULTY_LABELS, self._difficulty_buttons, self._pick_difficulty)
        self._mode_buttons[self._selection.mode].setChecked(True)
        self._difficulty_buttons[self._selection.difficulty].setChecked(True)

        layout.addStretch(1)
        start = QPushButton("Start Game")
        start.setStyleSheet(_button_style(Palette.PRIMARY_DARK))
        start.clicked.connect(self._start_game)
        layout.addWidget(start)
        return screen

    def _build_playing_screen(self) -> QWidget:
        screen = self._card()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(20)

        row = QHBoxLayout()
        roles = ("default", "success", "danger", "warning")
        for role in roles:
            card = StatCard("", "", color_role=role)
            self._live_cards.append(card)
            row.addWidget(card)
        layout.addLayout(row)

        self._target_label = TargetTextLabel()
        layout.addWidget(self._target_label, 1)

        self._input_box = QLineEdit()
        self._input_box.setAlignment(Qt.AlignCenter)
        self._input_box.setStyleSheet(
            f"""
            QLineEdit {{
                background: {Palette.CARD_BG_RAISED};
                border: 2px solid {Palette.CARD_BORDER};
                border-radius: 8px;
                padding: 10px;
                font-family: monospace;
                font-size: 20px;
            }}
            QLineEdit:focus {{ border-color: {Palette.PRIMARY}; }}
            """
        )
        self._input_box.installEventFilter(self)
        self._input_box.textChanged.connect(self._on_text_changed)
        layout.addWidget(self._input_box)

        end = QPushButton("End Game")
        end.setStyleSheet(_button_style("#dc2626"))
        end.clicked.connect(self._end_game)
        layout.addWidget(end, 0, Qt.AlignHCenter)
        return screen

    def _build_results_screen(self) -> QWidget:
        screen = self._card()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(20)

        heading = QLabel("Game Over!")
        heading.setAlignment(Qt.AlignCenter)
        heading.setStyleSheet(f"color: {Palette.PRIMARY}; font-size: 28px; font-weight: 800;")
        layout.addWidget(heading)

        self._results_grid = QGridLayout()
        self._results_grid.setSpacing(16)
        layout.addLayout(self._results_grid)
        layout.addStretch(1)

        again = QPushButton("Play Again")
        again.setStyleSheet(_button_style("#16a34a"))
        again.clicked.connect(lambda: self._set_state(GameState.SETUP))
        layout.addWidget(again, 0, Qt.AlignHCenter)
        return screen

    def _set_state(self, state: GameState) -> None:
        self._state = state
        if self._stack is None:
            return
        if state is GameState.SETUP:
            self._stop_session()
            self._stack.setCurrentWidget(self._setup_screen)
        elif state is GameState.PLAYING:
            self._stack.setCurrentWidget(self._playing_screen)
            if self._input_box is not None:
                self._input_box.setFocus()
        else:
            self._stack.setCurrentWidget(self._results_screen)

    def _pick_mode(self, mode: GameMode) -> None:
        self._selection.mode = mode

    def _pick_difficulty(self, difficulty: Difficulty) -> None:
        self._selection.difficulty = difficulty

    def _start_game(self) -> None:
        self._stop_session()
        self._session = start_session(
            self._selection.mode,
            self._selection.difficulty,
            vocabulary=self._vocabulary,
            settings=self._settings,
        )
        if self._input_box is not None:
            self._input_box.blockSignals(True)
            self._input_box.clear()
            self._input_box.blockSignals(False)
        self._set_state(GameState.PLAYING)
        self._refresh()
        if self._session.is_timed:
            self._tick_timer.start()

    def _stop_session(self) -> None:
        # A pending timeout must not reach a session that has been replaced.
        self._tick_timer.stop()
        self._session = None

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self._input_box and event.type() == QEvent.Type.KeyPress and self._session is not None:
            press = key_event_to_press(event)
            if self._session.mode is GameMode.REACTION:
                self._dispatch(press)
                return True
            if self._session.mode is GameMode.WORD and press.key == SUBMIT_KEY:
                self._dispatch(press)
                if self._session is not None and not self._session.is_finished:
                    self._input_box.clear()
                return True
        return super().eventFilter(obj, event)

    def _on_text_changed(self, value: str) -> None:
        if self._session is None or self._session.mode is GameMode.REACTION:
            return
        self._dispatch(TextChanged(value))

    def _on_tick(self) -> None:
        if self._session is None:
            self._tick_timer.stop()
            return
        tick(self._session)
        self._after_update()

    def _dispatch(self, event: InputEvent) -> None:
        handle_input(self._session, event)
        self._after_update()

    def _after_update(self) -> None:
        session = self._session
        if session is None:
            return
        if session.is_finished:
            self._show_results(session.stats)
            return
        self._refresh()

    def _end_game(self) -> None:
        if self._session is None:
            return
        logger.info("Game ended early from the playing screen")
        self._show_results(force_finish(self._session))

    def _show_results(self, stats: GameStats) -> None:
        self._tick_timer.stop()
        self._populate_results(stats)
        self._set_state(GameState.FINISHED)

    def _populate_results(self, stats: GameStats) -> None:
        grid = self._results_grid
        if grid is None:
            return
        while grid.count():
            item = grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        for index, card in enumerate(result_cards(stats)):
            row, col = divmod(index, 3)
            grid.addWidget(StatCard(card.label, card.value, card.color_role), row, col)

    def _refresh(self) -> None:
        session = self._session
        if session is None:
            return
        values = live_cards(
            session.mode,
            session_clock.display_time(session),
            session.correct,
            session.errors,
            session.running_accuracy,
        )
        for card, (label, value) in zip(self._live_cards, values):
            card.set_label(label)
            card.set_value(value)

        if self._target_label is not None:
            if session.mode is GameMode.REACTION:
                self._target_label.show_char(session.practice_text)
            elif session.mode is GameMode.WORD:
                self._target_label.show_word(
                    session.practice_text, word_feedback(session.practice_text, session.user_input)
                )
            else:
                self._target_label.show_paragraph(
                    session.practice_text, paragraph_marks(session.practice_text, session.user_input)
                )

        if self._input_box is not None:
            self._input_box.setEnabled(session_clock.input_enabled(session))

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the countdown before the window goes away."""
        self._stop_session()
        super().closeEvent(event)
