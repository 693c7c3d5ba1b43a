"""Typing practice UI: stat cards and the target text display."""

from __future__ import annotations

import html
from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from keydrill.core.evaluator import CharMark, Feedback
from keydrill.ui.colors import FEEDBACK_COLORS, MARK_COLORS, Palette

ROLE_COLORS = {
    "default": Palette.TEXT_PRIMARY,
    "success": Palette.SUCCESS,
    "danger": Palette.DANGER,
    "warning": Palette.WARNING,
}


class StatCard(QFrame):
    """Small rounded card: muted caption above a large value."""

    def __init__(self, label: str, value: str = "", color_role: str = "default", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("statCard")
        self.setStyleSheet(
            f"""
            QFrame#statCard {{
                background: {Palette.CARD_BG_RAISED};
                border-radius: 10px;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(4)

        self._label = QLabel(label)
        self._label.setStyleSheet(f"color: {Palette.TEXT_MUTED}; font-size: 13px;")
        self._value = QLabel(value)
        self._value.setStyleSheet(
            f"color: {ROLE_COLORS.get(color_role, Palette.TEXT_PRIMARY)}; font-size: 28px; font-weight: 700;"
        )
        layout.addWidget(self._label)
        layout.addWidget(self._value)

    def set_label(self, text: str) -> None:
        self._label.setText(text)

    def set_value(self, text: str) -> None:
        self._value.setText(text)


class TargetTextLabel(QLabel):
    """Monospace display of the text to type, coloured by typing progress."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setMinimumHeight(96)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {Palette.BG};
                border-radius: 10px;
                padding: 16px;
                font-family: monospace;
            }}
            """
        )

    def show_char(self, char: str) -> None:
        self.setAlignment(Qt.AlignCenter)
        self.setText(self._span(char, Palette.PRIMARY_LIGHT, size=48))

    def show_word(self, word: str, feedback: Feedback) -> None:
        self.setAlignment(Qt.AlignCenter)
        self.setText(self._span(word, FEEDBACK_COLORS[feedback], size=40))

    def show_paragraph(self, paragraph: str, marks: Sequence[CharMark]) -> None:
        self.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        parts = []
        for char, mark in zip(paragraph, marks):
            color = MARK_COLORS[mark]
            if mark is CharMark.MISSED_SPACE:
                parts.append(f'<span style="background:{Palette.DANGER_BG}; color:{color}">&nbsp;</span>')
            else:
                parts.append(f'<span style="color:{color}">{html.escape(char)}</span>')
        self.setText(f'<div style="font-size:20px; line-height:160%">{"".join(parts)}</div>')

    @staticmethod
    def _span(text: str, color: str, size: int) -> str:
        return f'<span style="color:{color}; font-size:{size}px; letter-spacing:4px">{html.escape(text)}</span>'
