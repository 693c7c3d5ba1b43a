"""Theme colors and color utilities for the UI."""

from keydrill.core.evaluator import CharMark, Feedback


class Palette:
    """Dark slate theme."""

    BG = "#0f172a"
    CARD_BG = "#1e293b"
    CARD_BG_RAISED = "#334155"
    CARD_BORDER = "#475569"

    PRIMARY = "#06b6d4"
    PRIMARY_LIGHT = "#67e8f9"
    PRIMARY_DARK = "#0e7490"

    SUCCESS = "#4ade80"
    DANGER = "#f87171"
    DANGER_BG = "#7f1d1d"
    WARNING = "#facc15"

    TEXT_PRIMARY = "#f1f5f9"
    TEXT_SECONDARY = "#cbd5e1"
    TEXT_MUTED = "#94a3b8"


FEEDBACK_COLORS = {
    Feedback.PENDING: Palette.TEXT_MUTED,
    Feedback.CORRECT: Palette.SUCCESS,
    Feedback.WRONG: Palette.DANGER,
}

MARK_COLORS = {
    CharMark.PENDING: Palette.TEXT_MUTED,
    CharMark.CORRECT: Palette.SUCCESS,
    CharMark.WRONG: Palette.DANGER,
    CharMark.MISSED_SPACE: Palette.DANGER,
}


HOVER_LIFT = 0.25


def hover_color(base: str, lift: float = HOVER_LIFT) -> str:
    """Button hover shade: *base* moved *lift* of the way towards white.

    Anything that is not a ``#RRGGBB`` string comes back unchanged.
    """
    base = base.strip()
    if not (base.startswith("#") and len(base) == 7):
        return base
    try:
        channels = [int(base[i:i + 2], 16) for i in (1, 3, 5)]
    except ValueError:
        return base
    lift = max(0.0, min(1.0, lift))
    r, g, b = (int(c + (255 - c) * lift) for c in channels)
    return f"#{r:02X}{g:02X}{b:02X}"
