"""QSS stylesheet, palette, and phase colours for SimpleTimer."""

from __future__ import annotations

from ..timer.engine import TimerPhase

# ── phase colours (progress line fill) ──────────────────────────────────

PHASE_COLORS: dict[TimerPhase, str] = {
    TimerPhase.RUNNING: "#0A84FF",   # system accent blue
    TimerPhase.IDLE:    "#C6C6C8",   # separator grey
    TimerPhase.EXPIRED: "#C6C6C8",
}

# ── default palette (light, close to the native macOS window) ───────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":         "#ECECEC",
    "surface":    "#FFFFFF",
    "accent":     "#0A84FF",
    "text":       "#1D1D1F",
    "text_muted": "#6E6E73",
    "separator":  "#C6C6C8",
    "border":     "#D1D1D6",
}


def get_palette() -> dict[str, str]:
    """Return a copy of the colour palette."""
    return dict(DEFAULT_PALETTE)


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Pro", ".AppleSystemUIFont"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    font = resolve_font_family()
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 13px;
    }}

    QLabel#statusLabel {{
        color: {p['text_muted']};
        font-size: 13px;
    }}

    QLabel#timeLabel {{
        color: {p['text']};
        font-size: 84px;
        font-weight: 500;
    }}

    QFrame#divider {{
        background-color: {p['separator']};
    }}

    QPushButton {{
        background-color: {p['surface']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 4px 14px;
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: #FFFFFF;
        border: none;
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
    }}

    QComboBox, QLineEdit {{
        background-color: {p['surface']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 3px 8px;
    }}

    QLineEdit {{
        font-family: "Menlo", "Courier New", monospace;
    }}
    """
