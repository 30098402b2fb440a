"""
Styling constants and theme configuration for the FOV window.
"""

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Lighter background (axes, panels)
TEXT_COLOR = "#EEEEEE"        # Main text
TEXT_COLOR_DIM = "#CCCCCC"    # Dimmed text (axis labels, etc.)
BORDER_COLOR = "#555555"      # Borders
GRID_COLOR = "#333333"        # Grid lines

# Accent colors
ACCENT_BLUE = "#6FA8FF"       # FOV trace, sliders
ACCENT_RED = "#FF6B6B"        # Overshoot floor
ACCENT_YELLOW = "#FFD93D"     # Min/max FOV guides

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow, QWidget {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QGroupBox {{
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QCheckBox {{
        color: {TEXT_COLOR};
    }}
    QComboBox {{
        background-color: {BG_COLOR_LIGHT};
        color: {TEXT_COLOR};
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        padding: 2px 6px;
    }}
    QSlider::groove:horizontal {{
        height: 4px;
        background: {GRID_COLOR};
        border-radius: 2px;
    }}
    QSlider::handle:horizontal {{
        background: {ACCENT_BLUE};
        width: 12px;
        margin: -5px 0;
        border-radius: 6px;
    }}
    QTabWidget::pane {{
        border: 1px solid {BORDER_COLOR};
    }}
    QTabBar::tab {{
        background: {BG_COLOR_LIGHT};
        color: {TEXT_COLOR_DIM};
        padding: 6px 12px;
    }}
    QTabBar::tab:selected {{
        color: #FFFFFF;
        border-bottom: 2px solid {ACCENT_BLUE};
    }}
    QPushButton {{
        background-color: {ACCENT_BLUE};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A98EF;
    }}
    QPushButton:pressed {{
        background-color: #4A88DF;
    }}
"""
