"""
Theme for the i-STAT trainer window.

The form side uses a dark clinical theme; the readout panel mimics the
analyzer's own light LCD screen so exported images look like the device.
"""

# =============================================================================
# COLORS
# =============================================================================

COLORS = {
    # Form surfaces
    'background': '#0F141C',
    'panel': '#151B24',
    'card': '#1C2431',

    # Borders
    'border': '#2A3341',
    'border_light': '#364355',

    # Text
    'text': '#E7ECF4',
    'text_secondary': '#C1CAD8',
    'text_dim': '#7E8A9C',

    # Controls
    'control': '#1A2230',
    'control_hover': '#222C3A',
    'control_pressed': '#283246',

    # Accents
    'primary': '#2563EB',
    'warning': '#E1A644',

    # Analyzer screen
    'screen': '#FFFFFF',
    'screen_text': '#1F2937',
    'screen_rule': '#D1D5DB',
}

# =============================================================================
# FONTS
# =============================================================================

FONTS = {
    'family': 'Arial',
    'mono': 'Courier New, monospace',
    'size_small': '11px',
    'size_normal': '12px',
    'size_medium': '13px',
    'size_title': '16px',
    'size_screen': '15px',
    'size_screen_title': '20px',
}

# =============================================================================
# STYLE BUILDERS
# =============================================================================

def get_base_widget_style():
    """Base style for the form side of the window."""
    return f"""
        QWidget {{
            background-color: {COLORS['background']};
            color: {COLORS['text']};
            font-family: {FONTS['family']};
            font-size: {FONTS['size_normal']};
        }}
        QLabel {{
            background: none;
            color: {COLORS['text']};
        }}
    """

def get_groupbox_style():
    return f"""
        QGroupBox {{
            font-weight: 600;
            font-size: {FONTS['size_title']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 10px;
            margin-top: 14px;
            padding: 12px;
            background-color: {COLORS['card']};
        }}
        QGroupBox::title {{
            subcontrol-origin: margin;
            left: 12px;
            padding: 0 6px;
            color: {COLORS['text_secondary']};
        }}
    """

def get_lineedit_style(on_screen=False):
    """Style for QLineEdit/QTimeEdit; on_screen=True for edits inside the readout panel."""
    if on_screen:
        return f"""
            QLineEdit {{
                background-color: {COLORS['screen']};
                color: {COLORS['screen_text']};
                border: 1px solid {COLORS['screen_rule']};
                padding: 1px 4px;
                font-family: {FONTS['mono']};
                font-size: {FONTS['size_screen']};
                max-width: 96px;
            }}
        """
    return f"""
        QLineEdit, QTimeEdit {{
            background-color: {COLORS['control']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 6px;
            padding: 5px 8px;
            font-size: {FONTS['size_medium']};
        }}
        QLineEdit:focus, QTimeEdit:focus {{
            border-color: {COLORS['primary']};
        }}
    """

def get_button_style(variant="neutral", padding="8px 16px", min_width=None):
    """Style for QPushButton: 'primary' is filled, 'neutral' is outlined."""
    if variant == "primary":
        background = COLORS['primary']
        hover_bg = get_rgba(COLORS['primary'], 0.9)
        pressed_bg = get_rgba(COLORS['primary'], 0.8)
        border = "1px solid transparent"
        text = "white"
    else:
        background = "transparent"
        hover_bg = COLORS['control_hover']
        pressed_bg = COLORS['control_pressed']
        border = f"1px solid {COLORS['border_light']}"
        text = COLORS['text']

    min_width_rule = f"min-width: {min_width}px;" if min_width else ""

    return f"""
        QPushButton {{
            background-color: {background};
            color: {text};
            padding: {padding};
            border-radius: 8px;
            font-size: {FONTS['size_medium']};
            font-weight: 600;
            border: {border};
            {min_width_rule}
        }}
        QPushButton:hover {{
            background-color: {hover_bg};
        }}
        QPushButton:pressed {{
            background-color: {pressed_bg};
        }}
        QPushButton:disabled {{
            color: {COLORS['text_dim']};
            border-color: {COLORS['border']};
        }}
    """

def get_toggle_button_style(active_color):
    """Style for checkable buttons (panel select, edit toggle)."""
    return f"""
        QPushButton {{
            background-color: {COLORS['control']};
            color: {COLORS['text']};
            padding: 6px 14px;
            border-radius: 8px;
            font-size: {FONTS['size_medium']};
            font-weight: 600;
            border: 1px solid {COLORS['border']};
        }}
        QPushButton:hover {{
            background-color: {COLORS['control_hover']};
            border-color: {active_color};
        }}
        QPushButton:checked {{
            background-color: {active_color};
            color: white;
            border-color: {active_color};
        }}
    """

def get_screen_style():
    """Analyzer screen: white card, monospace text."""
    return f"""
        QFrame#readoutScreen {{
            background-color: {COLORS['screen']};
            border: 1px solid {COLORS['screen_rule']};
            border-radius: 12px;
        }}
        QLabel {{
            background: none;
            color: {COLORS['screen_text']};
            font-family: {FONTS['mono']};
            font-size: {FONTS['size_screen']};
        }}
    """

def get_screen_row_style():
    return f"""
        QFrame#readoutRow {{
            background: none;
            border: none;
            border-bottom: 1px solid {COLORS['screen_rule']};
        }}
    """

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def hex_to_rgb(hex_color):
    """Convert hex color to r, g, b string for rgba()."""
    hex_color = hex_color.lstrip('#')
    r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
    return f"{r}, {g}, {b}"

def get_rgba(hex_color, alpha):
    """Get rgba string from hex color and alpha value (0-1)."""
    return f"rgba({hex_to_rgb(hex_color)}, {alpha})"

# =============================================================================
# PRE-BUILT STYLE CONSTANTS
# =============================================================================

STYLE_GROUPBOX = get_groupbox_style()
STYLE_LINEEDIT = get_lineedit_style()
