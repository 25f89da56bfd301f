# Design tokens for Pool Table Tracker UI

COLORS = {
    'background': '#F4F7F5',
    'surface': '#FFFFFF',
    'felt': '#1F6F4A',
    'felt_hover': '#185C3D',
    'text': '#2F3A34',
    'text_strong': '#123524',
    'border': '#D5E0D9',
    'running': '#2FA36B',
    'paused': '#FFC24B',
    'idle': '#9AA8A0',
    'footer_bg': '#E3F1E8',
    'footer_text': '#123524',
    'bar': '#6FAE8C',
    'bar_edge': '#4F8E6C',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 28,
    'timer_weight': 'bold',
    'button_size': 14,
    'text': 14,
    'text_strong': 18,
}


def stylesheet():
    """App-wide QSS built from the tokens above."""
    return f"""
    QMainWindow {{ background: {COLORS['background']}; }}
    QWidget {{ font-family: {FONTS['family']}; font-size: {FONTS['text']}px; color: {COLORS['text']}; }}
    QFrame#TableCard {{ background: {COLORS['surface']}; border: 1px solid {COLORS['border']}; border-radius: 8px; }}
    QLabel#CardTitle {{ font-size: {FONTS['text_strong']}px; font-weight: 600; color: {COLORS['text_strong']}; }}
    QLabel#CardTimer {{ font-size: {FONTS['timer_size']}px; font-weight: {FONTS['timer_weight']}; color: {COLORS['text_strong']}; }}
    QPushButton {{ background: {COLORS['felt']}; color: white; border: none; border-radius: 6px; padding: 6px 10px; font-size: {FONTS['button_size']}px; }}
    QPushButton:hover {{ background: {COLORS['felt_hover']}; }}
    QPushButton:disabled {{ background: {COLORS['border']}; color: {COLORS['idle']}; }}
    """
