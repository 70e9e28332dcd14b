"""
Theme and stylesheet for FlashFreq.

Provides the dark GUI stylesheet, the stat-card style used on the
overview tab, and a helper for switching matplotlib between the dark
(GUI) and light (export) style dicts.

Stylesheets are assembled from ``(selector, {property: value})`` rules
so colours always come from ``DARK_COLORS``.
"""

from typing import Dict, List, Tuple

from .constants import DARK_COLORS

Rule = Tuple[str, Dict[str, str]]


def _render(rules: List[Rule]) -> str:
    blocks = []
    for selector, props in rules:
        body = "\n".join(f"    {k}: {v};" for k, v in props.items())
        blocks.append(f"{selector} {{\n{body}\n}}")
    return "\n".join(blocks)


def _dark_rules() -> List[Rule]:
    c = DARK_COLORS
    field = {
        'background-color': c['bg_input'],
        'color': c['fg'],
        'border': f"1px solid {c['border']}",
        'border-radius': '4px',
        'padding': '4px 8px',
        'min-height': '22px',
    }
    return [
        ("QMainWindow, QWidget", {
            'background-color': c['bg'], 'color': c['fg'], 'font-size': '13px',
        }),
        ("QTabWidget::pane", {'border': f"1px solid {c['border']}"}),
        ("QTabBar::tab", {
            'background-color': c['bg_alt'],
            'color': c['fg_dim'],
            'padding': '8px 16px',
            'border': f"1px solid {c['border']}",
            'border-bottom': 'none',
        }),
        ("QTabBar::tab:selected", {
            'background-color': c['bg_widget'],
            'color': c['accent'],
            'border-bottom': f"2px solid {c['accent']}",
        }),
        ("QGroupBox", {
            'border': f"1px solid {c['border']}",
            'border-radius': '6px',
            'margin-top': '12px',
            'padding-top': '16px',
            'font-weight': 'bold',
            'color': c['accent'],
        }),
        ("QGroupBox::title", {
            'subcontrol-origin': 'margin', 'left': '12px', 'padding': '0 6px',
        }),
        ("QPushButton", {
            'background-color': c['bg_widget'],
            'color': c['fg'],
            'border': f"1px solid {c['border']}",
            'border-radius': '4px',
            'padding': '6px 16px',
        }),
        ("QPushButton:hover", {
            'background-color': c['selection'], 'border-color': c['accent'],
        }),
        ("QPushButton:disabled", {
            'color': c['overlay0'], 'background-color': c['bg'],
        }),
        ("QLineEdit, QComboBox", field),
        ("QLineEdit:focus, QComboBox:focus", {'border-color': c['accent']}),
        ("QComboBox QAbstractItemView", {
            'background-color': c['bg_widget'],
            'selection-background-color': c['selection'],
        }),
        ("QTableWidget", {
            'background-color': c['bg_widget'],
            'alternate-background-color': c['bg_alt'],
            'gridline-color': c['border'],
        }),
        ("QHeaderView::section", {
            'background-color': c['bg_alt'],
            'color': c['fg'],
            'padding': '4px 8px',
            'border': f"1px solid {c['border']}",
            'font-weight': 'bold',
        }),
        ("QStatusBar", {
            'background-color': c['bg_alt'], 'color': c['fg_dim'],
        }),
        ("QMenuBar, QMenu", {
            'background-color': c['bg_alt'], 'color': c['fg'],
        }),
        ("QMenu::item:selected", {'background-color': c['selection']}),
        ("QSplitter::handle", {'background-color': c['border']}),
    ]


def get_dark_stylesheet() -> str:
    """Application-wide dark stylesheet."""
    return _render(_dark_rules())


def get_stat_card_stylesheet() -> str:
    """Style for the ``QFrame#statCard`` tiles on the overview tab."""
    c = DARK_COLORS
    return _render([
        ("QFrame#statCard", {
            'background-color': c['bg_widget'],
            'border': f"1px solid {c['border']}",
            'border-radius': '6px',
        }),
        ("QLabel#statValue", {
            'color': c['accent'], 'font-size': '20px', 'font-weight': 'bold',
        }),
        ("QLabel#statCaption", {'color': c['fg_dim'], 'font-size': '11px'}),
    ])


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        One of ``PLOT_STYLE_DARK`` or ``PLOT_STYLE_LIGHT``.
    """
    import matplotlib as mpl
    for key, value in style_dict.items():
        mpl.rcParams[key] = value
