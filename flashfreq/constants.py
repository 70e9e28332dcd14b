"""
Constants for FlashFreq.

Centralises analysis thresholds, view limits, colour palettes, font
families and the matplotlib style dicts used for GUI preview and export.
"""

# ── Analysis settings ────────────────────────────────────────────────────
EMPTY_SENTINEL = "(empty)"          # display value for blank cells
NUMERIC_THRESHOLD = 0.8             # column is numeric if share > this
STATS_DECIMALS = 2                  # mean / median rounding

# ── View settings ────────────────────────────────────────────────────────
TOP_N_ALL = "all"
TOP_N_OPTIONS = [
    (TOP_N_ALL, "All"),
    (10, "Top 10"),
    (25, "Top 25"),
    (50, "Top 50"),
]
CHART_MAX_POINTS = 20
CHART_LABEL_MAX_CHARS = 15
CHART_LABEL_ELLIPSIS = "..."
PREVIEW_ROWS = 20
TOP_VALUES_PREVIEW = 5

# ── File input ───────────────────────────────────────────────────────────
CSV_EXTENSION = ".csv"
SIZE_ADVISORY_BYTES = 50 * 1024 * 1024   # UI hint only, never enforced

# ── Export settings ──────────────────────────────────────────────────────
EXPORT_HEADER = ["Value", "Count", "Percentage"]
EXPORT_SUFFIX = "_frequency.csv"
EXPORT_DPI = 300
EXPORT_WIDTH_INCHES = 8.0
CLIPBOARD_DPI = 150

# ── Font family fallback chain ───────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Dark Catppuccin-inspired GUI colour palette ──────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'fg_bright':    '#ffffff',
    'accent':       '#89b4fa',
    'green':        '#a6e3a1',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'overlay0':     '#6c7086',
    'selection':    '#45475a',
}

# ── Bar chart palette ────────────────────────────────────────────────────
CHART_PALETTE = {
    'bar':          '#3b82f6',   # blue-500
    'bar_edge':     '#1d4ed8',
    'bar_export':   '#2563eb',
    'annotation':   '#9399b2',
}

# ── Export / light-theme text colours (for for_export branches) ──────────
EXPORT_TEXT_COLOR = '#333333'

# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_widget'],
    'axes.edgecolor':    DARK_COLORS['border'],
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg_dim'],
    'ytick.color':       DARK_COLORS['fg_dim'],
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'grid.color':        DARK_COLORS['border'],
}

# ── Matplotlib light-theme style dict (export) ──────────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'grid.color':        '#cccccc',
}
