#------------------------------------------------------------
#                         svg_view.py
#          Renders the donut chart, legend and theme
#                  styles as one SVG document.

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Tuple
from ..config import DARK_THEME, LIGHT_THEME, THEMES
from ..models import LanguageEntry, ThemeDefinition

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 200
DONUT_CENTER_X = 280
DONUT_CENTER_Y = 100
DONUT_RADIUS = 70
DONUT_THICKNESS = 30
DONUT_START_ANGLE = -math.pi / 2
WEDGE_STROKE_WIDTH = 2
LEGEND_X = 20
LEGEND_Y = 50
LEGEND_LINE_HEIGHT = 25
LEGEND_SWATCH_SIZE = 12
LEGEND_TEXT_OFFSET_X = 20
LEGEND_TEXT_OFFSET_Y = 10
PALETTE_SIZE = 6
PERCENT_PRECISION = Decimal("0.1")

TITLE_TEXT = "✨ Top Languages by Repo"
FONT_FAMILY = '-apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif'

THEME_VARIABLES_TEMPLATE = (
    "--bg-color: {background}; "
    "--text-title: {title_color}; "
    "--text-legend: {legend_color}; "
    "{palette};"
)
PALETTE_VARIABLE_TEMPLATE = "--color-{index}: {color}"
ROOT_RULE_TEMPLATE = ":root {{ {variables} }}"
DARK_MEDIA_RULE_TEMPLATE = "@media (prefers-color-scheme: dark) {{ {rule} }}"

STYLE_TEMPLATE = """<style>
    {theme_rules}
    text {{ font-family: {font_family}; }}
    .bg {{ fill: var(--bg-color); }}
    .title {{ fill: var(--text-title); font-weight: bold; font-size: 18px; }}
    .legend-text {{ fill: var(--text-legend); font-size: 14px; }}
    .legend-percent {{ fill: var(--text-legend); opacity: 0.7; font-size: 12px; }}
    .decoration {{ fill: var(--text-title); opacity: 0.1; }}
  </style>"""

DECORATIONS = """<circle cx="30" cy="180" r="4" class="decoration" />
  <circle cx="380" cy="30" r="6" class="decoration" />
  <path d="M 50 160 L 52 165 L 58 165 L 53 169 L 55 175 L 50 171 L 45 175 L 47 169 L 42 165 L 48 165 Z" class="decoration" transform="rotate(-15 50 160)"/>
  <path d="M 350 180 q 5 -5 10 0 q 5 -5 10 0 q -10 10 -20 0" class="decoration" fill="none" stroke="currentColor" stroke-width="2" />"""

DOCUMENT_TEMPLATE = """<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg">
  {style}
  <rect width="100%" height="100%" class="bg" rx="10"/>
  {decorations}
  <text x="20" y="30" class="title">{title}</text>
  <g>{donut}</g>
  <g>{legend}</g>
</svg>
"""

WEDGE_TEMPLATE = (
    '<path d="M {p1} A {r_out} {r_out} 0 {large_arc} 1 {p2} L {p3} '
    'A {r_in} {r_in} 0 {large_arc} 0 {p4} Z" '
    'fill="{fill}" stroke="var(--bg-color)" stroke-width="{stroke_width}"/>'
)
RING_TEMPLATE = (
    '<path d="M {p1} A {r_out} {r_out} 0 0 1 {p_mid} A {r_out} {r_out} 0 0 1 {p1} L {p3} '
    'A {r_in} {r_in} 0 0 0 {p_mid_in} A {r_in} {r_in} 0 0 0 {p3} Z" '
    'fill="{fill}" stroke="var(--bg-color)" stroke-width="{stroke_width}"/>'
)
LEGEND_ROW_TEMPLATE = (
    '<rect x="{x}" y="{y}" width="{size}" height="{size}" fill="{fill}" rx="2"/>'
    '<text x="{text_x}" y="{text_y}" class="legend-text">'
    '{name} <tspan class="legend-percent">({percent}%)</tspan></text>'
)
COLOR_VARIABLE_TEMPLATE = "var(--color-{index})"

def escape_xml(value: Optional[str]) -> str:
    """Escape text for safe embedding in SVG text nodes and attributes."""
    if value is None:
        return ""
    return (str(value).replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&apos;"))

def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)

def _point(point: Tuple[float, float]) -> str:
    return f"{point[0]:.3f} {point[1]:.3f}"

def palette_color(index: int) -> str:
    return COLOR_VARIABLE_TEMPLATE.format(index=index % PALETTE_SIZE)

# Exact ties round up, so 1 of 16 renders as 6.3.
def format_percent(count: int, total_count: int) -> str:
    percent = Decimal(count * 100) / Decimal(total_count)
    return str(percent.quantize(PERCENT_PRECISION, rounding=ROUND_HALF_UP))

# This function does render CSS custom properties for one theme.
def render_theme_variables(theme: ThemeDefinition) -> str:
    palette = "; ".join(
        PALETTE_VARIABLE_TEMPLATE.format(index=index, color=color)
        for index, color in enumerate(theme.palette)
    )
    return THEME_VARIABLES_TEMPLATE.format(
        background=theme.background,
        title_color=theme.title_color,
        legend_color=theme.legend_color,
        palette=palette,
    )

# This function does render the theme rules for the chosen mode.
# Adaptive mode scopes the dark variables under prefers-color-scheme.
def render_theme_style(theme_mode: str) -> str:
    if theme_mode in THEMES:
        return ROOT_RULE_TEMPLATE.format(variables=render_theme_variables(THEMES[theme_mode]))

    light_rule = ROOT_RULE_TEMPLATE.format(variables=render_theme_variables(LIGHT_THEME))
    dark_rule = ROOT_RULE_TEMPLATE.format(variables=render_theme_variables(DARK_THEME))
    return f"{light_rule}\n    {DARK_MEDIA_RULE_TEMPLATE.format(rule=dark_rule)}"

# This function does compute start and end angles for each wedge.
# Wedges run clockwise from 12 o'clock in ranking order.
def compute_wedge_angles(entries: List[LanguageEntry], total_count: int) -> List[Tuple[float, float]]:
    angles = []
    offset = DONUT_START_ANGLE
    for entry in entries:
        sweep = (entry.count / total_count) * 2 * math.pi
        angles.append((offset, offset + sweep))
        offset += sweep
    return angles

def _render_wedge(index: int, start_angle: float, end_angle: float) -> str:
    inner_radius = DONUT_RADIUS - DONUT_THICKNESS
    cx, cy = DONUT_CENTER_X, DONUT_CENTER_Y
    sweep = end_angle - start_angle

    # A single arc cannot draw a closed circle, so a full ring is split in two halves.
    if math.isclose(sweep, 2 * math.pi):
        mid_angle = start_angle + math.pi
        return RING_TEMPLATE.format(
            p1=_point(polar_to_cartesian(cx, cy, DONUT_RADIUS, start_angle)),
            p_mid=_point(polar_to_cartesian(cx, cy, DONUT_RADIUS, mid_angle)),
            p3=_point(polar_to_cartesian(cx, cy, inner_radius, start_angle)),
            p_mid_in=_point(polar_to_cartesian(cx, cy, inner_radius, mid_angle)),
            r_out=DONUT_RADIUS,
            r_in=inner_radius,
            fill=palette_color(index),
            stroke_width=WEDGE_STROKE_WIDTH,
        )

    return WEDGE_TEMPLATE.format(
        p1=_point(polar_to_cartesian(cx, cy, DONUT_RADIUS, start_angle)),
        p2=_point(polar_to_cartesian(cx, cy, DONUT_RADIUS, end_angle)),
        p3=_point(polar_to_cartesian(cx, cy, inner_radius, end_angle)),
        p4=_point(polar_to_cartesian(cx, cy, inner_radius, start_angle)),
        r_out=DONUT_RADIUS,
        r_in=inner_radius,
        large_arc=1 if sweep > math.pi else 0,
        fill=palette_color(index),
        stroke_width=WEDGE_STROKE_WIDTH,
    )

def render_donut(entries: List[LanguageEntry], total_count: int) -> str:
    wedges = compute_wedge_angles(entries, total_count)
    return "".join(
        _render_wedge(index, start_angle, end_angle)
        for index, (start_angle, end_angle) in enumerate(wedges)
    )

# This function does render one swatch and label row per language.
def render_legend(entries: List[LanguageEntry], total_count: int) -> str:
    rows = []
    for index, entry in enumerate(entries):
        y = LEGEND_Y + index * LEGEND_LINE_HEIGHT
        rows.append(LEGEND_ROW_TEMPLATE.format(
            x=LEGEND_X,
            y=y,
            size=LEGEND_SWATCH_SIZE,
            fill=palette_color(index),
            text_x=LEGEND_X + LEGEND_TEXT_OFFSET_X,
            text_y=y + LEGEND_TEXT_OFFSET_Y,
            name=escape_xml(entry.name),
            percent=format_percent(entry.count, total_count),
        ))
    return "".join(rows)

# This function does render the complete chart document.
# It combines theme styles, static chrome, donut wedges and legend rows.
def render_chart(entries: List[LanguageEntry], total_count: int, theme_mode: str) -> str:
    style = STYLE_TEMPLATE.format(theme_rules=render_theme_style(theme_mode), font_family=FONT_FAMILY)
    return DOCUMENT_TEMPLATE.format(
        width=CANVAS_WIDTH,
        height=CANVAS_HEIGHT,
        style=style,
        decorations=DECORATIONS,
        title=TITLE_TEXT,
        donut=render_donut(entries, total_count),
        legend=render_legend(entries, total_count),
    )
