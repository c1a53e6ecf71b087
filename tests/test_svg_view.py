import math
import re
import xml.etree.ElementTree as ET

import pytest

from stats_generator.config import DARK_THEME, LIGHT_THEME
from stats_generator.models import LanguageEntry
from stats_generator.views.svg_view import (
    compute_wedge_angles,
    escape_xml,
    format_percent,
    polar_to_cartesian,
    render_chart,
    render_donut,
    render_legend,
    render_theme_style,
)

SVG_NS = "{http://www.w3.org/2000/svg}"

FIXTURE_ENTRIES = [
    LanguageEntry("Ruby", 4),
    LanguageEntry("JavaScript", 3),
    LanguageEntry("TypeScript", 2),
    LanguageEntry("Python", 2),
    LanguageEntry("PHP", 2),
    LanguageEntry("Others", 2),
]


def test_wedge_sweeps_sum_to_full_circle():
    angles = compute_wedge_angles(FIXTURE_ENTRIES, 15)

    assert angles[0][0] == pytest.approx(-math.pi / 2)
    assert sum(end - start for start, end in angles) == pytest.approx(2 * math.pi)
    for (_, previous_end), (next_start, _) in zip(angles, angles[1:]):
        assert next_start == pytest.approx(previous_end)


def test_ruby_wedge_sweep_matches_share():
    start, end = compute_wedge_angles(FIXTURE_ENTRIES, 15)[0]
    assert end - start == pytest.approx(1.6755, abs=1e-3)


def test_polar_to_cartesian_twelve_o_clock():
    x, y = polar_to_cartesian(280, 100, 70, -math.pi / 2)
    assert x == pytest.approx(280)
    assert y == pytest.approx(30)


def test_donut_paths_use_palette_modulo_six():
    donut = render_donut(FIXTURE_ENTRIES, 15)
    fills = re.findall(r'fill="(var\(--color-\d\))"', donut)

    assert fills == [f"var(--color-{index})" for index in range(6)]
    assert donut.count('stroke="var(--bg-color)" stroke-width="2"') == 6


def test_palette_wraps_after_six_entries():
    entries = [LanguageEntry(f"L{index}", 1) for index in range(7)]
    fills = re.findall(r'fill="var\(--color-(\d)\)"', render_legend(entries, 7))
    assert fills[6] == "0"


def test_large_arc_flag_set_only_beyond_half_circle():
    donut = render_donut([LanguageEntry("Go", 3), LanguageEntry("Rust", 1)], 4)
    flags = re.findall(r"A 70 70 0 (\d) 1", donut)
    assert flags == ["1", "0"]


def test_donut_starts_at_top_of_outer_ring():
    donut = render_donut(FIXTURE_ENTRIES, 15)
    assert donut.startswith('<path d="M 280.000 30.000 A 70 70 0 0 1')


def test_single_language_draws_full_ring():
    donut = render_donut([LanguageEntry("Go", 3)], 3)

    assert "M 280.000 30.000" in donut
    assert "280.000 170.000" in donut
    assert "A 40 40" in donut


def test_legend_rows_and_percentages():
    legend = render_legend(FIXTURE_ENTRIES, 15)

    assert '<rect x="20" y="50" width="12" height="12"' in legend
    assert '<rect x="20" y="175" width="12" height="12"' in legend
    assert '<text x="40" y="60" class="legend-text">Ruby <tspan class="legend-percent">(26.7%)</tspan>' in legend

    percents = [float(value) for value in re.findall(r"\(([\d.]+)%\)", legend)]
    assert len(percents) == 6
    assert sum(percents) == pytest.approx(100.0, abs=0.05 * len(percents))


def test_legend_escapes_language_names():
    legend = render_legend([LanguageEntry("<C&C>", 1)], 1)
    assert "&lt;C&amp;C&gt;" in legend


def test_escape_xml_handles_none():
    assert escape_xml(None) == ""


def test_light_theme_contains_only_light_colors():
    style = render_theme_style("light")

    assert all(color in style for color in LIGHT_THEME.palette)
    assert LIGHT_THEME.background in style
    assert not any(color in style for color in DARK_THEME.palette)
    assert "prefers-color-scheme" not in style


def test_dark_theme_contains_only_dark_colors():
    style = render_theme_style("dark")

    assert all(color in style for color in DARK_THEME.palette)
    assert not any(color in style for color in LIGHT_THEME.palette)
    assert LIGHT_THEME.background not in style


def test_adaptive_theme_scopes_dark_colors_under_media_query():
    style = render_theme_style("adaptive")
    media_index = style.index("@media (prefers-color-scheme: dark)")

    assert all(style.index(color) < media_index for color in LIGHT_THEME.palette)
    assert all(style.index(color) > media_index for color in DARK_THEME.palette)


@pytest.mark.parametrize("theme_mode", ["light", "dark", "adaptive"])
def test_chart_is_well_formed_svg(theme_mode):
    document = render_chart(FIXTURE_ENTRIES, 15, theme_mode)
    root = ET.fromstring(document)

    assert root.tag == f"{SVG_NS}svg"
    assert root.get("width") == "400"
    assert root.get("height") == "200"
    assert root.find(f"{SVG_NS}style") is not None
    assert len(root.findall(f".//{SVG_NS}g/{SVG_NS}path")) == 6
    assert "✨ Top Languages by Repo" in document


@pytest.mark.parametrize("count, total_count, expected", [(1, 16, "6.3"), (1, 80, "1.3"), (4, 15, "26.7"), (1, 3, "33.3"), (3, 3, "100.0")])
def test_percent_rounds_exact_ties_up(count, total_count, expected):
    assert format_percent(count, total_count) == expected


def test_legend_renders_tie_percentage_rounded_up():
    legend = render_legend([LanguageEntry("Go", 15), LanguageEntry("Zig", 1)], 16)

    assert 'Go <tspan class="legend-percent">(93.8%)</tspan>' in legend
    assert 'Zig <tspan class="legend-percent">(6.3%)</tspan>' in legend
