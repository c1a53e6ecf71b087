#------------------------------------------------------------
#                          config.py
#     Centralizes environment settings, API constants and
#                   the fixed theme palettes.

import os
import sys
from typing import Dict, Mapping, Optional
from .models import StatsConfig, ThemeDefinition

# Environment variable names for configuration
ENV_GITHUB_USER = "GITHUB_USER"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_THEME_MODE = "THEME_MODE"
ENV_MOCK_DATA = "MOCK_DATA"

# Default values for configuration parameters
DEFAULT_THEME_MODE = "adaptive"
DEFAULT_TOP_LANGUAGES = 5
MOCK_DATA_ENABLED_VALUE = "true"

THEME_MODE_LIGHT = "light"
THEME_MODE_DARK = "dark"
THEME_MODE_ADAPTIVE = "adaptive"
THEME_MODES = (THEME_MODE_LIGHT, THEME_MODE_DARK, THEME_MODE_ADAPTIVE)

# Constants for GitHub API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_USER_AGENT = "stats-action"
GITHUB_REPOS_PER_PAGE = 100

# Output artifact, written to the current working directory.
OUTPUT_FILENAME = "stats.svg"

OTHERS_LABEL = "Others"

# Messages shown while the generator runs.
NO_LANGUAGES_MESSAGE = "No languages found."
OUTPUT_WRITTEN_MESSAGE = "{filename} generated successfully."
UNKNOWN_THEME_MODE_WARNING = "WARNING: unknown {env} {value!r}; using {default!r}"

LIGHT_THEME = ThemeDefinition(
    background="#ffffff",
    title_color="#2f3640",
    legend_color="#636e72",
    palette=(
        "#4caf50",  # green
        "#009688",  # teal
        "#cddc39",  # lime
        "#ff9800",  # orange
        "#795548",  # brown
        "#607d8b",  # blue grey
    ),
)

DARK_THEME = ThemeDefinition(
    background="#0f1914",
    title_color="#aaccbb",
    legend_color="#e0e0e0",
    palette=(
        "#66bb6a",
        "#26a69a",
        "#d4e157",
        "#ffa726",
        "#8d6e63",
        "#78909c",
    ),
)

THEMES: Mapping[str, ThemeDefinition] = {
    THEME_MODE_LIGHT: LIGHT_THEME,
    THEME_MODE_DARK: DARK_THEME,
}

# This function does normalize the configured theme mode.
# Unrecognised values fall back to adaptive with a warning.
def resolve_theme_mode(value: str) -> str:
    mode = (value or "").strip().lower() or DEFAULT_THEME_MODE
    if mode not in THEME_MODES:
        print(
            UNKNOWN_THEME_MODE_WARNING.format(env=ENV_THEME_MODE, value=value, default=DEFAULT_THEME_MODE),
            file=sys.stderr,
        )
        return DEFAULT_THEME_MODE
    return mode

# This function does build the run configuration from the environment.
# It is called once at startup; nothing else reads os.environ.
def load_config(environ: Optional[Dict[str, str]] = None) -> StatsConfig:
    env = os.environ if environ is None else environ
    return StatsConfig(
        github_user=env.get(ENV_GITHUB_USER, "").strip(),
        github_token=env.get(ENV_GITHUB_TOKEN, "").strip(),
        theme_mode=resolve_theme_mode(env.get(ENV_THEME_MODE, DEFAULT_THEME_MODE)),
        mock_data=env.get(ENV_MOCK_DATA, "").strip().lower() == MOCK_DATA_ENABLED_VALUE,
        output_path=OUTPUT_FILENAME,
    )
