#!/usr/bin/env python3
"""
Generate stats.svg, a donut chart of the most common primary languages
across a GitHub user's repositories.

Environment variables:
  GITHUB_USER: GitHub username whose repositories are counted (required unless MOCK_DATA=true)
  GITHUB_TOKEN: Optional token, sent as a bearer token for authenticated requests
  THEME_MODE: light, dark or adaptive (default: adaptive)
  MOCK_DATA: Set to "true" to use built-in sample repositories instead of the API
"""

import sys

from stats_generator.controller import run_generation


def main() -> int:
    try:
        run_generation()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
