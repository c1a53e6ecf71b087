#------------------------------------------------------------
#                        controller.py
#          Coordinates fetching, aggregation, rendering
#                  and writing of the chart.

from typing import Optional
from .config import NO_LANGUAGES_MESSAGE, OUTPUT_WRITTEN_MESSAGE, load_config
from .models import StatsConfig
from .services.aggregation_service import aggregate_languages
from .services.github_service import build_repository_source
from .services.output_service import save_chart
from .views.svg_view import render_chart

# This function does execute the full generation workflow end-to-end.
# It returns the written path, or None when no language data exists.
def run_generation(config: Optional[StatsConfig] = None) -> Optional[str]:
    if config is None:
        config = load_config()

    repos = build_repository_source(config).fetch_repos()
    stats = aggregate_languages(repos)

    if stats.total_count == 0:
        print(NO_LANGUAGES_MESSAGE)
        return None

    document = render_chart(stats.top_languages, stats.total_count, config.theme_mode)
    save_chart(config.output_path, document)
    print(OUTPUT_WRITTEN_MESSAGE.format(filename=config.output_path))
    return config.output_path
