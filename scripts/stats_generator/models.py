#------------------------------------------------------------
#                          models.py
#    Defines dataclasses used by the stats generator pipeline.

from dataclasses import dataclass, field
from typing import List, Tuple

@dataclass(frozen=True)
class ThemeDefinition:
    background: str
    title_color: str
    legend_color: str
    palette: Tuple[str, ...]

@dataclass(frozen=True)
class StatsConfig:
    github_user: str
    github_token: str
    theme_mode: str
    mock_data: bool
    output_path: str

@dataclass
class LanguageEntry:
    name: str
    count: int

@dataclass
class LanguageStats:
    top_languages: List[LanguageEntry] = field(default_factory=list)
    total_count: int = 0
