#------------------------------------------------------------
#                    aggregation_service.py
#        Counts primary languages and folds the long tail
#                    into a single Others entry.

from typing import Dict, Iterable, List
from ..config import DEFAULT_TOP_LANGUAGES, OTHERS_LABEL
from ..models import LanguageEntry, LanguageStats

# This function does count repositories per primary language.
# Empty or missing languages are skipped; names are kept case-sensitive.
def count_languages(repos: Iterable[dict]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for repo in repos:
        language = repo.get("language")
        if not language:
            continue
        counts[language] = counts.get(language, 0) + 1
    return counts

# This function does rank languages and build the top-N summary.
# Ties keep first-seen order since sorted() is stable over dict order.
def aggregate_languages(repos: Iterable[dict], top_n: int = DEFAULT_TOP_LANGUAGES) -> LanguageStats:
    counts = count_languages(repos)
    total_count = sum(counts.values())

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    top_languages: List[LanguageEntry] = [LanguageEntry(name, count) for name, count in ranked[:top_n]]

    top_sum = sum(entry.count for entry in top_languages)
    if total_count > top_sum:
        top_languages.append(LanguageEntry(OTHERS_LABEL, total_count - top_sum))

    return LanguageStats(top_languages=top_languages, total_count=total_count)
