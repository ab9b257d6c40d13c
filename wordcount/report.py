from __future__ import annotations

from wordcount.schemas import PassageReport
from wordcount.services.counting import DEFAULT_TOP_K

INDENT = "    "
NO_MATCH = "(none)"


def render_report(report: PassageReport, top_k: int = DEFAULT_TOP_K) -> list[str]:
    lines = ["Total word count:", f"{INDENT}{report.total_words} words"]

    lines.append(f"Top {top_k} words counted:")
    for entry in report.top_words:
        lines.append(f"{INDENT}{entry.count} - {entry.word}")

    lines.append("Last sentence using the top word:")
    if report.last_sentence is None:
        lines.append(f"{INDENT}{NO_MATCH}")
    else:
        lines.append(f'{INDENT}"{report.last_sentence}"')
    return lines
