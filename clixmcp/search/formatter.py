"""Render search reports as markdown for agents."""

from __future__ import annotations

from clixmcp.search.catalog import ALL_CATEGORIES
from clixmcp.search.engine import SearchProfile
from clixmcp.search.models import FetchResult, SearchReport

CONTENT_UNAVAILABLE = "> Unable to fetch content from this source. Open the link above to read it directly."
SEPARATOR = "---"


def render_report(report: SearchReport, profile: SearchProfile) -> str:
    """Render ``report`` as a single markdown document."""
    if report.empty:
        return render_no_results(report, profile)

    lines: list[str] = [f"# {profile.report_title}", ""]
    lines.append(f'**Query**: "{report.query}"')
    if profile.show_category_in_header:
        lines.append(f"**{profile.category_label}**: {report.category or ALL_CATEGORIES}")
    lines.append("")

    lines.extend(["## Summary", ""])
    lines.append(
        f"Searched {report.candidate_count} candidate {profile.result_noun}. "
        f"Showing the {len(report.results)} most relevant, ranked by relevance score."
    )
    if report.failed_sources:
        lines.append("")
        lines.append(
            f"> {len(report.failed_sources)} index source(s) could not be loaded and were skipped:"
        )
        lines.extend(f"> - {url}" for url in report.failed_sources)
    lines.append("")

    for position, result in enumerate(report.results, start=1):
        lines.extend([SEPARATOR, ""])
        lines.extend(_render_result(position, result, profile))

    lines.extend([SEPARATOR, "", f"**Note**: {profile.footer_note}"])
    return "\n".join(lines)


def render_no_results(report: SearchReport, profile: SearchProfile) -> str:
    lines = ["# No Results Found", ""]
    scope = ""
    if report.category and report.category != ALL_CATEGORIES:
        scope = f" for {profile.category_label.lower()} `{report.category}`"
    lines.append(
        f'No {profile.result_noun} matched "{report.query}"{scope} '
        f"({report.candidate_count} candidates searched)."
    )
    if profile.no_results_tips:
        lines.extend(["", "**Suggestions**:"])
        lines.extend(f"- {tip}" for tip in profile.no_results_tips)
    return "\n".join(lines)


def _render_result(position: int, result: FetchResult, profile: SearchProfile) -> list[str]:
    entry = result.entry
    lines = [f"## Result {position}: {entry.title}", ""]
    lines.append(f"**{profile.category_label}**: {entry.category or 'general'}")
    lines.append(f"**{profile.source_label}**: {entry.url}")
    if entry.description:
        lines.append(f"**Description**: {entry.description}")
    lines.append(f"**Relevance Score**: {result.score:.2f}")
    lines.append("")

    if result.failed or result.content is None:
        lines.append(CONTENT_UNAVAILABLE)
    else:
        fence = _fence_for(result.content)
        lines.append(f"{fence}{result.language}")
        lines.append(result.content)
        lines.append(fence)
    lines.append("")
    return lines


def _fence_for(content: str) -> str:
    # Longer than any backtick run inside the content.
    longest = run = 0
    for ch in content:
        run = run + 1 if ch == "`" else 0
        longest = max(longest, run)
    return "`" * max(3, longest + 1)
