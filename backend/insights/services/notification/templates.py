from __future__ import annotations

import html
from collections.abc import Sequence

from insights.models.feedback import FeedbackItem
from insights.models.report import RankedTerm, WeeklyReport

CRITICAL_ALERT_SUBJECT = "URGENT: critical feedback received"
WEEKLY_REPORT_SUBJECT = "Weekly feedback report"

_STYLE = """
body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
.container { max-width: 600px; margin: 0 auto; padding: 20px; }
.header { color: white; padding: 20px; border-radius: 5px; }
.content { background-color: #f8f9fa; padding: 20px; margin-top: 20px; border-radius: 5px; }
.info { margin: 10px 0; }
.label { font-weight: bold; }
.metric { background-color: white; padding: 15px; margin: 10px 0; border-left: 4px solid #007bff; }
.empty { color: #666; }
"""


def _page(header_color: str, title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        f"<style>{_STYLE}</style>\n</head>\n<body>\n"
        '<div class="container">\n'
        f'<div class="header" style="background-color: {header_color};"><h1>{html.escape(title)}</h1></div>\n'
        f'<div class="content">\n{body}\n</div>\n'
        "</div>\n</body>\n</html>\n"
    )


def _info(label: str, value: object) -> str:
    return f'<div class="info"><span class="label">{html.escape(label)}:</span> {html.escape(str(value))}</div>'


def render_critical_alert(item: FeedbackItem) -> str:
    body = "\n".join([
        "<p>New feedback with <strong>CRITICAL</strong> urgency was recorded.</p>",
        _info("ID", item.id),
        _info("Received", item.timestamp.isoformat()),
        _info("Score", f"{item.score}/10"),
        _info("Urgency", item.urgency.value),
        '<div class="info"><span class="label">Description:</span>'
        f'<p style="background-color: white; padding: 15px; border-left: 4px solid #dc3545;">'
        f"{html.escape(item.description)}</p></div>",
        "<p><strong>Recommended action:</strong> contact the customer as soon as possible.</p>",
    ])
    return _page("#dc3545", "Critical feedback received", body)


def _ranking_section(title: str, terms: Sequence[RankedTerm], empty_message: str) -> str:
    if not terms:
        rows = f'<div class="info empty">{html.escape(empty_message)}</div>'
    else:
        rows = "\n".join(
            f'<div class="info"><span class="label">"{html.escape(t.term)}":</span> {t.count} occurrences</div>'
            for t in terms
        )
    return f"<h2>{html.escape(title)}</h2>\n{rows}"


def render_weekly_report(report: WeeklyReport) -> str:
    urgency_rows = "\n".join(
        _info(urgency.value, f"{count} items") for urgency, count in report.count_by_urgency.items()
    ) or '<div class="info empty">No feedback in this period</div>'
    day_rows = "\n".join(_info(day, count) for day, count in report.count_by_day.items())

    body = "\n".join([
        f"<p><strong>Period:</strong> {report.window_start.isoformat()} to {report.window_end.isoformat()}</p>",
        f"<p><strong>Generated:</strong> {report.generated_at.isoformat()}</p>",
        "<h2>Overview</h2>",
        f'<div class="metric">{_info("Total feedback", report.total_count)}</div>',
        f'<div class="metric">{_info("Average score", f"{report.average_score:.2f} / 10")}</div>',
        f'<div class="metric">{_info("Highest score", report.max_score)}</div>',
        f'<div class="metric">{_info("Lowest score", report.min_score)}</div>',
        "<h2>By urgency</h2>",
        urgency_rows,
        *(["<h2>By day</h2>", day_rows] if day_rows else []),
        _ranking_section("Most recurring words", report.top_words, "No recurring words identified"),
        _ranking_section("Most recurring phrases", report.top_phrases, "No recurring phrases identified"),
    ])
    return _page("#007bff", "Weekly feedback report", body)
