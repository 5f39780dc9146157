# ui/summary_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from markdown import markdown

from domain.models import SessionState, TimerStatus

STATUS_LABEL = {
    TimerStatus.IDLE: "Ready",
    TimerStatus.RUNNING: "Resting",
    TimerStatus.FINISHED: "Next set!",
}


@dataclass(frozen=True)
class SummaryTheme:
    text: str = "#111827"
    muted: str = "#6B7280"
    border: str = "#E5E7EB"
    panel: str = "#FFFFFF"
    done: str = "#10B981"


class SummaryRenderer:
    """
    Single responsibility:
    - Build the session summary as Markdown (sets checklist + rest info)
    - Convert it to HTML for tkinterweb

    tkhtml cannot render <input> checkboxes, so "- [x]" list items are
    turned into unicode boxes before conversion.
    """

    def __init__(self, theme: Optional[SummaryTheme] = None):
        self.theme = theme or SummaryTheme()

    def to_markdown(self, state: SessionState) -> str:
        lines: List[str] = [
            "### Session",
            "",
            "| Item | Value |",
            "|---|---|",
            f"| Sets | {state.count} / {state.total_sets} |",
            f"| Rest | {state.timer_text} |",
            f"| Status | {STATUS_LABEL[state.timer_status]} |",
            "",
        ]
        for i in range(1, state.total_sets + 1):
            mark = "x" if i <= state.count else " "
            lines.append(f"- [{mark}] Set {i}")

        extra = state.count - state.total_sets
        if extra > 0:
            lines.append("")
            lines.append(f"*+{extra} bonus set{'s' if extra > 1 else ''}*")
        return "\n".join(lines)

    def preprocess(self, md_text: str) -> str:
        task_unchecked = re.compile(r"^(\s*[-*+]\s+)\[ \]\s+", re.MULTILINE)
        task_checked = re.compile(r"^(\s*[-*+]\s+)\[(x|X)\]\s+", re.MULTILINE)
        md_text = task_checked.sub(r"\1☑ ", md_text)
        return task_unchecked.sub(r"\1☐ ", md_text)

    def css(self) -> str:
        t = self.theme
        return f"""
        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 10px;
          color: {t.text};
          background: {t.panel};
          font-size: 13px;
        }}
        h3 {{ margin: 0.2em 0 0.5em; font-size: 1.08em; }}
        table {{ border-collapse: collapse; width: 100%; margin: 0.4em 0; }}
        td {{ border: 1px solid {t.border}; padding: 4px 8px; }}
        ul {{ padding-left: 1.2em; margin: 0.4em 0; }}
        li {{ margin: 0.15em 0; }}
        em {{ color: {t.done}; }}
        """

    def to_html(self, state: SessionState) -> str:
        body = markdown(
            self.preprocess(self.to_markdown(state)),
            extensions=["extra", "sane_lists"],
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """
