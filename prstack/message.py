"""Commit and PR message sections.

A message is laid out as:

    Title line

    Summary text...

    Test Plan: ...
    Reviewers: foo, bar
    Pull Request: https://github.com/owner/repo/pull/2
    Stack:
    https://github.com/owner/repo/pull/2 <-- (current PR)
    https://github.com/owner/repo/pull/1
"""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .util import parse_name_list, remove_all_parens

# Get module logger
logger = logging.getLogger(__name__)


class MessageSection(str, Enum):
    TITLE = "Title"
    SUMMARY = "Summary"
    TEST_PLAN = "Test Plan"
    REVIEWERS = "Reviewers"
    REVIEWED_BY = "Reviewed By"
    PULL_REQUEST = "Pull Request"
    STACK = "Stack"


MessageSections = Dict[MessageSection, str]

DEFAULT_ORDER: List[MessageSection] = [
    MessageSection.TITLE,
    MessageSection.SUMMARY,
    MessageSection.TEST_PLAN,
    MessageSection.REVIEWERS,
    MessageSection.REVIEWED_BY,
    MessageSection.PULL_REQUEST,
    MessageSection.STACK,
]

_LABEL_RE = re.compile(r'^\s*([A-Za-z][A-Za-z ]*?)\s*:(.*)$')


def section_from_label(label: str) -> Optional[MessageSection]:
    """Look up a section by its label, ignoring case and extra spaces."""
    wanted = " ".join(label.split()).lower()
    for section in MessageSection:
        if section.value.lower() == wanted:
            return section
    return None


def parse_message(text: str, top_section: MessageSection = MessageSection.TITLE) -> MessageSections:
    """Split a message into its labelled sections."""
    sections: MessageSections = {}
    current = top_section
    lines: List[str] = []

    def flush() -> None:
        content = "\n".join(lines).strip()
        if not content:
            return
        if current in sections:
            sections[current] = f"{sections[current]}\n\n{content}"
        else:
            sections[current] = content

    for line in text.splitlines():
        match = _LABEL_RE.match(line)
        section = section_from_label(match.group(1)) if match else None

        if current is MessageSection.TITLE and section is None:
            if not line.strip():
                continue
            # Title is always exactly one line
            lines.append(line)
            flush()
            lines = []
            current = MessageSection.SUMMARY
            continue

        if match and section is not None:
            flush()
            current = section
            lines = [match.group(2)]
            continue

        lines.append(line)

    flush()
    logger.debug(f"Parsed message sections: {[s.value for s in sections]}")
    return sections


def build_message(sections: MessageSections, order: Sequence[MessageSection] = DEFAULT_ORDER) -> str:
    """Render sections back into message text, in the given order."""
    parts: List[str] = []
    for section in order:
        value = sections.get(section, "").strip()
        if not value:
            continue
        if section in (MessageSection.TITLE, MessageSection.SUMMARY):
            parts.append(value)
        elif "\n" in value:
            parts.append(f"{section.value}:\n{value}")
        else:
            parts.append(f"{section.value}: {value}")

    return "\n\n".join(parts)


def get_reviewers(sections: MessageSections) -> List[str]:
    """Names listed in the Reviewers section, without annotations."""
    return parse_name_list(sections.get(MessageSection.REVIEWERS, ""))


def format_name_list(names: Sequence[str]) -> str:
    """Join names for a Reviewers or Reviewed By section.

    Parentheses are stripped from each name so the result parses back to
    the same list.
    """
    cleaned = [remove_all_parens(name).strip() for name in names]
    return ", ".join(name for name in cleaned if name)
