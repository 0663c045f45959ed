"""Unit tests for commit message sections."""

from prstack.message import (
    MessageSection, build_message, format_name_list, get_reviewers, parse_message, section_from_label
)
from prstack.spr import build_pr_stack_message
from prstack.util import parse_pr_stack_list


MESSAGE = """Add frobnicator

Adds the frobnicator and wires it into the widget.

It is off by default.

Test Plan: ran the widget tests
Reviewers: alice (Alice A), bob
Pull Request: https://github.com/owner/repo/pull/12
Stack:
https://github.com/owner/repo/pull/12 <-- (current PR)
https://github.com/owner/repo/pull/11
"""


class TestSectionFromLabel:
    """Tests for section_from_label."""

    def test_known_labels(self) -> None:
        assert section_from_label("Stack") is MessageSection.STACK
        assert section_from_label("test plan") is MessageSection.TEST_PLAN
        assert section_from_label("Reviewed   By") is MessageSection.REVIEWED_BY

    def test_unknown_label(self) -> None:
        assert section_from_label("https") is None
        assert section_from_label("Note") is None


class TestParseMessage:
    """Tests for parse_message."""

    def test_all_sections(self) -> None:
        sections = parse_message(MESSAGE)
        assert sections[MessageSection.TITLE] == "Add frobnicator"
        assert sections[MessageSection.SUMMARY] == (
            "Adds the frobnicator and wires it into the widget.\n\nIt is off by default."
        )
        assert sections[MessageSection.TEST_PLAN] == "ran the widget tests"
        assert sections[MessageSection.REVIEWERS] == "alice (Alice A), bob"
        assert sections[MessageSection.PULL_REQUEST] == "https://github.com/owner/repo/pull/12"
        assert parse_pr_stack_list(sections[MessageSection.STACK]) == [12, 11]

    def test_title_only(self) -> None:
        assert parse_message("\n\n  Just a title  \n") == {MessageSection.TITLE: "Just a title"}

    def test_empty(self) -> None:
        assert parse_message("") == {}

    def test_title_with_colon_is_not_a_section(self) -> None:
        sections = parse_message("Fix: handle empty input\n\nBody text")
        assert sections[MessageSection.TITLE] == "Fix: handle empty input"
        assert sections[MessageSection.SUMMARY] == "Body text"

    def test_unknown_labels_stay_in_summary(self) -> None:
        sections = parse_message("Title\n\nNote: this is not a section\nReviewers: carol")
        assert sections[MessageSection.SUMMARY] == "Note: this is not a section"
        assert sections[MessageSection.REVIEWERS] == "carol"

    def test_empty_section_is_omitted(self) -> None:
        sections = parse_message("Title\n\nTest Plan:\nReviewers: dave")
        assert MessageSection.TEST_PLAN not in sections
        assert sections[MessageSection.REVIEWERS] == "dave"

    def test_summary_top_section(self) -> None:
        """PR bodies have no title line."""
        sections = parse_message("Some body\n\nStack:\nhttps://h/o/r/pull/3", top_section=MessageSection.SUMMARY)
        assert MessageSection.TITLE not in sections
        assert sections[MessageSection.SUMMARY] == "Some body"
        assert sections[MessageSection.STACK] == "https://h/o/r/pull/3"


class TestBuildMessage:
    """Tests for build_message."""

    def test_layout(self) -> None:
        sections = {
            MessageSection.STACK: "https://h/o/r/pull/2 <-- (current PR)\nhttps://h/o/r/pull/1",
            MessageSection.TITLE: "Title",
            MessageSection.REVIEWERS: "alice, bob",
            MessageSection.SUMMARY: "Summary",
        }
        assert build_message(sections) == (
            "Title\n\n"
            "Summary\n\n"
            "Reviewers: alice, bob\n\n"
            "Stack:\n"
            "https://h/o/r/pull/2 <-- (current PR)\n"
            "https://h/o/r/pull/1"
        )

    def test_skips_blank_sections(self) -> None:
        assert build_message({MessageSection.TITLE: "T", MessageSection.SUMMARY: "  "}) == "T"

    def test_parse_reverses_build(self) -> None:
        sections = parse_message(MESSAGE)
        assert parse_message(build_message(sections)) == sections

    def test_stack_survives_round_trip(self) -> None:
        for numbers in ([1], [7, 3], [30, 20, 10, 20]):
            stack = build_pr_stack_message(numbers, "my-org", "my.repo")
            text = build_message({MessageSection.TITLE: "Change", MessageSection.STACK: stack})
            decoded = parse_pr_stack_list(parse_message(text)[MessageSection.STACK])
            assert decoded == numbers


class TestReviewers:
    """Tests for reviewer helpers."""

    def test_get_reviewers(self) -> None:
        assert get_reviewers(parse_message(MESSAGE)) == ["alice", "bob"]

    def test_get_reviewers_missing(self) -> None:
        assert get_reviewers({MessageSection.TITLE: "x"}) == []

    def test_format_name_list(self) -> None:
        assert format_name_list(["alice", "(bob)", " ", "carol (C)"]) == "alice, bob, carol C"

    def test_format_then_parse(self) -> None:
        names = ["alice", "bob", "carol"]
        assert get_reviewers({MessageSection.REVIEWERS: format_name_list(names)}) == names
