"""Changelog presentation of a conventional-commit history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from modelhelper.console import format_table
from modelhelper.converter import Author, Commit, CommitHistory, CommitModel

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _format_date(moment: datetime | None) -> str:
    moment = moment or datetime.min
    return f"{moment.day:02d}-{_MONTHS[moment.month - 1]}-{moment.year:04d}"


@dataclass
class AuthorRenderer:
    """A table of the authors in a commit history."""

    authors: dict[str, Author] = field(default_factory=dict)

    def header(self) -> list[str]:
        return ["Name", "Commits", "First", "Last"]

    def rows(self) -> list[list[str]]:
        return [
            [
                author.name,
                f"{author.commits:,d}",
                _format_date(author.first),
                _format_date(author.last),
            ]
            for author in self.authors.values()
        ]


def convert_to_model(history: CommitHistory) -> CommitModel:
    """Pick the features, fixes, refactors and breaking changes of a history."""
    messages = history.messages
    return CommitModel(
        features=list(messages.get("feat") or []),
        refactors=list(messages.get("refactor") or []),
        fixes=list(messages.get("fixes") or []),
        breaking_changes=[
            commit
            for commits in messages.values()
            for commit in commits
            if commit.is_breaking_change
        ],
        authors=history.authors,
    )


def format_commit_list(title: str, commits: Iterable[Commit]) -> str:
    """Return a titled bullet list of commits, or nothing when there are none."""
    commits = list(commits or [])
    if not commits:
        return ""
    lines = [f"{title}\n\n"]
    for commit in commits:
        scope = f"({commit.scope}): " if commit.scope else ""
        lines.append(f"\t* {scope}{commit.title}\n")
    return "".join(lines)


def format_commits(model: CommitModel) -> str:
    """Return the whole changelog text, ending with the author table."""
    return "".join(
        [
            format_commit_list("Features", model.features),
            format_commit_list("Fixes", model.fixes),
            format_commit_list("Refactors", model.refactors),
            format_commit_list("BREAKING CHANGES", model.breaking_changes),
            "\nAuthors\n\n",
            format_table(AuthorRenderer(model.authors)),
            "\n",
        ]
    )


def print_commits(model: CommitModel) -> None:
    """Print the changelog of ``model``."""
    print(format_commits(model), end="")