from datetime import datetime

from modelhelper.changelog import (
    AuthorRenderer,
    convert_to_model,
    format_commit_list,
    format_commits,
    print_commits,
)
from modelhelper.converter import Author, Commit, CommitHistory


def _history():
    feat = Commit(type="feat", scope="api", title="add endpoint")
    breaking = Commit(type="feat", title="drop v1", is_breaking_change=True)
    fix = Commit(type="fix", title="fix crash")
    fixes = Commit(type="fixes", title="fix typo")
    refactor = Commit(type="refactor", scope="db", title="tidy queries")
    return CommitHistory(
        name="demo",
        messages={
            "feat": [feat, breaking],
            "fix": [fix],
            "fixes": [fixes],
            "refactor": [refactor],
        },
        authors={
            "Ann": Author(
                name="Ann",
                commits=1234,
                first=datetime(2021, 3, 5),
                last=datetime(2022, 1, 9),
            )
        },
    )


def test_author_renderer_header():
    assert AuthorRenderer({}).header() == ["Name", "Commits", "First", "Last"]


def test_author_renderer_rows():
    rows = AuthorRenderer(_history().authors).rows()
    assert len(rows) == 1
    name, commits, first, _last = rows[0]
    assert name == "Ann"
    assert commits == "1,234"
    assert first == "05-Mar-2021"


def test_convert_to_model_uses_fixes_key():
    model = convert_to_model(_history())
    assert [c.title for c in model.fixes] == ["fix typo"]
    assert [c.title for c in model.features] == ["add endpoint", "drop v1"]
    assert [c.title for c in model.refactors] == ["tidy queries"]
    assert [c.title for c in model.breaking_changes] == ["drop v1"]
    assert set(model.authors) == {"Ann"}


def test_format_commit_list_empty():
    assert format_commit_list("Features", []) == ""


def test_format_commit_list_scope():
    history = _history()
    text = format_commit_list("Features", history.messages["feat"])
    assert text.startswith("Features\n\n")
    assert "\t* (api): add endpoint\n" in text
    assert "\t* drop v1\n" in text


def test_format_commits_sections_and_authors():
    text = format_commits(convert_to_model(_history()))
    assert text.index("Features") < text.index("Fixes") < text.index("Refactors")
    assert "BREAKING CHANGES" in text
    assert "\nAuthors\n\n" in text
    assert "Ann" in text


def test_print_commits(capsys):
    model = convert_to_model(_history())
    print_commits(model)
    assert capsys.readouterr().out == format_commits(model)