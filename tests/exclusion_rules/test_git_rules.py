from pathlib import Path

import pytest

from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def temp_gitignore(tmp_path):
    gitignore = tmp_path / "rules.gitignore"
    gitignore.write_text("*.log\n!keep.log\nbuild/\n*.py[cod]\n**/__snapshots__/\n")
    return str(gitignore)


@pytest.fixture
def temp_extra_ignore(tmp_path):
    extra = tmp_path / "extra.ignore"
    extra.write_text("dist/\nkeep.log\n")
    return str(extra)


@pytest.mark.parametrize(
    "path,expected",
    [
        # Files anywhere in the tree
        ("debug.log", True),
        ("logs/debug.log", True),
        ("keep.log", False),
        ("module.pyc", True),
        ("module.py", False),
        # Directory patterns only match directory paths (trailing slash)
        ("build/", True),
        ("src/build/", True),
        ("build", False),
        ("build2/", False),
        ("tests/__snapshots__/", True),
        ("tests/__snapshots__/a.snap", True),
    ],
)
def test_gitignore_exclusion_rules(temp_gitignore, path, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_gitignore_exclusion_rules_empty_file(tmp_path):
    empty = tmp_path / "empty.gitignore"
    empty.touch()
    rules = GitIgnoreExclusionRules(str(empty))
    assert not rules.exclude("any_file.txt")
    assert not rules.has_rules()


def test_gitignore_exclusion_rules_nonexistent_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(str(tmp_path / "nonexistent_file"))


def test_load_rules_order_matters(temp_gitignore, temp_extra_ignore):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert not rules.exclude("keep.log")

    # A later plain pattern overrides the earlier negation
    rules.load_rules(temp_extra_ignore)
    assert rules.exclude("keep.log")
    assert rules.exclude("dist/")


def test_input_type_handling(temp_gitignore):
    assert GitIgnoreExclusionRules(temp_gitignore).exclude("a.log")
    assert GitIgnoreExclusionRules(Path(temp_gitignore)).exclude("a.log")
    assert GitIgnoreExclusionRules([temp_gitignore]).exclude("a.log")
    assert not GitIgnoreExclusionRules(None).exclude("a.log")


def test_add_rule():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()

    rules.add_rule("*.tmp")
    assert rules.has_rules()
    assert rules.exclude("scratch.tmp")
    assert not rules.exclude("scratch.txt")

    rules.add_rule("!important.tmp")
    assert not rules.exclude("important.tmp")


def test_add_rule_mixed_with_files(temp_gitignore):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.md")
    rules.load_rules(temp_gitignore)
    rules.add_rule("!CHANGELOG.md")

    assert rules.exclude("README.md")
    assert not rules.exclude("CHANGELOG.md")
    assert rules.exclude("build/")


def test_base_rules_optional_capabilities():
    class SuffixRules(BaseExclusionRules):
        def exclude(self, path: str) -> bool:
            return path.endswith(".bak")

    rules = SuffixRules()
    assert rules.exclude("old.bak")

    with pytest.raises(NotImplementedError):
        rules.add_rule("*.bak")
    with pytest.raises(NotImplementedError):
        rules.load_rules("rules.txt")


def test_base_rules_is_abstract():
    with pytest.raises(TypeError):
        BaseExclusionRules()  # type: ignore[abstract]
