"""Unit tests for the argument parser module in dirtree CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from dirtree.cli.argparser import build_config, create_exclusion_action, create_parser, validate_args
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.types import TreeFormat


@pytest.fixture
def mock_exclusion_rules():
    mock_rules = MagicMock(spec=GitIgnoreExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


@pytest.fixture
def parser(mock_exclusion_rules):
    return create_parser(mock_exclusion_rules)


def test_create_exclusion_action():
    ExclusionAction = create_exclusion_action(MagicMock())
    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"


def test_defaults(parser):
    args = parser.parse_args([])

    assert args.directory == Path(".")
    assert args.depth is None
    assert not args.all
    assert not args.skip_hidden
    assert args.skip_dir is None
    assert args.skip_file is None
    assert args.exclude is None
    assert args.ignore is None
    assert not args.ascii
    assert not args.follow_symlinks
    assert args.output is None
    assert args.summary is None
    assert args.tokenizer is None
    assert not args.verbose


def test_all_options(parser, tmp_path):
    args = parser.parse_args(
        [
            str(tmp_path),
            "-d",
            "2",
            "-a",
            "-H",
            "-x",
            "build",
            "--skip-dir",
            "dist",
            "-X",
            "README.md",
            "-A",
            "-L",
            "-o",
            "out.txt",
            "-s",
            "file",
            "-t",
            "gpt-4",
            "-v",
        ]
    )

    assert args.directory == tmp_path
    assert args.depth == 2
    assert args.all
    assert args.skip_hidden
    assert args.skip_dir == ["build", "dist"]
    assert args.skip_file == ["README.md"]
    assert args.ascii
    assert args.follow_symlinks
    assert args.output == Path("out.txt")
    assert args.summary == "file"
    assert args.tokenizer == "gpt-4"
    assert args.verbose


def test_exclusion_order_preserved(parser, mock_exclusion_rules):
    args = parser.parse_args(["-i", "*.pyc", "-e", "rules.txt", "-i", "!keep.pyc"])

    assert mock_exclusion_rules.mock_calls == [
        call.add_rule("*.pyc"),
        call.load_rules(Path("rules.txt")),
        call.add_rule("!keep.pyc"),
    ]
    assert args.ignore == ["*.pyc", "!keep.pyc"]
    assert args.exclude == [Path("rules.txt")]


def test_exclusion_with_real_rules(tmp_path):
    rules_file = tmp_path / "rules.txt"
    rules_file.write_text("*.log\n")
    rules = GitIgnoreExclusionRules()

    create_parser(rules).parse_args(["-e", str(rules_file), "-i", "!keep.log"])

    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_invalid_depth(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-d", "deep"])
    assert excinfo.value.code == 2
    assert "invalid int value" in capsys.readouterr().err


def test_invalid_summary_destination(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-s", "printer"])
    assert excinfo.value.code == 2


def test_version_option(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-V"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("dirtree ")


def test_validate_args_summary_file_requires_output(parser):
    with pytest.raises(ValueError, match="requires -o/--output"):
        validate_args(parser.parse_args(["-s", "file"]))

    validate_args(parser.parse_args(["-s", "file", "-o", "out.txt"]))


def test_validate_args_tokenizer_requires_summary(parser):
    with pytest.raises(ValueError, match="requires -s/--summary"):
        validate_args(parser.parse_args(["-t", "gpt-4"]))

    validate_args(parser.parse_args(["-t", "gpt-4", "-s", "stderr"]))


def test_build_config_defaults(parser):
    config = build_config(parser.parse_args([]), GitIgnoreExclusionRules())

    assert config.max_depth is None
    assert config.skip_common
    assert not config.skip_hidden
    assert config.custom_skip_dirs == ()
    assert config.custom_skip_files == ()
    assert config.render_format is TreeFormat.UNICODE
    assert not config.follow_symlinks
    # No patterns were given, so the empty rules are not attached
    assert config.exclusion_rules is None


def test_build_config_options(parser):
    rules = GitIgnoreExclusionRules()
    args = parser.parse_args(["-d", "3", "-a", "-H", "-x", "build", "-X", "notes.txt", "-A", "-L", "-i", "*.tmp"])
    config = build_config(args, rules)

    assert config.max_depth == 3
    assert not config.skip_common
    assert config.skip_hidden
    assert config.custom_skip_dirs == ("build",)
    assert config.custom_skip_files == ("notes.txt",)
    assert config.render_format is TreeFormat.ASCII
    assert config.follow_symlinks
    assert config.exclusion_rules is rules


def test_build_config_rejects_invalid_skip_name(parser):
    with pytest.raises(ValueError):
        build_config(parser.parse_args(["-x", "a/b"]))
