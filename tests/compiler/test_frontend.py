# Copyright 2026 HyperLIR Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for decoding parse trees and running the external parser."""

import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest

from hyperlir.compiler.frontend import ParseError, make_parser, parse_declarations, run_parser
from hyperlir.model.declarations import ArrayDecl, RuleDecl, RuleRef, StateDecl, Triple

_TREE = """
[
  {"type": "array", "name": "foo", "value": [["x", "y"], ["a", "b", "c"]]},
  {"type": "rule", "name": "grow", "body": {
      "type": "triple",
      "L": {"type": "inline", "value": ["X"]},
      "I": {"type": "inline", "value": ["Y", "Z"]},
      "R": {"type": "inline", "value": ["W"]}}},
  {"type": "state", "name": "s", "source": "foo", "rule": {"type": "ruleRef", "name": "grow"}, "count": 3}
]
"""

# ###############
# parse_declarations
# ###############


class TestParseDeclarations:
    def test_decodes_tree_in_order(self) -> None:
        decls = parse_declarations(_TREE)
        assert [type(d) for d in decls] == [ArrayDecl, RuleDecl, StateDecl]
        assert isinstance(decls[1].body, Triple)
        assert decls[2].rule == RuleRef(name="grow")

    def test_empty_tree(self) -> None:
        assert parse_declarations("[]") == []

    def test_invalid_json(self) -> None:
        with pytest.raises(ParseError, match="Invalid declaration tree"):
            parse_declarations("[{")

    def test_unknown_node_type(self) -> None:
        with pytest.raises(ParseError):
            parse_declarations('[{"type": "macro", "name": "m"}]')

    def test_missing_name(self) -> None:
        with pytest.raises(ParseError):
            parse_declarations('[{"type": "array", "value": []}]')

    def test_negative_count(self) -> None:
        with pytest.raises(ParseError):
            parse_declarations(
                '[{"type": "state", "name": "s", "source": "a", "rule": {"type": "inline", "value": []}, "count": -2}]'
            )


# ###############
# run_parser
# ###############


class TestRunParser:
    def test_source_is_piped_through_command(self) -> None:
        """A parser that echoes its input turns a JSON tree into declarations."""
        command = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read())"]
        decls = run_parser(command, _TREE)
        assert len(decls) == 3

    def test_non_zero_exit_reports_stderr(self) -> None:
        failed = MagicMock(returncode=1, stdout="", stderr="Expected ';' at line 1\n")
        with patch("hyperlir.compiler.frontend.subprocess.run", return_value=failed):
            with pytest.raises(ParseError, match="Expected ';' at line 1"):
                run_parser(["parse"], "foo = (x")

    def test_missing_executable(self) -> None:
        with patch("hyperlir.compiler.frontend.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(ParseError, match="not found: parse"):
                run_parser(["parse"], "")

    def test_timeout(self) -> None:
        with patch(
            "hyperlir.compiler.frontend.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="parse", timeout=1),
        ):
            with pytest.raises(ParseError, match="timed out"):
                run_parser(["parse"], "", timeout=1)

    def test_empty_command(self) -> None:
        with pytest.raises(ParseError, match="No parser command"):
            run_parser([], "")


# ###############
# make_parser
# ###############


class TestMakeParser:
    def test_without_command_decodes_json(self) -> None:
        assert make_parser(None) is parse_declarations
        assert make_parser([]) is parse_declarations

    def test_with_command_runs_it(self) -> None:
        ok = MagicMock(returncode=0, stdout="[]", stderr="")
        with patch("hyperlir.compiler.frontend.subprocess.run", return_value=ok) as run:
            assert make_parser(["parse", "--json"])("foo = (x);") == []
        assert run.call_args.args[0] == ["parse", "--json"]
        assert run.call_args.kwargs["input"] == "foo = (x);"
