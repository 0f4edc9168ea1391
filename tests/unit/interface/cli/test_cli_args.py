from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.
"""

import pytest

from nametree.interface.cli.args import build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_cli_positional_names():
    args = parse_args(["b", "d"])

    assert args.first == "b"
    assert args.second == "d"
    assert args.tree_file is None
    assert args.print_tree is False
    assert args.dump_tree is False
    assert args.json_output is False
    assert args.debug is False
    assert args.log_file is None


def test_cli_flags_mapping():
    args = parse_args([
        "x", "f",
        "-t", "/trees/demo.json",
        "--print-tree",
        "--json",
        "--debug",
        "--log-file", "/tmp/nametree.log",
    ])

    assert args.tree_file == "/trees/demo.json"
    assert args.print_tree is True
    assert args.json_output is True
    assert args.debug is True
    assert args.log_file == "/tmp/nametree.log"


def test_cli_requires_two_names():
    with pytest.raises(SystemExit):
        parse_args(["only-one"])
