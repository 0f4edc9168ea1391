from __future__ import annotations

"""
CLI Argument Definition.

Defines the command-line interface schema: the two names to relate, the
tree source, and the output and diagnostic switches.
"""

import argparse

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the nametree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="nametree",
        description="Find the closest common parent directory of two names "
                    "in a namespace with aliases and soft links.",
    )

    # --- Query ---
    p.add_argument("first", help="Name of the first node (aliases and soft links are followed).")
    p.add_argument("second", help="Name of the second node.")

    # --- Tree Source ---
    p.add_argument(
        "-t", "--tree",
        dest="tree_file",
        default=None,
        help="JSON tree description. Uses the built-in demo tree when omitted.",
    )

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the namespace before the result.",
    )
    p.add_argument(
        "--dump-tree",
        action="store_true",
        help="Print the tree description as JSON and exit.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the query result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )

    return p
