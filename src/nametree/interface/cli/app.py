from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, tree description
loading, namespace construction, query execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from nametree.core.builder import build_namespace
from nametree.core.query import run_query
from nametree.core.renderer import render_namespace
from nametree.domain.config import get_default_tree_description, load_tree_description
from nametree.domain.errors import TreeDescriptionError
from nametree.domain.query_models import QueryResult
from nametree.infra.logging import LoggingConfig, configure_logging, get_logger
from nametree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 when the query fails, 2 when the tree
             description is unusable, 130 when interrupted.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Tree description
    try:
        description = _load_description(args.tree_file)
    except TreeDescriptionError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.dump_tree:
        print(json.dumps(description, ensure_ascii=False, indent=2))
        return 0

    # 4. Namespace construction and query
    try:
        namespace, root = build_namespace(description)
        if args.print_tree:
            print("\n".join(render_namespace(namespace, root)))
        result = run_query(namespace, root, args.first, args.second)
    except TreeDescriptionError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _load_description(tree_file: Optional[str]) -> Dict[str, Any]:
    if tree_file:
        logger.debug(f"Loading tree description: {tree_file}")
        return load_tree_description(tree_file)
    return get_default_tree_description()


def _print_human_summary(result: QueryResult) -> None:
    if result.ok:
        print(f"The closest common parent directory is: {result.parent_name}")
    else:
        print(result.error)
