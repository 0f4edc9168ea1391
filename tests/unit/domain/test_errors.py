from __future__ import annotations

"""
Unit tests for the namespace error model.
"""

from nametree.domain.errors import (
    ErrorKind,
    NameTreeError,
    NilArgumentError,
    NodeNotFoundError,
    TreeDescriptionError,
)


def test_nil_argument_context():
    err = NilArgumentError("file1", "find_parent")

    assert isinstance(err, NameTreeError)
    assert err.kind is ErrorKind.NIL_ARGUMENT
    assert err.argument == "file1"
    assert err.operation == "find_parent"
    assert "file1" in str(err)


def test_not_found_context():
    err = NodeNotFoundError("g", "root")

    assert err.kind is ErrorKind.NOT_FOUND
    assert err.target == "g"
    assert err.root == "root"
    assert str(err) == "node 'g' not found under 'root'"


def test_not_found_message_override():
    err = NodeNotFoundError("g", message="custom")
    assert str(err) == "custom"
    assert err.root is None


def test_description_error_location_prefix():
    err = TreeDescriptionError("unknown id 'q'", "root.link")

    assert err.kind is ErrorKind.INVALID_DESCRIPTION
    assert err.location == "root.link"
    assert str(err) == "root.link: unknown id 'q'"
