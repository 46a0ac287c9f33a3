"""pytest plugin for yaml-node-path.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from yaml_node_path import Node, YamlPathError, get_value, load_document
from yaml_node_path.tree.tokens import format_path


@pytest.fixture(scope="session")
def yaml_document() -> Any:
    """Fixture that returns a callable parsing YAML text into a Node tree.

    Usage in tests::

        def test_port(yaml_document):
            root = yaml_document("server: {port: 9001}")
            assert get_value(root, "server", "port") == 9001

    Returns:
        ``load_document``; a callable ``_load(text) -> Node``.
    """
    return load_document


@pytest.fixture(scope="session")
def assert_yaml_value() -> Any:
    """Fixture that returns a callable asserting the value at a path.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to get_value() which creates a fresh YamlNavigator per call).

    Usage in tests::

        def test_host(yaml_document, assert_yaml_value):
            root = yaml_document("servers: {s1: {host: s1.local}}")
            assert_yaml_value(root, ["servers", "s1", "host"], "s1.local")

    Returns:
        A callable ``_assert(root, keys, expected, as_type=Any) -> None`` that
        raises ``AssertionError`` when the path does not resolve or the value
        differs from ``expected``.
    """

    def _assert(
        root: Node | str,
        keys: list[str],
        expected: Any,
        as_type: Any = Any,
    ) -> None:
        """Assert that the value at ``keys`` equals ``expected``.

        Args:
            root:     A Node tree, or YAML text that is parsed first.
            keys:     Path tokens.
            expected: The expected decoded value.
            as_type:  Type to decode into before comparing.

        Raises:
            AssertionError: When the lookup fails (message names the error
                kind) or the decoded value differs.
        """
        if isinstance(root, str):
            root = load_document(root)
        path = format_path(keys)
        try:
            actual = get_value(root, *keys, as_type=as_type)
        except YamlPathError as exc:
            raise AssertionError(
                f"YAML path {path!r} could not be read: {type(exc).__name__}: {exc}"
            ) from exc
        if actual != expected:
            raise AssertionError(
                f"YAML value mismatch at {path!r}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert
