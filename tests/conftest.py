"""Shared sample documents for the yaml-node-path test suite."""

from __future__ import annotations

import pytest

from yaml_node_path import Node, load_document

SAMPLE_YAML = """
clients:
  - name: first_client
    surname: first_surname
  - name: second_client
    surname: second_surname
servers:
  server1:
    host: server1.local
    port: 9001
  server2:
    host: server2.local
    port: 9002
ints:
  - 10
  - 20
  - 30
"""

LIST_YAML = """
- 10
- 20
"""


@pytest.fixture
def root() -> Node:
    """A fresh copy of the sample document for each test."""
    return load_document(SAMPLE_YAML)


@pytest.fixture
def root_list() -> Node:
    """A document whose root content is a two-element sequence."""
    return load_document(LIST_YAML)


@pytest.fixture
def root_empty() -> Node:
    """A document parsed from empty text."""
    return load_document("")
