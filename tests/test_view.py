"""Tests for node views."""

import dataclasses

import pytest

from doublylinked.linkedlist import Node, dll
from doublylinked.view import NodeView


def test_view_of_none() -> None:
    """Test that wrapping a missing node gives no view."""
    assert NodeView.of(None) is None


def test_view_value() -> None:
    """Test reading the value behind a view."""
    view = NodeView.of(Node("payload"))
    assert view is not None
    assert view.value == "payload"


def test_view_immutability() -> None:
    """Test that views are immutable."""
    view = NodeView(node=Node(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.node = Node(2)  # type: ignore[misc]


def test_views_compare_by_node() -> None:
    """Test that two views on the same node are equal."""
    node = Node(1)
    assert NodeView(node) == NodeView(node)
    assert NodeView(node) != NodeView(Node(1))
    assert hash(NodeView(node)) == hash(NodeView(node))


def test_walk_forward_through_views() -> None:
    """Test following next() from the head to the tail."""
    lst = dll(1, 2, 3)
    seen = []
    view = lst.first()
    while view is not None:
        seen.append(view.value)
        view = view.next()

    assert seen == [1, 2, 3]


def test_walk_backward_through_views() -> None:
    """Test following prev() from the tail to the head."""
    lst = dll(1, 2, 3)
    seen = []
    view = lst.last()
    while view is not None:
        seen.append(view.value)
        view = view.prev()

    assert seen == [3, 2, 1]


def test_view_reflects_neighbor_changes() -> None:
    """Test that a view follows the list as neighbors change."""
    lst = dll("a", "b")
    head = lst.first()
    assert head is not None

    lst.pop_back()
    assert head.next() is None

    lst.push_back("c")
    following = head.next()
    assert following is not None
    assert following.value == "c"


def test_view_outlives_removal() -> None:
    """Test that a removed node still reports its value but no neighbors."""
    lst = dll(1, 2, 3)
    head = lst.first()
    assert head is not None

    assert lst.pop_front() == 1
    assert head.value == 1
    assert head.next() is None
    assert head.prev() is None
