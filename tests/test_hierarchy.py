"""Tests for parent/child delegation."""
import pytest

from automa import Automa, ConfigurationError


class TestDelegation:
    """Events signalled to a parent go to its child."""

    def test_child_intercepts_events(self):
        """Only the child's rule fires; the parent's state is frozen."""
        # Arrange
        parent = Automa("P")
        child = Automa("C")
        log = []
        parent.from_state("P").go_to("Q").when("E1").and_do(lambda: log.append("parent"))
        child.from_state("C").go_to("D").when("E1").and_do(lambda: log.append("child"))

        # Act
        parent.attach_child(child)
        parent.signal("E1")

        # Assert
        assert log == ["child"]
        assert parent.state == "P"
        assert child.state == "D"
        assert parent.child is child

    def test_child_without_matching_rule(self):
        """The parent table is not consulted even if the child ignores the event."""
        parent = Automa("P")
        child = Automa("C")
        log = []
        parent.from_state("P").go_to("Q").when("E1").and_do(lambda: log.append("parent"))
        parent.attach_child(child)

        parent.signal("E1")

        assert log == []
        assert parent.state == "P"
        assert child.state == "C"

    def test_delegation_ignores_parent_state(self):
        """Delegation is total: it applies whatever state the parent is in."""
        parent = Automa("P")
        child = Automa("C")
        parent.from_state("P").go_to("Q").when("go").and_do_nothing()
        child.stay_on("C").when("E1").and_do_nothing()
        parent.signal("go")
        assert parent.state == "Q"

        parent.attach_child(child)
        parent.signal("go")

        assert parent.state == "Q"

    def test_grandchild_receives_events(self):
        root = Automa("R")
        middle = Automa("M")
        leaf = Automa("L")
        leaf.from_state("L").go_to("L2").when("E1").and_do_nothing()
        middle.attach_child(leaf)
        root.attach_child(middle)

        root.signal("E1")

        assert leaf.state == "L2"
        assert middle.state == "M"
        assert root.state == "R"

    def test_child_action_signalling_parent_is_queued(self):
        """A child action that signals the parent is handled in FIFO order."""
        parent = Automa("P")
        child = Automa("C")
        order = []

        def first():
            order.append("first")
            parent.signal("E2")

        child.from_state("C").go_to("D").when("E1").and_do(first)
        child.from_state("D").go_to("F").when("E2").and_do(lambda: order.append("second"))
        parent.attach_child(child)

        parent.signal("E1")

        assert order == ["first", "second"]
        assert child.state == "F"
        assert parent.processing is False
        assert child.processing is False


class TestAttachChild:
    """Invalid attachments fail at attach time."""

    def test_second_child_raises(self):
        parent = Automa("P")
        parent.attach_child(Automa("C1"))
        with pytest.raises(ConfigurationError, match="already attached"):
            parent.attach_child(Automa("C2"))

    def test_self_attachment_raises(self):
        machine = Automa("P")
        with pytest.raises(ConfigurationError, match="cycle"):
            machine.attach_child(machine)
        assert machine.child is None

    def test_indirect_cycle_raises(self):
        a = Automa("A")
        b = Automa("B")
        b.attach_child(a)
        with pytest.raises(ConfigurationError, match="cycle"):
            a.attach_child(b)


class TestAttachFromAction:
    """Attaching a child from inside one of the parent's actions."""

    def test_current_transition_completes_then_events_forward(self):
        """The attaching transition still moves the parent, later events do not."""
        parent = Automa("P")
        child = Automa("C")
        parent.from_state("P").go_to("Q").when("E1").and_do(lambda: parent.attach_child(child))
        parent.from_state("Q").go_to("R").when("E1").and_do_nothing()
        child.from_state("C").go_to("D").when("E1").and_do_nothing()

        parent.signal("E1")
        assert parent.state == "Q"
        assert child.state == "C"

        parent.signal("E1")
        assert parent.state == "Q"
        assert child.state == "D"
