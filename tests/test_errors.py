"""Tests for switchmap.errors — exception hierarchy."""

from switchmap.errors import InvalidArgument, InvalidOperation, SwitchMapError


class TestHierarchy:
    def test_invalid_argument_is_switchmap_error(self) -> None:
        assert issubclass(InvalidArgument, SwitchMapError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgument, ValueError)

    def test_invalid_operation_is_switchmap_error(self) -> None:
        assert issubclass(InvalidOperation, SwitchMapError)

    def test_invalid_operation_is_runtime_error(self) -> None:
        assert issubclass(InvalidOperation, RuntimeError)

    def test_message_preserved(self) -> None:
        err = InvalidOperation("Invalid operation; already prepared.")
        assert str(err) == "Invalid operation; already prepared."
