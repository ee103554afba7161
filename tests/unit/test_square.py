"""
Unit tests for Square.

Squares are read-only to callers: their kind is fixed at creation and
their marks change only through the owning Minefield.
"""
import pytest

from minefield import Minefield, Square


# ============================================================================
# Kind Tests
# ============================================================================

class TestSquareKind:
    """Test mine/field queries."""

    def test_default_square_is_empty_field(self) -> None:
        square = Square()
        assert square.is_mine is False
        assert square.number == 0
        assert square.is_empty is True

    def test_numbered_square(self) -> None:
        square = Square(5)
        assert square.is_mine is False
        assert square.number == 5
        assert square.is_empty is False

    def test_mine_has_no_number(self) -> None:
        square = Square.mine()
        assert square.is_mine is True
        assert square.number is None
        assert square.is_empty is False

    def test_new_square_is_covered(self) -> None:
        square = Square(2)
        assert square.is_revealed is False
        assert square.is_flagged is False
        assert square.to_observation() == -1

    def test_repr(self, strip_field: Minefield) -> None:
        strip_field.flag(1, 0)
        strip_field.reveal(0, 0)
        assert repr(strip_field.get_square(0, 0)) == "Square(field(1), revealed)"
        assert repr(strip_field.get_square(1, 0)) == "Square(mine, flagged)"


# ============================================================================
# Read-only Surface Tests
# ============================================================================

class TestSquareIsReadOnly:
    """Callers cannot change a square behind the field's back."""

    @pytest.mark.parametrize(
        "attribute,value",
        [
            ("is_mine", True),
            ("number", 3),
            ("is_revealed", True),
            ("is_flagged", True),
            ("adjacent_mines", 2),
        ],
    )
    def test_attributes_cannot_be_assigned(
        self, strip_field: Minefield, attribute: str, value: object
    ) -> None:
        square = strip_field.get_square(0, 0)
        with pytest.raises(AttributeError):
            setattr(square, attribute, value)
        assert strip_field.layout() == "1X\n"

    def test_no_public_mutators(self, strip_field: Minefield) -> None:
        square = strip_field.get_square(0, 0)
        assert not hasattr(square, "reveal")
        assert not hasattr(square, "toggle_flag")

    def test_returned_square_tracks_field_state(
        self, strip_field: Minefield
    ) -> None:
        """The square handed out reflects later changes made by the field."""
        square = strip_field.get_square(0, 0)
        strip_field.flag(0, 0)
        assert square.is_flagged is True
        strip_field.reveal(0, 0)
        assert square.is_revealed is True
        assert square.is_flagged is False
        assert strip_field.revealed == 1
        assert strip_field.flagged == 0
        assert strip_field.is_cleared is True


# ============================================================================
# Observation Tests
# ============================================================================

class TestSquareObservation:
    """Test observation codes as the field changes squares."""

    def test_flagged_observation(self, strip_field: Minefield) -> None:
        assert strip_field.flag(0, 0).to_observation() == -2

    def test_revealed_number_observation(
        self, center_field: Minefield
    ) -> None:
        assert center_field.reveal(2, 2).to_observation() == 1

    def test_revealed_mine_observation(self, strip_field: Minefield) -> None:
        assert strip_field.reveal(1, 0).to_observation() == 9

    def test_flag_hidden_after_reveal(self, strip_field: Minefield) -> None:
        """Flagging a revealed square keeps showing its number."""
        strip_field.reveal(0, 0)
        assert strip_field.flag(0, 0).to_observation() == 1
