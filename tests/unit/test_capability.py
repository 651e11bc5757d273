"""
Unit Tests for Capability Composition.

Test Aspects Covered:
    ✅ Business Logic: Explicit override, most-specific default, delegation
    ✅ Error Handling: Ambiguous composition fails at class creation
    ✅ Edge Cases: Base order independence, inherited resolutions
"""

from __future__ import annotations

import pytest

from task_query.composition.capability import (
    Capability,
    default,
    default_of,
    is_default,
    resolve_default,
)
from task_query.errors import AmbiguousComposition, InvalidArgument


class Greeter(Capability):
    @default
    def do_sth(self) -> str:
        return "inside Greeter"


class Base(Capability):
    @default
    def do_sth(self) -> str:
        return "inside Base"


class Refined(Base):
    @default
    def do_sth(self) -> str:
        return "inside Refined"


class Left(Capability):
    @default
    def do_sth(self) -> str:
        return "inside Left"


class Right(Capability):
    @default
    def do_sth(self) -> str:
        return "inside Right"


class TestExplicitImplementation:
    """An implementation in the class body always wins."""

    def test_own_implementation_wins(self) -> None:
        class Own(Greeter):
            def do_sth(self) -> str:
                return "inside Own"

        assert Own().do_sth() == "inside Own"
        assert resolve_default(Own, "do_sth") is Own

    def test_single_default_inherited(self) -> None:
        class Plain(Greeter):
            pass

        assert Plain().do_sth() == "inside Greeter"
        assert resolve_default(Plain, "do_sth") is Greeter


class TestRefinement:
    """The most specific default wins without an override."""

    def test_refined_default_wins(self) -> None:
        """
        SCENARIO: Class composes Refined, which extends Base
        EXPECTED: Refined's default is used
        """
        class Composed(Refined, Base):
            pass

        assert Composed().do_sth() == "inside Refined"
        assert resolve_default(Composed, "do_sth") is Refined

    def test_refinement_independent_of_base_order(self) -> None:
        """
        SCENARIO: A mixin listed before the refined capability inherits Base
        EXPECTED: Refined still wins, not the first base in declaration order
        """
        class BaseMixin(Base):
            pass

        class Composed(BaseMixin, Refined):
            pass

        assert Composed().do_sth() == "inside Refined"
        assert resolve_default(Composed, "do_sth") is Refined

    def test_resolution_inherited_by_subclasses(self) -> None:
        class Composed(Refined, Base):
            pass

        class Child(Composed):
            pass

        assert Child().do_sth() == "inside Refined"
        assert resolve_default(Child, "do_sth") is Refined


class TestAmbiguousComposition:
    """Unrelated defaults require an explicit implementation."""

    def test_unrelated_defaults_fail_at_class_creation(self) -> None:
        """
        SCENARIO: Class composes Left and Right, both defaulting do_sth
        EXPECTED: AmbiguousComposition raised by the class statement
        """
        with pytest.raises(AmbiguousComposition) as exc_info:
            class Both(Left, Right):
                pass

        error = exc_info.value
        assert error.operation == "do_sth"
        assert set(error.candidates) == {"Left", "Right"}
        assert "Both" in str(error)

    def test_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            class Both(Right, Left):
                pass

    def test_qualified_delegation_resolves_conflict(self) -> None:
        """
        SCENARIO: Class overrides do_sth and delegates to Right by name
        EXPECTED: Right's default runs
        """
        class Both(Left, Right):
            def do_sth(self) -> str:
                return Right.do_sth(self)

        assert Both().do_sth() == "inside Right"

    def test_delegation_helper(self) -> None:
        class Both(Left, Right):
            def do_sth(self) -> str:
                return default_of(Left, "do_sth")(self)

        assert Both().do_sth() == "inside Left"

    def test_override_may_combine_both(self) -> None:
        class Both(Left, Right):
            def do_sth(self) -> str:
                return f"{Left.do_sth(self)} + {Right.do_sth(self)}"

        assert Both().do_sth() == "inside Left + inside Right"

    def test_override_inherited_by_subclass(self) -> None:
        class Both(Left, Right):
            def do_sth(self) -> str:
                return "resolved"

        class Child(Both):
            pass

        assert Child().do_sth() == "resolved"
        assert resolve_default(Child, "do_sth") is Both

    def test_inherited_implementation_beats_default(self) -> None:
        """
        SCENARIO: A plain class implements do_sth and is composed after Left
        EXPECTED: The implementation wins over Left's default
        """
        class Impl(Capability):
            def do_sth(self) -> str:
                return "inside Impl"

        class Composed(Left, Impl):
            pass

        assert Composed().do_sth() == "inside Impl"
        assert resolve_default(Composed, "do_sth") is Impl

    def test_default_refining_implementation_wins(self) -> None:
        class Impl(Capability):
            def do_sth(self) -> str:
                return "inside Impl"

        class RefinedImpl(Impl):
            @default
            def do_sth(self) -> str:
                return "inside RefinedImpl"

        class Composed(RefinedImpl):
            pass

        assert Composed().do_sth() == "inside RefinedImpl"
        assert resolve_default(Composed, "do_sth") is RefinedImpl

    def test_virtual_subclass_is_not_a_refinement(self) -> None:
        """
        SCENARIO: One capability is registered as a virtual subclass of another
        EXPECTED: Still unrelated for composition; the class statement fails
        """
        class North(Capability):
            @default
            def do_sth(self) -> str:
                return "inside North"

        class South(Capability):
            @default
            def do_sth(self) -> str:
                return "inside South"

        South.register(North)
        assert issubclass(North, South)

        with pytest.raises(AmbiguousComposition) as exc_info:
            class Compass(North, South):
                pass

        assert set(exc_info.value.candidates) == {"North", "South"}

    def test_refinement_of_one_side_still_ambiguous(self) -> None:
        class RefinedLeft(Left):
            @default
            def do_sth(self) -> str:
                return "inside RefinedLeft"

        with pytest.raises(AmbiguousComposition) as exc_info:
            class Mixed(RefinedLeft, Right):
                pass

        assert set(exc_info.value.candidates) == {"RefinedLeft", "Right"}


class TestHelpers:
    """Tests for helper functions."""

    def test_is_default(self) -> None:
        assert is_default(Left.__dict__["do_sth"])
        assert not is_default(lambda: None)

    def test_default_of_unknown_operation(self) -> None:
        with pytest.raises(InvalidArgument):
            default_of(Left, "missing")

    def test_resolve_unknown_operation(self) -> None:
        with pytest.raises(InvalidArgument):
            resolve_default(Left, "missing")
