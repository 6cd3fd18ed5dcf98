"""
InformationState - typed key-value store shared by the agent's modules.

Each component is declared once, with a type fixed by its initial value,
while the state is being built. After that, components can be read by
every module (StateAccessor) and written only by the state update module
(StateMutator), always with the declared type.

Usage:
    state = (
        InformationState.Builder()
        .with_component(SOCIAL_CONTEXT, SocialContext(self_id="alice", interaction=root))
        .build()
    )
    context = state.get(SOCIAL_CONTEXT, SocialContext)
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from expectations.domain import ComponentId, CurrentActivity

from .component_ids import CURRENT_ACTIVITY


T = TypeVar("T")


# =============================================================================
# Exceptions
# =============================================================================


class StateError(Exception):
    """Base exception for information state errors."""

    pass


class StateKeyError(StateError, KeyError):
    """Raised when a component id is not part of the state."""

    pass


class StateTypeError(StateError, TypeError):
    """Raised when a component is accessed with a type other than its declared one."""

    pass


class BuilderStateError(RuntimeError):
    """Raised when a builder is used after it has already built its object."""

    pass


# =============================================================================
# Access protocols
# =============================================================================


@runtime_checkable
class StateAccessor(Protocol):
    """Read access to an information state."""

    def get(self, component_id: str, expected_type: type[T]) -> T:
        ...

    @property
    def current_activity(self) -> CurrentActivity:
        ...


@runtime_checkable
class StateMutator(StateAccessor, Protocol):
    """Read and write access to an information state."""

    def set(self, component_id: str, value: Any) -> None:
        ...


# =============================================================================
# InformationState
# =============================================================================


class InformationState:
    """Typed components keyed by id. Implements StateAccessor and StateMutator."""

    class Builder:
        """Declares the components of a new InformationState."""

        def __init__(self):
            self._components: dict[ComponentId, tuple[type, Any]] = {}
            self._is_built = False

        @property
        def is_built(self) -> bool:
            return self._is_built

        def with_component(
            self,
            component_id: str,
            initial_value: Any,
            component_type: type | None = None,
        ) -> "InformationState.Builder":
            """
            Declare a component.

            Args:
                component_id: Unique, non-blank id
                initial_value: The component's first value (not None)
                component_type: Declared type (defaults to type(initial_value))

            Returns:
                This builder, for chaining
            """
            if self._is_built:
                raise BuilderStateError("InformationState is already built")
            if component_id is None:
                raise TypeError("component_id must not be None")
            if not component_id.strip():
                raise ValueError("component_id must not be blank")
            if component_id in self._components:
                raise ValueError(f"component already declared: {component_id!r}")
            if initial_value is None:
                raise TypeError("initial_value must not be None")

            declared = component_type if component_type is not None else type(initial_value)
            if not isinstance(initial_value, declared):
                raise StateTypeError(
                    f"initial value of {component_id!r} is not a {declared.__name__}"
                )
            self._components[ComponentId(component_id)] = (declared, initial_value)
            return self

        def build(self) -> "InformationState":
            """Create the state. CURRENT_ACTIVITY is seeded empty when not declared."""
            if self._is_built:
                raise BuilderStateError("InformationState is already built")
            if CURRENT_ACTIVITY not in self._components:
                self._components[CURRENT_ACTIVITY] = (CurrentActivity, CurrentActivity())
            self._is_built = True
            return InformationState(dict(self._components))

    def __init__(self, components: dict[ComponentId, tuple[type, Any]]):
        self._components = components

    @property
    def component_ids(self) -> frozenset[ComponentId]:
        return frozenset(self._components)

    def _declared_type(self, component_id: str) -> type:
        if component_id is None:
            raise TypeError("component_id must not be None")
        if component_id not in self._components:
            raise StateKeyError(component_id)
        return self._components[component_id][0]

    def get(self, component_id: str, expected_type: type[T]) -> T:
        """
        Read a component.

        Raises:
            StateKeyError: If the component does not exist
            StateTypeError: If expected_type is not the component's declared type
        """
        declared = self._declared_type(component_id)
        if expected_type is not declared:
            raise StateTypeError(
                f"component {component_id!r} is a {declared.__name__}, "
                f"not a {getattr(expected_type, '__name__', expected_type)}"
            )
        return self._components[component_id][1]

    def set(self, component_id: str, value: Any) -> None:
        """
        Replace a component's value.

        Raises:
            StateKeyError: If the component does not exist
            StateTypeError: If value is not of the component's declared type
        """
        declared = self._declared_type(component_id)
        if value is None:
            raise TypeError("value must not be None")
        if not isinstance(value, declared):
            raise StateTypeError(
                f"component {component_id!r} is a {declared.__name__}, "
                f"got {type(value).__name__}"
            )
        self._components[component_id] = (declared, value)

    @property
    def current_activity(self) -> CurrentActivity:
        """The latest CurrentActivity report."""
        return self.get(CURRENT_ACTIVITY, CurrentActivity)

    def __repr__(self) -> str:
        ids = ", ".join(sorted(self._components))
        return f"InformationState(component_ids=[{ids}])"
