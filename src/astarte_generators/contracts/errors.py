"""Exceptions raised by the generators.

Generation itself never fails locally: exhausted retries are reported by
Hypothesis. The errors below are raised eagerly, when a strategy is
built from malformed caller input.
"""


class AstarteGeneratorsError(Exception):
    """Base class for all errors raised by astarte_generators."""


class OverrideShapeError(AstarteGeneratorsError, TypeError):
    """Raised when an override value has an unsupported shape.

    An override is a single constant or a single strategy. A tuple that
    holds strategies (e.g. ``(st.integers(), st.text())``) has no defined
    meaning and is rejected instead of being treated as a constant tuple.
    Wrap it in ``Constant(...)`` to really use the tuple as a value.

    Nested overrides (``mapping_params``, ``interface_params``) must be a
    mapping of field overrides, plain or wrapped in ``Constant``. A
    strategy is rejected there because field overrides are resolved when
    the parent strategy is built, not per draw.

    Attributes:
        name: Parameter name the override was supplied for
        value: The rejected value
    """

    def __init__(self, name: str, value: object, expected: str | None = None) -> None:
        self.name = name
        self.value = value
        if expected is None:
            message = (
                f"Override for '{name}' is a tuple of strategies ({value!r}); "
                "supply a single value or a single strategy, or wrap the tuple in Constant()"
            )
        else:
            message = f"Override for '{name}' must be {expected}, got {type(value).__name__} ({value!r})"
        super().__init__(message)


class NestedOverrideConflictError(AstarteGeneratorsError, ValueError):
    """Raised when a nested override names a field its parent forwards.

    Parents resolve some fields themselves and pass the result down
    (an interface forwards its aggregation to every mapping). Overriding
    the same field in the nested mapping would break the parent's
    invariants, so it must be overridden at the parent level.

    Attributes:
        owner: Name of the parent generator
        fields: Conflicting field names, sorted
    """

    def __init__(self, owner: str, fields: list[str]) -> None:
        self.owner = owner
        self.fields = fields
        super().__init__(
            f"Nested overrides for {owner} cannot set {fields}; "
            f"these fields are resolved by {owner} itself, override them there"
        )


class InvalidDeviceIdError(AstarteGeneratorsError, ValueError):
    """Raised when an encoded device id does not decode to 128 bits."""
