"""Enumerations for every closed value set in the Astarte schemas.

Values match the lowercase spelling used in interface JSON documents,
so ``Reliability("guaranteed")`` round-trips with real interface files.
"""

from enum import StrEnum


class MappingType(StrEnum):
    """Value type carried by a mapping endpoint."""

    DOUBLE = "double"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    LONGINTEGER = "longinteger"
    STRING = "string"
    BINARYBLOB = "binaryblob"
    DATETIME = "datetime"
    DOUBLEARRAY = "doublearray"
    INTEGERARRAY = "integerarray"
    BOOLEANARRAY = "booleanarray"
    LONGINTEGERARRAY = "longintegerarray"
    STRINGARRAY = "stringarray"
    BINARYBLOBARRAY = "binaryblobarray"
    DATETIMEARRAY = "datetimearray"


class Reliability(StrEnum):
    """Delivery guarantee for datastream values."""

    UNRELIABLE = "unreliable"
    GUARANTEED = "guaranteed"
    UNIQUE = "unique"


class Retention(StrEnum):
    """What the transport does with values it cannot deliver yet."""

    DISCARD = "discard"
    VOLATILE = "volatile"
    STORED = "stored"


class DatabaseRetentionPolicy(StrEnum):
    """Whether stored values expire from the database."""

    NO_TTL = "no_ttl"
    USE_TTL = "use_ttl"


class InterfaceType(StrEnum):
    """Kind of interface.

    Values:
        DATASTREAM: Timestamped stream of values
        PROPERTIES: Stateful, last-value-wins data (always individual)
    """

    DATASTREAM = "datastream"
    PROPERTIES = "properties"


class Ownership(StrEnum):
    """Which side of the connection publishes on the interface."""

    DEVICE = "device"
    SERVER = "server"


class Aggregation(StrEnum):
    """How data points of an interface are reported.

    Values:
        INDIVIDUAL: Every endpoint is published on its own
        OBJECT: All endpoints are published together as one object
    """

    INDIVIDUAL = "individual"
    OBJECT = "object"
