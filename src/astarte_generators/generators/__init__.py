"""Hypothesis strategies for Astarte domain objects.

Re-exports the composite strategies and the override helpers:
    from astarte_generators.generators import device, interface, mapping, Constant
"""

from astarte_generators.generators.device import device, encoded_id
from astarte_generators.generators.interface import endpoint_parametric_subpath, interface
from astarte_generators.generators.mapping import mapping
from astarte_generators.generators.params import (
    Constant,
    Generated,
    Override,
    bounded_filter,
    gen_param,
    optional,
    overrides,
)

__all__ = [
    "Constant",
    "Generated",
    "Override",
    "bounded_filter",
    "device",
    "encoded_id",
    "endpoint_parametric_subpath",
    "gen_param",
    "interface",
    "mapping",
    "optional",
    "overrides",
]
