"""
Astarte generators: Hypothesis strategies for Astarte domain objects.

Builds devices, interfaces and mappings whose fields respect the
constraints of the real schemas, while letting callers override any
field with a fixed value or a replacement strategy.
"""

__version__ = "0.1.0"
