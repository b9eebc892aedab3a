"""STRUCTEXT

Extension helpers for primitive types: text, byte sequences, generic
sequences, loosely-typed key/value tables and JSON encode/decode wrappers.
Every helper is a small, stateless transformation.
"""

import logging

__all__ = ["__version__"]
__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
