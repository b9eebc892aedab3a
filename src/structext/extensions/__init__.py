"""Extension helpers for primitive values.

Each module groups the helpers for one kind of value:

- ``text``: trimming, defaulting, parsing, templating and masking of `str`.
- ``binary``: concatenation, suffix comparison and slicing of byte sequences.
- ``arrays``: null-safe defaulting of sequences.
- ``loose_map``: exact-type reads from loosely-typed key/value tables.
- ``serialization``: JSON encode/decode delegated to pydantic.

All helpers are pure functions: they never mutate their arguments, keep no
state between calls and are safe to call from any thread. Absent (`None`)
input is a defined state with a documented result, not an error.

Nothing is re-exported at the package level. Import helpers from their
defining modules.
"""
