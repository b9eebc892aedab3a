"""STRUCTEXT test suite.

Folder taxonomy
- unit/            : Isolated, fast checks of a single module or function.
- unit/extensions/ : One test module per helper module under
                     ``structext.extensions``.

General guidance
- Helpers are pure; assert on return values and raised errors only.
- Environment-dependent behavior is driven with ``monkeypatch``.
- Log output is checked with ``caplog`` at DEBUG for the module's logger.
"""
