"""Unit tests.

Purpose
- Verify a single module or function in isolation.

Guidelines
- No real I/O apart from reading process environment variables.
- Cover the blank/absent input of every helper explicitly.
"""
