"""
Core domain models, identifiers, and contracts.

This package has no external side effects: no I/O, no persistence,
no network access. Every operation is an in-memory state transition.
"""
