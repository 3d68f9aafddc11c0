"""
Pydantic schema definitions for API payloads.

Each resource defines the shape of the records it returns.  Incoming
payloads are checked by the plain validator functions in
``services/validators.py`` rather than by Pydantic, so that every
broken rule can be reported at once with a stable message.
"""
