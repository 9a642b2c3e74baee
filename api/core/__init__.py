"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks that every feature uses (DB wiring,
settings, logging, error translation). Feature-specific SQL and business
rules live in the corresponding feature package (e.g. `answers/`).
"""
