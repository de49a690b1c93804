"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB pool wiring,
settings, logging). Keep feature-specific SQL and request handling in the
corresponding feature package (e.g. `foods/`).
"""
