"""
Café directory core.

Responsibilities:
- Hold the read-only city -> café names lookup table.
- Validate raw query parameters (city, count, search).
- Resolve a validated query into an ordered list of café names.
- Serialise the result into the plain-text response body.
"""
