"""
Query analytics.

Responsibilities:
- Keep an in-memory log of handled café queries.
- Summarise the log for the /analytics endpoint.
"""
