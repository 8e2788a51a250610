"""
Café directory API.

Lists cafés in a city over HTTP, optionally filtered by a name substring
and capped to a number of results.
"""
