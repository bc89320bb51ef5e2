"""Liverpool FC data API.

REST and GraphQL front ends over a shared service layer for players,
matches, seasons, trophies and the rest of the club's records.
"""

__version__ = "0.1.0"
