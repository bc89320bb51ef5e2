"""REST routers, one module per collection."""

from . import competitions, contracts, managers, matches, player_stats, players, seasons, stadiums, trophies

ALL_ROUTERS = [
    players.router,
    matches.router,
    trophies.router,
    stadiums.router,
    managers.router,
    player_stats.router,
    seasons.router,
    competitions.router,
    contracts.router,
]
