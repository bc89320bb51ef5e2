"""Strawberry schema and the FastAPI router that serves it.

Each entity module contributes a Query and a Mutation class; they are merged
into the root types here. Resolvers share the REST layer's database session
dependency, so a GraphQL request gets the same session handling as a REST one.
"""

import strawberry
from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import GraphQLRouter
from strawberry.tools import merge_types

from ..config.settings import settings
from ..database.connection import get_db
from .resolvers.competitions import CompetitionMutation, CompetitionQuery
from .resolvers.contracts import ContractMutation, ContractQuery
from .resolvers.managers import ManagerMutation, ManagerQuery
from .resolvers.matches import MatchMutation, MatchQuery
from .resolvers.player_stats import PlayerStatsMutation, PlayerStatsQuery
from .resolvers.players import PlayerMutation, PlayerQuery
from .resolvers.seasons import SeasonMutation, SeasonQuery
from .resolvers.stadiums import StadiumMutation, StadiumQuery
from .resolvers.trophies import TrophyMutation, TrophyQuery

Query = merge_types(
    "Query",
    (
        PlayerQuery,
        MatchQuery,
        TrophyQuery,
        StadiumQuery,
        ManagerQuery,
        PlayerStatsQuery,
        SeasonQuery,
        CompetitionQuery,
        ContractQuery,
    ),
)

Mutation = merge_types(
    "Mutation",
    (
        PlayerMutation,
        MatchMutation,
        TrophyMutation,
        StadiumMutation,
        ManagerMutation,
        PlayerStatsMutation,
        SeasonMutation,
        CompetitionMutation,
        ContractMutation,
    ),
)

schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(db: Session = Depends(get_db)) -> dict:
    return {"db": db}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
