"""
Main FastAPI application for the Liverpool FC data API.

This module creates the FastAPI application that serves both front ends:

- REST collections under settings.api_prefix (/api/v1/players, /api/v1/matches, ...)
- GraphQL at settings.graphql_path (/graphql), with GraphiQL on GET

Both front ends call the same services, so validation, reference checks and
match rules behave identically whichever one a client uses.

Run it with `lfc serve`, or directly:

    uvicorn lfc_api.api.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..club import CLUB_PROFILE, club_summary
from ..config.settings import settings
from ..graphql import create_graphql_router
from .errors import register_error_handlers
from .middleware import ResponseHeadersMiddleware
from .responses import collection_url
from .routers import ALL_ROUTERS

COLLECTIONS = (
    "players",
    "matches",
    "trophies",
    "stadiums",
    "managers",
    "player-stats",
    "seasons",
    "competitions",
    "contracts",
)

app = FastAPI(
    title="Liverpool FC API",
    description="Players, matches, trophies and the rest of the club's records over REST and GraphQL",
    version=settings.api_version,
    docs_url=settings.docs_url,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location", "ETag", "Last-Modified", "X-Total-Count", "X-Request-ID"],
)
app.add_middleware(ResponseHeadersMiddleware)

register_error_handlers(app)


@app.get("/")
async def root():
    """
    Club overview and the entry points of the API.

    Returns:
        dict: The club profile summary under "data" and links to every collection
    """
    links = {"self": "/", "club": "/club", "health": "/health"}
    links.update({collection: collection_url(collection) for collection in COLLECTIONS})
    links["graphql"] = settings.graphql_path
    links["docs"] = settings.docs_url
    return {"data": club_summary(), "_links": links}


@app.get("/club")
async def club():
    """The full club profile, including the manager's honours and club statistics."""
    return {"data": CLUB_PROFILE, "_links": {"self": "/club", "root": "/"}}


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Service status and the API version being served
    """
    return {
        "status": "healthy",
        "service": "Liverpool FC API",
        "version": settings.api_version,
    }


# REST collections, one router per resource
for router in ALL_ROUTERS:
    app.include_router(router, prefix=settings.api_prefix)

# GraphQL shares the REST database session dependency
app.include_router(create_graphql_router(), prefix=settings.graphql_path, tags=["graphql"])
