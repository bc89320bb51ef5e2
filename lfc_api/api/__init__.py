"""HTTP front ends: the REST routers live here, the GraphQL schema in lfc_api.graphql."""
