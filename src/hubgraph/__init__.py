"""hubgraph - GitHub Discussions and Projects through the GraphQL API."""
