"""Rate curve GraphQL API."""
