"""gql-mddoc: markdown documentation from GraphQL introspection results."""

__version__ = "0.1.0"
