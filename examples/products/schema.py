# -*- coding: utf-8 -*-
""" Define the GraphQL schema
"""

from py_gql import build_schema

from py_gql_http import graphql_error


PRODUCTS = [
    {"id": 1, "name": "Product A", "shortDescription": "First product."},
    {"id": 2, "name": "Product B", "shortDescription": "Second product."},
]

SDL = """
type Product {
    id: ID!
    name: String!
    shortDescription: String
}

type Query {
    # Products, filtered by id when provided.
    products(id: Int): [Product]
}
"""

SCHEMA = build_schema(SDL)


@SCHEMA.resolver("Query.products")
def resolve_products(*_, id=None):
    results = [p for p in PRODUCTS if id is None or p["id"] == id]
    if not results:
        raise graphql_error(404, "Product with id %s does not exist." % id)
    return results
