# -*- coding: utf-8 -*-
""" Global fixtures """

import pytest

from py_gql import build_schema
from py_gql_http import graphql_error


PRODUCTS_SDL = """
type Product {
    id: ID!
    name: String!
    shortDescription: String
}

type Query {
    # Products, filtered by id when provided.
    products(id: Int): [Product]
}

schema {
    query: Query
}
"""

PRODUCTS = [
    {"id": 1, "name": "Product A", "shortDescription": "First product."},
    {"id": 2, "name": "Product B", "shortDescription": "Second product."},
]


@pytest.fixture
def make_products_schema():
    """ Build the products schema, ``hide`` controls the 404 error. """

    def factory(hide=False):
        schema = build_schema(PRODUCTS_SDL)

        @schema.resolver("Query.products")
        def resolve_products(*_, id=None):
            results = [p for p in PRODUCTS if id is None or p["id"] == id]
            if not results:
                raise graphql_error(
                    404, "Product with id %s does not exist." % id, hide=hide
                )
            return results

        return schema

    return factory


@pytest.fixture
def products_schema(make_products_schema):
    return make_products_schema()


@pytest.fixture
def raiser():
    def factory(cls, *args, **kwargs):
        assert issubclass(cls, Exception)

        def _raiser(*_a, **_kw):
            raise cls(*args, **kwargs)

        return _raiser

    return factory
