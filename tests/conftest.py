"""Shared fixtures: test schema and clients."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from graphql_route import graphql_route

URL = "/graphql"


def resolve_test(root: Any, info: Any, who: Optional[str] = None) -> str:
    return f"Hello {who or 'World'}"


def resolve_test_boolean(root: Any, info: Any, value: Optional[bool] = None) -> str:
    return f"Hello {'World' if value is None else value}"


def resolve_thrower(root: Any, info: Any) -> None:
    raise Exception("Throws!")


def resolve_context(root: Any, info: Any) -> str:
    return info.context


def resolve_request_method(root: Any, info: Any) -> str:
    return info.context["request"].method


def resolve_root_value(root: Any, info: Any) -> str:
    return root


async def resolve_slow(root: Any, info: Any) -> str:
    await asyncio.sleep(0.2)
    return "hello"


QueryType = GraphQLObjectType(
    "Query",
    lambda: {
        "test": GraphQLField(
            GraphQLString,
            args={"who": GraphQLArgument(GraphQLString)},
            resolve=resolve_test,
        ),
        "testBoolean": GraphQLField(
            GraphQLString,
            args={"value": GraphQLArgument(GraphQLBoolean)},
            resolve=resolve_test_boolean,
        ),
        "nonNullThrower": GraphQLField(GraphQLNonNull(GraphQLString), resolve=resolve_thrower),
        "thrower": GraphQLField(GraphQLString, resolve=resolve_thrower),
        "context": GraphQLField(GraphQLString, resolve=resolve_context),
        "requestMethod": GraphQLField(GraphQLString, resolve=resolve_request_method),
        "rootValue": GraphQLField(GraphQLString, resolve=resolve_root_value),
        "slow": GraphQLField(GraphQLString, resolve=resolve_slow),
    },
)

MutationType = GraphQLObjectType(
    "Mutation",
    {"writeTest": GraphQLField(QueryType, resolve=lambda root, info: {})},
)

schema = GraphQLSchema(query=QueryType, mutation=MutationType)


def create_app(setup: Optional[Callable] = None) -> FastAPI:
    app = FastAPI()
    graphql_route(app, URL, schema, setup)
    return app


@pytest.fixture
def test_schema() -> GraphQLSchema:
    return schema


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Build a client whose route uses the given setup function."""
    def _make(setup: Optional[Callable] = None) -> TestClient:
        return TestClient(create_app(setup))
    return _make
