"""POST requests."""

import json

from conftest import URL

HELLO_WHO = """
    query helloWho($who: String) {
        test(who: $who)
    }
"""

INTROSPECTION_QUERY = """
    query IntrospectionQuery {
        __schema {
            queryType { name }
            mutationType { name }
            types { kind name }
        }
    }
"""


def test_json_encoding(client):
    response = client.post(URL, json={"query": INTROSPECTION_QUERY})

    assert response.status_code == 200
    schema = response.json()["data"]["__schema"]
    assert schema["queryType"] == {"name": "Query"}
    assert schema["mutationType"] == {"name": "Mutation"}


def test_mutation(client):
    response = client.post(URL, json={"query": "mutation TestMutation { writeTest { test } }"})

    assert response.status_code == 200
    assert response.json() == {"data": {"writeTest": {"test": "Hello World"}}}


def test_json_variables(client):
    response = client.post(URL, json={"query": HELLO_WHO, "variables": {"who": "Dolly"}})

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Dolly"}}


def test_null_variables_and_operation_name(client):
    response = client.post(URL, json={"query": "{ test }", "variables": None, "operationName": None})

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello World"}}


def test_json_body_with_query_string_variables(client):
    response = client.post(
        URL,
        params={"variables": '{ "who": "Dolly" }'},
        json={"query": HELLO_WHO},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Dolly"}}


def test_operation_name(client):
    query = """
        query helloYou { test(who: "You") }
        query helloWorld { test(who: "World") }
    """
    response = client.post(URL, json={"query": query, "operationName": "helloWorld"})

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello World"}}


def test_query_string_operation_name(client):
    query = """
        query helloYou { test(who: "You") }
        query helloWorld { test(who: "World") }
    """
    response = client.post(URL, params={"operationName": "helloWorld"}, json={"query": query})

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello World"}}


def test_query_string_query_wins_over_body(client):
    response = client.post(
        URL,
        params={"query": '{ test(who: "Url") }'},
        json={"query": '{ test(who: "Body") }'},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Url"}}


def test_raw_graphql_body_with_query_string_variables(client):
    response = client.post(
        URL,
        params={"variables": '{ "who": "Dolly" }', "operationName": "helloWho"},
        content=HELLO_WHO,
        headers={"Content-Type": "application/graphql"},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Dolly"}}


def test_json_content_type_with_parameters(client):
    response = client.post(
        URL,
        content=json.dumps({"query": HELLO_WHO, "variables": {"who": "Dolly"}}),
        headers={"Content-Type": "application/json; charset=UTF-8"},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Dolly"}}


def test_declared_charset_is_used(client):
    body = json.dumps({"query": '{ test(who: "Zoë") }'}, ensure_ascii=False).encode("iso-8859-1")
    response = client.post(
        URL,
        content=body,
        headers={"Content-Type": "application/json; charset=ISO-8859-1"},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Zoë"}}


def test_graphql_body_defaults_to_latin1(client):
    response = client.post(
        URL,
        content='{ test(who: "Zoë") }'.encode("iso-8859-1"),
        headers={"Content-Type": "application/graphql"},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello Zoë"}}


def test_other_methods_are_rejected(client):
    response = client.put(URL, params={"query": "{ test }"})

    assert response.status_code == 405
    assert response.headers["allow"] == "GET, POST"
    assert response.json() == {"errors": [{"message": "GraphQL only supports GET and POST requests."}]}


def test_options_is_rejected_like_other_methods(client):
    response = client.options(URL, params={"query": "{ test }"})

    assert response.status_code == 405
    assert response.headers["allow"] == "GET, POST"
    assert response.json() == {"errors": [{"message": "GraphQL only supports GET and POST requests."}]}


def test_empty_operation_name_selects_the_only_operation(client):
    response = client.post(URL, json={"query": "{ test }", "operationName": ""})

    assert response.status_code == 200
    assert response.json() == {"data": {"test": "Hello World"}}
