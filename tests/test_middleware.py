"""
Tests for request logging middleware helpers
"""

import pytest

from moviegraph.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params_redacts_sensitive_keys():
    params = {"token": "abc", "X-Api_Key": "k", "page": "2"}

    assert sanitize_query_params(params) == {
        "token": "[REDACTED]",
        "X-Api_Key": "[REDACTED]",
        "page": "2",
    }


@pytest.mark.parametrize(
    ("operation_name", "query", "expected"),
    [
        ("Explicit", "{ movies { id } }", "Explicit"),
        (None, "query ActorMovies { actor(id: 1) { id } }", "ActorMovies"),
        (None, 'mutation AddMovie { addMovie(name: "x", actorId: 1) { id } }', "mutation:AddMovie"),
        (None, "query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        (None, "{ movies { id } }", "unnamed_operation"),
        (None, "", None),
        (None, None, None),
        ("", 42, None),
    ],
)
def test_operation_name_from_payload(operation_name, query, expected):
    assert operation_name_from_payload(operation_name, query) == expected
