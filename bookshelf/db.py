"""Locating and opening the MongoDB collection the services work on."""

from __future__ import annotations

import os
from typing import Mapping

from pymongo import MongoClient
from pymongo import errors as mongo_errors
from pymongo.collection import Collection

ENV_VARIABLE = "DATABASE_URI"


class ConfigurationError(Exception):
    """The database location is missing or cannot be used."""


def database_uri(environ: Mapping[str, str] | None = None) -> str:
    """Return the database URI from the environment, or raise ConfigurationError."""
    if environ is None:
        environ = os.environ
    uri = environ.get(ENV_VARIABLE, "")
    if not uri:
        raise ConfigurationError(f"{ENV_VARIABLE} not set")
    return uri


def open_collection(
    uri: str,
    database: str = "exercise-3",
    collection: str = "information",
    ping: bool = False,
) -> Collection:
    """Connect to ``uri`` and return the named collection.

    An unusable URI raises ConfigurationError. With ``ping`` set the server
    is contacted first and ConnectionError is raised if it does not answer.
    """
    try:
        client: MongoClient = MongoClient(uri, connect=False)
    except (mongo_errors.ConfigurationError, ValueError, TypeError) as exc:
        raise ConfigurationError(f"cannot use database URI: {exc}") from exc
    if ping:
        try:
            client.admin.command("ping")
        except mongo_errors.PyMongoError as exc:
            client.close()
            raise ConnectionError(f"database not reachable: {exc}") from exc
    return client[database][collection]