"""HTTP service listing every book in the collection."""

from __future__ import annotations

import argparse
import os
from typing import Any

from flask import Flask, jsonify

from .db import ConfigurationError, database_uri, open_collection
from .models import Book


def find_all_books(collection: Any) -> list[dict[str, str]]:
    """Return every stored book in listing form."""
    return [Book.from_document(doc).as_listing() for doc in collection.find({})]


def create_app(collection: Any) -> Flask:
    """Build the application serving ``GET /api/books``."""
    app = Flask(__name__)

    @app.get("/api/books")
    def list_books():
        books = find_all_books(collection)
        return jsonify(books or None), 200

    return app


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the list of books.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3030)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        uri = database_uri(os.environ)
    except ConfigurationError:
        print("DATABASE_URI not set")
        return 1
    try:
        collection = open_collection(uri, "exercise-3", "information", True)
    except ConfigurationError:
        print("Failed to connect to MongoDB")
        return 1
    except ConnectionError:
        print("MongoDB not reachable")
        return 1
    try:
        create_app(collection).run(host=args.host, port=args.port)
    finally:
        collection.database.client.close()
    return 0