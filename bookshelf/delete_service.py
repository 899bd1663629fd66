"""HTTP service removing a book by id."""

from __future__ import annotations

import argparse
import os
from typing import Any

from flask import Flask, jsonify
from pymongo.errors import PyMongoError

from .db import database_uri, open_collection


def create_app(collection: Any) -> Flask:
    """Build the application serving ``DELETE /api/books/<id>``."""
    app = Flask(__name__)

    @app.delete("/api/books/<book_id>")
    def delete_book(book_id: str):
        try:
            result = collection.delete_one({"ID": book_id})
        except PyMongoError:
            return jsonify(error="Failed to delete book"), 500
        if result.deleted_count == 0:
            return "", 204
        return jsonify(message="Book deleted successfully"), 200

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve book deletion.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3030)
    args = parser.parse_args(argv)
    collection = open_collection(database_uri(os.environ), "exercise-3", "information", False)
    try:
        create_app(collection).run(host=args.host, port=args.port)
    finally:
        collection.database.client.close()
    return 0