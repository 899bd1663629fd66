"""HTTP service adding a book unless one with the same id exists."""

from __future__ import annotations

import argparse
import json
import os
from typing import Any

from flask import Flask, jsonify, request
from pymongo.errors import PyMongoError

from .db import database_uri, open_collection
from .models import Book

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _bind_book() -> Book:
    """Read the request body as a book; ValueError if it cannot be read."""
    body = request.get_data()
    if not body:
        return Book()
    mimetype = request.mimetype
    if mimetype.startswith("application/json"):
        return Book.from_json(json.loads(body))
    if mimetype in _FORM_TYPES:
        return Book()
    raise ValueError(f"unsupported media type {mimetype!r}")


def create_app(collection: Any) -> Flask:
    """Build the application serving ``POST /api/books``."""
    app = Flask(__name__)

    @app.post("/api/books")
    def add_book():
        try:
            book = _bind_book()
        except ValueError:
            return jsonify(error="Invalid request body"), 400
        try:
            existing = list(collection.find({"ID": book.id}))
        except PyMongoError:
            return jsonify(error="Database error"), 500
        if existing:
            return jsonify(message="Duplicate book entry, not inserted"), 200
        try:
            collection.insert_one(book.to_document())
        except PyMongoError:
            return jsonify(error="Failed to insert book"), 500
        return jsonify(book.to_json()), 201

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve book creation.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3030)
    args = parser.parse_args(argv)
    collection = open_collection(database_uri(os.environ), "exercise-3", "information", False)
    try:
        create_app(collection).run(host=args.host, port=args.port)
    finally:
        collection.database.client.close()
    return 0