"""HTML front end rendering the book collection through page templates."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from flask import Flask, render_template, request

from .db import ConfigurationError, database_uri, open_collection
from .models import Book

logger = logging.getLogger(__name__)


@dataclass
class AuthorView:
    """An author together with the titles of their books."""

    author: str
    books: list[str] = field(default_factory=list)


@dataclass
class YearView:
    """A publication year together with the books from it."""

    year: str
    books: list[Book] = field(default_factory=list)


def _all_books(collection: Any) -> list[Book]:
    return [Book.from_document(doc) for doc in collection.find({})]


def find_all_books(collection: Any) -> list[dict[str, str]]:
    """Return every stored book in listing form."""
    return [book.as_listing() for book in _all_books(collection)]


def find_all_authors(collection: Any) -> list[AuthorView]:
    """Group the stored books' titles by author."""
    grouped: dict[str, list[str]] = {}
    for book in _all_books(collection):
        grouped.setdefault(book.author, []).append(book.title)
    return [AuthorView(author, titles) for author, titles in grouped.items()]


def find_all_years(collection: Any) -> list[YearView]:
    """Group the stored books by publication year."""
    grouped: dict[str, list[Book]] = {}
    for book in _all_books(collection):
        grouped.setdefault(book.year, []).append(book)
    return [YearView(year, books) for year, books in grouped.items()]


def create_app(collection: Any, views_dir: str = "views", static_dir: str = "css") -> Flask:
    """Build the application rendering pages from ``views_dir``.

    Each page is the template ``<name>.html`` and receives its data as
    ``data``. Files in ``static_dir`` are served under ``/css``. A views
    directory without any ``.html`` file raises FileNotFoundError.
    """
    views = Path(views_dir).resolve()
    if not views.is_dir() or not any(views.glob("*.html")):
        raise FileNotFoundError(f"no templates match {views / '*.html'}")

    app = Flask(
        __name__,
        template_folder=str(views),
        static_folder=str(Path(static_dir).resolve()),
        static_url_path="/css",
    )

    def render(name: str, data: Any = None) -> str:
        return render_template(f"{name}.html", data=data)

    @app.after_request
    def log_request(response):
        logger.info(
            "%s %s %s %s", request.remote_addr, request.method, request.path, response.status_code
        )
        return response

    @app.get("/")
    def index():
        return render("index"), 200

    @app.get("/books")
    def books():
        return render("book-table", find_all_books(collection)), 200

    @app.get("/authors")
    def authors():
        return render("authors", find_all_authors(collection)), 200

    @app.get("/years")
    def years():
        return render("years", find_all_years(collection)), 200

    @app.get("/search")
    def search():
        return render("search-bar"), 200

    @app.get("/create")
    def create():
        return "", 204

    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the book pages.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3030)
    parser.add_argument("--views", default="views")
    parser.add_argument("--static", default="css")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        uri = database_uri(os.environ)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        collection = open_collection(uri, "exercise-2", "information", False)
    except ConfigurationError as exc:
        print(f"Failed to create MongoDB client: {exc}", file=sys.stderr)
        return 1
    try:
        create_app(collection, args.views, args.static).run(host=args.host, port=args.port)
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        collection.database.client.close()
    return 0