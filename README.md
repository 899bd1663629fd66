# bookshelf

A set of small Flask services around a MongoDB collection of books. Each
service does one job and by default listens on `0.0.0.0:3030`:

| Command            | Route                      | What it does                                   |
|--------------------|----------------------------|------------------------------------------------|
| `bookshelf-get`    | `GET /api/books`           | Lists every book as JSON                       |
| `bookshelf-post`   | `POST /api/books`          | Adds a book unless one with the same id exists |
| `bookshelf-put`    | `PUT /api/books/<id>`      | Updates the book with the given id             |
| `bookshelf-delete` | `DELETE /api/books/<id>`   | Deletes the book with the given id             |
| `bookshelf-render` | `GET /`, `/books`, `/authors`, `/years`, `/search`, `/create` | Serves HTML pages |

Every command takes `--host` and `--port`; `bookshelf-render` also takes
`--views` (template directory, default `views`) and `--static` (static file
directory, default `css`).

The JSON services use the `information` collection of the `exercise-3`
database; the HTML service reads the `exercise-2` database.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Configuration

Every service reads the MongoDB connection string from the `DATABASE_URI`
environment variable:

```
export DATABASE_URI=mongodb://localhost:27017
bookshelf-get
```

`bookshelf-get` pings the server before starting and exits with status 1,
printing `DATABASE_URI not set`, `Failed to connect to MongoDB` or
`MongoDB not reachable`, when it cannot. `bookshelf-render` exits with
status 1 and a message on standard error when the variable is missing or
unusable, or when its views directory holds no `.html` file. The other
services raise `bookshelf.db.ConfigurationError` when the variable is not set.

## Book documents

A book travels as JSON with these fields, all strings:

```json
{
  "id": "1",
  "title": "The Title",
  "author": "Some Author",
  "edition": "2",
  "pages": "320",
  "year": "1999"
}
```

Keys are matched without regard to case, unknown keys are ignored and
`null` leaves a field empty. `edition`, `pages` and `year` are left out of
responses and stored documents when empty. In the database the fields are
stored as `ID`, `BookName`, `BookAuthor`, `BookEdition`, `BookPages` and
`BookYear`.

`bookshelf.models.Book` converts between these forms with `from_json`,
`to_json`, `from_document`, `to_document` and `as_listing` (every field,
empty or not).

### Responses

- `GET /api/books` answers `200` with a list of books, each with all six
  fields; with no books stored the body is `null`.
- `POST /api/books` answers `201` with the stored book, `200` with a
  message when a book with that id is already present, and `400` when the
  body is not valid JSON, not an object, holds a non-string field, or has
  an unsupported content type. An empty body, or a form-encoded one, is
  taken as an empty book.
- `PUT /api/books/<id>` sets the fields given in the body and answers `200`
  on success and `204` when no book has that id; the body is read as for
  `POST`.
- `DELETE /api/books/<id>` answers `200` on success and `204` when no book
  has that id.
- Database failures answer `500` with an `error` message.

## HTML pages

`bookshelf-render` renders the Jinja2 templates `index.html`,
`book-table.html`, `authors.html`, `years.html` and `search-bar.html` from
the views directory. Each template receives its data as `data`:

- `/books`: a list of books in listing form (dictionaries with every field);
- `/authors`: a list of `AuthorView` objects with `author` and `books`
  (the titles);
- `/years`: a list of `YearView` objects with `year` and `books` (`Book`
  objects).

`/` and `/search` receive `None`, and `/create` answers `204` with no body.
Static files are served under `/css`. Each request is logged at INFO level.

## What this package does not include

No templates or stylesheets are shipped: `bookshelf-render` needs a views
directory and a static directory supplied by you. The services have no
authentication and no search; the `/search` page only renders its template.

## Using the services from Python

Each service module exposes `create_app(collection)`, which builds the
Flask application around any pymongo collection, so the services can be
embedded or tested without the command-line entry points:

```python
from bookshelf.db import open_collection
from bookshelf.get_service import create_app

collection = open_collection("mongodb://localhost:27017", "exercise-3", "information", True)
app = create_app(collection)
```

`bookshelf.db.database_uri()` reads `DATABASE_URI` from the environment.
The HTML service takes its template and static directories as well:
`bookshelf.render_service.create_app(collection, views_dir, static_dir)`.
`bookshelf.get_service.find_all_books`, and `find_all_books`,
`find_all_authors` and `find_all_years` in `bookshelf.render_service`, can
be called directly on a collection.