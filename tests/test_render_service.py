import pytest

from bookshelf.models import Book
from bookshelf.render_service import (
    AuthorView,
    YearView,
    create_app,
    find_all_authors,
    find_all_books,
    find_all_years,
    main,
)


class FakeCollection:
    def __init__(self, documents):
        self.documents = list(documents)
        self.filters = []

    def find(self, query):
        self.filters.append(query)
        return iter(self.documents)


DOCS = [
    {"ID": "1", "BookName": "Dune", "BookAuthor": "Herbert", "BookYear": "1965"},
    {"ID": "2", "BookName": "Emma", "BookAuthor": "Austen", "BookYear": "1815"},
    {"ID": "3", "BookName": "Persuasion", "BookAuthor": "Austen", "BookYear": "1817"},
    {"ID": "4", "BookName": "Messiah", "BookAuthor": "Herbert", "BookYear": "1965"},
]


@pytest.fixture
def views(tmp_path):
    folder = tmp_path / "views"
    folder.mkdir()
    (folder / "index.html").write_text("INDEX PAGE")
    (folder / "search-bar.html").write_text("SEARCH")
    (folder / "book-table.html").write_text(
        "{% for b in data %}{{ b.id }}:{{ b.title }};{% endfor %}"
    )
    (folder / "authors.html").write_text(
        "{% for a in data %}{{ a.author }}={{ a.books|join(',') }};{% endfor %}"
    )
    (folder / "years.html").write_text(
        "{% for y in data %}{{ y.year }}={% for b in y.books %}{{ b.title }},{% endfor %};{% endfor %}"
    )
    css = tmp_path / "css"
    css.mkdir()
    (css / "style.css").write_text("body { color: red; }")
    return folder, css


@pytest.fixture
def client(views):
    folder, css = views
    app = create_app(FakeCollection(DOCS), str(folder), str(css))
    return app.test_client()


def test_find_all_books_lists_every_field():
    books = find_all_books(FakeCollection(DOCS[:1]))
    assert books == [
        {"id": "1", "title": "Dune", "author": "Herbert", "edition": "", "pages": "", "year": "1965"}
    ]


def test_find_all_books_queries_everything():
    collection = FakeCollection(DOCS)
    find_all_books(collection)
    assert collection.filters == [{}]


def test_find_all_authors_groups_titles():
    authors = find_all_authors(FakeCollection(DOCS))
    assert authors == [
        AuthorView("Herbert", ["Dune", "Messiah"]),
        AuthorView("Austen", ["Emma", "Persuasion"]),
    ]


def test_find_all_years_groups_books():
    years = find_all_years(FakeCollection(DOCS))
    by_year = {view.year: [book.id for book in view.books] for view in years}
    assert by_year == {"1965": ["1", "4"], "1815": ["2"], "1817": ["3"]}
    assert all(isinstance(book, Book) for view in years for book in view.books)


def test_groupings_cover_every_book():
    collection = FakeCollection(DOCS)
    assert sum(len(v.books) for v in find_all_authors(collection)) == len(DOCS)
    assert sum(len(v.books) for v in find_all_years(collection)) == len(DOCS)


def test_empty_collection_gives_empty_groupings():
    empty = FakeCollection([])
    assert find_all_books(empty) == []
    assert find_all_authors(empty) == []
    assert find_all_years(empty) == []


def test_year_view_keeps_books():
    view = YearView("1965", [Book(id="1")])
    assert view.books[0].id == "1"


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "INDEX PAGE"


def test_search_page(client):
    response = client.get("/search")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "SEARCH"


def test_books_page(client):
    response = client.get("/books")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "1:Dune;2:Emma;3:Persuasion;4:Messiah;"


def test_authors_page(client):
    response = client.get("/authors")
    assert response.get_data(as_text=True) == "Herbert=Dune,Messiah;Austen=Emma,Persuasion;"


def test_years_page(client):
    response = client.get("/years")
    text = response.get_data(as_text=True)
    assert "1965=Dune,Messiah,;" in text
    assert "1815=Emma,;" in text


def test_create_is_empty(client):
    response = client.get("/create")
    assert response.status_code == 204
    assert response.get_data() == b""


def test_static_css_served(client):
    response = client.get("/css/style.css")
    assert response.status_code == 200
    assert b"color: red" in response.get_data()
    response.close()


def test_missing_views_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_app(FakeCollection([]), str(tmp_path / "nothing"), str(tmp_path))


def test_views_without_html_raise(tmp_path):
    (tmp_path / "readme.txt").write_text("x")
    with pytest.raises(FileNotFoundError):
        create_app(FakeCollection([]), str(tmp_path), str(tmp_path))


def test_main_without_uri_fails(monkeypatch, capsys):
    monkeypatch.delenv("DATABASE_URI", raising=False)
    assert main([]) == 1
    assert "DATABASE_URI not set" in capsys.readouterr().err