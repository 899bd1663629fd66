[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookshelf"
version = "0.1.0"
description = "Small MongoDB-backed book catalogue services: list, create, update, delete and render books over HTTP."
requires-python = ">=3.10"
keywords = ["books", "catalogue", "mongodb", "flask", "rest", "microservices"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "flask>=2.2",
    "pymongo>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
bookshelf-get = "bookshelf.get_service:main"
bookshelf-post = "bookshelf.post_service:main"
bookshelf-put = "bookshelf.put_service:main"
bookshelf-delete = "bookshelf.delete_service:main"
bookshelf-render = "bookshelf.render_service:main"

[tool.hatch.build.targets.wheel]
packages = ["bookshelf"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
