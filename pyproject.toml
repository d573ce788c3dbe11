[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchserver"
version = "0.1.0"
description = "A small in-memory full-text search index with TF-IDF ranking, stop words and minus words"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "tf-idf", "full-text", "index", "ranking", "stop-words", "pagination"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["searchserver"]

[tool.pytest.ini_options]
addopts = "-ra"
