# searchserver

An in-memory full-text search index for short documents. It ranks documents
by TF-IDF relevance. When two documents have relevance within `1e-6` of each
other, the one with the higher average rating comes first. A search returns
at most five documents.

## Features

- **Stop words.** They are given when the server is created, either as one
  space-separated string or as an iterable of words. They are ignored both
  when documents are indexed and when queries are parsed.
- **Minus words.** A query word written as `-word` removes every document
  that contains `word`.
- **Filtering.** `find_top_documents` takes either a `DocumentStatus` or a
  predicate. The status defaults to `DocumentStatus.ACTUAL`. A predicate is
  called as `predicate(document_id, status, rating)` and decides which
  documents are eligible.
- **Statuses.** Each document has one of these statuses:
  `DocumentStatus.ACTUAL`, `IRRELEVANT`, `BANNED` or `REMOVED`.
- **Ratings.** A document's rating is the integer mean of the ratings given
  when it was added, truncated toward zero. It is `0` when no ratings were
  given.
- **Matching.** `match_document` returns the query's plus words that occur in
  a document, sorted, together with the document's status. The list is empty
  if any of the query's minus words occurs in the document.
- **Request queue.** `RequestQueue` forwards queries to a server. It keeps a
  window of the last 1440 requests and counts how many of them returned no
  results.
- **Pagination.** `paginate` splits results into pages. Every page has
  `page_size` items except the last, which may have fewer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from searchserver.document import DocumentStatus
from searchserver.search_server import SearchServer
from searchserver.request_queue import RequestQueue
from searchserver.paginator import paginate

server = SearchServer("and in on")

server.add_document(1, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
server.add_document(2, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
server.add_document(3, "groomed dog expressive eyes", DocumentStatus.BANNED, [5, -12, 2, 1])

for document in server.find_top_documents("fluffy groomed cat -collar"):
    print(document)   # { document_id = 2, relevance = ..., rating = 5 }

banned = server.find_top_documents("groomed dog", DocumentStatus.BANNED)
even_ids = server.find_top_documents(
    "cat", lambda document_id, status, rating: document_id % 2 == 0
)

words, status = server.match_document("fluffy cat", 2)   # (['cat', 'fluffy'], DocumentStatus.ACTUAL)

print(len(server))            # number of indexed documents
print(server.document_id(0))  # id of the first document added

queue = RequestQueue(server)
queue.add_find_request("sparrow")
print(queue.no_result_requests())   # 1

for page in paginate(server.find_top_documents("cat"), 1):
    print(len(page), page)
```

`Document` is a dataclass with the fields `id`, `relevance` and `rating`.
`str(document)` gives `{ document_id = ..., relevance = ..., rating = ... }`.
`str(page)` joins the string forms of the page's items.

## Errors

`SearchServer` raises `ValueError` in these cases:

- a stop word contains a control character (a character below the space);
- a document id is negative or already in use;
- a document or a query word contains a control character;
- a query has a bare `-` as a word;
- a query word starts with a double minus, such as `--cat`.

`match_document` raises `KeyError` for an unknown document id.
`document_id` raises `IndexError` for an index out of range.
`paginate` raises `ValueError` when `page_size` is not positive.

## Input helpers

`searchserver.string_processing` has two helpers:

- `split_into_words` splits text on spaces.
- `make_unique_non_empty_strings` returns the set of non-empty strings it is
  given.

`searchserver.read_input` has two helpers that read from a text stream, or
from standard input by default:

- `read_line` reads one line without its newline.
- `read_line_with_number` reads an integer and discards the rest of its line.
  It raises `EOFError` at the end of input and `ValueError` when no integer
  is found.

## What it does not do

The index lives only in memory; nothing is saved to disk. Documents cannot be
removed once they are added. The package is a library only. It has no
command-line program and no network server.