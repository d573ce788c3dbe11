"""An in-memory full-text index ranking documents by TF-IDF relevance."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

from searchserver.document import Document, DocumentStatus
from searchserver.string_processing import make_unique_non_empty_strings, split_into_words

MAX_RESULT_DOCUMENT_COUNT = 5
MIN_RELEVANCE_DIFF = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


@dataclass(frozen=True)
class _DocumentData:
    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class _QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class _Query:
    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


def _is_valid_word(word: str) -> bool:
    """A valid word contains no control characters below the space."""
    return not any(ord(c) < ord(" ") for c in word)


def _average_rating(ratings: Iterable[int]) -> int:
    """Integer mean of the ratings, truncated toward zero; 0 when empty."""
    values = list(ratings)
    if not values:
        return 0
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def _compare_documents(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < MIN_RELEVANCE_DIFF:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


class SearchServer:
    """Indexes documents and answers queries with plus words, minus words and stop words."""

    def __init__(self, stop_words: str | Iterable[str]) -> None:
        words = split_into_words(stop_words) if isinstance(stop_words, str) else stop_words
        self._stop_words = frozenset(make_unique_non_empty_strings(words))
        if not all(_is_valid_word(word) for word in self._stop_words):
            raise ValueError("Some of stop words are invalid")
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._documents: dict[int, _DocumentData] = {}
        self._document_ids: list[int] = []

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> None:
        """Index a document; raises ValueError for a bad id or an invalid word."""
        if document_id < 0 or document_id in self._documents:
            raise ValueError("Invalid document_id")
        words = self._split_into_words_no_stop(document)
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                freqs = self._word_to_document_freqs.setdefault(word, {})
                freqs[document_id] = freqs.get(document_id, 0.0) + inv_word_count
        self._documents[document_id] = _DocumentData(_average_rating(ratings), status)
        self._document_ids.append(document_id)

    def find_top_documents(
        self,
        raw_query: str,
        predicate: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Return the best matches, filtered by a status or by predicate(id, status, rating)."""
        if isinstance(predicate, DocumentStatus):
            wanted = predicate

            def predicate(_id: int, status: DocumentStatus, _rating: int) -> bool:
                return status == wanted

        query = self._parse_query(raw_query)
        matched = self._find_all_documents(query, predicate)
        matched.sort(key=cmp_to_key(_compare_documents))
        return matched[:MAX_RESULT_DOCUMENT_COUNT]

    def __len__(self) -> int:
        return len(self._documents)

    def document_id(self, index: int) -> int:
        """Return the id of the document added at the given position."""
        if not 0 <= index < len(self._document_ids):
            raise IndexError("document index out of range")
        return self._document_ids[index]

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """Return the sorted plus words found in the document and its status."""
        query = self._parse_query(raw_query)
        matched = [
            word
            for word in sorted(query.plus_words)
            if document_id in self._word_to_document_freqs.get(word, {})
        ]
        if any(document_id in self._word_to_document_freqs.get(word, {}) for word in query.minus_words):
            matched = []
        try:
            status = self._documents[document_id].status
        except KeyError:
            raise KeyError(f"no document with id {document_id}") from None
        return matched, status

    def _is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not _is_valid_word(word):
                raise ValueError(f"Word {word} is invalid")
            if not self._is_stop_word(word):
                words.append(word)
        return words

    def _parse_query_word(self, text: str) -> _QueryWord:
        if not text:
            raise ValueError("Query word is empty")
        word = text
        is_minus = word.startswith("-")
        if is_minus:
            word = word[1:]
        if not word or word.startswith("-") or not _is_valid_word(word):
            raise ValueError(f"Query word {text} is invalid")
        return _QueryWord(word, is_minus, self._is_stop_word(word))

    def _parse_query(self, text: str) -> _Query:
        query = _Query()
        for raw_word in split_into_words(text):
            query_word = self._parse_query_word(raw_word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query

    def _inverse_document_freq(self, word: str) -> float:
        return math.log(len(self) / len(self._word_to_document_freqs[word]))

    def _find_all_documents(self, query: _Query, predicate: DocumentPredicate) -> list[Document]:
        relevance: dict[int, float] = {}
        for word in sorted(query.plus_words):
            freqs = self._word_to_document_freqs.get(word)
            if freqs is None:
                continue
            idf = self._inverse_document_freq(word)
            for doc_id, term_freq in sorted(freqs.items()):
                data = self._documents[doc_id]
                if predicate(doc_id, data.status, data.rating):
                    relevance[doc_id] = relevance.get(doc_id, 0.0) + term_freq * idf

        for word in query.minus_words:
            for doc_id in self._word_to_document_freqs.get(word, {}):
                relevance.pop(doc_id, None)

        return [
            Document(doc_id, relevance[doc_id], self._documents[doc_id].rating)
            for doc_id in sorted(relevance)
        ]