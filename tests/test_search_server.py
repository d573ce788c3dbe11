import pytest

from searchserver.document import DocumentStatus
from searchserver.search_server import MAX_RESULT_DOCUMENT_COUNT, SearchServer


@pytest.fixture
def server():
    s = SearchServer("and in the")
    s.add_document(1, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    s.add_document(2, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    s.add_document(3, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    s.add_document(4, "groomed starling eugene", DocumentStatus.BANNED, [9])
    return s


def ids(docs):
    return [d.id for d in docs]


def test_stop_words_are_not_found():
    s = SearchServer("in the")
    s.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
    assert s.find_top_documents("in") == []
    assert ids(s.find_top_documents("cat")) == [42]


def test_stop_words_from_iterable_match_string():
    a = SearchServer(["in", "", "the", "in"])
    b = SearchServer("  in the ")
    for s in (a, b):
        s.add_document(1, "cat in the city", DocumentStatus.ACTUAL, [])
    assert a.find_top_documents("the") == b.find_top_documents("the") == []
    assert ids(a.find_top_documents("city")) == ids(b.find_top_documents("city")) == [1]


def test_minus_words_exclude_documents(server):
    assert ids(server.find_top_documents("cat")) == [2, 1]
    assert ids(server.find_top_documents("cat -fluffy")) == [1]


def test_results_sorted_by_relevance(server):
    docs = server.find_top_documents("fluffy groomed cat")
    relevances = [d.relevance for d in docs]
    assert relevances == sorted(relevances, reverse=True)
    assert docs[0].id == 2
    assert 4 not in ids(docs)


def test_equal_relevance_sorted_by_rating():
    s = SearchServer("")
    s.add_document(1, "same text", DocumentStatus.ACTUAL, [1])
    s.add_document(2, "same text", DocumentStatus.ACTUAL, [9])
    s.add_document(3, "same text", DocumentStatus.ACTUAL, [5])
    s.add_document(4, "other", DocumentStatus.ACTUAL, [0])
    assert ids(s.find_top_documents("same")) == [2, 3, 1]


def test_word_in_every_document_has_zero_relevance():
    s = SearchServer("")
    s.add_document(1, "word", DocumentStatus.ACTUAL, [])
    s.add_document(2, "word word", DocumentStatus.ACTUAL, [])
    assert all(d.relevance == 0.0 for d in s.find_top_documents("word"))


def test_result_count_is_limited():
    s = SearchServer("")
    for i in range(MAX_RESULT_DOCUMENT_COUNT + 2):
        s.add_document(i, "cat", DocumentStatus.ACTUAL, [i])
    docs = s.find_top_documents("cat")
    assert len(docs) == MAX_RESULT_DOCUMENT_COUNT
    assert ids(docs) == [6, 5, 4, 3, 2]


def test_filter_by_status(server):
    assert ids(server.find_top_documents("groomed")) == [3]
    assert ids(server.find_top_documents("groomed", DocumentStatus.BANNED)) == [4]
    assert server.find_top_documents("groomed", DocumentStatus.REMOVED) == []


def test_filter_by_predicate(server):
    docs = server.find_top_documents("cat groomed", lambda doc_id, status, rating: doc_id % 2 == 0)
    assert sorted(ids(docs)) == [2, 4]


def test_average_rating(server):
    by_id = {d.id: d.rating for d in server.find_top_documents("groomed dog", lambda *_: True)}
    assert by_id[4] == 9
    assert by_id[3] == -1


def test_average_rating_truncates_toward_zero_and_empty_is_zero():
    s = SearchServer("")
    s.add_document(1, "a", DocumentStatus.ACTUAL, [-1, -2])
    s.add_document(2, "b", DocumentStatus.ACTUAL, [])
    assert s.find_top_documents("a")[0].rating == -1
    assert s.find_top_documents("b")[0].rating == 0


def test_len_and_document_id(server):
    assert len(server) == 4
    assert [server.document_id(i) for i in range(len(server))] == [1, 2, 3, 4]
    with pytest.raises(IndexError):
        server.document_id(4)
    with pytest.raises(IndexError):
        server.document_id(-1)


def test_document_of_only_stop_words_is_counted():
    s = SearchServer("in the")
    s.add_document(7, "in the", DocumentStatus.ACTUAL, [1])
    assert len(s) == 1
    assert s.match_document("in", 7) == ([], DocumentStatus.ACTUAL)


@pytest.mark.parametrize("doc_id", [-1, 1])
def test_invalid_document_id(server, doc_id):
    with pytest.raises(ValueError):
        server.add_document(doc_id, "text", DocumentStatus.ACTUAL, [])
    assert len(server) == 4


def test_invalid_word_in_document(server):
    with pytest.raises(ValueError):
        server.add_document(10, "bad w\x12ord", DocumentStatus.ACTUAL, [])


def test_invalid_stop_words():
    with pytest.raises(ValueError):
        SearchServer(["ok", "b\x01ad"])


@pytest.mark.parametrize("query", ["--cat", "-", "cat -", "c\x12at", "fluffy --tail"])
def test_invalid_query(server, query):
    with pytest.raises(ValueError):
        server.find_top_documents(query)
    with pytest.raises(ValueError):
        server.match_document(query, 1)


def test_match_document(server):
    assert server.match_document("tail fluffy cat dog", 2) == (["cat", "fluffy", "tail"], DocumentStatus.ACTUAL)
    assert server.match_document("fluffy cat -tail", 2) == ([], DocumentStatus.ACTUAL)
    assert server.match_document("groomed the", 4) == (["groomed"], DocumentStatus.BANNED)


def test_match_missing_document(server):
    with pytest.raises(KeyError):
        server.match_document("cat", 99)