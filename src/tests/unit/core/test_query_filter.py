import pytest

from hidden_posts.core import HiddenPostsFilter, PostQuery, merge_exclusions, never_show
from hidden_posts.interfaces import QueryContext

MAIN = QueryContext(is_admin=False, is_main_query=True, is_single=False)


@pytest.fixture
def hidden(store):
    for post_id in (9, 20, 31):
        store.add(post_id)
    return store


def test_merges_with_existing_exclusions(hidden):
    query = PostQuery({"post__not_in": [5, 9]})
    HiddenPostsFilter(hidden).apply(query, MAIN)
    assert sorted(query.excluded) == [5, 9, 20, 31]
    assert len(query.excluded) == 4


def test_sets_hidden_when_no_prior_exclusions(hidden):
    query = PostQuery()
    HiddenPostsFilter(hidden).apply(query, MAIN)
    assert query.get("post__not_in") == [9, 20, 31]


def test_non_list_exclusion_is_replaced(hidden):
    query = PostQuery({"post__not_in": ""})
    HiddenPostsFilter(hidden).apply(query, MAIN)
    assert query.get("post__not_in") == [9, 20, 31]


def test_admin_requests_are_untouched(hidden):
    query = PostQuery({"post__not_in": [5]})
    HiddenPostsFilter(hidden).apply(query, QueryContext(is_admin=True))
    assert query.get("post__not_in") == [5]


def test_secondary_queries_are_untouched(hidden):
    query = PostQuery()
    HiddenPostsFilter(hidden).apply(query, QueryContext(is_main_query=False))
    assert query.get("post__not_in") is None


def test_single_view_shows_by_default(hidden):
    query = PostQuery({"post__not_in": [5]})
    HiddenPostsFilter(hidden).apply(query, QueryContext(is_single=True))
    assert query.get("post__not_in") == [5]


def test_single_view_filtered_with_override(hidden):
    query = PostQuery({"post__not_in": [5]})
    HiddenPostsFilter(hidden, show_posts=never_show).apply(query, QueryContext(is_single=True))
    assert query.excluded == [5, 9, 20, 31]


def test_hook_can_show_everywhere(hidden):
    query = PostQuery()
    HiddenPostsFilter(hidden, show_posts=lambda is_single: True).apply(query, MAIN)
    assert query.get("post__not_in") is None


def test_hook_receives_single_flag(hidden):
    seen = []

    def hook(is_single):
        seen.append(is_single)
        return False

    flt = HiddenPostsFilter(hidden, show_posts=hook)
    flt(PostQuery(), QueryContext(is_single=True))
    flt(PostQuery(), MAIN)
    assert seen == [True, False]


def test_filter_reads_store_each_time(store):
    flt = HiddenPostsFilter(store)
    first = PostQuery()
    flt.apply(first, MAIN)
    store.add(3)
    second = PostQuery()
    flt.apply(second, MAIN)
    assert first.excluded == []
    assert second.excluded == [3]


def test_merge_exclusions():
    assert merge_exclusions([5, 9], [9, 20, 31]) == [5, 9, 20, 31]
    assert merge_exclusions(None, [1, 2]) == [1, 2]
    assert merge_exclusions((1,), []) == [1]
