from hypothesis import given
from hypothesis import strategies as st

from cpalgos.trie import PrefixCounter


@given(
    st.lists(st.text(alphabet="abc", max_size=5), max_size=20),
    st.text(alphabet="abc", max_size=4),
)
def test_matches_startswith_count(words, prefix):
    counter = PrefixCounter()
    for word in words:
        counter.insert(word)
    assert counter.count_prefix(prefix) == sum(w.startswith(prefix) for w in words)
    assert len(counter) == len(words)


def test_repeated_words_are_counted():
    counter = PrefixCounter()
    for word in ("fusufusu", "fusu", "fusu", "anguei"):
        counter.insert(word)
    assert counter.count_prefix("fusu") == 3
    assert counter.count_prefix("fusufusu") == 1
    assert counter.count_prefix("an") == 1
    assert counter.count_prefix("z") == 0


def test_empty_prefix_counts_everything():
    counter = PrefixCounter()
    assert counter.count_prefix("") == 0
    counter.insert("")
    counter.insert("x")
    assert counter.count_prefix("") == 2
    assert counter.count_prefix("x") == 1