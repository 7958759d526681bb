from algokit.trie import PairTrie


def test_empty_trie_counts_nothing():
    assert PairTrie().get_count("abc") == 0


def test_word_counts_itself():
    trie = PairTrie()
    trie.insert("abc")
    assert trie.get_count("abc") == 1
    trie.insert("abc")
    assert trie.get_count("abc") == 2


def test_prefix_that_is_not_suffix_is_ignored():
    trie = PairTrie()
    trie.insert("ab")
    assert trie.get_count("abc") == 0


def test_prefix_and_suffix_words_counted():
    trie = PairTrie()
    for word in ("a", "aba", "ab", "b"):
        trie.insert(word)
    assert trie.get_count("ababa") == 2


def test_longer_word_not_counted_for_shorter_query():
    trie = PairTrie()
    trie.insert("aaaa")
    assert trie.get_count("aa") == 0