from wordgrid.trie import Trie, load_trie


def test_insert_and_lookup():
    trie = Trie()
    trie.insert("test")
    assert trie.is_word("TEST")
    assert trie.is_word("test")
    assert not trie.is_word("TES")
    assert "TEST" in trie
    assert "TESTS" not in trie


def test_contains_prefix():
    trie = Trie.from_word_list(["TEST", "TESTS", "BEST"])
    assert trie.contains_prefix("T")
    assert trie.contains_prefix("TES")
    assert trie.contains_prefix("TEST")
    assert trie.contains_prefix("tests")
    assert not trie.contains_prefix("TESTSS")
    assert not trie.contains_prefix("X")


def test_empty_prefix():
    assert not Trie().contains_prefix("")
    assert Trie.from_word_list(["WORD"]).contains_prefix("")


def test_child_node_steps_one_letter():
    trie = Trie.from_word_list(["NEST"])
    node = trie.root
    for ch in "NES":
        node = Trie.child_node(node, ch)
        assert node is not None
        assert not node.is_word
    node = Trie.child_node(node, "t")
    assert node is not None and node.is_word
    assert Trie.child_node(node, "S") is None


def test_duplicate_insert_is_noop():
    trie = Trie()
    trie.insert("REST")
    trie.insert("rest")
    assert len(trie) == 1
    assert list(trie.words()) == ["REST"]


def test_from_word_list_filters_short_words():
    trie = Trie.from_word_list(["CAT", "CATS", "AT", "SCATTER"])
    assert not trie.is_word("CAT")
    assert trie.is_word("CATS")
    assert trie.is_word("SCATTER")
    assert len(trie) == 2

    trie3 = Trie.from_word_list(["CAT", "CATS", "AT"], min_length=3)
    assert trie3.is_word("CAT")
    assert not trie3.is_word("AT")


def test_words_in_alphabetical_order():
    trie = Trie.from_word_list(["TESTS", "BEST", "TEST", "NEST", "REST"])
    assert list(trie.words()) == ["BEST", "NEST", "REST", "TEST", "TESTS"]


def test_load_trie(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("test\nBest\n  nest  \ncan't\nsky\n\nRESTS\n")
    trie = load_trie(str(dict_file))
    assert sorted(trie.words()) == ["BEST", "NEST", "RESTS", "TEST"]
    assert not trie.is_word("SKY")
    assert not trie.contains_prefix("CAN")
