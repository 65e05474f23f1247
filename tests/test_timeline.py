from collections import Counter

from subkit.timeline import MatchIndex, SubCompare, stop_word_counter


def test_sub_compare_full_run():
    sc = SubCompare(5)
    for i in range(5):
        assert sc.add(10 + i, 20 + i) is True
        assert sc.check() is (i == 4)
    assert sc.start_index() == (10, 20)


def test_sub_compare_rejects_out_of_order():
    sc = SubCompare(5)
    assert sc.add(10, 20) is True
    assert sc.add(12, 22) is False
    assert sc.add(11, 25) is False
    assert sc.check() is False


def test_sub_compare_clear_and_restart():
    sc = SubCompare(3)
    sc.add(1, 1)
    sc.clear()
    assert sc.start_index() == (-1, -1)
    assert sc.add(7, 9) is True
    assert sc.start_index() == (7, 9)


def test_sub_compare_extra_add_after_complete():
    sc = SubCompare(2)
    assert sc.add(0, 0) and sc.add(1, 1)
    assert sc.check() is True
    assert sc.add(1, 1) is False


def test_sub_compare_zero_length():
    sc = SubCompare(0)
    assert sc.add(3, 4) is False
    assert sc.check() is True


def test_match_index_fields():
    m = MatchIndex(base_now_index=2, src_now_index=5, similarity=0.5)
    assert (m.base_now_index, m.src_now_index, m.similarity) == (2, 5, 0.5)


def test_stop_word_counter_top_one():
    assert stop_word_counter("a a a b b c", 0) == ["a"]


def test_stop_word_counter_all():
    words = stop_word_counter("a a a b b c", 100)
    assert sorted(words) == ["a", "b", "c"]


def test_stop_word_counter_ordered_by_frequency():
    text = "the cat the dog the cat a fox"
    words = stop_word_counter(text, 50)
    counts = Counter(text.split())
    freqs = [counts[w] for w in words]
    assert freqs == sorted(freqs, reverse=True)
    assert words[0] == "the"
    assert len(words) == len(counts) * 50 // 100 + 1


def test_stop_word_counter_empty():
    assert stop_word_counter("", 10) == []