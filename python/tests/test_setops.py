"""Tests for the setops module."""

from transdict.schema import Dictionary
from transdict.setops import merge, subtract, symdiff, common_translations


def make(**entries: str) -> Dictionary:
    """Helper: make(cat="кот кошка") -> Dictionary."""
    return Dictionary({word: set(values.split()) for word, values in entries.items()})


class TestMerge:
    """Tests for merge."""

    def test_union_of_translations(self):
        """Test that shared words get the union of translations."""
        a = make(cat="кот", dog="пёс")
        b = make(cat="кошка", bird="птица")
        result = merge([a, b])

        assert result.entries == {
            "cat": {"кот", "кошка"},
            "dog": {"пёс"},
            "bird": {"птица"},
        }

    def test_sources_unchanged(self):
        """Test that merging does not modify or alias sources."""
        a = make(cat="кот")
        b = make(cat="кошка")
        result = merge([a, b])
        result.add_translation("cat", "котик")

        assert a.translations("cat") == {"кот"}
        assert b.translations("cat") == {"кошка"}


class TestSubtract:
    """Tests for subtract."""

    def test_words_absent_from_others(self):
        """Test that only words of the first source missing elsewhere survive."""
        a = make(cat="кот кошка", dog="пёс", bird="птица")
        b = make(dog="собака")
        c = make(bird="птичка")
        result = subtract([a, b, c])

        assert result.entries == {"cat": {"кот", "кошка"}}

    def test_translations_not_compared(self):
        """Test that a word is removed by key even if translations differ."""
        result = subtract([make(cat="кот"), make(cat="кошка")])
        assert result.count() == 0

    def test_result_does_not_alias_source(self):
        """Test that results own their translation sets."""
        a = make(cat="кот")
        result = subtract([a, make(dog="пёс")])
        result.add_translation("cat", "кошка")
        assert a.translations("cat") == {"кот"}


class TestSymdiff:
    """Tests for symdiff."""

    def test_words_in_exactly_one_source(self):
        """Test three-way symmetric difference."""
        a = make(cat="кот", dog="пёс")
        b = make(dog="собака", bird="птица")
        c = make(bird="птичка", fish="рыба")
        result = symdiff([a, b, c])

        assert result.entries == {"cat": {"кот"}, "fish": {"рыба"}}

    def test_word_in_all_sources_dropped(self):
        """Test a word in every source is excluded (not parity based)."""
        a = make(cat="кот")
        b = make(cat="кот")
        c = make(cat="кот")
        assert symdiff([a, b, c]).count() == 0


class TestCommonTranslations:
    """Tests for common_translations."""

    def test_single_word(self):
        """Test one word yields its own translation set."""
        d = make(cat="кот кошка")
        assert common_translations(d, ["cat"]) == {"кот", "кошка"}

    def test_intersection(self):
        """Test left-to-right intersection."""
        d = make(big="большой крупный", large="большой крупный огромный", huge="огромный большой")
        assert common_translations(d, ["big", "large", "huge"]) == {"большой"}

    def test_disjoint(self):
        """Test disjoint words give an empty set."""
        d = make(cat="кот", dog="пёс")
        assert common_translations(d, ["cat", "dog"]) == set()

    def test_missing_word(self):
        """Test a missing word gives None."""
        d = make(cat="кот")
        assert common_translations(d, ["cat", "dog"]) is None

    def test_does_not_modify_dictionary(self):
        """Test the dictionary's sets are left intact."""
        d = make(cat="кот кошка", kitty="кошка")
        common_translations(d, ["cat", "kitty"])
        assert d.translations("cat") == {"кот", "кошка"}
