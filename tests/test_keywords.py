import unittest

from datecomp.core.keywords import (
    KEYWORDS,
    NOT_FOUND,
    KeywordType,
    classify,
    get_type,
    get_value,
    lookup,
    word_prefix,
)


class KeywordLookupTests(unittest.TestCase):
    def test_month_prefix(self):
        index = lookup("jan", 3)
        self.assertEqual(get_type(index), KeywordType.MONTH_NAME)
        self.assertEqual(get_value(index), 1)

    def test_month_matches_longer_word(self):
        index = lookup("jan", 7)
        self.assertEqual(get_type(index), KeywordType.MONTH_NAME)
        self.assertEqual(get_value(index), 1)

    def test_time_zone(self):
        index = lookup("pst", 3)
        self.assertEqual(get_type(index), KeywordType.TIME_ZONE_NAME)
        self.assertEqual(get_value(index), -8)

    def test_time_zone_rejects_longer_word(self):
        self.assertEqual(lookup("pst", 4), NOT_FOUND)
        self.assertEqual(lookup("gmt", 6), NOT_FOUND)

    def test_unknown_returns_sentinel(self):
        self.assertEqual(lookup("xyz", 3), NOT_FOUND)
        self.assertEqual(get_type(NOT_FOUND), KeywordType.INVALID)
        self.assertEqual(NOT_FOUND, len(KEYWORDS) - 1)

    def test_two_letter_keywords_need_padding(self):
        self.assertEqual(get_type(lookup(word_prefix("pm"), 2)), KeywordType.AM_PM)
        self.assertEqual(get_value(lookup(word_prefix("pm"), 2)), 12)
        self.assertEqual(get_value(lookup(word_prefix("am"), 2)), 0)
        self.assertEqual(lookup("amx", 3), NOT_FOUND)

    def test_ut_and_utc_are_distinct_rows(self):
        ut = lookup(word_prefix("ut"), 2)
        utc = lookup("utc", 3)
        self.assertNotEqual(ut, utc)
        self.assertEqual(get_value(ut), 0)
        self.assertEqual(get_type(utc), KeywordType.TIME_ZONE_NAME)


class ClassifyTests(unittest.TestCase):
    def test_case_is_normalized(self):
        entry = classify("SEPTEMBER")
        self.assertEqual(entry.type, KeywordType.MONTH_NAME)
        self.assertEqual(entry.value, 9)

    def test_am_pm_words(self):
        self.assertEqual(classify("PM").value, 12)
        self.assertEqual(classify("am").type, KeywordType.AM_PM)
        # "amazing" is longer than the keyword and not a month
        self.assertEqual(classify("amazing").type, KeywordType.INVALID)

    def test_time_zone_words(self):
        self.assertEqual(classify("EDT").value, -4)
        self.assertEqual(classify("GMT").value, 0)

    def test_single_letter_word(self):
        self.assertEqual(classify("a").type, KeywordType.INVALID)

    def test_day_names_are_not_keywords(self):
        self.assertEqual(classify("Thursday").type, KeywordType.INVALID)


if __name__ == "__main__":
    unittest.main()
