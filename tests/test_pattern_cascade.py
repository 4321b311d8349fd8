"""
Tests for ordered regex cascades and their predicates
"""
import re

from pattern_cascade import all_of, contains_digit, excludes, iter_candidates, length_between, try_patterns


class TestTryPatterns:

    def test_first_matching_pattern_wins(self):
        patterns = [r"Code:\s*(\w+)", r"Ref:\s*(\w+)"]
        text = "Ref: B222\nCode: A111"

        assert try_patterns(patterns, text) == "A111"

    def test_falls_through_when_predicate_rejects(self):
        patterns = [r"Name:\s*([^\n]+)", r"Holder:\s*([^\n]+)"]
        text = "Name: AB\nHolder: Jane Doe"

        assert try_patterns(patterns, text, length_between(3, 50)) == "Jane Doe"

    def test_case_insensitive_by_default(self):
        assert try_patterns([r"license no:\s*(\d+)"], "LICENSE NO: 4411") == "4411"

    def test_flags_can_be_overridden(self):
        assert try_patterns([r"license no:\s*(\d+)"], "LICENSE NO: 4411", flags=0) is None

    def test_value_is_trimmed(self):
        assert try_patterns([r"Name:([^\n]*)"], "Name:   Jane Doe   \n") == "Jane Doe"

    def test_whole_match_used_without_groups(self):
        assert try_patterns([r"\d{3}-\d{4}"], "call 555-1234 now") == "555-1234"

    def test_empty_capture_is_skipped(self):
        patterns = [r"Name:[ \t]*([^\n]*)", r"Holder:\s*([^\n]+)"]
        text = "Name:\nHolder: Jane Doe"

        assert try_patterns(patterns, text) == "Jane Doe"

    def test_no_match_returns_none(self):
        assert try_patterns([r"Expiry:\s*(\S+)"], "nothing to see here") is None

    def test_empty_source_returns_none(self):
        assert try_patterns([r"(.*)"], "") is None
        assert try_patterns([r"(.*)"], None) is None

    def test_only_first_match_per_pattern_by_default(self):
        text = "Date: 2001\nDate: 2099"

        assert try_patterns([r"Date:\s*(\d+)"], text, lambda v: v > "2050") is None

    def test_all_matches_scans_every_occurrence(self):
        text = "Date: 2001\nDate: 2099"

        assert try_patterns([r"Date:\s*(\d+)"], text, lambda v: v > "2050", all_matches=True) == "2099"


def test_iter_candidates_keeps_cascade_order():
    patterns = [r"B(\d)", r"A(\d)"]

    assert list(iter_candidates(patterns, "A1 B2 A3", all_matches=True)) == ["2", "1", "3"]
    assert list(iter_candidates(patterns, "A1 B2 A3")) == ["2", "1"]


class TestPredicates:

    def test_length_between_is_half_open(self):
        check = length_between(4, 6)

        assert not check("abc")
        assert check("abcd")
        assert check("abcde")
        assert not check("abcdef")

    def test_excludes_is_case_sensitive(self):
        check = excludes("License", "Number")

        assert not check("License 123")
        assert not check("Phone Number")
        assert check("license holder")
        assert check("Gulf Star Trading")

    def test_contains_digit(self):
        assert contains_digit("DED-1234")
        assert not contains_digit("DED-ABCD")

    def test_all_of(self):
        check = all_of(contains_digit, length_between(3, 10))

        assert check("A12")
        assert not check("ABC")
        assert not check("12")

    def test_predicates_compose_with_regex_flags(self):
        value = try_patterns(
            [r"Company:\s*([^\n]+)", r"Trade Name:\s*([^\n]+)"],
            "Company: License Number 99\nTrade Name: Gulf Star Trading",
            all_of(excludes("License"), length_between(4, 200)),
            flags=re.IGNORECASE,
        )

        assert value == "Gulf Star Trading"
