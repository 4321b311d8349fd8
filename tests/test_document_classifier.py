"""
Tests for document family detection
"""
import pytest

from document_classifier import DocumentClassifier
from exceptions import ArgumentError, ErrorKind
from models import DocumentFamily


@pytest.fixture
def classifier():
    return DocumentClassifier()


class TestClassify:

    def test_passport(self, classifier, passport_text):
        assert classifier.classify(passport_text) == DocumentFamily.PASSPORT

    def test_emirates_id(self, classifier, emirates_id_text):
        assert classifier.classify(emirates_id_text) == DocumentFamily.EMIRATES_ID

    def test_trade_license(self, classifier, trade_license_text):
        assert classifier.classify(trade_license_text) == DocumentFamily.UAE_TRADE_LICENSE

    def test_trade_license_mentioning_owner_passport(self, classifier):
        text = (
            "TRADE LICENSE\n"
            "License No.: 123822\n"
            "Department of Economic Development\n"
            "Owner Passport No: X1234567"
        )

        assert classifier.classify(text) == DocumentFamily.UAE_TRADE_LICENSE

    def test_trade_license_mentioning_owner_emirates_id(self, classifier, trade_license_text):
        text = trade_license_text + "Owner Emirates ID: 784-1990-1234567-1\n"

        assert classifier.classify(text) == DocumentFamily.UAE_TRADE_LICENSE

    def test_compact_emirates_id_number(self, classifier):
        assert classifier.classify("Card no 784199012345671") == DocumentFamily.EMIRATES_ID

    def test_emirates_id_keyword(self, classifier):
        assert classifier.classify("EMIRATES ID\nName: Muhammad Aamar") == DocumentFamily.EMIRATES_ID

    def test_passport_keyword(self, classifier):
        result = classifier.explain("Scanned copy of PASSPORT data page")

        assert result.family == DocumentFamily.PASSPORT
        assert result.reason == "Passport keyword found"

    def test_mrz_wins_over_weak_license_wording(self, classifier, mrz_lines):
        line1, line2 = mrz_lines
        result = classifier.explain(f"PASSPORT\nLicense No: 12\n{line1}\n{line2}")

        assert result.family == DocumentFamily.PASSPORT
        assert result.reason == "Passport MRZ line found"
        assert result.trade_license_score == 2

    def test_hyphenated_id_inside_longer_number_is_not_emirates_id(self, classifier):
        result = classifier.explain("Ref 784-1990-1234567-12")

        assert result.family == DocumentFamily.PASSPORT
        assert result.reason == "No strong signal; defaulting to passport"

    def test_passport_keyword_ignored_next_to_license_indicator(self, classifier):
        result = classifier.explain("PASSPORT\nLicense Number: 12")

        assert result.family == DocumentFamily.PASSPORT
        assert result.reason == "No strong signal; defaulting to passport"

    def test_unknown_text_defaults_to_passport(self, classifier):
        assert classifier.classify("Lorem ipsum dolor sit amet") == DocumentFamily.PASSPORT

    def test_arabic_title(self, classifier):
        text = "رخصة تجارية\nLicense No: 123822"

        assert classifier.classify(text) == DocumentFamily.UAE_TRADE_LICENSE

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_empty_text_rejected(self, classifier, text):
        with pytest.raises(ArgumentError) as exc_info:
            classifier.classify(text)

        assert exc_info.value.kind == ErrorKind.ARGUMENT
        assert str(exc_info.value) == "Raw text cannot be empty"


class TestTradeLicenseScore:

    def test_title_scores_three(self, classifier):
        assert classifier.trade_license_score("COMMERCIAL LICENSE") == 3

    def test_department_counts_as_title(self, classifier):
        assert classifier.trade_license_score("Department of Economic Development") == 3

    def test_structural_field_counted_once(self, classifier):
        assert classifier.trade_license_score("Trade Name\nTrade Name\nTrade Name") == 2

    def test_labeled_number_needs_three_digits(self, classifier):
        assert classifier.trade_license_score("License No: 12") == 2
        assert classifier.trade_license_score("License No: 123") == 4

    def test_business_terms_need_two_hits(self, classifier):
        assert classifier.trade_license_score("ACME TRADING") == 0
        assert classifier.trade_license_score("ACME TRADING L.L.C") == 1

    def test_emirates_id_card_stays_below_threshold(self, classifier, emirates_id_text):
        assert classifier.trade_license_score(emirates_id_text) < 4

    def test_explain_reports_score(self, classifier, trade_license_text):
        result = classifier.explain(trade_license_text)

        assert result.trade_license_score == classifier.trade_license_score(trade_license_text)
        assert result.trade_license_score >= 4
