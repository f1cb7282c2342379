import pytest

from app.models.reply import BusinessInfo
from app.services.validator import validate_business_info, validate_review


def _info(brand_name="Blue Bottle", category="Coffee shop", features="Single-origin beans roasted daily"):
    return BusinessInfo(brand_name=brand_name, category=category, features=features)


class TestValidateBusinessInfo:
    def test_valid_info(self):
        result = validate_business_info(_info())
        assert result.valid is True
        assert result.errors == []

    @pytest.mark.parametrize("brand_name", ["ab", "a" * 30, "  ab  ", " " + "a" * 30 + " "])
    def test_brand_name_within_limits(self, brand_name):
        assert validate_business_info(_info(brand_name=brand_name)).errors == []

    @pytest.mark.parametrize(
        "brand_name, message",
        [
            ("a", "Brand name must be at least 2 characters"),
            ("  a  ", "Brand name must be at least 2 characters"),
            ("", "Brand name must be at least 2 characters"),
            ("a" * 31, "Brand name must not exceed 30 characters"),
        ],
    )
    def test_brand_name_out_of_limits(self, brand_name, message):
        result = validate_business_info(_info(brand_name=brand_name))
        assert result.valid is False
        assert result.errors == [message]

    @pytest.mark.parametrize("category, ok", [("abcd", False), ("abcde", True), ("a" * 50, True), ("a" * 51, False)])
    def test_category_boundaries(self, category, ok):
        assert (validate_business_info(_info(category=category)).errors == []) is ok

    @pytest.mark.parametrize("features, ok", [("a" * 9, False), ("a" * 10, True), ("a" * 100, True), ("a" * 101, False)])
    def test_features_boundaries(self, features, ok):
        assert (validate_business_info(_info(features=features)).errors == []) is ok

    def test_errors_are_reported_in_field_order(self):
        result = validate_business_info(_info(brand_name="a", category="abc", features="a" * 101))
        assert result.errors == [
            "Brand name must be at least 2 characters",
            "Category must be at least 5 characters",
            "Features must not exceed 100 characters",
        ]

    def test_missing_fields_in_mapping_count_as_empty(self):
        result = validate_business_info({"brandName": "Blue Bottle"})
        assert result.errors == [
            "Category must be at least 5 characters",
            "Features must be at least 10 characters",
        ]

    def test_accepts_camel_and_snake_case_mapping(self):
        data = {"category": "Coffee shop", "features": "Single-origin beans"}
        assert validate_business_info({**data, "brandName": "Ace"}).valid
        assert validate_business_info({**data, "brand_name": "Ace"}).valid

    def test_none_is_invalid_without_raising(self):
        assert len(validate_business_info(None).errors) == 3


class TestValidateReview:
    @pytest.mark.parametrize("review", ["", " ", "\n\t", None])
    def test_empty_review(self, review):
        result = validate_review(review)
        assert result.valid is False
        assert result.error == "Please enter a valid review"

    def test_max_length_is_valid(self):
        result = validate_review("a" * 800)
        assert result.valid is True
        assert result.error is None

    def test_too_long(self):
        result = validate_review("a" * 801)
        assert result.valid is False
        assert result.error == "Please shorten the review to 800 characters"

    def test_length_counts_surrounding_whitespace(self):
        assert validate_review(" " + "a" * 800).valid is False
