"""
Test suite para o validador da resposta do modelo
"""

import json
import sys
from datetime import date

import pytest

from event_agent.errors import MissingRequiredField, UnparsableResponse
from event_agent.extraction.constants import (
    DEFAULT_ORGANIZER_NAME,
    EventCategory,
    EventFormat,
    PriceType,
    VALID_CATEGORIES,
    VALID_FORMATS,
    VALID_TOPICS,
)
from event_agent.extraction.validator import parse_model_reply, validate, validate_event

from conftest import full_payload, minimal_payload


@pytest.mark.unit
class TestParseModelReply:
    """Test JSON recovery from the raw reply"""

    def test_plain_json(self):
        assert parse_model_reply('{"title": "X"}') == {"title": "X"}

    def test_fenced_json_matches_unfenced(self):
        body = json.dumps(full_payload(), ensure_ascii=False, indent=2)

        plain = parse_model_reply(body)
        fenced = parse_model_reply(f"```json\n{body}\n```")
        untagged = parse_model_reply(f"Aqui está:\n```\n{body}\n```\nFim.")

        assert fenced == plain
        assert untagged == plain

    def test_garbage_raises(self):
        with pytest.raises(UnparsableResponse):
            parse_model_reply("Desculpe, não encontrei nenhum evento nesta página.")

    def test_broken_fenced_block_raises(self):
        with pytest.raises(UnparsableResponse):
            parse_model_reply('```json\n{"title": "X",\n```')

    def test_non_object_raises(self):
        with pytest.raises(UnparsableResponse):
            parse_model_reply('["growth", "seo"]')

    def test_empty_reply_raises(self):
        with pytest.raises(UnparsableResponse):
            parse_model_reply("")

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"),
                        reason="interpreter without integer digit limit")
    def test_integer_beyond_digit_limit_raises(self):
        reply = '{"title": "X", "price_value": ' + "1" * 5001 + "}"

        with pytest.raises(UnparsableResponse):
            parse_model_reply(reply)
        with pytest.raises(UnparsableResponse):
            parse_model_reply(f"```json\n{reply}\n```")

    def test_deeply_nested_reply_raises(self):
        reply = "[" * 100000 + "]" * 100000

        with pytest.raises(UnparsableResponse):
            parse_model_reply(reply)
        with pytest.raises(UnparsableResponse):
            parse_model_reply(f"```json\n{reply}\n```")


@pytest.mark.unit
class TestRequiredFields:
    """Test title, start_date and category enforcement"""

    def test_missing_start_date(self, source_url):
        payload = minimal_payload()
        del payload["start_date"]

        with pytest.raises(MissingRequiredField) as exc_info:
            validate_event(payload, source_url)

        assert exc_info.value.field == "start_date"

    def test_wrong_start_date_format(self, source_url):
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_event(minimal_payload(start_date="15/03/2026"), source_url)

        assert exc_info.value.field == "start_date"
        assert "start_date" in exc_info.value.message

    def test_impossible_calendar_date(self, source_url):
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_event(minimal_payload(start_date="2026-02-30"), source_url)

        assert exc_info.value.field == "start_date"

    @pytest.mark.parametrize("title", [None, "", "   ", 42])
    def test_invalid_title(self, source_url, title):
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_event(minimal_payload(title=title), source_url)

        assert exc_info.value.field == "title"

    @pytest.mark.parametrize("category", [None, "FESTA", "", 3])
    def test_invalid_category(self, source_url, category):
        with pytest.raises(MissingRequiredField) as exc_info:
            validate_event(minimal_payload(category=category), source_url)

        assert exc_info.value.field == "category"

    def test_category_case_is_normalized(self, source_url):
        data = validate_event(minimal_payload(category=" workshop "), source_url)

        assert data.category == EventCategory.WORKSHOP


@pytest.mark.unit
class TestOptionalFieldCoercion:
    """Test defaults and fallbacks for optional fields"""

    def test_minimal_payload_defaults(self, source_url):
        data = validate_event(minimal_payload(), source_url)

        assert data.start_date == date(2026, 3, 15)
        assert data.description == ""
        assert data.format == EventFormat.PRESENCIAL
        assert data.topics == []
        assert data.is_free is False
        assert data.price_type is None
        assert data.price_value is None
        assert data.event_url == source_url
        assert data.organizer_name == DEFAULT_ORGANIZER_NAME
        assert data.city is None
        assert data.latitude is None

    def test_full_payload_is_kept(self, source_url):
        data = validate_event(full_payload(), source_url)

        assert data.end_date == date(2026, 3, 16)
        assert data.start_time == "09:00"
        assert data.city == "São Paulo"
        assert data.price_type == PriceType.A_PARTIR_DE
        assert data.price_value == 497.0
        assert data.event_url == "https://growthsummit.com.br"
        assert data.organizer_name == "Growth Co"
        assert data.latitude == -23.5

    @pytest.mark.parametrize("fmt", ["PRESENCIAL", "ONLINE", "HIBRIDO", "hibrido", "VIRTUAL", None, 7])
    def test_format_always_in_vocabulary(self, source_url, fmt):
        data = validate_event(minimal_payload(format=fmt), source_url)

        assert data.format.value in VALID_FORMATS

    def test_unknown_format_defaults_to_presencial(self, source_url):
        data = validate_event(minimal_payload(format="VIRTUAL"), source_url)

        assert data.format == EventFormat.PRESENCIAL

    def test_unknown_topics_are_dropped(self, source_url):
        topics = ["growth", "blockchain", "SEO", "growth", 12, "metaverso"]
        data = validate_event(minimal_payload(topics=topics), source_url)

        assert set(data.topics) == {"growth", "seo"}
        assert set(data.topics) <= VALID_TOPICS

    def test_topics_not_a_list(self, source_url):
        data = validate_event(minimal_payload(topics="growth"), source_url)

        assert data.topics == []

    def test_is_free_clears_prices(self, source_url):
        payload = full_payload(is_free=True, price_type="unico", price_value=150)
        data = validate_event(payload, source_url)

        assert data.is_free is True
        assert data.price_type is None
        assert data.price_value is None

    @pytest.mark.parametrize("price_type", ["gratis", "UNICO", "", ["unico"]])
    def test_unrecognized_price_type(self, source_url, price_type):
        data = validate_event(minimal_payload(price_type=price_type), source_url)

        assert data.price_type is None

    @pytest.mark.parametrize("price_value", [0, -10, "97.00", True, float("nan"), 10 ** 400])
    def test_non_positive_or_non_numeric_price(self, source_url, price_value):
        data = validate_event(minimal_payload(price_value=price_value), source_url)

        assert data.price_value is None

    def test_invalid_optional_dates_and_times_become_null(self, source_url):
        payload = minimal_payload(end_date="16/03/2026", start_time="9h", end_time="25:00")
        data = validate_event(payload, source_url)

        assert data.end_date is None
        assert data.start_time is None
        assert data.end_time is None

    def test_single_digit_hour_is_padded(self, source_url):
        data = validate_event(minimal_payload(start_time="9:30"), source_url)

        assert data.start_time == "09:30"

    def test_blank_strings_become_null(self, source_url):
        data = validate_event(minimal_payload(city="  ", organizer_name="", event_url=""), source_url)

        assert data.city is None
        assert data.organizer_name == DEFAULT_ORGANIZER_NAME
        assert data.event_url == source_url

    def test_out_of_range_coordinates(self, source_url):
        data = validate_event(minimal_payload(latitude=123.0, longitude="-46.6"), source_url)

        assert data.latitude is None
        assert data.longitude is None

    def test_coordinates_too_large_for_float(self, source_url):
        data = validate_event(minimal_payload(latitude=10 ** 400, longitude=-(10 ** 400)), source_url)

        assert data.latitude is None
        assert data.longitude is None


@pytest.mark.unit
class TestValidate:
    """Test parse + validate entry point"""

    def test_fenced_reply(self, source_url):
        raw = "```json\n" + json.dumps(full_payload(), ensure_ascii=False) + "\n```"
        data = validate(raw, source_url)

        assert data.title == "Growth Summit 2026"
        assert data.category.value in VALID_CATEGORIES

    def test_slug_from_title_and_city(self, source_url):
        data = validate(json.dumps(full_payload()), source_url)

        assert data.slug == "growth-summit-2026-sao-paulo"

    def test_slug_without_city(self, source_url):
        data = validate(json.dumps(minimal_payload()), source_url)

        assert data.slug == "growth-summit-2026"

    def test_huge_numbers_in_reply_become_null(self, source_url):
        huge = "1" + "0" * 400
        raw = json.dumps(minimal_payload())[:-1] + f', "price_value": {huge}, "latitude": {huge}}}'

        data = validate(raw, source_url)

        assert data.price_value is None
        assert data.latitude is None
