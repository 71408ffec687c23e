"""
Test suite para slug e confidence scoring
"""

import pytest

from event_agent.extraction.confidence import count_filled_fields, score
from event_agent.extraction.constants import CONFIDENCE_FIELDS, Confidence
from event_agent.extraction.slug import generate_slug, strip_accents
from event_agent.extraction.validator import validate_event

from conftest import full_payload, minimal_payload


@pytest.mark.unit
class TestSlug:
    """Test generate_slug"""

    def test_title_and_city(self):
        assert generate_slug("Growth Summit 2026", "São Paulo") == "growth-summit-2026-sao-paulo"

    def test_title_only(self):
        assert generate_slug("Meetup de SEO", None) == "meetup-de-seo"

    def test_punctuation_runs_become_single_hyphen(self):
        assert generate_slug("  RD Summit -- 2026!!! (Edição #10) ") == "rd-summit-2026-edicao-10"

    def test_accents_stripped(self):
        assert strip_accents("Conferência Híbrida em Florianópolis") == "Conferencia Hibrida em Florianopolis"

    def test_capped_at_80_without_trailing_hyphen(self):
        slug = generate_slug("palavra " * 30)

        assert len(slug) <= 80
        assert not slug.endswith("-")
        assert not slug.startswith("-")


@pytest.mark.unit
class TestConfidence:
    """Test score thresholds"""

    def test_all_fields_high(self, source_url):
        data = validate_event(full_payload(), source_url)

        assert count_filled_fields(data) == len(CONFIDENCE_FIELDS) == 12
        assert score(data) == Confidence.HIGH

    def test_no_fields_low(self, source_url):
        data = validate_event(minimal_payload(), source_url)

        assert count_filled_fields(data) == 0
        assert score(data) == Confidence.LOW

    def test_five_fields_medium(self, source_url):
        payload = minimal_payload(
            description="<p>Evento</p>",
            city="Recife",
            state="PE",
            venue_name="Porto Digital",
            ticket_url="https://sympla.com.br/x"
        )
        data = validate_event(payload, source_url)

        assert count_filled_fields(data) == 5
        assert score(data) == Confidence.MEDIUM

    @pytest.mark.parametrize("filled,expected", [
        (3, Confidence.LOW),
        (4, Confidence.MEDIUM),
        (7, Confidence.MEDIUM),
        (8, Confidence.HIGH),
    ])
    def test_thresholds(self, source_url, filled, expected):
        full = full_payload()
        payload = minimal_payload(**{name: full[name] for name in CONFIDENCE_FIELDS[:filled]})
        data = validate_event(payload, source_url)

        assert score(data) == expected

    def test_score_does_not_alter_record(self, source_url):
        data = validate_event(full_payload(), source_url)
        before = data.model_dump()

        score(data)

        assert data.model_dump() == before
