"""Tests for the AI search relay."""

import json

import httpx
import openai
import pytest

from sathorn_map.config import Settings
from sathorn_map.exceptions import InvalidInputError, UpstreamError
from sathorn_map.services.ai_search import AISearchRelay, create_openai_client
from tests.conftest import FakeLLMClient, llm_reply

CHAT_URL = "https://api.openai.com/v1/chat/completions"


def make_relay(catalogue, query_log, settings, **client_kwargs) -> AISearchRelay:
    return AISearchRelay(FakeLLMClient(**client_kwargs), catalogue, query_log, settings)


class TestSearchInput:
    """Blank queries never reach the provider."""

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_rejects_blank_query(self, relay, llm_client, query_log, query) -> None:
        with pytest.raises(InvalidInputError):
            relay.search(query)

        assert llm_client.completions.calls == []
        assert len(query_log) == 0


class TestSearchSuccess:
    """Tests for a successful relay round trip."""

    def test_returns_parsed_reply(self, relay) -> None:
        result = relay.search("Michelin restaurants")

        assert result.response == "Le Du is a Michelin starred restaurant."
        assert result.relevant_property_ids == [14]
        assert result.summary is None

    def test_records_query(self, relay, query_log) -> None:
        relay.search("Michelin restaurants")

        [record] = query_log.recent(1)
        assert record.query == "Michelin restaurants"
        assert record.response == "Le Du is a Michelin starred restaurant."
        assert json.loads(record.property_ids) == [14]

    def test_parses_summary(self, catalogue, query_log, settings) -> None:
        content = llm_reply(
            response="Four restaurants above ₿400,000.",
            ids=[11, 13, 14, 15],
            summary={"count": 4, "averagePrice": 466250, "priceRange": {"min": 420000, "max": 520000}}
        )
        relay = make_relay(catalogue, query_log, settings, content=content)

        result = relay.search("expensive restaurants")

        assert result.summary.count == 4
        assert result.summary.average_price == 466250
        assert result.summary.price_range.max == 520000

    def test_malformed_summary_is_dropped(self, catalogue, query_log, settings) -> None:
        content = llm_reply(
            ids=[14],
            summary={"count": 1, "averagePrice": "₿475,000", "priceRange": "₿475,000"}
        )
        relay = make_relay(catalogue, query_log, settings, content=content)

        result = relay.search("Le Du")

        assert result.relevant_property_ids == [14]
        assert result.summary is None
        assert len(query_log) == 1

    def test_drops_unknown_and_duplicate_ids(self, catalogue, query_log, settings) -> None:
        relay = make_relay(catalogue, query_log, settings, content=llm_reply(ids=[14, 999, 14, 1]))

        result = relay.search("anything")

        assert result.relevant_property_ids == [14, 1]
        assert query_log.recent(1)[0].property_id_list == [14, 1]

    def test_request_shape(self, relay, llm_client, settings) -> None:
        relay.search("offices near Sala Daeng")

        [call] = llm_client.completions.calls
        assert call["model"] == settings.openai_model
        assert call["response_format"] == {"type": "json_object"}
        system, user = call["messages"]
        assert system["role"] == "system"
        assert "Empire Tower" in system["content"]
        assert user == {"role": "user", "content": "offices near Sala Daeng"}


class TestContext:
    """Tests for the property context sent to the model."""

    def test_enhanced_context(self, relay, catalogue) -> None:
        context = relay.build_context(catalogue.get_all())

        assert len(context) == 16
        assert context[0] == {
            "id": 1,
            "name": "Empire Tower",
            "type": "office",
            "area": 5000,
            "pricePerSqm": 350000,
            "nearestBts": "Chong Nonsi",
            "btsDistance": 200,
            "lat": 13.724,
            "lng": 100.5347,
            "address": "1 Empire Tower, South Sathorn Road, Sathorn, Bangkok",
        }

    def test_basic_context(self, catalogue, query_log) -> None:
        settings = Settings(_env_file=None, ai_enhanced_context=False)
        relay = make_relay(catalogue, query_log, settings)

        context = relay.build_context(catalogue.get_all())

        assert set(context[0]) == {"id", "name", "type", "area", "pricePerSqm", "nearestBts", "btsDistance"}

    def test_nearby_context_for_coordinates(self, relay, llm_client) -> None:
        relay.search("what is around 13.7240, 100.5347?")

        system = llm_client.completions.calls[0]["messages"][0]["content"]
        assert "referred to the location 13.724, 100.5347" in system
        assert '"name": "Empire Tower", "distance": "0m"' in system

    def test_no_nearby_context_without_coordinates(self, relay, llm_client) -> None:
        relay.search("2 bedrooms, 3 bathrooms near Chong Nonsi")

        system = llm_client.completions.calls[0]["messages"][0]["content"]
        assert "referred to the location" not in system

    def test_nearby_respects_limit(self, catalogue, query_log) -> None:
        settings = Settings(_env_file=None, ai_nearby_limit=2)
        relay = make_relay(catalogue, query_log, settings)

        nearby = relay.build_nearby_context("13.7240, 100.5347", catalogue.get_all())

        assert nearby.count('"distance"') == 2


class TestSearchFailures:
    """Upstream failures are reported and never recorded."""

    @pytest.mark.parametrize("content", [
        "Sorry, I cannot help with that.",
        "",
        None,
        "[1, 2, 3]",
        json.dumps({"relevantPropertyIds": [1]}),
        json.dumps({"response": "Some text"}),
        json.dumps({"response": "Some text", "relevantPropertyIds": "one"}),
    ])
    def test_malformed_reply(self, catalogue, query_log, settings, content) -> None:
        relay = make_relay(catalogue, query_log, settings, content=content)

        with pytest.raises(UpstreamError):
            relay.search("offices")

        assert len(query_log) == 0

    @pytest.mark.parametrize("error", [
        openai.APIConnectionError(request=httpx.Request("POST", CHAT_URL)),
        openai.APITimeoutError(request=httpx.Request("POST", CHAT_URL)),
        openai.AuthenticationError(
            "Incorrect API key provided",
            response=httpx.Response(401, request=httpx.Request("POST", CHAT_URL)),
            body=None,
        ),
    ])
    def test_provider_error(self, catalogue, query_log, settings, error) -> None:
        relay = make_relay(catalogue, query_log, settings, error=error)

        with pytest.raises(UpstreamError):
            relay.search("offices")

        assert len(query_log) == 0
        assert len(relay.client.completions.calls) == 1


class TestCreateOpenAIClient:
    """Tests for create_openai_client."""

    def test_no_retries(self, settings) -> None:
        client = create_openai_client(settings)

        assert client.max_retries == 0
        assert client.api_key == "test-key"
