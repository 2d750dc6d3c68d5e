import pytest

from fifufa.tools.facts_api import FactsApiError, normalize_facts


class TestNormalizeFacts:
    def test_list_is_kept(self):
        assert normalize_facts(["one", "two"]) == ["one", "two"]

    def test_numbered_string_is_split(self):
        text = "1. Cats sleep a lot. 2. Cats purr.\n3.  They have whiskers."
        assert normalize_facts(text) == ["Cats sleep a lot.", "Cats purr.", "They have whiskers."]

    def test_empty_pieces_are_dropped(self):
        assert normalize_facts("1. 2. only one") == ["only one"]

    @pytest.mark.parametrize("value", [None, 42, {"facts": []}])
    def test_other_types_yield_nothing(self, value):
        assert normalize_facts(value) == []


class TestFetchFacts:
    def test_posts_topic(self, service, api):
        service.queue(body={"facts": ["a", "b"]})
        assert api.fetch_facts("ninja") == ["a", "b"]
        request = service.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/facts"
        assert service.last_json() == {"topic": "ninja"}

    def test_more_flag_is_sent(self, service, api):
        service.queue(body={"facts": "1. x 2. y"})
        assert api.fetch_facts("ninja", more=True) == ["x", "y"]
        assert service.last_json() == {"topic": "ninja", "more": True}

    def test_error_body_becomes_message(self, service, api):
        service.queue(status=429, body={"error": "Too many requests"})
        with pytest.raises(FactsApiError) as info:
            api.fetch_facts("ninja")
        assert info.value.status_code == 429
        assert info.value.message == "Too many requests"

    def test_fallback_message_without_error_field(self, service, api):
        service.queue(status=400, body={})
        with pytest.raises(FactsApiError, match="Failed to fetch more facts"):
            api.fetch_facts("ninja", more=True)

    def test_undecodable_body(self, service, api):
        service.queue(status=200, raw=b"<html>oops</html>")
        with pytest.raises(FactsApiError) as info:
            api.fetch_facts("ninja")
        assert info.value.status_code == 200

    def test_transport_failure(self, service, api):
        with pytest.raises(FactsApiError) as info:
            api.fetch_facts("ninja")
        assert info.value.status_code is None


class TestFetchRandomWord:
    def test_returns_word_and_remaining(self, service, api):
        service.queue(body={"word": "origami", "remaining": 7})
        word = api.fetch_random_word()
        assert (word.word, word.remaining) == ("origami", 7)
        assert service.requests[0].method == "GET"
        assert service.requests[0].url.path == "/api/random-words"

    def test_error_response(self, service, api):
        service.queue(status=503, body={"error": "cache empty"})
        with pytest.raises(FactsApiError, match="cache empty"):
            api.fetch_random_word()

    def test_missing_word_is_an_error(self, service, api):
        service.queue(body={"remaining": 3})
        with pytest.raises(FactsApiError, match="Failed to get random word"):
            api.fetch_random_word()
