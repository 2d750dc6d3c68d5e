import pytest

from fifufa.core import messages
from fifufa.core.topic import TopicValidationError, char_count, clip_topic, validate_topic


class TestValidateTopic:
    def test_trims_whitespace(self):
        assert validate_topic("  ninja  ") == "ninja"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_empty_topic_is_required(self, raw):
        with pytest.raises(TopicValidationError, match=messages.TOPIC_REQUIRED):
            validate_topic(raw)

    def test_single_character_is_too_short(self):
        with pytest.raises(TopicValidationError) as info:
            validate_topic(" a ")
        assert str(info.value) == messages.TOPIC_TOO_SHORT

    def test_more_than_fifty_characters_is_too_long(self):
        with pytest.raises(TopicValidationError) as info:
            validate_topic("x" * 51)
        assert str(info.value) == messages.TOPIC_TOO_LONG

    def test_boundaries_are_accepted(self):
        assert validate_topic("ab") == "ab"
        assert validate_topic("y" * 50) == "y" * 50


def test_clip_topic_caps_input_length():
    assert clip_topic("z" * 80) == "z" * 50
    assert clip_topic(None) == ""


def test_char_count():
    assert char_count("batik") == "5/50 characters"
