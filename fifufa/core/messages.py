"""User-facing strings shown by the fact view."""

TOPIC_REQUIRED = "Please enter a topic first!"
TOPIC_TOO_SHORT = "Topic too short! Please enter at least 2 characters."
TOPIC_TOO_LONG = "Topic too long! Please keep it under 50 characters."

TOO_MANY_REQUESTS = ["⏰ Too many requests! Please wait a moment and try again."]
SERVER_ISSUE = ["🔧 Server issue detected. Try a different topic or wait a few minutes."]
GENERIC_FAILURE = [
    "🙏 Sorry, we couldn't fetch fun facts right now.",
    "📡 Possible reason: connectivity issue or API credit limit reached.",
    "💡 Please try again in a few minutes!",
]
MORE_FAILURE = "🙏 Sorry, couldn't fetch more facts."
RANDOM_TOPIC_FAILURE = "Failed to get random topic. Please try again."

FETCH_FACTS_FALLBACK = "Failed to fetch facts"
FETCH_MORE_FALLBACK = "Failed to fetch more facts"
RANDOM_WORD_FALLBACK = "Failed to get random word"
