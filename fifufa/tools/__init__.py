from fifufa.tools.facts_api import FactsApiClient, FactsApiError, RandomWord, normalize_facts

__all__ = ["FactsApiClient", "FactsApiError", "RandomWord", "normalize_facts"]
