# =========================
# MOTORE DI RICERCA
# =========================

SEARCH_BASE_URL = "https://www.google.com/search"
SEARCH_QUERY_PARAM = "q"

# Caratteri lasciati in chiaro da encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"

EXCLUSION_OPERATOR = "-site:"
