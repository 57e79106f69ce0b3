from dataclasses import dataclass
from urllib.parse import quote

import config.search_settings as search_settings
from search.results import ErrorCode, Result


@dataclass(frozen=True)
class SearchQuery:
    keyword: str
    exclusions: tuple[str, ...] = ()

    def text(self) -> str:
        """
        Parola chiave seguita da un token "-site:<dominio>" per ogni
        dominio escluso, nell'ordine della lista.
        """
        tokens = [self.keyword]
        tokens.extend(f"{search_settings.EXCLUSION_OPERATOR}{d}" for d in self.exclusions)
        return " ".join(tokens)


def build_search_url(query: SearchQuery) -> str:
    encoded = quote(query.text(), safe=search_settings.URI_COMPONENT_SAFE)
    return f"{search_settings.SEARCH_BASE_URL}?{search_settings.SEARCH_QUERY_PARAM}={encoded}"


def compose(keyword: str, exclusions) -> Result:
    """
    Costruisce l'URL di ricerca che esclude i domini indicati.
    Non apre l'URL: è compito del sink di navigazione.
    """
    keyword = (keyword or "").strip()
    if not keyword:
        return Result.failure(ErrorCode.EMPTY_KEYWORD)

    # i duplicati restano: un token per voce
    query = SearchQuery(keyword, tuple(exclusions or ()))
    try:
        url = build_search_url(query)
    except UnicodeEncodeError:
        # surrogati isolati non codificabili in UTF-8
        return Result.failure(ErrorCode.INVALID_KEYWORD)
    return Result.success(url)
