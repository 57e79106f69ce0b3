import asyncio

from config.domain_registry import DomainRegistry
from search.query_composer import compose
from search.results import ErrorCode, Result, StorageError
from search.url_normalizer import normalize
from state.sync_store import JsonFileStore
from system.browser import BrowserSink, ClipboardContext


class SearchController:
    def __init__(self, log_callback, registry=None, sink=None, context=None):
        self.log = log_callback
        self.registry = registry or DomainRegistry(JsonFileStore())
        self.sink = sink or BrowserSink()
        self.context = context or ClipboardContext()
        self.last_exclusions: list[str] = []

    def _run(self, coro, action: str) -> Result:
        try:
            return Result.success(asyncio.run(coro))
        except StorageError as e:
            self.log(f"[ERRORE] {action} fallito: {e}")
            return Result.failure(e.code)

    # =========================
    # LISTA SITI ESCLUSI
    # =========================

    def refresh(self) -> Result:
        return self._run(self.registry.load(), "Caricamento lista")

    def add_domain(self, text: str) -> Result:
        outcome = self._run(self.registry.add(text), "Aggiunta sito")
        if not outcome.ok:
            return outcome

        # add ritorna a sua volta un Result
        result = outcome.value
        if result.ok:
            self.log(f"[LISTA] Aggiunto sito escluso: {text.strip()}")
        elif result.error == ErrorCode.DUPLICATE_ENTRY:
            self.log(f"[LISTA] Sito già presente: {text.strip()}")
        return result

    def remove_domain(self, domain: str) -> Result:
        result = self._run(self.registry.remove(domain), "Rimozione sito")
        if result.ok:
            self.log(f"[LISTA] Rimosso sito escluso: {domain}")
        return result

    # =========================
    # SITO CORRENTE
    # =========================

    def current_site(self) -> Result:
        url = self.context.current_url()
        if not url:
            self.log("[CONTESTO] Nessun URL corrente disponibile")
            return Result.failure(ErrorCode.NO_ACTIVE_URL)

        result = normalize(url)
        if not result.ok:
            self.log(f"[CONTESTO] Dominio non estraibile da: {url}")
        return result

    # =========================
    # RICERCA
    # =========================

    def search(self, keyword: str) -> Result:
        if not (keyword or "").strip():
            return Result.failure(ErrorCode.EMPTY_KEYWORD)

        # lista sempre riletta dallo store prima di comporre
        listed = self._run(self.registry.list(), "Lettura lista")
        if not listed.ok:
            return listed
        self.last_exclusions = listed.value

        result = compose(keyword, listed.value)
        if not result.ok:
            return result

        self.log(f"[RICERCA] {keyword.strip()} ({len(listed.value)} siti esclusi)")
        self.sink.open(result.value)
        return result
