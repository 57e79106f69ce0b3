from search.results import CorruptState, ErrorCode, Result

EXCLUDED_SITES_KEY = "excludedSites"

ExclusionList = list[str]


def parse_exclusions(value) -> ExclusionList:
    """
    Valida il valore letto dallo store.
    Assente -> lista vuota; qualsiasi cosa diversa da una lista di stringhe
    è considerata danneggiata.
    """
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(d, str) for d in value):
        raise CorruptState(f"Valore non valido sotto la chiave '{EXCLUDED_SITES_KEY}'")
    return list(value)


class DomainRegistry:
    """
    Lista dei domini esclusi per una sessione della finestra.

    Ogni modifica rilegge lo store prima di scrivere, così da includere i
    cambiamenti fatti da altre istanze. Non esiste un lock: due add quasi
    simultanei da istanze diverse possono perdersi (vince l'ultimo set).
    """

    def __init__(self, store, key: str = EXCLUDED_SITES_KEY):
        self.store = store
        self.key = key
        self.exclusions: ExclusionList = []

    async def _read(self) -> ExclusionList:
        return parse_exclusions(await self.store.get(self.key))

    async def _save(self, exclusions: ExclusionList) -> None:
        await self.store.set(self.key, list(exclusions))
        self.exclusions = list(exclusions)

    async def load(self) -> ExclusionList:
        self.exclusions = await self._read()
        return list(self.exclusions)

    async def add(self, domain: str) -> Result:
        domain = (domain or "").strip()
        if not domain:
            return Result.failure(ErrorCode.EMPTY_INPUT)

        exclusions = await self._read()
        self.exclusions = list(exclusions)

        # confronto esatto, case-sensitive
        if domain in exclusions:
            return Result.failure(ErrorCode.DUPLICATE_ENTRY)

        exclusions.append(domain)
        await self._save(exclusions)
        return Result.success(list(exclusions))

    async def remove(self, domain: str) -> ExclusionList:
        exclusions = [d for d in await self._read() if d != domain]
        await self._save(exclusions)
        return list(exclusions)

    async def list(self) -> ExclusionList:
        self.exclusions = await self._read()
        return list(self.exclusions)
