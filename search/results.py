from dataclasses import dataclass
from enum import Enum
from typing import Any


# =========================
# CODICI DI ERRORE
# =========================

class ErrorCode(str, Enum):
    INVALID_URL = "invalid_url"
    EMPTY_DOMAIN = "empty_domain"
    EMPTY_INPUT = "empty_input"
    DUPLICATE_ENTRY = "duplicate_entry"
    EMPTY_KEYWORD = "empty_keyword"
    INVALID_KEYWORD = "invalid_keyword"
    STORAGE_ERROR = "storage_error"
    CORRUPT_STATE = "corrupt_state"
    NO_ACTIVE_URL = "no_active_url"


MESSAGES = {
    ErrorCode.INVALID_URL: "URL non valido: impossibile estrarre il dominio.",
    ErrorCode.EMPTY_DOMAIN: "Impossibile estrarre un dominio dall'URL.",
    ErrorCode.EMPTY_INPUT: "Inserisci il dominio del sito da escludere.",
    ErrorCode.DUPLICATE_ENTRY: "Il sito è già presente nella lista.",
    ErrorCode.EMPTY_KEYWORD: "Inserisci una parola chiave da cercare.",
    ErrorCode.INVALID_KEYWORD: "La ricerca contiene caratteri non validi.",
    ErrorCode.STORAGE_ERROR: "Errore durante l'accesso alla lista salvata.",
    ErrorCode.CORRUPT_STATE: "La lista salvata è danneggiata.",
    ErrorCode.NO_ACTIVE_URL: "Nessun URL disponibile per il sito corrente.",
}


# =========================
# ECCEZIONI DI STORAGE
# =========================

class StorageError(Exception):
    """
    Errore dello store persistente (lettura o scrittura fallita).
    """
    code = ErrorCode.STORAGE_ERROR


class CorruptState(StorageError):
    """
    Il valore salvato esiste ma non è una lista di stringhe.
    """
    code = ErrorCode.CORRUPT_STATE


# =========================
# RISULTATO
# =========================

@dataclass(frozen=True)
class Result:
    value: Any = None
    error: ErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is None:
            return ""
        return MESSAGES[self.error]

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorCode) -> "Result":
        return cls(error=error)
