from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices, QGuiApplication


# =========================
# SINK DI NAVIGAZIONE
# =========================

class BrowserSink:
    def open(self, url: str) -> None:
        """
        Apre l'URL nel browser di sistema (nuova scheda).
        """
        if not QDesktopServices.openUrl(QUrl(url)):
            print(f"[BROWSER] Impossibile aprire {url}")
            return
        print(f"[BROWSER] Aperto {url}")


# =========================
# CONTESTO ATTIVO
# =========================

class ClipboardContext:
    def current_url(self) -> str | None:
        """
        Ritorna l'URL copiato negli appunti, None se vuoti.
        """
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            return None
        text = clipboard.text().strip()
        return text or None
