from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout,
    QPushButton, QTextEdit, QLabel,
    QListWidget, QListWidgetItem, QLineEdit,
    QMessageBox, QHBoxLayout
)
from PyQt6.QtCore import Qt

from gui.controller import SearchController
from search.url_normalizer import looks_like_domain

EMPTY_LIST_TEXT = "Nessun sito escluso."


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()

        self.setWindowTitle("Ricerca con esclusione siti")
        self.resize(520, 560)
        self.setMinimumSize(420, 460)

        # =========================
        # UI RICERCA
        # =========================
        self.keyword_input = QLineEdit()
        self.keyword_input.setPlaceholderText("Parola chiave")
        self.search_btn = QPushButton("Cerca escludendo i siti")

        keyword_layout = QHBoxLayout()
        keyword_layout.addWidget(self.keyword_input)
        keyword_layout.addWidget(self.search_btn)

        # =========================
        # UI SITI ESCLUSI
        # =========================
        self.domain_list = QListWidget()
        self.domain_input = QLineEdit()
        self.domain_input.setPlaceholderText("es: example.com")

        self.add_domain_btn = QPushButton("Aggiungi")
        self.use_current_btn = QPushButton("Usa sito corrente")
        self.remove_domain_btn = QPushButton("Rimuovi selezionato")

        domain_input_layout = QHBoxLayout()
        domain_input_layout.addWidget(self.domain_input)
        domain_input_layout.addWidget(self.add_domain_btn)
        domain_input_layout.addWidget(self.use_current_btn)

        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)

        # =========================
        # LAYOUT PRINCIPALE
        # =========================
        layout = QVBoxLayout()
        layout.addWidget(QLabel("Cerca:"))
        layout.addLayout(keyword_layout)

        layout.addWidget(QLabel("Siti esclusi:"))
        layout.addWidget(self.domain_list)
        layout.addLayout(domain_input_layout)
        layout.addWidget(self.remove_domain_btn)

        layout.addWidget(QLabel("Log:"))
        layout.addWidget(self.log_view)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

        # =========================
        # CONTROLLER
        # =========================
        self.controller = SearchController(self.append_log)

        # =========================
        # SIGNALS
        # =========================
        self.search_btn.clicked.connect(self.handle_search)
        self.keyword_input.returnPressed.connect(self.handle_search)

        self.add_domain_btn.clicked.connect(self.handle_add_domain)
        self.domain_input.returnPressed.connect(self.handle_add_domain)
        self.use_current_btn.clicked.connect(self.handle_use_current)
        self.remove_domain_btn.clicked.connect(self.handle_remove_domain)

        self.load_domains_to_ui()

    # =========================
    # LOG / MESSAGGI
    # =========================
    def append_log(self, message: str):
        self.log_view.append(message)

    def _show_warning(self, message: str):
        QMessageBox.warning(self, "Errore", message)

    # =========================
    # SITI ESCLUSI
    # =========================
    def render_domains(self, domains: list[str]):
        self.domain_list.clear()
        if not domains:
            placeholder = QListWidgetItem(EMPTY_LIST_TEXT)
            placeholder.setFlags(Qt.ItemFlag.NoItemFlags)
            self.domain_list.addItem(placeholder)
            return
        for domain in domains:
            self.domain_list.addItem(domain)

    def load_domains_to_ui(self):
        result = self.controller.refresh()
        if not result.ok:
            self._show_warning(result.message)
            return
        self.render_domains(result.value)

    def handle_add_domain(self):
        domain = self.domain_input.text().strip()

        if domain and not looks_like_domain(domain):
            self._show_warning("Dominio non valido")
            return

        result = self.controller.add_domain(domain)
        if not result.ok:
            self._show_warning(result.message)
            return

        self.domain_input.clear()
        self.render_domains(result.value)

    def handle_use_current(self):
        result = self.controller.current_site()
        if not result.ok:
            self._show_warning(result.message)
            return
        self.domain_input.setText(result.value)

    def handle_remove_domain(self):
        item = self.domain_list.currentItem()
        if not item or item.text() == EMPTY_LIST_TEXT:
            return

        result = self.controller.remove_domain(item.text())
        if not result.ok:
            self._show_warning(result.message)
            return
        self.render_domains(result.value)

    # =========================
    # RICERCA
    # =========================
    def handle_search(self):
        result = self.controller.search(self.keyword_input.text())
        if not result.ok:
            self._show_warning(result.message)
            self.keyword_input.setFocus()
            return
        self.render_domains(self.controller.last_exclusions)
