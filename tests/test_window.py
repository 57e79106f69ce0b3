import os
import unittest
from unittest import mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from config.domain_registry import DomainRegistry, EXCLUDED_SITES_KEY
from gui.controller import SearchController
from gui.main_window import EMPTY_LIST_TEXT, MainWindow
from search.results import ErrorCode, Result, StorageError
from state.sync_store import MemoryStore


def _get_qt_app() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class TestSearchController(unittest.TestCase):
    def _make_controller(self, data=None, current_url=None):
        self.log = mock.Mock()
        self.store = MemoryStore(data)
        self.sink = mock.Mock()
        self.context = mock.Mock()
        self.context.current_url.return_value = current_url
        return SearchController(
            self.log,
            registry=DomainRegistry(self.store),
            sink=self.sink,
            context=self.context,
        )

    def test_add_and_remove_domain(self):
        controller = self._make_controller()

        result = controller.add_domain("x.com")
        self.assertEqual(result.value, ["x.com"])
        self.log.assert_called_with("[LISTA] Aggiunto sito escluso: x.com")

        duplicate = controller.add_domain("x.com")
        self.assertEqual(duplicate.error, ErrorCode.DUPLICATE_ENTRY)

        removed = controller.remove_domain("x.com")
        self.assertEqual(removed.value, [])
        self.assertEqual(self.store.data[EXCLUDED_SITES_KEY], [])

    def test_search_rereads_store_and_opens_sink(self):
        controller = self._make_controller({EXCLUDED_SITES_KEY: ["a.com"]})
        controller.refresh()
        self.store.data[EXCLUDED_SITES_KEY] = ["a.com", "b.com"]

        result = controller.search("cats")

        expected = "https://www.google.com/search?q=cats%20-site%3Aa.com%20-site%3Ab.com"
        self.assertEqual(result.value, expected)
        self.sink.open.assert_called_once_with(expected)
        self.assertEqual(controller.last_exclusions, ["a.com", "b.com"])

    def test_search_empty_keyword_does_not_open(self):
        controller = self._make_controller()
        result = controller.search("  ")
        self.assertEqual(result.error, ErrorCode.EMPTY_KEYWORD)
        self.sink.open.assert_not_called()

    def test_storage_error_becomes_result(self):
        controller = self._make_controller()
        with mock.patch.object(self.store, "get", side_effect=StorageError("offline")):
            result = controller.search("cats")

        self.assertEqual(result.error, ErrorCode.STORAGE_ERROR)
        self.sink.open.assert_not_called()
        self.assertTrue(self.log.call_args[0][0].startswith("[ERRORE]"))

    def test_corrupt_state_becomes_result(self):
        controller = self._make_controller({EXCLUDED_SITES_KEY: {"a": 1}})
        self.assertEqual(controller.refresh().error, ErrorCode.CORRUPT_STATE)

    def test_current_site_normalizes_url(self):
        controller = self._make_controller(current_url="https://www.Example.com/page")
        self.assertEqual(controller.current_site().value, "example.com")

    def test_current_site_without_url(self):
        controller = self._make_controller(current_url=None)
        self.assertEqual(controller.current_site().error, ErrorCode.NO_ACTIVE_URL)


class TestMainWindowGui(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._app = _get_qt_app()

    def _make_window(self, domains=None):
        with mock.patch("gui.main_window.SearchController") as controller_cls:
            controller = controller_cls.return_value
            controller.refresh.return_value = Result.success(domains or [])
            window = MainWindow()
        return window, controller

    def test_empty_list_shows_placeholder(self):
        window, _ = self._make_window()
        self.assertEqual(window.domain_list.count(), 1)
        self.assertEqual(window.domain_list.item(0).text(), EMPTY_LIST_TEXT)

    def test_add_domain_renders_list(self):
        window, controller = self._make_window()
        controller.add_domain.return_value = Result.success(["x.com"])
        window.domain_input.setText(" x.com ")

        window.handle_add_domain()

        controller.add_domain.assert_called_once_with("x.com")
        self.assertEqual(window.domain_input.text(), "")
        self.assertEqual(window.domain_list.item(0).text(), "x.com")

    def test_add_invalid_domain_warns(self):
        window, controller = self._make_window()
        window.domain_input.setText("not a domain")

        with mock.patch.object(window, "_show_warning") as warn:
            window.handle_add_domain()

        warn.assert_called_once_with("Dominio non valido")
        controller.add_domain.assert_not_called()

    def test_duplicate_domain_warns_and_keeps_input(self):
        window, controller = self._make_window(["x.com"])
        controller.add_domain.return_value = Result.failure(ErrorCode.DUPLICATE_ENTRY)
        window.domain_input.setText("x.com")

        with mock.patch.object(window, "_show_warning") as warn:
            window.handle_add_domain()

        warn.assert_called_once_with(Result.failure(ErrorCode.DUPLICATE_ENTRY).message)
        self.assertEqual(window.domain_input.text(), "x.com")

    def test_use_current_fills_input(self):
        window, controller = self._make_window()
        controller.current_site.return_value = Result.success("example.com")

        window.handle_use_current()

        self.assertEqual(window.domain_input.text(), "example.com")

    def test_remove_selected_domain(self):
        window, controller = self._make_window(["a.com", "b.com"])
        controller.remove_domain.return_value = Result.success(["b.com"])
        window.domain_list.setCurrentRow(0)

        window.handle_remove_domain()

        controller.remove_domain.assert_called_once_with("a.com")
        self.assertEqual(window.domain_list.count(), 1)

    def test_remove_ignores_placeholder(self):
        window, controller = self._make_window()
        window.domain_list.setCurrentRow(0)

        window.handle_remove_domain()

        controller.remove_domain.assert_not_called()

    def test_search_renders_fresh_list(self):
        window, controller = self._make_window(["a.com"])
        controller.search.return_value = Result.success("https://www.google.com/search?q=cats")
        controller.last_exclusions = ["a.com", "b.com"]
        window.keyword_input.setText("cats")

        window.handle_search()

        controller.search.assert_called_once_with("cats")
        self.assertEqual(
            [window.domain_list.item(i).text() for i in range(window.domain_list.count())],
            ["a.com", "b.com"],
        )

    def test_search_error_warns(self):
        window, controller = self._make_window()
        controller.search.return_value = Result.failure(ErrorCode.EMPTY_KEYWORD)

        with mock.patch.object(window, "_show_warning") as warn:
            window.handle_search()

        controller.search.assert_called_once_with("")
        warn.assert_called_once()


if __name__ == "__main__":
    unittest.main()
