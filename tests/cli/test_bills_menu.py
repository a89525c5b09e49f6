from unittest.mock import AsyncMock, patch

import httpx

from billed.cli.bills_menu import bills_view
from billed.errors import StoreError
from billed.identity import KeyValueStore
from billed.store.api import ApiStore
from tests.conftest import _mocked_store, _sample_bill


class TestBillsView:
    @patch("billed.cli.bills_menu.console")
    def test_renders_table(self, mock_console):
        store = _mocked_store([_sample_bill(), _sample_bill(id="2", date="2022-01-01", name="recent")])

        bills_view(store)

        store.bills.return_value.list.assert_awaited_once()
        tables = [c.args[0] for c in mock_console.print.call_args_list if c.args and hasattr(c.args[0], "rows")]
        assert len(tables) == 1
        assert tables[0].row_count == 2

    @patch("billed.cli.bills_menu.console")
    def test_empty_listing(self, mock_console):
        bills_view(_mocked_store([]))

        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "Aucune note de frais" in printed

    @patch("billed.cli.bills_menu.console")
    def test_store_error_is_reported(self, mock_console):
        store = _mocked_store()
        store.bills.return_value.list = AsyncMock(side_effect=StoreError("Erreur 500", 500))

        bills_view(store)

        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "Erreur 500" in printed

    @patch("billed.cli.bills_menu.console")
    def test_invalid_api_body_is_reported(self, mock_console):
        def handler(request):
            return httpx.Response(200, json=[{"id": "1", "amount": "beaucoup"}])

        bills_view(ApiStore("http://api.test", KeyValueStore(), transport=httpx.MockTransport(handler)))

        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "Impossible de charger" in printed

    @patch("billed.cli.bills_menu.console")
    def test_decimal_amount_is_listed(self, mock_console):
        bills_view(_mocked_store([_sample_bill(amount=348.5)]))

        table = next(c.args[0] for c in mock_console.print.call_args_list if c.args and hasattr(c.args[0], "rows"))
        assert "348,50 €" in list(table.columns[3].cells)
