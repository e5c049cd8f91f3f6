import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker

from fx_mock_api.config.settings import Settings
from fx_mock_api.db.db import create_store_engine, init_db
from fx_mock_api.db.models import QuoteOrm
from fx_mock_api.db.repositories import QuoteRepository
from fx_mock_api.errors import StoreError
from fx_mock_api.main import create_app


class BootstrapTest(unittest.TestCase):
    def test_seeds_exactly_one_quote_once(self):
        with tempfile.TemporaryDirectory() as tmp:
            url = f"sqlite:///{Path(tmp) / 'db.sqlite'}"
            engine = create_store_engine(url)
            try:
                with patch("builtins.print"):
                    first = init_db(engine, now="2026-01-02T10:00:00.000Z")
                    second = init_db(engine)

                self.assertEqual(first, 1)
                self.assertIsNone(second)
                with sessionmaker(engine)() as session:
                    self.assertEqual(session.query(QuoteOrm).count(), 1)

                seed = QuoteRepository(sessionmaker(engine)).get(1)
                self.assertEqual(seed.symbol, "USD")
                self.assertEqual(seed.offer, 150.50)
                self.assertEqual(seed.bid, 149.50)
                self.assertEqual(seed.last, 150.00)
                self.assertEqual(seed.low_price, 148.00)
                self.assertEqual(seed.high_price, 151.00)
                self.assertEqual(seed.open_price, 149.00)
                self.assertEqual(seed.close_price, 150.50)
                self.assertEqual(seed.timestamp, "2026-01-02T10:00:00.000Z")
            finally:
                engine.dispose()

    def test_seed_prints_tagged_line(self):
        engine = create_store_engine("sqlite://")
        with patch("builtins.print") as mock_print:
            init_db(engine)
        engine.dispose()

        mock_print.assert_called_once_with("[DB][seed_quote_inserted] id=1", flush=True)


class SettingsTest(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.PORT, 8001)
        self.assertEqual(settings.HOST, "0.0.0.0")
        self.assertEqual(settings.DATABASE_URL, "sqlite:///./db.sqlite")

    def test_port_from_env(self):
        with patch.dict(os.environ, {"PORT": "9100", "DATABASE_URL": "sqlite://"}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.PORT, 9100)
        self.assertEqual(settings.DATABASE_URL, "sqlite://")

    def test_invalid_port_rejected(self):
        with patch.dict(os.environ, {"PORT": "eighty"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings.from_env()


class LifespanTest(unittest.TestCase):
    def test_engine_disposed_when_bootstrap_fails(self):
        engine = MagicMock()
        app = create_app(Settings(DATABASE_URL="sqlite://"))
        with patch("fx_mock_api.main.create_store_engine", return_value=engine), patch(
            "fx_mock_api.main.init_db", side_effect=StoreError("disk I/O error")
        ), patch("builtins.print"):
            with self.assertRaises(StoreError):
                with TestClient(app):
                    pass

        engine.dispose.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
