"""Tests for the exception hierarchy and the logger setup."""
import json
import logging
import os
import tempfile
import unittest

from storefront.core.exceptions import (
    ExternalServiceError,
    OrderLoadError,
    StorefrontError,
    exception_factory,
)
from storefront.core.logger import LoggerConfig, configure


class TestExceptions(unittest.TestCase):
    def test_order_load_error_defaults(self):
        err = OrderLoadError("No se pudo cargar el pedido", details={"status_code": 500})
        self.assertIsInstance(err, ExternalServiceError)
        self.assertEqual(err.code, "ORDER_LOAD_ERROR")
        self.assertEqual(err.http_status, 502)
        self.assertEqual(str(err), "No se pudo cargar el pedido")

    def test_to_dict_hides_traceback_unless_asked(self):
        try:
            raise ValueError("bad json")
        except ValueError as cause:
            err = OrderLoadError("x", cause=cause)
        self.assertNotIn("cause_traceback", err.to_dict())
        self.assertEqual(err.to_dict()["cause"], "bad json")
        self.assertIn("cause_traceback", err.to_dict(include_traceback=True))

    def test_exception_factory(self):
        PrintError = exception_factory("PrintError", http_status=503)
        err = PrintError("printer offline")
        self.assertIsInstance(err, StorefrontError)
        self.assertEqual(err.code, "PRINTERROR")
        self.assertEqual(err.http_status, 503)

    def test_raise_from_is_reported_as_cause(self):
        try:
            try:
                raise ConnectionError("refused")
            except ConnectionError as exc:
                raise OrderLoadError("No se pudo cargar el pedido") from exc
        except OrderLoadError as err:
            caught = err
        self.assertIsInstance(caught.cause, ConnectionError)
        self.assertEqual(caught.to_dict()["cause"], "refused")

    def test_package_exports_only_the_types_in_use(self):
        import storefront.core.exceptions as exceptions
        import storefront.core.logger as logger_pkg

        self.assertEqual(
            set(exceptions.__all__),
            {"StorefrontError", "exception_factory", "ConfigurationError", "ExternalServiceError", "OrderLoadError"},
        )
        self.assertNotIn("get_logger", logger_pkg.__all__)


class TestLogger(unittest.TestCase):
    def test_file_handler_writes_json_with_extra(self):
        with tempfile.TemporaryDirectory() as log_dir:
            root = configure(LoggerConfig(log_dir=log_dir, console=False, root_name="storefront"))
            try:
                logging.getLogger("storefront.views").info("Loaded order", extra={"order_id": "A12"})
                for handler in root.handlers:
                    handler.flush()
                with open(os.path.join(log_dir, "storefront.log"), encoding="utf-8") as fh:
                    record = json.loads(fh.readline())
            finally:
                for handler in root.handlers:
                    handler.close()
                root.handlers.clear()

        self.assertEqual(record["message"], "Loaded order")
        self.assertEqual(record["logger"], "storefront.views")
        self.assertEqual(record["extra"]["order_id"], "A12")

    def test_reconfigure_does_not_duplicate_handlers(self):
        cfg = LoggerConfig(console=True, root_name="storefront")
        configure(cfg)
        root = configure(cfg)
        try:
            self.assertEqual(len(root.handlers), 1)
        finally:
            root.handlers.clear()
