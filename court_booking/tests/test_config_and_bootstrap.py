"""
Тесты настроек, сборки приложения и шины событий.
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from court_booking.__main__ import main
from court_booking.booking.domain import BookingCompleted, CompensationRequired
from court_booking.booking.event_handlers import on_compensation_required
from court_booking.booking.infrastructure import InMemoryEventBus
from court_booking.bootstrap import bootstrap_app
from court_booking.config import BookingSettings, load_settings
from court_booking.shared_kernel import ConsoleLogger, CourtKind, generate_id


class TestSettings:
    """Тесты загрузки настроек."""

    def test_defaults(self):
        settings = load_settings({})

        assert settings.discount_percent == 10
        assert settings.initial_inventory == {
            CourtKind.GRASS: 10,
            CourtKind.CLAY: 5,
            CourtKind.HARD: 8,
        }
        assert settings.monitoring_enabled is False

    def test_environment_overrides(self):
        settings = load_settings(
            {
                "COURT_BOOKING_DISCOUNT_PERCENT": "0",
                "COURT_BOOKING_INVENTORY": '{"Clay": 1}',
                "COURT_BOOKING_MONITORING": "yes",
                "COURT_BOOKING_DEBUG": "1",
            }
        )

        assert settings.discount_percent == 0
        assert settings.initial_inventory[CourtKind.CLAY] == 1
        assert settings.initial_inventory[CourtKind.GRASS] == 10
        assert settings.monitoring_enabled is True
        assert settings.debug_logging is True

    @pytest.mark.parametrize("percent", ["-1", "101", "ten"])
    def test_invalid_discount_percent(self, percent):
        with pytest.raises(ValidationError):
            load_settings({"COURT_BOOKING_DISCOUNT_PERCENT": percent})

    def test_negative_inventory_is_rejected(self):
        with pytest.raises(ValidationError, match="отрицательным"):
            BookingSettings(initial_inventory={"Grass": -1})


class TestBootstrap:
    """Тесты сборки приложения."""

    def test_bootstrap_wires_settings(self, details_provider, logger):
        settings = BookingSettings(
            initial_inventory={"Hard": 1}, discount_percent=0, monitoring_enabled=True
        )
        app = bootstrap_app(details_provider, settings=settings, logger=logger)
        manager = app["booking_manager"]

        result = manager.book_court("Hard", [], "Card")

        assert result.total_charged == 300
        assert app["inventory"].remaining(CourtKind.HARD) == 0
        assert app["repository"].get_by_id(result.booking_id) is not None
        logged = [call.args[0] for call in logger.info.call_args_list]
        assert "Обработка запроса: reserve" in logged

    def test_demo_run(self, capsys, monkeypatch):
        for name in ("DISCOUNT_PERCENT", "INVENTORY", "MONITORING", "DEBUG"):
            monkeypatch.delenv(f"COURT_BOOKING_{name}", raising=False)

        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Итоговая стоимость со скидкой: 144" in out
        assert "Итоговая стоимость со скидкой: 234" in out


class TestEventBus:
    """Тесты шины событий."""

    def test_handler_failure_is_isolated(self):
        logger = MagicMock()
        bus = InMemoryEventBus(logger)
        received = []

        def broken(event):
            raise RuntimeError("сбой обработчика")

        bus.subscribe(BookingCompleted, broken)
        bus.subscribe(BookingCompleted, received.append)
        event = BookingCompleted(
            booking_id=generate_id(),
            court_kind=CourtKind.GRASS,
            total_charged=144,
            payment_reference="ivan@upi",
        )

        bus.publish(event)

        assert received == [event]
        logger.error.assert_called_once()

    def test_compensation_handler_warns_operator(self):
        logger = MagicMock()
        event = CompensationRequired(
            booking_id=generate_id(),
            court_kind=CourtKind.CLAY,
            amount=234,
            payment_reference="****1234",
            reason="Нет свободных кортов типа Clay",
        )

        on_compensation_required(event, logger=logger)

        message = logger.warning.call_args.args[0]
        assert "234" in message
        assert "****1234" in message


def test_default_discount_is_ten_percent(details_provider, logger):
    app = bootstrap_app(details_provider, settings=BookingSettings(), logger=logger)

    result = app["booking_manager"].book_court("Clay", ["Ballpack", "Grips"], "Card")

    assert result.total_charged == 234


class TestConsoleLogger:
    """Тесты консольного логгера."""

    def test_levels_and_context(self, capsys):
        logger = ConsoleLogger()

        logger.info("Начат процесс бронирования", court_kind="Grass")
        logger.error("Нет свободных кортов")
        logger.debug("скрыто")

        captured = capsys.readouterr()
        assert "[INFO] Начат процесс бронирования" in captured.out
        assert '"court_kind": "Grass"' in captured.out
        assert "[ERROR] Нет свободных кортов" in captured.err
        assert "скрыто" not in captured.out

    def test_debug_enabled(self, capsys):
        ConsoleLogger(debug_enabled=True).debug("видно")

        assert "[DEBUG] видно" in capsys.readouterr().out
