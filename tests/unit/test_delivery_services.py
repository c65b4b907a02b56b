"""Unit tests for delivery services, courier backends and adapters."""

import io
from unittest.mock import MagicMock

import pytest

from report_delivery.delivery.abstractions import IDeliveryService
from report_delivery.delivery.internal import InternalDeliveryService
from report_delivery.delivery.kazpost_adapter import KazPostAdapter
from report_delivery.delivery.yandex_adapter import YandexGoAdapter
from report_delivery.services.kazpost_service import KazPostService
from report_delivery.services.yandex_go_service import YandexGoService


class FalsyStream(io.StringIO):
    """Text stream that evaluates as False while empty."""

    def __bool__(self):
        return bool(self.getvalue())


class TestInternalDeliveryService:
    """Test cases for InternalDeliveryService."""

    def test_deliver_order(self):
        """Test confirmation line mentions the order."""
        stream = io.StringIO()
        InternalDeliveryService(stream=stream).deliver_order("12345")
        assert stream.getvalue() == "Internal delivery of order 12345 has been arranged.\n"

    def test_get_delivery_status(self):
        """Test status text."""
        assert InternalDeliveryService().get_delivery_status("12345") == (
            "Status: order 12345 delivered."
        )

    def test_defaults_to_stdout(self, capsys):
        """Test output goes to stdout when no stream is given."""
        InternalDeliveryService().deliver_order("A-1")
        assert "A-1" in capsys.readouterr().out


class TestCourierServices:
    """Test cases for the stubbed courier backends."""

    def test_yandex_send_order(self):
        """Test Yandex Go confirmation line."""
        stream = io.StringIO()
        YandexGoService(stream=stream).send_order("12345")
        assert stream.getvalue() == "Yandex Go: order 12345 accepted, courier dispatched.\n"

    def test_yandex_track(self):
        """Test Yandex Go status text."""
        assert YandexGoService().track("12345") == "Yandex Go: order 12345 is on the way."

    def test_kazpost_ship_package(self):
        """Test KazPost confirmation line."""
        stream = io.StringIO()
        KazPostService(stream=stream).ship_package("12345")
        assert stream.getvalue() == "KazPost: parcel 12345 accepted for sorting.\n"

    def test_kazpost_check_status(self):
        """Test KazPost status text."""
        assert KazPostService().check_status("12345") == "KazPost: parcel 12345 awaiting delivery."


class TestAdapters:
    """Test cases for adapters translating calls to backend methods."""

    def test_yandex_adapter_maps_calls(self):
        """Test Yandex adapter forwards to send_order/track."""
        backend = MagicMock(spec=YandexGoService)
        backend.track.return_value = "tracked"

        adapter = YandexGoAdapter(backend)
        adapter.deliver_order("12345")
        status = adapter.get_delivery_status("12345")

        backend.send_order.assert_called_once_with("12345")
        backend.track.assert_called_once_with("12345")
        assert status == "tracked"

    def test_kazpost_adapter_maps_calls(self):
        """Test KazPost adapter forwards to ship_package/check_status."""
        backend = MagicMock(spec=KazPostService)
        backend.check_status.return_value = "checked"

        adapter = KazPostAdapter(backend)
        adapter.deliver_order("777")
        status = adapter.get_delivery_status("777")

        backend.ship_package.assert_called_once_with("777")
        backend.check_status.assert_called_once_with("777")
        assert status == "checked"

    def test_adapters_create_default_backend(self, capsys):
        """Test adapters build their own backend when none is given."""
        YandexGoAdapter().deliver_order("1")
        KazPostAdapter().deliver_order("2")
        out = capsys.readouterr().out
        assert "Yandex Go: order 1" in out
        assert "KazPost: parcel 2" in out

    @pytest.mark.parametrize(
        "service_cls", [InternalDeliveryService, YandexGoAdapter, KazPostAdapter]
    )
    def test_all_variants_share_interface(self, service_cls):
        """Test every variant is an IDeliveryService."""
        assert isinstance(service_cls(), IDeliveryService)


class TestInjectedStream:
    """Test cases for output streams that evaluate as False."""

    @pytest.mark.parametrize(
        "deliver",
        [
            lambda stream: InternalDeliveryService(stream=stream).deliver_order("12345"),
            lambda stream: YandexGoService(stream=stream).send_order("12345"),
            lambda stream: KazPostService(stream=stream).ship_package("12345"),
        ],
    )
    def test_falsy_stream_is_used(self, deliver, capsys):
        """Test an empty falsy stream still receives the confirmation line."""
        stream = FalsyStream()

        deliver(stream)

        assert "12345" in stream.getvalue()
        assert capsys.readouterr().out == ""
