import logging

import structlog

from config.settings import mask_sensitive_data


class TestSensitiveDataMasking:
    def test_local_mobile_number_masked(self):
        event_dict = {"event": "test", "phone": "081234567890"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "081234567890" not in result["phone"]
        assert "***MASKED***" in result["phone"]

    def test_international_mobile_number_masked(self):
        event_dict = {"event": "test", "phone": "6281234567890"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["phone"] == "***MASKED***"

    def test_mobile_number_inside_text_masked(self):
        event_dict = {"event": "test", "detail": "target +6281234567890 rejected"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "6281234567890" not in result["detail"]
        assert result["detail"].startswith("target ")

    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]

    def test_uuid_is_not_mistaken_for_phone(self):
        order_id = "01927b2e-0812-7abc-8def-081234567890"
        event_dict = {"event": "order.created", "order_id": order_id}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["order_id"] == order_id

    def test_non_string_values_unchanged(self):
        event_dict = {"event": "dashboard.owner_summary", "todayOrders": 3}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["todayOrders"] == 3


class TestStructlogConfiguration:
    def test_masking_applies_to_emitted_records(self, caplog):
        logger = structlog.get_logger("tests.logging")
        with caplog.at_level(logging.INFO):
            logger.info("customer.lookup", phone="081234567890")
        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "customer.lookup" in messages
        assert "081234567890" not in messages
