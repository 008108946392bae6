"""
Encoder tests: exact CSV layout, JSON round trips and schema checks.
"""
import json

import pytest

from datagen.errors import EncodingError
from datagen.formats import CsvEncoder, Format, JsonEncoder, encoder_for
from datagen.schemas import CounterRecord, IdEventRecord, RecordSchemaRegistry


@pytest.mark.unit
class TestCsvEncoder:

    def test_counter_record_is_header_plus_one_row(self):
        payload = CsvEncoder().encode(CounterRecord(time="2024-01-01T00:00:00Z", count=3))

        assert payload.splitlines() == ["time,count", "2024-01-01T00:00:00Z,3"]

    def test_id_event_fields_in_declared_order(self):
        record = IdEventRecord(time="2024-01-01T00:00:00Z", id="door-1", event="open")

        payload = CsvEncoder().encode(record)

        assert payload.splitlines() == ["time,id,event", "2024-01-01T00:00:00Z,door-1,open"]

    def test_each_call_carries_its_own_header(self):
        encoder = CsvEncoder()
        first = encoder.encode(CounterRecord(time="t1", count=1))
        second = encoder.encode(CounterRecord(time="t2", count=2))

        assert first.splitlines()[0] == "time,count"
        assert second.splitlines() == ["time,count", "t2,2"]

    def test_decode_restores_record(self):
        record = IdEventRecord(time="2024-01-01T00:00:00Z", id="window-2", event="cross")
        encoder = CsvEncoder()

        assert encoder.decode(encoder.encode(record), "id_event") == record

    def test_decode_rejects_multiple_rows(self):
        with pytest.raises(EncodingError):
            CsvEncoder().decode("time,count\nt1,1\nt2,2\n", "counter")


@pytest.mark.unit
class TestJsonEncoder:

    def test_one_object_per_call(self):
        payload = JsonEncoder().encode(CounterRecord(time="2024-01-01T00:00:00Z", count=7))

        assert json.loads(payload) == {"time": "2024-01-01T00:00:00Z", "count": 7}

    def test_non_ascii_written_as_utf8(self):
        record = IdEventRecord(time="2024-01-01T00:00:00Z", id="puerta-ñ", event="öffnen")

        payload = JsonEncoder().encode(record)

        assert "puerta-ñ" in payload
        assert "\\u" not in payload

    @pytest.mark.parametrize("record", [
        CounterRecord(time="2024-01-01T00:00:00Z", count=0),
        CounterRecord(time="2024-05-06T12:30:00.123Z", count=2 ** 64 - 1),
        IdEventRecord(time="2024-01-01T00:00:00Z", id="access-1", event="close"),
        IdEventRecord(time="2024-01-01T00:00:00Z", id="?", event="?"),
    ])
    def test_round_trip(self, record):
        encoder = JsonEncoder()

        assert encoder.decode(encoder.encode(record), record.schema_name) == record

    def test_decode_missing_field_fails(self):
        with pytest.raises(EncodingError):
            JsonEncoder().decode('{"time": "t"}', "counter")

    def test_decode_non_object_fails(self):
        with pytest.raises(EncodingError):
            JsonEncoder().decode('[1, 2]', "counter")


@pytest.mark.unit
class TestSchemaValidation:

    def test_wrong_type_is_rejected_before_serialization(self):
        with pytest.raises(EncodingError) as exc_info:
            JsonEncoder().encode(CounterRecord(time="t", count="3"))

        assert exc_info.value.stage == "encoding"

    def test_bool_is_not_a_count(self):
        assert not RecordSchemaRegistry.validate_schema("counter", {"time": "t", "count": True})

    def test_unknown_schema(self):
        assert not RecordSchemaRegistry.validate_schema("nope", {})
        with pytest.raises(ValueError):
            RecordSchemaRegistry.get_schema("nope")


@pytest.mark.unit
def test_encoder_for_selects_by_format():
    assert isinstance(encoder_for(Format.CSV), CsvEncoder)
    assert isinstance(encoder_for("JSON"), JsonEncoder)
