COUNTER_SCHEMA = {
    "type": "record",
    "name": "CounterRecord",
    "namespace": "datagen.records",
    "fields": [
        {"name": "time", "type": "string"},
        {"name": "count", "type": "long"}
    ]
}

ID_EVENT_SCHEMA = {
    "type": "record",
    "name": "IdEventRecord",
    "namespace": "datagen.records",
    "fields": [
        {"name": "time", "type": "string"},
        {"name": "id", "type": "string"},
        {"name": "event", "type": "string"}
    ]
}

SCHEMAS = {
    "counter": COUNTER_SCHEMA,
    "id_event": ID_EVENT_SCHEMA
}

_PYTHON_TYPES = {
    "string": str,
    "long": int
}


class RecordSchemaRegistry:
    
    @staticmethod
    def get_schema(schema_name: str) -> dict:
        if schema_name not in SCHEMAS:
            raise ValueError(f"Unknown schema: {schema_name}")
        return SCHEMAS[schema_name]
    
    @staticmethod
    def field_names(schema_name: str) -> list:
        return [f["name"] for f in RecordSchemaRegistry.get_schema(schema_name)["fields"]]
    
    @staticmethod
    def validate_schema(schema_name: str, data: dict) -> bool:
        schema = SCHEMAS.get(schema_name)
        if not schema:
            return False
        for field in schema["fields"]:
            if field["name"] not in data:
                return False
            value = data[field["name"]]
            # bool is an int subclass but never a valid count
            if isinstance(value, bool) or not isinstance(value, _PYTHON_TYPES[field["type"]]):
                return False
        return True
    
    @staticmethod
    def coerce(schema_name: str, data: dict) -> dict:
        """Cast decoded values (e.g. CSV strings) back to the schema's field types."""
        schema = RecordSchemaRegistry.get_schema(schema_name)
        return {
            f["name"]: _PYTHON_TYPES[f["type"]](data[f["name"]])
            for f in schema["fields"]
        }
