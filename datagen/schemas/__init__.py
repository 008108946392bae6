"""
Record types and their field schemas
"""

from datagen.schemas.record_schemas import RecordSchemaRegistry
from datagen.schemas.records import CounterRecord, IdEventRecord, Record, from_dict

__all__ = [
    'RecordSchemaRegistry',
    'CounterRecord',
    'IdEventRecord',
    'Record',
    'from_dict'
]
