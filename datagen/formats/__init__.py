"""
Wire formats for generated records
"""

from datagen.formats.encoder import BaseEncoder, CsvEncoder, Format, JsonEncoder, encoder_for

__all__ = [
    'BaseEncoder',
    'CsvEncoder',
    'Format',
    'JsonEncoder',
    'encoder_for'
]
