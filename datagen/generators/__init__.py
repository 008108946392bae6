"""
Record generators
"""

from datagen.generators.base import BaseGenerator
from datagen.generators.counter import CounterGenerator
from datagen.generators.id_event import IdEventGenerator
from datagen.generators.registry import GENERATORS, generator_from_id

__all__ = [
    'BaseGenerator',
    'CounterGenerator',
    'IdEventGenerator',
    'GENERATORS',
    'generator_from_id'
]
