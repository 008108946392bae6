"""
Publish loop
"""

from datagen.publisher.loop import LoopState, PublishLoop

__all__ = [
    'LoopState',
    'PublishLoop'
]
