"""Testing utilities for UnderbarLib consumers."""

from .fixtures import Record, nested_sequence, people, sample_mapping

__all__ = ['Record', 'nested_sequence', 'people', 'sample_mapping']
