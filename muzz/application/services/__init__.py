# muzz/application/services/__init__.py
from .input_parser import MeasurementParser

__all__ = ["MeasurementParser"]
