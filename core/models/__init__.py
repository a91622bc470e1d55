# core/models/__init__.py
from .number_sequences import SequenceCounter
from .settings import CoreSetting
