"""
Presets: тонкие обёртки над core для int и float.

Модули экспортируют одноимённые create_by / create_between, поэтому
используются через пространство имён модуля:

    from bounded.presets import integers
    counter = integers.increment(integers.uint8())
"""

from bounded.presets import floats, integers

__all__ = ["floats", "integers"]
