# mosaicfx/native/__init__.py
"""
JIT‑ядра (Numba).  Модуль ``kernels`` импортируется лениво из
``NumbaBackend``, чтобы импорт пакета не тянул компилятор.
"""
