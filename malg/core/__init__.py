"""
Core domain models, row operations and the echelon reduction algorithm.

Модули ядра не зависят от внешних систем: нет I/O, нет глобального
изменяемого состояния.
"""
