"""
malg — плотные матрицы, элементарные строковые операции и приведение к
ступенчатому виду (row echelon form).

Пакеты:
- malg.core.math: Scalar Field, протокол RowOps, алгоритм row_echelon
- malg.core.domain: Matrix, AugmentedMatrix, MatrixShape
- malg.core.contracts: JSON Schema валидация payload матриц
"""
