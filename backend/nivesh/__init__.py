"""
Nivesh: personal investment tracker backend.
"""
