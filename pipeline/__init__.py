"""
pipeline — Selection state that feeds the composition engine.

Tracks what the user has chosen for each slot and keeps the Tibetan and
phonetic displays in step with it.
"""
