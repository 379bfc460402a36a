"""
registry — The fixed table of Tibetan consonants.

Every syllable borrows its characters from this table; nothing here is
mutated after import.
"""
