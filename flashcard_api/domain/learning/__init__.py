"""
Learning bounded context.

Vocabulary flashcards and their classification.
"""
