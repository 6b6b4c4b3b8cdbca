"""
Services Module

Word-set logic behind the REST layer:
- word_ops: pure sampling, pagination and set mutation functions
- word_store: category-addressed repository over the database
"""
from .word_store import CategoryNotFound, WordSetRepository
