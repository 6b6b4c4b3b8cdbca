# wordbank/schemas/words.py
"""
Pydantic schemas for word collection endpoints.
Defines request bodies for word mutations and the response shapes for
sampling, pagination and category listings.
"""
import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

DEFAULT_CATEGORY = "general"


class WordsIn(BaseModel):
    """
    Request body shared by POST/PUT/DELETE /words.
    Category defaults to "general" when omitted.
    """
    words: List[str] = Field(min_length=1)  # At least one word
    category: str = Field(default=DEFAULT_CATEGORY, min_length=1, max_length=128)


class MutationResult(BaseModel):
    """
    Outcome of a single word-set update, analogous to a document store's
    update result.
    """
    category: str
    matched: bool  # A document for the category already existed
    upserted: bool  # A new document was inserted
    modified: bool  # The word set changed
    totalWords: int  # Size of the word set after the update


class MutationOut(BaseModel):
    message: str
    result: MutationResult


class RandomWordsOut(BaseModel):
    words: List[str]


class PaginationOut(BaseModel):
    total: int  # Words matching the search filter
    page: int
    limit: int
    pages: int


class CollectionMetadataOut(BaseModel):
    category: str
    totalWords: int  # Unfiltered size of the word set
    lastUsed: dt.datetime
    createdAt: dt.datetime
    updatedAt: dt.datetime


class WordPageOut(BaseModel):
    """Response model for GET /words."""
    words: List[str]
    pagination: PaginationOut
    metadata: CollectionMetadataOut


class CategorySummaryOut(BaseModel):
    category: str
    totalWords: int
    lastUsed: Optional[dt.datetime] = None
    updatedAt: Optional[dt.datetime] = None


class CategoryListOut(BaseModel):
    categories: List[CategorySummaryOut]
