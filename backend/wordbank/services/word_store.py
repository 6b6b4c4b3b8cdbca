# wordbank/services/word_store.py
"""
Word Set Repository.

One document per category. Every read-modify-write runs in a single
transaction that locks the category's row (SELECT ... FOR UPDATE where the
backend supports it), so union, difference and the timestamp refresh land
as one atomic document update.
"""
import datetime as dt
import logging
import random
from typing import Iterable, Optional

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from wordbank.core.db import Database
from wordbank.models.word_collection import WordCollection
from wordbank.schemas.words import DEFAULT_CATEGORY, MutationResult
from wordbank.services.word_ops import merge_words, paginate_words, sample_words, subtract_words

logger = logging.getLogger("uvicorn.error")


class CategoryNotFound(Exception):
    """No document (or no words) exists for the requested category."""

    def __init__(self, category: str):
        super().__init__(f"no words found for category '{category}'")
        self.category = category


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class WordSetRepository:
    """
    Category-addressed access to word collections.

    Built around an opened Database and handed to request handlers through
    a dependency; it holds no state of its own besides the random generator
    used for sampling.
    """

    def __init__(self, database: Database, rng: Optional[random.Random] = None):
        self._db = database
        self._rng = rng

    async def get(self, category: str = DEFAULT_CATEGORY) -> WordCollection:
        doc = await WordCollection.filter(category=category).using_db(self._db.connection()).first()
        if doc is None:
            raise CategoryNotFound(category)
        return doc

    async def list_categories(self) -> list[WordCollection]:
        return await WordCollection.all().using_db(self._db.connection()).order_by("category")

    async def create(self, category: str, words: Iterable[str], creator_id: Optional[str]) -> MutationResult:
        """
        Store words for a category.

        A category owns exactly one document, so this never inserts a second
        one: an existing category gets the words merged in, like upsert().
        """
        return await self.upsert(category, words, creator_id=creator_id)

    async def upsert(
        self,
        category: str,
        words: Iterable[str],
        creator_id: Optional[str] = None,
    ) -> MutationResult:
        """
        Merge words into the category's set, inserting the document if absent.

        Idempotent on the set; last_used and updated_at are refreshed even
        when nothing new was added.
        """
        words = list(words)
        try:
            return await self._upsert_once(category, words, creator_id)
        except IntegrityError:
            # A concurrent first write created the document; the retry finds and locks it
            logger.info("[words] concurrent insert for category=%s, retrying as update", category)
            return await self._upsert_once(category, words, creator_id)

    async def _upsert_once(self, category: str, words: list[str], creator_id: Optional[str]) -> MutationResult:
        now = utc_now()
        async with in_transaction(self._db.connection_name) as conn:
            doc = await WordCollection.filter(category=category).select_for_update().using_db(conn).first()
            if doc is None:
                merged = merge_words([], words)
                await WordCollection.create(
                    category=category,
                    words=merged,
                    total_words=len(merged),
                    last_used=now,
                    updated_at=now,
                    created_by_id=creator_id,
                    using_db=conn,
                )
                logger.info("[words] created category=%s words=%d", category, len(merged))
                return MutationResult(
                    category=category, matched=False, upserted=True, modified=True, totalWords=len(merged)
                )

            merged = merge_words(doc.words, words)
            modified = len(merged) != len(doc.words)
            doc.words = merged
            doc.total_words = len(merged)
            doc.last_used = now
            doc.updated_at = now
            await doc.save(using_db=conn, update_fields=["words", "total_words", "last_used", "updated_at"])

        logger.info("[words] merged into category=%s total=%d modified=%s", category, len(merged), modified)
        return MutationResult(
            category=category, matched=True, upserted=False, modified=modified, totalWords=len(merged)
        )

    async def remove(self, category: str, words: Iterable[str]) -> MutationResult:
        """
        Remove words from the category's set; non-members are ignored.

        Raises:
            CategoryNotFound: If the category has no document
        """
        now = utc_now()
        async with in_transaction(self._db.connection_name) as conn:
            doc = await WordCollection.filter(category=category).select_for_update().using_db(conn).first()
            if doc is None:
                raise CategoryNotFound(category)
            remaining = subtract_words(doc.words, words)
            modified = len(remaining) != len(doc.words)
            doc.words = remaining
            doc.total_words = len(remaining)
            doc.updated_at = now
            await doc.save(using_db=conn, update_fields=["words", "total_words", "updated_at"])

        logger.info("[words] removed from category=%s total=%d modified=%s", category, len(remaining), modified)
        return MutationResult(
            category=category, matched=True, upserted=False, modified=modified, totalWords=len(remaining)
        )

    async def sample(self, category: str, n: int) -> list[str]:
        """
        Draw n distinct random words from the category.

        Not idempotent: every call refreshes last_used and updated_at,
        whatever n is.

        Raises:
            CategoryNotFound: If the category is missing or has no words
        """
        doc = await WordCollection.filter(category=category).using_db(self._db.connection()).first()
        if doc is None or not doc.words:
            raise CategoryNotFound(category)

        picked = sample_words(doc.words, n, rng=self._rng)

        now = utc_now()
        await WordCollection.filter(id=doc.id).using_db(self._db.connection()).update(
            last_used=now, updated_at=now
        )
        return picked

    async def page(
        self,
        category: str,
        page: int,
        limit: int,
        search: Optional[str] = None,
    ) -> tuple[WordCollection, list[str], int, int]:
        """
        Return one page of the category's words, optionally filtered.

        Returns:
            (document, items, total, pages) where total counts filtered words

        Raises:
            CategoryNotFound: If the category has no document
        """
        doc = await self.get(category)
        items, total, pages = paginate_words(doc.words, page, limit, search)
        return doc, items, total, pages
