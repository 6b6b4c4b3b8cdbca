# wordbank/api/v1/routers/words.py
from fastapi import APIRouter, Depends, HTTPException, Query, status

from wordbank.api.v1.deps import get_current_user, get_word_repository, require_admin
from wordbank.schemas.auth import CurrentUser
from wordbank.schemas.words import (
    DEFAULT_CATEGORY,
    CategoryListOut,
    CategorySummaryOut,
    CollectionMetadataOut,
    MutationOut,
    PaginationOut,
    RandomWordsOut,
    WordPageOut,
    WordsIn,
)
from wordbank.services.word_store import CategoryNotFound, WordSetRepository

router = APIRouter(tags=["words"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="NO_WORDS_FOUND")


@router.post("/words", status_code=status.HTTP_201_CREATED, response_model=MutationOut)
async def add_words(
    body: WordsIn,
    user: CurrentUser = Depends(get_current_user),
    repo: WordSetRepository = Depends(get_word_repository),
):
    """
    Add words to a category (any authenticated user).

    The first write to a category creates its document and records the
    caller as creator; later writes merge into the same document, so
    words already present are not duplicated.
    """
    result = await repo.create(body.category, body.words, creator_id=user.userId)
    return MutationOut(message="Words added successfully", result=result)


@router.get("/random", response_model=RandomWordsOut)
async def random_words(
    count: int = Query(1, description="Number of words; <= 0 returns an empty list"),
    category: str = Query(DEFAULT_CATEGORY, min_length=1),
    _user: CurrentUser = Depends(get_current_user),
    repo: WordSetRepository = Depends(get_word_repository),
):
    """
    Draw `count` distinct words at random from a category.

    Every call also marks the category as used (last_used/updated_at),
    so repeated calls are not side-effect free.

    Raises:
        HTTPException (404): If the category is missing or empty
    """
    try:
        words = await repo.sample(category, count)
    except CategoryNotFound:
        raise _not_found()
    return RandomWordsOut(words=words)


@router.get("/words", response_model=WordPageOut)
async def list_words(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: str = Query(DEFAULT_CATEGORY, min_length=1),
    search: str | None = Query(default=None, description="Case-insensitive substring filter"),
    _user: CurrentUser = Depends(get_current_user),
    repo: WordSetRepository = Depends(get_word_repository),
):
    """
    Get one page of a category's words.

    Returns:
        WordPageOut:
            - words: the requested page of (filtered) words
            - pagination: total (filtered word count), page, limit, pages
            - metadata: category, totalWords (unfiltered), timestamps

    Raises:
        HTTPException (404): If the category has no document
    """
    try:
        doc, items, total, pages = await repo.page(category, page, limit, search)
    except CategoryNotFound:
        raise _not_found()
    return WordPageOut(
        words=items,
        pagination=PaginationOut(total=total, page=page, limit=limit, pages=pages),
        metadata=CollectionMetadataOut(
            category=doc.category,
            totalWords=doc.total_words,
            lastUsed=doc.last_used,
            createdAt=doc.created_at,
            updatedAt=doc.updated_at,
        ),
    )


@router.get("/categories", response_model=CategoryListOut)
async def list_categories(
    _user: CurrentUser = Depends(get_current_user),
    repo: WordSetRepository = Depends(get_word_repository),
):
    """List every category with its word count and usage timestamps."""
    docs = await repo.list_categories()
    return CategoryListOut(categories=[
        CategorySummaryOut(
            category=d.category,
            totalWords=d.total_words,
            lastUsed=d.last_used,
            updatedAt=d.updated_at,
        )
        for d in docs
    ])


# ===== Admin-only =====
@router.put("/words", response_model=MutationOut)
async def update_words(
    body: WordsIn,
    admin: CurrentUser = Depends(require_admin),
    repo: WordSetRepository = Depends(get_word_repository),
):
    """
    Merge words into a category, creating it if needed (admin only).
    Idempotent on the word set; timestamps are refreshed on every call.
    """
    result = await repo.upsert(body.category, body.words, creator_id=admin.userId)
    return MutationOut(message="Words updated successfully", result=result)


@router.delete("/words", response_model=MutationOut)
async def delete_words(
    body: WordsIn,
    _admin: CurrentUser = Depends(require_admin),
    repo: WordSetRepository = Depends(get_word_repository),
):
    """
    Remove words from a category (admin only). Words not present are ignored.

    Raises:
        HTTPException (404): If the category has no document
    """
    try:
        result = await repo.remove(body.category, body.words)
    except CategoryNotFound:
        raise _not_found()
    return MutationOut(message="Words deleted successfully", result=result)
