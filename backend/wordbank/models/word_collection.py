# wordbank/models/word_collection.py
"""
Database model for word collections.
Each row is the single document of one category: the category's set of
words (kept as a JSON list without duplicates) plus usage metadata.
"""
import uuid
from tortoise import fields, models

class WordCollection(models.Model):
    """
    Word collection database model.

    Relationships:
    - Optionally references the User who first wrote to the category
      (lookup only; the collection survives if the user goes away)

    Invariants:
    - category is unique: one document per category
    - words holds distinct strings in insertion order
    - total_words == len(words) after every write
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    category = fields.CharField(max_length=128, unique=True, index=True, default="general")
    words = fields.JSONField(default=list)
    total_words = fields.IntField(default=0)
    last_used = fields.DatetimeField()  # Refreshed by sampling and by upserts
    created_by = fields.ForeignKeyField(
        "models.User",
        related_name="word_collections",
        null=True,
        on_delete=fields.SET_NULL,
    )
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField()  # Set explicitly by every write, including sampling

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "word_collections"
        ordering = ["category"]
