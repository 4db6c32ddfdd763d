"""Base abstract models shared by the domain modules.

Provides ``TimestampedModel``: ``created_at`` / ``updated_at`` bookkeeping
on top of Django's auto-incrementing integer primary key
(``DEFAULT_AUTO_FIELD``).
"""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
