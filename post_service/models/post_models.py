"""
Blog post data models.

This module contains Pydantic models for blog posts, their authors,
the tag filter catalog and newsletter subscriptions.
"""

from typing import Any, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """Post author."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Author display name")
    avatar: str = Field(default="", description="Avatar image path")


class Post(BaseModel):
    """A single blog article record."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique post identifier")
    title: str = Field(description="Post title")
    description: str = Field(default="", description="Short summary shown on cards")
    author: Author
    date: str = Field(default="", description="Publication date, YYYY-MM-DD")
    tags: Tuple[str, ...] = Field(default_factory=tuple, description="Ordered post tags")
    image: str = Field(default="", description="Cover image path")
    featured: bool = Field(default=False, description="Promoted to the featured slot")

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump(mode="json")


class TagFilter(BaseModel):
    """Entry of the selectable tag catalog.

    Only the id and label are kept here; which filter is active is
    decided by whoever renders the catalog.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable filter identifier")
    label: str = Field(description="Label shown on the filter button")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump(mode="json")


class NewsletterSubscription(BaseModel):
    """A newsletter sign-up."""
    email: str = Field(description="Normalized e-mail address")
    source: str = Field(default="newsletter", description="Form the address came from")
    subscribed_at: str = Field(default="", description="ISO timestamp of the sign-up")
