"""
Catalog data models.

This module defines the structure and validation for the documentation
entries of the catalog and for captured example runs.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Reference(BaseModel):
    """
    An external article about a pattern.
    """

    title: str = Field(..., description="Title of the article")
    url: str = Field(..., description="Absolute URL of the article")

    @field_validator("url")
    @classmethod
    def url_must_be_absolute(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"url must be absolute, got {v!r}")
        return v


class PatternEntry(BaseModel):
    """
    Documentation entry for a single design pattern.
    """

    slug: str = Field(..., description="Unique, url-friendly identifier")
    name: str = Field(..., description="Display name of the pattern")
    category: str = Field("creational", description="GoF pattern category")
    summary: str = Field(..., description="One sentence describing the pattern")
    intent: str = Field(..., description="Longer explanation of the intent")
    participants: List[str] = Field(
        default_factory=list, description="Roles taking part in the pattern"
    )
    references: List[Reference] = Field(
        default_factory=list, description="External articles about the pattern"
    )
    module: str = Field(..., description="Dotted path of the example module")
    aliases: List[str] = Field(
        default_factory=list, description="Alternative names accepted on lookup"
    )

    @field_validator("slug")
    @classmethod
    def slug_must_be_kebab_case(cls, v: str) -> str:
        if not v or v != v.lower() or " " in v or "_" in v:
            raise ValueError(f"slug must be lower kebab-case, got {v!r}")
        return v


class ExampleResult(BaseModel):
    """
    Captured outcome of running one example's main().
    """

    slug: str = Field(..., description="Slug of the pattern that was run")
    succeeded: bool = Field(..., description="Whether main() returned normally")
    output: str = Field("", description="Everything main() printed")
    error: Optional[str] = Field(None, description="Error message on failure")
