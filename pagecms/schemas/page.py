"""
Request schemas for page translations and SEO data.
"""

from pydantic import BaseModel, Field


class SEOBasics(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=500)
    author: str | None = None
    canonical_url: str | None = None


class SEOOpenGraph(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=500)
    image: str | None = None
    type: str = "website"


class SEOTwitter(BaseModel):
    card: str = "summary_large_image"
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=500)
    image: str | None = None


class SEOData(BaseModel):
    basics: SEOBasics
    open_graph: SEOOpenGraph
    twitter: SEOTwitter


class PageTranslationUpdate(BaseModel):
    alias: str = ""
    seo_data: SEOData


class PageSEOUpdate(BaseModel):
    seo_data: SEOData
    alias: str | None = None
