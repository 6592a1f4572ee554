"""Idea domain schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

IdeaType = Literal["blog_post", "gallery", "user_story", "tutorial", "trend"]
IdeaCategory = Literal[
    "decoration",
    "fashion",
    "food",
    "photography",
    "venue",
    "planning",
    "budget",
    "traditions",
    "travel",
    "health",
    "other",
]
IdeaSort = Literal["trending", "latest", "popular", "viewCount", "likeCount"]


class IdeaFields(BaseModel):
    excerpt: Optional[str] = Field(None, max_length=1000)
    tags: Optional[list[str]] = None
    images: Optional[list[str]] = None
    featuredImage: Optional[str] = None
    videoUrl: Optional[str] = None
    authorName: Optional[str] = None
    metaTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    readingTime: Optional[int] = Field(None, ge=0)
    difficulty: Optional[Literal["easy", "medium", "hard"]] = None
    location: Optional[str] = None
    season: Optional[str] = None


class IdeaCreate(IdeaFields):
    title: str = Field(..., min_length=3, max_length=255)
    content: str = Field(..., min_length=1)
    type: IdeaType
    category: IdeaCategory


class IdeaUpdate(IdeaFields):
    title: Optional[str] = Field(None, min_length=3, max_length=255)
    content: Optional[str] = None
    type: Optional[IdeaType] = None
    category: Optional[IdeaCategory] = None
    isPublished: Optional[bool] = None


class IdeaQuery(BaseModel):
    search: Optional[str] = None
    type: Optional[IdeaType] = None
    category: Optional[IdeaCategory] = None
    tags: Optional[list[str]] = None
    isFeatured: Optional[bool] = None
    sortBy: IdeaSort = "trending"
    sortOrder: Literal["asc", "desc"] = "desc"
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)


class IdeaLike(BaseModel):
    isLiked: bool


class IdeaResponse(BaseModel):
    id: int
    title: str
    content: str
    excerpt: Optional[str] = None
    type: str
    category: str
    tags: list[str] = []
    images: list[str] = []
    featuredImage: Optional[str] = None
    videoUrl: Optional[str] = None
    authorId: int
    authorName: Optional[str] = None
    authorRole: Optional[str] = None
    viewCount: int
    likeCount: int
    shareCount: int
    commentCount: int
    isPublished: bool
    publishedAt: Optional[datetime] = None
    isFeatured: bool
    metaTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    readingTime: Optional[int] = None
    difficulty: Optional[str] = None
    location: Optional[str] = None
    season: Optional[str] = None
    createdAt: Optional[datetime] = None
    trendingScore: Optional[float] = None


class IdeaListResponse(BaseModel):
    ideas: list[IdeaResponse]
    total: int
    page: int
    limit: int
    totalPages: int


IDEA_FIELD_MAP = {
    "title": "title",
    "content": "content",
    "excerpt": "excerpt",
    "type": "type",
    "category": "category",
    "tags": "tags",
    "images": "images",
    "featuredImage": "featured_image",
    "videoUrl": "video_url",
    "authorName": "author_name",
    "metaTitle": "meta_title",
    "metaDescription": "meta_description",
    "readingTime": "reading_time",
    "difficulty": "difficulty",
    "location": "location",
    "season": "season",
    "isPublished": "is_published",
}


def idea_response(idea, trending_score: Optional[float] = None) -> IdeaResponse:
    return IdeaResponse(
        id=idea.id,
        title=idea.title,
        content=idea.content,
        excerpt=idea.excerpt,
        type=idea.type,
        category=idea.category,
        tags=idea.tags or [],
        images=idea.images or [],
        featuredImage=idea.featured_image,
        videoUrl=idea.video_url,
        authorId=idea.author_id,
        authorName=idea.author_name,
        authorRole=idea.author_role,
        viewCount=idea.view_count or 0,
        likeCount=idea.like_count or 0,
        shareCount=idea.share_count or 0,
        commentCount=idea.comment_count or 0,
        isPublished=idea.is_published,
        publishedAt=idea.published_at,
        isFeatured=idea.is_featured,
        metaTitle=idea.meta_title,
        metaDescription=idea.meta_description,
        readingTime=idea.reading_time,
        difficulty=idea.difficulty,
        location=idea.location,
        season=idea.season,
        createdAt=idea.created_at,
        trendingScore=trending_score,
    )
