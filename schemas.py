"""
Database Schemas for the Portfolio content store

Each content model maps to one MongoDB collection:
- PersonalInfo -> "personal_info" (singleton)
- ContactInfo -> "contact_info" (singleton)
- Project -> "project"
- Skill -> "skill"
- Testimonial -> "testimonial"
- AdminCredential -> "admin_credential"

Optional text left blank is stored as null. List fields are trimmed and
de-duplicated before they reach the store.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

from token_list import clean_tokens

PERSONAL_INFO = "personal_info"
CONTACT_INFO = "contact_info"
PROJECT = "project"
SKILL = "skill"
TESTIMONIAL = "testimonial"
ADMIN_CREDENTIAL = "admin_credential"
REVOKED_TOKEN = "revoked_token"

PROJECT_LIST_FIELDS = ("tech", "images", "advantages", "disadvantages", "features", "technologies_used")
SKILL_LIST_FIELDS = ("tech",)

PROJECT_ICONS = ["Zap", "Shield", "Rocket", "Code2", "Database", "Palette", "Smartphone", "Cloud", "Lock", "Brain", "Star", "Heart"]
PROJECT_COLORS = ["from-primary to-secondary", "from-secondary to-accent", "from-accent to-primary", "from-primary to-accent", "from-secondary to-primary"]
GLOW_CLASSES = ["glow-cyan", "glow-purple", "glow-magenta", "glow-blue", "glow-green"]
SKILL_ICONS = ["Code2", "Database", "Palette", "Smartphone", "Cloud", "Lock", "Zap", "Brain", "Settings", "Globe", "Shield", "Rocket"]
SKILL_COLORS = ["text-primary", "text-secondary", "text-accent", "text-blue-500", "text-green-500", "text-purple-500"]

Platform = Literal["website", "twitter", "linkedin", "email", "other"]

_url = TypeAdapter(HttpUrl)


def blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def check_url(v):
    v = blank_to_none(v)
    if v is None:
        return None
    if isinstance(v, str):
        v = v.strip()
    # validate only; keep the string exactly as entered
    try:
        _url.validate_python(v)
    except ValidationError:
        raise ValueError("Must be a valid URL")
    return v


class ContentModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class PersonalInfo(ContentModel):
    name: str = Field(..., min_length=1, description="Display name")
    title: str = Field(..., min_length=1, description="Headline / job title")
    bio: Optional[str] = None
    profile_image_url: Optional[str] = Field(None, description="Avatar url")
    resume_url: Optional[str] = Field(None, description="Downloadable resume url")

    @field_validator("bio", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("profile_image_url", "resume_url", mode="before")
    @classmethod
    def validate_urls(cls, v):
        return check_url(v)


class ContactInfo(ContentModel):
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    twitter_url: Optional[str] = None

    @field_validator("email", "phone", "location", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("linkedin_url", "github_url", "twitter_url", mode="before")
    @classmethod
    def validate_urls(cls, v):
        return check_url(v)


class Project(ContentModel):
    title: str = Field(..., min_length=1, description="Title is required")
    title_ar: Optional[str] = None
    description: str = Field(..., min_length=1, description="Description is required")
    description_ar: Optional[str] = None
    detailed_description: Optional[str] = None
    detailed_description_ar: Optional[str] = None
    tech: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list, description="Image urls, in display order")
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    technologies_used: List[str] = Field(default_factory=list)
    icon: str = Field("Zap", min_length=1, description="lucide icon name")
    color: str = Field("from-primary to-secondary", min_length=1, description="gradient token")
    glow_class: str = Field("glow-cyan", min_length=1)
    live_demo_url: Optional[str] = None
    github_url: Optional[str] = None

    @field_validator(
        "title_ar", "description_ar", "detailed_description", "detailed_description_ar",
        "live_demo_url", "github_url", mode="before",
    )
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator(*PROJECT_LIST_FIELDS, mode="before")
    @classmethod
    def normalize_tokens(cls, v):
        if v is None:
            return []
        if not isinstance(v, (list, tuple)) or not all(isinstance(i, str) for i in v):
            return v
        return clean_tokens(v)


class Skill(ContentModel):
    name: str = Field(..., min_length=1, description="Name is required")
    icon: str = Field("Code2", min_length=1)
    color: str = Field("text-primary", min_length=1)
    position_x: float = Field(0, ge=-200, le=200, description="Radial layout x offset")
    position_y: float = Field(0, ge=-200, le=200, description="Radial layout y offset")
    tech: List[str] = Field(default_factory=list)

    @field_validator("tech", mode="before")
    @classmethod
    def normalize_tokens(cls, v):
        if v is None:
            return []
        if not isinstance(v, (list, tuple)) or not all(isinstance(i, str) for i in v):
            return v
        return clean_tokens(v)


class Testimonial(ContentModel):
    name: str = Field(..., min_length=1, description="Name is required")
    position: Optional[str] = None
    company: Optional[str] = None
    content: str = Field(..., min_length=10, description="Content must be at least 10 characters")
    rating: int = Field(5, ge=1, le=5)
    image_url: Optional[str] = None
    platform: Platform = "website"

    @field_validator("rating", mode="before")
    @classmethod
    def default_rating(cls, v):
        return 5 if v is None else v

    @field_validator("position", "company", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)

    @field_validator("image_url", mode="before")
    @classmethod
    def validate_urls(cls, v):
        return check_url(v)


# Auth
class AdminCredential(BaseModel):
    username: str
    password_hash: str


class LoginRequest(BaseModel):
    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    username: str


# Requests that are not stored
class ContactMessage(ContentModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    message: str = Field(..., min_length=1)


class TokenValue(BaseModel):
    value: str = Field(..., min_length=1)


class LanguageChoice(BaseModel):
    lang: Literal["en", "ar"]


class AdminResult(BaseModel):
    ok: bool = True
    id: Optional[str] = None
    message: str
    reload_after_ms: int
