"""
Public site sections.

Each builder does one read against the content store and returns a payload
the page can render as-is. A missing row or a failed read never produces an
empty section: About and Hero fall back to the static copy in ``locales``,
Projects and Skills fall back to their empty state, and Testimonials carry
an inline error string.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

import database
from locales import direction, section, t
from schemas import (
    CONTACT_INFO,
    PERSONAL_INFO,
    PROJECT,
    PROJECT_LIST_FIELDS,
    SKILL,
    TESTIMONIAL,
)

logger = logging.getLogger(__name__)

DEFAULT_RATING = 5
DEFAULT_PLATFORM = "website"
MAX_RATING = 5

ABOUT_SKILL_LEVELS = [
    ("Code", "about.skills.fullStack", 95),
    ("Zap", "about.skills.performance", 90),
    ("Globe", "about.skills.web", 98),
    ("Cpu", "about.skills.architecture", 85),
]


# Row normalization

def normalize_project(doc: Dict[str, Any]) -> Dict[str, Any]:
    project = dict(doc)
    for field in PROJECT_LIST_FIELDS:
        project[field] = project.get(field) or []
    return project


def localize_project(doc: Dict[str, Any], lang: str) -> Dict[str, Any]:
    project = normalize_project(doc)
    arabic = lang == "ar"

    def pick(field: str) -> Optional[str]:
        translated = project.get(f"{field}_ar")
        if arabic and translated:
            return translated
        return project.get(field)

    project["display"] = {
        "title": pick("title"),
        "description": pick("description"),
        "detailed_description": pick("detailed_description"),
        "has_detailed_description": bool(project.get("detailed_description") or project.get("detailed_description_ar")),
    }
    return project


def normalize_skill(doc: Dict[str, Any]) -> Dict[str, Any]:
    skill = dict(doc)
    skill["tech"] = skill.get("tech") or []
    skill["position_x"] = skill.get("position_x") or 0
    skill["position_y"] = skill.get("position_y") or 0
    return skill


def star_count(rating: Any) -> int:
    try:
        value = int(rating)
    except (TypeError, ValueError):
        return DEFAULT_RATING
    return max(1, min(MAX_RATING, value))


def normalize_testimonial(doc: Dict[str, Any]) -> Dict[str, Any]:
    item = dict(doc)
    if item.get("rating") is None:
        item["rating"] = DEFAULT_RATING
    item["platform"] = item.get("platform") or DEFAULT_PLATFORM
    item["stars"] = star_count(item["rating"])
    return item


def social_links(info: Optional[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Links with a stored value, plus Instagram which is always shown."""
    info = info or {}
    phone_digits = "".join(ch for ch in (info.get("phone") or "") if ch.isdigit())
    links = [
        ("github", "GitHub", info.get("github_url")),
        ("linkedin", "LinkedIn", info.get("linkedin_url")),
        ("twitter", "Twitter", info.get("twitter_url")),
        ("instagram", "Instagram", "https://instagram.com"),
        ("email", "Email", f"mailto:{info['email']}" if info.get("email") else None),
        ("whatsapp", "WhatsApp", f"https://wa.me/{phone_digits}" if info.get("phone") else None),
    ]
    return [{"id": key, "name": name, "url": url} for key, name, url in links if url]


# Sections

def hero_section(lang: str) -> Dict[str, Any]:
    strings = section(lang, "hero")
    resume_url = None
    try:
        info = database.get_singleton(PERSONAL_INFO)
        resume_url = info.get("resume_url") if info else None
    except Exception:
        logger.exception("Error loading personal info for hero")
    return {"strings": strings, "resume_url": resume_url}


def about_section(lang: str) -> Dict[str, Any]:
    info = None
    try:
        info = database.get_singleton(PERSONAL_INFO)
    except Exception:
        # keep the static copy
        logger.exception("Error loading personal info")

    strings = section(lang, "about")
    paragraphs = [info["bio"]] if info and info.get("bio") else [
        strings["description1"], strings["description2"], strings["description3"],
    ]
    return {
        "strings": strings,
        "source": "store" if info else "fallback",
        "name": (info or {}).get("name") or t(lang, "hero.name"),
        "title": (info or {}).get("title") or t(lang, "hero.title"),
        "paragraphs": paragraphs,
        "profile_image_url": (info or {}).get("profile_image_url"),
        "resume_url": (info or {}).get("resume_url"),
        "skills": [
            {"icon": icon, "name": t(lang, key), "level": level}
            for icon, key, level in ABOUT_SKILL_LEVELS
        ],
    }


def projects_section(lang: str) -> Dict[str, Any]:
    items: List[Dict[str, Any]] = []
    try:
        items = [localize_project(doc, lang) for doc in database.get_documents(PROJECT)]
    except Exception:
        logger.exception("Error loading projects")
    return {
        "strings": section(lang, "projects"),
        "items": items,
        "empty_message": None if items else t(lang, "projects.empty"),
    }


def skills_section(lang: str) -> Dict[str, Any]:
    items: List[Dict[str, Any]] = []
    try:
        items = [normalize_skill(doc) for doc in database.get_documents(SKILL)]
    except Exception:
        logger.exception("Error loading skills")
    return {"strings": section(lang, "skills"), "items": items}


def testimonials_section(lang: str) -> Dict[str, Any]:
    try:
        items = [normalize_testimonial(doc) for doc in database.get_documents(TESTIMONIAL)]
    except Exception as e:
        logger.exception("Error loading testimonials")
        return {
            "strings": section(lang, "testimonials"),
            "items": [],
            "error": f"{t(lang, 'testimonials.loadError')}: {e}",
            "empty_message": None,
        }
    return {
        "strings": section(lang, "testimonials"),
        "items": items,
        "error": None,
        "empty_message": None if items else t(lang, "testimonials.empty"),
    }


def contact_section(lang: str) -> Dict[str, Any]:
    info = None
    try:
        info = database.get_singleton(CONTACT_INFO)
    except Exception:
        logger.exception("Error loading contact info")
    return {
        "strings": section(lang, "contact"),
        "info": info,
        "links": social_links(info),
    }


def project_detail(project_id: str, lang: str) -> Optional[Dict[str, Any]]:
    """None when the id is malformed or unknown."""
    if not ObjectId.is_valid(project_id):
        return None
    doc = database.get_document(PROJECT, project_id)
    if doc is None:
        return None
    project = localize_project(doc, lang)
    project["strings"] = section(lang, "projectDetail")
    return project


def site(lang: str) -> Dict[str, Any]:
    return {
        "lang": lang,
        "dir": direction(lang),
        "nav": section(lang, "nav"),
        "footer": section(lang, "footer"),
        "hero": hero_section(lang),
        "about": about_section(lang),
        "projects": projects_section(lang),
        "skills": skills_section(lang),
        "testimonials": testimonials_section(lang),
        "contact": contact_section(lang),
    }
