import logging
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, Response

import content
import effects
from locales import direction, resolve_language, t
from mailer import RelayError, send_contact_message
from schemas import ContactMessage, LanguageChoice

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["site"])

COOKIE_MAX_AGE = 60 * 60 * 24 * 365
THEMES = ("dark", "light")


def get_lang(
    lang: Optional[str] = Query(None),
    lang_cookie: Optional[str] = Cookie(None, alias="lang"),
) -> str:
    return resolve_language(lang, lang_cookie)


def _set_lang(response: Response, lang: str) -> dict:
    response.set_cookie("lang", lang, max_age=COOKIE_MAX_AGE, samesite="lax")
    return {"lang": lang, "dir": direction(lang)}


# Sections
@router.get("/site")
def get_site(lang: str = Depends(get_lang)):
    return content.site(lang)


@router.get("/site/hero")
def get_hero(lang: str = Depends(get_lang)):
    return content.hero_section(lang)


@router.get("/site/about")
def get_about(lang: str = Depends(get_lang)):
    return content.about_section(lang)


@router.get("/site/projects")
def get_projects(lang: str = Depends(get_lang)):
    return content.projects_section(lang)


@router.get("/site/skills")
def get_skills(lang: str = Depends(get_lang)):
    return content.skills_section(lang)


@router.get("/site/testimonials")
def get_testimonials(lang: str = Depends(get_lang)):
    return content.testimonials_section(lang)


@router.get("/site/contact")
def get_contact(lang: str = Depends(get_lang)):
    return content.contact_section(lang)


@router.get("/site/effects")
def get_effects(
    scroll: float = Query(0.0, ge=0.0, le=1.0),
    particles: int = Query(50, ge=0, le=500),
    seed: Optional[int] = None,
    cards: int = Query(6, ge=0, le=50),
    hovered: Optional[int] = None,
):
    return {
        "rocket": effects.rocket_frame(scroll),
        "particles": effects.particle_field(particles, seed),
        "cards": [effects.hover_card(i, i == hovered) for i in range(cards)],
    }


@router.get("/projects/{project_id}")
def get_project(project_id: str, lang: str = Depends(get_lang)):
    try:
        project = content.project_detail(project_id, lang)
    except Exception:
        logger.exception("Error loading project %s", project_id)
        project = None
    if project is None:
        raise HTTPException(status_code=404, detail=t(lang, "projectDetail.projectNotFound"))
    return project


# Chrome
@router.post("/site/language")
def set_language(choice: LanguageChoice, response: Response):
    return _set_lang(response, choice.lang)


@router.post("/site/language/toggle")
def toggle_language(response: Response, lang_cookie: Optional[str] = Cookie(None, alias="lang")):
    current = resolve_language(lang_cookie)
    return _set_lang(response, "ar" if current == "en" else "en")


@router.post("/site/theme/toggle")
def toggle_theme(response: Response, theme: Optional[str] = Cookie(None)):
    current = theme if theme in THEMES else "dark"
    new_theme = "light" if current == "dark" else "dark"
    response.set_cookie("theme", new_theme, max_age=COOKIE_MAX_AGE, samesite="lax")
    return {"theme": new_theme}


# Contact form
@router.post("/contact")
def contact(data: ContactMessage, lang: str = Depends(get_lang)):
    try:
        send_contact_message(data)
    except RelayError:
        logger.exception("Error sending email")
        raise HTTPException(status_code=502, detail=t(lang, "contact.failed"))
    return {"ok": True, "message": t(lang, "contact.sent")}
