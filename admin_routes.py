import logging
from typing import Any, Callable, Optional, get_args

import requests
from bson import ObjectId
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pymongo.errors import PyMongoError

import database
from config import RELOAD_AFTER_MS
from content import normalize_project, normalize_skill, normalize_testimonial
from media import (
    PROFILE_FOLDER,
    PROJECTS_FOLDER,
    TESTIMONIALS_FOLDER,
    MediaConfigError,
    MediaUploadError,
    upload_image,
)
from schemas import (
    CONTACT_INFO,
    GLOW_CLASSES,
    PERSONAL_INFO,
    PROJECT,
    PROJECT_COLORS,
    PROJECT_ICONS,
    PROJECT_LIST_FIELDS,
    SKILL,
    SKILL_COLORS,
    SKILL_ICONS,
    SKILL_LIST_FIELDS,
    TESTIMONIAL,
    AdminResult,
    ContactInfo,
    LoginRequest,
    PersonalInfo,
    Platform,
    Project,
    Skill,
    Testimonial,
    Token,
    TokenValue,
)
from security import (
    create_access_token,
    get_current_admin,
    get_token_payload,
    revoke,
    verify_admin_credentials,
)
from token_list import TokenList

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(get_current_admin)])

STORE_ERRORS = (PyMongoError, database.DatabaseUnavailable)
UPLOAD_FOLDERS = [PROJECTS_FOLDER, TESTIMONIALS_FOLDER, PROFILE_FOLDER]


# =========
# Utilities
# =========

def _result(message: str, doc_id: Optional[str] = None) -> AdminResult:
    return AdminResult(id=doc_id, message=message, reload_after_ms=RELOAD_AFTER_MS)


def _check_id(doc_id: str) -> None:
    if not ObjectId.is_valid(doc_id):
        raise HTTPException(status_code=400, detail="Invalid id")


def _store(action: str, fn: Callable[..., Any], *args: Any) -> Any:
    """Run one store call; failures come back as 500 with the raw message."""
    try:
        return fn(*args)
    except STORE_ERRORS as e:
        logger.exception("Error %s", action)
        raise HTTPException(status_code=500, detail=f"Failed to {action}: {e}")


def _get_or_404(collection: str, doc_id: str, action: str) -> dict:
    _check_id(doc_id)
    doc = _store(action, database.get_document, collection, doc_id)
    if doc is None:
        raise HTTPException(status_code=404, detail="Not found")
    return doc


def _delete(collection: str, doc_id: str, action: str) -> None:
    _check_id(doc_id)
    if not _store(action, database.delete_document, collection, doc_id):
        raise HTTPException(status_code=404, detail="Not found")


def _update(collection: str, doc_id: str, data: Any, action: str) -> None:
    _check_id(doc_id)
    if not _store(action, database.update_document, collection, doc_id, data):
        raise HTTPException(status_code=404, detail="Not found")


def _edit_tokens(collection: str, doc_id: str, field: str, allowed: tuple, value: str, add: bool) -> dict:
    if field not in allowed:
        raise HTTPException(status_code=400, detail=f"Unknown list field: {field}")
    doc = _get_or_404(collection, doc_id, f"update {field}")
    tokens = TokenList(doc.get(field) or [])
    changed = tokens.add(value) if add else tokens.remove(value)
    if changed:
        _update(collection, doc_id, {field: tokens.to_list()}, f"update {field}")
    return {"ok": True, "field": field, "items": tokens.to_list(), "changed": changed}


# ====
# Auth
# ====

@auth_router.post("/login", response_model=Token)
def login(data: LoginRequest):
    try:
        ok = verify_admin_credentials(data.username, data.password)
    except STORE_ERRORS:
        logger.exception("Login error")
        ok = False
    if not ok:
        raise HTTPException(status_code=401, detail="Invalid credentials.")
    username = data.username.strip()
    logger.info("Admin %s logged in", username)
    return Token(access_token=create_access_token(username), username=username)


@auth_router.get("/me")
def me(admin: dict = Depends(get_current_admin)):
    return admin


@auth_router.post("/logout")
def logout(payload: dict = Depends(get_token_payload)):
    _store("log out", revoke, payload)
    return {"ok": True}


# =======
# Options
# =======

@router.get("/options")
def get_options():
    """Choices for the admin form selects."""
    return {
        "project": {"icons": PROJECT_ICONS, "colors": PROJECT_COLORS, "glow_classes": GLOW_CLASSES},
        "skill": {"icons": SKILL_ICONS, "colors": SKILL_COLORS},
        "platforms": list(get_args(Platform)),
        "list_fields": {"project": list(PROJECT_LIST_FIELDS), "skill": list(SKILL_LIST_FIELDS)},
        "upload_folders": UPLOAD_FOLDERS,
    }


# ========
# Projects
# ========

@router.get("/projects")
def list_projects():
    return [normalize_project(p) for p in _store("load projects", database.get_documents, PROJECT)]


@router.get("/projects/{project_id}")
def get_project(project_id: str):
    return normalize_project(_get_or_404(PROJECT, project_id, "load project"))


@router.post("/projects", response_model=AdminResult)
def create_project(project: Project):
    _id = _store("create project", database.create_document, PROJECT, project)
    return _result("Project created successfully.", _id)


@router.put("/projects/{project_id}", response_model=AdminResult)
def update_project(project_id: str, project: Project):
    _update(PROJECT, project_id, project, "update project")
    return _result("Project updated successfully.", project_id)


@router.delete("/projects/{project_id}", response_model=AdminResult)
def delete_project(project_id: str):
    _delete(PROJECT, project_id, "delete project")
    return _result("Project deleted successfully.", project_id)


@router.post("/projects/{project_id}/lists/{field}")
def add_project_token(project_id: str, field: str, token: TokenValue):
    return _edit_tokens(PROJECT, project_id, field, PROJECT_LIST_FIELDS, token.value, add=True)


@router.delete("/projects/{project_id}/lists/{field}")
def remove_project_token(project_id: str, field: str, value: str):
    return _edit_tokens(PROJECT, project_id, field, PROJECT_LIST_FIELDS, value, add=False)


# ======
# Skills
# ======

@router.get("/skills")
def list_skills():
    return [normalize_skill(s) for s in _store("load skills", database.get_documents, SKILL)]


@router.post("/skills", response_model=AdminResult)
def create_skill(skill: Skill):
    _id = _store("create skill", database.create_document, SKILL, skill)
    return _result("Skill created successfully.", _id)


@router.delete("/skills/{skill_id}", response_model=AdminResult)
def delete_skill(skill_id: str):
    _delete(SKILL, skill_id, "delete skill")
    return _result("Skill deleted successfully.", skill_id)


@router.post("/skills/{skill_id}/lists/{field}")
def add_skill_token(skill_id: str, field: str, token: TokenValue):
    return _edit_tokens(SKILL, skill_id, field, SKILL_LIST_FIELDS, token.value, add=True)


@router.delete("/skills/{skill_id}/lists/{field}")
def remove_skill_token(skill_id: str, field: str, value: str):
    return _edit_tokens(SKILL, skill_id, field, SKILL_LIST_FIELDS, value, add=False)


# ============
# Testimonials
# ============

@router.get("/testimonials")
def list_testimonials():
    return [normalize_testimonial(t) for t in _store("load testimonials", database.get_documents, TESTIMONIAL)]


@router.post("/testimonials", response_model=AdminResult)
def create_testimonial(testimonial: Testimonial):
    _id = _store("add testimonial", database.create_document, TESTIMONIAL, testimonial)
    return _result("Testimonial added successfully!", _id)


@router.put("/testimonials/{item_id}", response_model=AdminResult)
def update_testimonial(item_id: str, testimonial: Testimonial):
    _update(TESTIMONIAL, item_id, testimonial, "update testimonial")
    return _result("Testimonial updated successfully!", item_id)


@router.delete("/testimonials/{item_id}", response_model=AdminResult)
def delete_testimonial(item_id: str):
    _delete(TESTIMONIAL, item_id, "delete testimonial")
    return _result("Testimonial deleted successfully!", item_id)


# ==========
# Singletons
# ==========

@router.get("/personal-info")
def get_personal_info():
    return _store("load personal info", database.get_singleton, PERSONAL_INFO)


@router.put("/personal-info", response_model=AdminResult)
def save_personal_info(info: PersonalInfo):
    _id = _store("save personal info", database.upsert_singleton, PERSONAL_INFO, info)
    return _result("Personal information updated successfully.", _id)


@router.get("/contact-info")
def get_contact_info():
    return _store("load contact info", database.get_singleton, CONTACT_INFO)


@router.put("/contact-info", response_model=AdminResult)
def save_contact_info(info: ContactInfo):
    _id = _store("update contact information", database.upsert_singleton, CONTACT_INFO, info)
    return _result("Contact information updated successfully.", _id)


# ======
# Media
# ======

@router.post("/uploads")
def upload(file: UploadFile = File(...), folder: str = Form(PROJECTS_FOLDER)):
    if folder not in UPLOAD_FOLDERS:
        raise HTTPException(status_code=400, detail=f"Unknown upload folder: {folder}")
    try:
        result = upload_image(file.file, file.filename or "upload", file.content_type, folder)
    except MediaConfigError as e:
        logger.error("Upload failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    except MediaUploadError as e:
        logger.error("Upload failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    except requests.RequestException as e:
        logger.exception("Upload failed")
        raise HTTPException(status_code=502, detail=f"Could not upload image: {e}")
    return {"ok": True, "message": "Image uploaded successfully.", **result}
