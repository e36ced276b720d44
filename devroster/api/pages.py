"""
HTML pages for the roster

- GET  /devs                 roster list
- GET  /devs/add             add form
- POST /devs/add             create from form submission
- GET  /devs/{id}            detail card + skills radar chart
- GET  /devs/{id}/edit       edit form
- POST /devs/{id}/edit       update from form submission

Successful submissions redirect (303) to the list. Rejected submissions
re-render the form with the submitted values and field errors (400).
"""
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from devroster.db.connection import get_db_session
from devroster.forms.developer_form import (
    ID_FIELD,
    INFO_FIELDS,
    SKILL_FIELDS,
    apply_submission,
    build_developer_form,
    developer_payload,
)
from devroster.forms.state import FormState
from devroster.services.developer_service import DeveloperService, DeveloperStoreError
from devroster.ui.charts import RADAR_OPTIONS, radar_chart_data

logger = logging.getLogger(__name__)

router = APIRouter()

templates_dir = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


def _render_form(
    request: Request,
    form: FormState,
    title: str,
    action: str,
    status_code: int = status.HTTP_200_OK,
):
    return templates.TemplateResponse(
        request,
        "devs/form.html",
        {
            "form": form,
            "title": title,
            "action": action,
            "info_fields": INFO_FIELDS,
            "skill_fields": SKILL_FIELDS,
            "id_field": ID_FIELD,
        },
        status_code=status_code,
    )


@router.get("/devs", response_class=HTMLResponse)
async def developers_list(request: Request, db: AsyncSession = Depends(get_db_session)):
    """Render the roster list."""
    developers = await DeveloperService.get_developers(db)
    return templates.TemplateResponse(
        request,
        "devs/list.html",
        {"developers": developers},
    )


@router.get("/devs/add", response_class=HTMLResponse)
async def add_developer_form(request: Request):
    """Render an empty add form."""
    form = build_developer_form("AddDeveloper")
    return _render_form(request, form, "Add a new Developer", "/devs/add")


@router.post("/devs/add", response_class=HTMLResponse)
async def submit_add_developer(request: Request, db: AsyncSession = Depends(get_db_session)):
    """Create a developer from the add form."""
    submission = await request.form()
    payload = developer_payload(submission)

    try:
        developer = await DeveloperService.add_developer(db, payload)
    except DeveloperStoreError as e:
        logger.info(f"Add form rejected: {e.message}")
        errors = e.errors or [{"field": "", "message": e.message}]
        form = apply_submission(build_developer_form("AddDeveloper"), submission, errors)
        return _render_form(
            request, form, "Add a new Developer", "/devs/add",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info(f"Developer {developer.id} added via form")
    return RedirectResponse(url="/devs", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/devs/{developer_id}", response_class=HTMLResponse)
async def developer_detail(
    developer_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session)
):
    """Render the detail card and the skills radar chart."""
    developer = await DeveloperService.get_developer_by_id(db, developer_id)
    if developer is None:
        return templates.TemplateResponse(
            request,
            "devs/not_found.html",
            {"developer_id": developer_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return templates.TemplateResponse(
        request,
        "devs/detail.html",
        {
            "developer": developer,
            "chart_data": radar_chart_data(developer.skills),
            "chart_options": RADAR_OPTIONS,
        },
    )


@router.get("/devs/{developer_id}/edit", response_class=HTMLResponse)
async def edit_developer_form(
    developer_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session)
):
    """Render the edit form prefilled with the stored developer."""
    developer = await DeveloperService.get_developer_by_id(db, developer_id)
    if developer is None:
        return templates.TemplateResponse(
            request,
            "devs/not_found.html",
            {"developer_id": developer_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    form = build_developer_form("EditDeveloper", developer)
    return _render_form(request, form, f"Edit {developer.name}", f"/devs/{developer_id}/edit")


@router.post("/devs/{developer_id}/edit", response_class=HTMLResponse)
async def submit_edit_developer(
    developer_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db_session)
):
    """Update a developer from the edit form."""
    submission = await request.form()
    payload = developer_payload(submission)

    try:
        await DeveloperService.edit_developer(db, developer_id, payload)
    except DeveloperStoreError as e:
        logger.info(f"Edit form for {developer_id} rejected: {e.message}")
        developer = await DeveloperService.get_developer_by_id(db, developer_id)
        if developer is None:
            form = build_developer_form("EditDeveloper")
            form.add_field(ID_FIELD.name, developer_id)
        else:
            form = build_developer_form("EditDeveloper", developer)
        form = apply_submission(form, submission, e.errors or [{"field": "", "message": e.message}])
        return _render_form(
            request, form, "Edit Developer", f"/devs/{developer_id}/edit",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info(f"Developer {developer_id} edited via form")
    return RedirectResponse(url="/devs", status_code=status.HTTP_303_SEE_OTHER)
