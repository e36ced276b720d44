"""
Developer add/edit form definition.

Declares the fields of the HTML form, builds a FormState for rendering, and
turns a submission into an API payload. Skill inputs are named
``skills.<rating>`` so the submission folds directly into the nested
request body.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from devroster.config import settings
from devroster.domain.entities import SKILL_NAMES, Developer
from devroster.forms.paths import form_data_object
from devroster.forms.state import FormChange, FormState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    input_type: str = "text"


INFO_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("name", "Name"),
    FieldSpec("imageUrl", "Image Url"),
    FieldSpec("location", "Location"),
    FieldSpec("position", "Position"),
    FieldSpec("experienceYears", "XP Years", "number"),
)

SKILL_FIELDS: Tuple[FieldSpec, ...] = tuple(
    FieldSpec(f"skills.{name}", name, "number") for name in SKILL_NAMES
)

ID_FIELD = FieldSpec("id", "", "hidden")


def _log_change(change: FormChange) -> None:
    if change.action in ("change", "error"):
        logger.debug(f"Form field {change.name} {change.action}: {change.value!r}")


def build_developer_form(form_id: str, developer: Optional[Developer] = None) -> FormState:
    """
    Create the form state for the add form (developer=None) or the edit form.

    Add form: empty info fields, every skill rating at the configured default.
    Edit form: every field prefilled from the developer, plus a hidden id.
    """
    form = FormState(form_id)
    form.subscribe(_log_change)

    if developer is None:
        for spec in INFO_FIELDS:
            form.add_field(spec.name, "")
        for spec in SKILL_FIELDS:
            form.add_field(spec.name, settings.default_skill_rating)
        return form

    form.add_field(ID_FIELD.name, developer.id)
    form.add_field("name", developer.name)
    form.add_field("imageUrl", developer.image_url)
    form.add_field("location", developer.location)
    form.add_field("position", developer.position)
    form.add_field("experienceYears", developer.experience_years)
    for name, rating in developer.skills.to_dict().items():
        form.add_field(f"skills.{name}", rating)
    return form


def developer_payload(submission: Any) -> Dict[str, Any]:
    """
    Fold a form submission into a developer request body.

    An empty image url falls back to the default avatar.
    """
    payload = form_data_object(submission)
    if not str(payload.get("imageUrl") or "").strip():
        payload["imageUrl"] = settings.default_image_url
    return payload


def _submitted_pairs(submission: Any) -> Iterable[Tuple[str, Any]]:
    if hasattr(submission, "multi_items"):
        return submission.multi_items()
    if hasattr(submission, "items"):
        return submission.items()
    return submission


def apply_submission(form: FormState, submission: Any, errors: List[Dict[str, str]]) -> FormState:
    """
    Show a rejected submission back to the user.

    Known fields take the submitted values; field errors are attached by
    their dot path. Errors for unknown paths land on the form itself
    under '__form__'.
    """
    for name, value in _submitted_pairs(submission):
        if name in form.values:
            form.set_value(name, value)

    for error in errors:
        field = error.get("field", "")
        if field in form.values:
            form.set_error(field, error.get("message"))
        else:
            previous = form.errors.get("__form__")
            message = f"{field}: {error.get('message')}" if field else error.get("message")
            form.set_error("__form__", f"{previous}; {message}" if previous else message)
    return form
