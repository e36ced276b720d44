"""Form helpers: nested payload construction and per-form field state."""
from devroster.forms.paths import deep_set, form_data_object, is_index_segment, split_path
from devroster.forms.state import FieldState, FormChange, FormState

__all__ = [
    "deep_set",
    "form_data_object",
    "is_index_segment",
    "split_path",
    "FieldState",
    "FormChange",
    "FormState",
]
