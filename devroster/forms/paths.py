"""
Nested payload construction from flat form fields.

HTML forms submit flat (name, value) pairs. Field names may use dot and
bracket notation (``skills.communicative``, ``items[0][name]``) to describe
where the value belongs in the request body. ``deep_set`` walks such a path,
creating intermediate containers on the way, and ``form_data_object`` folds a
whole submission into one nested dict.

Container kinds are explicit:
- mapping node (dict): segments are string keys
- sequence node (list): segments must be non-negative integer indexes no
  greater than the list length (lists grow by appending only)
- anything else is a scalar and is never descended into

Malformed input is absorbed rather than raised. An empty path or a scalar
target leaves the target untouched; a segment that cannot address a list
(not an index, or past its end) stops the walk without assigning.
"""
import logging
import re
from collections.abc import Mapping
from typing import Any, Iterable, List, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

# Maximal runs of characters that are not '.', '[' or ']'
_SEGMENT_PATTERN = re.compile(r"[^.\[\]]+")
_INDEX_PATTERN = re.compile(r"[0-9]+")

Segment = Union[str, int]
Path = Union[str, Sequence[Segment]]


def split_path(path: str) -> List[str]:
    """
    Split a dot/bracket path into its segments.

    Examples:
        split_path("skills.communicative") -> ["skills", "communicative"]
        split_path("items[0][name]") -> ["items", "0", "name"]
        split_path("..[]") -> []
    """
    return _SEGMENT_PATTERN.findall(str(path))


def is_index_segment(segment: Segment) -> bool:
    """
    Check whether a path segment addresses a list position.

    Plain ASCII digit strings and non-negative ints qualify. Negative or
    fractional numbers, booleans and any other text do not.
    """
    if isinstance(segment, bool):
        return False
    if isinstance(segment, int):
        return segment >= 0
    if isinstance(segment, str):
        return _INDEX_PATTERN.fullmatch(segment) is not None
    return False


def _is_container(node: Any) -> bool:
    return isinstance(node, (dict, list))


def _new_container(next_segment: Segment) -> Union[dict, list]:
    """Create the container a segment will be looked up in."""
    return [] if is_index_segment(next_segment) else {}


def _key_for(node: Union[dict, list], segment: Segment) -> Union[str, int, None]:
    """
    Convert a segment into a key usable on ``node``.

    Returns None when the segment cannot address the node: a non-index
    segment under a list, or an index past the end of the list. Lists only
    grow by appending at index len(node).
    """
    if isinstance(node, list):
        if not is_index_segment(segment):
            return None
        index = int(segment)
        if index > len(node):
            return None
        if index == len(node):
            node.append(None)
        return index
    return str(segment)


def deep_set(target: Any, path: Path, value: Any) -> Any:
    """
    Set ``value`` at ``path`` inside ``target``, creating containers as needed.

    For every segment but the last, an existing container at that key is
    reused; otherwise a new one is created (a list when the following segment
    looks like an index, a dict otherwise) and replaces whatever scalar was
    there. The last segment receives the value, overwriting any prior value.

    Args:
        target: dict or list to build into (mutated in place)
        path: dot/bracket string or an already-split sequence of segments
        value: value stored at the leaf

    Returns:
        The same ``target`` object. A non-container target is returned
        unchanged.
    """
    if not _is_container(target):
        return target

    if isinstance(path, str):
        segments: Sequence[Segment] = split_path(path)
    else:
        segments = list(path)

    if not segments:
        return target

    node = target
    for position, segment in enumerate(segments[:-1]):
        key = _key_for(node, segment)
        if key is None:
            logger.debug(f"Path {segments!r} cannot continue at segment {segment!r}")
            return target

        child = node.get(key) if isinstance(node, dict) else node[key]
        if not _is_container(child):
            child = _new_container(segments[position + 1])
            node[key] = child
        node = child

    key = _key_for(node, segments[-1])
    if key is None:
        logger.debug(f"Path {segments!r} cannot continue at segment {segments[-1]!r}")
        return target

    node[key] = value
    return target


def _entries(form: Any) -> Iterable[Tuple[str, Any]]:
    # starlette FormData / multidicts keep repeated names in multi_items()
    if hasattr(form, "multi_items"):
        return form.multi_items()
    if isinstance(form, Mapping):
        return form.items()
    return form


def form_data_object(form: Any) -> dict:
    """
    Fold a flat form submission into a nested dict.

    Entries are applied in the order the form yields them, so a later field
    with the same path overwrites an earlier one.

    Example:
        form_data_object([("name", "Ada"), ("skills.timely", "80")])
        -> {"name": "Ada", "skills": {"timely": "80"}}
    """
    root: dict = {}
    for path, value in _entries(form):
        deep_set(root, path, value)
    return root
