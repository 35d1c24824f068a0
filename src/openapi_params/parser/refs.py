"""Local $ref resolution inside a loaded API document."""

from urllib.parse import unquote

from openapi_params.errors import ReferenceResolutionError


def is_ref(item: dict | None) -> bool:
    return isinstance(item, dict) and "$ref" in item


def ref_name(ref: str) -> str:
    """Return the last segment of a pointer, e.g. '#/definitions/Pet' -> 'Pet'."""
    return _unescape(ref.rsplit("/", 1)[-1])


def get_ref(document: dict, item: dict) -> dict:
    """Return the node `item` points at, or `item` itself if it is not a $ref.

    Chained references are followed until a concrete node is reached.
    """
    seen: set[str] = set()
    while is_ref(item):
        ref = item["$ref"]
        if ref in seen:
            raise ReferenceResolutionError(ref, "reference cycle")
        seen.add(ref)
        item = _follow_pointer(document, ref)
    return item


def _follow_pointer(document: dict, ref: str) -> dict:
    if not isinstance(ref, str) or not ref.startswith("#"):
        raise ReferenceResolutionError(str(ref), "only local references are supported")

    node = document
    path = ref[1:].lstrip("/")
    for segment in path.split("/") if path else []:
        key = _unescape(segment)
        if isinstance(node, dict) and key in node:
            node = node[key]
        elif isinstance(node, list) and key.isdigit() and int(key) < len(node):
            node = node[int(key)]
        else:
            raise ReferenceResolutionError(ref)

    if not isinstance(node, dict):
        raise ReferenceResolutionError(ref, "target is not an object")
    return node


def _unescape(segment: str) -> str:
    return unquote(segment).replace("~1", "/").replace("~0", "~")
