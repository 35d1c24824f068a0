"""Auto-detect the API description dialect."""

from openapi_params.errors import DocumentError


def detect_dialect(document: dict) -> str:
    """Detect which dialect a loaded document is written in.

    Returns: 'swagger' (2.0, body parameters) or 'openapi' (3.x, request bodies).
    """
    if "swagger" in document:
        return "swagger"
    if "openapi" in document:
        return "openapi"
    raise DocumentError("Document declares neither 'swagger' nor 'openapi' version")
