"""HTTP controllers."""

from .api_controller import ApiEnvelope, BaseApiController
from .controller import BaseController, RequestContext, ViewRequest, resolve_view_type

__all__ = [
    "ApiEnvelope",
    "BaseApiController",
    "BaseController",
    "RequestContext",
    "ViewRequest",
    "resolve_view_type",
]
