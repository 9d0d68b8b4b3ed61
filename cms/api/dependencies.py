"""FastAPI dependencies giving routes access to the application and controllers."""

from fastapi import Request

from cms.http import RequestContext


def get_application(request: Request):
    """The booted CMS application stored on the FastAPI app."""
    return request.app.state.cms


def controller(controller_class):
    """
    Dependency constructing a page controller for the current request.

    The controller is closed once the response has been produced.
    """
    def dependency(request: Request):
        context = RequestContext(
            request=request,
            user=getattr(request.state, "user", None),
            auth=getattr(request.state, "auth", None),
        )
        with controller_class(get_application(request), context) as instance:
            yield instance
    return dependency


def api_controller(controller_class):
    """Dependency constructing an API controller bound to the application."""
    def dependency(request: Request):
        return controller_class(get_application(request))
    return dependency
