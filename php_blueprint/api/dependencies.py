from fastapi import Request

from php_blueprint.services.session import BlueprintSession


def get_session(request: Request) -> BlueprintSession:
    """The single session created at app startup."""
    return request.app.state.session
