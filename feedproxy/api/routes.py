"""
Feed Routes

The single proxied endpoint plus plain-text error responses.
"""

from flask import Blueprint, Flask, Response, current_app, request

from feedproxy.domain.errors import DomainError, http_status_for

XML_MIMETYPE = "text/xml"
TEXT_MIMETYPE = "text/plain"


def text_response(body: str, status_code: int) -> Response:
    return Response(body, status=status_code, mimetype=TEXT_MIMETYPE)


def error_response(error: DomainError) -> Response:
    """Render a domain error as the plain-text response the proxy answers with."""
    status_code = http_status_for(error)
    if status_code == 400:
        return text_response(f"bad request: {error}", status_code)
    return text_response(f"internal server error: {error}", status_code)


def create_feed_blueprint(feed_path: str) -> Blueprint:
    """
    Create the blueprint serving the filtered feed at ``feed_path``.

    Args:
        feed_path: URL path the feed reader requests, e.g.
            ``/www.youtube.com/feeds/videos.xml``
    """
    feed_bp = Blueprint("feed", __name__)

    @feed_bp.route(feed_path, methods=["GET"])
    def proxied_feed():
        """
        Return the channel feed without Shorts.

        Query parameters:
            channel_id: YouTube channel id (required)
        """
        service = current_app.feed_proxy_service
        try:
            body = service.handle(request.args.get("channel_id"))
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            current_app.logger.exception(f"Unexpected error serving {request.full_path}: {e}")
            return text_response(f"internal server error: {e}", 500)

        return Response(body + b"\n", status=200, mimetype=XML_MIMETYPE)

    return feed_bp


def register_error_handlers(app: Flask) -> None:
    """Answer unknown paths and unsupported methods in plain text."""

    @app.errorhandler(404)
    def endpoint_not_found(_error):
        return text_response(f"endpoint not found: {request.path}", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        response = text_response(f"method not allowed: {request.method} {request.path}", 405)
        if error.valid_methods:
            response.headers["Allow"] = ", ".join(error.valid_methods)
        return response
