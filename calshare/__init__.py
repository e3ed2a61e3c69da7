import logging

from flask import Flask, Response, abort, redirect, request
from pydantic import ValidationError as PydanticValidationError

from .config import ShareConfig
from .constants import ICS_EXPORT_FILENAME, ShareSite
from .device import is_mobile_user_agent
from .exceptions import TransitionWindowError, UnknownTimezoneError
from .models.event import ShareEvent
from .output.ics_composer import ICSComposer
from .share import build_share_url
from .timezones.provider import PytzTransitionTableProvider
from .timezones.vtimezone import build_vtimezone

logger = logging.getLogger(__name__)


def create_app(config: ShareConfig | None = None):
    app = Flask(__name__)
    config = config or ShareConfig.from_env()
    provider = PytzTransitionTableProvider()

    @app.route("/share/<site>", methods=["GET"])
    def share(site):
        """Redirect to a web calendar or serve the event as ICS."""
        try:
            share_site = ShareSite(site.lower())
        except ValueError:
            return (f"Unsupported share site: {site}", 404)

        try:
            event = ShareEvent(
                title=request.args.get("title", ""),
                description=request.args.get("description", ""),
                location=request.args.get("location", ""),
                start_datetime=request.args["start"],
                end_datetime=request.args["end"],
                timezone=request.args.get("timezone", ""),
                duration=request.args.get("duration"),
            )
        except KeyError as e:
            return (f"Missing parameter: {e.args[0]}", 400)
        except PydanticValidationError as e:
            return (f"Invalid event: {e}", 400)

        user_agent = request.headers.get("User-Agent")
        composer = ICSComposer(
            provider,
            is_mobile=lambda: is_mobile_user_agent(user_agent),
            source_url=request.referrer or config.source_url,
        )

        try:
            result = build_share_url(event, share_site, composer=composer)
        except (UnknownTimezoneError, TransitionWindowError) as e:
            return (str(e), 400)
        except ValueError as e:
            return (f"Invalid datetime: {e}", 400)

        if not share_site.is_file_based:
            return redirect(result)

        if result.startswith("data:"):
            # Mobile browsers get the data URI to open directly
            return Response(result, content_type="text/plain; charset=utf-8")

        return Response(
            result,
            content_type="text/calendar; charset=utf-8",
            headers={
                "Content-Disposition": f"attachment; filename={ICS_EXPORT_FILENAME}"
            },
        )

    @app.route("/vtimezone/<path:timezone_id>", methods=["GET"])
    def vtimezone(timezone_id):
        """Serve the VTIMEZONE block for a zone and event window."""
        start = request.args.get("start")
        end = request.args.get("end")
        if not start or not end:
            return ("start and end are required", 400)

        try:
            lines = build_vtimezone(timezone_id, start, end, provider)
        except UnknownTimezoneError as e:
            abort(404, description=str(e))
        except (TransitionWindowError, ValueError) as e:
            return (str(e), 400)

        logger.info(f"Served VTIMEZONE for {timezone_id}")
        return Response("\n".join(lines), content_type="text/plain; charset=utf-8")

    return app
