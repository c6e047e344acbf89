from spectree import Response as SpectreeResponse
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from bank_rates_dashboard import spec
from bank_rates_dashboard.models import DashboardView
from bank_rates_dashboard.schemas import ErrorResponse, SelectionOptions
from bank_rates_dashboard.services import dashboard_service
from bank_rates_dashboard.services.selection_service import SelectionError


@spec.validate(resp=SpectreeResponse(HTTP_200=DashboardView), tags=["Dashboard"])
async def dashboard_state(_: Request) -> Response:
    return Response(dashboard_service.dashboard_view().model_dump_json(), media_type="application/json")


@spec.validate(resp=SpectreeResponse(HTTP_200=SelectionOptions, HTTP_409=ErrorResponse), tags=["Dashboard"])
async def selection_options(_: Request) -> Response:
    try:
        options = dashboard_service.selection_options()
    except SelectionError as e:
        return JSONResponse({"errors": [e.message]}, status_code=409)
    return Response(options.model_dump_json(), media_type="application/json")


DashboardMount = Mount(
    "",
    routes=[
        Route("/dashboard", dashboard_state),
        Route("/options", selection_options),
    ],
)
