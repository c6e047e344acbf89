from collections.abc import Awaitable, Callable

from spectree import Response as SpectreeResponse
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from bank_rates_dashboard import spec
from bank_rates_dashboard.models import DashboardView
from bank_rates_dashboard.schemas import BankSelection, CurrencySelection, ErrorResponse, PeriodSelection
from bank_rates_dashboard.services import selection_service
from bank_rates_dashboard.services.selection_service import SelectionError


async def _apply(request: Request, action: Callable[[dict], Awaitable[DashboardView]]) -> Response:
    try:
        view = await action(await request.json())
    except SelectionError as e:
        return JSONResponse({"errors": [e.message]}, status_code=400)
    return Response(view.model_dump_json(), media_type="application/json")


@spec.validate(
    json=CurrencySelection,
    resp=SpectreeResponse(HTTP_200=DashboardView, HTTP_400=ErrorResponse),
    tags=["Selection"],
)
async def select_currency(request: Request) -> Response:
    return await _apply(request, selection_service.select_currency)


@spec.validate(
    json=BankSelection,
    resp=SpectreeResponse(HTTP_200=DashboardView, HTTP_400=ErrorResponse),
    tags=["Selection"],
)
async def select_banks(request: Request) -> Response:
    return await _apply(request, selection_service.select_banks)


@spec.validate(
    json=PeriodSelection,
    resp=SpectreeResponse(HTTP_200=DashboardView, HTTP_400=ErrorResponse),
    tags=["Selection"],
)
async def select_period(request: Request) -> Response:
    return await _apply(request, selection_service.select_period)


SelectionMount = Mount(
    "/selection",
    routes=[
        Route("/currency", select_currency, methods=["PUT"]),
        Route("/banks", select_banks, methods=["PUT"]),
        Route("/period", select_period, methods=["PUT"]),
    ],
)
