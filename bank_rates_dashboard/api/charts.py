from spectree import Response as SpectreeResponse
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from bank_rates_dashboard import spec
from bank_rates_dashboard.schemas import ChartConfig, ErrorResponse
from bank_rates_dashboard.services import chart_service


@spec.validate(resp=SpectreeResponse(HTTP_200=ChartConfig, HTTP_404=ErrorResponse), tags=["Charts"])
async def rates_chart(_: Request) -> Response:
    chart = chart_service.current_chart()
    if chart is None:
        return JSONResponse({"errors": ["No data for this selection"]}, status_code=404)
    return Response(chart.model_dump_json(by_alias=True), media_type="application/json")


ChartMount = Mount(
    "/charts",
    routes=[
        Route("/rates", rates_chart),
    ],
)
