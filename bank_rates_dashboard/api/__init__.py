from starlette.routing import Mount

from .charts import ChartMount
from .dashboard import DashboardMount
from .selection import SelectionMount

ApiMount = Mount(
    "/api",
    routes=[
        ChartMount,
        SelectionMount,
        DashboardMount,
    ],
)
