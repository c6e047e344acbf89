from starlette.config import Config
from starlette.datastructures import URL

config = Config(".env")

DEBUG = config("DEBUG", cast=bool, default=False)
DISABLE_CORS = config("DISABLE_CORS", cast=bool, default=False)
RATES_API_URL = config("RATES_API_URL", cast=URL, default="http://localhost:8080")
ELASTICSEARCH_URL = config("ELASTICSEARCH_URL", cast=URL, default="http://localhost:9200")
SELECTION_INDEX = config("SELECTION_INDEX", default="rates-dashboard-selection")
# "random" draws a new colour per series on every build, "bank" derives it from the bank id
SERIES_COLOR_MODE = config("SERIES_COLOR_MODE", default="random")
SORT_OBSERVATIONS_BY_DATE = config("SORT_OBSERVATIONS_BY_DATE", cast=bool, default=True)
CHART_TITLE = config("CHART_TITLE", default="Lanka Bank Buying Rates")
