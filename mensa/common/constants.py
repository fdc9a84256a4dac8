"""Application constants."""

API_BASE_URL = "https://openmensa.org/api/v2"
CANTEENS_PATH = "/canteens"
MEALS_PATH_TEMPLATE = "/canteens/{canteen_id}/days/{date}/meals"
USER_AGENT = "mensa-client/0.1 (+https://openmensa.org)"
DATE_FORMAT = "%Y-%m-%d"
DISPLAY_NAME_SEPARATOR = ","
PRICE_CLASSES = ("students", "employees", "pupils", "others")
JSON_LOG_FIELDS = (
    "timestamp",
    "event",
    "status",
    "url",
    "canteen_id",
    "date",
    "duration_ms",
    "rows_out",
    "error_code",
    "message",
)
