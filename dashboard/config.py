# dashboard/config.py

import os

DATABASE_URL = os.environ.get(
    "DATABASE_URL",
    os.environ.get("POSTGRES_URL", "sqlite:///db.sqlite"),  # file in project root
)

DEFAULT_SESSION_SECRET = "dev-secret-unsafe"
SESSION_SECRET = os.environ.get("SESSION_SECRET", DEFAULT_SESSION_SECRET)

# Invoice dates are stamped with "today" in this zone
TIMEZONE = os.environ.get("TIMEZONE", "UTC")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Path keys shared by the routes, the view cache and the redirects
DASHBOARD_PATH = "/dashboard"
INVOICES_PATH = "/dashboard/invoices"
CUSTOMERS_PATH = "/dashboard/customers"
LOGIN_PATH = "/login"
