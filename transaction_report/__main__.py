"""Allow ``python -m transaction_report``."""

from .cli import app

app(prog_name="transaction-report")
