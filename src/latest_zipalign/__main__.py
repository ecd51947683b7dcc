"""Allow running as ``python -m latest_zipalign``."""

from latest_zipalign.cli.main import app

app(prog_name="latest-zipalign")
