"""Allow `python -m greeter_api` to start the server."""

from greeter_api.main import run

run()
