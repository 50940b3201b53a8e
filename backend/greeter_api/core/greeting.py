"""Greeting — builds greeting messages from query values."""

from greeter_api.core.errors import MissingNameError

ROOT_GREETING = "Hello, CI/CD!"


def greet(names: list[str]) -> str:
    """Greet the given name values verbatim.

    A single empty value or no value at all is missing. Repeated values
    are joined with commas ("a", "b" -> "Hello, a,b!").
    """
    if not names or names == [""]:
        raise MissingNameError()
    return f"Hello, {','.join(names)}!"
