from typing import Annotated, Any, Literal

from pydantic import BeforeValidator

LogLevel = Annotated[
    Literal[
        "TRACE",
        "DEBUG",
        "INFO",
        "SUCCESS",
        "WARNING",
        "ERROR",
        "CRITICAL",
    ],
    BeforeValidator(lambda a: str(a).upper()),
]

JsonSerializable = (
    dict[str, Any] | list[Any] | str | int | float | bool | None
)
