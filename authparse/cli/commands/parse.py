from typing import Annotated

import typer
from starlette.datastructures import Headers

from authparse.cli.rich import get_console
from authparse.errors import InvalidHeaderError
from authparse.parser import AuthorizationParser
from authparse.request import AuthorizationRequest


def validate_headers(headers: list[str] | None) -> list[str] | None:
    for header in headers or []:
        name, separator, _ = header.partition(":")
        if not separator or not name.strip():
            raise typer.BadParameter(f"'{header}' must match name:value")
    return headers


def build_request(
    authorization: str, headers: list[str] | None, method: str, path: str
) -> AuthorizationRequest:
    raw = [(b"authorization", authorization.encode("latin1"))]
    for header in headers or []:
        name, _, value = header.partition(":")
        raw.append((name.strip().lower().encode("latin1"), value.strip().encode("latin1")))
    return AuthorizationRequest(method=method.upper(), target=path, headers=Headers(raw=raw))


def register(app: typer.Typer) -> None:
    @app.command("parse")
    def parse_authorization(
        ctx: typer.Context,
        authorization: Annotated[
            str,
            typer.Argument(help="Raw value of the Authorization header"),
        ],
        headers: Annotated[
            list[str] | None,
            typer.Option(
                "--header",
                "-H",
                help="Additional request header as name:value",
                callback=validate_headers,
            ),
        ] = None,
        method: Annotated[
            str,
            typer.Option("--method", "-X", help="Request method"),
        ] = "GET",
        path: Annotated[
            str,
            typer.Option("--path", "-p", help="Request target"),
        ] = "/",
    ):
        """Parse an Authorization header and print the result."""
        parser = AuthorizationParser.from_settings(ctx.obj)
        request = build_request(authorization, headers, method, path)
        try:
            result, username = parser.parse(request)
        except InvalidHeaderError as e:
            get_console(stderr=True).print(f"[bold red]{e.code}:[/bold red] {e.message}")
            raise typer.Exit(1)

        get_console().print_json(
            data={
                "authorization": result.model_dump(mode="json", exclude_unset=True),
                "username": username,
            }
        )
