import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from unreal_index.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
    engine_path: str | None = None,
    custom_path: str | None = None,
) -> None:
    """Start the MCP server."""
    from unreal_index.core.config import create_index
    from unreal_index.mcp.server import create_mcp_server

    index = create_index(engine_path=engine_path, custom_path=custom_path)
    server = create_mcp_server(index)
    # stdout carries the protocol on stdio; announce on stderr.
    Console(stderr=True).print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
