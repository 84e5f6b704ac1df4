import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from resume_mcp.core.config import LogLevel, Settings, get_settings
from resume_mcp.core.exceptions import DocumentError
from resume_mcp.services.document_loader import load_resume
from resume_mcp.services.generator import MANIFEST_FILENAME, StaticSiteGenerator
from resume_mcp.storage.local import LocalFileStorage

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Generate a static MCP site from a resume.")


def configure_logging(settings: Settings, level: LogLevel | None = None) -> None:
    if level is None:
        level = LogLevel.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    config_path: Optional[Path] = typer.Argument(None, help="Resume JSON document"),
    output_dir: Optional[Path] = typer.Argument(None, help="Directory to write the site into"),
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        "-l",
        case_sensitive=False,
        help="Override the configured log level",
    ),
) -> None:
    """Precompute the manifest, resources, tool results and indexes."""
    try:
        settings = get_settings()
    except ValidationError as e:
        typer.echo(f"Error: invalid settings:\n{e}", err=True)
        raise typer.Exit(code=1) from e
    configure_logging(settings, log_level)

    config_path = config_path or Path(settings.config_path)
    output_dir = output_dir or Path(settings.output_dir)
    logger.debug("Reading %s, writing to %s", config_path, output_dir)

    try:
        resume = load_resume(config_path)
    except DocumentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    storage = LocalFileStorage(str(output_dir))
    generator = StaticSiteGenerator(resume, storage, settings)
    asyncio.run(generator.generate())

    typer.echo("Static MCP site generated successfully!")
    typer.echo(f"Output directory: {output_dir}")
    typer.echo(f"MCP manifest available at: {output_dir / MANIFEST_FILENAME}")


if __name__ == "__main__":
    app()
