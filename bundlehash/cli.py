from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from bundlehash.config import ALGORITHMS, DEFAULT_ALGORITHM
from bundlehash.errors import ConfigurationError
from bundlehash.hasher import Hasher
from bundlehash.plugin import hash_built_file
from bundlehash.settings import ConfigManager, configure_logging

app = typer.Typer(help="Rename built bundles after their content hash.")

_SOURCEMAP_MODES = {"none": False, "file": True, "inline": "inline"}


@app.callback()
def main(
    ctx: typer.Context,
    project_root: Path = typer.Option(
        Path("."),
        "--project-root",
        "-C",
        help="Directory holding bundlehash.json and .env.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to BUNDLEHASH_LOG_LEVEL).",
    ),
) -> None:
    config = ConfigManager().load_config(project_root)
    configure_logging(log_level or config["BUNDLEHASH_LOG_LEVEL"])
    ctx.obj = {"project_root": project_root}


@app.command("hash")
def hash_command(
    ctx: typer.Context,
    bundle: Path = typer.Argument(..., exists=True, dir_okay=False, help="Built bundle to hash."),
    dest: Optional[str] = typer.Option(
        None,
        "--dest",
        "-d",
        help="Destination template containing [hash] or [hash:N].",
    ),
    algorithm: Optional[str] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help=f"Digest algorithm: {', '.join(ALGORITHMS)}.",
    ),
    replace: Optional[bool] = typer.Option(
        None,
        "--replace/--no-replace",
        help="Delete the unhashed bundle after writing the hashed copy.",
    ),
    manifest: Optional[str] = typer.Option(
        None,
        "--manifest",
        "-m",
        help="Write a JSON manifest mapping the bundle to its hashed name.",
    ),
    manifest_key: Optional[str] = typer.Option(
        None,
        "--manifest-key",
        help="Manifest key to use instead of the bundle path.",
    ),
    source_map: Optional[Path] = typer.Option(
        None,
        "--map",
        exists=True,
        dir_okay=False,
        help="Source map JSON produced alongside the bundle.",
    ),
    sourcemap: str = typer.Option(
        "none",
        "--sourcemap",
        help="How to emit the source map: none, file, inline.",
    ),
) -> None:
    if sourcemap not in _SOURCEMAP_MODES:
        raise typer.BadParameter(
            f"Unknown source map mode: {sourcemap}", param_hint="--sourcemap",
        )

    options = ConfigManager().load_options(
        ctx.obj["project_root"],
        dest=dest,
        algorithm=algorithm,
        replace=replace,
        manifest=manifest,
        manifest_key=manifest_key,
    )
    try:
        result = hash_built_file(
            bundle,
            map_path=source_map,
            sourcemap=_SOURCEMAP_MODES[sourcemap],
            **options,
        )
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    typer.echo(result.file_name)


@app.command()
def digest(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to hash."),
    algorithm: str = typer.Option(
        DEFAULT_ALGORITHM,
        "--algorithm",
        "-a",
        help=f"Digest algorithm: {', '.join(ALGORITHMS)}.",
    ),
) -> None:
    if algorithm not in ALGORITHMS:
        raise typer.BadParameter(
            f"Unsupported algorithm: {algorithm}", param_hint="--algorithm",
        )
    typer.echo(Hasher.hash_file(path, algorithm))


@app.command()
def init(ctx: typer.Context) -> None:
    path = ConfigManager().generate_env_template(ctx.obj["project_root"])
    typer.echo(f"Wrote config template to {path.resolve()}")


if __name__ == "__main__":  # pragma: no cover
    app()
