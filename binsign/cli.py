"""binsign CLI application with Typer."""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from binsign import __version__
from binsign.bootstrap import bootstrap_application
from binsign.config import (
    MAX_COMPRESSION_LEVEL,
    MIN_COMPRESSION_LEVEL,
    configure_logging,
    get_settings,
    set_settings,
)
from binsign.errors import BinsignError, VerificationError

app = typer.Typer(
    name="binsign",
    help="Sign files and bundle the signature with a compressed copy of the content",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"binsign version {__version__}")
        raise typer.Exit()


def format_elapsed(seconds: float) -> str:
    """Render an elapsed duration as ``Done in Xm Ys (exactly Nms)``."""
    millis = int(seconds * 1000)
    whole = int(seconds)
    return f"Done in {whole // 60}m {whole % 60}s (exactly {millis}ms)"


@contextmanager
def report_errors() -> Iterator[None]:
    """Translate binsign errors into a tagged message and exit code."""
    try:
        yield
    except VerificationError as exc:
        typer.secho(f"Error [{exc.category}]: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc
    except BinsignError as exc:
        typer.secho(f"Error [{exc.category}]: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log each pipeline step"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """binsign - sign, compress and verify files."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.secho(f"Error [config]: Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    if verbose:
        settings.verbose = True
    set_settings(settings)
    configure_logging(settings)


@app.command("sign")
def sign(
    key_path: Annotated[
        Path,
        typer.Argument(help="Private key (PKCS#8 DER) used for signing"),
    ],
    file_path: Annotated[
        Path,
        typer.Argument(help="File to sign"),
    ],
    output_file_path: Annotated[
        Path | None,
        typer.Argument(help="Where to save the bundle (defaults to <file>.sig)"),
    ] = None,
    compression_level: Annotated[
        int | None,
        typer.Option(
            "--compression-level",
            "-c",
            min=MIN_COMPRESSION_LEVEL,
            max=MAX_COMPRESSION_LEVEL,
            help="zstd compression level (defaults to the configured level, 22)",
        ),
    ] = None,
) -> None:
    """Sign the given file."""
    start = time.perf_counter()
    container = bootstrap_application()
    level = (
        compression_level
        if compression_level is not None
        else container.settings.compression_level
    )

    with report_errors():
        result = container.sign_service.sign_file(
            file_path,
            key_path,
            output_file_path,
            compression_level=level,
        )

    typer.secho(
        f"Signed {file_path} ({result.original_size} bytes -> {result.bundle_size} bytes) "
        f"to {result.output_path}",
        fg=typer.colors.GREEN,
    )
    typer.echo(format_elapsed(time.perf_counter() - start))


@app.command("verify")
def verify(
    key_path: Annotated[
        Path,
        typer.Argument(help="Public key (SubjectPublicKeyInfo DER) used for verifying"),
    ],
    file_path: Annotated[
        Path,
        typer.Argument(help="Bundle to verify"),
    ],
    output_file_path: Annotated[
        Path | None,
        typer.Argument(help="Where to save the decoded file (defaults to <bundle>.ver)"),
    ] = None,
) -> None:
    """Verify that the given bundle is correctly signed and decode it."""
    start = time.perf_counter()
    container = bootstrap_application()

    with report_errors():
        result = container.verify_service.verify_file(file_path, key_path, output_file_path)

    typer.secho(
        f"Verified {file_path}; wrote {result.original_size} bytes to {result.output_path}",
        fg=typer.colors.GREEN,
    )
    typer.echo(format_elapsed(time.perf_counter() - start))


@app.command("generate")
def generate(
    private_key_path: Annotated[
        Path,
        typer.Argument(help="Where to save the private key"),
    ],
    public_key_path: Annotated[
        Path,
        typer.Argument(help="Where to save the public key"),
    ],
) -> None:
    """Generate a new keypair."""
    start = time.perf_counter()
    container = bootstrap_application()

    with report_errors():
        container.key_store.generate_keypair(private_key_path, public_key_path)

    typer.secho(
        f"Wrote private key to {private_key_path} and public key to {public_key_path}",
        fg=typer.colors.GREEN,
    )
    typer.echo(format_elapsed(time.perf_counter() - start))


if __name__ == "__main__":
    app()
