"""Command-line interface for filedesk.

Commands:
    - normalize: Show the storage prefix a folder name maps to
    - list: List folders and files under a prefix
    - upload-url: Issue a presigned upload URL
    - delete: Delete an object by public URL or key

Bucket, public URL and credentials come from FILEDESK_STORAGE_* environment
variables; the options below override them.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .core.config import StorageSettings
from .objectstorage import create_upload_authorization, delete_object, list_files
from .paths import normalize_path, to_storage_prefix
from .schemas import UploadRequest, parse_request

app = typer.Typer(
    name="filedesk",
    help="Object-storage file manager tools.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"filedesk {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Filedesk: folder normalization, listing, uploads and deletion for
    S3-compatible storage.
    """
    pass


BucketOption = Annotated[
    Optional[str],
    typer.Option("--bucket", help="Bucket name (overrides FILEDESK_STORAGE_BUCKET_NAME)"),
]
EndpointOption = Annotated[
    Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
]
PublicUrlOption = Annotated[
    Optional[str], typer.Option("--public-url", help="Public base URL for file links")
]


def _storage_settings(
    bucket: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    public_url: Optional[str] = None,
) -> StorageSettings:
    """Load storage settings from the environment and apply CLI overrides."""
    overrides = {
        name: value
        for name, value in (
            ("bucket_name", bucket),
            ("endpoint_url", endpoint_url),
            ("public_url", public_url),
        )
        if value is not None
    }
    return StorageSettings(**overrides)


def _human_size(size: int) -> str:
    if size >= 1024**3:
        return f"{size / (1024**3):.2f} GB"
    elif size >= 1024**2:
        return f"{size / (1024**2):.2f} MB"
    elif size >= 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size} bytes"


@app.command("normalize")
def normalize_cmd(
    path: Annotated[str, typer.Argument(help="Folder path to normalize")],
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Keep leading, trailing and repeated slashes"),
    ] = False,
) -> None:
    """
    Show the storage prefix a folder path maps to.

    Example:
        filedesk normalize "Clientes/João Silva"
    """
    typer.echo(normalize_path(path) if raw else to_storage_prefix(path))


@app.command("list")
def list_cmd(
    path: Annotated[str, typer.Argument(help="Prefix to list")] = "",
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="List every key below the prefix")
    ] = False,
    bucket: BucketOption = None,
    endpoint_url: EndpointOption = None,
    public_url: PublicUrlOption = None,
) -> None:
    """
    List folders and files under a prefix.

    Examples:
        filedesk list clients/
        filedesk list clients/acme/ --recursive
    """
    try:
        storage = _storage_settings(bucket, endpoint_url, public_url)
        listing = list_files(path, recursive=recursive, storage=storage)

        if not listing.folders and not listing.files:
            typer.echo("No folders or files found.")
            return

        for folder in listing.folders:
            typer.echo(f"  {folder.name}/")
        for file in listing.files:
            typer.echo(f"  {file.name}  ({_human_size(file.size)})  {file.public_url}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("upload-url")
def upload_url_cmd(
    filename: Annotated[str, typer.Argument(help="Original file name")],
    content_type: Annotated[
        str, typer.Option("--content-type", help="MIME type of the upload")
    ] = "application/octet-stream",
    folder: Annotated[
        Optional[str], typer.Option("--folder", help="Folder path (normalized)")
    ] = None,
    bucket: BucketOption = None,
    endpoint_url: EndpointOption = None,
    public_url: PublicUrlOption = None,
) -> None:
    """
    Issue a presigned upload URL for a file.

    Example:
        filedesk upload-url "Proposta Final.pdf" --content-type application/pdf \
            --folder "Clientes/João Silva"
    """
    try:
        storage = _storage_settings(bucket, endpoint_url, public_url)
        request = parse_request(
            UploadRequest, filename=filename, content_type=content_type, folder=folder
        )
        authorization = create_upload_authorization(request, storage=storage)

        typer.echo(f"Key: {authorization.key}")
        typer.echo(f"Public URL: {authorization.public_url}")
        typer.echo(f"Expires in: {authorization.expires_in}s")
        typer.echo(f"Upload URL: {authorization.url}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("delete")
def delete_cmd(
    url_or_key: Annotated[str, typer.Argument(help="Public URL or object key")],
    bucket: BucketOption = None,
    endpoint_url: EndpointOption = None,
    public_url: PublicUrlOption = None,
) -> None:
    """
    Delete an object by public URL or key.

    Example:
        filedesk delete https://files.example.com/clients/acme/1700000000000-logo.png
    """
    try:
        storage = _storage_settings(bucket, endpoint_url, public_url)
        key = delete_object(url=url_or_key, storage=storage)
        typer.echo(f"✓ Deleted: {key}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
