"""IFC GUID CLI.

Usage:
    python -m ifc_guid convert <value> --from <guid|hex|ifc|bin|dec>
    python -m ifc_guid new

Output is always JSON on stdout; failures set "ok": false and exit 1.
"""
from __future__ import annotations

import json

import typer

from ifc_guid.errors import ConversionError
from ifc_guid.guid import Guid128, IfcGuid
from ifc_guid.ifc_id import generate_ifc_id

app = typer.Typer(
    name="ifc_guid",
    help="Convert identifiers between GUID, hex, binary, decimal and IFC GlobalId.",
    no_args_is_help=True,
)

FORMATS = ("guid", "hex", "ifc", "bin", "dec")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(error: ConversionError) -> None:
    _output({
        "ok": False,
        "error": error.message,
        "kind": error.kind.value,
        "source": error.source,
    })
    raise typer.Exit(1)


def _render(value: Guid128, separator: str = "-") -> dict:
    return {
        "guid": value.to_guid(separator),
        "hex": value.to_hex(),
        "ifc": value.to_ifc(),
        "bin": value.to_bin(),
        "dec": value.to_dec(),
    }


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def convert(
    value: str = typer.Argument(..., help="Identifier to convert"),
    source: str = typer.Option("guid", "--from", "-f", help="Input format: guid, hex, ifc, bin, dec"),
    separator: str = typer.Option("-", "--separator", "-s", help="GUID group separator"),
):
    """Convert one identifier into every representation."""
    if source not in FORMATS:
        _output({"ok": False, "error": f"Unknown format: {source}. Use: {', '.join(FORMATS)}"})
        raise typer.Exit(1)

    codec = IfcGuid()
    loader = getattr(codec, f"from_{source}")
    result = loader(value)
    if isinstance(result, ConversionError):
        _fail(result)

    _output({"ok": True, "from": source, **_render(codec.value, separator)})


@app.command()
def new(separator: str = typer.Option("-", "--separator", "-s", help="GUID group separator")):
    """Generate a fresh IFC GlobalId."""
    value = Guid128.from_ifc(generate_ifc_id())
    _output({"ok": True, **_render(value, separator)})


@app.command()
def version() -> None:
    """Show version."""
    from ifc_guid import __version__

    typer.echo(f"ifc-guid v{__version__}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
