"""
Command-line interface for PDF Slicer.
"""

import os
import sys

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pdf_slicer import __version__
from pdf_slicer.document import PDFDocument
from pdf_slicer.editor import delete_pages, extract_pages_with_result
from pdf_slicer.exceptions import PDFSlicerException
from pdf_slicer.observer import RecordingObserver
from pdf_slicer.ranges import format_page_indices
from pdf_slicer.selection import SelectionSet
from pdf_slicer.settings import (
    DEFAULT_DPI,
    DEFAULT_QUALITY,
    DEFAULT_SPLIT_EVERY,
    MAX_DPI,
    MIN_DPI,
    SlicerSettings,
    preset_names,
    resolve_preset,
)
from pdf_slicer.utils import format_file_size
from pdf_slicer.workspace import Workspace

console = Console()

CLI_ERRORS = (PDFSlicerException, OSError, ValueError)


def _fail(error) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {error}")
    sys.exit(1)


def _load(input_pdf, password):
    document = PDFDocument.load(input_pdf, password=password)

    info_table = Table(title="PDF Information", show_header=False)
    info_table.add_column("Property", style="cyan")
    info_table.add_column("Value", style="green")
    info_table.add_row("File", os.path.basename(input_pdf))
    info_table.add_row("Pages", str(document.page_count))
    info_table.add_row("Size", format_file_size(document.file_size))
    console.print(info_table)
    return document


def _selection(document, pages, invert):
    selection = SelectionSet()
    result = selection.union_range(pages, document.page_count)
    if invert:
        selection.invert(document.page_count)
    if result.dropped:
        console.print(f"[yellow]Ignored: {', '.join(result.dropped)}[/yellow]")
    return selection


def _print_log(lines):
    console.print("\n[bold]Activity:[/bold]")
    for line in lines:
        console.print(f"  • {line}")
    console.print()


password_option = click.option(
    '--password',
    default=None,
    help='Password for encrypted input files',
    type=str
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    PDF Slicer - select, delete, extract, merge, split and compress PDF pages.
    """


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
@password_option
def show_info(input_pdf, password):
    """
    Display information about a PDF file.

    Example:

        pdf-slicer info input.pdf
    """
    try:
        document = PDFDocument.load(input_pdf, password=password)
        info = document.info()

        table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", os.path.abspath(input_pdf))
        table.add_row("File Size", format_file_size(info.file_size))
        table.add_row("Number of Pages", str(info.num_pages))
        if info.title:
            table.add_row("Title", info.title)
        if info.author:
            table.add_row("Author", info.author)
        if info.page_sizes:
            width, height = info.page_sizes[0]
            table.add_row("First Page", f"{width:.0f} x {height:.0f} pt")

        console.print()
        console.print(table)
        console.print()
    except CLI_ERRORS as e:
        _fail(e)


@cli.command(name="select")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--pages', '-p', required=True, help="Pages to select (e.g., '1-3,5,10-12')", type=str)
@click.option('--invert', is_flag=True, help='Select every page not named by --pages')
@password_option
def select(input_pdf, pages, invert, password):
    """
    Show which pages a range specification selects.

    Example:

        pdf-slicer select input.pdf -p '1-3,5,10-12'
    """
    try:
        document = PDFDocument.load(input_pdf, password=password)
        selection = _selection(document, pages, invert)
        console.print(f"Selected {len(selection)} of {document.page_count} page(s): "
                      f"[green]{format_page_indices(selection) or '-'}[/green]")
    except CLI_ERRORS as e:
        _fail(e)


@cli.command(name="delete")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--pages', '-p', required=True, help="Pages to delete (e.g., '2,4-6')", type=str)
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@click.option('--invert', is_flag=True, help='Delete every page not named by --pages')
@password_option
def delete(input_pdf, pages, output, invert, password):
    """
    Delete pages and save the remaining document.

    Example:

        pdf-slicer delete input.pdf -p '2,4-6' -o trimmed.pdf
    """
    try:
        document = _load(input_pdf, password)
        selection = _selection(document, pages, invert)
        result = delete_pages(document, selection)
        document.save(output)
        console.print(f"\n[bold green]✓ Deleted {result.applied_count} page(s), "
                      f"{document.page_count} remaining[/bold green]")
        console.print(f"[dim]Output: {os.path.abspath(output)}[/dim]\n")
    except CLI_ERRORS as e:
        _fail(e)


@cli.command(name="extract")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option('--pages', '-p', required=True, help="Pages to extract (e.g., '1,3,5,7-10')", type=str)
@click.option('--output', '-o', required=True, help='Output PDF path', type=click.Path())
@password_option
def extract(input_pdf, pages, output, password):
    """
    Extract pages, in reading order, into a new PDF.

    Examples:

        pdf-slicer extract input.pdf -p '1,3,5' -o selected.pdf

        pdf-slicer extract input.pdf --pages '10-1' --output first_ten.pdf
    """
    try:
        document = _load(input_pdf, password)
        selection = _selection(document, pages, False)
        if not selection:
            _fail("No valid pages selected")
        extracted, result = extract_pages_with_result(document, selection)
        extracted.save(output)
        console.print(f"\n[bold green]✓ Extracted {result.applied_count} page(s)[/bold green]")
        console.print(f"[dim]Output: {os.path.abspath(output)}[/dim]\n")
    except CLI_ERRORS as e:
        _fail(e)


@cli.command(name="merge")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--output-dir', '-o', default='./output', help='Output directory', type=click.Path())
@password_option
def merge(input_pdfs, output_dir, password):
    """
    Merge PDFs, in the order given, into Merged.pdf.

    Example:

        pdf-slicer merge a.pdf b.pdf c.pdf -o out
    """
    try:
        observer = RecordingObserver()
        workspace = Workspace(SlicerSettings(export_folder=output_dir, password=password), observer=observer)
        workspace.add_files(input_pdfs)
        result = workspace.merge_all()
        _print_log(observer.events)
        if result is None or not result.success:
            sys.exit(1)
    except CLI_ERRORS as e:
        _fail(e)


@cli.command(name="split")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--every', '-n', default=DEFAULT_SPLIT_EVERY, help='Pages per part (>= 2)', type=int)
@click.option('--output-dir', '-o', default='./output', help='Output directory', type=click.Path())
@password_option
def split(input_pdfs, every, output_dir, password):
    """
    Split each PDF into parts of N pages named <name>_part_NN.pdf.

    Example:

        pdf-slicer split input.pdf -n 10 -o parts
    """
    if every < 2:
        _fail(f"Part size must be >= 2, got {every}")
    try:
        observer = RecordingObserver()
        workspace = Workspace(SlicerSettings(export_folder=output_dir, password=password), observer=observer)
        workspace.add_files(input_pdfs)
        results = workspace.split_all(every)
        _print_log(observer.events)
        if not results or not all(result.success for result in results):
            sys.exit(1)
    except CLI_ERRORS as e:
        _fail(e)


@cli.command(name="compress")
@click.argument('input_pdfs', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--dpi', default=None, help=f'Raster resolution (default {DEFAULT_DPI:.0f})', type=float)
@click.option('--quality', '-q', default=None, help=f'JPEG quality 0-1 (default {DEFAULT_QUALITY})', type=float)
@click.option('--preset', type=click.Choice(preset_names()), default=None, help='Named dpi/quality pair')
@click.option('--output-dir', '-o', default='./output', help='Output directory', type=click.Path())
@password_option
def compress(input_pdfs, dpi, quality, preset, output_dir, password):
    """
    Rasterize every page to JPEG and save <name>_compressed.pdf.

    Examples:

        pdf-slicer compress input.pdf --dpi 110 -q 0.6

        pdf-slicer compress *.pdf --preset high -o small
    """
    try:
        settings = SlicerSettings(export_folder=output_dir, password=password)
        if preset:
            chosen = resolve_preset(preset)
            settings.dpi, settings.quality = chosen.dpi, chosen.quality
        if dpi is not None:
            settings.dpi = dpi
        if quality is not None:
            settings.quality = quality
        if not settings.raster_params().valid:
            _fail(f"DPI must be > 0, got {settings.dpi}")
        if not MIN_DPI <= settings.dpi <= MAX_DPI:
            console.print(f"[yellow]DPI {settings.dpi:.0f} is outside the usual "
                          f"{MIN_DPI:.0f}-{MAX_DPI:.0f} range[/yellow]")

        observer = RecordingObserver()
        workspace = Workspace(settings, observer=observer)
        workspace.add_files(input_pdfs)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console
        ) as progress:
            task = progress.add_task(f"Compressing at {settings.dpi:.0f} dpi...", total=None)
            results = workspace.compress_all()
            progress.update(task, completed=True)

        _print_log(observer.events)
        if not results or not all(result.success for result in results):
            sys.exit(1)
    except CLI_ERRORS as e:
        _fail(e)


if __name__ == '__main__':
    cli()
