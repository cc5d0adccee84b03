"""Command-line interface for the Record Mapper."""

import logging
import sys
import click
from pathlib import Path
from .record_mapper import RecordMapper
from .io.file_writer import DEFAULT_OUTPUT_FILE
from .types import ProcessingError


@click.command()
@click.version_option(version="1.0.0")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('mapping_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('output_file', required=False, default=DEFAULT_OUTPUT_FILE,
                type=click.Path(dir_okay=False, path_type=Path))
@click.option('--indent', default=2, show_default=True, help='JSON indentation of the output file')
@click.option('--workers', '-w', type=int, default=None,
              help='Map the records of a list input on this many threads')
@click.option('--profile', is_flag=True, help='Log timing and memory usage')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(input_file: Path, mapping_file: Path, output_file: Path, indent: int,
         workers: int, profile: bool, verbose: bool):
    """Transform INPUT_FILE with MAPPING_FILE and write OUTPUT_FILE (default: output.json)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO if profile else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s"
    )

    mapper = RecordMapper(
        enable_parallel_processing=workers is not None and workers > 1,
        max_workers=workers,
        enable_profiling=profile,
        indent=indent
    )

    try:
        with mapper:
            result = mapper.transform_files(input_file, mapping_file, output_file)
            if profile:
                summary = mapper.profiler.get_performance_summary()
    except ProcessingError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not result.success:
        click.echo("❌ Transformation failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    for warning in result.warnings:
        click.echo(f"⚠️  {warning}", err=True)

    click.echo(f"Transformation completed → {output_file}")

    if profile and summary["total_operations"]:
        click.echo(
            f"📊 {summary['total_records']} records in {summary['total_duration']:.3f}s, "
            f"peak memory {summary['peak_memory_mb']:.1f} MB"
        )


if __name__ == '__main__':
    main()
