# cli.py
import click
import logging
from object_store.config import create_store
from object_store.config.settings import get_settings
from object_store.loader import load_directory, render_tree

# Configure logging
logger = logging.getLogger(__name__)

@click.group()
def cli():
    """CLI commands for inspecting the in-memory object store"""
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

@cli.command()
def show_config():
    """Show current configuration"""
    settings = get_settings()

    click.echo("Current Configuration:")
    click.echo(f"  Root Folder Id: {settings.root_folder_id or '(allocated)'}")
    click.echo(f"  Root Folder Name: {settings.root_folder_name}")
    click.echo(f"  Seed Directory: {settings.seed_dir}")
    click.echo(f"  Max Seed File Bytes: {settings.max_seed_file_bytes}")
    click.echo(f"  Log Level: {settings.log_level}")

@cli.command()
@click.argument("directory",
                required=False,
                type=click.Path(exists=True, file_okay=False))
@click.option("--max-file-bytes",
              type=click.IntRange(min=0),
              default=None,
              help="Skip files larger than this many bytes")
def tree(directory, max_file_bytes):
    """Load DIRECTORY (or the configured seed directory) into a new store and print it"""
    store = create_store()
    if directory:
        load_directory(store, directory, max_file_bytes=max_file_bytes)
    click.echo(render_tree(store))
    logger.info(f"Store holds {len(store)} entries")

if __name__ == "__main__":
    cli()
