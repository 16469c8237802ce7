"""Bundle the university-registry CLI into a standalone executable."""

import click
import PyInstaller.__main__

ENTRY_POINT = "university_registry/main.py"


@click.command()
@click.option("--name", default="university-registry", show_default=True)
@click.option(
    "--onedir", is_flag=True, help="Build a folder instead of a single executable."
)
@click.option("--clean", is_flag=True, help="Clear the PyInstaller cache first.")
def main(name: str, onedir: bool, clean: bool) -> None:
    args = [ENTRY_POINT, "--name", name, "--onedir" if onedir else "--onefile"]
    if clean:
        args.append("--clean")
    click.echo(f"Building {name} from {ENTRY_POINT}")
    PyInstaller.__main__.run(args)


if __name__ == "__main__":
    main()
