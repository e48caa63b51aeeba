#!/usr/bin/env python3
"""
Command-line interface for CV → LaTeX conversion.

Commands:
    convert   - Convert a CV text/markdown file to a .tex document
    parse     - Print the parsed CV structure as YAML
    templates - List the available visual templates
    check     - Report likely parse problems for a CV file

Usage:
    python scripts/convert_cv.py convert cv.md
    python scripts/convert_cv.py convert cv.md out/cv.tex --template modern
    python scripts/convert_cv.py convert cv.md --order summary,experience,skills
    python scripts/convert_cv.py parse cv.md
    python scripts/convert_cv.py check cv.md
"""

from pathlib import Path
from typing import List, Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from cvtex.contexts.intake.cv_data_structure import SECTION_LABELS, ParsedCV, SectionType
from cvtex.contexts.intake.diagnostics import analyze_parse_quality
from cvtex.contexts.templating.converter import convert_file, list_templates, parse
from cvtex.contexts.templating.defaults import DEFAULT_TEMPLATE_ID
from cvtex.utils.text_processing import truncate_display

app = typer.Typer(
    add_completion=False,
    help="Convert free-form CV text to LaTeX",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def parse_section_order(order: Optional[str]) -> Optional[List[str]]:
    """
    Split a comma-separated section order.

    Returns None for an empty value so the template's default order applies.
    """
    if not order:
        return None
    tokens = [token.strip().lower() for token in order.split(",")]
    return [token for token in tokens if token]


def _read_cv(input_file: Path) -> ParsedCV:
    return parse(input_file.read_text(encoding="utf-8"))


@app.command("convert")
def convert_command(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="CV text or markdown file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output_file: Annotated[
        Optional[Path],
        typer.Argument(
            help="Output .tex file (defaults to the input path with .tex suffix)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Visual template id (see 'templates')"),
    ] = DEFAULT_TEMPLATE_ID,
    order: Annotated[
        Optional[str],
        typer.Option(
            "--order",
            "-o",
            help="Comma-separated section order, e.g. summary,experience,skills",
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the session log (defaults under LOGS_PATH)"),
    ] = None,
):
    """Convert a CV file to a LaTeX document."""
    result = convert_file(
        input_path=input_file,
        output_path=output_file,
        template_id=template,
        section_order=parse_section_order(order),
        log_dir=log_dir,
    )

    if not result.success:
        typer.secho(f"✗ Conversion failed: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ {result.output_path}", fg=typer.colors.GREEN)
    if result.warnings:
        typer.secho(
            f"  {len(result.warnings)} warning(s); run 'check' for details",
            fg=typer.colors.YELLOW,
        )


@app.command("parse")
def parse_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="CV text or markdown file", exists=True, dir_okay=False),
    ],
):
    """Print the parsed CV structure as YAML."""
    cv = _read_cv(input_file)
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(cv.to_dict())))


@app.command("templates")
def templates_command():
    """List the available visual templates."""
    for template in list_templates():
        marker = " (default)" if template["id"] == DEFAULT_TEMPLATE_ID else ""
        typer.secho(f"{template['id']}{marker}", bold=True)
        typer.echo(f"  {template['name']}: {template['description']}")


@app.command("check")
def check_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="CV text or markdown file", exists=True, dir_okay=False),
    ],
):
    """Report what was recognized in a CV file and any likely parse problems."""
    cv = _read_cv(input_file)

    typer.secho(f"\n{cv.contact.name or '(no name)'}", fg=typer.colors.BLUE, bold=True)
    for section_type in SectionType:
        if section_type in (SectionType.CONTACT, SectionType.GENERIC):
            continue
        if cv.has_content(section_type):
            value = getattr(cv, section_type.value)
            count = 1 if isinstance(value, str) else len(value)
            typer.echo(f"  {SECTION_LABELS[section_type]}: {count}")
    for section in cv.generic_sections:
        typer.echo(f"  {truncate_display(section.title, 40)}: {len(section.content)}")

    warnings = analyze_parse_quality(cv)
    if not warnings:
        typer.secho("\n✓ No issues found", fg=typer.colors.GREEN)
        return

    typer.secho(f"\n{len(warnings)} warning(s):", fg=typer.colors.YELLOW)
    for warning in warnings:
        typer.echo(f"  • {warning}")


if __name__ == "__main__":
    app()
