"""Integration tests for file conversion and the command-line interface."""

import pytest
from typer.testing import CliRunner

import cvtex
from cvtex.contexts.templating.converter import convert_file, list_templates
from scripts.convert_cv import app, parse_section_order

runner = CliRunner()

MINIMAL_CV = (
    "John Doe\njohn@email.com\n\n## Experience\n"
    "**Developer** | Acme Inc. | Jan 2020 - Dec 2022\n- Built features\n"
)


@pytest.fixture
def cv_file(tmp_path, sample_cv_text):
    path = tmp_path / "jane.md"
    path.write_text(sample_cv_text, encoding="utf-8")
    return path


# =============================================================================
# convert_file
# =============================================================================


@pytest.mark.integration
def test_convert_file_default_output_path(cv_file, tmp_path):
    log_dir = tmp_path / "logs"
    result = convert_file(cv_file, log_dir=log_dir, console=False)

    assert result.success, result.error
    assert result.output_path == tmp_path / "jane.tex"
    assert result.output_path.read_text(encoding="utf-8").startswith("\\documentclass")
    assert result.warnings == []
    assert result.template_id == "professional"
    assert (log_dir / "template.log").is_file()


@pytest.mark.integration
def test_convert_file_template_and_order(cv_file, tmp_path):
    output = tmp_path / "out" / "cv.tex"
    result = convert_file(
        cv_file,
        output,
        template_id="academic",
        section_order=["education"],
        log_dir=tmp_path / "logs",
        console=False,
    )

    latex = output.read_text(encoding="utf-8")
    assert result.success
    assert "\\section{Education}" in latex
    assert "\\section{Technical Skills}" not in latex


@pytest.mark.integration
def test_convert_file_reports_parse_warnings(tmp_path):
    path = tmp_path / "john.md"
    path.write_text(MINIMAL_CV, encoding="utf-8")

    result = convert_file(path, log_dir=tmp_path / "logs", console=False)

    assert result.success
    assert result.warnings == ["No phone number found in the contact block"]


@pytest.mark.integration
def test_convert_file_missing_input(tmp_path):
    result = convert_file(tmp_path / "missing.md", log_dir=tmp_path / "logs", console=False)

    assert not result.success
    assert "missing.md" in result.error
    assert result.output_path is None
    assert result.time_s >= 0


@pytest.mark.integration
def test_list_templates_default_first():
    assert [template["id"] for template in list_templates()] == [
        "professional",
        "modern",
        "academic",
    ]


@pytest.mark.integration
def test_package_level_api():
    cv = cvtex.parse(MINIMAL_CV)
    assert cv.contact.name == "John Doe"
    assert "\\section{Professional Experience}" in cvtex.generate(cv, "modern")
    assert cvtex.__version__


# =============================================================================
# CLI
# =============================================================================


@pytest.mark.unit
def test_parse_section_order():
    assert parse_section_order(" Skills, ,experience ") == ["skills", "experience"]
    assert parse_section_order("") is None
    assert parse_section_order(None) is None


@pytest.mark.integration
def test_cli_without_command_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "convert" in result.output


@pytest.mark.integration
def test_cli_convert(cv_file, tmp_path):
    output = tmp_path / "cv.tex"
    result = runner.invoke(
        app,
        ["convert", str(cv_file), str(output), "-t", "modern", "-o", "skills,experience",
         "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 0, result.output
    assert "✓" in result.output
    latex = output.read_text(encoding="utf-8")
    assert latex.index("\\section{Technical Skills}") < latex.index("\\section{Professional Experience}")


@pytest.mark.integration
def test_cli_convert_unwritable_output_fails(cv_file, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = runner.invoke(
        app, ["convert", str(cv_file), str(blocker / "cv.tex"), "--log-dir", str(tmp_path / "logs")]
    )

    assert result.exit_code == 1


@pytest.mark.integration
def test_cli_parse(cv_file):
    result = runner.invoke(app, ["parse", str(cv_file)])
    assert result.exit_code == 0
    assert "name: Jane Smith" in result.output
    assert "company: TechCorp Inc." in result.output


@pytest.mark.integration
def test_cli_templates():
    result = runner.invoke(app, ["templates"])
    assert result.exit_code == 0
    assert "professional (default)" in result.output
    assert "academic" in result.output


@pytest.mark.integration
def test_cli_check_clean(cv_file):
    result = runner.invoke(app, ["check", str(cv_file)])
    assert result.exit_code == 0
    assert "Jane Smith" in result.output
    assert "Experience: 3" in result.output
    assert "No issues found" in result.output


@pytest.mark.integration
def test_cli_check_reports_warnings(tmp_path):
    path = tmp_path / "thin.md"
    path.write_text("Nobody\n\n## Hobbies\n", encoding="utf-8")

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 0
    assert "warning(s)" in result.output
    assert "No email address found in the contact block" in result.output
