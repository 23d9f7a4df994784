from typer.testing import CliRunner

import app as cli
from report_formatter.generation import GeneratedReport

runner = CliRunner()


def test_format_writes_pdf(tmp_path, sample_text):
    source = tmp_path / "report.txt"
    source.write_text(sample_text, encoding="utf-8")
    output = tmp_path / "report.pdf"

    result = runner.invoke(cli.app, ["format", str(source), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "5 section page(s)" in result.output
    assert output.read_bytes().startswith(b"%PDF")


def test_format_reads_stdin_and_writes_docx(tmp_path, sample_text):
    output = tmp_path / "report.docx"
    result = runner.invoke(cli.app, ["format", "-", "-o", str(output)], input=sample_text)
    assert result.exit_code == 0, result.output
    assert output.exists()


def test_format_rejects_empty_text(tmp_path):
    source = tmp_path / "empty.txt"
    source.write_text("  \n", encoding="utf-8")
    output = tmp_path / "report.pdf"

    result = runner.invoke(cli.app, ["format", str(source), "-o", str(output)])

    assert result.exit_code == 2
    assert "No input text provided" in result.output
    assert not output.exists()


def test_format_missing_file(tmp_path):
    result = runner.invoke(cli.app, ["format", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


def test_sections_lists_detected_sections(tmp_path, sample_text):
    source = tmp_path / "report.txt"
    source.write_text(sample_text, encoding="utf-8")
    result = runner.invoke(cli.app, ["sections", str(source)])
    assert result.exit_code == 0
    assert "1. Title" in result.output
    assert "4. Main Body" in result.output


def test_generate_uses_fallback_flag(tmp_path, monkeypatch):
    class StubGenerator:
        def __init__(self, model_name, host, max_retries):
            self.model_name = model_name

        def generate(self, topic, pages=None, words=None):
            return GeneratedReport(text=f"Title: {topic}\nAbstract\nOffline.", used_fallback=True, model=self.model_name)

    monkeypatch.setattr(cli, "check_ollama", lambda host: False)
    monkeypatch.setattr(cli, "ReportGenerator", StubGenerator)
    output = tmp_path / "bees.pdf"

    result = runner.invoke(cli.app, ["generate", "bees", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "fallback content" in result.output
    assert output.exists()


def test_health_reports_unreachable_server(monkeypatch):
    monkeypatch.setattr(cli, "is_ollama_running", lambda host: False)
    result = runner.invoke(cli.app, ["health"])
    assert result.exit_code == 1
    assert "ok: False" in result.output
