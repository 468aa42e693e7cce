"""Tests for the command-line interface."""

import json
import logging

import pytest

from resume_pdf import __version__
from resume_pdf.cli import create_parser, main
from resume_pdf.utils.logger import level_for_verbosity


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, temp_dir):
    for name in ["RESUME_PDF_INPUT", "RESUME_PDF_OUTPUT", "RESUME_PDF_LOCALE", "OPENAI_API_KEY"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(temp_dir)


@pytest.fixture
def resume_file(temp_dir, scenario_record):
    path = temp_dir / "resume.json"
    path.write_text(json.dumps(scenario_record, ensure_ascii=False), encoding="utf-8")
    return path


class TestParser:
    def test_build_defaults(self):
        args = create_parser().parse_args(["build"])
        assert str(args.input).endswith("resume.json")
        assert str(args.output) == "resume.pdf"
        assert args.locale == "zh"

    def test_build_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("RESUME_PDF_OUTPUT", "cv.pdf")
        monkeypatch.setenv("RESUME_PDF_LOCALE", "en")
        args = create_parser().parse_args(["build"])
        assert str(args.output) == "cv.pdf"
        assert args.locale == "en"

    def test_unknown_locale_is_rejected(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["build", "--locale", "fr"])

    def test_verbosity_levels(self):
        assert level_for_verbosity(0) == logging.WARNING
        assert level_for_verbosity(1) == logging.INFO
        assert level_for_verbosity(2) == logging.DEBUG


class TestBuildCommand:
    """``resume-pdf build``."""

    def test_writes_pdf(self, resume_file, temp_dir):
        output = temp_dir / "out" / "resume.pdf"
        assert main(["build", str(resume_file), str(output)]) == 0
        assert output.read_bytes().startswith(b"%PDF-1.4\n")

    def test_english_locale(self, resume_file, temp_dir):
        output = temp_dir / "resume.en.pdf"
        assert main(["build", str(resume_file), str(output), "--locale", "en"]) == 0
        assert output.exists()

    def test_default_paths(self, resume_file, temp_dir):
        (temp_dir / "data").mkdir()
        resume_file.rename(temp_dir / "data" / "resume.json")

        assert main(["build"]) == 0
        assert (temp_dir / "resume.pdf").exists()

    def test_missing_input(self, temp_dir, capsys):
        assert main(["build", str(temp_dir / "missing.json"), str(temp_dir / "x.pdf")]) == 1
        assert "not found" in capsys.readouterr().err
        assert not (temp_dir / "x.pdf").exists()

    def test_unknown_locale_from_environment(self, resume_file, temp_dir, monkeypatch, capsys):
        monkeypatch.setenv("RESUME_PDF_LOCALE", "fr")
        output = temp_dir / "resume.pdf"

        assert main(["build", str(resume_file), str(output)]) == 1
        assert "Unknown locale" in capsys.readouterr().err
        assert not output.exists()


class TestImagesCommand:
    """``resume-pdf images``."""

    def test_dry_run_needs_no_key(self, temp_dir):
        prompts = temp_dir / "prompts.md"
        prompts.write_text("### 1) `a.png`\n\n**提示词：**\nA prompt.\n", encoding="utf-8")

        assert main(["images", "--input", str(prompts), "--out", str(temp_dir / "out"), "--dry-run"]) == 0
        assert not (temp_dir / "out").exists()

    def test_missing_api_key(self, temp_dir, capsys):
        prompts = temp_dir / "prompts.md"
        prompts.write_text("### 1) `a.png`\n\n**提示词：**\nA prompt.\n", encoding="utf-8")

        assert main(["images", "--input", str(prompts), "--out", str(temp_dir / "out")]) == 1
        assert "OPENAI_API_KEY" in capsys.readouterr().err

    def test_invalid_size(self, temp_dir):
        assert main(["images", "--input", str(temp_dir / "p.md"), "--size", "big", "--dry-run"]) == 1


class TestMisc:
    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "resume-pdf" in capsys.readouterr().out
