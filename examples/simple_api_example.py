#!/usr/bin/env python3
"""
Example use of the high-level API.

Renders the sample résumé in both locales and prints the layout summary.
"""

from pathlib import Path

from resume_pdf import EN, ZH, LayoutEngine, load_resume, render_resume_pdf


def main():
    """Render data/resume.json to output/."""
    record = load_resume("data/resume.json")

    # 1. Layout only
    pages = LayoutEngine().build_layout(record)
    print(f"Pages: {len(pages)}")
    print(f"Lines: {sum(len(page.lines) for page in pages)}")

    # 2. PDF in Chinese and English
    for locale in (ZH, EN):
        pdf_path = render_resume_pdf(record, f"output/resume.{locale.code}.pdf", locale=locale)
        print(f"PDF written: {pdf_path}")


if __name__ == "__main__":
    Path("output").mkdir(exist_ok=True)

    main()
