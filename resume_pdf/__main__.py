"""
Entry point for running resume-pdf as a module.

Usage:
    python -m resume_pdf build data/resume.json resume.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
