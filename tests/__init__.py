"""
Test suite for resume-pdf.

Unit tests are grouped by component (engine/, compiler/, imagegen/);
end-to-end and CLI tests live at the top level.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
