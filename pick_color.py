"""Command-line entry point for the chromaticity picker.

    python pick_color.py "#ff6464" --space P3
    python pick_color.py --xy 0.3127 0.3290 --luminance 0.8 --diagram out.png

For library use, import from the chromaticity_picker package:

    from chromaticity_picker import derive_selection, select_chromaticity
"""
from __future__ import annotations

import sys

from chromaticity_picker import main

if __name__ == "__main__":
    sys.exit(main(sys.argv))
