"""Fixed geometry and tuning constants."""

# Longest side a source image may have before entering the pipeline
MAX_SOURCE_DIMENSION = 2000

# Settings changes closer together than this coalesce into one run
DEBOUNCE_MS = 100

# A4 at 300 DPI, ~10mm margin
A4_WIDTH_PX = 2480
A4_HEIGHT_PX = 3508
A4_MARGIN_PX = 118

JPEG_QUALITY = 95

COLORING_BOOK_THRESHOLD = 180
BW_PRINT_THRESHOLD = 128
