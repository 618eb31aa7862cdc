"""Constants and configuration for fa2png."""

# Font family registered with the font registry and the bundled file name
FONT_FAMILY = "FontAwesome"
FONT_FILENAME = "FontAwesome.otf"

# Environment variable pointing at a font file (overrides the bundled font)
FONT_PATH_ENV = "FA2PNG_FONT_PATH"

# Sized FreeTypeFont objects kept per registry (least recently used are dropped)
FONT_CACHE_SIZE = 32

# Taken from FontAwesome's fixed-width icon CSS (1.28571429em)
FONT_ASPECT_RATIO = 1.28571429

# Pixels with alpha above this value count as glyph content when trimming
ALPHA_THRESHOLD = 0

# Drawn with the default font when the icon font cannot be registered
PLACEHOLDER_CHAR = "?"

# Rendering defaults
DEFAULT_DIMENSION = 64
DEFAULT_TEXT_COLOR = "black"
TRANSPARENT = (0, 0, 0, 0)

# CSS class prefix used by icon codes ("fa-github")
CSS_PREFIX = "fa-"

# Image modes that carry an alpha band
ALPHA_MODES = ("RGBA", "LA")
