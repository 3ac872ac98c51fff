# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Colours used when rendering errors and build failures."""


class OneColors:
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
