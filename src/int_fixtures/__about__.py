# int_fixtures/__about__.py

APP_NAME        = "write-ints"
APP_TITLE       = "Integer ⇆ Hex Byte Fixture Generator"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT",
    "about_text",
]

def about_text() -> str:
    return (
        f"{APP_NAME} {__version__}\n"
        f"{APP_TITLE}\n"
        f"{COPYRIGHT}"
    )
