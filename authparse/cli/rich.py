from rich.console import Console
from rich.highlighter import ReprHighlighter
from rich.theme import Theme


class AuthparseHighlighter(ReprHighlighter):
    schemes = ("Basic", "Signature", "anonymous")
    highlights = ReprHighlighter.highlights + [
        rf"(?P<authparse_scheme>\b(?:{'|'.join(schemes)})\b)"
    ]


def get_console(stderr: bool = False) -> Console:
    return Console(
        stderr=stderr,
        highlighter=AuthparseHighlighter(),
        theme=Theme({"repr.authparse_scheme": "bold light_salmon3"}),
    )
