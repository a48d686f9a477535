import re
from collections.abc import Sequence

from colorama import Fore, Style
from pydantic import BaseModel, ConfigDict, Field

_PLACEHOLDER = re.compile(r"\{(\d+)\}")

TERMINAL_COLORS: dict[str, str] = {
    "0": Fore.BLACK,
    "1": Fore.RED,
    "2": Fore.GREEN,
    "3": Fore.YELLOW,
    "4": Fore.BLUE,
    "5": Fore.MAGENTA,
    "6": Fore.CYAN,
    "7": Fore.WHITE,
    "8": Fore.LIGHTBLACK_EX,
    "9": Fore.LIGHTRED_EX,
    "10": Fore.LIGHTGREEN_EX,
    "11": Fore.LIGHTYELLOW_EX,
    "12": Fore.LIGHTBLUE_EX,
    "13": Fore.LIGHTMAGENTA_EX,
    "14": Fore.LIGHTCYAN_EX,
    "15": Fore.LIGHTWHITE_EX,
}


class LogoBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...]
    width: int = Field(ge=0)


def resolve_colors(defaults: Sequence[str], overrides: Sequence[str]) -> tuple[str, ...]:
    """Replace default colors index by index with valid terminal color numbers ("0"-"15")."""
    colors: list[str] = []
    for index, default in enumerate(defaults):
        override = overrides[index] if index < len(overrides) else None
        colors.append(TERMINAL_COLORS.get(override.strip(), default) if override else default)
    return tuple(colors)


def visible_text(art_line: str) -> str:
    return _PLACEHOLDER.sub("", art_line)


def build_logo(art: str, colors: Sequence[str], bold: bool = False) -> LogoBlock:
    art_lines = art.splitlines()
    width = max((len(visible_text(line)) for line in art_lines), default=0)
    weight = Style.BRIGHT if bold else ""

    lines: list[str] = []
    for art_line in art_lines:
        pieces: list[str] = []
        position = 0
        for match in _PLACEHOLDER.finditer(art_line):
            pieces.append(art_line[position:match.start()])
            pieces.append(_color_at(colors, int(match.group(1))) + weight)
            position = match.end()
        pieces.append(art_line[position:])
        padding = " " * (width - len(visible_text(art_line)))
        lines.append("".join(pieces) + Style.RESET_ALL + padding)

    return LogoBlock(lines=tuple(lines), width=width)


def _color_at(colors: Sequence[str], index: int) -> str:
    if not colors:
        return Fore.WHITE
    return colors[min(index, len(colors) - 1)]
