from .logo import LogoBlock, build_logo
from .renderer import ImageBackend, SummaryRenderer, interleave

__all__ = ["ImageBackend", "LogoBlock", "SummaryRenderer", "build_logo", "interleave"]
