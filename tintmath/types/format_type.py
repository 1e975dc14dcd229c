# No dependencies
from enum import Enum


class RenderCondition(str, Enum):
    """When the alpha channel is written out by the hex formatter."""
    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


BYTE_MAX = 255
HUE_360 = 360
PERCENT_MAX = 100
