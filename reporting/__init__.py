from .config import DriverConfig, EXIT_OK, EXIT_MALFORMED_INPUT, EXIT_SHAPE_ERROR
from .text import format_frame, format_report
from .requests import MalformedInput, ScaleRequest, read_scale_requests
