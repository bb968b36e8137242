from .config import RTL_LANGUAGES, OutlineConfig
from .pipeline import OutlineResult, generate_outline
from .render import (
    mount,
    new_result_container,
    render_error,
    render_loading,
    render_page,
    render_toc_list,
    text_direction,
)

__all__ = [
    "generate_outline",
    "OutlineConfig",
    "OutlineResult",
    "RTL_LANGUAGES",
    "mount",
    "new_result_container",
    "render_error",
    "render_loading",
    "render_page",
    "render_toc_list",
    "text_direction",
]
