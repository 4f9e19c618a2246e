from .lookup_controller import (
    get_categories,
    get_colors,
    get_materials,
    get_occasions,
    get_patterns,
    get_seasons,
    get_size_systems,
    get_size_values,
    get_subcategories,
)
