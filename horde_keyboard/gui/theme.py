"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in horde_keyboard/gui/skins/
"""
from .skins import active as skin


def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)


FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'tile': get('font_size_tile'),
    'output': get('font_size_output'),
    'status': get('font_size_status'),
}

COLORS = {
    # UI elements
    'background_dark': get('bg_dark'),
    'background_darkest': get('bg_darkest'),
    'border': get('border_dark'),
    'text_bright': get('text_bright'),
    'text_dim': get('text_dim'),

    # Hive
    'tile_fill': get('tile_fill'),
    'tile_stroke': get('tile_stroke'),
    'tile_text': get('tile_text'),
    'tile_seeded_fill': get('tile_seeded_fill'),
    'tile_seeded_stroke': get('tile_seeded_stroke'),
    'tile_seeded_text': get('tile_seeded_text'),
    'tile_active_fill': get('tile_active_fill'),
    'tile_active_stroke': get('tile_active_stroke'),
    'tile_active_text': get('tile_active_text'),
    'selection_path': get('selection_path'),

    # Horde
    'mote': get('mote'),
    'trail': get('trail'),
    'press_ring': get('press_ring'),
}


def tile_colors(is_active, is_seeded):
    """(fill, stroke, text) for a hive tile. Active wins over seeded."""
    if is_active:
        return COLORS['tile_active_fill'], COLORS['tile_active_stroke'], COLORS['tile_active_text']
    if is_seeded:
        return COLORS['tile_seeded_fill'], COLORS['tile_seeded_stroke'], COLORS['tile_seeded_text']
    return COLORS['tile_fill'], COLORS['tile_stroke'], COLORS['tile_text']
