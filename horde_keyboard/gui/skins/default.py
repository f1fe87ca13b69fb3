"""
Default Skin - Dark Terminal

Near-black surfaces, grey tiles, white motes, yellow press rings.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE
    # ==========================================================================

    # Backgrounds (darkest to lightest)
    'bg_darkest': '#000000',
    'bg_dark': '#0a0a0a',
    'bg_mid': '#1a1a1a',
    'bg_highlight': '#333333',

    # Borders
    'border_dark': '#333333',
    'border_bright': '#666666',

    # Text (dimmest to brightest)
    'text_dim': '#666666',
    'text_mid': '#999999',
    'text_bright': '#d0d0d0',
    'text_white': '#ffffff',

    # ==========================================================================
    # HIVE TILES
    # ==========================================================================

    'tile_fill': '#1a1a1a',
    'tile_stroke': '#333333',
    'tile_text': '#666666',
    'tile_seeded_fill': '#2a2a00',
    'tile_seeded_stroke': '#666600',
    'tile_seeded_text': '#ffff99',
    'tile_active_fill': '#333333',
    'tile_active_stroke': '#666666',
    'tile_active_text': '#ffffff',
    'selection_path': '#666666',

    # ==========================================================================
    # HORDE
    # ==========================================================================

    'mote': '#ffffff',
    'trail': '#646464',
    'press_ring': '#ffff00',

    # ==========================================================================
    # TYPOGRAPHY
    # ==========================================================================

    'font_family': 'Courier New',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',
    'font_size_tile': 14,
    'font_size_output': 13,
    'font_size_status': 10,
}
